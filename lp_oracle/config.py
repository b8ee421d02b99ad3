"""
Configuration settings for the LP oracle

Loads environment variables and provides engine configuration.
"""
import os
import sys
from typing import Optional

from dotenv import load_dotenv
from loguru import logger

# Load environment variables from .env file
load_dotenv()


def _env_bool(name: str, default: str = "False") -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


class Settings:
    """Engine settings"""

    def __init__(self):
        # Feed sanity check: reject price <= 0 before any arithmetic
        self.REJECT_NON_POSITIVE_PRICES: bool = _env_bool("LP_ORACLE_REJECT_NON_POSITIVE_PRICES")

        # Output denomination token decimals (e.g. USDC = 6)
        self.DENOMINATION_DECIMALS: int = int(os.getenv("LP_ORACLE_DENOMINATION_DECIMALS", 6))

        # Logging
        self.LOG_LEVEL: str = os.getenv("LP_ORACLE_LOG_LEVEL", "WARNING").upper()


# Create global settings instance
settings = Settings()


def configure_logging(level: Optional[str] = None) -> int:
    """Replace loguru's default sink with a stderr sink at the configured level.

    Returns the id of the new sink.
    """
    logger.remove()
    return logger.add(sys.stderr, level=(level or settings.LOG_LEVEL).upper())
