"""
LP Oracle

집중화된 유동성 AMM 볼트 지분의 조작 저항 USD 가격 엔진.
풀 현재가 대신 두 외부 시세로 합성 sqrtPriceX96을 만들어 포지션을 평가한다.
"""

__version__ = "0.1.0"

from .constants import WAD, Q96, MIN_TICK, MAX_TICK, SECONDS_PER_YEAR
from .errors import (
    LpOracleError,
    PairNotInitialized,
    DomainError,
    FixedPointOverflow,
    DivisionByZero,
    DecimalOverflow,
    InvalidPrice,
)
from .data import PairRegistry, PositionRange
from .oracle import FairValueOracle, LpShareFeed, ScaleRegistry
