"""
Data layer for LP Oracle

가격 경로의 데이터 타입, 외부 협력자 인터페이스, 페어 등록 저장소
"""

from .types import (
    Normalized,
    PairRecord,
    PositionRange,
    PositionAmounts,
    Reserves,
    LpQuote,
    PriceSnapshot,
)
from .sources import (
    QuoteFeedSource,
    TokenSource,
    VaultSource,
    PoolPositionSource,
    PairRecordSource,
)
from .registry import PairRegistry
