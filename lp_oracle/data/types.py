"""
LP Oracle 데이터 타입 정의

가격 계산 경로를 흐르는 값들의 구조를 dataclass / NamedTuple로 정의.
모든 숫자 필드는 온체인 정밀도를 위해 int 타입 사용.
"""

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, TYPE_CHECKING

if TYPE_CHECKING:
    from .sources import QuoteFeedSource, TokenSource, VaultSource, PoolPositionSource


@dataclass(frozen=True)
class Normalized:
    """단위 스케일(WAD, 소수점 18자리)로 정규화된 값

    ScaleRegistry.normalize()만 생성한다. 정규화된 값끼리 결합하는 함수는
    Normalized만 받으므로 원시 값과 스케일이 섞이지 않는다.
    """
    value: int

    def __post_init__(self):
        if not isinstance(self.value, int) or isinstance(self.value, bool) or self.value < 0:
            raise ValueError(f"정규화 값은 0 이상의 정수여야 합니다: {self.value!r}")


def require_normalized(value: "Normalized", name: str) -> int:
    """Normalized 인자를 검사하고 정수 값을 꺼낸다"""
    if not isinstance(value, Normalized):
        raise TypeError(f"{name}은(는) Normalized여야 합니다 (받은 값: {type(value).__name__})")
    return value.value


@dataclass(frozen=True)
class PairRecord:
    """풀 하나에 대한 가격 설정

    - vault: 유동성 포지션을 보유한 볼트 (지분 발행자)
    - pool: 볼트가 유동성을 공급하는 AMM 풀
    - token0 / token1: 풀 토큰과 각 소수점 자릿수
    - feed0 / feed1: 각 토큰의 USD 시세 피드
    """
    pair_id: int
    vault: "VaultSource"
    pool: "PoolPositionSource"
    token0: "TokenSource"
    token1: "TokenSource"
    decimals0: int
    decimals1: int
    feed0: "QuoteFeedSource"
    feed1: "QuoteFeedSource"
    initialized: bool = True

    @property
    def key(self) -> str:
        """등록 키 (볼트 주소, 소문자)"""
        return self.vault.address.lower()


class PositionRange(Enum):
    """볼트가 동시에 운용하는 두 유동성 범위"""
    BASE = "base"
    LIMIT = "limit"


class PositionAmounts(NamedTuple):
    """범위 하나의 평가 결과"""
    liquidity: int
    amount0: int  # 범위 내 token0 + 미수령 token0
    amount1: int  # 범위 내 token1 + 미수령 token1


class Reserves(NamedTuple):
    """볼트 총 준비금 (토큰 최소 단위)"""
    amount0: int
    amount1: int


class LpQuote(NamedTuple):
    """LP 지분 가격과 기준 시각"""
    price: int  # 표시 토큰 소수점 자릿수 기준
    updated_at: int  # 사용된 피드 중 가장 오래된 타임스탬프


class PriceSnapshot(NamedTuple):
    """합성 가격 스냅샷"""
    sqrt_price_x96: int
    tick: int
    price0: int  # token0 USD 가격 (WAD)
    price1: int  # token1 USD 가격 (WAD)
