"""
외부 협력자 인터페이스

가격 엔진이 읽기만 하는 외부 소스들의 계약. 전송 방식이나 직렬화 형식과 무관하다.
"""

from typing import Optional, Protocol, Tuple

from .types import PairRecord


class QuoteFeedSource(Protocol):
    """외부 시세 피드

    가격은 0이나 음수일 수 있다. 호출할 때마다 최신 값을 읽고 캐시하지 않는다.
    """
    address: str

    def decimals(self) -> int: ...

    def latest_price(self) -> Tuple[int, int]:
        """(가격, 타임스탬프)"""
        ...


class TokenSource(Protocol):
    address: str

    def decimals(self) -> int: ...

    def balance_of(self, holder: str) -> int: ...


class VaultSource(Protocol):
    """base / limit 두 범위를 운용하는 유동성 볼트"""
    address: str

    def base_lower_tick(self) -> int: ...

    def base_upper_tick(self) -> int: ...

    def limit_lower_tick(self) -> int: ...

    def limit_upper_tick(self) -> int: ...

    def pool_address(self) -> str: ...

    def total_share_supply(self) -> int: ...


class PoolPositionSource(Protocol):
    address: str

    def position_at(self, owner: str, tick_lower: int, tick_upper: int) -> Tuple[int, int, int]:
        """(liquidity, tokens_owed0, tokens_owed1)"""
        ...


class PairRecordSource(Protocol):
    """등록 저장소의 읽기 전용 면"""

    def record_for(self, pair: str) -> Optional[PairRecord]: ...
