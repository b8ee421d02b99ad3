"""
테스트용 인메모리 협력자

시세 피드, 토큰, 볼트, 풀 포지션 소스를 단순한 속성으로 흉내낸다.
"""

from typing import Dict, Optional, Tuple


class FakeFeed:
    """고정 값을 반환하는 시세 피드"""

    def __init__(self, address: str, price: int, decimals: int = 8, updated_at: int = 1_700_000_000):
        self.address = address
        self.price = price
        self.updated_at = updated_at
        self._decimals = decimals
        self.reads = 0
        self.decimals_calls = 0

    def decimals(self) -> int:
        self.decimals_calls += 1
        return self._decimals

    def latest_price(self) -> Tuple[int, int]:
        self.reads += 1
        return self.price, self.updated_at


class FakeToken:
    def __init__(self, address: str, decimals: int = 18, balances: Optional[Dict[str, int]] = None):
        self.address = address
        self._decimals = decimals
        self.balances = {k.lower(): v for k, v in (balances or {}).items()}

    def decimals(self) -> int:
        return self._decimals

    def balance_of(self, holder: str) -> int:
        return self.balances.get(holder.lower(), 0)


class FakeVault:
    def __init__(
        self,
        address: str,
        pool_address: str,
        base: Tuple[int, int],
        limit: Tuple[int, int],
        total_supply: int
    ):
        self.address = address
        self._pool_address = pool_address
        self.base = base
        self.limit = limit
        self.total_supply = total_supply

    def base_lower_tick(self) -> int:
        return self.base[0]

    def base_upper_tick(self) -> int:
        return self.base[1]

    def limit_lower_tick(self) -> int:
        return self.limit[0]

    def limit_upper_tick(self) -> int:
        return self.limit[1]

    def pool_address(self) -> str:
        return self._pool_address

    def total_share_supply(self) -> int:
        return self.total_supply


class FakePool:
    """(owner, tick_lower, tick_upper) → (liquidity, tokens_owed0, tokens_owed1)"""

    def __init__(self, address: str):
        self.address = address
        self.positions: Dict[Tuple[str, int, int], Tuple[int, int, int]] = {}

    def set_position(self, owner: str, tick_lower: int, tick_upper: int,
                     liquidity: int, owed0: int = 0, owed1: int = 0) -> None:
        self.positions[(owner.lower(), tick_lower, tick_upper)] = (liquidity, owed0, owed1)

    def position_at(self, owner: str, tick_lower: int, tick_upper: int) -> Tuple[int, int, int]:
        return self.positions.get((owner.lower(), tick_lower, tick_upper), (0, 0, 0))
