"""
공통 픽스처

표준 시나리오: WETH(18) / DAI(18) 볼트
- 피드: ETH = 2000 * 10^8, DAI = 1 * 10^8, USDC(표시 토큰, 6자리) = 1 * 10^8
- base 범위 [73980, 78060], L = 10^21, 미수령 (10^15, 2 * 10^18)
- limit 범위 [76020, 77040], L = 5 * 10^19 (현재가 위 → token0만)
- 유휴 잔고 0.3 WETH, 500 DAI, 지분 1000 * 10^18
"""

from types import SimpleNamespace

import pytest

from ..data.registry import PairRegistry
from ..oracle.fair_value import FairValueOracle
from ..oracle.normalization import ScaleRegistry
from .fakes import FakeFeed, FakePool, FakeToken, FakeVault

ADMIN = "0xAdmin"
VAULT = "0xVault"
POOL = "0xPool"

BASE_RANGE = (73980, 78060)
LIMIT_RANGE = (76020, 77040)


@pytest.fixture
def scales():
    return ScaleRegistry()


@pytest.fixture
def scenario(scales):
    weth = FakeToken("0xWeth", 18, balances={VAULT: 3 * 10**17})
    dai = FakeToken("0xDai", 18, balances={VAULT: 500 * 10**18})
    feed_eth = FakeFeed("0xFeedEth", 2000 * 10**8, updated_at=1_700_000_000)
    feed_dai = FakeFeed("0xFeedDai", 1 * 10**8, updated_at=1_700_000_100)
    feed_usdc = FakeFeed("0xFeedUsdc", 1 * 10**8, updated_at=1_699_999_900)

    pool = FakePool(POOL)
    pool.set_position(VAULT, *BASE_RANGE, liquidity=10**21, owed0=10**15, owed1=2 * 10**18)
    pool.set_position(VAULT, *LIMIT_RANGE, liquidity=5 * 10**19)
    vault = FakeVault(VAULT, POOL, base=BASE_RANGE, limit=LIMIT_RANGE, total_supply=1000 * 10**18)

    registry = PairRegistry(admin=ADMIN)
    record = registry.initialize_pair(ADMIN, vault, pool, weth, dai, feed_eth, feed_dai)

    oracle = FairValueOracle(
        registry,
        feed_usdc,
        denomination_decimals=6,
        scales=scales,
        reject_non_positive=False,
    )
    return SimpleNamespace(
        registry=registry,
        record=record,
        oracle=oracle,
        vault=vault,
        pool=pool,
        token0=weth,
        token1=dai,
        feed0=feed_eth,
        feed1=feed_dai,
        denomination_feed=feed_usdc,
    )
