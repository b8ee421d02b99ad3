"""
Pair Registry 테스트

일회성 초기화, 2단계 관리자 교체, 재진입 래치를 검증합니다.
"""

import pytest

from ..data.registry import PairRegistry
from ..errors import AlreadyInitialized, ReentrancyError, RegistryError, Unauthorized
from .fakes import FakeFeed, FakePool, FakeToken, FakeVault

ADMIN = "0xAdmin"


def _components(vault_address="0xVault", pool_address="0xPool"):
    vault = FakeVault(vault_address, pool_address, base=(-60, 60), limit=(60, 120), total_supply=10**18)
    pool = FakePool(pool_address)
    token0 = FakeToken("0xToken0", 18)
    token1 = FakeToken("0xToken1", 6)
    feed0 = FakeFeed("0xFeed0", 10**8)
    feed1 = FakeFeed("0xFeed1", 10**8)
    return vault, pool, token0, token1, feed0, feed1


class ReentrantToken(FakeToken):
    """decimals() 호출 중 저장소 변경을 시도하는 토큰"""

    def __init__(self, address, registry, action):
        super().__init__(address, 18)
        self.registry = registry
        self.action = action

    def decimals(self) -> int:
        self.action(self.registry)
        return super().decimals()


class TestInitializePair:
    """initialize_pair 테스트"""

    def test_creates_record(self):
        registry = PairRegistry(ADMIN)
        vault, pool, token0, token1, feed0, feed1 = _components()
        record = registry.initialize_pair(ADMIN, vault, pool, token0, token1, feed0, feed1)

        assert record.initialized
        assert record.pair_id == 1
        assert record.decimals0 == 18
        assert record.decimals1 == 6
        assert record.key == "0xvault"
        assert registry.record_for("0xVAULT") is record
        assert "0xvault" in registry
        assert len(registry) == 1

    def test_sequential_ids(self):
        registry = PairRegistry(ADMIN)
        first = registry.initialize_pair(ADMIN, *_components("0xVaultA", "0xPoolA"))
        second = registry.initialize_pair(ADMIN, *_components("0xVaultB", "0xPoolB"))
        assert (first.pair_id, second.pair_id) == (1, 2)

    def test_unknown_pair(self):
        assert PairRegistry(ADMIN).record_for("0xUnknown") is None

    def test_duplicate_rejected(self):
        """이미 초기화된 볼트는 재초기화 불가"""
        registry = PairRegistry(ADMIN)
        components = _components()
        original = registry.initialize_pair(ADMIN, *components)
        with pytest.raises(AlreadyInitialized):
            registry.initialize_pair(ADMIN, *components)
        assert registry.record_for("0xVault") is original
        assert len(registry) == 1

    def test_non_admin_rejected(self):
        registry = PairRegistry(ADMIN)
        with pytest.raises(Unauthorized):
            registry.initialize_pair("0xMallory", *_components())
        assert len(registry) == 0

    def test_pool_mismatch_rejected(self):
        registry = PairRegistry(ADMIN)
        vault, _, token0, token1, feed0, feed1 = _components()
        with pytest.raises(RegistryError):
            registry.initialize_pair(ADMIN, vault, FakePool("0xOtherPool"), token0, token1, feed0, feed1)

    def test_same_tokens_rejected(self):
        registry = PairRegistry(ADMIN)
        vault, pool, token0, _, feed0, feed1 = _components()
        with pytest.raises(RegistryError):
            registry.initialize_pair(ADMIN, vault, pool, token0, token0, feed0, feed1)

    def test_record_is_immutable(self):
        registry = PairRegistry(ADMIN)
        record = registry.initialize_pair(ADMIN, *_components())
        with pytest.raises(AttributeError):
            record.decimals0 = 6


class TestAdminHandover:
    """propose_admin → accept_admin"""

    def test_two_phase_handover(self):
        registry = PairRegistry(ADMIN)
        registry.propose_admin(ADMIN, "0xNewAdmin")
        # 수락 전에는 기존 관리자 유지
        assert registry.admin == "0xadmin"
        assert registry.pending_admin == "0xnewadmin"

        registry.accept_admin("0xNewAdmin")
        assert registry.admin == "0xnewadmin"
        assert registry.pending_admin is None

        with pytest.raises(Unauthorized):
            registry.initialize_pair(ADMIN, *_components())
        registry.initialize_pair("0xNewAdmin", *_components())

    def test_only_admin_can_propose(self):
        registry = PairRegistry(ADMIN)
        with pytest.raises(Unauthorized):
            registry.propose_admin("0xMallory", "0xMallory")

    def test_only_pending_admin_can_accept(self):
        registry = PairRegistry(ADMIN)
        registry.propose_admin(ADMIN, "0xNewAdmin")
        with pytest.raises(Unauthorized):
            registry.accept_admin("0xMallory")

    def test_accept_without_proposal(self):
        with pytest.raises(Unauthorized):
            PairRegistry(ADMIN).accept_admin(ADMIN)

    def test_cancel_proposal(self):
        registry = PairRegistry(ADMIN)
        registry.propose_admin(ADMIN, "0xNewAdmin")
        registry.propose_admin(ADMIN, None)
        with pytest.raises(Unauthorized):
            registry.accept_admin("0xNewAdmin")


class TestReentrancy:
    """변경 작업 중 재진입 차단"""

    def test_nested_initialize_rejected(self):
        registry = PairRegistry(ADMIN)
        vault, pool, _, token1, feed0, feed1 = _components()
        nested = _components("0xVaultB", "0xPoolB")
        token0 = ReentrantToken("0xEvil", registry, lambda r: r.initialize_pair(ADMIN, *nested))

        with pytest.raises(ReentrancyError):
            registry.initialize_pair(ADMIN, vault, pool, token0, token1, feed0, feed1)
        assert len(registry) == 0

    def test_nested_admin_change_rejected(self):
        registry = PairRegistry(ADMIN)
        vault, pool, _, token1, feed0, feed1 = _components()
        token0 = ReentrantToken("0xEvil", registry, lambda r: r.propose_admin(ADMIN, "0xMallory"))

        with pytest.raises(ReentrancyError):
            registry.initialize_pair(ADMIN, vault, pool, token0, token1, feed0, feed1)
        assert registry.pending_admin is None

    def test_latch_released_after_failure(self):
        """실패 후에도 래치가 해제되어 다음 호출 가능"""
        registry = PairRegistry(ADMIN)
        with pytest.raises(Unauthorized):
            registry.initialize_pair("0xMallory", *_components())
        registry.initialize_pair(ADMIN, *_components())
        assert len(registry) == 1

    def test_reads_allowed_during_mutation(self):
        """읽기는 래치와 무관"""
        registry = PairRegistry(ADMIN)
        first = registry.initialize_pair(ADMIN, *_components("0xVaultA", "0xPoolA"))
        seen = []
        vault, pool, _, token1, feed0, feed1 = _components("0xVaultB", "0xPoolB")
        token0 = ReentrantToken("0xReader", registry, lambda r: seen.append(r.record_for("0xVaultA")))

        registry.initialize_pair(ADMIN, vault, pool, token0, token1, feed0, feed1)
        assert seen == [first]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
