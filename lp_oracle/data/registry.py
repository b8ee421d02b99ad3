"""
Pair Registry - 페어 등록 저장소

볼트별 가격 설정(PairRecord)을 보관하는 인메모리 저장소.
가격 엔진은 record_for()로 읽기만 하고, 변경은 모두 이 클래스를 거친다.

정책:
- 페어 초기화는 한 번만 가능하며 이후 변경할 수 없다 (유예 기간 없음)
- 관리자 교체는 2단계: propose_admin → accept_admin
- 변경 작업은 외부 소스(토큰 decimals, 볼트 pool_address)를 읽는 동안
  재진입 래치를 유지한다
"""

import functools
from typing import Dict, Optional

from loguru import logger

from .sources import QuoteFeedSource, TokenSource, VaultSource, PoolPositionSource
from .types import PairRecord
from ..errors import AlreadyInitialized, ReentrancyError, RegistryError, Unauthorized


def non_reentrant(method):
    """변경 메서드 실행 중 다른 변경 메서드 진입을 막는 래치"""
    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        if self._entered:
            raise ReentrancyError(f"{method.__name__}: 재진입이 감지되었습니다")
        self._entered = True
        try:
            return method(self, *args, **kwargs)
        finally:
            self._entered = False
    return wrapper


class PairRegistry:
    """페어 등록 저장소

    사용법:
        registry = PairRegistry(admin="0xadmin")
        record = registry.initialize_pair("0xadmin", vault, pool, token0, token1, feed0, feed1)
        registry.record_for(vault.address)
    """

    def __init__(self, admin: str):
        """
        Args:
            admin: 초기 관리자 주소
        """
        self.admin = admin.lower()
        self.pending_admin: Optional[str] = None
        self._records: Dict[str, PairRecord] = {}
        self._next_pair_id = 1
        self._entered = False

    def record_for(self, pair: str) -> Optional[PairRecord]:
        """페어 설정 조회

        Args:
            pair: 볼트 주소

        Returns:
            PairRecord 또는 None
        """
        return self._records.get(pair.lower())

    def _require_admin(self, caller: str) -> None:
        if caller.lower() != self.admin:
            raise Unauthorized(f"관리자만 호출할 수 있습니다: {caller}")

    @non_reentrant
    def initialize_pair(
        self,
        caller: str,
        vault: VaultSource,
        pool: PoolPositionSource,
        token0: TokenSource,
        token1: TokenSource,
        feed0: QuoteFeedSource,
        feed1: QuoteFeedSource
    ) -> PairRecord:
        """볼트를 가격 설정에 바인딩

        Args:
            caller: 호출자 주소 (관리자)
            vault: 유동성 볼트
            pool: 볼트가 사용하는 AMM 풀
            token0, token1: 풀 토큰
            feed0, feed1: 각 토큰의 USD 시세 피드

        Returns:
            새로 생성된 PairRecord

        Raises:
            Unauthorized: 관리자가 아닌 경우
            AlreadyInitialized: 이미 등록된 볼트
            RegistryError: 볼트의 풀 주소가 pool과 다르거나 token0 == token1
        """
        self._require_admin(caller)

        key = vault.address.lower()
        if key in self._records:
            raise AlreadyInitialized(f"이미 초기화된 페어입니다: {vault.address}")

        if vault.pool_address().lower() != pool.address.lower():
            raise RegistryError(
                f"볼트의 풀 주소가 일치하지 않습니다: {vault.pool_address()} != {pool.address}"
            )
        if token0.address.lower() == token1.address.lower():
            raise RegistryError(f"token0과 token1이 같습니다: {token0.address}")

        record = PairRecord(
            pair_id=self._next_pair_id,
            vault=vault,
            pool=pool,
            token0=token0,
            token1=token1,
            decimals0=token0.decimals(),
            decimals1=token1.decimals(),
            feed0=feed0,
            feed1=feed1,
        )
        self._records[key] = record
        self._next_pair_id += 1

        logger.info(f"Initialized pair {record.pair_id} for vault {key}")
        return record

    @non_reentrant
    def propose_admin(self, caller: str, new_admin: Optional[str]) -> None:
        """관리자 교체 제안 (None이면 제안 취소)"""
        self._require_admin(caller)
        self.pending_admin = new_admin.lower() if new_admin else None
        logger.info(f"Admin handover proposed: {self.admin} -> {self.pending_admin}")

    @non_reentrant
    def accept_admin(self, caller: str) -> None:
        """제안된 관리자가 교체를 수락"""
        if self.pending_admin is None or caller.lower() != self.pending_admin:
            raise Unauthorized(f"제안된 관리자만 수락할 수 있습니다: {caller}")
        previous = self.admin
        self.admin = self.pending_admin
        self.pending_admin = None
        logger.info(f"Admin handover accepted: {previous} -> {self.admin}")

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, pair: str) -> bool:
        return pair.lower() in self._records
