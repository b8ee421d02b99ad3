"""
Decimal Normalization - 원시 값 → 단위 스케일(WAD)

토큰 잔고나 피드 가격을 소스 고유의 소수점 자릿수에서 18자리로 변환한다.
소스별 배율 10^(18 - decimals)는 처음 사용할 때 한 번 계산해 캐시하고 이후 바꾸지 않는다.
"""

from typing import Dict

from loguru import logger

from ..constants import MAX_DECIMALS
from ..data.types import Normalized
from ..errors import DecimalOverflow, DomainError


class ScaleRegistry:
    """소스별 배율 캐시

    프로세스 전역 인스턴스(default_scales)를 기본으로 쓰되,
    FairValueOracle에 주입할 수 있고 테스트에서는 reset()으로 비운다.

    사용법:
        scales = ScaleRegistry()
        price = scales.normalize(feed, raw_price)
    """

    def __init__(self):
        self._scales: Dict[str, int] = {}

    def compute_scale(self, source) -> int:
        """소스의 배율 조회 (없으면 계산 후 캐시)

        Args:
            source: decimals()와 address를 가진 토큰 또는 피드

        Returns:
            10^(18 - decimals)

        Raises:
            DecimalOverflow: decimals > 18
            DomainError: decimals < 0
        """
        key = source.address.lower()
        scale = self._scales.get(key)
        if scale is not None:
            return scale

        decimals = source.decimals()
        if decimals > MAX_DECIMALS:
            raise DecimalOverflow(
                f"소수점 자릿수가 {MAX_DECIMALS}을 넘습니다: {source.address} ({decimals})"
            )
        if decimals < 0:
            raise DomainError(f"소수점 자릿수는 음수일 수 없습니다: {source.address} ({decimals})")

        scale = 10 ** (MAX_DECIMALS - decimals)
        self._scales[key] = scale
        logger.debug(f"Cached scale for {key}: decimals={decimals} scale={scale}")
        return scale

    def normalize(self, source, raw_value: int) -> Normalized:
        """원시 값을 WAD로 정규화

        Raises:
            DomainError: raw_value가 음수인 경우
        """
        if raw_value < 0:
            raise DomainError(f"정규화할 값이 음수입니다: {source.address} ({raw_value})")
        return Normalized(raw_value * self.compute_scale(source))

    def reset(self) -> None:
        """캐시 비우기 (테스트 전용)"""
        self._scales.clear()

    def __len__(self) -> int:
        return len(self._scales)

    def __contains__(self, address: str) -> bool:
        return address.lower() in self._scales


# 프로세스 전역 캐시
default_scales = ScaleRegistry()
