"""
Fair Value - LP 지분 공정가치

볼트의 base / limit 두 유동성 범위와 유휴 잔고를 합산해 총 준비금을 구하고,
외부 시세로 평가해 지분당 가격을 계산한다.

평가에 쓰이는 sqrtPriceX96은 매 호출마다 외부 시세에서 새로 도출한다.
풀의 현재가를 움직이는 공격은 이 값에 영향을 주지 못한다.

핵심 공식:
    price_usd_18 = (norm(reserve0) * price0 + norm(reserve1) * price1) / shareSupply
    price = price_usd_18 / denominationPrice / 10^(18 - denominationDecimals)
"""

from typing import Optional, Tuple

from loguru import logger

from ..config import settings
from ..constants import MAX_DECIMALS, WAD
from ..data.sources import PairRecordSource, QuoteFeedSource
from ..data.types import (
    LpQuote,
    Normalized,
    PairRecord,
    PositionAmounts,
    PositionRange,
    PriceSnapshot,
    Reserves,
)
from ..errors import DecimalOverflow, InvalidPrice, PairNotInitialized
from ..math.fixed_point import div, div_down
from ..math.liquidity_math import get_amounts_for_liquidity
from ..math.sqrt_price_math import derive_sqrt_price_x96
from ..math.tick_math import get_sqrt_ratio_at_tick, get_tick_at_sqrt_ratio
from .normalization import ScaleRegistry, default_scales


class FairValueOracle:
    """LP 지분 가격 오라클

    사용법:
        oracle = FairValueOracle(registry, usdc_feed, denomination_decimals=6)
        price = oracle.lp_token_price_usd(vault.address)
        reserves = oracle.get_total_reserves(vault.address)
    """

    def __init__(
        self,
        registry: PairRecordSource,
        denomination_feed: QuoteFeedSource,
        denomination_decimals: Optional[int] = None,
        scales: Optional[ScaleRegistry] = None,
        reject_non_positive: Optional[bool] = None
    ):
        """
        Args:
            registry: 페어 설정 저장소 (읽기 전용)
            denomination_feed: 표시 토큰의 USD 시세 피드
            denomination_decimals: 표시 토큰 소수점 자릿수. None이면 설정값
            scales: 배율 캐시. None이면 프로세스 전역 캐시
            reject_non_positive: 0 이하 피드 값 거부 여부. None이면 설정값

        Raises:
            DecimalOverflow: denomination_decimals > 18
        """
        if denomination_decimals is None:
            denomination_decimals = settings.DENOMINATION_DECIMALS
        if denomination_decimals > MAX_DECIMALS:
            raise DecimalOverflow(f"표시 토큰 소수점 자릿수가 {MAX_DECIMALS}을 넘습니다: {denomination_decimals}")

        self.registry = registry
        self.denomination_feed = denomination_feed
        self.denomination_decimals = denomination_decimals
        self.scales = scales if scales is not None else default_scales
        self.reject_non_positive = (
            settings.REJECT_NON_POSITIVE_PRICES if reject_non_positive is None else reject_non_positive
        )

    def record_for(self, pair: str) -> PairRecord:
        """페어 설정 조회

        Raises:
            PairNotInitialized: 등록되지 않은 페어
        """
        record = self.registry.record_for(pair)
        if record is None or not record.initialized:
            raise PairNotInitialized(f"초기화되지 않은 페어입니다: {pair}")
        return record

    def _read_feed(self, feed: QuoteFeedSource) -> Tuple[Normalized, int]:
        """피드 값을 읽어 정규화 → (가격, 타임스탬프)"""
        price, updated_at = feed.latest_price()
        if self.reject_non_positive and price <= 0:
            logger.warning(f"Rejected non-positive price from feed {feed.address}: {price}")
            raise InvalidPrice(f"피드 가격이 0 이하입니다: {feed.address} ({price})")
        return self.scales.normalize(feed, price), updated_at

    def _quote_prices(self, record: PairRecord) -> Tuple[Normalized, Normalized, int]:
        price0, updated0 = self._read_feed(record.feed0)
        price1, updated1 = self._read_feed(record.feed1)
        return price0, price1, min(updated0, updated1)

    def _sqrt_price(self, record: PairRecord, price0: Normalized, price1: Normalized) -> int:
        sqrt_price_x96 = derive_sqrt_price_x96(price0, record.decimals0, price1, record.decimals1)
        logger.debug(f"Pair {record.pair_id}: synthetic sqrtPriceX96={sqrt_price_x96}")
        return sqrt_price_x96

    def get_sqrt_price_x96(self, pair: str) -> int:
        """외부 시세로 도출한 합성 sqrtPriceX96"""
        record = self.record_for(pair)
        price0, price1, _ = self._quote_prices(record)
        return self._sqrt_price(record, price0, price1)

    def get_price_snapshot(self, pair: str) -> PriceSnapshot:
        """합성 가격과 해당 틱, 두 토큰의 USD 가격"""
        record = self.record_for(pair)
        price0, price1, _ = self._quote_prices(record)
        sqrt_price_x96 = self._sqrt_price(record, price0, price1)
        return PriceSnapshot(
            sqrt_price_x96=sqrt_price_x96,
            tick=get_tick_at_sqrt_ratio(sqrt_price_x96),
            price0=price0.value,
            price1=price1.value,
        )

    def _range_ticks(self, record: PairRecord, position_range: PositionRange) -> Tuple[int, int]:
        vault = record.vault
        if position_range is PositionRange.BASE:
            return vault.base_lower_tick(), vault.base_upper_tick()
        return vault.limit_lower_tick(), vault.limit_upper_tick()

    def _position(
        self,
        record: PairRecord,
        position_range: PositionRange,
        sqrt_price_x96: int
    ) -> PositionAmounts:
        tick_lower, tick_upper = self._range_ticks(record, position_range)
        liquidity, owed0, owed1 = record.pool.position_at(record.vault.address, tick_lower, tick_upper)

        amount0, amount1 = get_amounts_for_liquidity(
            sqrt_price_x96,
            get_sqrt_ratio_at_tick(tick_lower),
            get_sqrt_ratio_at_tick(tick_upper),
            liquidity
        )
        return PositionAmounts(liquidity, amount0 + owed0, amount1 + owed1)

    def get_position(
        self,
        pair: str,
        position_range: PositionRange,
        sqrt_price_x96: Optional[int] = None
    ) -> PositionAmounts:
        """범위 하나의 유동성과 토큰 수량 (미수령 수수료 포함)

        Args:
            pair: 볼트 주소
            position_range: BASE 또는 LIMIT
            sqrt_price_x96: 평가 가격. None이면 외부 시세로 새로 도출

        Returns:
            PositionAmounts(liquidity, amount0, amount1)
        """
        record = self.record_for(pair)
        if sqrt_price_x96 is None:
            price0, price1, _ = self._quote_prices(record)
            sqrt_price_x96 = self._sqrt_price(record, price0, price1)
        return self._position(record, position_range, sqrt_price_x96)

    def _total_reserves(self, record: PairRecord, sqrt_price_x96: int) -> Reserves:
        base = self._position(record, PositionRange.BASE, sqrt_price_x96)
        limit = self._position(record, PositionRange.LIMIT, sqrt_price_x96)
        holder = record.vault.address

        total0 = base.amount0 + limit.amount0 + record.token0.balance_of(holder)
        total1 = base.amount1 + limit.amount1 + record.token1.balance_of(holder)
        return Reserves(total0, total1)

    def get_total_reserves(self, pair: str) -> Reserves:
        """base + limit + 유휴 잔고 (토큰 최소 단위)"""
        record = self.record_for(pair)
        price0, price1, _ = self._quote_prices(record)
        return self._total_reserves(record, self._sqrt_price(record, price0, price1))

    def _reserves_value(self, record: PairRecord, price0: Normalized, price1: Normalized) -> int:
        """준비금 USD 가치 (소수점 36자리)"""
        reserves = self._total_reserves(record, self._sqrt_price(record, price0, price1))
        amount0 = self.scales.normalize(record.token0, reserves.amount0)
        amount1 = self.scales.normalize(record.token1, reserves.amount1)
        return amount0.value * price0.value + amount1.value * price1.value

    def reserves_value_usd(self, pair: str) -> int:
        """볼트 총 준비금의 USD 가치 (WAD)"""
        record = self.record_for(pair)
        price0, price1, _ = self._quote_prices(record)
        return div_down(self._reserves_value(record, price0, price1), WAD)

    def quote(self, pair: str) -> LpQuote:
        """LP 지분 하나의 가격 (표시 토큰 단위)과 기준 시각

        Raises:
            PairNotInitialized: 등록되지 않은 페어
            DivisionByZero: 지분 공급량 또는 표시 토큰 가격이 0
        """
        record = self.record_for(pair)
        price0, price1, updated_at = self._quote_prices(record)

        value = self._reserves_value(record, price0, price1)
        price_usd = div_down(value, record.vault.total_share_supply())

        denomination_price, denomination_updated_at = self._read_feed(self.denomination_feed)
        price = div(price_usd, denomination_price.value) // 10 ** (MAX_DECIMALS - self.denomination_decimals)

        logger.debug(f"Pair {record.pair_id}: share price usd={price_usd} denominated={price}")
        return LpQuote(price=price, updated_at=min(updated_at, denomination_updated_at))

    def lp_token_price_usd(self, pair: str) -> int:
        """LP 지분 하나의 가격 (표시 토큰 소수점 자릿수 기준)"""
        return self.quote(pair).price
