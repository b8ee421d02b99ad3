"""
Sqrt Price Math - 외부 시세로부터 합성 sqrtPriceX96 도출

풀 자체의 현재가(slot0)는 한 번의 대규모 스왑으로 움직일 수 있으므로 사용하지 않는다.
두 토큰의 USD 시세만으로 token1/token0 가격을 만들고 Q96 형식으로 인코딩한다.

핵심 공식:
    ratio = priceA * 10^decimalsB * 2^96 / (priceB * 10^decimalsA)
    sqrtPriceX96 = floor(sqrt(ratio)) << 48

sqrt(X) * 2^96 = sqrt(X * 2^96) * 2^48 이므로 제곱근 이전 중간값은 2^96 배율에 머문다.
정수 제곱근의 내림으로 인한 상대 오차는 2^48 / sqrtPriceX96 미만이다.
"""

from ..constants import Q96, Q192, WAD
from ..data.types import Normalized, require_normalized
from ..errors import DivisionByZero, DomainError
from .fixed_point import mul_div, sqrt_int


def derive_sqrt_price_x96(
    price_a: Normalized,
    decimals_a: int,
    price_b: Normalized,
    decimals_b: int
) -> int:
    """두 USD 시세로 합성 sqrtPriceX96 계산

    Args:
        price_a: token0 USD 가격 (정규화)
        decimals_a: token0 소수점 자릿수
        price_b: token1 USD 가격 (정규화)
        decimals_b: token1 소수점 자릿수

    Returns:
        sqrtPriceX96 (token1 / token0, 최소 단위 기준)

    Raises:
        DivisionByZero: price_b가 0인 경우
        TypeError: 정규화되지 않은 가격이 전달된 경우
    """
    value_a = require_normalized(price_a, "price_a")
    value_b = require_normalized(price_b, "price_b")
    if value_b == 0:
        raise DivisionByZero("token1 가격이 0입니다")

    ratio = mul_div(value_a * 10 ** decimals_b, Q96, value_b * 10 ** decimals_a)
    return sqrt_int(ratio) << 48


def sqrt_price_x96_to_price(
    sqrt_price_x96: int,
    decimals0: int = 18,
    decimals1: int = 18
) -> int:
    """sqrtPriceX96을 WAD 가격으로 변환 (token1 per token0, human-readable 단위)

    가격 = sqrtPriceX96^2 / 2^192 * 10^(decimals0 - decimals1)

    Args:
        sqrt_price_x96: sqrtPriceX96 값
        decimals0: token0 소수점 자릿수
        decimals1: token1 소수점 자릿수

    Returns:
        가격 (WAD, 내림)

    Raises:
        DomainError: sqrt_price_x96 또는 소수점 자릿수가 음수인 경우
    """
    if sqrt_price_x96 < 0 or decimals0 < 0 or decimals1 < 0:
        raise DomainError(
            f"음수 입력: sqrt_price_x96={sqrt_price_x96}, decimals=({decimals0}, {decimals1})"
        )

    numerator = sqrt_price_x96 ** 2 * WAD * 10 ** decimals0
    return numerator // (Q192 * 10 ** decimals1)
