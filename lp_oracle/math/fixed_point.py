"""
Fixed Point Math - 단위 스케일(WAD) 고정소수점 연산

모든 값은 소수점 18자리 정수(WAD = 10^18)로 표현된다.
부동소수점을 전혀 사용하지 않으므로 플랫폼과 무관하게 비트 단위로 동일한 결과를 낸다.

References:
- Uniswap V3 Core: contracts/libraries/FullMath.sol (mulDiv)
- Solady: src/utils/FixedPointMathLib.sol (wadLn, wadExp 입력 경계)

입력 한계:
    mul_div, mul, div, div_down: 피연산자 0 ~ UINT256_MAX, 결과 <= UINT256_MAX
    sqrt_int: 0 ~ UINT256_MAX
    ln: 1 ~ INT256_MAX
    exp: EXP_MIN_INPUT < x < EXP_MAX_INPUT (하한 이하는 0)

중간값 a * b는 최대 512비트로, 파이썬 정수가 그대로 누적기 역할을 한다.
"""

import math

from ..constants import (
    WAD,
    UINT256_MAX,
    INT256_MAX,
    EXP_MAX_INPUT,
    EXP_MIN_INPUT,
)
from ..errors import DomainError, FixedPointOverflow, DivisionByZero


# ln/exp 내부 정밀도 (소수점 38자리)
_PRECISION: int = 10 ** 38
_UPSCALE: int = _PRECISION // WAD


def _check_uint256(*values: int) -> None:
    for value in values:
        if value < 0:
            raise DomainError(f"부호 없는 연산에 음수 입력: {value}")
        if value > UINT256_MAX:
            raise FixedPointOverflow(f"uint256 범위 초과: {value}")


def sdiv(numerator: int, denominator: int) -> int:
    """0 방향으로 자르는 부호 있는 나눗셈"""
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient


def mul_div(a: int, b: int, denominator: int) -> int:
    """floor(a * b / denominator)

    FullMath.mulDiv와 같은 의미. 중간값 a * b는 512비트까지 허용하고
    최종 결과만 uint256 범위를 검사한다.

    Args:
        a: 피승수 (0 ~ UINT256_MAX)
        b: 승수 (0 ~ UINT256_MAX)
        denominator: 제수 (1 ~ UINT256_MAX)

    Returns:
        내림한 몫

    Raises:
        DivisionByZero: denominator가 0인 경우
        FixedPointOverflow: 입력 또는 결과가 uint256 범위를 넘는 경우
        DomainError: 음수 입력
    """
    _check_uint256(a, b, denominator)
    if denominator == 0:
        raise DivisionByZero("mul_div: 0으로 나눌 수 없습니다")

    result = a * b // denominator
    if result > UINT256_MAX:
        raise FixedPointOverflow(f"mul_div 결과가 uint256 범위를 넘습니다: {result}")
    return result


def mul(a: int, b: int) -> int:
    """WAD 곱셈 (내림)"""
    return mul_div(a, b, WAD)


def div(a: int, b: int) -> int:
    """WAD 나눗셈 (내림)"""
    return mul_div(a, WAD, b)


def div_down(a: int, b: int) -> int:
    """스케일 없는 정수 나눗셈 (내림)"""
    return mul_div(a, 1, b)


def sqrt_int(x: int) -> int:
    """정수 제곱근 floor(sqrt(x))

    결과 r은 항상 r^2 <= x < (r + 1)^2 을 만족한다.
    """
    _check_uint256(x)
    return math.isqrt(x)


def _atanh(y: int) -> int:
    """atanh(y) 급수 (0 <= y < 1, _PRECISION 스케일)

    atanh(y) = y + y^3/3 + y^5/5 + ...
    """
    y_squared = y * y // _PRECISION
    term = y
    total = 0
    n = 1
    while term:
        total += term // n
        term = term * y_squared // _PRECISION
        n += 2
    return total


# ln(2) = 2 * atanh(1/3)
_LN2: int = 2 * _atanh(_PRECISION // 3)


def ln(x: int) -> int:
    """자연로그 ln(x)

    x = m * 2^k (1 <= m < 2)로 분해한 뒤
    ln(x) = k * ln(2) + 2 * atanh((m - 1) / (m + 1)) 로 계산한다.

    Args:
        x: WAD 스케일 양수

    Returns:
        WAD 스케일 부호 있는 결과 (0 방향 절사)

    Raises:
        DomainError: x <= 0
        FixedPointOverflow: x > INT256_MAX
    """
    if x <= 0:
        raise DomainError(f"ln은 양수에서만 정의됩니다: {x}")
    if x > INT256_MAX:
        raise FixedPointOverflow(f"ln 입력이 int256 범위를 넘습니다: {x}")

    scaled = x * _UPSCALE
    k = scaled.bit_length() - _PRECISION.bit_length()
    mantissa = scaled >> k if k >= 0 else scaled << -k
    if mantissa < _PRECISION:
        k -= 1
        mantissa = scaled >> k if k >= 0 else scaled << -k

    y = (mantissa - _PRECISION) * _PRECISION // (mantissa + _PRECISION)
    result = k * _LN2 + 2 * _atanh(y)
    return sdiv(result, _UPSCALE)


def exp(x: int) -> int:
    """자연지수 e^x

    x = k * ln(2) + r (|r| <= ln(2) / 2)로 분해한 뒤
    테일러 급수로 e^r을 구하고 2^k만큼 시프트한다.

    Args:
        x: WAD 스케일 부호 있는 값

    Returns:
        WAD 스케일 결과 (내림)

    Raises:
        FixedPointOverflow: x >= EXP_MAX_INPUT (결과가 int256을 넘음)
    """
    if x >= EXP_MAX_INPUT:
        raise FixedPointOverflow(f"exp 입력이 너무 큽니다: {x}")
    if x <= EXP_MIN_INPUT:
        return 0

    scaled = x * _UPSCALE
    k = (scaled + _LN2 // 2) // _LN2
    remainder = scaled - k * _LN2

    total = _PRECISION
    term = _PRECISION
    n = 1
    while term:
        term = sdiv(term * remainder, _PRECISION * n)
        total += term
        n += 1

    result = total << k if k >= 0 else total >> -k
    return result // _UPSCALE
