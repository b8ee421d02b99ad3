"""
LP Oracle 상수 정의

고정소수점 연산과 틱 수학에 사용되는 상수들:
- WAD: 단위 스케일 (10^18, 소수점 18자리)
- Q96: sqrt price 인코딩에 사용 (2^96)
- MIN_TICK / MAX_TICK: Uniswap V3 틱 범위
- EXP 경계값: exp()가 int256 범위 안에서 정의되는 입력 구간
"""

from typing import Final

# Fixed-point 인코딩 상수
WAD: Final[int] = 10 ** 18
Q96: Final[int] = 2 ** 96
Q192: Final[int] = 2 ** 192

# 정규화 기준 소수점 자릿수 (WAD = 10^MAX_DECIMALS)
MAX_DECIMALS: Final[int] = 18

# 틱 범위 상수
MIN_TICK: Final[int] = -887272
MAX_TICK: Final[int] = 887272

# Uniswap V3 TickMath 상수
MIN_SQRT_RATIO: Final[int] = 4295128739
MAX_SQRT_RATIO: Final[int] = 1461446703485210103287273052203988822378723970342

# uint256 / int256 최대값
UINT256_MAX: Final[int] = 2 ** 256 - 1
INT256_MAX: Final[int] = 2 ** 255 - 1

# exp() 입력 경계 (WAD 스케일)
# 이 값 이상이면 결과가 int256을 넘는다
EXP_MAX_INPUT: Final[int] = 135305999368893231589
# 이 값 이하이면 결과가 0.5 wei 미만 → 0
EXP_MIN_INPUT: Final[int] = -41446531673892822313

# 1년 = 365일
SECONDS_PER_YEAR: Final[int] = 365 * 24 * 60 * 60
