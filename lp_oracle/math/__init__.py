"""
Math layer for LP Oracle

정수 전용 수학 함수들:
- fixed_point: WAD 고정소수점 (mul_div, sqrt, ln, exp)
- tick_math: Tick ↔ sqrtPriceX96 변환
- sqrt_price_math: 외부 시세 → 합성 sqrtPriceX96
- liquidity_math: 유동성 → 토큰 수량
- apr: 로그 기반 연환산 수익률
"""

from .fixed_point import (
    mul_div,
    mul,
    div,
    div_down,
    sdiv,
    sqrt_int,
    ln,
    exp,
)
from .tick_math import (
    get_sqrt_ratio_at_tick,
    get_tick_at_sqrt_ratio,
)
from .sqrt_price_math import (
    derive_sqrt_price_x96,
    sqrt_price_x96_to_price,
)
from .liquidity_math import (
    get_amount0_delta,
    get_amount1_delta,
    get_amounts_for_liquidity,
)
from .apr import annualized_log_apr
