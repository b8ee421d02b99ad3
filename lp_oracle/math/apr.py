"""
Log APR - 교환비 두 샘플로 연환산 수익률 추정

    logDiff = ln(rateNow) - ln(rateLast)
    annualizedLog = logDiff * SECONDS_PER_YEAR / elapsed
    apr = exp(annualizedLog) - 1

ln/exp의 양자화 오차가 신호보다 충분히 작도록 샘플 간격은 초 단위가 아니라
시간 단위여야 한다. 간격 검증은 호출자 책임이다.
"""

from ..constants import WAD, SECONDS_PER_YEAR
from ..errors import DivisionByZero
from .fixed_point import ln, exp, sdiv


def annualized_log_apr(rate_last: int, rate_now: int, elapsed_seconds: int) -> int:
    """연환산 APR (WAD, 부호 있음)

    Args:
        rate_last: 이전 교환비 (WAD)
        rate_now: 현재 교환비 (WAD)
        elapsed_seconds: 두 샘플 사이 경과 시간 (초)

    Returns:
        APR (WAD). 0.05 * 10^18 = 5%

    Raises:
        DivisionByZero: elapsed_seconds가 0인 경우
        DomainError: 교환비가 0 이하인 경우
        FixedPointOverflow: 연환산 로그가 exp 범위를 넘는 경우
    """
    if elapsed_seconds == 0:
        raise DivisionByZero("경과 시간이 0입니다")

    log_diff = ln(rate_now) - ln(rate_last)
    annualized_log = sdiv(log_diff * SECONDS_PER_YEAR, elapsed_seconds)
    return exp(annualized_log) - WAD
