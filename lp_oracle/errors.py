"""
LP Oracle 오류 정의

가격 계산 경로의 모든 실패는 LpOracleError 하위 클래스로 전달된다.
호출자는 오류를 "가격 없음"으로 취급해야 하며, 0이나 이전 값으로 대체하지 않는다.
"""


class LpOracleError(Exception):
    """LP Oracle 기본 오류"""
    pass


class PairNotInitialized(LpOracleError):
    """등록되지 않은 페어에 대한 가격 조회"""
    pass


class DomainError(LpOracleError, ValueError):
    """정의역을 벗어난 입력 (ln(x <= 0), 음수 수량, 범위 밖 틱 등)"""
    pass


class FixedPointOverflow(LpOracleError, OverflowError):
    """고정소수점 결과가 uint256/int256 범위를 넘는 경우"""
    pass


class DivisionByZero(LpOracleError, ZeroDivisionError):
    """0으로 나누기 (priceB = 0, 지분 공급량 = 0, 경과 시간 = 0)"""
    pass


class DecimalOverflow(LpOracleError):
    """소수점 자릿수가 18을 넘는 소스"""
    pass


class InvalidPrice(LpOracleError):
    """피드 가격이 0 이하 (REJECT_NON_POSITIVE_PRICES 설정 시)"""
    pass


class RegistryError(LpOracleError):
    """페어 등록 저장소 오류"""
    pass


class AlreadyInitialized(RegistryError):
    """이미 초기화된 페어의 재초기화"""
    pass


class Unauthorized(RegistryError):
    """관리자 권한이 없는 호출"""
    pass


class ReentrancyError(RegistryError):
    """변경 작업 도중 재진입 시도"""
    pass
