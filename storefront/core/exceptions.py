"""커스텀 예외 정의 (Structured Exception Hierarchy)

각 예외는 HTTP 경계에서 사용할 상태 코드(http_status)를 함께 가집니다.
"""
from typing import Any, Optional


# 기본 예외 클래스
class StorefrontException(Exception):
    """기본 예외 클래스 - 모든 커스텀 예외의 부모"""
    http_status: int = 500

    def __init__(self, message: str, error_code: str = "UNKNOWN_ERROR", details: Optional[dict[str, Any]] = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"


# 유효성 검증 관련 예외
class ValidationException(StorefrontException):
    """유효성 검증 예외"""
    http_status = 400

    def __init__(self, field: str, reason: str, details: Optional[dict[str, Any]] = None):
        self.field = field
        self.reason = reason
        message = f"Validation failed for '{field}': {reason}"
        super().__init__(message, "VALIDATION_ERROR",
                        details or {"field": field, "reason": reason})

    @classmethod
    def from_errors(cls, errors: list[dict[str, Any]], skip_prefix: tuple[str, ...] = ("body",)) -> "ValidationException":
        """pydantic 오류 목록(errors())의 첫 항목으로 예외 생성

        loc 경로는 점으로 이어 붙입니다 (예: ("body", "price", "amount") → "price.amount").
        """
        if not errors:
            return cls("payload", "invalid payload")
        first = errors[0]
        loc = [str(part) for part in first.get("loc", ()) if str(part) not in skip_prefix]
        field = ".".join(loc) or "payload"
        return cls(field, str(first.get("msg", "invalid value")),
                   {"field": field, "reason": str(first.get("msg", "")), "error_count": len(errors)})


class InvalidPriceException(ValidationException):
    """유효하지 않은 가격"""
    def __init__(self, price: Any, reason: str, details: Optional[dict[str, Any]] = None):
        super().__init__("price.amount", f"{reason} (value: {price})", details)


class InvalidCurrencyException(ValidationException):
    """지원하지 않는 통화"""
    def __init__(self, currency: Any, details: Optional[dict[str, Any]] = None):
        super().__init__("price.currency", f"unsupported currency (value: {currency})", details)


# 데이터베이스 관련 예외
class DatabaseException(StorefrontException):
    """데이터베이스 관련 예외"""
    http_status = 503

    def __init__(self, message: str, error_code: str = "DB_ERROR", details: Optional[dict[str, Any]] = None):
        super().__init__(message, error_code or "DB_ERROR", details)


class DatabaseConnectionException(DatabaseException):
    """DB 연결 실패"""
    def __init__(self, reason: str, details: Optional[dict[str, Any]] = None):
        message = f"Database connection failed: {reason}"
        super().__init__(message, "DB_CONNECTION_ERROR", details or {"reason": reason})


class DatabaseQueryException(DatabaseException):
    """DB 쿼리 실행 오류"""
    def __init__(self, query: str, reason: str, details: Optional[dict[str, Any]] = None):
        message = f"Database query failed: {reason}"
        super().__init__(message, "DB_QUERY_ERROR",
                        details or {"query": query, "reason": reason})


# 캐시(주문 레지스트리) 관련 예외
class CacheException(StorefrontException):
    """캐시 관련 예외"""
    http_status = 503

    def __init__(self, message: str, error_code: str = "CACHE_ERROR", details: Optional[dict[str, Any]] = None):
        super().__init__(message, error_code or "CACHE_ERROR", details)


class CacheConnectionException(CacheException):
    """캐시 연결 실패"""
    def __init__(self, reason: str, details: Optional[dict[str, Any]] = None):
        message = f"Failed to connect to cache: {reason}"
        super().__init__(message, "CACHE_CONNECTION_ERROR", details or {"reason": reason})


# 결제 게이트웨이 관련 예외
class GatewayException(StorefrontException):
    """결제 게이트웨이 통신 예외의 기본 클래스"""
    http_status = 502

    def __init__(self, message: str, error_code: str = "GATEWAY_ERROR", details: Optional[dict[str, Any]] = None):
        super().__init__(message, error_code or "GATEWAY_ERROR", details)


class GatewayTimeoutException(GatewayException):
    """게이트웨이 응답 타임아웃"""
    http_status = 504

    def __init__(self, operation: str, timeout_s: float, details: Optional[dict[str, Any]] = None):
        message = f"Payment gateway timed out during '{operation}' after {timeout_s}s"
        super().__init__(message, "GATEWAY_TIMEOUT",
                        details or {"operation": operation, "timeout_s": timeout_s})


class GatewayResponseException(GatewayException):
    """게이트웨이가 오류 응답(비 2xx) 또는 잘못된 본문을 반환"""
    def __init__(self, status_code: int, reason: str, details: Optional[dict[str, Any]] = None):
        self.status_code = status_code
        message = f"Payment gateway rejected request ({status_code}): {reason}"
        super().__init__(message, "GATEWAY_BAD_RESPONSE",
                        details or {"status_code": status_code, "reason": reason})


class GatewayConfigurationException(GatewayException):
    """게이트웨이 키/시크릿 미설정"""
    http_status = 503

    def __init__(self, reason: str, details: Optional[dict[str, Any]] = None):
        message = f"Payment gateway is not configured: {reason}"
        super().__init__(message, "GATEWAY_NOT_CONFIGURED", details or {"reason": reason})
