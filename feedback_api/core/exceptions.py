"""커스텀 예외 정의 (Structured Exception Hierarchy)"""
from typing import Any, Optional


# 기본 예외 클래스
class FeedbackApiException(Exception):
    """기본 예외 클래스 - 모든 커스텀 예외의 부모"""
    def __init__(self, message: str, error_code: str = "UNKNOWN_ERROR", details: Optional[dict[str, Any]] = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """JSON 에러 응답 본문"""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }


# 카탈로그 관련 예외
class CatalogException(FeedbackApiException):
    """카탈로그 관련 예외의 기본 클래스"""
    def __init__(self, message: str, error_code: str = "CATALOG_ERROR", details: Optional[dict[str, Any]] = None):
        super().__init__(message, error_code or "CATALOG_ERROR", details)


class ProductNotFoundException(CatalogException):
    """slug에 해당하는 상품이 없을 때"""
    def __init__(self, slug: str, details: Optional[dict[str, Any]] = None):
        message = f"Product not found for slug: {slug}"
        super().__init__(message, "PRODUCT_NOT_FOUND", details or {"slug": slug})


class InvalidCatalogException(CatalogException):
    """카탈로그 불변식 위반 (빈 slug, 중복 slug 등)"""
    def __init__(self, reason: str, details: Optional[dict[str, Any]] = None):
        message = f"Invalid catalog: {reason}"
        super().__init__(message, "INVALID_CATALOG", details or {"reason": reason})


# 직렬화 관련 예외
class SerializationException(FeedbackApiException):
    """JSON 직렬화 오류"""
    def __init__(self, reason: str, details: Optional[dict[str, Any]] = None):
        message = f"Failed to serialize response: {reason}"
        super().__init__(message, "SERIALIZATION_ERROR", details or {"reason": reason})


def status_code_for(exc: FeedbackApiException) -> int:
    """예외 → HTTP 상태 코드 매핑"""
    if isinstance(exc, ProductNotFoundException):
        return 404
    return 500
