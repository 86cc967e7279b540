"""Custom exception classes"""

from typing import Any, Optional


class ReRankException(Exception):
    """Base exception for ReRank"""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: Optional[dict[str, Any]] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class ValidationException(ReRankException):
    """Exception for validation errors"""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message, status_code=400, details=details)


class NotFoundException(ReRankException):
    """Exception for resource not found errors"""

    def __init__(self, message: str):
        super().__init__(message, status_code=404)


class PayloadTooLargeException(ReRankException):
    """Exception for uploads above the configured size limit"""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message, status_code=413, details=details)


class RateLimitException(ReRankException):
    """Exception for rate limit errors"""

    def __init__(self, message: str = "Rate limit exceeded. Please try again later."):
        super().__init__(message, status_code=429)
