from fastapi import status
from typing import Any, Dict, Optional

from vehicle_service.domain.result import ErrorKind


class APIException(Exception):
    """
    Base exception for API errors.

    All operational errors rendered by the HTTP layer inherit from this class.
    """

    error_kind: str = "InternalServerError"

    def __init__(
        self,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail: str = "An unexpected error occurred",
        details: Optional[Dict[str, Any]] = None
    ):
        self.status_code = status_code
        self.detail = detail
        self.details = details
        super().__init__(self.detail)

    def to_dict(self, request_id: str) -> Dict[str, Any]:
        """Convert exception to a dictionary for consistent response format."""
        return {
            "error": self.error_kind,
            "message": self.detail,
            "details": self.details or None,
            "requestId": request_id,
        }


class InvalidRequestError(APIException):
    """Exception raised when caller input fails validation."""

    error_kind = ErrorKind.INVALID.value

    def __init__(
        self,
        detail: str = "Validation error",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail,
            details=details
        )


class VehicleNotFoundError(APIException):
    """Exception raised when the vendor reports the vehicle id as unknown."""

    error_kind = ErrorKind.NOT_FOUND.value

    def __init__(
        self,
        detail: str = "Resource not found",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=detail,
            details=details
        )


class UpstreamError(APIException):
    """Exception raised when the vendor API is unreachable or reports a failure."""

    error_kind = ErrorKind.UPSTREAM_ERROR.value

    def __init__(
        self,
        detail: str = "External API error",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=detail,
            details=details
        )


class MalformedUpstreamDataError(APIException):
    """Exception raised when a successful vendor payload violates the expected shape."""

    error_kind = ErrorKind.MALFORMED_UPSTREAM_DATA.value

    def __init__(
        self,
        detail: str = "Malformed data from external API",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=detail,
            details=details
        )


class VendorTransportError(Exception):
    """
    Raised by the vendor client when the request itself fails.

    Covers timeouts, refused connections, non-JSON bodies and HTTP errors
    without a vendor envelope. Never rendered directly; the service facade
    converts it to an upstream error result.
    """

    def __init__(self, message: str, url: Optional[str] = None, original_exception: Optional[Exception] = None):
        self.message = message
        self.url = url
        self.original_exception = original_exception
        super().__init__(message)


EXCEPTION_BY_KIND = {
    ErrorKind.INVALID: InvalidRequestError,
    ErrorKind.NOT_FOUND: VehicleNotFoundError,
    ErrorKind.UPSTREAM_ERROR: UpstreamError,
    ErrorKind.MALFORMED_UPSTREAM_DATA: MalformedUpstreamDataError,
}


def exception_for(kind: ErrorKind, detail: str, details: Optional[Dict[str, Any]] = None) -> APIException:
    """Build the API exception matching an operation error kind."""
    return EXCEPTION_BY_KIND[kind](detail=detail, details=details)
