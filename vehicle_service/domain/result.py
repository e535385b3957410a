from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Generic, Optional, TypeVar

T = TypeVar('T')


class ErrorKind(str, Enum):
    """Classified, expected failure kinds returned by the service facade."""
    INVALID = "Invalid"
    NOT_FOUND = "NotFound"
    UPSTREAM_ERROR = "UpstreamError"
    MALFORMED_UPSTREAM_DATA = "MalformedUpstreamData"


@dataclass(frozen=True)
class OperationResult(Generic[T]):
    """
    Outcome of one facade operation.

    Either ``ok`` with a ``value``, or not ``ok`` with an ``error_kind``, a
    human readable ``message`` and optional diagnostic ``details``.
    """

    ok: bool
    value: Optional[T] = None
    error_kind: Optional[ErrorKind] = None
    message: Optional[str] = None
    details: Optional[Dict[str, Any]] = None

    @classmethod
    def success(cls, value: T) -> "OperationResult[T]":
        return cls(ok=True, value=value)

    @classmethod
    def failure(
        cls,
        kind: ErrorKind,
        message: str,
        details: Optional[Dict[str, Any]] = None
    ) -> "OperationResult[T]":
        return cls(ok=False, error_kind=kind, message=message, details=details)
