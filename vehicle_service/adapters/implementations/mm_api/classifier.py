"""
Classification of MM API envelopes.

Every MM API response carries a top-level ``status`` string. This module
decides, before any normalization, whether a payload is a success, a
not-found report, or an upstream failure.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

SUCCESS_STATUS = "200"
NOT_FOUND_STATUS = "404"

DATA_SECTION = "data"
ACTION_RESULT_SECTION = "actionResult"

NO_RESPONSE_REASON = "No response from vendor API"
MISSING_STATUS_MESSAGE = "Vendor API error: missing status"


class ResponseOutcome(str, Enum):
    """Possible classifications of a vendor payload."""
    SUCCESS = "success"
    NOT_FOUND = "not_found"
    UPSTREAM_ERROR = "upstream_error"


@dataclass(frozen=True)
class ClassifiedResponse:
    """
    A vendor payload after status classification.

    ``section`` holds the forwarded data section for successes; ``status``
    keeps the raw vendor status for diagnostics.
    """

    outcome: ResponseOutcome
    section: Any = None
    status: Optional[str] = None
    reason: Optional[str] = None

    @property
    def message(self) -> str:
        """Human readable summary of a failed classification."""
        if self.outcome is ResponseOutcome.NOT_FOUND:
            return "Vehicle not found by vendor API"
        if self.status is None:
            return NO_RESPONSE_REASON if self.reason == NO_RESPONSE_REASON else MISSING_STATUS_MESSAGE
        return f"Vendor API error: {self.status}"


def classify_response(payload: Any, section: str = DATA_SECTION) -> ClassifiedResponse:
    """
    Classify a raw vendor payload by its ``status`` field.

    Args:
        payload: The decoded vendor response, possibly ``None``
        section: Name of the key forwarded on success (``data`` for reads,
            ``actionResult`` for engine commands)

    Returns:
        ClassifiedResponse: The outcome plus the forwarded section
    """
    if payload is None:
        return ClassifiedResponse(ResponseOutcome.UPSTREAM_ERROR, reason=NO_RESPONSE_REASON)

    raw_status = payload.get("status") if isinstance(payload, dict) else None
    status = raw_status if isinstance(raw_status, str) else None

    if status == SUCCESS_STATUS:
        return ClassifiedResponse(ResponseOutcome.SUCCESS, section=payload.get(section), status=status)

    if status == NOT_FOUND_STATUS:
        return ClassifiedResponse(ResponseOutcome.NOT_FOUND, status=status, reason=_reason(payload))

    # Non-string statuses are reported as text so they survive into error details.
    diagnostic_status = status if status is not None else (None if raw_status is None else str(raw_status))
    return ClassifiedResponse(ResponseOutcome.UPSTREAM_ERROR, status=diagnostic_status, reason=_reason(payload))


def _reason(payload: Any) -> Optional[str]:
    reason = payload.get("reason") if isinstance(payload, dict) else None
    return reason if isinstance(reason, str) else None
