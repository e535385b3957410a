from typing import Any

from pydantic import BaseModel, TypeAdapter, ValidationError

from vehicle_service.core.exceptions import MalformedUpstreamDataError, exception_for
from vehicle_service.core.logging import get_logger, log_data
from vehicle_service.domain.result import OperationResult

logger = get_logger(__name__)


def unwrap(result: OperationResult) -> Any:
    """
    Return the value of a successful result or raise the matching API exception.

    Raises:
        APIException: The subclass mapped from ``result.error_kind``
    """
    if result.ok:
        return result.value
    raise exception_for(result.error_kind, result.message, result.details)


def validate_response(schema: Any, data: Any) -> Any:
    """
    Validate response data before it is sent to the caller.

    Values that do not fit the public contract (an unknown door location, a
    percentage outside 0-100) came from the vendor, so they are reported as
    malformed upstream data rather than silently corrected.

    Args:
        schema: A pydantic model class or ``TypeAdapter``
        data: The response payload

    Returns:
        The validated payload, serialized to JSON-compatible types

    Raises:
        MalformedUpstreamDataError: If the payload does not match the schema
    """
    adapter = schema if isinstance(schema, TypeAdapter) else TypeAdapter(schema)
    try:
        validated = adapter.validate_python(data)
    except ValidationError as e:
        errors = [
            {"loc": [str(part) for part in error["loc"]], "msg": error["msg"]}
            for error in e.errors()
        ]
        logger.error("Response validation error", extra=log_data(errors=errors))
        raise MalformedUpstreamDataError(detail="Invalid response format", details={"errors": errors})

    if isinstance(validated, BaseModel):
        return validated.model_dump(mode="json")
    return adapter.dump_python(validated, mode="json")
