"""Build the error body and emit exactly one log entry per failure.

Severity depends only on where the failure came from. Client-caused failures
log a warning; system-caused failures log an error with the original
exception attached, even though the caller only sees a sentinel.
"""

from typing import NamedTuple

from txproxy.errors.classifier import Classification
from txproxy.errors.codes import (
    DEFAULT_VALIDATION_MESSAGE,
    MISSING_FIELD,
    UNEXPECTED_ERROR_MESSAGE,
    UNKNOWN_ERROR,
    FailureOrigin,
)
from txproxy.logging import get_logger
from txproxy.schemas.error import ErrorResponse

logger = get_logger(__name__)


class LogPolicy(NamedTuple):
    level: str
    event: str


LOG_POLICY: dict[FailureOrigin, LogPolicy] = {
    FailureOrigin.VALIDATION: LogPolicy("warning", "validation_failed"),
    FailureOrigin.BUSINESS_RULE: LogPolicy("warning", "business_rule_violated"),
    FailureOrigin.COMMUNICATION: LogPolicy("error", "downstream_communication_failed"),
    FailureOrigin.TRANSACTION: LogPolicy("error", "transaction_failed"),
    FailureOrigin.HTTP: LogPolicy("warning", "http_error"),
    FailureOrigin.UNCLASSIFIED: LogPolicy("error", "unexpected_error"),
}

# Fallbacks for malformed upstream values, e.g. a descriptor like ":msg" or None
_FALLBACK_CODE = {FailureOrigin.VALIDATION: MISSING_FIELD}
_FALLBACK_MESSAGE = {FailureOrigin.VALIDATION: DEFAULT_VALIDATION_MESSAGE}


def format_error(classification: Classification) -> ErrorResponse:
    """Log the failure at its origin's severity and return the response body."""
    origin = classification.origin
    code = classification.code or _FALLBACK_CODE.get(origin, UNKNOWN_ERROR)
    message = classification.message
    if message is None:
        message = _FALLBACK_MESSAGE.get(origin, UNEXPECTED_ERROR_MESSAGE)

    policy = LOG_POLICY.get(origin, LOG_POLICY[FailureOrigin.UNCLASSIFIED])
    context: dict[str, object] = {"code": code, "error": message, "origin": str(origin)}
    if classification.field is not None:
        context["field"] = classification.field
    if policy.level == "error":
        context["detail"] = classification.detail
        if classification.exc is not None:
            context["exc_info"] = classification.exc

    getattr(logger, policy.level)(policy.event, **context)
    return ErrorResponse(code=str(code), message=str(message))
