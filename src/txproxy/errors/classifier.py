"""Map a failure to the HTTP status, code and message the caller sees.

Client-caused failures (validation, business rule) get 400; everything the
system caused gets 500. Codes from the transaction server and the business
layer are part of the caller contract and pass through untouched. Failures
detected internally get the UNKNOWN_ERROR sentinel so diagnostic detail
stays in the logs. HTTP exceptions raised by routing keep their own status.
"""

from collections.abc import Mapping
from dataclasses import dataclass

from fastapi import status
from starlette.exceptions import HTTPException as StarletteHTTPException

from txproxy.config import settings
from txproxy.errors.codes import (
    COMMUNICATION_ERROR_TEMPLATE,
    UNEXPECTED_ERROR_MESSAGE,
    UNKNOWN_ERROR,
    FailureOrigin,
)
from txproxy.errors.resolver import resolve
from txproxy.exceptions import (
    BusinessRuleFailure,
    InternalCommunicationFailure,
    TransactionFailure,
    ValidationFailure,
)


@dataclass(frozen=True)
class Classification:
    """Everything the formatter needs to answer and log a single failure.

    ``detail`` and ``exc`` are for the log entry only. ``headers`` go on the response.
    """

    status_code: int
    code: str
    message: str | None
    origin: FailureOrigin
    field: str | None = None
    detail: str | None = None
    exc: BaseException | None = None
    headers: Mapping[str, str] | None = None


def communication_error_message() -> str:
    return COMMUNICATION_ERROR_TEMPLATE.format(service=settings.downstream_service_name)


def classify(failure: BaseException) -> Classification:
    """Classify one failure. Anything outside the known variants is unclassified."""
    match failure:
        case ValidationFailure(failures=failures):
            resolution = resolve(failures)
            return Classification(
                status_code=status.HTTP_400_BAD_REQUEST,
                code=resolution.code,
                message=resolution.message,
                origin=FailureOrigin.VALIDATION,
                field=resolution.field,
            )
        case BusinessRuleFailure(code=code, message=message):
            return Classification(
                status_code=status.HTTP_400_BAD_REQUEST,
                code=code,
                message=message,
                origin=FailureOrigin.BUSINESS_RULE,
                exc=failure,
            )
        case TransactionFailure(code=code, message=message):
            return Classification(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                code=code,
                message=message,
                origin=FailureOrigin.TRANSACTION,
                detail=message,
                exc=failure,
            )
        case InternalCommunicationFailure():
            return Classification(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                code=UNKNOWN_ERROR,
                message=communication_error_message(),
                origin=FailureOrigin.COMMUNICATION,
                detail=str(failure),
                exc=failure,
            )
        case StarletteHTTPException(status_code=http_status) if http_status < 500:
            # Routing and framework rejections (404, 405, ...) keep their status
            return Classification(
                status_code=http_status,
                code=UNKNOWN_ERROR,
                message=str(failure.detail),
                origin=FailureOrigin.HTTP,
                headers=failure.headers,
            )
        case StarletteHTTPException(status_code=http_status):
            return Classification(
                status_code=http_status,
                code=UNKNOWN_ERROR,
                message=UNEXPECTED_ERROR_MESSAGE,
                origin=FailureOrigin.UNCLASSIFIED,
                detail=str(failure.detail),
                exc=failure,
                headers=failure.headers,
            )
        case _:
            return Classification(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                code=UNKNOWN_ERROR,
                message=UNEXPECTED_ERROR_MESSAGE,
                origin=FailureOrigin.UNCLASSIFIED,
                detail=str(failure),
                exc=failure,
            )
