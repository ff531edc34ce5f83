"""Error codes shared with API callers.

B001 (400)          required field missing or empty
B002 (400)          field exceeds its maximum size
UNKNOWN_ERROR (500) unclassified or internal system failure

Any other code is forwarded verbatim from the transaction server or the
business layer.
"""

from enum import StrEnum

CODE_SEPARATOR = ":"

MISSING_FIELD = "B001"
FIELD_TOO_LONG = "B002"
UNKNOWN_ERROR = "UNKNOWN_ERROR"

DEFAULT_VALIDATION_MESSAGE = "Validation error"
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred."
COMMUNICATION_ERROR_TEMPLATE = (
    "Error occurred while communicating with {service}. "
    "Please ensure that the {service} is operational."
)


class FailureOrigin(StrEnum):
    """Where a failure came from. Keys the severity table in the formatter."""

    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    COMMUNICATION = "communication"
    TRANSACTION = "transaction"
    HTTP = "http"
    UNCLASSIFIED = "unclassified"
