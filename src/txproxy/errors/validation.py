"""Turn pydantic validation errors into coded field failures.

Validators signal a coded failure with ``coded_error``::

    @field_validator("account")
    @classmethod
    def account_format(cls, value: str) -> str:
        if not value.isdigit():
            raise coded_error("B003", "account must be numeric")
        return value

Pydantic's own errors are coded too: length overflows become B002 and
everything else (missing, empty, wrong type, plain ValueError) becomes B001,
so ``Field(min_length=1, max_length=8)`` needs no custom validator.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from pydantic_core import PydanticCustomError

from txproxy.errors.codes import CODE_SEPARATOR, FIELD_TOO_LONG, MISSING_FIELD
from txproxy.exceptions import FieldFailure

CODED_ERROR_TYPE = "coded"

# Leading loc parts that name the request part rather than the field
_REQUEST_PARTS = frozenset({"body", "query", "path", "header", "cookie"})

_BUILTIN_CODES: dict[str, str] = {
    "missing": MISSING_FIELD,
    "string_too_long": FIELD_TOO_LONG,
    "too_long": FIELD_TOO_LONG,
}


def coded_error(code: str, message: str) -> PydanticCustomError:
    """Build an error whose rendered message is ``<code>:<message>``."""
    # No context, so the template is rendered as-is
    return PydanticCustomError(CODED_ERROR_TYPE, f"{code}{CODE_SEPARATOR}{message}")


def _field_name(loc: Iterable[Any]) -> str:
    parts = [str(part) for part in loc]
    if parts and parts[0] in _REQUEST_PARTS:
        parts = parts[1:]
    return ".".join(parts)


def _descriptor(error: Mapping[str, Any]) -> str | None:
    """Return the ``<code>:<message>`` text for one pydantic error.

    Only ``coded_error`` messages carry their own code. Every other message
    gets one here, since pydantic prose may itself contain the separator.
    """
    message = error.get("msg")
    if message is None:
        return None
    error_type = str(error.get("type"))
    if error_type == CODED_ERROR_TYPE:
        return message
    code = _BUILTIN_CODES.get(error_type, MISSING_FIELD)
    return f"{code}{CODE_SEPARATOR}{message}"


def field_failures(errors: Iterable[Mapping[str, Any]]) -> list[FieldFailure]:
    """Convert ``RequestValidationError.errors()`` (or pydantic's) into field failures."""
    return [
        FieldFailure(field=_field_name(error.get("loc", ())), descriptor=_descriptor(error))
        for error in errors
    ]
