"""Pick one (code, message) pair out of a batch of field validation failures.

Validation rules encode their code in the failure text as ``<code>:<message>``.
When several fields fail at once the pair with the smallest code wins,
compared as plain strings; equal codes keep input order.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from txproxy.errors.codes import CODE_SEPARATOR, DEFAULT_VALIDATION_MESSAGE, MISSING_FIELD
from txproxy.exceptions import FieldFailure


@dataclass(frozen=True)
class Resolution:
    """Outcome of resolving a batch of field failures."""

    code: str
    message: str | None
    field: str | None = None


def extract_code(descriptor: str | None) -> str:
    """Return the text before the first separator, or B001 if there is none."""
    if descriptor is not None and CODE_SEPARATOR in descriptor:
        return descriptor.partition(CODE_SEPARATOR)[0]
    return MISSING_FIELD


def extract_message(descriptor: str | None) -> str | None:
    """Return the text after the first separator, or the descriptor unchanged."""
    if descriptor is not None and CODE_SEPARATOR in descriptor:
        return descriptor.partition(CODE_SEPARATOR)[2]
    return descriptor


def resolve(failures: Sequence[FieldFailure]) -> Resolution:
    """Resolve field failures to the single code and message returned to the caller.

    An empty batch yields ``B001`` / ``Validation error``. Never raises.
    """
    if not failures:
        return Resolution(code=MISSING_FIELD, message=DEFAULT_VALIDATION_MESSAGE)

    # min() keeps the first of equal keys
    selected = min(failures, key=lambda failure: extract_code(failure.descriptor))
    return Resolution(
        code=extract_code(selected.descriptor),
        message=extract_message(selected.descriptor),
        field=selected.field,
    )
