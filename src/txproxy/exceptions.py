"""Failures raised by collaborators and caught at the HTTP boundary.

Services and downstream adapters raise these to signal what went wrong.
Exception handlers in errors/handlers.py translate them into the flat
error body: {"code": "...", "message": "..."}.
"""

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class FieldFailure:
    """A single field rejected by a validation rule.

    ``descriptor`` follows the ``<code>:<message>`` convention but may omit
    the code, or be missing entirely.
    """

    field: str
    descriptor: str | None


class InternalFailure(Exception):
    """Base class for every failure variant the boundary knows how to classify."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationFailure(InternalFailure):
    """Raised when one or more request fields are rejected."""

    def __init__(self, failures: Sequence[FieldFailure]) -> None:
        self.failures = tuple(failures)
        super().__init__(f"{len(self.failures)} field(s) failed validation")


class InternalCommunicationFailure(InternalFailure):
    """The downstream transaction server could not be reached or errored in transport.

    ``message`` is diagnostic only and never returned to the caller.
    """


class TransactionFailure(InternalFailure):
    """The downstream system processed the request and rejected the transaction."""

    def __init__(self, code: str, message: str) -> None:
        self.code = code
        super().__init__(message)


class BusinessRuleFailure(InternalFailure):
    """A service-layer business rule was violated."""

    def __init__(self, code: str, message: str) -> None:
        self.code = code
        super().__init__(message)


class UnclassifiedFailure(InternalFailure):
    """Explicitly unclassified failure; treated like any unknown exception."""
