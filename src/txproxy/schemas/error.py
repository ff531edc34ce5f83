"""Error response schema.

Every error response has the same flat body: {"code": "...", "message": "..."}.
The formatter in errors/formatter.py is the only place that builds it.
"""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Machine-readable code plus human-readable message."""

    model_config = {"frozen": True}

    code: str = Field(min_length=1)
    message: str
