"""Error response schemas.

Validation and generic domain errors share one envelope:
{"error": {"code": "...", "message": "...", "fields": [...]}}.
Catalog rule violations (404/422) answer with the bare message string, and the
fault boundary answers with {"Message": "..."}.
"""

from pydantic import BaseModel, Field


class FieldViolation(BaseModel):
    """One rejected input field and the reason it was rejected."""

    field: str
    message: str


class ErrorDetail(BaseModel):
    """Inner error object with a machine-readable code and human-readable message."""

    code: str
    message: str
    fields: list[FieldViolation] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    """Top-level error envelope."""

    error: ErrorDetail


class FaultResponse(BaseModel):
    """Body written by the fault boundary for any unhandled failure."""

    Message: str
