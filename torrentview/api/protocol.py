"""HTTP API definitions: paths, content types and response models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

API_BASE_PATH = "/api/v2"

OCTET_STREAM = "application/octet-stream"
JSON_CONTENT_TYPE = "application/json"
DEFAULT_DUMP_FILENAME = "raw.dat"

FIELDS_PARAM = "fields"


class ErrorResponse(BaseModel):
    """Error response."""

    error: str = Field(..., description="Error message")
    code: str = Field(..., description="Error code")
    details: dict[str, Any] | None = Field(None, description="Additional error details")


class FieldListResponse(BaseModel):
    """Schema description."""

    version: int = Field(..., description="Schema version")
    fields: list[str] = Field(default_factory=list, description="Field names in canonical order")
