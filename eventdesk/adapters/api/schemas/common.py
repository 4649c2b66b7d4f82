from __future__ import annotations

"""Shared base models for the public API.

JSON keys are camelCase on the wire. Request bodies accept either camelCase
or the snake_case field names.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for every request and response body."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class SuccessEnvelope(CamelModel):
    """Every successful response carries ``success: true``."""

    success: bool = True


class MessageResponse(SuccessEnvelope):
    """Simple envelope used for acknowledgments."""

    message: str


class ErrorResponse(CamelModel):
    """Shape of every error body, documented for the OpenAPI schema."""

    success: bool = False
    message: str
    code: Optional[str] = None
