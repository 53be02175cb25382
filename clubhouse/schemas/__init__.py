"""Pydantic request/response schemas."""

from clubhouse.schemas.auth import CurrentUser, ErrorsResponse, FieldError, SignUpData

__all__ = [
    "CurrentUser",
    "ErrorsResponse",
    "FieldError",
    "SignUpData",
]
