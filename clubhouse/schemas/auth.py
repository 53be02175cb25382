"""Request/response schemas for the sign-up and log-in flow."""

from pydantic import BaseModel, Field


class FieldError(BaseModel):
    """One validation or conflict error, keyed by the offending form field."""

    msg: str = Field(..., description="Human-readable message")
    param: str = Field(..., description="Form field name")


class ErrorsResponse(BaseModel):
    """400 body for a rejected sign-up."""

    errors: list[FieldError]


class SignUpData(BaseModel):
    """Sign-up fields after sanitizing and validation; password is trimmed and escaped."""

    first_name: str
    last_name: str
    username: str
    email: str
    password: str


class CurrentUser(BaseModel):
    """Principal exposed to views (no password)."""

    id: int
    first_name: str
    last_name: str
    username: str
    email: str

    class Config:
        from_attributes = True
