"""Authentication schemas."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from src.schemas.rules import email_address, min_length, present, required_text

PASSWORD_MIN_LENGTH = 6


class UserRegister(BaseModel):
    """User registration request."""

    name: Annotated[str | None, required_text("Please enter your name", max_length=255)] = Field(
        None, validate_default=True
    )
    email: Annotated[str | None, email_address("Please enter your email")] = Field(
        None, validate_default=True
    )
    password: Annotated[
        str | None,
        min_length(
            PASSWORD_MIN_LENGTH,
            f"Please enter a password with at least {PASSWORD_MIN_LENGTH} characters",
        ),
    ] = Field(None, validate_default=True)


class UserLogin(BaseModel):
    """User login request."""

    email: Annotated[str | None, email_address("Please enter a valid email")] = Field(
        None, validate_default=True
    )
    password: Annotated[str | None, present("A password is required!")] = Field(
        None, validate_default=True
    )


class TokenResponse(BaseModel):
    """Session token issued on login and registration."""

    token: str


class UserResponse(BaseModel):
    """User information response."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    email: str
