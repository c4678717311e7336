"""Reusable field rules for request schemas.

Each rule is an ``AfterValidator`` that raises a ``PydanticCustomError`` carrying
the exact message shown to API clients, so a request schema reads as a
declarative rule table: one annotated field per input, one message per rule.
Fields default to ``None`` so that a missing key reports the field's own
message instead of pydantic's generic "Field required".
"""

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator
from pydantic_core import PydanticCustomError


def _fail(message: str) -> PydanticCustomError:
    return PydanticCustomError("invalid_field", message)


def _too_long(max_length: int) -> PydanticCustomError:
    return PydanticCustomError(
        "too_long", "Must be at most {max_length} characters", {"max_length": max_length}
    )


def required_text(message: str, max_length: int | None = None) -> AfterValidator:
    """Value must be present and not blank."""

    def check(value: str | None) -> str:
        if value is None or not value.strip():
            raise _fail(message)
        if max_length is not None and len(value) > max_length:
            raise _too_long(max_length)
        return value

    return AfterValidator(check)


def optional_text(message: str, max_length: int | None = None) -> AfterValidator:
    """Value may be omitted, but must not be blank when given."""

    def check(value: str | None) -> str | None:
        if value is None:
            return None
        if not value.strip():
            raise _fail(message)
        if max_length is not None and len(value) > max_length:
            raise _too_long(max_length)
        return value

    return AfterValidator(check)


def present(message: str) -> AfterValidator:
    """Value must be supplied; any string, even empty, is accepted."""

    def check(value: str | None) -> str:
        if value is None:
            raise _fail(message)
        return value

    return AfterValidator(check)


def min_length(length: int, message: str) -> AfterValidator:
    def check(value: str | None) -> str:
        if value is None or len(value) < length:
            raise _fail(message)
        return value

    return AfterValidator(check)


def email_address(message: str) -> AfterValidator:
    """Value must be a syntactically valid email; returns its normalized form."""

    def check(value: str | None) -> str:
        if not value:
            raise _fail(message)
        try:
            result = validate_email(value, check_deliverability=False)
        except EmailNotValidError as e:
            raise _fail(message) from e
        return result.normalized

    return AfterValidator(check)
