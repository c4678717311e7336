"""Application error taxonomy and its JSON rendering."""

from typing import Any

from fastapi import status


class AppError(Exception):
    """Base class for errors that map onto an HTTP response.

    ``envelope`` selects the body shape: ``"msg"`` renders ``{"msg": ...}`` and
    ``"errors"`` renders ``{"errors": [{"msg": ...}]}``.
    """

    status_code: int = status.HTTP_400_BAD_REQUEST
    default_msg: str = "Bad request"
    envelope: str = "msg"

    def __init__(self, msg: str | None = None, headers: dict[str, str] | None = None) -> None:
        self.msg = msg or self.default_msg
        self.headers = headers
        super().__init__(self.msg)

    def to_dict(self) -> dict[str, Any]:
        if self.envelope == "errors":
            return {"errors": [{"msg": self.msg}]}
        return {"msg": self.msg}


class ValidationError(AppError):
    """Request input is missing or malformed."""

    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    default_msg = "Invalid value"
    envelope = "errors"

    def __init__(self, errors: list[dict[str, Any]]) -> None:
        super().__init__(errors[0]["msg"] if errors else None)
        self.errors = errors

    def to_dict(self) -> dict[str, Any]:
        return {"errors": self.errors}


class AuthenticationError(AppError):
    """The caller could not be identified."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_msg = "Token is not valid"


class MissingTokenError(AuthenticationError):
    default_msg = "No token, authorization denied"


class InvalidTokenError(AuthenticationError):
    default_msg = "Token is not valid"


class ExpiredTokenError(AuthenticationError):
    default_msg = "Token has expired"


class InvalidCredentialsError(AuthenticationError):
    """Login with an unknown email or a wrong password."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_msg = "Invalid email or password!"
    envelope = "errors"


class DuplicateUserError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_msg = "User already exists"
    envelope = "errors"


class AuthorizationError(AppError):
    """The caller is authenticated but does not own the resource."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_msg = "User not authorized!"


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_msg = "Not found"


class InternalError(AppError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_msg = "Server error"
