"""FastAPI dependencies for the request context and authentication."""

import logging
from dataclasses import dataclass
from datetime import timedelta
from typing import Annotated

from fastapi import Depends, Header
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from src.config import Settings, get_settings
from src.database import get_db
from src.errors import AuthenticationError, MissingTokenError
from src.services.auth import decode_access_token

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


@dataclass
class AppContext:
    """Per-request collaborators handed to every handler.

    Tests swap either part through ``app.dependency_overrides`` on ``get_db`` or
    ``get_settings``.
    """

    db: Session
    settings: Settings

    @property
    def token_ttl(self) -> timedelta:
        return timedelta(minutes=self.settings.jwt_expiration_minutes)


def get_context(
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> AppContext:
    return AppContext(db=db, settings=settings)


def get_token(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    x_auth_token: Annotated[str | None, Header()] = None,
) -> str:
    """Read the session token from ``x-auth-token`` or an ``Authorization: Bearer`` header."""
    if x_auth_token:
        return x_auth_token
    if credentials is not None and credentials.credentials:
        return credentials.credentials
    raise MissingTokenError(headers={"WWW-Authenticate": "Bearer"})


def get_current_user_id(
    token: Annotated[str, Depends(get_token)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> str:
    """Verify the session token and return the user id it carries."""
    try:
        return decode_access_token(token, settings.jwt_secret, settings.jwt_algorithm)
    except AuthenticationError as e:
        logger.debug(f"Rejected session token: {e.msg}")
        e.headers = {"WWW-Authenticate": "Bearer"}
        raise
