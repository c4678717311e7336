"""Authentication API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends

from src.api.dependencies import AppContext, get_context, get_current_user_id
from src.errors import DuplicateUserError, InvalidCredentialsError, NotFoundError
from src.models.user import User
from src.schemas.auth import TokenResponse, UserLogin, UserRegister, UserResponse
from src.services.auth import (
    authenticate_user,
    create_access_token,
    create_user,
    get_user_by_email,
    get_user_by_id,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["auth"])


def issue_token(ctx: AppContext, user: User) -> TokenResponse:
    token = create_access_token(
        user.id, ctx.settings.jwt_secret, ctx.token_ttl, ctx.settings.jwt_algorithm
    )
    return TokenResponse(token=token)


@router.get("/auth", response_model=UserResponse)
def get_me(
    user_id: Annotated[str, Depends(get_current_user_id)],
    ctx: Annotated[AppContext, Depends(get_context)],
):
    """Get the user the session token was issued for."""
    user = get_user_by_id(ctx.db, user_id)
    if user is None:
        raise NotFoundError("User not found")
    return user


@router.post("/login", response_model=TokenResponse)
def login(
    credentials: UserLogin,
    ctx: Annotated[AppContext, Depends(get_context)],
):
    """Login with email and password."""
    user = authenticate_user(ctx.db, credentials.email, credentials.password)
    if not user:
        logger.info(f"Failed login for {credentials.email}")
        raise InvalidCredentialsError()

    return issue_token(ctx, user)


@router.post("/users", response_model=TokenResponse)
def register(
    user_data: UserRegister,
    ctx: Annotated[AppContext, Depends(get_context)],
):
    """Register a new user and log them in."""
    # Check if user already exists
    if get_user_by_email(ctx.db, user_data.email):
        raise DuplicateUserError()

    user = create_user(ctx.db, user_data.name, user_data.email, user_data.password)
    return issue_token(ctx, user)
