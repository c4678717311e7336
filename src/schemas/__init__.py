"""Pydantic schemas for API requests and responses."""

from src.schemas.auth import TokenResponse, UserLogin, UserRegister, UserResponse
from src.schemas.post import MessageResponse, PostCreate, PostResponse, PostUpdate

__all__ = [
    "UserRegister",
    "UserLogin",
    "TokenResponse",
    "UserResponse",
    "PostCreate",
    "PostUpdate",
    "PostResponse",
    "MessageResponse",
]
