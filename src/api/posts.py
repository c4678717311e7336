"""Post API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.api.dependencies import AppContext, get_context, get_current_user_id
from src.errors import NotFoundError
from src.schemas.post import MessageResponse, PostCreate, PostResponse, PostUpdate
from src.services import posts as post_service
from src.services.auth import get_user_by_id

router = APIRouter(prefix="/api/posts", tags=["posts"])


@router.get("", response_model=list[PostResponse])
def get_posts(
    user_id: Annotated[str, Depends(get_current_user_id)],
    ctx: Annotated[AppContext, Depends(get_context)],
):
    """Get all posts, newest first."""
    return post_service.list_posts(ctx.db)


@router.get("/{post_id}", response_model=PostResponse)
def get_post(
    post_id: str,
    user_id: Annotated[str, Depends(get_current_user_id)],
    ctx: Annotated[AppContext, Depends(get_context)],
):
    """Get a single post."""
    return post_service.get_post(ctx.db, post_id)


@router.post("", response_model=PostResponse)
def create_post(
    post_data: PostCreate,
    user_id: Annotated[str, Depends(get_current_user_id)],
    ctx: Annotated[AppContext, Depends(get_context)],
):
    """Create a post owned by the current user."""
    # Tokens are not revoked, so the owner may have been removed since it was issued
    if get_user_by_id(ctx.db, user_id) is None:
        raise NotFoundError("User not found")

    return post_service.create_post(ctx.db, user_id, post_data.title, post_data.body)


@router.put("/{post_id}", response_model=PostResponse)
def update_post(
    post_id: str,
    post_data: PostUpdate,
    user_id: Annotated[str, Depends(get_current_user_id)],
    ctx: Annotated[AppContext, Depends(get_context)],
):
    """Update the title and/or body of a post the current user owns."""
    return post_service.update_post(
        ctx.db, post_id, user_id, title=post_data.title, body=post_data.body
    )


@router.delete("/{post_id}", response_model=MessageResponse)
def delete_post(
    post_id: str,
    user_id: Annotated[str, Depends(get_current_user_id)],
    ctx: Annotated[AppContext, Depends(get_context)],
):
    """Delete a post the current user owns."""
    post_service.delete_post(ctx.db, post_id, user_id)
    return MessageResponse(msg="Post removed!")
