"""Post storage and the ownership guard for post mutations."""

import logging

from sqlalchemy.orm import Session

from src.errors import AuthorizationError, NotFoundError
from src.models.post import Post

logger = logging.getLogger(__name__)


def authorize(resource_owner_id: str | None, requester_id: str | None) -> bool:
    """Return True only when both ids are present and identical."""
    if not resource_owner_id or not requester_id:
        return False
    return str(resource_owner_id) == str(requester_id)


def list_posts(db: Session) -> list[Post]:
    """All posts, newest first."""
    return db.query(Post).order_by(Post.date.desc()).all()


def get_post(db: Session, post_id: str) -> Post:
    """Get a post by id or raise NotFoundError."""
    post = db.query(Post).filter(Post.id == post_id).first()
    if not post:
        raise NotFoundError("Post not found!")
    return post


def get_owned_post(db: Session, post_id: str, user_id: str) -> Post:
    """Get a post the user is allowed to modify.

    Raises NotFoundError when the id does not resolve and AuthorizationError when
    the post belongs to someone else.
    """
    post = get_post(db, post_id)
    if not authorize(post.user_id, user_id):
        logger.warning(f"User {user_id} denied access to post {post_id} owned by {post.user_id}")
        raise AuthorizationError()
    return post


def create_post(db: Session, user_id: str, title: str, body: str) -> Post:
    post = Post(user_id=user_id, title=title, body=body)
    db.add(post)
    db.commit()
    db.refresh(post)
    logger.info(f"User {user_id} created post {post.id}")
    return post


def update_post(
    db: Session, post_id: str, user_id: str, title: str | None = None, body: str | None = None
) -> Post:
    """Replace the title and/or body of a post owned by ``user_id``."""
    post = get_owned_post(db, post_id, user_id)
    if title is not None:
        post.title = title
    if body is not None:
        post.body = body
    db.commit()
    db.refresh(post)
    return post


def delete_post(db: Session, post_id: str, user_id: str) -> None:
    post = get_owned_post(db, post_id, user_id)
    db.delete(post)
    db.commit()
    logger.info(f"User {user_id} deleted post {post_id}")
