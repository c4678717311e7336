"""Post model."""

from sqlalchemy import Column, DateTime, ForeignKey, String, Text
from sqlalchemy.orm import relationship

from src.database import Base
from src.models.mixins import IdMixin, utc_now


class Post(Base, IdMixin):
    """A blog post owned by exactly one user."""

    __tablename__ = "posts"

    user_id = Column(String(32), ForeignKey("users.id"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    body = Column(Text, nullable=False)
    date = Column(DateTime(timezone=True), default=utc_now, nullable=False, index=True)

    # Relationships
    owner = relationship("User", backref="posts")
