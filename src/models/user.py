"""User model."""

from sqlalchemy import Column, String

from src.database import Base
from src.models.mixins import IdMixin, TimestampMixin


class User(Base, IdMixin, TimestampMixin):
    """A registered author; the password is only ever stored as a hash."""

    __tablename__ = "users"

    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
