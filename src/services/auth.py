"""Authentication service for password hashing, session tokens and user records."""

import logging
from datetime import UTC, datetime, timedelta

from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from src.errors import DuplicateUserError, ExpiredTokenError, InvalidTokenError
from src.models.user import User

logger = logging.getLogger(__name__)

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash.

    Returns False for a wrong password; raises ValueError if the hash itself is malformed.
    """
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password with a fresh random salt."""
    return pwd_context.hash(password)


def create_access_token(
    user_id: str, secret: str, ttl: timedelta, algorithm: str = "HS256"
) -> str:
    """Create a signed JWT that identifies ``user_id`` until ``ttl`` has elapsed."""
    issued_at = datetime.now(UTC)
    to_encode = {
        "sub": user_id,
        "iat": issued_at,
        "exp": issued_at + ttl,
    }
    return jwt.encode(to_encode, secret, algorithm=algorithm)


def decode_access_token(token: str, secret: str, algorithm: str = "HS256") -> str:
    """Verify a JWT and return the user id it was issued for.

    Raises ExpiredTokenError once the token is past its expiry and InvalidTokenError
    for a bad signature, a malformed token or a missing subject. Whether the user
    still exists is left to the caller.
    """
    try:
        payload = jwt.decode(token, secret, algorithms=[algorithm])
    except ExpiredSignatureError as e:
        raise ExpiredTokenError() from e
    except JWTError as e:
        raise InvalidTokenError() from e

    user_id = payload.get("sub")
    if not user_id:
        raise InvalidTokenError()
    return user_id


def authenticate_user(db: Session, email: str, password: str) -> User | None:
    """Authenticate a user by email and password."""
    user = get_user_by_email(db, email)
    if not user:
        return None
    if not verify_password(password, user.password_hash):
        return None
    return user


def get_user_by_email(db: Session, email: str) -> User | None:
    """Get a user by email."""
    return db.query(User).filter(User.email == email).first()


def get_user_by_id(db: Session, user_id: str) -> User | None:
    return db.query(User).filter(User.id == user_id).first()


def create_user(db: Session, name: str, email: str, password: str) -> User:
    """Create a new user, storing only the password hash.

    Raises DuplicateUserError if the email is taken, including when a concurrent
    registration wins the unique constraint.
    """
    user = User(name=name, email=email, password_hash=get_password_hash(password))
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.info(f"Registration rejected, email already in use: {email}")
        raise DuplicateUserError() from e
    db.refresh(user)
    logger.info(f"Registered user {user.id}")
    return user
