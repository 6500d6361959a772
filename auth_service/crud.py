"""
User persistence helpers used by the auth handlers.
"""
import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from .auth import hash_password
from .errors import UsernameTaken
from .models import User

logger = logging.getLogger(__name__)


def find_user_by_username(db: Session, username: str) -> Optional[User]:
    return (
        db.query(User)
        .filter(User.username == username, User.deleted_at.is_(None))
        .first()
    )


def find_user_by_id(db: Session, user_id: int) -> Optional[User]:
    return (
        db.query(User)
        .filter(User.id == user_id, User.deleted_at.is_(None))
        .first()
    )


def create_user(db: Session, username: str, password: str) -> User:
    """
    Store a new user with a hashed password.

    Raises:
        UsernameTaken: If the username violates the unique constraint
    """
    user = User(username=username, password=hash_password(password))
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.info("Username conflict on insert: username=%s", username)
        raise UsernameTaken() from e
    db.refresh(user)
    return user
