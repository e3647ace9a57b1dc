"""User data access.

Keeps the ORM queries for the ``users`` table out of routes and services.
"""
from typing import Sequence

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from signup_api.core.errors import UniquenessConflict
from signup_api.models.user import User


def create_user(db: Session, username: str, email: str, password_hash: str) -> User:
    """Insert a user.

    Raises UniquenessConflict when the e-mail is taken. Any other integrity
    error propagates unchanged.
    """
    user = User(username=username, email=email, password=password_hash)
    db.add(user)
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        if db.query(User.id).filter(User.email == email).first() is None:
            raise
        raise UniquenessConflict(email) from exc
    db.refresh(user)
    return user


def find_all(db: Session) -> Sequence[User]:
    return db.query(User).order_by(User.id).all()


def find_by_email(db: Session, email: str) -> User | None:
    return db.query(User).filter(User.email == email).first()


def truncate(db: Session) -> None:
    """Remove every user. Used to reset state between tests."""
    db.query(User).delete()
    db.commit()
