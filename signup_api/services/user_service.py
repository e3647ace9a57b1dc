"""User registration service."""
import logging
from typing import Any, Mapping

from sqlalchemy.orm import Session

from signup_api.core.errors import RegistrationValidationError, UniquenessConflict
from signup_api.core.security import get_password_hash
from signup_api.models.user import User
from signup_api.repositories import user_repository
from signup_api.services.validation import validate_user


logger = logging.getLogger(__name__)


def register_user(db: Session, payload: Mapping[str, Any]) -> User:
    """
    Validate a registration payload and persist the new user.
    
    Args:
        db: Database session
        payload: Mapping with 'username', 'email' and 'password'
        
    Returns:
        The created User
        
    Raises:
        RegistrationValidationError: one or more fields failed, including
            an e-mail that is already registered
    """
    errors = validate_user(
        payload,
        email_exists=lambda email: user_repository.find_by_email(db, email) is not None,
    )
    if errors:
        logger.warning("Registration rejected: %s", errors)
        raise RegistrationValidationError(errors)

    try:
        user = user_repository.create_user(
            db,
            username=payload["username"],
            email=payload["email"],
            password_hash=get_password_hash(payload["password"]),
        )
    except UniquenessConflict:
        logger.warning("Registration lost a race on a duplicate e-mail")
        raise

    logger.info("User %s created", user.id)
    return user
