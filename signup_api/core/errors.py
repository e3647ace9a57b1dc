"""Registration error types."""
from typing import Dict


class RegistrationValidationError(Exception):
    """One or more fields failed validation.

    ``errors`` maps field name to a translation key, in field order.
    """

    def __init__(self, errors: Dict[str, str]):
        super().__init__(", ".join(f"{field}={key}" for field, key in errors.items()))
        self.errors = dict(errors)


class UniquenessConflict(RegistrationValidationError):
    """The e-mail address is already registered."""

    def __init__(self, email: str | None = None):
        super().__init__({"email": "email_inuse"})
        self.email = email
