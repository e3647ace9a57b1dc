"""Declarative field rules for user registration.

Each field owns an ordered chain of rules. Every field is checked, but a
field reports only its first failing rule. Failures are translation keys.
"""
import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional

import email_validator
from email_validator import EmailNotValidError, validate_email


USERNAME_MIN_LENGTH = 4
USERNAME_MAX_LENGTH = 32
PASSWORD_MIN_LENGTH = 6
PASSWORD_PATTERN = re.compile(r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d).*$")

FIELD_ORDER = ("username", "email", "password")

# Only the address format is checked. Reserved names such as .local or .test
# are still well-formed, the dotted-domain requirement stays in force.
email_validator.SPECIAL_USE_DOMAIN_NAMES.clear()


@dataclass(frozen=True)
class Rule:
    key: str
    check: Callable[[Any], bool]


def is_present(value: Any) -> bool:
    return value is not None and value != ""


def has_length(min_length: int, max_length: Optional[int] = None) -> Callable[[str], bool]:
    def check(value: str) -> bool:
        if len(value) < min_length:
            return False
        return max_length is None or len(value) <= max_length
    return check


def is_email(value: str) -> bool:
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def matches_password_pattern(value: str) -> bool:
    return PASSWORD_PATTERN.match(value) is not None


def build_rules(email_exists: Optional[Callable[[str], bool]] = None) -> Dict[str, List[Rule]]:
    """Rule chains per field, in reporting order.

    ``email_exists`` adds the uniqueness rule at the end of the email chain,
    so it only runs against a present, well-formed address.
    """
    email_rules = [
        Rule("email_null", is_present),
        Rule("email_invalid", is_email),
    ]
    if email_exists is not None:
        email_rules.append(Rule("email_inuse", lambda value: not email_exists(value)))

    return {
        "username": [
            Rule("username_null", is_present),
            Rule("username_size", has_length(USERNAME_MIN_LENGTH, USERNAME_MAX_LENGTH)),
        ],
        "email": email_rules,
        "password": [
            Rule("password_null", is_present),
            Rule("password_size", has_length(PASSWORD_MIN_LENGTH)),
            Rule("password_pattern", matches_password_pattern),
        ],
    }


def validate_field(value: Any, rules: List[Rule]) -> Optional[str]:
    """Return the key of the first failing rule, or None."""
    for rule in rules:
        if not rule.check(value):
            return rule.key
    return None


def validate_user(
    payload: Mapping[str, Any],
    email_exists: Optional[Callable[[str], bool]] = None,
) -> Dict[str, str]:
    """Validate a registration payload; returns field -> key for failures."""
    errors: Dict[str, str] = {}
    for field, rules in build_rules(email_exists).items():
        key = validate_field(payload.get(field), rules)
        if key is not None:
            errors[field] = key
    return errors
