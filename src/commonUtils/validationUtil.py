import re
from typing import Optional

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

NAME_ERROR = "Please enter your name."
EMAIL_ERROR = "Please enter a valid email."
PHONE_ERROR = "Please enter a valid phone number."

MIN_PHONE_DIGITS = 7
MAX_PHONE_DIGITS = 15


def validate_name(name: str) -> bool:
    return bool(name.strip())


def validate_email(email: str) -> bool:
    return EMAIL_PATTERN.fullmatch(email) is not None


def validate_phone(phone: str) -> bool:
    """Basic international-friendly check: spaces, '+' and dashes are ignored, only 0-9 are counted."""
    digits = sum(1 for ch in phone if ch in "0123456789")
    return MIN_PHONE_DIGITS <= digits <= MAX_PHONE_DIGITS


def first_validation_error(name: str, email: str, phone: str) -> Optional[str]:
    """
    Run the checks in fixed order (name, email, phone) and return the message
    of the first one that fails, or None when everything passes.
    Only one error is ever shown at a time.
    """
    if not validate_name(name):
        return NAME_ERROR
    if not validate_email(email):
        return EMAIL_ERROR
    if not validate_phone(phone):
        return PHONE_ERROR
    return None
