"""Form input checks run before anything reaches the stores"""

import re
from typing import Tuple

from ..utils.exceptions import ValidationError

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def _clean(value) -> str:
    return (value or "").strip()


def validate_signup(name: str, email: str, password: str) -> Tuple[str, str, str]:
    """Trim and check signup fields; returns the cleaned values"""
    name, email, password = _clean(name), _clean(email), _clean(password)
    if not name or not email or not password:
        raise ValidationError("Please fill in all fields.")
    if not EMAIL_PATTERN.match(email):
        raise ValidationError("Please enter a valid email address.", field="email")
    return name, email, password


def validate_login(email: str, password: str) -> Tuple[str, str]:
    email, password = _clean(email), _clean(password)
    if not email or not password:
        raise ValidationError("Please enter both email and password.")
    return email, password
