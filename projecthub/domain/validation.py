"""
Input rules shared by signup, profile and invitation use cases.
"""

import re
from typing import Dict, List, Optional

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
USERNAME_PATTERN = re.compile(r"^[A-Za-z0-9](?:[A-Za-z0-9_-]{1,18})[A-Za-z0-9]$")
PASSWORD_SPECIALS = '!@#$%^&*(),.?":{}|<>'
PASSWORD_MAX_BYTES = 72

USERNAME_RULES = (
    "Username must be 3-20 characters, contain only letters, numbers, hyphens, "
    "and underscores, and start/end with a letter or number"
)


def is_email(value: str) -> bool:
    return bool(EMAIL_PATTERN.match(value))


def is_valid_username(value: str) -> bool:
    return bool(USERNAME_PATTERN.match(value))


def password_fits_bcrypt(password: str) -> bool:
    """bcrypt only accepts secrets up to 72 bytes"""
    return len(password.encode("utf-8")) <= PASSWORD_MAX_BYTES


def password_requirements(password: str) -> Dict[str, bool]:
    """Which strength requirements the password meets"""
    return {
        "length": len(password) >= 10,
        "uppercase": any(c.isupper() for c in password),
        "lowercase": any(c.islower() for c in password),
        "number": any(c.isdigit() for c in password),
        "special": any(c in PASSWORD_SPECIALS for c in password),
        "max_bytes": password_fits_bcrypt(password),
    }


def missing_password_requirements(password: str) -> List[str]:
    return [name for name, met in password_requirements(password).items() if not met]


def normalize_tags(tags: Optional[List[str]]) -> List[str]:
    """Trim, drop blanks and deduplicate (case-sensitive), keeping first occurrence order"""
    seen = []
    for tag in tags or []:
        cleaned = tag.strip()
        if cleaned and cleaned not in seen:
            seen.append(cleaned)
    return seen


def normalize_optional_text(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    cleaned = value.strip()
    return cleaned or None
