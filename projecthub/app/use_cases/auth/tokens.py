"""
Refresh token helpers.

A refresh token is ``<session_id>.<secret>``: the session id makes lookup a
primary-key read, the secret is only ever stored as a bcrypt hash.
"""

import secrets
from typing import Optional, Tuple
from uuid import UUID

import bcrypt


def hash_secret(secret: str) -> str:
    return bcrypt.hashpw(secret.encode("utf-8"), bcrypt.gensalt(12)).decode("utf-8")


def new_refresh_secret() -> Tuple[str, str]:
    """Returns (secret, bcrypt hash of secret)"""
    secret = secrets.token_urlsafe(32)
    return secret, hash_secret(secret)


def format_refresh_token(session_id: UUID, secret: str) -> str:
    return f"{session_id}.{secret}"


def parse_refresh_token(token: str) -> Optional[Tuple[UUID, str]]:
    session_part, _, secret = token.partition(".")
    if not secret:
        return None
    try:
        return UUID(session_part), secret
    except ValueError:
        return None


def secret_matches(secret: str, secret_hash: str) -> bool:
    try:
        return bcrypt.checkpw(secret.encode("utf-8"), secret_hash.encode("utf-8"))
    except ValueError:
        return False
