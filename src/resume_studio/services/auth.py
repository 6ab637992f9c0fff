"""Password hashing and account helpers.

Passwords are stored as salted PBKDF2 hashes. The helpers take an open
session so callers control the transaction.
"""

from __future__ import annotations

import hashlib
import hmac
import os

from sqlalchemy import select
from sqlalchemy.orm import Session

from resume_studio.data.models import User

_PBKDF2_ITERATIONS = 100_000
_SALT_BYTES = 16


def hash_password(password: str) -> str:
    """Return a salted PBKDF2 hash for the given password.

    The result is stored as ``<salt_hex>:<hash_hex>``.
    """
    salt = os.urandom(_SALT_BYTES)
    derived = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, _PBKDF2_ITERATIONS)
    return f"{salt.hex()}:{derived.hex()}"


def verify_password(password: str, stored_hash: str) -> bool:
    """Verify a password against a stored ``salt:hash`` string."""
    try:
        salt_hex, hash_hex = stored_hash.split(":", 1)
        salt = bytes.fromhex(salt_hex)
        expected = bytes.fromhex(hash_hex)
    except ValueError:
        return False

    candidate = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, _PBKDF2_ITERATIONS)
    return hmac.compare_digest(candidate, expected)


def normalize_username(username: str) -> str:
    """Canonical account handle: surrounding whitespace is not significant."""
    return username.strip()


def find_user(session: Session, username: str) -> User | None:
    return session.scalars(select(User).where(User.username == username)).first()


def create_user(session: Session, username: str, password: str) -> tuple[User | None, str | None]:
    """Add a new account to *session*.

    Returns:
        Tuple of (user, error message). On success, error is None.
    """
    username_clean = normalize_username(username)
    if not username_clean:
        return None, "Username cannot be empty."
    if not password:
        return None, "Password cannot be empty."
    if find_user(session, username_clean) is not None:
        return None, "User exists"

    user = User(username=username_clean, password_hash=hash_password(password))
    session.add(user)
    session.flush()
    return user, None


def authenticate_user(session: Session, username: str, password: str) -> bool:
    """Return True if *username* exists and *password* matches its hash."""
    username_clean = normalize_username(username)
    if not username_clean or not password:
        return False
    user = find_user(session, username_clean)
    return user is not None and verify_password(password, user.password_hash)
