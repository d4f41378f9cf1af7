"""Password hashing for the asyncpg user store.

PBKDF2-HMAC-SHA256 through ``cryptography``; the encoded form is
``pbkdf2_sha256$<iterations>$<salt>$<hash>`` with urlsafe base64 parts.
"""

import base64
import os

from cryptography.exceptions import InvalidKey
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC


ALGORITHM = "pbkdf2_sha256"
SALT_BYTES = 16
KEY_LENGTH = 32


def _kdf(salt: bytes, iterations: int) -> PBKDF2HMAC:
    return PBKDF2HMAC(
        algorithm=hashes.SHA256(),
        length=KEY_LENGTH,
        salt=salt,
        iterations=iterations,
    )


def hash_password(password: str, iterations: int) -> str:
    """Derive an encoded hash for ``password`` with a fresh salt."""
    salt = os.urandom(SALT_BYTES)
    derived = _kdf(salt, iterations).derive(password.encode("utf-8"))
    return "$".join([
        ALGORITHM,
        str(iterations),
        base64.urlsafe_b64encode(salt).decode("ascii"),
        base64.urlsafe_b64encode(derived).decode("ascii"),
    ])


def verify_password(password: str, encoded: str) -> bool:
    """Check ``password`` against an encoded hash."""
    try:
        algorithm, iterations, salt, expected = encoded.split("$")
    except ValueError:
        return False
    if algorithm != ALGORITHM:
        return False

    try:
        _kdf(base64.urlsafe_b64decode(salt), int(iterations)).verify(
            password.encode("utf-8"), base64.urlsafe_b64decode(expected)
        )
    except (InvalidKey, ValueError):
        return False
    return True
