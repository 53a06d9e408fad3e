"""
Credential hashing for the `senha` field.
"""

from __future__ import annotations

import bcrypt

from core import settings

# bcrypt only reads the first 72 bytes; newer releases reject longer input.
BCRYPT_MAX_BYTES = 72


class CredentialError(ValueError):
    pass


def hash_password(plain_password: str) -> str:
    password = (plain_password or "").encode("utf-8")[:BCRYPT_MAX_BYTES]
    if not password:
        raise CredentialError("Password is empty.")
    return bcrypt.hashpw(password, bcrypt.gensalt(rounds=settings.bcrypt_rounds())).decode("utf-8")
