"""Scrypt password hashing for the in-memory account backend."""

from __future__ import annotations

import os
from dataclasses import dataclass

from cryptography.exceptions import InvalidKey
from cryptography.hazmat.primitives.kdf.scrypt import Scrypt

_SALT_BYTES = 16
_KEY_LENGTH = 32
_N = 2**14
_R = 8
_P = 1


@dataclass(frozen=True)
class PasswordHash:
    """Salted scrypt digest of a password."""

    salt: bytes
    digest: bytes


def _kdf(salt: bytes) -> Scrypt:
    return Scrypt(salt=salt, length=_KEY_LENGTH, n=_N, r=_R, p=_P)


def hash_password(password: str) -> PasswordHash:
    salt = os.urandom(_SALT_BYTES)
    return PasswordHash(salt=salt, digest=_kdf(salt).derive(password.encode()))


def verify_password(password: str, stored: PasswordHash) -> bool:
    """Constant-time check of ``password`` against ``stored``."""
    try:
        _kdf(stored.salt).verify(password.encode(), stored.digest)
    except InvalidKey:
        return False
    return True
