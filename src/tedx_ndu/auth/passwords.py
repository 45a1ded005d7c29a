"""Salted scrypt password hashing.

Stored format is ``<derived key hex>.<salt hex>``. The hex salt string itself
is fed to scrypt, which keeps hashes interchangeable with the ones the
previous Node backend wrote into the ``users`` table.
"""

import hashlib
import hmac
import secrets

SCRYPT_N = 16384
SCRYPT_R = 8
SCRYPT_P = 1
KEY_LENGTH = 64
SALT_BYTES = 16


def _derive(password: str, salt: str) -> bytes:
    return hashlib.scrypt(
        password.encode("utf-8"),
        salt=salt.encode("utf-8"),
        n=SCRYPT_N,
        r=SCRYPT_R,
        p=SCRYPT_P,
        dklen=KEY_LENGTH,
    )


def hash_password(password: str) -> str:
    """Hash password with a fresh random salt"""
    salt = secrets.token_hex(SALT_BYTES)
    return f"{_derive(password, salt).hex()}.{salt}"


def verify_password(password: str, stored: str) -> bool:
    """Verify password against stored hash in constant time"""
    parts = stored.split(".") if stored else []
    if len(parts) != 2 or not parts[1]:
        return False

    hashed, salt = parts
    try:
        expected = bytes.fromhex(hashed)
    except ValueError:
        return False

    return hmac.compare_digest(expected, _derive(password, salt))
