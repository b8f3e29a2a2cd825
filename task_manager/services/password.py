"""Password hashing backed by bcrypt.

``bcrypt_sha256`` digests the password with SHA-256 before bcrypt, so every
byte of the password counts and NUL bytes are accepted.
"""
from passlib.context import CryptContext

_pwd_context = CryptContext(schemes=["bcrypt_sha256"], deprecated="auto")

# Verified against when the username is unknown so both login failures cost the same
_DUMMY_HASH = _pwd_context.hash("not-a-real-password")


def hash_password(password: str) -> str:
    """Hash a plaintext password with a fresh random salt."""
    return _pwd_context.hash(password)


def verify_password(password: str, hashed: str) -> bool:
    """Verify a password against its hash. Unrecognised hashes never match."""
    try:
        return _pwd_context.verify(password, hashed)
    except ValueError:
        return False


def verify_dummy(password: str) -> bool:
    """Spend one verification on a throwaway hash; always returns False."""
    verify_password(password, _DUMMY_HASH)
    return False
