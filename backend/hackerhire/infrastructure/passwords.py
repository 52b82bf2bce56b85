"""Password Hashing — salted one-way hashes for stored credentials.

Invariants:
    - Plaintext passwords never reach storage; only hash_password() output does
    - verify_password() is the single credential comparison in the codebase

Design Decisions:
    - passlib CryptContext: scheme can be rotated without touching callers
    - pbkdf2_sha256 over bcrypt: pure-hashlib backend, no native extension to
      break across bcrypt releases
"""

from passlib.context import CryptContext

_pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    return _pwd_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    return _pwd_context.verify(password, password_hash)
