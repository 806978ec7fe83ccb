"""Password hashing."""

from passlib.context import CryptContext

_password_context = CryptContext(schemes=["argon2"], deprecated="auto")


def hash_password(password: str) -> str:
    """Hash a password with Argon2id."""
    return _password_context.hash(password)


def verify_password(password: str, hashed: str) -> bool:
    return _password_context.verify(password, hashed)
