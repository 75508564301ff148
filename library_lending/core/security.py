"""Password hashing for customer credentials."""

from werkzeug.security import check_password_hash, generate_password_hash


def hash_password(raw: str) -> str:
    """Return a salted hash; the raw password is never stored."""
    return generate_password_hash(raw)


def verify_password(password_hash: str, raw: str) -> bool:
    return check_password_hash(password_hash, raw)
