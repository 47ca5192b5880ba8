"""Password hashing. Only salted bcrypt hashes are ever persisted."""

import bcrypt

from ..utils.exceptions import ValidationError

DEFAULT_ROUNDS = 12
# bcrypt only uses the first 72 bytes of input
MAX_PASSWORD_BYTES = 72


def hash_password(password: str, rounds: int = DEFAULT_ROUNDS) -> str:
    """Hash a password using bcrypt"""
    encoded = password.encode("utf-8")
    if len(encoded) > MAX_PASSWORD_BYTES:
        raise ValidationError(
            f"Password must be at most {MAX_PASSWORD_BYTES} bytes", field="password"
        )
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(encoded, salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Verify a password against its hash (constant-time comparison in bcrypt)"""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        return False
