"""Security utilities for JWT and password handling."""

from datetime import datetime, timedelta, timezone
from typing import Optional
import hashlib
import hmac
import os
from jose import JWTError, jwt
from components.core.config import get_settings

settings = get_settings()

HASH_ITERATIONS = 100_000


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    salt, _, stored_hash = hashed_password.partition(':')
    if not stored_hash:
        return False
    return hmac.compare_digest(get_password_hash(plain_password, salt), hashed_password)


def get_password_hash(password: str, salt: Optional[str] = None) -> str:
    """Generate a salted PBKDF2-SHA256 password hash as `salt:hexdigest`."""
    if salt is None:
        salt = os.urandom(16).hex()
    digest = hashlib.pbkdf2_hmac("sha256", password.encode(), salt.encode(), HASH_ITERATIONS)
    return f"{salt}:{digest.hex()}"


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """Create a new JWT access token."""
    to_encode = data.copy()
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode.update({"exp": datetime.now(timezone.utc) + expires_delta})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def verify_token(token: str) -> Optional[dict]:
    """Verify a JWT token and return its payload."""
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        return None
