# app/utils/security.py
"""
Password hashing and signed access tokens.

Passwords are hashed with Argon2 through passlib, which salts every hash
independently. Access tokens are HS256 JWTs carrying the user id (``sub``)
and role; there is no server-side session, so logging out is simply the
client discarding its token.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import JWTError, jwt
from passlib.context import CryptContext

from app.config.settings import Settings

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")


def hash_password(password: str) -> str:
    """Hash a password with a fresh salt."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a plain password against a stored hash.

    Hashes that passlib cannot identify (e.g. placeholder seed values)
    never match.
    """
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        logger.warning("Stored password hash has an unrecognised format")
        return False


def create_access_token(
    data: Dict[str, Any],
    settings: Settings,
    expires_delta: Optional[timedelta] = None,
) -> str:
    """
    Create a signed access token.

    Args:
        data: Claims to embed (``sub`` and ``role``)
        settings: Application settings holding the secret and default expiry
        expires_delta: Optional custom lifetime

    Returns:
        Encoded JWT string
    """
    to_encode = data.copy()
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    expire = datetime.now(timezone.utc) + expires_delta
    to_encode.update({"exp": expire})

    token = jwt.encode(to_encode, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)
    logger.debug(f"Access token issued for sub={data.get('sub')}, expires at {expire}")
    return token


def verify_token(token: str, settings: Settings) -> Optional[dict]:
    """Verify signature and expiry; return the payload or None."""
    try:
        return jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    except JWTError as e:
        logger.info(f"Token verification failed: {e}")
        return None
