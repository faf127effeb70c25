"""
Security utilities: password hashing and JWT token management.
Uses PyJWT (not python-jose).
"""
import jwt
from jwt.exceptions import InvalidTokenError
from passlib.context import CryptContext
from datetime import datetime, timedelta, timezone
from app.config import settings

# ── Password Hashing ──────────────────────────────────────────────────────────
# Used for traveler accounts and for ADMIN_PASSWORD_HASH.
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


# ── JWT Tokens ────────────────────────────────────────────────────────────────

def create_access_token(subject: str, email: str) -> str:
    """
    Admin access token (default 1 day).
    PyJWT 2.x returns str from jwt.encode(); datetimes must be timezone-aware.
    """
    now = datetime.now(timezone.utc)
    payload = {
        "sub": subject,
        "email": email,
        "type": "access",
        "iat": now,
        "exp": now + timedelta(minutes=settings.access_token_expire_minutes),
    }
    return jwt.encode(payload, settings.secret_key, algorithm=settings.algorithm)


def decode_access_token(token: str) -> dict:
    """
    Decodes and validates an access token.
    Raises jwt.exceptions.InvalidTokenError (or subclass) on any failure;
    the caller converts it into an HTTPException.
    """
    payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    if payload.get("type") != "access":
        raise InvalidTokenError("Not an access token")
    return payload
