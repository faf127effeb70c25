"""
FastAPI dependencies used across routers.
Keep this file lean — only auth, DB and collaborator wiring go here.
Business logic belongs in services/.

Tests replace the collaborators through app.dependency_overrides.
"""
from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from jwt.exceptions import InvalidTokenError

from app.config import settings
from app.core.security import decode_access_token
from app.core.exceptions import CredentialsException
from app.services.auth_service import ADMIN_SUBJECT, CredentialVerifier, SettingsCredentialVerifier
from app.services.cloudinary_service import CloudinaryMediaStore

# tokenUrl must match the actual login endpoint path
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/login")


def get_media_store() -> CloudinaryMediaStore:
    return CloudinaryMediaStore()


def get_credential_verifier() -> CredentialVerifier:
    return SettingsCredentialVerifier(settings)


def get_current_admin(token: str = Depends(oauth2_scheme)) -> dict:
    """
    Validates the admin JWT and returns its claims.

    decode_access_token rejects a bad signature, an expired token or a
    non-access token; this dependency then requires the 'sub' claim to be
    the admin subject.
    """
    try:
        payload = decode_access_token(token)
    except InvalidTokenError:
        raise CredentialsException()

    if payload.get("sub") != ADMIN_SUBJECT:
        raise CredentialsException()
    return payload
