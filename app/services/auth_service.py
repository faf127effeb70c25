"""
Auth service: admin credential verification and token issuing.

The admin account is not a database row. Who counts as the admin is decided
by a CredentialVerifier; the default one reads ADMIN_EMAIL plus either
ADMIN_PASSWORD_HASH (bcrypt) or ADMIN_PASSWORD from settings. Swap it through
the get_credential_verifier dependency to plug in a real identity provider.
"""
import hmac
import logging
from typing import Optional

from app.config import Settings
from app.core.exceptions import CredentialsException
from app.core.security import create_access_token, pwd_context, verify_password

logger = logging.getLogger(__name__)

ADMIN_SUBJECT = "admin"

# Verified against when no hash is configured so both branches cost one bcrypt check.
_DUMMY_HASH: str = pwd_context.hash("__dummy_timing_prevention__")


class CredentialVerifier:
    """Interface: return True when (email, password) identifies the admin."""

    def verify(self, email: str, password: str) -> bool:
        raise NotImplementedError


class SettingsCredentialVerifier(CredentialVerifier):
    def __init__(self, settings: Settings):
        self.admin_email = settings.admin_email
        self.admin_password = settings.admin_password
        self.admin_password_hash = settings.admin_password_hash

    def verify(self, email: str, password: str) -> bool:
        email_ok = hmac.compare_digest(email.strip().lower(), self.admin_email.strip().lower())
        password_ok = self._password_matches(password)
        return email_ok and password_ok

    def _password_matches(self, password: str) -> bool:
        if self.admin_password_hash:
            return verify_password(password, self.admin_password_hash)
        pwd_context.verify(password, _DUMMY_HASH)
        if not self.admin_password:
            logger.warning("No admin password configured; admin login is disabled")
            return False
        return hmac.compare_digest(password.encode(), self.admin_password.encode())


def login_admin(verifier: CredentialVerifier, email: str, password: str, client_ip: Optional[str] = None) -> str:
    """
    Returns an access token for valid admin credentials.
    Same error for wrong email and wrong password.
    """
    if not verifier.verify(email, password):
        logger.warning(f"Failed admin login: email={email}, ip={client_ip}")
        raise CredentialsException("Invalid credentials")
    return create_access_token(ADMIN_SUBJECT, email)
