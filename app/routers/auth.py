"""
Auth router: admin login.

  POST /auth/login → {email, password} → bearer token for the dashboards

There is no refresh token; the access token lives for ACCESS_TOKEN_EXPIRE_MINUTES
(one day by default) and the dashboard logs in again afterwards.
"""
from fastapi import APIRouter, Depends, Request

from app.core.dependencies import get_credential_verifier
from app.core.rate_limiter import limiter
from app.schemas.auth import LoginRequest, TokenResponse
from app.services import auth_service
from app.services.auth_service import CredentialVerifier

router = APIRouter()


@router.post("/login", response_model=TokenResponse)
@limiter.limit("10/minute")
def login(
    request: Request,
    body: LoginRequest,
    verifier: CredentialVerifier = Depends(get_credential_verifier),
):
    """Exchange admin credentials for an access token. 401 on any mismatch."""
    client_ip = request.client.host if request.client else None
    access_token = auth_service.login_admin(verifier, body.email, body.password, client_ip)
    return TokenResponse(access_token=access_token)
