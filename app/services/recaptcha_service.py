"""
Google reCAPTCHA verification for the public contact form.
One POST to siteverify per submission; no retry.
"""
import logging
from typing import Optional

import httpx

from app.config import settings
from app.core.exceptions import UpstreamVerificationException

logger = logging.getLogger(__name__)


async def verify_recaptcha(token: str, remote_ip: Optional[str] = None) -> bool:
    """
    Returns Google's verdict for the token.
    Raises UpstreamVerificationException (502) when Google cannot be reached.
    """
    data = {"secret": settings.recaptcha_secret_key, "response": token}
    if remote_ip:
        data["remoteip"] = remote_ip

    try:
        async with httpx.AsyncClient(timeout=settings.recaptcha_timeout_seconds) as client:
            response = await client.post(settings.recaptcha_verify_url, data=data)
            response.raise_for_status()
    except httpx.HTTPError as exc:
        logger.error(f"reCAPTCHA verification request failed: {exc}")
        raise UpstreamVerificationException(
            "reCAPTCHA verification is unavailable. Please try again later.",
            unreachable=True,
        ) from exc

    result = response.json()
    if not result.get("success"):
        logger.info(f"reCAPTCHA rejected submission: {result.get('error-codes')}")
    return bool(result.get("success"))
