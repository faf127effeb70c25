"""
Contact router: public enquiry form.

  POST /contact → verify reCAPTCHA, then email the submission to the agency

Rate limited per client IP to keep spam bots off the SMTP account.
"""
import logging

from fastapi import APIRouter, Request
from fastapi_mail.errors import ConnectionErrors

from app.core.exceptions import MailDeliveryException, UpstreamVerificationException
from app.core.rate_limiter import limiter
from app.schemas.common import MessageResponse
from app.schemas.contact import ContactRequest
from app.services import email_service, recaptcha_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=MessageResponse)
@limiter.limit("5/minute")
async def submit_contact(request: Request, body: ContactRequest):
    client_ip = request.client.host if request.client else None
    if not await recaptcha_service.verify_recaptcha(body.recaptcha_token, client_ip):
        raise UpstreamVerificationException("Invalid reCAPTCHA")

    try:
        await email_service.send_contact_email(body)
    except ConnectionErrors as exc:
        logger.error(f"Contact email delivery failed: {exc}")
        raise MailDeliveryException() from exc

    return {"message": "Message sent successfully!"}
