"""
Email service using fastapi-mail over SMTP.

Contact form submissions are sent as an HTML email to the agency inbox
(CONTACT_RECIPIENT, falling back to MAIL_USERNAME).

fastapi-mail TLS settings:
  - Port 587: MAIL_STARTTLS=True, MAIL_SSL_TLS=False
  - Port 465: MAIL_SSL_TLS=True, MAIL_STARTTLS=False
"""
from html import escape

from fastapi_mail import FastMail, MessageSchema, ConnectionConfig, MessageType
from app.config import settings
from app.schemas.contact import ContactRequest

# Build connection config once at module level — don't rebuild on every request
mail_config = ConnectionConfig(
    MAIL_USERNAME=settings.mail_username,
    MAIL_PASSWORD=settings.mail_password,
    MAIL_FROM=settings.mail_from,
    MAIL_PORT=settings.mail_port,
    MAIL_SERVER=settings.mail_server,
    MAIL_STARTTLS=settings.mail_starttls,
    MAIL_SSL_TLS=settings.mail_ssl_tls,
    USE_CREDENTIALS=True,
    VALIDATE_CERTS=True,
)

fast_mail = FastMail(mail_config)


def render_contact_body(submission: ContactRequest) -> str:
    """HTML body for a contact submission. Every value is escaped."""
    rows = [
        ("Name", submission.name),
        ("Father's Name", submission.father_name),
        ("NIC", submission.nic or "N/A"),
        ("Category", submission.category),
        ("Email", submission.email or "N/A"),
        ("Phone", submission.phone),
        ("Service", submission.service),
        ("Message", submission.message or "N/A"),
    ]
    lines = "\n".join(
        f"<p><strong>{escape(label)}:</strong> {escape(str(value))}</p>" for label, value in rows
    )
    return f"<h2>New Contact Form Submission</h2>\n{lines}"


async def send_contact_email(submission: ContactRequest) -> None:
    """
    Deliver a contact submission. Awaited directly (not a background task)
    so the caller can report delivery failures.
    Raises fastapi_mail.errors.ConnectionErrors on SMTP failure.
    """
    message = MessageSchema(
        subject=f"New Contact Form Submission from {submission.name}",
        recipients=[settings.contact_inbox],
        body=render_contact_body(submission),
        subtype=MessageType.html,
        reply_to=[submission.email] if submission.email else [],
    )

    await fast_mail.send_message(message)
