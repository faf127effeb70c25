"""
Centralised custom exceptions.
Every failure the API reports maps to one of these, so status codes and
messages stay consistent across the dashboards, auth and contact routes.
"""
from fastapi import HTTPException, status


class ValidationException(HTTPException):
    """Missing or malformed required field."""
    def __init__(self, detail: str = "Invalid request"):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class CredentialsException(HTTPException):
    def __init__(self, detail: str = "Could not validate credentials"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


class NotFoundException(HTTPException):
    def __init__(self, resource: str = "Resource"):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{resource} not found",
        )


class ConflictException(HTTPException):
    def __init__(self, detail: str = "Resource already exists"):
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class PayloadTooLargeException(HTTPException):
    def __init__(self, max_megabytes: int):
        super().__init__(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"File too large. Maximum size is {max_megabytes} MB.",
        )


class UploadException(HTTPException):
    """The media store rejected or failed an upload."""
    def __init__(self, detail: str = "Image upload failed"):
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)


class PersistenceException(HTTPException):
    def __init__(self, detail: str = "Database operation failed"):
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)


class UpstreamVerificationException(HTTPException):
    """
    CAPTCHA rejected the submission (400) or the verification service
    could not be reached (502).
    """
    def __init__(self, detail: str = "Invalid reCAPTCHA", unreachable: bool = False):
        super().__init__(
            status_code=status.HTTP_502_BAD_GATEWAY if unreachable else status.HTTP_400_BAD_REQUEST,
            detail=detail,
        )


class MailDeliveryException(HTTPException):
    def __init__(self, detail: str = "Failed to send message. Please try again later."):
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)


class MediaFetchException(HTTPException):
    """A stored file could not be downloaded from the media service."""
    def __init__(self, detail: str = "Failed to fetch file"):
        super().__init__(status_code=status.HTTP_502_BAD_GATEWAY, detail=detail)
