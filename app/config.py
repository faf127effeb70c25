from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import Optional


class Settings(BaseSettings):
    # ── Database ──────────────────────────────────────────────
    database_hostname: str = "localhost"
    database_port: str = "5432"
    database_password: str = ""
    database_name: str = "travel_agency"
    database_username: str = "postgres"
    # Full SQLAlchemy URL; wins over the individual parts when set
    database_uri: Optional[str] = None

    # ── JWT ───────────────────────────────────────────────────
    secret_key: str
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 24

    # ── Admin credentials ─────────────────────────────────────
    admin_email: str
    admin_password: Optional[str] = None
    # bcrypt hash; preferred over the plaintext password when both are set
    admin_password_hash: Optional[str] = None

    # ── SMTP (contact form) ───────────────────────────────────
    mail_username: str
    mail_password: str
    mail_from: str
    mail_server: str = "smtp.office365.com"
    mail_port: int = 587
    mail_starttls: bool = True
    mail_ssl_tls: bool = False
    # Inbox that receives contact form submissions; defaults to mail_username
    contact_recipient: Optional[str] = None

    # ── Cloudinary ────────────────────────────────────────────
    cloudinary_cloud_name: str
    cloudinary_api_key: str
    cloudinary_api_secret: str

    # ── reCAPTCHA ─────────────────────────────────────────────
    recaptcha_secret_key: str
    recaptcha_verify_url: str = "https://www.google.com/recaptcha/api/siteverify"
    recaptcha_timeout_seconds: float = 10.0

    # ── App ───────────────────────────────────────────────────
    cors_origins: str = "*"
    log_level: str = "INFO"
    rate_limit_enabled: bool = True

    @property
    def cors_origins_list(self) -> list[str]:
        """Split comma-separated origins into a list, stripping whitespace."""
        return [origin.strip() for origin in self.cors_origins.split(",")]

    @property
    def database_url(self) -> str:
        if self.database_uri:
            return self.database_uri
        return (
            f"postgresql://{self.database_username}:{self.database_password}"
            f"@{self.database_hostname}:{self.database_port}/{self.database_name}"
        )

    @property
    def contact_inbox(self) -> str:
        return self.contact_recipient or self.mail_username

    class Config:
        env_file = ".env"
        # Case-insensitive so DATABASE_HOSTNAME and database_hostname both work
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """
    Cached settings loader — reads .env once and reuses.
    Use this everywhere instead of instantiating Settings() directly.
    """
    return Settings()


# Module-level singleton for convenience imports
settings = get_settings()
