"""Application configuration management."""

from pydantic import AnyUrl, ConfigDict, Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database
    database_url: AnyUrl

    # Realtime notification feed
    redis_url: str = "redis://localhost:6379/0"
    realtime_enabled: bool = True

    # Transactional email (Resend)
    resend_api_key: str | None = None
    resend_api_url: str = "https://api.resend.com"
    email_from: str = "FreelancerWorks <onboarding@resend.dev>"

    # Resume storage
    resume_storage_dir: str = "./storage/resumes"
    resume_max_bytes: int = Field(default=5 * 1024 * 1024, ge=1)
    signed_url_secret: str = Field(
        default="change-me",
        description="HMAC key used to sign resume download links",
    )
    signed_url_ttl_seconds: int = Field(default=60, ge=1, le=3600)
    public_base_url: str = "http://localhost:8000"

    # Notifications
    notifications_page_size: int = Field(default=20, ge=1, le=100)

    # HTTP
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


settings = Settings()
