# travel_admin/core/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    APP_NAME: str = "Slimeline Holidays Admin API"
    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    # DB
    DATABASE_URL: str = Field(default="sqlite:///./travel_admin.db")  # prod: mysql+pymysql://...

    # Auth / security
    SECRET_KEY: str = "change-me"
    JWT_ALGO: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24  # 1 day

    # Seeded on first start when no admin with this username exists
    ADMIN_USERNAME: str = "admin"
    ADMIN_EMAIL: str = "admin@slimeline.com"
    ADMIN_PASSWORD: str = "admin123"

    # Public URLs for stored asset paths
    BASE_URL: str | None = None
    PROTOCOL: str = "http"
    HOST: str = "localhost"
    PORT: int = 3001

    # Static assets / uploads
    PUBLIC_DIR: str = "public"
    UPLOAD_MAX_BYTES: int = 10 * 1024 * 1024  # 10 MB
    UPLOAD_ALLOWED_TYPES: list[str] = [
        "image/jpeg",
        "image/jpg",
        "image/png",
        "image/webp",
        "image/gif",
    ]

    CORS_ORIGINS: list[str] = ["*"]

    # Email notifications
    BREVO_API_KEY: str | None = None
    MAIL_FROM_EMAIL: str = "no-reply@slimelineholidays.com"
    MAIL_FROM_NAME: str = "Slimeline Holidays"
    ADMIN_NOTIFICATION_EMAIL: str | None = None

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def public_base_url(self) -> str:
        """Base URL prepended to relative asset paths when serving records."""
        if self.BASE_URL:
            return self.BASE_URL.rstrip("/")
        return f"{self.PROTOCOL}://{self.HOST}:{self.PORT}"


settings = Settings()
