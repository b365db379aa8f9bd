from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    app_name: str = "Sistema de Louvores"
    app_env: str = "development"  # development, testing, production
    debug: bool = False
    app_url: str = "http://localhost:3000"  # Frontend URL for invitation links
    accept_redirect_path: str = "/admin"

    # Security
    log_user_emails: bool = False  # Set to False in production for LGPD compliance
    # CSP for production (no unsafe-inline, no external CDN) - set to empty string to use default
    csp_production: str = "default-src 'self'; frame-ancestors 'none'"

    # Database (hosted Postgres)
    database_url: str
    database_pool_size: int = 5
    database_max_overflow: int = 10
    database_ssl_mode: str = "prefer"  # disable, prefer, require, verify-ca, verify-full

    # Identity provider (hosted auth service)
    identity_url: str = "http://localhost:54321"
    identity_service_key: str | None = None  # Admin key for account lookups
    identity_jwt_secret: str
    identity_jwt_algorithm: str = "HS256"
    identity_jwt_audience: str = "authenticated"
    identity_timeout_seconds: float = 10.0

    # Permissions
    super_admin_emails: list[str] = []

    # Invitations
    invite_expire_days: int = 7
    invite_rate_limit: str = "10/minute"

    # Email (Resend)
    resend_api_key: str | None = None  # If not set, emails are logged but not sent
    email_from: str = "noreply@example.com"
    email_send_timeout_seconds: int = 10  # Timeout for email API calls

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Metrics
    metrics_api_key: str | None = None  # If set, /metrics requires this key

    @field_validator("identity_jwt_secret")
    @classmethod
    def validate_jwt_secret(cls, v: str) -> str:
        if len(v) < 32:
            raise ValueError("IDENTITY_JWT_SECRET must be at least 32 characters")
        return v

    @field_validator("cors_origins")
    @classmethod
    def validate_cors_origins(cls, v: list[str]) -> list[str]:
        """Validate CORS origins - reject wildcards when credentials are used."""
        for origin in v:
            if origin == "*":
                raise ValueError(
                    "CORS wildcard '*' is not allowed when allow_credentials=True. "
                    "Specify explicit origins instead."
                )
        return v

    @field_validator("super_admin_emails")
    @classmethod
    def normalize_super_admin_emails(cls, v: list[str]) -> list[str]:
        return [email.strip().lower() for email in v if email.strip()]

    @field_validator("app_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @property
    def is_testing(self) -> bool:
        return self.app_env == "testing"


@lru_cache
def get_settings() -> Settings:
    return Settings()
