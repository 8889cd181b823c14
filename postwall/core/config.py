"""
Application configuration.
All settings are loaded from environment variables.
Use env.example as a reference for required variables.
"""
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    IMPORTANT: database_url and identity_project_id have no defaults - they MUST be set in .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # ===========================================
    # APPLICATION
    # ===========================================
    app_env: str = "local"
    port: int = 3333
    # Comma-separated list of allowed origins. Empty = default list in code.
    cors_origins: str = ""

    # ===========================================
    # DATABASE
    # ===========================================
    database_url: str  # Required, no default

    # ===========================================
    # IDENTITY PROVIDER
    # ===========================================
    identity_project_id: str  # Required, no default
    identity_jwks_url: str = (
        "https://www.googleapis.com/service_accounts/v1/jwk/securetoken@system.gserviceaccount.com"
    )
    identity_issuer_base: str = "https://securetoken.google.com"
    identity_timeout_seconds: float = 5.0
    identity_jwks_cache_seconds: int = 600

    # ===========================================
    # PAYWALL
    # ===========================================
    preview_length: int = 200

    # ===========================================
    # DEV / TESTING ROUTES
    # ===========================================
    dev_routes_enabled: bool = True

    # ===========================================
    # LOGGING
    # ===========================================
    request_id_header: str = "X-Request-Id"
    log_level: str = "INFO"
    log_file: str | None = None
    log_max_bytes: int = 10_000_000
    log_backup_count: int = 5

    @field_validator("preview_length")
    @classmethod
    def validate_preview_length(cls, v: int) -> int:
        if v < 1:
            raise ValueError("preview_length must be at least 1")
        return v

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper().strip()

    @property
    def cors_origins_list(self) -> list[str]:
        """Get allowed CORS origins as a list."""
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    @property
    def identity_issuer(self) -> str:
        """Expected `iss` claim of ID tokens for the configured project."""
        return f"{self.identity_issuer_base.rstrip('/')}/{self.identity_project_id}"


settings = Settings()
