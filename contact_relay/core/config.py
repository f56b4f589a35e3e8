from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
from typing import List, Optional

PRODUCTION_ORIGINS = ["https://yourdomain.com"]
DEVELOPMENT_ORIGINS = ["http://localhost:8080", "http://localhost:5173"]


class Settings(BaseSettings):
    # Resend credentials - must be provided via environment variables
    resend_api_key: str = ""
    resend_api_url: str = "https://api.resend.com"
    email_timeout_seconds: float = 10.0

    # Where contact form submissions are delivered
    recipient_email: str = ""

    # Deployment mode, "production" switches the CORS origins
    app_env: str = "development"

    # Comma separated, overrides the mode based origins when set
    allowed_origins: Optional[str] = None

    host: str = "0.0.0.0"
    port: int = 5000
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", frozen=True)

    @property
    def is_production(self) -> bool:
        return self.app_env.lower() == "production"

    @property
    def cors_origins(self) -> List[str]:
        """Get the effective CORS origins from available sources"""
        if self.allowed_origins:
            return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]
        return list(PRODUCTION_ORIGINS if self.is_production else DEVELOPMENT_ORIGINS)


@lru_cache
def get_settings():
    return Settings()
