from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Optional at startup: only the /api routes need it, and they fail at call time without it.
    openai_api_key: Optional[str] = None

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"

    # CORS
    allowed_origins: str = "*"

    # Pre-built single-page app served for every non-API route
    static_dir: str = "client/dist"

    # AI Models
    describe_model: str = "gpt-4o-mini"    # Vision model used for English alt text
    translate_model: str = "gpt-4o-mini"   # Used for the per-item locale translations
    temperature: float = 0.2

    # Uploads
    max_upload_bytes: int = 5 * 1024 * 1024

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    @property
    def provider_configured(self) -> bool:
        return bool(self.openai_api_key)

    def get_cors_origins(self) -> List[str]:
        """Parse CORS origins from comma-separated string"""
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]


settings = Settings()
