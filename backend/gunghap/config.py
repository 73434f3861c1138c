from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "gunghap"
    app_env: str = "development"

    api_host: str = "0.0.0.0"
    api_port: int = 8000

    log_level: str = "INFO"
    # Truncation limit for request/response previews in the audit log
    log_body_limit: int = 900
    # Log the per-syllable decomposition table of both names at DEBUG level
    log_decomposition: bool = False

    cors_origins_raw: str = ""

    rate_limit_enabled: bool = True
    compat_rate_limit: str = "30/minute"
    health_rate_limit: str = "60/minute"

    max_name_length: int = 20

    def cors_origins(self) -> list[str]:
        raw = self.cors_origins_raw.strip()
        if not raw:
            return []
        return [item.strip() for item in raw.split(",") if item.strip()]

@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
