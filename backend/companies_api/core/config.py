# backend/companies_api/core/config.py
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # ---- Core ----
    PROJECT_NAME: str = "Company API"
    ENV: str = "dev"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # ---- Server ----
    HOST: str = "0.0.0.0"
    PORT: int = 4000
    # Comma-separated allowed origins; empty disables CORS
    CORS_ORIGINS: str = ""

    # ---- Registry ----
    # Wipe the in-memory collection back to seed data every hour
    RESET_ENABLED: bool = True
    RESET_INTERVAL_MS: int = 3_600_000
    # When true, PATCH {"address": ""} clears the field instead of being ignored
    ACCEPT_EMPTY_PATCH_VALUES: bool = False

    # pydantic-settings v2 config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def cors_origins_list(self) -> list[str]:
        cleaned: list[str] = []
        for v in self.CORS_ORIGINS.replace("\n", ",").split(","):
            v = v.strip().rstrip("/")
            if v and v not in cleaned:
                cleaned.append(v)
        return cleaned


@lru_cache
def get_settings() -> Settings:
    return Settings()


# singleton (import this everywhere)
settings = get_settings()
