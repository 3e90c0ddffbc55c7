from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    app_name: str = "Baby Journey"
    debug: bool = False

    # API
    backend_url: str = "http://localhost:8000"
    frontend_url: str = "http://localhost:5173"
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]

    # Database (production: postgresql+asyncpg://...)
    database_url: str = "sqlite+aiosqlite:///./babyjourney.db"

    # Auth (JWT issued by the hosted identity provider)
    auth_jwks_url: str = ""
    auth_issuer: str = ""
    # Optional strict audience validation (empty = disabled)
    auth_allowed_audiences: list[str] = []
    auth_algorithms: list[str] = ["RS256"]

    # Defaults applied when a user is provisioned
    default_height_cm: float = 165
    default_age_years: int = 28
    default_pre_pregnancy_weight_kg: float = 60
    default_sidebar_color: str = "purple"

    # Week shown on the baby page when the profile has none
    default_baby_week: int = 20


@lru_cache
def get_settings() -> Settings:
    return Settings()
