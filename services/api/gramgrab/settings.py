from typing import Literal
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    redis_url: str = "redis://localhost:6379/0"

    # Display
    default_unit_system: Literal["metric", "imperial"] = "metric"

    # Learned ingredient densities
    density_cache_ttl_days: int = 30
    density_min_confidence: float = 0.5

    # Rate limiting (slowapi syntax)
    rate_limit_default: str = "100/minute"

    # CORS
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:5173",
        "http://localhost",
        "http://127.0.0.1",
    ]


settings = Settings()
