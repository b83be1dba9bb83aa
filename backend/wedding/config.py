"""Application configuration from environment variables."""
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # Environment (dev, test, prod)
    env: str = "dev"

    # Database
    database_url: str = "sqlite:///./wedding.db"

    # Authentication
    jwt_secret: str = "change-me-in-production-use-random-string"
    jwt_algorithm: str = "HS256"
    jwt_expiry_hours: int = 24 * 30  # Guests log in once before the party

    # Music requests
    max_music_requests_per_user: int = 10  # Per kind: artists, albums, songs

    # CORS (comma-separated)
    cors_origins: str = "*"

    # Logging
    log_level: str = "info"
    log_path: str = ""

    @property
    def is_prod(self) -> bool:
        return self.env == "prod"

    @property
    def cors_origin_list(self) -> list:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    class Config:
        env_file = (".env", "../.env")  # Check both backend/ and parent dir
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
