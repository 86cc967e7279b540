"""Application configuration management"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Application
    APP_NAME: str = "ReRank"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    ENVIRONMENT: str = "development"

    # API
    API_PREFIX: str = "/api"

    # Leaderboard
    DEFAULT_LEADERBOARD_LIMIT: int = 50
    MAX_LEADERBOARD_LIMIT: int = 1000
    EXPORT_ROW_LIMIT: int = 1000

    # Analytics (notional figures shown alongside the sampled leaderboard)
    TOTAL_CANDIDATE_POOL: int = 15000
    COUNTRIES_COUNT: int = 152
    ACCURACY_RATE: float = 98.2

    # Store
    SEED_MOCK_DATA: bool = True

    # File Upload
    MAX_UPLOAD_SIZE: int = 10 * 1024 * 1024  # 10MB

    # Rate Limiting
    RATE_LIMIT_PER_MINUTE: int = 60

    # CORS
    CORS_ORIGINS: list[str] = ["http://localhost:3000", "http://localhost:5173"]

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True
    )


# Global settings instance
settings = Settings()
