from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Database
    DATABASE_URL: str = "sqlite:///./skillmatch.db"

    # Application
    APP_ENV: str = "development"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"

    # Matching
    DEFAULT_MATCH_LIMIT: int = 10
    DEFAULT_SIMILAR_LIMIT: int = 5
    MAX_RESULT_LIMIT: int = 50
    # Larger pools should be chunked by the caller
    MAX_POOL_SIZE: int = 5000

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

settings = Settings()
