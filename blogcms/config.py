from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    MONGODB_URL: str = "mongodb://localhost:27017"
    MONGODB_DATABASE: str = "ArticleManagementDb"
    # Provisioned for the cache service; no handler reads or writes it.
    REDIS_URL: str = "redis://localhost:6379/0"
    APP_ENV: str = "development"
    DEBUG: bool = True

    # Server
    HOST: str = "127.0.0.1"
    PORT: int = 8000

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_LEVEL_DRIVER: str = "WARNING"

    # Driver timeouts (milliseconds)
    MONGODB_SERVER_SELECTION_TIMEOUT_MS: int = 5000

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
