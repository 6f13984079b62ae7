from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List
from functools import lru_cache


class Settings(BaseSettings):
    # Application Settings
    APP_NAME: str = "Online Learning Platform"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    ENVIRONMENT: str = "development"

    @property
    def debug(self) -> bool:
        return self.DEBUG

    # MongoDB
    MONGODB_URI: str = "mongodb://localhost:27017"
    MONGODB_DB_NAME: str = "learnhub"
    MONGODB_TIMEOUT_MS: int = 5000

    # CORS Settings
    CORS_ORIGINS: List[str] = ["*"]

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 5000

    @property
    def host(self) -> str:
        return self.HOST

    @property
    def port(self) -> int:
        return self.PORT

    # Logging / error reporting
    LOG_LEVEL: str = "INFO"
    EXPOSE_ERROR_DETAILS: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="allow",
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
