"""Configuration settings for the catalog recommendation service"""

from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    """Application settings"""

    # API Settings
    API_V1_STR: str = "/api/v1"
    PROJECT_NAME: str = "Catalog Recommendation Service"
    VERSION: str = "1.0.0"

    # Database Settings
    POSTGRES_USER: str = "catalog"
    POSTGRES_PASSWORD: str = "catalog_pass"
    POSTGRES_HOST: str = "postgres"
    POSTGRES_PORT: int = 5432
    POSTGRES_DB: str = "catalog"
    DATABASE_URL_OVERRIDE: Optional[str] = None

    @property
    def DATABASE_URL(self) -> str:
        if self.DATABASE_URL_OVERRIDE:
            return self.DATABASE_URL_OVERRIDE
        return f"postgresql://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"

    # Logging
    LOG_LEVEL: str = "INFO"

    # Recommendation Settings
    RECOMMENDATIONS_PER_PAGE: int = 10
    # Cancelled orders still count as purchases unless this is switched on
    EXCLUDE_CANCELLED_ORDERS: bool = False

    # Rate Limiting
    RATE_LIMIT_DEFAULT: str = "100/minute"
    RATE_LIMIT_STORAGE_URI: str = "memory://"

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
