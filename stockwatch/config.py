from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List
from pydantic import model_validator


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    DATABASE_URL: str = "sqlite:///./stockwatch.db"
    DATABASE_STATEMENT_TIMEOUT_SECONDS: float = 15.0
    DATABASE_POOL_TIMEOUT_SECONDS: float = 10.0
    ENVIRONMENT: str = "development"
    AUTO_CREATE_TABLES: bool = True
    CORS_ORIGINS: str = "http://localhost:5173,http://localhost:3000"
    DEBUG: bool = True
    APP_NAME: str = "StockWatch"
    APP_VERSION: str = "1.0.0"
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"
    ENABLE_REQUEST_ID: bool = True
    ENABLE_REQUEST_LOGGING: bool = True
    READINESS_CHECK_DATABASE: bool = True
    LOW_STOCK_LOOKBACK_DAYS: int = 30
    LOW_STOCK_DEFAULT_THRESHOLD: int = 10

    @property
    def cors_origins_list(self) -> List[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() in {"prod", "production"}

    @model_validator(mode="after")
    def validate_alert_policy(self):
        if self.LOW_STOCK_LOOKBACK_DAYS < 1:
            raise ValueError("LOW_STOCK_LOOKBACK_DAYS must be at least 1.")
        if self.LOW_STOCK_DEFAULT_THRESHOLD < 0:
            raise ValueError("LOW_STOCK_DEFAULT_THRESHOLD cannot be negative.")
        return self

    @model_validator(mode="after")
    def validate_production_safety(self):
        if not self.is_production:
            return self

        if "sqlite" in self.DATABASE_URL.lower():
            raise ValueError("SQLite is not allowed when ENVIRONMENT is production.")

        if self.AUTO_CREATE_TABLES:
            raise ValueError("AUTO_CREATE_TABLES must be false in production; use Alembic migrations.")

        return self

settings = Settings()
