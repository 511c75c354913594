"""
Core configuration settings for the HSN Compliance API
"""
from typing import List, Union
from pydantic_settings import BaseSettings
from pydantic import field_validator


class Settings(BaseSettings):
    """Application settings with validation"""

    # App settings
    APP_NAME: str = "HSN Compliance API"
    DEBUG: bool = False
    API_V1_STR: str = "/api/v1"
    NODE_ENV: str = "development"
    CORS_ORIGINS: Union[str, List[str]] = ["http://localhost:3000", "http://127.0.0.1:3000"]

    # Reference data overrides (empty means the bundled tables are used)
    HSN_CATALOG_PATH: str = ""
    COUNTRY_RESTRICTIONS_PATH: str = ""
    ITEM_SCREENING_PATH: str = ""

    # Batch validation settings
    MAX_BATCH_ITEMS: int = 100

    # Rate limiting settings
    RATE_LIMIT_ENABLED: bool = True
    RATE_LIMIT_STORAGE_URI: str = "memory://"
    VALIDATE_RATE_LIMIT: str = "60 per minute"
    BATCH_RATE_LIMIT: str = "20 per minute"
    SEARCH_RATE_LIMIT: str = "120 per minute"

    # Monitoring settings
    LOG_LEVEL: str = "INFO"

    @field_validator("NODE_ENV")
    def validate_node_env(cls, v):
        if v not in ["development", "staging", "production", "test"]:
            raise ValueError("NODE_ENV must be one of: development, staging, production, test")
        return v

    @field_validator("LOG_LEVEL")
    def validate_log_level(cls, v):
        if v not in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
            raise ValueError("LOG_LEVEL must be one of: DEBUG, INFO, WARNING, ERROR, CRITICAL")
        return v

    @field_validator("MAX_BATCH_ITEMS")
    def validate_max_batch_items(cls, v):
        if v < 1:
            raise ValueError("MAX_BATCH_ITEMS must be at least 1")
        return v

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"

    @property
    def is_production(self) -> bool:
        return self.NODE_ENV == "production"

    @property
    def is_development(self) -> bool:
        return self.NODE_ENV == "development"

    @property
    def cors_origins_list(self) -> List[str]:
        """Get CORS_ORIGINS as a list"""
        if isinstance(self.CORS_ORIGINS, str):
            return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]
        return self.CORS_ORIGINS


# Create settings instance with validation
settings = Settings()

# Getter function for dependency injection
def get_settings() -> Settings:
    """Get settings instance for dependency injection"""
    return settings
