"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    database_url: str = "sqlite:///./sales_dashboard.db"

    # Seed source
    seed_source_url: str = "https://s3.amazonaws.com/roxiler.com/product_transaction.json"

    # Service
    service_name: str = "sales-dashboard"
    log_level: str = "INFO"
    cors_allow_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]

    # HTTP Client
    http_timeout_seconds: float = 10.0

    # Pagination
    default_page_size: int = 10
    max_page_size: int = 100


settings = Settings()
