"""Storefront Configuration"""

from typing import Optional
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment"""

    # Application
    app_name: str = "Storefront"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8001
    cors_origins: list[str] = ["*"]

    # Persistence. Unset keeps everything in memory for the process lifetime.
    storage_path: Optional[str] = None

    # Checkout
    checkout_processing_delay: float = 1.5

    # Admin dashboard
    low_stock_threshold: int = 5

    class Config:
        env_prefix = "STOREFRONT_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False

    @property
    def persistent(self) -> bool:
        """Whether state survives a restart"""
        return bool(self.storage_path)


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
