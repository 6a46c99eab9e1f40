"""Configuration management for the Directory Listing API."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # API Settings
    api_title: str = "Directory Listing API"
    api_version: str = "1.0.0"
    api_description: str = "REST API for file system directory listing with metadata and permissions"
    environment: str = "development"
    debug: bool = False

    # Path Guard Settings
    max_path_length: int = 4096
    restricted_paths: list[str] = [
        "/etc/shadow",
        "/etc/passwd",
        "C:\\Windows\\System32\\config",
        "C:\\Windows\\System32\\drivers\\etc",
    ]

    # Pagination Settings
    default_page_limit: int = 100
    max_page_limit: int = 1000

    # Scan Settings
    scan_max_workers: int = 32
    scan_concurrency: int = 64  # per-directory in-flight stats
    scan_timeout: float = 30.0  # seconds

    # CORS settings (comma-separated string)
    cors_origins: str = "http://localhost:4200,http://localhost:3000"

    # Logging
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    def get_cors_origins_list(self) -> list[str]:
        """Get CORS origins as a list from comma-separated string."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    @property
    def is_production(self) -> bool:
        """Whether error details must be hidden from clients."""
        return self.environment.lower() == "production"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
