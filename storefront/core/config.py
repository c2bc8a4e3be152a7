from pydantic import Field
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    """Application configuration loaded from environment variables / .env file."""

    app_name: str = "Storefront API"
    app_env: str = "development"
    app_port: int = 8000
    frontend_url: str = "http://localhost:3000"

    # Database (SQLite via aiosqlite for local dev)
    database_url: str = Field(
        default="sqlite+aiosqlite:///./storefront_dev.db",
        alias="DATABASE_URL",
    )
    auto_create_tables: bool = Field(default=True, alias="AUTO_CREATE_TABLES")

    # Multi-tenancy default (used when no X-Client-ID header is sent)
    default_client_id: str = Field(default="default", alias="DEFAULT_CLIENT_ID")

    # Listing
    default_page_size: int = Field(default=10, alias="DEFAULT_PAGE_SIZE")
    max_page_size: int = Field(default=100, alias="MAX_PAGE_SIZE")
    page_size_options: list[int] = Field(
        default=[10, 20, 50, 100], alias="PAGE_SIZE_OPTIONS",
    )

    # Admin client
    api_base_url: str = Field(
        default="http://localhost:8000/api/v1", alias="API_BASE_URL",
    )
    api_timeout: float = Field(default=5.0, alias="API_TIMEOUT")  # seconds
    notification_duration_ms: int = Field(
        default=3000, alias="NOTIFICATION_DURATION_MS",
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "populate_by_name": True,
    }

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"

settings = Settings()
