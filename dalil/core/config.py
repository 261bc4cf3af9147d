
from pydantic import Field
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    """Application configuration loaded from environment variables / .env file."""

    app_name: str = "Dalil API"
    app_env: str = "development"
    app_port: int = 8000
    frontend_url: str = "http://localhost:5173"

    # Database (SQLite via aiosqlite for local dev, any async URL in prod)
    database_url: str = Field(
        default="sqlite+aiosqlite:///./dalil_dev.db",
        alias="DATABASE_URL",
    )

    # Multi-tenancy default
    default_client_id: str = Field(default="default", alias="DEFAULT_CLIENT_ID")

    # Listing defaults
    default_page_size: int = Field(default=10, alias="DEFAULT_PAGE_SIZE")
    max_page_size: int = Field(
        default=100, alias="MAX_PAGE_SIZE",
    )  # Larger ?limit= values are clamped, not rejected
    recent_searches_limit: int = Field(default=5, alias="RECENT_SEARCHES_LIMIT")

    # Load the demo catalogue into an empty legal_texts table on startup
    seed_catalogue: bool = Field(default=True, alias="SEED_CATALOGUE")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "populate_by_name": True,
    }

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

settings = Settings()
