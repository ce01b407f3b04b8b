# app/core/config.py

from functools import lru_cache
from typing import List
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # application
    app_name: str = Field(default="Movies API", description="Application name")
    debug: bool = Field(default=False, description="Debug mode")
    log_level: str = Field(default="INFO", description="Root log level")

    # database
    database_url: str = Field(default="sqlite:///./movies.db", description="SQLAlchemy database URL")
    database_echo: bool = Field(default=False, description="Echo SQL statements")

    # CORS
    allowed_origins: List[str] = Field(
        default=["http://localhost:5173"],
        description="Origins allowed by the CORS middleware"
    )

    # poster upload rules
    poster_allowed_extensions: List[str] = Field(
        default=[".jpg", ".png"],
        description="Accepted poster file extensions (lowercase)"
    )
    poster_max_size: int = Field(default=1048576, description="Max poster size in bytes")

    # genre seeding
    seed_genres: bool = Field(default=True, description="Seed default genres into an empty table")
    default_genres: List[str] = Field(
        default=["Action", "Comedy", "Drama", "Horror", "Romance", "Sci-Fi", "Thriller"],
        description="Genres inserted on first startup"
    )

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")


@lru_cache()
def get_settings() -> Settings:
    return Settings()
