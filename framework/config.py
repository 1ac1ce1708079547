from enum import Enum
from typing import Optional
from urllib.parse import quote_plus
from pydantic import AliasChoices, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class RepoBackend(str, Enum):
    """Persistence backend behind the commander repository interface."""
    SQL = "sql"
    MOCK = "mock"
    MEMORY = "memory"


# Development-only database password; refused when APP_ENV=production
DEV_DB_PASSWORD = "Pa$$w0rd"


class Settings(BaseSettings):
    # --- Basic configuration ---
    APP_NAME: str = "Commander API"
    APP_DESCRIPTION: str = "CRUD API for command line snippets"
    APP_VERSION: str = "1.0.0"
    APP_ENV: str = "development"  # development, production, testing
    DEBUG: bool = True

    # --- Database (MySQL/SQLModel) ---
    # Accepts both DB_SERVER and the DBServer style keys used by container deployments
    DB_SERVER: str = Field(default="localhost", validation_alias=AliasChoices("DB_SERVER", "DBServer"))
    DB_PORT: int = Field(default=3306, validation_alias=AliasChoices("DB_PORT", "DBPort"))
    DB_NAME: str = Field(default="CommanderDB", validation_alias=AliasChoices("DB_NAME", "Database"))
    DB_USER: str = Field(default="root", validation_alias=AliasChoices("DB_USER", "DBUser"))
    DB_PASSWORD: str = Field(default=DEV_DB_PASSWORD, validation_alias=AliasChoices("DB_PASSWORD", "DBPassword"))
    # Full SQLAlchemy URL; overrides the discrete DB_* fields when set
    COMMANDER_CONNECTION: Optional[str] = None
    DB_ECHO: bool = False

    # --- Repository ---
    COMMANDER_REPO: RepoBackend = RepoBackend.SQL
    MIGRATE_ON_STARTUP: bool = True

    @property
    def DATABASE_URL(self) -> str:
        if self.COMMANDER_CONNECTION:
            return self.COMMANDER_CONNECTION
        # Build async MySQL connection URL
        safe_password = quote_plus(self.DB_PASSWORD)
        return f"mysql+aiomysql://{self.DB_USER}:{safe_password}@{self.DB_SERVER}:{self.DB_PORT}/{self.DB_NAME}"

    # --- Logging ---
    LOG_DIR: str = "logs"

    # --- API route prefixes ---
    API_COMMANDS_PREFIX: str = "/api/commands"

    # --- Gunicorn process name (optional) ---
    GUNICORN_PROC_NAME: Optional[str] = None  # Fallback to APP_NAME when empty

    # --- Pydantic ---
    # Load env from project root .env; priority: env vars > .env > defaults
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_ignore_empty=True,
        populate_by_name=True,
    )

    @model_validator(mode="after")
    def check_production_credentials(self) -> "Settings":
        if (
            self.APP_ENV == "production"
            and self.COMMANDER_REPO == RepoBackend.SQL
            and not self.COMMANDER_CONNECTION
            and self.DB_PASSWORD == DEV_DB_PASSWORD
        ):
            raise ValueError("Development database password must not be used in production; set DBPassword or COMMANDER_CONNECTION")
        return self


# Singleton settings instance
settings = Settings()
