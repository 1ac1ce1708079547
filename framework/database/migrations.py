"""
Apply Alembic migrations over the application's async engine.

Used by the FastAPI lifespan so the schema is at head before the first request.
"""
from pathlib import Path
from typing import Optional

from alembic import command
from alembic.config import Config
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncEngine

PROJECT_ROOT = Path(__file__).resolve().parents[2]


def get_alembic_config(url: Optional[str] = None) -> Config:
    """Build the Alembic config from alembic.ini, pinning script_location to this project."""
    cfg = Config(str(PROJECT_ROOT / "alembic.ini"))
    cfg.set_main_option("script_location", str(PROJECT_ROOT / "alembic"))
    if url:
        # ConfigParser interpolation: escape % from URL-encoded passwords
        cfg.set_main_option("sqlalchemy.url", url.replace("%", "%%"))
    return cfg


def _upgrade(connection, cfg: Config, revision: str) -> None:
    cfg.attributes["connection"] = connection
    command.upgrade(cfg, revision)


async def apply_migrations(engine: AsyncEngine, revision: str = "head") -> None:
    """Upgrade the schema to `revision` using a connection borrowed from `engine`."""
    cfg = get_alembic_config()
    logger.info(f"Applying database migrations (target: {revision})")
    async with engine.begin() as conn:
        await conn.run_sync(_upgrade, cfg, revision)
    logger.info("Database schema is up to date")
