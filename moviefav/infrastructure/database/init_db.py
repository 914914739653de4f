"""Database initialization utilities."""

import asyncio
import logging
from pathlib import Path
from typing import Any, Dict

from alembic import command
from alembic.config import Config
from sqlalchemy import func, select, text
from sqlalchemy.exc import SQLAlchemyError

from moviefav.core.services.auth.models import UserModel
from moviefav.core.services.favorites.models import FavoriteModel
from .session import get_session_maker

logger = logging.getLogger("moviefav")


def get_alembic_config() -> Config:
    """Build the Alembic configuration from ``alembic.ini`` at the project root."""
    project_root = Path(__file__).parent.parent.parent.parent
    alembic_cfg = Config(str(project_root / "alembic.ini"))
    alembic_cfg.set_main_option("script_location", str(project_root / "alembic"))
    return alembic_cfg


def run_alembic_migrations(revision: str = "head") -> None:
    """Upgrade the database to ``revision``."""
    command.upgrade(get_alembic_config(), revision)


async def init_database() -> None:
    """Bring the schema up to date by running all pending migrations."""
    try:
        logger.info("Running database migrations...")
        loop = asyncio.get_running_loop()
        # env.py drives its own event loop, so migrations run off this one.
        await loop.run_in_executor(None, run_alembic_migrations)
        logger.info("Database migrations completed successfully")
    except Exception as e:
        logger.error(f"Failed to initialize database: {e}")
        raise


async def check_database_health() -> bool:
    """Return whether the database answers a trivial query."""
    session_maker = get_session_maker()
    try:
        async with session_maker() as session:
            await session.execute(text("SELECT 1"))
        return True
    except SQLAlchemyError as e:
        logger.error(f"Database health check failed: {e}")
        return False


async def get_database_info() -> Dict[str, Any]:
    """Collect row counts for every application table."""
    session_maker = get_session_maker()
    tables = {}

    async with session_maker() as session:
        for model in (UserModel, FavoriteModel):
            result = await session.execute(select(func.count()).select_from(model))
            tables[model.__tablename__] = result.scalar_one()

    return {"tables": tables}
