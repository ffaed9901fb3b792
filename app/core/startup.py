"""
Application startup and shutdown logic for the TicTacToe API.
"""
import logging
from sqlalchemy import text

from app.core.config import settings
from app.core.database import engine, init_db

logger = logging.getLogger(__name__)


def initialize_database() -> None:
    """Create the game session table and check the connection."""
    try:
        init_db()
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        logger.info("Game session storage ready")

    except Exception as e:
        logger.error(f"Failed to initialize database: {e}")
        raise


def log_engine_settings() -> None:
    """Record the opponent tuning the server starts with."""
    seed = settings.ENGINE_SEED if settings.ENGINE_SEED is not None else "random"
    logger.info(
        f"Engine: smart plays optimally {settings.SMART_OPTIMAL_RATE:.0%} of the time, "
        f"soft looks for a win {settings.SOFT_WIN_RATE:.0%} of the time, seed {seed}"
    )
    logger.info(f"Daily challenge follows the {settings.DAILY_TIMEZONE} calendar")


def shutdown_database() -> None:
    """Clean up database connections."""
    try:
        engine.dispose()
        logger.info("Database connections closed")
    except Exception as e:
        logger.error(f"Error during database shutdown: {e}")
        # Don't re-raise during shutdown
