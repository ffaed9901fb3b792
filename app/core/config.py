from typing import Optional

from pydantic_settings import BaseSettings
import os

class Settings(BaseSettings):
    DATABASE_URL: str = os.getenv(
        "DATABASE_URL",
        "sqlite:///./tictactoe.db"
    )
    DEBUG: bool = os.getenv("DEBUG", "False") == "True"

    # Move selection
    SMART_OPTIMAL_RATE: float = 0.7
    SOFT_WIN_RATE: float = 0.4
    ENGINE_SEED: Optional[int] = None

    # Daily challenge
    DAILY_TIMEZONE: str = "UTC"

    DEFAULT_MODE: str = "classic"
    DEFAULT_DIFFICULTY: str = "soft"

    class Config:
        env_file = ".env"

settings = Settings()
