"""
Dependency injection for API endpoints.
"""
from typing import Generator

from sqlalchemy.orm import Session

from app.core.database import SessionLocal


def get_db() -> Generator[Session, None, None]:
    """
    Yield a session holding the game tables, closed once the request is done.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
