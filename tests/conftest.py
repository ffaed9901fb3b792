import os
import random
import tempfile
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from app.api.deps import get_db
from app.core.database import Base
from app.core.game_config import Mark
from app.models.game_session import GameSession  # noqa: F401
from main import app


class StubRandom(random.Random):
    """Random source with a fixed roll that always picks the last option."""

    def __init__(self, roll: float):
        super().__init__(0)
        self.roll = roll

    def random(self):
        return self.roll

    def choice(self, seq):
        return seq[-1]


def make_board(size: int = 9, a=(), b=()):
    board = [None] * size
    for index in a:
        board[index] = Mark.A
    for index in b:
        board[index] = Mark.B
    return board


def wire(board):
    """Board as sent over the API."""
    return [cell.value if cell is not None else None for cell in board]


@pytest.fixture(scope="session")
def test_db():
    db_fd, db_path = tempfile.mkstemp(suffix=".db")
    engine = create_engine(f"sqlite:///{db_path}", connect_args={"check_same_thread": False})
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base.metadata.create_all(bind=engine)
    yield TestingSessionLocal
    engine.dispose()
    os.close(db_fd)
    os.unlink(db_path)

@pytest.fixture
def db_session(test_db):
    session = test_db()
    try:
        yield session
    finally:
        session.rollback()
        session.close()

@pytest.fixture
def client(db_session):
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
