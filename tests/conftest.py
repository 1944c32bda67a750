"""
Pytest will auto-discover / import this file called 'conftest.py'. ]
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Any, Callable, Generator

import pytest
from sqlalchemy import StaticPool, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.db.schema import Base
from src.replay.view_models import ViewGame
from tests.documents import game_document, three_turn_frames

# Setup an in-memory SQLite database for testing
DATABASE_URL = "sqlite:///:memory:"
engine = create_engine(
    DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(autoflush=False, bind=engine)


@pytest.fixture
def db_session_repo() -> Generator[Session, None, None]:
    """Connection to a test database. Tables are removed at teardown to make unit tests of repository independent of each other."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def record_document() -> dict[str, Any]:
    return game_document(three_turn_frames())


@pytest.fixture
def sample_record(record_document: dict[str, Any]) -> ViewGame:
    """Three frames (turns 0-2) with snakes "a" and "b" in that order."""
    return ViewGame.model_validate(record_document)


@pytest.fixture
def make_record() -> Callable[..., ViewGame]:
    """Build a record from frame documents (see tests/documents.py)."""

    def _make(frames: list[dict[str, Any]], game_id: str = "game-1") -> ViewGame:
        return ViewGame.model_validate(game_document(frames, game_id))

    return _make
