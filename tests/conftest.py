"""
Pytest will auto-discover / import this file called 'conftest.py'. ]
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Generator

import pytest
from sqlalchemy import StaticPool, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.core.models import AppConfig, Player
from src.db.memory_storage import InMemoryStorage
from src.db.schema import Base

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
    """Connection to a test database. Tables are removed at teardown to make unit tests of storage independent of each other."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        Base.metadata.drop_all(bind=engine)
        db.close()


@pytest.fixture
def player1() -> Player:
    return Player(id="p1", name="Ada")


@pytest.fixture
def player2() -> Player:
    return Player(id="p2", name="Grace")


@pytest.fixture
def config(player1: Player, player2: Player) -> AppConfig:
    return AppConfig(player1=player1, player2=player2)


@pytest.fixture
def memory_storage() -> Generator[InMemoryStorage, None, None]:
    """Ensures to clear the storage between tests"""
    storage = InMemoryStorage()
    try:
        yield storage
    finally:
        storage.clear()
