"""
Pytest configuration and fixtures for test suite.
"""

import os

import pytest

# Set test environment variables before importing the app
os.environ["STORE_BACKEND"] = "sqlite"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["APP_ENV"] = "development"
os.environ["LOG_FORMAT"] = "console"

from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient
from sqlalchemy.orm import sessionmaker

from src.api.dependencies import get_todo_repository
from src.main import app
from src.models.base import Base, build_engine
from src.models.database import create_tables
from src.repositories.mongo_todo_repository import MongoTodoRepository
from src.repositories.todo_repository import TodoRepository


@pytest.fixture
def db_session():
    """Fresh in-memory SQLite session with the todos table created."""
    engine = build_engine("sqlite://")
    create_tables(bind=engine)
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def repository(db_session):
    return TodoRepository(db_session)


@pytest.fixture
def mongo_repository():
    collection = AsyncMongoMockClient()["todo_list_db"]["todos"]
    return MongoTodoRepository(collection)


def _client_for(repository, **client_kwargs):
    async def override_repository():
        yield repository

    app.dependency_overrides[get_todo_repository] = override_repository
    try:
        yield TestClient(app, **client_kwargs)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def client(repository):
    """FastAPI test client wired to the in-memory repository."""
    yield from _client_for(repository)


@pytest.fixture
def mongo_client(mongo_repository):
    """FastAPI test client backed by the mock Mongo collection."""
    yield from _client_for(mongo_repository)


@pytest.fixture
def sample_todo():
    return {"id": "a1", "todo": "buy milk", "isCompleted": False}
