"""
Shared fixtures: an in-memory database per test and API clients bound to it.
"""
import os

os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import weddingsite.models  # noqa: F401
from weddingsite.db.base import Base
from weddingsite.db.session import get_db
from weddingsite.main import app


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()


@pytest.fixture
def db(session_factory):
    """Session for asserting on stored state."""
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client_factory(session_factory):
    """Build independent clients (separate cookie jars) sharing one database."""
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    clients = []

    def make_client(**kwargs):
        new_client = TestClient(app, **kwargs)
        clients.append(new_client)
        return new_client

    yield make_client

    for c in clients:
        c.close()
    app.dependency_overrides.clear()


@pytest.fixture
def client(client_factory):
    return client_factory()
