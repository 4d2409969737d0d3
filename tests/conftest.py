"""Pytest configuration and fixtures."""

import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from src.config import Settings, get_settings
from src.database import Base, get_db, init_db
from src.main import app
from src.models.note import Note


class AuthHeaders(dict):
    """Dict subclass that also stores user_id and username."""

    def __init__(self, *args, user_id: str | None = None, username: str | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.username = username


INITIAL_NOTES = [
    {"content": "HTML is easy", "important": True},
    {"content": "Browser can execute only JavaScript", "important": False},
]

# Use test database - PostgreSQL in Docker, SQLite locally
if os.getenv("DATABASE_URL"):
    # Running in Docker - use PostgreSQL test database
    base_url, _, database_name = os.getenv("DATABASE_URL").rpartition("/")
    SQLALCHEMY_DATABASE_URL = f"{base_url}/{database_name}_test"
else:
    # Running locally - use SQLite
    SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"

connect_args = {"check_same_thread": False} if "sqlite" in SQLALCHEMY_DATABASE_URL else {}
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    if "postgresql" in SQLALCHEMY_DATABASE_URL:
        # For PostgreSQL, create the test database
        from sqlalchemy_utils import create_database, database_exists

        # Create test database if it doesn't exist
        if not database_exists(SQLALCHEMY_DATABASE_URL):
            create_database(SQLALCHEMY_DATABASE_URL)

    init_db(engine)
    yield
    # Don't drop database - just leave it for next run (each test cleans up after itself)


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = TestingSessionLocal()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture
def settings():
    """Settings used by the app under test."""
    return Settings(jwt_secret="test-secret")


@pytest.fixture(scope="function")
def client(db, settings):
    """Create a test client with database and settings overrides."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_settings] = lambda: settings
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def _register_and_login(client, username: str, password: str, name: str | None = None):
    response = client.post(
        "/api/users",
        json={"username": username, "name": name, "password": password},
    )
    assert response.status_code == 201
    user_id = response.json()["id"]

    response = client.post("/api/login", json={"username": username, "password": password})
    assert response.status_code == 200
    token = response.json()["token"]

    return AuthHeaders({"Authorization": f"Bearer {token}"}, user_id=user_id, username=username)


@pytest.fixture
def auth_headers(client):
    """Create a user and return auth headers with user info."""
    return _register_and_login(client, "testuser", "testpassword", "Test User")


@pytest.fixture
def login_as(client):
    """Factory fixture: create a user through the API and return its auth headers."""

    def _login_as(username: str, password: str = "sekret", name: str | None = None):
        return _register_and_login(client, username, password, name)

    return _login_as


@pytest.fixture
def initial_notes(db, auth_headers):
    """Seed the two tutorial notes owned by the auth_headers user."""
    notes = [Note(user_id=auth_headers.user_id, **data) for data in INITIAL_NOTES]
    db.add_all(notes)
    db.commit()
    for note in notes:
        db.refresh(note)
    return notes


@pytest.fixture
def notes_in_db(db):
    """Callable returning all notes currently stored."""

    def _notes_in_db() -> list[Note]:
        db.expire_all()
        return db.query(Note).all()

    return _notes_in_db
