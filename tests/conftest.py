"""Pytest fixtures: per-test SQLite database, fixed-secret codec, TestClient."""
import os

# Set test environment variables before importing app modules
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret")
os.environ.setdefault("LOG_LEVEL", "DEBUG")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from blogapp.core.config import get_settings  # noqa: E402
from blogapp.core.security import SessionCodec, create_session_token, get_session_codec, hash_password  # noqa: E402
from blogapp.db.base import Base  # noqa: E402
from blogapp.db.session import get_db  # noqa: E402
from blogapp.main import app  # noqa: E402
from blogapp.models import Blog, Post, User  # noqa: E402


@pytest.fixture()
def engine(tmp_path):
    eng = create_engine(
        f"sqlite:///{tmp_path / 'test.db'}",
        connect_args={"check_same_thread": False},
    )
    Base.metadata.create_all(eng)
    yield eng
    eng.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest.fixture()
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def codec():
    return SessionCodec("test-secret")


@pytest.fixture()
def cookie_name():
    return get_settings().session_cookie_name


@pytest.fixture()
def client(session_factory, codec):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_session_codec] = lambda: codec
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def make_user(db):
    def _make(email: str = "a@x.com", password: str = "secret") -> User:
        user = User(email=email, password_hash=hash_password(password))
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make


@pytest.fixture()
def login(client, codec, cookie_name):
    """Put a valid session cookie for user on the test client."""

    def _login(user: User) -> TestClient:
        client.cookies.set(cookie_name, create_session_token(codec, user.id))
        return client

    return _login


@pytest.fixture()
def post(db, make_user):
    owner = make_user(email="owner@x.com")
    blog = Blog(name="Notes", user_id=owner.id)
    db.add(blog)
    db.commit()
    entry = Post(name="First", body="Hello world", blog_id=blog.id)
    db.add(entry)
    db.commit()
    db.refresh(entry)
    return entry
