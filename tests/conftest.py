import os
import shutil
import tempfile
from typing import Generator

import pytest

# Settings are read once at import time, so the environment has to be in
# place before anything from trifix is imported.
_TMP_DIR = tempfile.mkdtemp(prefix="trifix-tests-")
UPLOAD_DIR = os.path.join(_TMP_DIR, "uploads")

os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TMP_DIR, 'trifix_test.db')}"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["UPLOAD_DIR"] = UPLOAD_DIR
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["CREATE_SCHEMA"] = "false"

from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import event  # noqa: E402
from sqlalchemy.orm import Session  # noqa: E402

from trifix.db.base import Base  # noqa: E402
from trifix.db.session import SessionLocal, engine  # noqa: E402
from trifix.main import app  # noqa: E402
from trifix.models.user import User  # noqa: E402


@event.listens_for(engine, "connect")
def _enforce_foreign_keys(dbapi_connection, connection_record):
    # SQLite leaves FK checks off by default; the server databases do not
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


ANA = {
    "name": "Ana",
    "surname": "Lee",
    "email": "ana@x.com",
    "phone": "555",
    "location": "CDMX",
    "password": "secret1",
}


@pytest.fixture(autouse=True)
def _fresh_schema() -> Generator[None, None, None]:
    """Every test starts from empty tables and an empty upload directory."""
    Base.metadata.create_all(bind=engine)
    os.makedirs(UPLOAD_DIR, exist_ok=True)
    yield
    Base.metadata.drop_all(bind=engine)
    shutil.rmtree(UPLOAD_DIR, ignore_errors=True)


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db() -> Generator[Session, None, None]:
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def register_user(client, db):
    """Register through the API and return the new user's id."""

    def _register(**overrides) -> int:
        body = {**ANA, **overrides}
        resp = client.post("/register", json=body)
        assert resp.status_code == 200, resp.text
        return db.query(User).filter(User.email == body["email"]).one().id

    return _register


@pytest.fixture
def drop_table():
    """Drop one table mid-test so the next query on it fails."""

    def _drop(name: str) -> None:
        with engine.begin() as conn:
            Base.metadata.tables[name].drop(conn)

    return _drop


def pytest_sessionfinish(session, exitstatus):
    engine.dispose()
    shutil.rmtree(_TMP_DIR, ignore_errors=True)
