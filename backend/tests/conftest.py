"""
conftest.py for backend/tests/

Points the app at an in-memory SQLite database *before* anything imports
core.config, so tests never touch a real database or write log files.
Tables are recreated for every test.

Run from the project root:
    cd backend
    pytest tests -v
"""

import os
import sys
from datetime import datetime, timedelta

import pytest

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["LOG_TO_FILE"] = "false"
os.environ.setdefault("LOG_LEVEL", "INFO")

# Add backend/ to sys.path so `api`, `core`, `db`, ... import as top-level packages.
_backend_dir = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if _backend_dir not in sys.path:
    sys.path.insert(0, _backend_dir)

from fastapi.testclient import TestClient  # noqa: E402

from api.main import app  # noqa: E402
from db.database import Base, SessionLocal, engine  # noqa: E402
from db.models import Event  # noqa: E402
from db.repository import SqlAlchemyEventStore  # noqa: E402
from services.event_service import EventService  # noqa: E402

BASE_DATE = datetime(2024, 5, 1, 9, 0)


# ---------------------------------------------------------------------------
# Database fixtures
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _schema():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def store(db_session):
    return SqlAlchemyEventStore(db_session)


@pytest.fixture
def service(store):
    return EventService(store)


@pytest.fixture
def make_events(store):
    """Factory: make_events(n, title="Event") persists n events and returns them.

    Titles are "<title> 0", "<title> 1", ...; dates are one day apart.
    """
    def _make(n, title="Event", **fields):
        created = []
        for i in range(n):
            event = Event(
                title=f"{title} {i}",
                place=fields.get("place", "Main Hall"),
                speaker=fields.get("speaker", "Ada Lovelace"),
                event_type=fields.get("event_type", "TALK"),
                date_time=fields.get("date_time", BASE_DATE + timedelta(days=i)),
            )
            created.append(store.save(event))
        return created

    return _make


# ---------------------------------------------------------------------------
# HTTP client
# ---------------------------------------------------------------------------

@pytest.fixture
def client():
    # Not used as a context manager: the lifespan (logging setup, init_db) is
    # skipped because _schema already manages the tables.
    return TestClient(app)


@pytest.fixture
def event_payload():
    return {
        "title": "PyCon Conference",
        "place": "Room 101",
        "speaker": "Grace Hopper",
        "eventType": "CONFERENCE",
        "dateTime": "2024-06-01T10:30:00",
    }
