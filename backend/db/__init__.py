"""Database package for the Event Service."""

from .database import Base, engine, SessionLocal, init_db
from .models import Event
from .pagination import Page, PageRequest
from .repository import EventStore, SqlAlchemyEventStore

__all__ = [
    "Base",
    "engine",
    "SessionLocal",
    "init_db",
    "Event",
    "Page",
    "PageRequest",
    "EventStore",
    "SqlAlchemyEventStore",
]
