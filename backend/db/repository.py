"""Event persistence (repository pattern).

``EventStore`` is the whole persistence contract the service layer relies on;
``SqlAlchemyEventStore`` implements it on top of a request-scoped Session.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Optional

from sqlalchemy.orm import Query, Session

from .models import Event
from .pagination import Page, PageRequest

logger = logging.getLogger(__name__)


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def find_by_id(self, event_id: int) -> Optional[Event]:
        """Return the event with this id, or None if not found."""

    @abstractmethod
    def find_all(self, page_request: PageRequest) -> Page[Event]:
        """Return one page of all events in id order."""

    @abstractmethod
    def find_by_title_containing(self, title: str, page_request: PageRequest) -> Page[Event]:
        """Return one page of events whose title contains ``title``."""

    @abstractmethod
    def exists_by_id(self, event_id: int) -> bool:
        """Check if an event exists."""

    @abstractmethod
    def save(self, event: Event) -> Event:
        """Insert or update ``event`` and return the persisted record."""

    @abstractmethod
    def delete_by_id(self, event_id: int) -> None:
        """Remove the event with this id."""


class SqlAlchemyEventStore(EventStore):
    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, event_id: int) -> Optional[Event]:
        return self.db.get(Event, event_id)

    def find_all(self, page_request: PageRequest) -> Page[Event]:
        return self._paginate(self.db.query(Event), page_request)

    def find_by_title_containing(self, title: str, page_request: PageRequest) -> Page[Event]:
        # autoescape: a literal "%" or "_" in the search term is not a wildcard
        query = self.db.query(Event).filter(Event.title.contains(title, autoescape=True))
        return self._paginate(query, page_request)

    def exists_by_id(self, event_id: int) -> bool:
        exists = self.db.query(Event.id).filter(Event.id == event_id).exists()
        return bool(self.db.query(exists).scalar())

    def save(self, event: Event) -> Event:
        self.db.add(event)
        self.db.commit()
        self.db.refresh(event)
        return event

    def delete_by_id(self, event_id: int) -> None:
        self.db.query(Event).filter(Event.id == event_id).delete(synchronize_session="fetch")
        self.db.commit()

    def _paginate(self, query: Query, page_request: PageRequest) -> Page[Event]:
        total = query.order_by(None).count()
        rows = (
            query.order_by(Event.id)
            .offset(page_request.offset)
            .limit(page_request.page_size)
            .all()
        )
        logger.debug(
            "page fetched",
            extra={
                "page_number": page_request.page_number,
                "page_size": page_request.page_size,
                "returned": len(rows),
                "total": total,
            },
        )
        return Page.of(rows, page_request, total)
