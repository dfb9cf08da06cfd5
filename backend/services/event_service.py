"""
Event service — sits between the HTTP layer and the event store.

Policies applied here:
- create ignores any caller-supplied id; the store assigns one
- update is a full replacement of every mutable field, never a partial patch,
  and fails with EventNotFoundError when the target does not exist
- delete is idempotent: a missing id is a silent no-op

Usage:
    >>> service = EventService(SqlAlchemyEventStore(db_session))
    >>> page = service.get_all_events(PageRequest(0, 10))
"""

from __future__ import annotations

import logging
from typing import Optional

from db.models import Event
from db.pagination import Page, PageRequest
from db.repository import EventStore
from services.exceptions import EventNotFoundError

logger = logging.getLogger(__name__)


class EventService:
    """CRUD operations on events."""

    def __init__(self, store: EventStore):
        self.store = store

    def get_event(self, event_id: int) -> Optional[Event]:
        """Return the event, or None when no event has this id."""
        event = self.store.find_by_id(event_id)
        logger.debug("get_event", extra={"event_id": event_id, "found": event is not None})
        return event

    def get_all_events(self, page_request: PageRequest) -> Page[Event]:
        return self.store.find_all(page_request)

    def get_all_events_by_title(self, title: str, page_request: PageRequest) -> Page[Event]:
        return self.store.find_by_title_containing(title, page_request)

    def create_event(self, event: Event) -> Event:
        """Persist a new event and return it with its generated id."""
        event.id = None
        saved = self.store.save(event)
        logger.info("event created", extra={"event_id": saved.id, "title": saved.title})
        return saved

    def update_event(self, event_id: int, event: Event) -> Event:
        """Overwrite every mutable field of an existing event.

        Raises:
            EventNotFoundError: no event has ``event_id``; nothing is written.
        """
        found = self.store.find_by_id(event_id)
        if found is None:
            logger.info("update of missing event", extra={"event_id": event_id})
            raise EventNotFoundError(event_id)

        for name in Event.MUTABLE_FIELDS:
            setattr(found, name, getattr(event, name))

        updated = self.store.save(found)
        logger.info("event updated", extra={"event_id": event_id})
        return updated

    def delete_event(self, event_id: int) -> None:
        if self.store.exists_by_id(event_id):
            self.store.delete_by_id(event_id)
            logger.info("event deleted", extra={"event_id": event_id})
        else:
            logger.debug("delete of missing event ignored", extra={"event_id": event_id})
