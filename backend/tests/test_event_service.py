"""
Tests for services/event_service.py.

Most tests run the service over the real SQLAlchemy store (in-memory SQLite).
Policy checks that must prove the store was *not* written to use a
MagicMock store instead.

Run from the project root:
    cd backend
    pytest tests/test_event_service.py -v
"""

from datetime import datetime
from unittest.mock import MagicMock

import pytest

from db.models import Event
from db.pagination import PageRequest
from db.repository import EventStore
from services.event_service import EventService
from services.exceptions import EventNotFoundError


def _replacement():
    return Event(
        title="Rewritten",
        place="Online",
        speaker="Linus",
        event_type="WORKSHOP",
        date_time=datetime(2025, 2, 3, 14, 15),
    )


# ---------------------------------------------------------------------------
# Reads
# ---------------------------------------------------------------------------

class TestGetEvent:

    def test_missing_id_returns_none(self, service):
        assert service.get_event(404) is None

    def test_existing_id(self, service, make_events):
        (event,) = make_events(1)
        assert service.get_event(event.id).title == "Event 0"


class TestListing:

    def test_get_all_events_pages(self, service, make_events):
        make_events(25)
        page = service.get_all_events(PageRequest(0, 10))
        assert len(page.content) == 10
        assert page.total_elements == 25

    def test_get_all_events_by_title(self, service, make_events):
        make_events(4, title="Conf")
        make_events(6, title="Meetup")
        page = service.get_all_events_by_title("Conf", PageRequest(0, 10))
        assert page.total_elements == 4
        assert all("Conf" in e.title for e in page.content)


# ---------------------------------------------------------------------------
# Create
# ---------------------------------------------------------------------------

class TestCreateEvent:

    def test_store_assigns_id(self, service):
        created = service.create_event(Event(title="New"))
        assert created.id is not None
        assert service.get_event(created.id).title == "New"

    def test_caller_supplied_id_is_ignored(self, service):
        created = service.create_event(Event(id=777, title="Sneaky"))
        assert created.id != 777
        assert service.get_event(777) is None


# ---------------------------------------------------------------------------
# Update
# ---------------------------------------------------------------------------

class TestUpdateEvent:

    def test_overwrites_all_five_fields(self, service, make_events, db_session):
        (event,) = make_events(1)
        original_id = event.id

        updated = service.update_event(original_id, _replacement())

        assert updated.id == original_id
        db_session.expire_all()
        reread = service.get_event(original_id)
        assert reread.title == "Rewritten"
        assert reread.place == "Online"
        assert reread.speaker == "Linus"
        assert reread.event_type == "WORKSHOP"
        assert reread.date_time == datetime(2025, 2, 3, 14, 15)

    def test_fields_missing_from_replacement_become_null(self, service, make_events):
        (event,) = make_events(1)
        updated = service.update_event(event.id, Event(title="Only a title"))
        assert updated.title == "Only a title"
        assert updated.place is None
        assert updated.speaker is None
        assert updated.event_type is None
        assert updated.date_time is None

    def test_id_on_replacement_is_not_applied(self, service, make_events):
        (event,) = make_events(1)
        replacement = _replacement()
        replacement.id = event.id + 100
        assert service.update_event(event.id, replacement).id == event.id

    def test_missing_id_raises_not_found(self, service):
        with pytest.raises(EventNotFoundError) as exc_info:
            service.update_event(31337, _replacement())
        assert exc_info.value.event_id == 31337
        assert str(exc_info.value) == "Event not found with id: 31337"

    def test_missing_id_does_not_touch_store(self):
        store = MagicMock(spec=EventStore)
        store.find_by_id.return_value = None

        with pytest.raises(EventNotFoundError):
            EventService(store).update_event(5, _replacement())

        store.save.assert_not_called()
        store.delete_by_id.assert_not_called()


# ---------------------------------------------------------------------------
# Delete
# ---------------------------------------------------------------------------

class TestDeleteEvent:

    def test_existing_event_is_removed(self, service, make_events):
        (event,) = make_events(1)
        service.delete_event(event.id)
        assert service.get_event(event.id) is None

    def test_missing_event_is_a_no_op(self, service, make_events):
        make_events(2)
        assert service.delete_event(9999) is None
        assert service.get_all_events(PageRequest()).total_elements == 2

    def test_missing_event_skips_store_delete(self):
        store = MagicMock(spec=EventStore)
        store.exists_by_id.return_value = False

        EventService(store).delete_event(8)

        store.exists_by_id.assert_called_once_with(8)
        store.delete_by_id.assert_not_called()
