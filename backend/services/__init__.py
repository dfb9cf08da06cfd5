"""Service layer for the Event Service."""

from .event_service import EventService
from .exceptions import EventNotFoundError

__all__ = ["EventService", "EventNotFoundError"]
