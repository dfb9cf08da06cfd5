from schemas.shared import Link, Links, PageMetadata
from schemas.event import (
    EventBase, EventRequest, EventResponse, EventModel,
    EventListEmbedded, PagedEventsResponse,
)

__all__ = [
    "Link", "Links", "PageMetadata",
    "EventBase", "EventRequest", "EventResponse", "EventModel",
    "EventListEmbedded", "PagedEventsResponse",
]
