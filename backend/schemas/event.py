"""schemas/event.py — Event request/response schemas.

DB source: events — id, title, place, speaker, event_type, date_time

JSON keys are camelCase (eventType, dateTime).  Responses follow the HAL
layout: each event carries "_links", and a page of events is wrapped as
{"_embedded": {"eventList": [...]}, "_links": {...}, "page": {...}}.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from schemas.shared import Links, PageMetadata


class EventBase(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: Optional[str] = None
    place: Optional[str] = None
    speaker: Optional[str] = None
    event_type: Optional[str] = None
    date_time: Optional[datetime] = None


class EventRequest(EventBase):
    """Body for POST and PUT.  An id, if sent, is accepted and ignored."""
    id: Optional[int] = None


class EventResponse(EventBase):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    id: int


class EventModel(EventResponse):
    """An event plus its self link."""
    links: Links = Field(default_factory=dict, alias="_links")


class EventListEmbedded(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    event_list: list[EventModel] = Field(default_factory=list, alias="eventList")


class PagedEventsResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    embedded: EventListEmbedded = Field(default_factory=EventListEmbedded, alias="_embedded")
    links: Links = Field(default_factory=dict, alias="_links")
    page: PageMetadata
