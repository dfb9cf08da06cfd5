"""
events.py — Event endpoints

Routes (mounted under /api):
    GET     /events                 Paginated list of all events
    GET     /events/byTitle         Paginated list of events whose title contains a phrase
    GET     /events/{id}            Single event
    POST    /events                 Create an event (id in the body is ignored)
    PUT     /events/{id}            Replace every field of an existing event
    DELETE  /events/{id}            Delete an event (204 even if it did not exist)

Every event in a response carries a "self" link; paginated responses also
carry first/prev/next/last/self navigation links (see api/links.py).
"""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, Query, Request, Response, status

from api.dependencies import get_event_service
from api.links import event_links, page_links
from core.config import settings
from db.models import Event
from db.pagination import Page, PageRequest
from schemas.event import (
    EventListEmbedded,
    EventModel,
    EventRequest,
    EventResponse,
    PagedEventsResponse,
)
from schemas.shared import PageMetadata
from services.event_service import EventService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/events", tags=["events"])

# Ids and row offsets must fit a signed 64-bit database integer
_MAX_BIGINT = 2**63 - 1

EventId = Annotated[int, Path(ge=-_MAX_BIGINT - 1, le=_MAX_BIGINT, description="The ID of the event")]
PageNumber = Annotated[
    int,
    Query(
        ge=0,
        le=_MAX_BIGINT // settings.max_page_size,
        alias="pageNumber",
        description="The page number to be retrieved (0-indexed)",
    ),
]
PageSize = Annotated[
    int,
    Query(
        ge=1,
        le=settings.max_page_size,
        alias="pageSize",
        description="The number of events on a single page",
    ),
]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _to_record(payload: EventRequest) -> Event:
    return Event(**payload.model_dump(include=set(Event.MUTABLE_FIELDS)))


def _to_model(event: Event, base_url: str) -> EventModel:
    body = EventResponse.model_validate(event).model_dump()
    return EventModel(**body, links=event_links(base_url, event.id))


def _to_paged_response(
    page: Page[Event],
    page_request: PageRequest,
    base_url: str,
    title: str | None = None,
) -> PagedEventsResponse:
    return PagedEventsResponse(
        embedded=EventListEmbedded(event_list=[_to_model(e, base_url) for e in page.content]),
        links=page_links(base_url, page_request, page, title=title),
        page=PageMetadata(
            size=page.page_size,
            total_elements=page.total_elements,
            total_pages=page.total_pages,
            number=page.page_number,
        ),
    )


# ---------------------------------------------------------------------------
# Routes — /byTitle must be registered before /{event_id}
# ---------------------------------------------------------------------------

@router.get(
    "",
    response_model=PagedEventsResponse,
    summary="Get a paginated list of all events",
    description="The response contains links to the first, previous, next and last page.",
)
def get_all_events(
    request: Request,
    page_number: PageNumber = 0,
    page_size: PageSize = settings.default_page_size,
    service: EventService = Depends(get_event_service),
):
    page_request = PageRequest(page_number, page_size)
    page = service.get_all_events(page_request)
    return _to_paged_response(page, page_request, str(request.base_url))


@router.get(
    "/byTitle",
    response_model=PagedEventsResponse,
    summary="Get a paginated list of events with a specific title",
    description=(
        "Returns events whose title contains the given phrase. Every navigation "
        "link keeps the title parameter."
    ),
)
def get_all_events_by_title(
    request: Request,
    title: str = Query(..., description="The phrase to search for in event titles"),
    page_number: PageNumber = 0,
    page_size: PageSize = settings.default_page_size,
    service: EventService = Depends(get_event_service),
):
    page_request = PageRequest(page_number, page_size)
    page = service.get_all_events_by_title(title, page_request)
    return _to_paged_response(page, page_request, str(request.base_url), title=title)


@router.get(
    "/{event_id}",
    response_model=EventModel,
    summary="Get an event by ID",
    responses={404: {"description": "The event with the specified ID was not found"}},
)
def get_event(event_id: EventId, request: Request, service: EventService = Depends(get_event_service)):
    event = service.get_event(event_id)
    if event is None:
        raise HTTPException(status_code=404, detail=f"Event not found with id: {event_id}")
    return _to_model(event, str(request.base_url))


@router.post(
    "",
    response_model=EventModel,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new event",
    description="Saves the event and returns it with its generated ID. Any ID in the body is ignored.",
)
def create_event(
    payload: EventRequest,
    request: Request,
    response: Response,
    service: EventService = Depends(get_event_service),
):
    if payload.id is not None:
        logger.debug("ignoring client-supplied id on create", extra={"supplied_id": payload.id})
    saved = service.create_event(_to_record(payload))
    model = _to_model(saved, str(request.base_url))
    response.headers["Location"] = model.links["self"].href
    return model


@router.put(
    "/{event_id}",
    response_model=EventModel,
    summary="Update an existing event",
    description="Overwrites every field of the event with the values in the body.",
    responses={404: {"description": "Event with the provided ID doesn't exist"}},
)
def update_event(
    event_id: EventId,
    payload: EventRequest,
    request: Request,
    service: EventService = Depends(get_event_service),
):
    # EventNotFoundError is turned into a 404 by the handler in api/main.py
    updated = service.update_event(event_id, _to_record(payload))
    return _to_model(updated, str(request.base_url))


@router.delete(
    "/{event_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete an event by ID",
    response_class=Response,
)
def delete_event(event_id: EventId, service: EventService = Depends(get_event_service)):
    service.delete_event(event_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
