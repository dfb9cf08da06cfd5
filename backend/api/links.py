"""api/links.py — Hypermedia link construction for event responses.

Links are absolute URLs built from the request's base URL and the known
route templates below:

    {base}/api/events/{id}
    {base}/api/events?pageNumber=N&pageSize=S
    {base}/api/events/byTitle?title=T&pageNumber=N&pageSize=S

Navigation rules for a page of results:
    first  always
    prev   only if a previous page exists
    next   only if a next page exists
    last   only if there is more than one page and this is not the last one
    self   always
"""

from __future__ import annotations

from typing import Optional
from urllib.parse import urlencode

from db.pagination import Page, PageRequest
from schemas.shared import Link, Links

EVENTS_PATH = "/api/events"
EVENTS_BY_TITLE_PATH = f"{EVENTS_PATH}/byTitle"


def _base(base_url: str) -> str:
    return str(base_url).rstrip("/")


def event_href(base_url: str, event_id: int) -> str:
    return f"{_base(base_url)}{EVENTS_PATH}/{event_id}"


def event_links(base_url: str, event_id: int) -> Links:
    return {"self": Link(href=event_href(base_url, event_id))}


def events_page_href(
    base_url: str,
    page_number: int,
    page_size: int,
    title: Optional[str] = None,
) -> str:
    """URL of one page of the event list, or of a title search when ``title`` is set."""
    if title is None:
        path = EVENTS_PATH
        params = {"pageNumber": page_number, "pageSize": page_size}
    else:
        path = EVENTS_BY_TITLE_PATH
        params = {"title": title, "pageNumber": page_number, "pageSize": page_size}
    return f"{_base(base_url)}{path}?{urlencode(params)}"


def page_links(
    base_url: str,
    page_request: PageRequest,
    page: Page,
    title: Optional[str] = None,
) -> Links:
    """Navigation links (first/prev/next/last/self) for ``page``."""

    def link(page_number: int) -> Link:
        return Link(href=events_page_href(base_url, page_number, page_request.page_size, title))

    links: Links = {"first": link(page_request.first().page_number)}
    if page.has_previous:
        links["prev"] = link(page_request.previous_or_first().page_number)
    if page.has_next:
        links["next"] = link(page_request.next().page_number)
    if page.total_pages > 1 and not page.is_last:
        links["last"] = link(page.total_pages - 1)
    links["self"] = link(page_request.page_number)
    return links
