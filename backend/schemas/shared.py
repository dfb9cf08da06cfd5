"""schemas/shared.py — Reusable building blocks shared across schema modules."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Link(BaseModel):
    """A single hypermedia link, rendered as {"href": "..."}."""
    href: str


# Relation name -> link, e.g. {"self": {"href": ...}, "next": {"href": ...}}
Links = dict[str, Link]


class PageMetadata(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    size: int
    total_elements: int
    total_pages: int
    number: int
