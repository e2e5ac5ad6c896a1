"""Hypermedia (HAL-style) representation schemas.

Every resource response carries a ``_links`` object; collections wrap their
items in ``_embedded``. Aliases are used for both validation and
serialization because FastAPI re-validates the dumped response.
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class Link(BaseModel):
    """A single hypermedia link."""

    href: str


class RepresentationModel(BaseModel):
    """Base for any resource rendered with links."""

    model_config = ConfigDict(populate_by_name=True)

    links: dict[str, Link] = Field(default_factory=dict, alias="_links")


class CollectionModel(RepresentationModel, Generic[T]):
    """A collection of resources under ``_embedded.<relation>``."""

    embedded: dict[str, list[T]] = Field(default_factory=dict, alias="_embedded")
