# Copyright (c) 2025 mediatree and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Two-level content tree returned by library pages."""

from typing import Literal, Protocol

from pydantic import Field

from mediatree.models.base import FrozenModel
from mediatree.models.catalog import CatalogItem
from mediatree.models.enums import ImageType


class ImageUrlBuilder(Protocol):
    """Anything able to build a catalog image URL."""

    def get_image_url(self, item_id: str, image_type: ImageType, tag: str) -> str: ...


class PlayAction(FrozenModel):
    """Selecting the item plays the referenced catalog record."""

    kind: Literal["play"] = "play"
    item: CatalogItem = Field(..., description="Snapshot of the record to play")


class NavigateAction(FrozenModel):
    """Selecting the item opens another library page."""

    kind: Literal["navigate"] = "navigate"
    route: str = Field(..., description="Target page name")
    parameters: tuple[str, ...] = Field(
        default=(), description="Ordered parameters for the target page"
    )
    grid: bool = Field(default=True, description="Display children as a grid")


LibraryItemAction = PlayAction | NavigateAction


class PageItem(FrozenModel):
    """A leaf element of a page."""

    id: str = Field(..., description="Element id")
    title: str = Field(..., description="Display title")
    image: str | None = Field(None, description="Artwork URL")
    action: LibraryItemAction = Field(..., discriminator="kind")


class PageGroup(FrozenModel):
    """A named section of items. Groups never nest."""

    title: str = Field(..., description="Section title")
    items: tuple[PageItem, ...] = Field(default=(), description="Ordered members")


LibraryPageElement = PageGroup | PageItem


def catalog_image_url(api: ImageUrlBuilder, item: CatalogItem) -> str | None:
    """Get the primary artwork for a record, falling back to its album's artwork."""
    if item.primary_image_tag is not None:
        return api.get_image_url(item.id, ImageType.PRIMARY, item.primary_image_tag)
    if item.album_id is not None and item.album_primary_image_tag is not None:
        return api.get_image_url(
            item.album_id, ImageType.PRIMARY, item.album_primary_image_tag
        )
    return None


def page_item_from_catalog(
    api: ImageUrlBuilder,
    item: CatalogItem,
    *,
    id: str | None = None,  # noqa: A002
    title: str | None = None,
    with_image: bool = True,
    action: LibraryItemAction | None = None,
) -> PageItem:
    """Build a page item from a catalog record, playing it unless told otherwise."""
    return PageItem(
        id=id if id is not None else item.id,
        title=title if title is not None else item.name or "",
        image=catalog_image_url(api, item) if with_image else None,
        action=action if action is not None else PlayAction(item=item),
    )
