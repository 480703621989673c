# Copyright (c) 2025 mediatree and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Catalog snapshots and the page element tree."""

from mediatree.models.base import FrozenModel, MediaTreeBaseModel
from mediatree.models.catalog import CatalogItem, CatalogItemsResult
from mediatree.models.elements import (
    LibraryItemAction,
    LibraryPageElement,
    NavigateAction,
    PageGroup,
    PageItem,
    PlayAction,
    catalog_image_url,
    page_item_from_catalog,
)
from mediatree.models.enums import (
    CollectionType,
    ImageType,
    ItemKind,
    ItemSortBy,
    StreamProtocol,
)

__all__ = [
    "CatalogItem",
    "CatalogItemsResult",
    "CollectionType",
    "FrozenModel",
    "ImageType",
    "ItemKind",
    "ItemSortBy",
    "LibraryItemAction",
    "LibraryPageElement",
    "MediaTreeBaseModel",
    "NavigateAction",
    "PageGroup",
    "PageItem",
    "PlayAction",
    "StreamProtocol",
    "catalog_image_url",
    "page_item_from_catalog",
]
