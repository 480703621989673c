# Copyright (c) 2025 mediatree and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Browsing engine exposing the catalog to a media-browsing host."""

from mediatree.browser.engine import BrowsingEngine, flatten_elements, to_media_item
from mediatree.browser.exceptions import (
    BrowseError,
    PageContractError,
    SearchAggregateError,
)
from mediatree.browser.registry import PageRegistry
from mediatree.browser.results import (
    GROUP_TITLE_EXTRA,
    LibraryParams,
    LibraryResult,
    MediaItem,
    ResultCode,
)
from mediatree.browser.session import LibrarySessionCallback, SearchResultListener

__all__ = [
    "GROUP_TITLE_EXTRA",
    "BrowseError",
    "BrowsingEngine",
    "LibraryParams",
    "LibraryResult",
    "LibrarySessionCallback",
    "MediaItem",
    "PageContractError",
    "PageRegistry",
    "ResultCode",
    "SearchAggregateError",
    "SearchResultListener",
    "flatten_elements",
    "to_media_item",
]
