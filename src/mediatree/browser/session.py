# Copyright (c) 2025 mediatree and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Host-facing callback serving browse requests as concurrent tasks."""

import asyncio
import logging
from collections.abc import Coroutine, Sequence
from typing import Any, Protocol, TypeVar

from mediatree.browser.engine import BrowsingEngine
from mediatree.browser.results import (
    LibraryParams,
    LibraryResult,
    MediaItem,
    ResultCode,
)
from mediatree.catalog.client import CatalogClient

logger = logging.getLogger(__name__)

T = TypeVar("T")

MAX_PAGE_SIZE = 1000


class SearchResultListener(Protocol):
    """Host hook notified when search results become available."""

    def notify_search_result_changed(
        self, query: str, item_count: int, params: LibraryParams | None
    ) -> None: ...


class LibrarySessionCallback:
    """Serves host browse requests.

    Each request runs as its own asyncio task and the task is returned to the
    host as a future-like handle. Cancelling the task cancels the work in
    flight, including search sub-queries.
    """

    def __init__(
        self,
        engine: BrowsingEngine,
        api: CatalogClient,
        *,
        max_page_size: int = MAX_PAGE_SIZE,
    ) -> None:
        self.engine = engine
        self.api = api
        self.max_page_size = max_page_size

    def _spawn(self, coro: Coroutine[Any, Any, T]) -> "asyncio.Task[T]":
        return asyncio.get_running_loop().create_task(coro)

    def _page_bounds(self, page: int, page_size: int) -> tuple[int, int] | None:
        if page < 0 or page_size < 1:
            return None
        return page * page_size, min(page_size, self.max_page_size)

    async def _bad_paging(
        self, page: int, page_size: int, params: LibraryParams | None
    ) -> LibraryResult[list[MediaItem]]:
        logger.warning("Rejecting page %d of size %d", page, page_size)
        return LibraryResult.of_error(ResultCode.ERROR_BAD_VALUE, params)

    def on_get_library_root(
        self, params: LibraryParams | None = None
    ) -> "asyncio.Task[LibraryResult[MediaItem]]":
        """Resolve the root node for the requested root variant."""

        async def get_library_root() -> LibraryResult[MediaItem]:
            token = self.engine.get_root(
                recent=bool(params and params.recent),
                suggested=bool(params and params.suggested),
            )
            logger.debug("onGetLibraryRoot %s -> %s", params, token)
            return self.engine.resolve_node(token, params)

        return self._spawn(get_library_root())

    def on_get_children(
        self,
        parent_id: str,
        page: int,
        page_size: int,
        params: LibraryParams | None = None,
    ) -> "asyncio.Task[LibraryResult[list[MediaItem]]]":
        """List one page of a node's children."""
        logger.debug("onGetChildren %s %d %d %s", parent_id, page, page_size, params)
        bounds = self._page_bounds(page, page_size)
        if bounds is None:
            return self._spawn(self._bad_paging(page, page_size, params))
        offset, limit = bounds
        return self._spawn(self.engine.list_children(parent_id, offset, limit, params))

    def on_get_item(self, media_id: str) -> "asyncio.Task[LibraryResult[MediaItem]]":
        """Resolve a single node by id."""

        async def get_item() -> LibraryResult[MediaItem]:
            logger.debug("onGetItem %s", media_id)
            return self.engine.item_lookup(media_id)

        return self._spawn(get_item())

    def on_search(
        self,
        listener: SearchResultListener,
        query: str,
        params: LibraryParams | None = None,
    ) -> "asyncio.Task[LibraryResult[None]]":
        """Acknowledge a search and tell the host that results can be fetched."""

        async def search() -> LibraryResult[None]:
            logger.debug("onSearch %r %s", query, params)
            # Placeholder count: the search itself runs on onGetSearchResult
            listener.notify_search_result_changed(query, 1, params)
            return LibraryResult.of_void(params)

        return self._spawn(search())

    def on_get_search_result(
        self,
        query: str,
        page: int,
        page_size: int,
        params: LibraryParams | None = None,
    ) -> "asyncio.Task[LibraryResult[list[MediaItem]]]":
        """Run a search and return its flattened results."""
        logger.debug("onGetSearchResult %r %d %d %s", query, page, page_size, params)
        bounds = self._page_bounds(page, page_size)
        if bounds is None:
            return self._spawn(self._bad_paging(page, page_size, params))
        offset, limit = bounds
        return self._spawn(self.engine.search(query, offset, limit, params))

    def on_add_media_items(
        self, media_items: Sequence[MediaItem]
    ) -> "asyncio.Task[list[MediaItem]]":
        """Attach a playable stream URL to each item, keeping order."""

        async def add_media_items() -> list[MediaItem]:
            logger.debug("onAddMediaItems %d item(s)", len(media_items))
            return [
                item.with_uri(self.api.get_universal_audio_url(item.media_id))
                for item in media_items
            ]

        return self._spawn(add_media_items())
