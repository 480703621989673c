# Copyright (c) 2025 mediatree and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Search page fanning out one query per result category."""

import asyncio
import logging
from collections.abc import AsyncIterator, Sequence

from mediatree.browser.exceptions import SearchAggregateError
from mediatree.browser.pages.base import LibraryPage
from mediatree.models.elements import (
    LibraryPageElement,
    PageGroup,
    PageItem,
    page_item_from_catalog,
)
from mediatree.models.enums import ImageType, ItemKind

logger = logging.getLogger(__name__)

# Per-category cap. Caller offset/limit are not applied to search results.
SEARCH_CATEGORY_LIMIT = 50

# (group title, item kinds) in the order the groups are returned
SEARCH_CATEGORIES: tuple[tuple[str, tuple[ItemKind, ...]], ...] = (
    ("Playlists", (ItemKind.PLAYLIST,)),
    ("Albums", (ItemKind.MUSIC_ALBUM,)),
    ("Artists", (ItemKind.MUSIC_ARTIST,)),
)


class SearchLibraryPage(LibraryPage):
    """
    Search playlists, albums and artists at once.

    The three category queries run concurrently and are joined all-or-nothing:
    if one fails the others are cancelled and the whole search fails. On
    success exactly one group per category is returned, in fixed order, even
    when a group is empty. A blank query returns nothing without touching the
    server.
    """

    name = "search"
    required_parameters = 1

    async def get_content(
        self, parameters: Sequence[str], offset: int, limit: int
    ) -> AsyncIterator[LibraryPageElement]:
        self.check_parameters(parameters)
        query = parameters[0]
        if not query.strip():
            return

        try:
            async with asyncio.TaskGroup() as group:
                tasks = [
                    group.create_task(self._search(query, kinds))
                    for _, kinds in SEARCH_CATEGORIES
                ]
        except ExceptionGroup as e:
            msg = f"Search for {query!r} failed"
            raise SearchAggregateError(msg, failures=list(e.exceptions)) from e

        for (title, _), task in zip(SEARCH_CATEGORIES, tasks, strict=True):
            yield PageGroup(title=title, items=tuple(task.result()))

    async def _search(
        self, query: str, kinds: Sequence[ItemKind]
    ) -> list[PageItem]:
        result = await self.api.get_items(
            search_term=query,
            include_item_types=kinds,
            image_type_limit=1,
            enable_image_types=[ImageType.PRIMARY],
            limit=SEARCH_CATEGORY_LIMIT,
        )
        logger.debug(
            "Search %r matched %d %s record(s)",
            query,
            len(result.items),
            ",".join(kinds),
        )
        return [page_item_from_catalog(self.api, item) for item in result.items]
