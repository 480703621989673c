# Copyright (c) 2025 mediatree and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Tests for the search page fan-out."""

import asyncio
from collections.abc import AsyncIterator

import pytest

from mediatree.browser.exceptions import SearchAggregateError
from mediatree.browser.pages import SearchLibraryPage
from mediatree.browser.pages.search import SEARCH_CATEGORY_LIMIT
from mediatree.catalog.exceptions import NetworkError
from mediatree.models.elements import PageGroup, PlayAction
from mediatree.models.enums import ImageType, ItemKind


async def collect(content: AsyncIterator) -> list:
    """Drain a page's content."""
    return [element async for element in content]


class TestSearchLibraryPage:
    """Test the search page."""

    @pytest.mark.parametrize("query", ["", " ", "\t\n"])
    @pytest.mark.asyncio
    async def test_blank_query(self, mock_api, query: str):
        """Test a blank query returns nothing without calling the server."""
        page = SearchLibraryPage(mock_api)
        elements = await collect(page.get_content([query], 0, 10))

        assert elements == []
        mock_api.get_items.assert_not_called()

    @pytest.mark.asyncio
    async def test_three_groups_in_fixed_order(
        self, mock_api, result_factory, record_factory
    ):
        """Test playlists, albums and artists come back as three ordered groups."""
        by_kind = {
            ItemKind.PLAYLIST: result_factory(record_factory("p1", "Road trip")),
            ItemKind.MUSIC_ALBUM: result_factory(),
            ItemKind.MUSIC_ARTIST: result_factory(
                record_factory("ar1", "Daft Punk"), record_factory("ar2", "Justice")
            ),
        }

        async def get_items(**kwargs):
            (kind,) = kwargs["include_item_types"]
            return by_kind[kind]

        mock_api.get_items.side_effect = get_items

        elements = await collect(SearchLibraryPage(mock_api).get_content(["da"], 0, 10))

        assert [element.title for element in elements] == [
            "Playlists",
            "Albums",
            "Artists",
        ]
        assert all(isinstance(element, PageGroup) for element in elements)
        playlists, albums, artists = elements
        assert [item.id for item in playlists.items] == ["p1"]
        assert albums.items == ()
        assert [item.title for item in artists.items] == ["Daft Punk", "Justice"]
        assert isinstance(artists.items[0].action, PlayAction)

    @pytest.mark.parametrize(("offset", "limit"), [(0, 1), (100, 5), (7, 1000)])
    @pytest.mark.asyncio
    async def test_offset_and_limit_ignored(self, mock_api, offset: int, limit: int):
        """Test search ignores caller paging and caps each category at 50.

        This is a documented limitation of search paging.
        """
        elements = await collect(
            SearchLibraryPage(mock_api).get_content(["query"], offset, limit)
        )

        assert len(elements) == 3
        assert mock_api.get_items.await_count == 3
        for call in mock_api.get_items.await_args_list:
            assert call.kwargs == {
                "search_term": "query",
                "include_item_types": call.kwargs["include_item_types"],
                "image_type_limit": 1,
                "enable_image_types": [ImageType.PRIMARY],
                "limit": SEARCH_CATEGORY_LIMIT,
            }
        assert SEARCH_CATEGORY_LIMIT == 50

    @pytest.mark.asyncio
    async def test_sub_queries_run_concurrently(self, mock_api, result_factory):
        """Test all three sub-queries are in flight at the same time."""
        started = 0
        all_started = asyncio.Event()

        async def get_items(**kwargs):
            nonlocal started
            started += 1
            if started == 3:
                all_started.set()
            await asyncio.wait_for(all_started.wait(), timeout=1)
            return result_factory()

        mock_api.get_items.side_effect = get_items

        elements = await collect(SearchLibraryPage(mock_api).get_content(["q"], 0, 10))

        assert len(elements) == 3

    @pytest.mark.asyncio
    async def test_one_failure_fails_whole_search(self, mock_api, result_factory):
        """Test a single failing sub-query fails the search and cancels the rest."""
        cancelled: list[ItemKind] = []

        async def get_items(**kwargs):
            (kind,) = kwargs["include_item_types"]
            if kind == ItemKind.MUSIC_ALBUM:
                raise NetworkError("albums down")
            try:
                await asyncio.sleep(10)
            except asyncio.CancelledError:
                cancelled.append(kind)
                raise
            return result_factory()

        mock_api.get_items.side_effect = get_items

        content = SearchLibraryPage(mock_api).get_content(["q"], 0, 10)
        with pytest.raises(SearchAggregateError) as exc_info:
            await collect(content)

        assert [type(e) for e in exc_info.value.failures] == [NetworkError]
        assert sorted(cancelled) == sorted([ItemKind.PLAYLIST, ItemKind.MUSIC_ARTIST])

    @pytest.mark.asyncio
    async def test_cancellation_propagates(self, mock_api):
        """Test cancelling the outer request cancels in-flight sub-queries."""
        in_flight = asyncio.Event()
        cancelled = 0

        async def get_items(**kwargs):
            nonlocal cancelled
            in_flight.set()
            try:
                await asyncio.sleep(10)
            except asyncio.CancelledError:
                cancelled += 1
                raise

        mock_api.get_items.side_effect = get_items

        task = asyncio.create_task(
            collect(SearchLibraryPage(mock_api).get_content(["q"], 0, 10))
        )
        await in_flight.wait()
        task.cancel()

        with pytest.raises(asyncio.CancelledError):
            await task
        assert cancelled == 3
