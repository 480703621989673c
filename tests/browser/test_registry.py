# Copyright (c) 2025 mediatree and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Tests for the page registry."""

from collections.abc import AsyncIterator, Sequence

import pytest

from mediatree.browser.pages import (
    AlbumLibraryPage,
    AlbumsLibraryPage,
    LibraryPage,
    RootLibraryPage,
    SearchLibraryPage,
    UserViewLibraryPage,
)
from mediatree.browser.registry import PageRegistry
from mediatree.models.elements import LibraryPageElement


class MockLibraryPage(LibraryPage):
    """Mock page for registry tests."""

    name = "mock"

    async def get_content(
        self, parameters: Sequence[str], offset: int, limit: int
    ) -> AsyncIterator[LibraryPageElement]:
        return
        yield


class TestPageRegistry:
    """Test cases for PageRegistry."""

    def test_default_pages(self, mock_api):
        """Test the standard registry holds exactly the five content pages."""
        registry = PageRegistry.default(mock_api)

        assert registry.names == ["root", "userView", "albums", "album", "search"]
        assert isinstance(registry["root"], RootLibraryPage)
        assert isinstance(registry["userView"], UserViewLibraryPage)
        assert isinstance(registry["albums"], AlbumsLibraryPage)
        assert isinstance(registry["album"], AlbumLibraryPage)
        assert isinstance(registry["search"], SearchLibraryPage)
        assert all(page.api is mock_api for page in registry.values())

    @pytest.mark.parametrize(
        "name", ["artists", "favorites", "genres", "playlists", "recent", "suggested"]
    )
    def test_menu_only_pages_not_registered(self, mock_api, name: str):
        """Test navigation-only menu entries have no content page."""
        registry = PageRegistry.default(mock_api)

        assert name not in registry
        assert registry.get(name) is None

    def test_duplicate_names_rejected(self, mock_api):
        """Test two pages cannot share a name."""
        with pytest.raises(ValueError, match="Duplicate page name: mock"):
            PageRegistry([MockLibraryPage(mock_api), MockLibraryPage(mock_api)])

    def test_non_page_rejected(self):
        """Test only LibraryPage instances can be registered."""
        with pytest.raises(TypeError, match="must inherit from LibraryPage"):
            PageRegistry([object()])

    def test_read_only(self, mock_api):
        """Test the registry cannot be modified after construction."""
        registry = PageRegistry([MockLibraryPage(mock_api)])

        with pytest.raises(TypeError):
            registry["other"] = MockLibraryPage(mock_api)  # type: ignore[index]
        with pytest.raises(TypeError):
            registry._routes["other"] = MockLibraryPage(mock_api)  # type: ignore[index]
        assert len(registry) == 1
        assert list(registry) == ["mock"]
