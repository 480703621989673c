# Copyright (c) 2025 mediatree and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Registry mapping route page names to library pages."""

import logging
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from mediatree.browser.pages import (
    AlbumLibraryPage,
    AlbumsLibraryPage,
    LibraryPage,
    RootLibraryPage,
    SearchLibraryPage,
    UserViewLibraryPage,
)
from mediatree.catalog.client import CatalogClient

logger = logging.getLogger(__name__)

DEFAULT_PAGES: tuple[type[LibraryPage], ...] = (
    RootLibraryPage,
    UserViewLibraryPage,
    AlbumsLibraryPage,
    AlbumLibraryPage,
    # TODO: add pages for artists, genres, favorites, playlists and recents
    SearchLibraryPage,
)


class PageRegistry(Mapping[str, LibraryPage]):
    """Read-only mapping of page name to page, built once at startup.

    The registry is never mutated after construction and can be shared by any
    number of concurrent requests.
    """

    def __init__(self, pages: Iterable[LibraryPage]) -> None:
        routes: dict[str, LibraryPage] = {}
        for page in pages:
            if not isinstance(page, LibraryPage):
                msg = "Registered pages must inherit from LibraryPage"
                raise TypeError(msg)
            if page.name in routes:
                msg = f"Duplicate page name: {page.name}"
                raise ValueError(msg)
            routes[page.name] = page

        self._routes = MappingProxyType(routes)
        logger.info("Registered library pages: %s", ", ".join(self._routes))

    @classmethod
    def default(cls, api: CatalogClient) -> "PageRegistry":
        """Build the registry of standard pages backed by a catalog client."""
        return cls(page_class(api) for page_class in DEFAULT_PAGES)

    @property
    def names(self) -> list[str]:
        """Get the registered page names."""
        return list(self._routes)

    def __getitem__(self, name: str) -> LibraryPage:
        return self._routes[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._routes)

    def __len__(self) -> int:
        return len(self._routes)
