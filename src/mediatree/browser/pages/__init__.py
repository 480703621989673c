# Copyright (c) 2025 mediatree and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Library pages, one per category of catalog content."""

from mediatree.browser.pages.album import AlbumLibraryPage
from mediatree.browser.pages.albums import AlbumsLibraryPage
from mediatree.browser.pages.base import LibraryPage
from mediatree.browser.pages.root import RootLibraryPage
from mediatree.browser.pages.search import SearchLibraryPage
from mediatree.browser.pages.user_view import UserViewLibraryPage

__all__ = [
    "AlbumLibraryPage",
    "AlbumsLibraryPage",
    "LibraryPage",
    "RootLibraryPage",
    "SearchLibraryPage",
    "UserViewLibraryPage",
]
