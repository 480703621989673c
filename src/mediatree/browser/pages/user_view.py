# Copyright (c) 2025 mediatree and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Menu page for a single music library."""

from collections.abc import AsyncIterator, Sequence

from mediatree.browser.pages.base import LibraryPage, page_slice
from mediatree.models.elements import LibraryPageElement, NavigateAction, PageItem

# (route, title) in display order. Only "albums" has a content page today.
USER_VIEW_MENU: tuple[tuple[str, str], ...] = (
    ("albums", "Albums"),
    ("artists", "Artists"),
    ("favorites", "Favorites"),
    ("genres", "Genres"),
    ("playlists", "Playlists"),
    ("recent", "Recently played"),
)


class UserViewLibraryPage(LibraryPage):
    """Fixed menu of categories scoped to one library."""

    name = "userView"
    required_parameters = 1

    async def get_content(
        self, parameters: Sequence[str], offset: int, limit: int
    ) -> AsyncIterator[LibraryPageElement]:
        self.check_parameters(parameters)
        collection_id = parameters[0]

        for route, title in USER_VIEW_MENU[page_slice(offset, limit)]:
            yield PageItem(
                id=route,
                title=title,
                action=NavigateAction(route=route, parameters=(collection_id,)),
            )
