# Copyright (c) 2025 mediatree and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Root page listing the user's music libraries."""

import logging
from collections.abc import AsyncIterator, Sequence

from mediatree.browser.pages.base import LibraryPage, page_slice
from mediatree.models.elements import (
    LibraryPageElement,
    NavigateAction,
    page_item_from_catalog,
)
from mediatree.models.enums import CollectionType

logger = logging.getLogger(__name__)


class RootLibraryPage(LibraryPage):
    """
    Root page that returns the available music libraries (user views).

    Only audio collections are listed. Hosts show few root entries, so the set
    is expected to stay small and is sliced locally.
    """

    name = "root"

    async def get_content(
        self, parameters: Sequence[str], offset: int, limit: int
    ) -> AsyncIterator[LibraryPageElement]:
        user_views = await self.api.get_user_views()
        music_views = [
            view
            for view in user_views.items
            if view.collection_type == CollectionType.MUSIC
        ]
        logger.debug(
            "Found %d music libraries out of %d user views",
            len(music_views),
            len(user_views.items),
        )

        for view in music_views[page_slice(offset, limit)]:
            yield page_item_from_catalog(
                self.api,
                view,
                id=f"userView,{view.id}",
                with_image=False,
                action=NavigateAction(
                    route="userView", parameters=(view.id,), grid=False
                ),
            )
