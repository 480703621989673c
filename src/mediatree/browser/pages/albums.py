# Copyright (c) 2025 mediatree and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Page listing the albums of a music library."""

from collections.abc import AsyncIterator, Sequence

from mediatree.browser.pages.base import LibraryPage
from mediatree.models.elements import (
    LibraryPageElement,
    NavigateAction,
    page_item_from_catalog,
)
from mediatree.models.enums import ImageType, ItemKind, ItemSortBy


class AlbumsLibraryPage(LibraryPage):
    """Albums under a library, sorted by name, paginated by the server."""

    name = "albums"
    required_parameters = 1

    async def get_content(
        self, parameters: Sequence[str], offset: int, limit: int
    ) -> AsyncIterator[LibraryPageElement]:
        self.check_parameters(parameters)
        library_id = parameters[0]

        # A short page is the normal end of the listing
        result = await self.api.get_items(
            parent_id=library_id,
            include_item_types=[ItemKind.MUSIC_ALBUM],
            sort_by=[ItemSortBy.SORT_NAME],
            recursive=True,
            image_type_limit=1,
            enable_image_types=[ImageType.PRIMARY],
            start_index=offset,
            limit=limit,
        )

        for album in result.items:
            yield page_item_from_catalog(
                self.api,
                album,
                id=f"album,{album.id}",
                action=NavigateAction(
                    route="album", parameters=(album.id,), grid=False
                ),
            )
