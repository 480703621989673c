# Copyright (c) 2025 mediatree and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Page listing the tracks of one album."""

from collections.abc import AsyncIterator, Sequence

from mediatree.browser.pages.base import LibraryPage
from mediatree.models.elements import LibraryPageElement, page_item_from_catalog
from mediatree.models.enums import ImageType, ItemSortBy


class AlbumLibraryPage(LibraryPage):
    """Playable tracks of an album, sorted by name, paginated by the server."""

    name = "album"
    required_parameters = 1

    async def get_content(
        self, parameters: Sequence[str], offset: int, limit: int
    ) -> AsyncIterator[LibraryPageElement]:
        self.check_parameters(parameters)
        album_id = parameters[0]

        result = await self.api.get_items(
            parent_id=album_id,
            sort_by=[ItemSortBy.SORT_NAME],
            image_type_limit=1,
            enable_image_types=[ImageType.PRIMARY],
            start_index=offset,
            limit=limit,
        )

        for track in result.items:
            yield page_item_from_catalog(self.api, track)
