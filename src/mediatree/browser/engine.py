# Copyright (c) 2025 mediatree and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Browsing engine turning route tokens into host results."""

import logging
from collections.abc import Iterable

from mediatree.browser.exceptions import SearchAggregateError
from mediatree.browser.registry import PageRegistry
from mediatree.browser.results import (
    BROWSABLE_STYLE_EXTRA,
    GROUP_TITLE_EXTRA,
    PLAYABLE_STYLE_EXTRA,
    ContentStyle,
    LibraryParams,
    LibraryResult,
    MediaItem,
    ResultCode,
)
from mediatree.catalog.exceptions import CatalogError
from mediatree.core.route_codec import RouteDecodeFailure, decode_route, encode_route
from mediatree.models.elements import (
    LibraryPageElement,
    NavigateAction,
    PageGroup,
    PageItem,
)

logger = logging.getLogger(__name__)

ROOT_PAGE = "root"
RECENT_ROOT_PAGE = "recent"
SUGGESTED_ROOT_PAGE = "suggested"
SEARCH_PAGE = "search"


def to_media_item(item: PageItem, group_title: str | None = None) -> MediaItem:
    """
    Convert a page item into a host node.

    Navigable items get their target route token as id, so selecting them
    re-enters the engine one level deeper. Playable items keep the catalog id.
    """
    extras: dict[str, object] = {}
    if group_title is not None:
        extras[GROUP_TITLE_EXTRA] = group_title

    action = item.action
    if isinstance(action, NavigateAction):
        style = ContentStyle.GRID_ITEM if action.grid else ContentStyle.LIST_ITEM
        extras[BROWSABLE_STYLE_EXTRA] = int(style)
        extras[PLAYABLE_STYLE_EXTRA] = int(style)
        media_id = encode_route(action.route, action.parameters)
    else:
        media_id = item.id

    return MediaItem(
        media_id=media_id,
        title=item.title,
        artwork_uri=item.image,
        browsable=isinstance(action, NavigateAction),
        playable=not isinstance(action, NavigateAction),
        extras=extras,
    )


def flatten_elements(elements: Iterable[LibraryPageElement]) -> list[MediaItem]:
    """Flatten groups in place, tagging members with their group title."""
    media_items: list[MediaItem] = []
    for element in elements:
        if isinstance(element, PageGroup):
            media_items.extend(
                to_media_item(item, group_title=element.title) for item in element.items
            )
        else:
            media_items.append(to_media_item(element))
    return media_items


class BrowsingEngine:
    """Stateless dispatcher from route tokens to library pages.

    The only object shared between calls is the read-only page registry, so
    every call is an independent read and calls may run concurrently.
    """

    def __init__(self, registry: PageRegistry) -> None:
        self.registry = registry

    def get_root(self, *, recent: bool = False, suggested: bool = False) -> str:
        """Get the root token for the requested root variant."""
        # Recent and suggested roots have no page yet; resolving them is NOT_SUPPORTED
        if recent:
            page = RECENT_ROOT_PAGE
        elif suggested:
            page = SUGGESTED_ROOT_PAGE
        else:
            page = ROOT_PAGE
        return encode_route(page)

    def resolve_node(
        self, token: str, params: LibraryParams | None = None
    ) -> LibraryResult[MediaItem]:
        """Check that a token names a registered page, without fetching content."""
        route = decode_route(token)
        if isinstance(route, RouteDecodeFailure):
            logger.warning("Rejecting malformed node id %r: %s", token, route.reason)
            return LibraryResult.of_error(ResultCode.ERROR_BAD_VALUE, params)

        if route.page not in self.registry:
            logger.info("No page registered for %r", route.page)
            return LibraryResult.of_error(ResultCode.ERROR_NOT_SUPPORTED, params)

        node = MediaItem(media_id=token, browsable=True, playable=True)
        return LibraryResult.of_item(node, LibraryParams())

    def item_lookup(
        self, token: str, params: LibraryParams | None = None
    ) -> LibraryResult[MediaItem]:
        """Look up a node by id.

        Only route tokens are understood; looking up catalog items directly by
        id is not supported.
        """
        return self.resolve_node(token, params)

    async def list_children(
        self,
        token: str,
        offset: int,
        limit: int,
        params: LibraryParams | None = None,
    ) -> LibraryResult[list[MediaItem]]:
        """List the flattened children of a node."""
        route = decode_route(token)
        if isinstance(route, RouteDecodeFailure):
            logger.warning("Rejecting malformed node id %r: %s", token, route.reason)
            return LibraryResult.of_error(ResultCode.ERROR_BAD_VALUE, params)

        page = self.registry.get(route.page)
        if page is None:
            logger.info("No page registered for %r", route.page)
            return LibraryResult.of_error(ResultCode.ERROR_BAD_VALUE, params)

        try:
            elements = [
                element
                async for element in page.get_content(route.parameters, offset, limit)
            ]
        except (CatalogError, SearchAggregateError):
            logger.exception("Failed to load content for %r", token)
            return LibraryResult.of_error(ResultCode.ERROR_UNKNOWN, params)

        media_items = flatten_elements(elements)
        logger.debug(
            "Listed %d node(s) for %s (offset=%d, limit=%d)",
            len(media_items),
            route.page,
            offset,
            limit,
        )
        return LibraryResult.of_item_list(media_items, params)

    async def search(
        self,
        query: str,
        offset: int,
        limit: int,
        params: LibraryParams | None = None,
    ) -> LibraryResult[list[MediaItem]]:
        """Search the catalog; offset and limit are not applied to search results."""
        token = encode_route(SEARCH_PAGE, [query])
        return await self.list_children(token, offset, limit, params)
