# Copyright (c) 2025 mediatree and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Remote catalog API client implementation."""

import logging
from collections.abc import Iterable
from typing import Any
from urllib.parse import quote, urlencode

import aiohttp
from pydantic import ValidationError

from mediatree.catalog.exceptions import (
    AuthenticationError,
    CatalogPermissionError,
    ContentNotFoundError,
    InvalidResponseError,
    NetworkError,
    RateLimitError,
)
from mediatree.catalog.session import SessionManager
from mediatree.catalog.stream import universal_audio_query
from mediatree.catalog.utils import extract_retry_after, join_values, raise_error
from mediatree.config.settings import ServerConfig
from mediatree.models.catalog import CatalogItemsResult
from mediatree.models.enums import ImageType, ItemKind, ItemSortBy

logger = logging.getLogger(__name__)

SESSION_SOURCE = "catalog"

# Keep list separators readable in generated URLs
_QUERY_SAFE = ",|"


class CatalogClient:
    """Client for the remote catalog server.

    All calls are pure queries. Failures surface as CatalogError subclasses
    and are never retried here.
    """

    def __init__(self, config: ServerConfig, session_manager: SessionManager) -> None:
        self.config = config
        self.session_manager = session_manager

    async def get_user_views(self) -> CatalogItemsResult:
        """List the top-level collections visible to the configured user."""
        params = {"userId": self.config.user_id} if self.config.user_id else {}
        resp = await self._api_request("UserViews", params)
        return self._parse_items("UserViews", resp)

    async def get_items(
        self,
        *,
        parent_id: str | None = None,
        include_item_types: Iterable[ItemKind] = (),
        sort_by: Iterable[ItemSortBy] = (),
        recursive: bool | None = None,
        search_term: str | None = None,
        image_type_limit: int | None = None,
        enable_image_types: Iterable[ImageType] = (),
        start_index: int | None = None,
        limit: int | None = None,
    ) -> CatalogItemsResult:
        """Query catalog records with filtering, sorting and pagination."""
        params: dict[str, Any] = {}
        if self.config.user_id:
            params["userId"] = self.config.user_id
        if parent_id is not None:
            params["parentId"] = parent_id
        if include_types := join_values(include_item_types):
            params["includeItemTypes"] = include_types
        if sort_keys := join_values(sort_by):
            params["sortBy"] = sort_keys
        if recursive is not None:
            params["recursive"] = str(recursive).lower()
        if search_term is not None:
            params["searchTerm"] = search_term
        if image_type_limit is not None:
            params["imageTypeLimit"] = image_type_limit
        if image_types := join_values(enable_image_types):
            params["enableImageTypes"] = image_types
        if start_index is not None:
            params["startIndex"] = start_index
        if limit is not None:
            params["limit"] = limit

        resp = await self._api_request("Items", params)
        return self._parse_items("Items", resp)

    def get_image_url(self, item_id: str, image_type: ImageType, tag: str) -> str:
        """Build the URL of an item image."""
        path = f"Items/{quote(item_id, safe='')}/Images/{image_type}"
        return f"{self.config.base_url}/{path}?{urlencode({'tag': tag})}"

    def get_universal_audio_url(self, item_id: str) -> str:
        """Build a playable stream URL for an audio item."""
        query = universal_audio_query(self.config.device_id)
        path = f"Audio/{quote(item_id, safe='')}/universal"
        url = f"{self.config.base_url}/{path}?{urlencode(query, safe=_QUERY_SAFE)}"
        if not self.config.access_token:
            return url
        return f"{url}&{urlencode({'ApiKey': self.config.access_token})}"

    async def _api_request(
        self, endpoint: str, params: dict[str, Any]
    ) -> dict[str, Any]:
        """Make a GET request to the catalog API and return the JSON body."""
        url = f"{self.config.base_url}/{endpoint}"
        session = await self.session_manager.get_session(SESSION_SOURCE)

        headers = {}
        if self.config.access_token:
            headers["Authorization"] = (
                f'MediaBrowser Token="{self.config.access_token}"'
            )

        logger.debug("GET %s %s", endpoint, params)
        try:
            async with session.get(url, params=params, headers=headers) as response:
                if response.status >= 400:
                    self._raise_for_status(
                        response.status, endpoint, dict(response.headers)
                    )
                return await response.json()
        except (aiohttp.ClientError, TimeoutError) as e:
            msg = f"API request failed: {e!r}"
            raise NetworkError(msg, details={"endpoint": endpoint}) from e
        except ValueError as e:
            # Body could not be decoded as JSON
            msg = f"Invalid JSON from {endpoint}: {e}"
            raise InvalidResponseError(msg, details={"endpoint": endpoint}) from e

    def _parse_items(self, endpoint: str, resp: Any) -> CatalogItemsResult:
        """Parse a record listing, rejecting bodies of the wrong shape."""
        if not isinstance(resp, dict):
            msg = f"Unexpected response from {endpoint}: {type(resp).__name__}"
            raise InvalidResponseError(msg, details={"endpoint": endpoint})
        try:
            return CatalogItemsResult.from_api(resp)
        except (ValidationError, TypeError) as e:
            msg = f"Malformed records from {endpoint}: {e}"
            raise InvalidResponseError(msg, details={"endpoint": endpoint}) from e

    def _raise_for_status(
        self, status_code: int, endpoint: str, headers: dict[str, str]
    ) -> None:
        """Raise the exception matching an HTTP error status."""
        details = {"endpoint": endpoint, "status_code": status_code}
        if status_code == 401:
            msg = f"Authentication failed: {status_code}"
            raise_error(AuthenticationError, msg, details=details)
        elif status_code == 403:
            msg = f"Access forbidden: {status_code}"
            raise_error(CatalogPermissionError, msg, details=details)
        elif status_code == 404:
            msg = f"Content not found: {endpoint}"
            raise_error(ContentNotFoundError, msg, details=details)
        elif status_code == 429:
            retry_after = extract_retry_after(
                {k.lower(): v for k, v in headers.items()}
            )
            raise_error(
                RateLimitError,
                f"Rate limit exceeded: {status_code}",
                retry_after=retry_after,
                details=details,
            )
        else:
            raise_error(
                NetworkError,
                f"HTTP error: {status_code}",
                status_code=status_code,
                details=details,
            )

    async def close(self) -> None:
        """Close the client's HTTP sessions."""
        await self.session_manager.close_all_sessions()
