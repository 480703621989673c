# Copyright (c) 2025 mediatree and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Result vocabulary exchanged with the browsing host."""

from enum import IntEnum
from typing import Any, Generic, TypeVar

from pydantic import Field

from mediatree.models.base import FrozenModel

T = TypeVar("T")

# Extras keys understood by the host for section titles and content styles
GROUP_TITLE_EXTRA = "android.media.browse.CONTENT_STYLE_GROUP_TITLE_HINT"
BROWSABLE_STYLE_EXTRA = "android.media.browse.CONTENT_STYLE_BROWSABLE_HINT"
PLAYABLE_STYLE_EXTRA = "android.media.browse.CONTENT_STYLE_PLAYABLE_HINT"


class ContentStyle(IntEnum):
    """Display styles for browsable children."""

    LIST_ITEM = 1
    GRID_ITEM = 2


class ResultCode(IntEnum):
    """Result codes understood by the host."""

    SUCCESS = 0
    ERROR_UNKNOWN = -1
    ERROR_BAD_VALUE = -3
    ERROR_NOT_SUPPORTED = -6


class LibraryParams(FrozenModel):
    """Optional parameters sent by the host with a request."""

    recent: bool = Field(default=False, description="Host asks for recent media")
    suggested: bool = Field(default=False, description="Host asks for suggestions")
    extras: dict[str, Any] = Field(default_factory=dict, description="Host extras")


class MediaItem(FrozenModel):
    """A flat node in the host's representation."""

    media_id: str = Field(..., description="Opaque node id")
    title: str | None = Field(None, description="Display title")
    artwork_uri: str | None = Field(None, description="Artwork URL")
    browsable: bool = Field(default=False, description="Node has children")
    playable: bool = Field(default=False, description="Node can be played")
    extras: dict[str, Any] = Field(default_factory=dict, description="Host hints")
    uri: str | None = Field(None, description="Resolved stream URL")

    @property
    def group_title(self) -> str | None:
        """Get the title of the section this node belongs to, if any."""
        return self.extras.get(GROUP_TITLE_EXTRA)

    def with_uri(self, uri: str) -> "MediaItem":
        """Return a copy of this node carrying a stream URL."""
        return self.model_copy(update={"uri": uri})


class LibraryResult(FrozenModel, Generic[T]):
    """Outcome of a host request: a value on success, a code otherwise."""

    code: ResultCode = Field(..., description="Result code")
    value: T | None = Field(None, description="Result value on success")
    params: LibraryParams | None = Field(None, description="Echoed parameters")

    @property
    def is_success(self) -> bool:
        """Check if the request succeeded."""
        return self.code == ResultCode.SUCCESS

    @classmethod
    def of_item(
        cls, item: MediaItem, params: LibraryParams | None = None
    ) -> "LibraryResult[MediaItem]":
        """Create a successful single-node result."""
        return LibraryResult[MediaItem](
            code=ResultCode.SUCCESS, value=item, params=params
        )

    @classmethod
    def of_item_list(
        cls, items: list[MediaItem], params: LibraryParams | None = None
    ) -> "LibraryResult[list[MediaItem]]":
        """Create a successful node-list result."""
        return LibraryResult[list[MediaItem]](
            code=ResultCode.SUCCESS, value=items, params=params
        )

    @classmethod
    def of_void(cls, params: LibraryParams | None = None) -> "LibraryResult[None]":
        """Create a successful result without a value."""
        return LibraryResult[None](code=ResultCode.SUCCESS, params=params)

    @classmethod
    def of_error(
        cls, code: ResultCode, params: LibraryParams | None = None
    ) -> "LibraryResult[Any]":
        """Create an error result."""
        if code == ResultCode.SUCCESS:
            msg = "Error results need an error code"
            raise ValueError(msg)
        return LibraryResult[Any](code=code, params=params)
