# Copyright (c) 2025 mediatree and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Catalog record snapshots parsed from the remote server."""

from typing import Any

from pydantic import Field

from mediatree.models.base import MediaTreeBaseModel
from mediatree.models.enums import ImageType


class CatalogItem(MediaTreeBaseModel):
    """
    Immutable snapshot of a catalog record captured at fetch time.

    The snapshot is never re-validated against the server; a Play action keeps
    whatever the record looked like when the page was built.
    """

    id: str = Field(..., alias="Id", description="Catalog item id")
    name: str | None = Field(None, alias="Name", description="Display name")
    type: str | None = Field(None, alias="Type", description="Record kind")
    collection_type: str | None = Field(
        None, alias="CollectionType", description="Collection type for user views"
    )
    image_tags: dict[str, str] = Field(
        default_factory=dict, alias="ImageTags", description="Image tags by type"
    )
    album_id: str | None = Field(None, alias="AlbumId", description="Parent album id")
    album_primary_image_tag: str | None = Field(
        None, alias="AlbumPrimaryImageTag", description="Parent album primary tag"
    )

    # Raw response data for debugging and future use
    raw_data: dict[str, Any] = Field(
        default_factory=dict, description="Raw API response"
    )

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "CatalogItem":
        """Build a snapshot from a raw API record."""
        return cls.model_validate({**data, "raw_data": data})

    @property
    def primary_image_tag(self) -> str | None:
        """Get the tag of the record's own primary image."""
        return self.image_tags.get(ImageType.PRIMARY)


class CatalogItemsResult(MediaTreeBaseModel):
    """A page of catalog records."""

    items: list[CatalogItem] = Field(
        default_factory=list, alias="Items", description="Records in this page"
    )
    total_record_count: int = Field(
        default=0, alias="TotalRecordCount", description="Total matching records"
    )
    start_index: int = Field(
        default=0, alias="StartIndex", description="Offset of the first record"
    )

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "CatalogItemsResult":
        """Build a result page from a raw API response."""
        return cls(
            items=[CatalogItem.from_api(item) for item in data.get("Items") or []],
            total_record_count=data.get("TotalRecordCount") or 0,
            start_index=data.get("StartIndex") or 0,
        )
