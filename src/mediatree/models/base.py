# Copyright (c) 2025 mediatree and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Base model classes with common functionality."""

from pydantic import BaseModel, ConfigDict


class MediaTreeBaseModel(BaseModel):
    """Base model for catalog snapshots parsed from server responses."""

    model_config = ConfigDict(
        # Catalog responses use PascalCase keys; fields are addressed by name in code
        populate_by_name=True,
        # Snapshots are never re-validated or modified after fetch
        frozen=True,
        # Servers add fields between releases
        extra="ignore",
        arbitrary_types_allowed=True,
    )


class FrozenModel(BaseModel):
    """Base model for immutable values built inside the browser."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        arbitrary_types_allowed=True,
    )
