# Copyright (c) 2025 mediatree and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Remote catalog client module."""

from mediatree.catalog.client import CatalogClient
from mediatree.catalog.exceptions import (
    AuthenticationError,
    CatalogError,
    CatalogPermissionError,
    ContentNotFoundError,
    InvalidResponseError,
    NetworkError,
    RateLimitError,
)
from mediatree.catalog.session import SessionManager

__all__ = [
    "AuthenticationError",
    "CatalogClient",
    "CatalogError",
    "CatalogPermissionError",
    "ContentNotFoundError",
    "InvalidResponseError",
    "NetworkError",
    "RateLimitError",
    "SessionManager",
]
