# Copyright (c) 2025 mediatree and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Exceptions for the browsing engine."""

from typing import Any


class BrowseError(Exception):
    """Base exception for browsing errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class PageContractError(BrowseError):
    """Raised when a page is invoked in a way its contract forbids."""

    def __init__(
        self,
        message: str,
        page: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.page = page


class SearchAggregateError(BrowseError):
    """Raised when any search sub-query fails; no partial result is kept."""

    def __init__(
        self,
        message: str,
        failures: list[BaseException] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.failures = failures or []
