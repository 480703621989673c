# Copyright (c) 2025 mediatree and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Exceptions raised by the remote catalog client."""

from typing import Any


class CatalogError(Exception):
    """Base exception for remote catalog errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class NetworkError(CatalogError):
    """Exception raised for transport failures and unexpected HTTP statuses."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.status_code = status_code


class AuthenticationError(CatalogError):
    """Exception raised when the server rejects the access token."""


class CatalogPermissionError(CatalogError):
    """Exception raised when the user may not access a record."""


class ContentNotFoundError(CatalogError):
    """Exception raised when a record or endpoint does not exist."""

    def __init__(
        self,
        message: str,
        content_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.content_id = content_id


class RateLimitError(CatalogError):
    """Exception raised when the server throttles requests."""

    def __init__(
        self,
        message: str,
        retry_after: float | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.retry_after = retry_after


class InvalidResponseError(CatalogError):
    """Exception raised when a response body does not have the expected shape."""
