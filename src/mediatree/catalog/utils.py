# Copyright (c) 2025 mediatree and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Utility functions for the catalog client."""

import contextlib
from collections.abc import Iterable, Mapping


def raise_error(
    error_type: type[Exception],
    msg: str,
    base_error: Exception | None = None,
    **kwargs: object,
) -> None:
    """
    Raise an error with the specified type and message.

    Args:
        error_type: The exception class to raise
        msg: The error message
        base_error: Optional base exception to chain from
        **kwargs: Additional keyword arguments to pass to the exception constructor
    """
    if base_error is not None:
        raise error_type(msg, **kwargs) from base_error
    raise error_type(msg, **kwargs)


def join_values(values: Iterable[str]) -> str:
    """Join list-valued query parameters the way the catalog API expects."""
    return ",".join(str(value) for value in values)


def extract_retry_after(headers: Mapping[str, str]) -> float | None:
    """Extract a numeric retry-after value from response headers."""
    retry_after_header = headers.get("retry-after")
    if retry_after_header is None:
        return None

    with contextlib.suppress(ValueError):
        return float(retry_after_header)
    return None
