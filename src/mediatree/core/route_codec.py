# Copyright (c) 2025 mediatree and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Reversible encoding of page routes into opaque node ids.

A route token has the wire format::

    jellyfin/<page>/<param 1>/<param 2>/...

Every segment is form-escaped on its own before joining, so a ``/``, ``%`` or
``+`` inside a parameter is never mistaken for structure. Hosts may persist
tokens as resume ids, so the format must stay stable.
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass
from urllib.parse import quote_plus, unquote_plus

NAMESPACE = "jellyfin"
SEPARATOR = "/"

# Unreserved characters and well-formed escapes; anything else was never produced
# by encode_route.
_ESCAPED_SEGMENT = re.compile(r"(?:[A-Za-z0-9_.~*+-]|%[0-9A-Fa-f]{2})*")


@dataclass(frozen=True)
class Route:
    """A decoded route: a page name plus its ordered parameters."""

    page: str
    parameters: tuple[str, ...] = ()

    @property
    def token(self) -> str:
        """Encode this route back into its opaque token."""
        return encode_route(self.page, self.parameters)


@dataclass(frozen=True)
class RouteDecodeFailure:
    """Typed failure returned for a malformed route token."""

    token: str
    reason: str


def _escape(segment: str) -> str:
    # Empty safe set: the separator and escape characters are always escaped.
    return quote_plus(segment, safe="", encoding="utf-8", errors="strict")


def _unescape(segment: str) -> str | None:
    if not _ESCAPED_SEGMENT.fullmatch(segment):
        return None
    try:
        return unquote_plus(segment, encoding="utf-8", errors="strict")
    except UnicodeDecodeError:
        return None


def encode_route(page: str, parameters: Iterable[str] = ()) -> str:
    """Encode a page name and its parameters into a route token."""
    if not page:
        msg = "Route page name must not be empty"
        raise ValueError(msg)

    segments = [NAMESPACE, page, *parameters]
    return SEPARATOR.join(_escape(segment) for segment in segments)


def decode_route(token: str) -> Route | RouteDecodeFailure:
    """
    Decode a route token.

    Never raises for malformed input; a RouteDecodeFailure describing the
    problem is returned instead.
    """
    raw_segments = token.split(SEPARATOR)

    segments: list[str] = []
    for index, raw in enumerate(raw_segments):
        decoded = _unescape(raw)
        if decoded is None:
            return RouteDecodeFailure(token, f"segment {index} is not a valid escape")
        segments.append(decoded)

    if segments[0] != NAMESPACE:
        return RouteDecodeFailure(token, f"missing {NAMESPACE!r} namespace")
    if len(segments) < 2:
        return RouteDecodeFailure(token, "missing page segment")
    if not segments[1]:
        return RouteDecodeFailure(token, "empty page segment")

    return Route(page=segments[1], parameters=tuple(segments[2:]))
