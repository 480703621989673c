# Copyright (c) 2025 mediatree and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Core utilities for mediatree."""

from mediatree.core.route_codec import (
    NAMESPACE,
    SEPARATOR,
    Route,
    RouteDecodeFailure,
    decode_route,
    encode_route,
)

__all__ = [
    "NAMESPACE",
    "SEPARATOR",
    "Route",
    "RouteDecodeFailure",
    "decode_route",
    "encode_route",
]
