# Copyright (c) 2025 mediatree and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Tests for the route token codec."""

import pytest

from mediatree.core.route_codec import (
    NAMESPACE,
    SEPARATOR,
    Route,
    RouteDecodeFailure,
    decode_route,
    encode_route,
)


class TestEncodeRoute:
    """Test encoding routes into tokens."""

    def test_wire_format(self):
        """Test the namespace, page and parameters appear in order."""
        assert encode_route("album", ["abc123"]) == "jellyfin/album/abc123"

    def test_no_parameters(self):
        """Test a route without parameters."""
        assert encode_route("root") == f"{NAMESPACE}{SEPARATOR}root"

    def test_reserved_characters_are_escaped(self):
        """Test separator and escape characters never appear raw in a segment."""
        token = encode_route("search", ["AC/DC 100%+"])

        assert token == "jellyfin/search/AC%2FDC+100%25%2B"
        assert token.count(SEPARATOR) == 2

    def test_empty_page_rejected(self):
        """Test an empty page name is a programming error."""
        with pytest.raises(ValueError, match="must not be empty"):
            encode_route("")

    def test_encoding_is_stable(self):
        """Test the same route always produces the same token."""
        assert encode_route("userView", ["x y"]) == encode_route("userView", ["x y"])


class TestDecodeRoute:
    """Test decoding tokens back into routes."""

    @pytest.mark.parametrize("page", ["root", "userView", "albums", "album", "search"])
    @pytest.mark.parametrize(
        "parameters",
        [
            [],
            ["0f8e2c1a"],
            ["with/separator"],
            ["with%escape"],
            ["plus+and space", ""],
            ["ünïcödé", "日本語", "a%2Fb"],
        ],
    )
    def test_round_trip(self, page: str, parameters: list[str]):
        """Test decode inverts encode for every page and awkward parameters."""
        decoded = decode_route(encode_route(page, parameters))

        assert decoded == Route(page=page, parameters=tuple(parameters))

    def test_route_token_property(self):
        """Test a route re-encodes to the token it came from."""
        token = encode_route("albums", ["lib/1"])
        route = decode_route(token)

        assert isinstance(route, Route)
        assert route.token == token

    @pytest.mark.parametrize(
        ("token", "reason"),
        [
            ("wrong-namespace/x", "namespace"),
            ("jellyfin", "missing page"),
            ("", "namespace"),
            ("jellyfin/", "empty page"),
            ("jellyfin/album/%zz", "escape"),
            ("jellyfin/album/100%", "escape"),
            ("jellyfin/album/a b", "escape"),
            ("jellyfin/album/%ff%fe", "escape"),
        ],
    )
    def test_malformed_tokens(self, token: str, reason: str):
        """Test malformed tokens yield a typed failure instead of raising."""
        decoded = decode_route(token)

        assert isinstance(decoded, RouteDecodeFailure)
        assert decoded.token == token
        assert reason in decoded.reason

    def test_namespace_must_be_first(self):
        """Test the namespace is only accepted as the first segment."""
        decoded = decode_route("root/jellyfin")

        assert isinstance(decoded, RouteDecodeFailure)

    def test_form_encoded_spaces(self):
        """Test '+' decodes to a space, as produced by form encoding."""
        decoded = decode_route("jellyfin/search/daft+punk")

        assert decoded == Route(page="search", parameters=("daft punk",))
