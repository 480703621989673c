# Copyright (c) 2025 mediatree and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Tests for configuration models."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from mediatree.config.settings import (
    BrowserConfig,
    HttpConfig,
    MediaTreeConfig,
    ServerConfig,
)


class TestServerConfig:
    """Test the server connection configuration."""

    def test_defaults(self):
        """Test default values."""
        config = ServerConfig()

        assert config.base_url == "http://localhost:8096"
        assert config.access_token == ""
        assert config.device_id == "mediatree"

    def test_base_url_trailing_slash_stripped(self):
        """Test trailing slashes are removed from the base URL."""
        config = ServerConfig(base_url=" https://media.example.com/jellyfin/ ")

        assert config.base_url == "https://media.example.com/jellyfin"

    def test_base_url_requires_http(self):
        """Test non-HTTP base URLs are rejected."""
        with pytest.raises(ValidationError, match="must start with http"):
            ServerConfig(base_url="ftp://media.example.com")

    def test_unknown_field_rejected(self):
        """Test unknown keys are rejected."""
        with pytest.raises(ValidationError):
            ServerConfig(password="secret")


class TestHttpConfig:
    """Test HTTP settings validation."""

    @pytest.mark.parametrize("timeout", [0, -1.5])
    def test_timeout_must_be_positive(self, timeout: float):
        """Test non-positive timeouts are rejected."""
        with pytest.raises(ValidationError, match="Time values must be positive"):
            HttpConfig(timeout_seconds=timeout)

    def test_validate_on_assignment(self):
        """Test assignments are validated."""
        config = HttpConfig()

        with pytest.raises(ValidationError, match="Integer values must be positive"):
            config.max_connections = 0


class TestMediaTreeConfig:
    """Test the main configuration."""

    def test_default_sections(self):
        """Test all sections are created with defaults."""
        config = MediaTreeConfig()

        assert isinstance(config.server, ServerConfig)
        assert isinstance(config.http, HttpConfig)
        assert isinstance(config.browser, BrowserConfig)
        assert config.browser.max_page_size == 1000
        assert config.log_level == "INFO"

    def test_log_level_normalised(self):
        """Test log levels are upper-cased and validated."""
        assert MediaTreeConfig(log_level="debug").log_level == "DEBUG"
        with pytest.raises(ValidationError, match="Unknown log level"):
            MediaTreeConfig(log_level="chatty")

    def test_from_toml_file(self, tmp_path: Path):
        """Test loading a TOML file."""
        config_file = tmp_path / "mediatree.toml"
        config_file.write_text(
            '[server]\nbase_url = "https://media.example.com"\n'
            'access_token = "token"\n\n[browser]\nmax_page_size = 200\n',
            encoding="utf-8",
        )

        config = MediaTreeConfig.from_file(config_file)

        assert config.server.base_url == "https://media.example.com"
        assert config.server.access_token == "token"
        assert config.browser.max_page_size == 200

    def test_json_round_trip(self, tmp_path: Path):
        """Test saving and loading a JSON file."""
        config = MediaTreeConfig(server=ServerConfig(user_id="user-1"))
        config_file = tmp_path / "nested" / "mediatree.json"

        config.to_json_file(config_file)
        loaded = MediaTreeConfig.from_file(config_file)

        assert loaded == config
