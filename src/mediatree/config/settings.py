# Copyright (c) 2025 mediatree and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Configuration for the catalog server connection and the browser."""

from pathlib import Path

from pydantic import Field, field_validator

from mediatree.config.base import BaseConfig


class ServerConfig(BaseConfig):
    """Connection details for the remote catalog server."""

    base_url: str = Field(
        default="http://localhost:8096", description="Catalog server base URL"
    )
    access_token: str = Field(default="", description="API access token")
    user_id: str = Field(default="", description="User id scoping item queries")
    device_id: str = Field(
        default="mediatree", description="Device id reported in stream URLs"
    )

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate the base URL scheme and strip trailing slashes."""
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            msg = "Server base URL must start with http:// or https://"
            raise ValueError(msg)
        return v.rstrip("/")

    @field_validator("access_token", "user_id", "device_id")
    @classmethod
    def validate_strings(cls, v: str) -> str:
        """Strip surrounding whitespace."""
        return str(v).strip()


class HttpConfig(BaseConfig):
    """HTTP session settings for catalog requests."""

    timeout_seconds: float = Field(
        default=30.0, description="Request timeout in seconds"
    )
    user_agent: str = Field(
        default="mediatree/0.1", description="User agent for HTTP requests"
    )
    verify_ssl: bool = Field(
        default=True, description="Whether to verify SSL certificates"
    )
    max_connections: int = Field(
        default=10, description="Maximum simultaneous connections"
    )
    custom_headers: dict[str, str] = Field(
        default_factory=dict, description="Extra headers sent with every request"
    )

    @field_validator("timeout_seconds")
    @classmethod
    def validate_positive_time(cls, v: float) -> float:
        """Validate time values are positive."""
        if v <= 0:
            msg = "Time values must be positive"
            raise ValueError(msg)
        return v

    @field_validator("max_connections")
    @classmethod
    def validate_positive_int(cls, v: int) -> int:
        """Validate integer values are positive."""
        if v <= 0:
            msg = "Integer values must be positive"
            raise ValueError(msg)
        return v


class BrowserConfig(BaseConfig):
    """Settings for the browsing host session."""

    max_page_size: int = Field(
        default=1000, description="Upper bound on items returned per page"
    )

    @field_validator("max_page_size")
    @classmethod
    def validate_page_size(cls, v: int) -> int:
        """Validate the page size is positive."""
        if v <= 0:
            msg = "Max page size must be positive"
            raise ValueError(msg)
        return v


class MediaTreeConfig(BaseConfig):
    """Main configuration containing all sections."""

    server: ServerConfig = Field(
        default_factory=ServerConfig, description="Catalog server connection"
    )
    http: HttpConfig = Field(default_factory=HttpConfig, description="HTTP settings")
    browser: BrowserConfig = Field(
        default_factory=BrowserConfig, description="Browser settings"
    )
    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate the logging level name."""
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            msg = f"Unknown log level: {v}"
            raise ValueError(msg)
        return level

    @classmethod
    def from_toml_file(cls, file_path: Path | str) -> "MediaTreeConfig":
        """Load configuration from a TOML file."""
        import tomllib

        if isinstance(file_path, str):
            file_path = Path(file_path)

        with file_path.open("rb") as f:
            data = tomllib.load(f)

        return cls.model_validate(data)

    @classmethod
    def from_json_file(cls, file_path: Path | str) -> "MediaTreeConfig":
        """Load configuration from a JSON file."""
        import json

        if isinstance(file_path, str):
            file_path = Path(file_path)

        with file_path.open("r", encoding="utf-8") as f:
            data = json.load(f)

        return cls.model_validate(data)

    @classmethod
    def from_file(cls, file_path: Path | str) -> "MediaTreeConfig":
        """Load configuration from a TOML or JSON file based on its suffix."""
        file_path = Path(file_path)
        if file_path.suffix.lower() == ".json":
            return cls.from_json_file(file_path)
        return cls.from_toml_file(file_path)

    def to_json_file(self, file_path: Path | str) -> None:
        """Save configuration to a JSON file."""
        import json

        if isinstance(file_path, str):
            file_path = Path(file_path)

        # Ensure parent directory exists
        file_path.parent.mkdir(parents=True, exist_ok=True)

        with file_path.open("w", encoding="utf-8") as f:
            json.dump(self.model_dump(mode="json"), f, indent=2, ensure_ascii=False)
