# Copyright (c) 2025 mediatree and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Configuration models for mediatree."""

from mediatree.config.base import BaseConfig
from mediatree.config.settings import (
    BrowserConfig,
    HttpConfig,
    MediaTreeConfig,
    ServerConfig,
)

__all__ = [
    "BaseConfig",
    "BrowserConfig",
    "HttpConfig",
    "MediaTreeConfig",
    "ServerConfig",
]
