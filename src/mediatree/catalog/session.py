# Copyright (c) 2025 mediatree and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""HTTP session management for catalog requests."""

import asyncio
import logging
import ssl
from types import TracebackType

import aiohttp
from aiohttp import ClientTimeout

from mediatree.config.settings import HttpConfig

logger = logging.getLogger(__name__)


class SessionManager:
    """Manages shared aiohttp sessions, one per source."""

    def __init__(self, config: HttpConfig) -> None:
        self.config = config
        self._sessions: dict[str, aiohttp.ClientSession] = {}
        self._session_lock = asyncio.Lock()

    async def get_session(self, source: str | None = None) -> aiohttp.ClientSession:
        """Get or create a session for a specific source."""
        session_key = source or "default"

        async with self._session_lock:
            if session_key not in self._sessions or self._sessions[session_key].closed:
                logger.debug("Creating HTTP session for %s", session_key)
                self._sessions[session_key] = self._create_session()

            return self._sessions[session_key]

    def _create_session(self) -> aiohttp.ClientSession:
        """Create a new HTTP session."""
        timeout = ClientTimeout(
            total=self.config.timeout_seconds,
            connect=self.config.timeout_seconds / 2,
            sock_read=self.config.timeout_seconds,
        )

        if not self.config.verify_ssl:
            ssl_context = ssl.create_default_context()
            ssl_context.check_hostname = False
            ssl_context.verify_mode = ssl.CERT_NONE
            ssl_param: ssl.SSLContext | bool = ssl_context
        else:
            ssl_param = True

        connector = aiohttp.TCPConnector(
            limit=self.config.max_connections,
            ssl=ssl_param,
        )

        headers = {
            "User-Agent": self.config.user_agent,
            "Accept": "application/json",
        }
        headers.update(self.config.custom_headers)

        return aiohttp.ClientSession(
            connector=connector,
            timeout=timeout,
            headers=headers,
            raise_for_status=False,  # Status codes are mapped by the client
        )

    async def close_all_sessions(self) -> None:
        """Close all sessions."""
        async with self._session_lock:
            for session in self._sessions.values():
                if not session.closed:
                    await session.close()
            self._sessions.clear()

    async def __aenter__(self) -> "SessionManager":
        """Async context manager entry."""
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Async context manager exit."""
        await self.close_all_sessions()
