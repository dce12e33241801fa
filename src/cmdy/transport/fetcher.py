#!/usr/bin/env python3
"""
CMDY FETCHER - Upstream Transport
---------------------------------
Issues the single GET against command-not-found.com. The HTTP client is a
scoped resource: it exists only inside a `with CommandFetcher(...)` block
and is closed on every exit path.

Author: Cmdy Team
Date: 2026-10-19
"""

import logging
from typing import Optional

import httpx

from cmdy.core.config import Settings
from cmdy.core.errors import InitError, TransportError

logger = logging.getLogger("cmdy.fetcher")


class CommandFetcher:
    """
    Fetches the raw page for a program name.

    The response status is deliberately not inspected: a 404 page is handed
    to the extractor like any other body and simply yields no entries.
    """

    def __init__(self, settings: Optional[Settings] = None,
                 transport: Optional[httpx.BaseTransport] = None):
        self.settings = settings or Settings()
        self._transport = transport
        self._client: Optional[httpx.Client] = None

    def __enter__(self) -> "CommandFetcher":
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def open(self) -> None:
        """Builds the HTTP client. Raises InitError if httpx refuses the setup."""
        if self._client is not None:
            return
        try:
            self._client = httpx.Client(
                headers={"User-Agent": self.settings.user_agent},
                follow_redirects=True,
                timeout=self.settings.timeout,
                transport=self._transport,
            )
        except Exception as e:
            raise InitError(f"Failed to initialize HTTP client: {e}") from e

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None

    def url_for(self, query: str) -> str:
        # The upstream takes literal command names; no percent-encoding.
        return f"{self.settings.base_url.rstrip('/')}/{query}"

    def fetch(self, query: str) -> bytes:
        """
        Returns the response body for `query`.

        Raises:
            InitError: called outside the client scope.
            TransportError: network, DNS, TLS, timeout or redirect failure, or a
                query that cannot form a valid URL.
        """
        if self._client is None:
            raise InitError("HTTP client not initialized")

        url = self.url_for(query)
        logger.debug(f"GET {url}")
        try:
            response = self._client.get(url)
        except (httpx.RequestError, httpx.InvalidURL) as e:
            logger.debug(f"Request to {url} failed: {e!r}")
            raise TransportError(str(e) or e.__class__.__name__) from e

        logger.debug(f"{response.status_code} from {response.url} ({len(response.content)} bytes)")
        return response.content
