"""
services/gateway.py — Async HTTP Gateway for the Challonge API

Thin transport for the Challonge v1 REST API: builds the route URL,
authenticates with HTTP basic auth, sends parameters as a query string
and decodes the JSON body.

Service-level failures (a body with an "errors" list) are returned to the
caller untouched; only transport failures raise here.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional

import aiohttp

from challonge_client.config.client_config import (
    DEFAULT_API_URL,
    DEFAULT_TIMEOUT,
    ChallongeConfig,
)
from challonge_client.errors import TransportError

log = logging.getLogger(__name__)


def encode_params(params: Optional[dict[str, Any]]) -> dict[str, str]:
    """Flatten parameter values to strings; None values are dropped."""
    encoded = {}
    for key, value in (params or {}).items():
        if value is None:
            continue
        if isinstance(value, bool):
            encoded[key] = "true" if value else "false"
        else:
            encoded[key] = str(value)
    return encoded


class ChallongeGateway:
    """Async HTTP client for the Challonge API.

    One gateway is the client handle every TournamentService call goes
    through; there is no process-wide client. Request tracing is turned
    on per gateway with debug=True.
    """

    def __init__(
        self,
        username: str,
        api_key: str,
        base_url: str = DEFAULT_API_URL,
        *,
        debug: bool = False,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        """Initialize the gateway.

        Args:
            username: Challonge account name
            api_key: Challonge API key
            base_url: API root (e.g., "https://api.challonge.com/v1")
            debug: Log every request URL and decoded response
            timeout: Total request timeout in seconds
            session: Optional shared aiohttp session (created if not provided)
        """
        self.username = username
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.debug = debug
        self.timeout = timeout
        self._session = session
        self._owns_session = session is None

    @classmethod
    def from_config(
        cls,
        config: ChallongeConfig,
        session: Optional[aiohttp.ClientSession] = None,
    ) -> "ChallongeGateway":
        return cls(
            config.username,
            config.api_key,
            config.api_url,
            debug=config.debug,
            timeout=config.timeout,
            session=session,
        )

    async def __aenter__(self) -> "ChallongeGateway":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create the HTTP session."""
        if self._session is None:
            self._session = aiohttp.ClientSession()
        return self._session

    async def close(self) -> None:
        """Close the HTTP session if we own it."""
        if self._session and self._owns_session:
            await self._session.close()
            self._session = None
            log.info("[CHALLONGE-GATEWAY] Session closed")

    def _url(self, route: str) -> str:
        return f"{self.base_url}/{route.strip('/')}.json"

    def _auth(self) -> aiohttp.BasicAuth:
        return aiohttp.BasicAuth(self.username, self.api_key)

    async def request(
        self,
        method: str,
        route: str,
        params: Optional[dict[str, Any]] = None,
    ) -> Any:
        """Make an authenticated request to the Challonge API.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            route: Route without extension (e.g., "tournaments/my-cup")
            params: Query parameters

        Returns:
            Decoded JSON body (dict or list); {} for an empty body.
            A body carrying an "errors" list is returned as-is whatever
            the status code.

        Raises:
            TransportError: Network failure, timeout, undecodable body, or
                an error status without an error list
        """
        session = await self._get_session()
        url = self._url(route)
        query = encode_params(params)

        if self.debug:
            log.info(f"[CHALLONGE-GATEWAY] {method} {url} params={sorted(query)}")

        try:
            async with session.request(
                method,
                url,
                params=query,
                auth=self._auth(),
                timeout=aiohttp.ClientTimeout(total=self.timeout),
            ) as resp:
                body = await resp.text()

                if resp.status == 204 or not body.strip():
                    if resp.status >= 400:
                        raise TransportError(resp.status, resp.reason or "empty response")
                    return {}

                try:
                    decoded = await resp.json(content_type=None)
                except ValueError:
                    log.warning(
                        f"[CHALLONGE-GATEWAY] {method} {route} -> {resp.status}: undecodable body"
                    )
                    raise TransportError(resp.status, body[:200])

                if self.debug:
                    log.info(f"[CHALLONGE-GATEWAY] {method} {route} -> {resp.status}: {decoded}")

                if resp.status >= 400 and not _has_errors(decoded):
                    log.warning(
                        f"[CHALLONGE-GATEWAY] {method} {route} -> {resp.status}: {body[:200]}"
                    )
                    raise TransportError(resp.status, body[:200])

                return decoded

        except aiohttp.ClientError as e:
            log.error(f"[CHALLONGE-GATEWAY] Network error: {e}")
            raise TransportError(503, f"Network error: {e}")
        except asyncio.TimeoutError:
            log.error(f"[CHALLONGE-GATEWAY] {method} {route} timed out after {self.timeout}s")
            raise TransportError(504, f"Timed out after {self.timeout}s")


def _has_errors(decoded: Any) -> bool:
    return isinstance(decoded, dict) and bool(decoded.get("errors"))
