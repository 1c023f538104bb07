"""
Base client for E-utilities data sources.

Provides: session lifecycle, per-request timeout, the identifying
User-Agent header, structured request logging, and the mapping from
transport outcomes to the ncbi_toolkit exception hierarchy.
"""

import asyncio
import json
import logging
import time
from abc import ABC, abstractmethod
from typing import Any

import aiohttp
from pydantic import BaseModel, ConfigDict

from ncbi_toolkit.config import get_settings
from ncbi_toolkit.constants import DEFAULT_TIMEOUT, NCBI_BASE_URL, USER_AGENT
from ncbi_toolkit.errors import (
    EntrezParseError,
    EntrezTimeoutError,
    NetworkError,
    UpstreamError,
)

logger = logging.getLogger("ncbi_toolkit.data_sources")

# Never written to logs
_REDACTED_PARAMS = {"api_key"}


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


class ClientConfig(BaseModel):
    """Connection settings for an E-utilities client."""

    model_config = ConfigDict(frozen=True)

    base_url: str = NCBI_BASE_URL
    timeout_seconds: float = DEFAULT_TIMEOUT
    api_key: str | None = None
    user_agent: str = USER_AGENT

    @classmethod
    def from_settings(cls) -> "ClientConfig":
        """Build a config from NCBI_* environment settings."""
        settings = get_settings()
        return cls(
            base_url=settings.base_url,
            timeout_seconds=settings.timeout_seconds,
            api_key=settings.api_key or None,
        )


# ---------------------------------------------------------------------------
# Request context (for structured logging)
# ---------------------------------------------------------------------------


class RequestContext(BaseModel):
    """Metadata attached to every outgoing request for logging."""

    source: str  # e.g. "entrez"
    method: str  # e.g. "search", "neighbor"


# ---------------------------------------------------------------------------
# Base client
# ---------------------------------------------------------------------------


class BaseClient(ABC):
    """
    Abstract base for E-utilities clients.

    Subclasses implement `_source_name` and their own typed methods that
    call `_rest_get()` for JSON endpoints or `_rest_get_text()` for raw
    bodies (XML).
    """

    def __init__(self, config: ClientConfig | None = None):
        self.config = config or ClientConfig.from_settings()
        self._session: aiohttp.ClientSession | None = None

    @property
    @abstractmethod
    def _source_name(self) -> str:
        """Identifier for this data source, e.g. 'entrez'."""
        ...

    # -- Session management --------------------------------------------------

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            timeout = aiohttp.ClientTimeout(total=self.config.timeout_seconds)
            self._session = aiohttp.ClientSession(timeout=timeout)
        return self._session

    async def close(self) -> None:
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        await self.close()

    # -- URL / params helpers ------------------------------------------------

    def _endpoint(self, name: str) -> str:
        return f"{self.config.base_url.rstrip('/')}/{name}"

    def _with_api_key(self, params: dict[str, str]) -> dict[str, str]:
        """Append api_key as the last parameter when one is configured."""
        if self.config.api_key:
            return {**params, "api_key": self.config.api_key}
        return params

    # -- Core request --------------------------------------------------------

    async def _request(
        self,
        url: str,
        *,
        params: dict[str, str],
        as_text: bool = False,
        context: RequestContext | None = None,
    ) -> Any:
        """
        Make a single GET request and decode the body.

        Parameters
        ----------
        url : str
            Full endpoint URL.
        params : dict
            Query string parameters, sent in insertion order.
        as_text : bool
            Return the raw body instead of decoding JSON.
        context : RequestContext, optional
            Logging context.

        Raises
        ------
        UpstreamError
            Non-2xx response.
        EntrezTimeoutError
            The configured timeout elapsed.
        NetworkError
            Connection-level failure.
        EntrezParseError
            A JSON body could not be decoded.
        """
        ctx = context or RequestContext(source=self._source_name, method="unknown")
        start = time.monotonic()

        logger.info(
            "Request [%s.%s] url=%s params=%s",
            ctx.source,
            ctx.method,
            url,
            {k: v for k, v in params.items() if k not in _REDACTED_PARAMS},
        )

        try:
            session = await self._get_session()
            async with session.get(
                url, params=params, headers={"User-Agent": self.config.user_agent}
            ) as resp:
                if not 200 <= resp.status < 300:
                    body = await resp.text()
                    logger.warning(
                        "HTTP %d from %s.%s: %s",
                        resp.status,
                        ctx.source,
                        ctx.method,
                        body[:200],
                    )
                    raise UpstreamError(resp.status, body, reason=resp.reason)

                if as_text:
                    data = await resp.text()
                else:
                    data = await resp.json(content_type=None)

        except asyncio.TimeoutError as e:
            elapsed = time.monotonic() - start
            logger.warning(
                "Timeout [%s.%s] elapsed=%.1fs", ctx.source, ctx.method, elapsed
            )
            raise EntrezTimeoutError(
                f"Timeout after {elapsed:.1f}s (limit {self.config.timeout_seconds}s)"
            ) from e

        except aiohttp.ClientError as e:
            logger.warning(
                "Connection error [%s.%s]: %s", ctx.source, ctx.method, e
            )
            raise NetworkError(f"Connection error: {e}") from e

        except json.JSONDecodeError as e:
            raise EntrezParseError(f"Failed to decode JSON: {e}") from e

        logger.info(
            "Success [%s.%s] elapsed=%.2fs",
            ctx.source,
            ctx.method,
            time.monotonic() - start,
        )
        return data

    # -- Convenience methods for subclasses ----------------------------------

    async def _rest_get(
        self,
        url: str,
        params: dict[str, str],
        *,
        context: RequestContext | None = None,
    ) -> Any:
        """GET a JSON endpoint and return the decoded body."""
        return await self._request(url, params=params, context=context)

    async def _rest_get_text(
        self,
        url: str,
        params: dict[str, str],
        *,
        context: RequestContext | None = None,
    ) -> str:
        """GET an endpoint and return the raw body (EFetch XML)."""
        return await self._request(url, params=params, as_text=True, context=context)
