"""
Base client for E-utilities requests.

Provides: lazily created aiohttp session, token-bucket rate limiting,
structured logging and mapping of transport failures to DataSourceError.
Requests are issued once; failed calls are reported, not retried.
"""

import asyncio
import logging
import time
from abc import ABC, abstractmethod
from typing import Any

import aiohttp
from pydantic import BaseModel

from entrez_records.constants import DEFAULT_TIMEOUT, NCBI_RATE_LIMIT

logger = logging.getLogger("entrez_records.data_sources")


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


class RateLimitConfig(BaseModel):
    """Token-bucket rate limiter settings."""

    requests_per_second: float = NCBI_RATE_LIMIT
    burst: int = 1


class ClientConfig(BaseModel):
    """Top-level client config."""

    rate_limit: RateLimitConfig = RateLimitConfig()
    timeout_seconds: float = DEFAULT_TIMEOUT


# ---------------------------------------------------------------------------
# Rate limiter (async token bucket)
# ---------------------------------------------------------------------------


class TokenBucketRateLimiter:
    """
    Async token-bucket rate limiter.

    Allows `burst` requests immediately, then refills at
    `requests_per_second`.  Callers await `acquire()` before
    making a request; it sleeps only when the bucket is empty.
    """

    def __init__(self, config: RateLimitConfig):
        self.rate = config.requests_per_second
        self.max_tokens = config.burst
        self.tokens = float(config.burst)
        self.last_refill = time.monotonic()
        self._lock = asyncio.Lock()

    async def acquire(self) -> None:
        async with self._lock:
            now = time.monotonic()
            elapsed = now - self.last_refill
            self.tokens = min(self.max_tokens, self.tokens + elapsed * self.rate)
            self.last_refill = now

            if self.tokens < 1.0:
                wait = (1.0 - self.tokens) / self.rate
                logger.debug("Rate limiter: sleeping %.2fs", wait)
                await asyncio.sleep(wait)
                self.tokens = 0.0
                self.last_refill = time.monotonic()
            else:
                self.tokens -= 1.0


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class DataSourceError(Exception):
    """Base exception for data source failures."""

    def __init__(self, source: str, message: str, status_code: int | None = None):
        self.source = source
        self.status_code = status_code
        super().__init__(f"[{source}] {message}")


# ---------------------------------------------------------------------------
# Base client
# ---------------------------------------------------------------------------


class BaseClient(ABC):
    """
    Abstract base for E-utilities clients.

    Subclasses implement `_source_name` and their own typed methods that
    call `_rest_get_xml()` and hand the text to a parser.
    """

    def __init__(self, config: ClientConfig | None = None):
        self.config = config or ClientConfig()
        self.rate_limiter = TokenBucketRateLimiter(self.config.rate_limit)
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

    # -- Requests ------------------------------------------------------------

    async def _rest_get_xml(self, url: str, params: dict[str, Any]) -> str:
        """
        GET ``url`` and return the response body as text.

        Raises
        ------
        DataSourceError
            On HTTP status >= 400, connection errors and timeouts.
        """
        start = time.monotonic()
        await self.rate_limiter.acquire()
        session = await self._get_session()

        logger.info("Request [%s] url=%s", self._source_name, url)

        try:
            resp = await session.get(url, params=params)
            body = await resp.text()
        except asyncio.TimeoutError as e:
            elapsed = time.monotonic() - start
            logger.warning(
                "Timeout [%s] elapsed=%.1fs url=%s", self._source_name, elapsed, url
            )
            raise DataSourceError(
                self._source_name, f"Timeout after {elapsed:.1f}s"
            ) from e
        except aiohttp.ClientError as e:
            logger.warning("Connection error [%s]: %s", self._source_name, e)
            raise DataSourceError(self._source_name, f"Connection error: {e}") from e

        if resp.status >= 400:
            raise DataSourceError(
                self._source_name,
                f"HTTP {resp.status}: {body[:500]}",
                status_code=resp.status,
            )

        logger.info(
            "Success [%s] status=%d elapsed=%.2fs",
            self._source_name,
            resp.status,
            time.monotonic() - start,
        )
        return body
