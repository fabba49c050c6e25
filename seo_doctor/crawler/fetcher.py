# seo_doctor/crawler/fetcher.py
"""
Fetcher module: single GET requests with a per-request timeout.

The fetcher reports whatever status the server answers with; deciding what
counts as success is left to the caller.  Timeouts and network errors are
raised as :class:`FetchError` so every caller handles them the same way.
"""
from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Optional, Protocol

from aiohttp import ClientError, ClientSession, ClientTimeout

from seo_doctor.logger import logger

__all__ = ("FetchError", "FetchResponse", "FetchCapability", "Fetcher", "is_ok_status")


class FetchError(Exception):
    """Network error or timeout while fetching *url*."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason


@dataclass(frozen=True, slots=True)
class FetchResponse:
    status: int
    text: str
    url: str


def is_ok_status(status: int) -> bool:
    """Success and redirect statuses (200-399) count as reachable."""
    return 200 <= status < 400


class FetchCapability(Protocol):
    async def fetch(self, url: str) -> FetchResponse: ...


class Fetcher:
    """aiohttp-backed fetch capability; use as an async context manager."""

    def __init__(self, timeout: float, user_agent: str) -> None:
        self.timeout = timeout
        self.user_agent = user_agent
        self.session: Optional[ClientSession] = None

    async def __aenter__(self) -> Fetcher:
        self.session = ClientSession(
            timeout=ClientTimeout(total=self.timeout),
            headers={"User-Agent": self.user_agent},
            raise_for_status=False,
        )
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self.session and not self.session.closed:
            await self.session.close()

    async def fetch(self, url: str) -> FetchResponse:
        """
        GET *url* and return status, body text and final URL.

        Raises FetchError on timeout or network failure.
        """
        if not self.session:
            raise RuntimeError("Session not initialized")
        try:
            async with self.session.get(url) as resp:
                text = await resp.text(errors="replace")
                return FetchResponse(status=resp.status, text=text, url=str(resp.url))
        except asyncio.TimeoutError as exc:
            logger.debug("Timeout after %.1f s: %s", self.timeout, url)
            raise FetchError(url, "timeout") from exc
        except (ClientError, ValueError) as exc:
            logger.debug("Request failed %s: %s", url, exc)
            raise FetchError(url, str(exc) or type(exc).__name__) from exc
