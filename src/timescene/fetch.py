"""Fetch a scene document by URL and decode it as JSON.

http(s) URLs go through httpx; ``file://`` URLs and bare paths are read
from disk in a worker thread. Every failure surfaces as FetchError.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any
from urllib.parse import unquote, urlparse

import httpx
from loguru import logger

from timescene.config import settings
from timescene.errors import FetchError


async def load_json(url: str) -> Any:
    """Fetch ``url`` and return its parsed JSON content.

    Raises:
        FetchError: On transport, HTTP status, I/O or JSON decode failure.
    """
    try:
        scheme = urlparse(url).scheme.lower()
    except ValueError as e:
        logger.warning(f"Scene URL is malformed: {url}: {e}")
        raise FetchError(url, f"invalid URL: {e}") from e
    if scheme in ("http", "https"):
        return await _load_http(url)
    return await _load_file(url)


async def _load_http(url: str) -> Any:
    async with httpx.AsyncClient(
        timeout=settings.fetch_timeout,
        headers={"User-Agent": settings.user_agent},
        follow_redirects=True,
    ) as client:
        try:
            resp = await client.get(url)
            resp.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning(f"Scene request failed: {url}: {e}")
            raise FetchError(url, str(e)) from e

    try:
        return resp.json()
    except ValueError as e:
        logger.warning(f"Scene response is not JSON: {url}: {e}")
        raise FetchError(url, f"invalid JSON: {e}") from e


async def _load_file(url: str) -> Any:
    parsed = urlparse(url)
    path = Path(unquote(parsed.path)) if parsed.scheme == "file" else Path(url)
    try:
        text = await asyncio.to_thread(path.read_text, encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Scene file unreadable: {path}: {e}")
        raise FetchError(url, str(e)) from e

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        logger.warning(f"Scene file is not JSON: {path}: {e}")
        raise FetchError(url, f"invalid JSON: {e}") from e
