# convoso_client/utils.py
from __future__ import annotations
import asyncio
from typing import Mapping, Optional

import httpx

from .params import QueryValue, stringify

BASE_BACKOFF_S = 1.0
MAX_BACKOFF_S = 30.0


def build_url(
    base_url: str,
    api_key: str,
    path: str,
    query: Optional[Mapping[str, QueryValue]] = None,
) -> httpx.URL:
    base = base_url[:-1] if base_url.endswith("/") else base_url
    path = path[1:] if path.startswith("/") else path
    params: list[tuple[str, str]] = [("auth_token", api_key)]
    for key, value in (query or {}).items():
        if value is not None:
            params.append((key, stringify(value)))
    return httpx.URL(f"{base}/{path}", params=params)


def calculate_backoff(attempt: int, base_delay: float = BASE_BACKOFF_S) -> float:
    return min(base_delay * 2 ** attempt, MAX_BACKOFF_S)


def is_retryable_error(status_code: Optional[int]) -> bool:
    if not status_code:
        return False
    return status_code == 429 or status_code >= 500


async def sleep(seconds: float) -> None:
    await asyncio.sleep(seconds)
