# convoso_client/http.py
from __future__ import annotations
import asyncio
import json
import logging
from dataclasses import dataclass
from typing import Any, Literal, Mapping, Optional

import httpx

from .config import ClientConfig
from .exceptions import ApiTimeoutError, ConvosoApiError, NetworkError
from .params import QueryValue
from .utils import build_url, calculate_backoff, is_retryable_error, sleep

log = logging.getLogger("convoso_client")

Method = Literal["GET", "POST", "PUT", "PATCH", "DELETE"]


@dataclass(frozen=True)
class RequestSpec:
    path: str
    method: Method = "GET"
    query: Optional[Mapping[str, QueryValue]] = None
    body: Any = None
    headers: Optional[Mapping[str, str]] = None


def _is_json(response: httpx.Response) -> bool:
    return "application/json" in response.headers.get("content-type", "")


class HttpClient:
    """Executes API calls with a per-attempt deadline and retry on 429/5xx."""

    def __init__(self, config: ClientConfig, *, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.cfg = config
        # deadlines are enforced by request() itself
        self._client = httpx.AsyncClient(transport=transport, timeout=None)

    async def __aenter__(self) -> "HttpClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    # ------------ low-level helpers ------------
    async def request(self, spec: RequestSpec) -> Any:
        tries = max(1, self.cfg.max_retries + 1)
        last_exc: ConvosoApiError | None = None
        for attempt in range(tries):
            try:
                log.debug("%s %s attempt=%d", spec.method, spec.path, attempt + 1)
                return await self._execute(spec)
            except ConvosoApiError as e:
                last_exc = e
                if not is_retryable_error(e.status_code) or attempt == tries - 1:
                    raise
                delay = calculate_backoff(attempt)
                log.warning(
                    "%s %s failed with HTTP %s; retrying in %.1fs (%d/%d)",
                    spec.method, spec.path, e.status_code, delay, attempt + 1, tries - 1,
                )
                await sleep(delay)
        assert last_exc is not None
        raise last_exc

    def _headers(self, spec: RequestSpec) -> httpx.Headers:
        headers = httpx.Headers({"Content-Type": "application/json"})
        headers.update(self.cfg.headers)
        if spec.headers:
            headers.update(spec.headers)
        return headers

    async def _execute(self, spec: RequestSpec) -> Any:
        try:
            url = build_url(self.cfg.base_url, self.cfg.api_key, spec.path, spec.query)
            content = json.dumps(spec.body) if spec.body is not None else None
            resp = await asyncio.wait_for(
                self._client.request(spec.method, url, headers=self._headers(spec), content=content),
                timeout=self.cfg.timeout_s,
            )
            if not resp.is_success:
                raise self._error_from(resp)
            if not _is_json(resp):
                return None
            return resp.json()
        except ConvosoApiError:
            raise
        except (asyncio.TimeoutError, httpx.TimeoutException) as e:
            raise ApiTimeoutError() from e
        except Exception as e:
            raise NetworkError(str(e)) from e

    @staticmethod
    def _error_from(resp: httpx.Response) -> ConvosoApiError:
        data: Any = None
        if _is_json(resp):
            try:
                data = resp.json()
            except ValueError:
                data = None
        if not isinstance(data, dict):
            data = {}
        message = data.get("message")
        code = data.get("code")
        return ConvosoApiError(
            message if message is not None else resp.reason_phrase,
            resp.status_code,
            str(code) if code is not None else None,
            data.get("details"),
        )
