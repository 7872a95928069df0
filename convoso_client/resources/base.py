# convoso_client/resources/base.py
from __future__ import annotations
from typing import Any, Mapping, Optional, Type

from ..http import HttpClient, RequestSpec
from ..models import ErrorCode, Result, parse_result
from ..params import PaginationPolicy, ParamValue, apply_pagination_policy, normalize_params


class BaseResource:
    base_path: str = ""

    def __init__(self, http: HttpClient):
        self.http = http

    def _path(self, endpoint: str = "") -> str:
        return f"{self.base_path}/{endpoint}" if endpoint else self.base_path

    async def _get(
        self,
        endpoint: str,
        params: Optional[Mapping[str, ParamValue]] = None,
        *,
        policy: Optional[PaginationPolicy] = None,
        errors: Optional[Type[ErrorCode]] = None,
    ) -> Optional[Result]:
        raw = dict(params or {})
        if policy is not None:
            raw = apply_pagination_policy(raw, policy)
        payload = await self.http.request(
            RequestSpec(path=self._path(endpoint), query=normalize_params(raw))
        )
        return parse_result(payload, errors)

    async def _post(self, endpoint: str, body: Optional[Mapping[str, Any]] = None) -> Any:
        return await self.http.request(
            RequestSpec(path=self._path(endpoint), method="POST", body=dict(body) if body else None)
        )
