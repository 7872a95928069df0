# convoso_client/resources/campaigns.py
from __future__ import annotations
from typing import Any, Optional, Union

from .. import models as M
from ..params import normalize_hex_color
from .base import BaseResource


class CampaignsResource(BaseResource):
    base_path = "/campaigns"

    async def status(self, campaign_id: Union[int, str], status: str, **params) -> Optional[M.Result]:
        return await self._get(
            "status",
            {"campaign_id": campaign_id, "status": status, **params},
            errors=M.CampaignStatusError,
        )

    async def search(self) -> Optional[M.Result]:
        return await self._get("search")

    # The endpoints below take a JSON body and return the raw payload.
    async def list(self, **body) -> Any:
        return await self._post("list", body)

    async def get(self, campaign_id: Union[int, str]) -> Any:
        return await self._post("get", {"campaign_id": campaign_id})

    async def create(self, **body) -> Any:
        return await self._post("", body)

    async def update(self, **body) -> Any:
        return await self._post("update", body)


class StatusesResource(BaseResource):
    base_path = "/statuses"

    async def insert(self, **params) -> Optional[M.Result]:
        params["hex_color"] = normalize_hex_color(params.get("hex_color"))
        return await self._get("insert", params, errors=M.StatusesInsertError)

    async def update(self, **params) -> Optional[M.Result]:
        params["hex_color"] = normalize_hex_color(params.get("hex_color"))
        return await self._get("update", params, errors=M.StatusesUpdateError)

    async def search(self, **params) -> Optional[M.Result]:
        return await self._get("search", params)


class RevenueResource(BaseResource):
    base_path = "/revenue"

    async def update(
        self,
        call_log_id: str,
        revenue: Optional[float] = None,
        return_flag: Optional[int] = None,
    ) -> Optional[M.Result]:
        # ``return`` is a keyword in Python, so the flag is renamed at the call site
        params = {"call_log_id": call_log_id, "revenue": revenue, "return": return_flag}
        return await self._get("update", params, errors=M.RevenueUpdateError)


class CallLogsResource(BaseResource):
    base_path = "/log"

    async def search(self, **params) -> Optional[M.Result]:
        return await self._get("retrieve", params)

    async def update(self, **params) -> Optional[M.Result]:
        return await self._get("update", params)
