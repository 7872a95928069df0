# convoso_client/resources/compliance.py
from __future__ import annotations
from typing import Any, Optional

from .. import models as M
from ..params import PaginationPolicy
from .base import BaseResource

# DNC and SMS opt-out lists allow deeper paging than the other families
DNC_PAGINATION = PaginationPolicy(offset_max=100000)
SMS_OPT_OUT_PAGINATION = PaginationPolicy(offset_max=100000)


class DncResource(BaseResource):
    base_path = "/dnc"

    async def insert(self, **params) -> Optional[M.Result]:
        return await self._get("insert", params, errors=M.DncInsertError)

    async def update(self, **params) -> Optional[M.Result]:
        return await self._get("update", params, errors=M.DncUpdateError)

    async def delete(self, **params) -> Optional[M.Result]:
        return await self._get("delete", params, errors=M.DncDeleteError)

    async def search(self, **params) -> Optional[M.Result]:
        return await self._get("search", params, policy=DNC_PAGINATION, errors=M.DncSearchError)

    async def add(self, **body) -> Any:
        return await self._post("add", body)

    async def remove(self, **body) -> Any:
        return await self._post("remove", body)


class SmsOptOutResource(BaseResource):
    base_path = "/sms-opt-out"

    async def insert(self, **params) -> Optional[M.Result]:
        return await self._get("insert", params, errors=M.SmsOptOutInsertError)

    async def update(self, **params) -> Optional[M.Result]:
        return await self._get("update", params, errors=M.SmsOptOutUpdateError)

    async def search(self, **params) -> Optional[M.Result]:
        return await self._get(
            "search", params, policy=SMS_OPT_OUT_PAGINATION, errors=M.SmsOptOutSearchError
        )
