# convoso_client/resources/leads.py
from __future__ import annotations
from typing import Optional

from .. import models as M
from ..params import DEFAULT_PAGINATION, PaginationPolicy
from .base import BaseResource

LEADS_SEARCH_PAGINATION = PaginationPolicy(limit_max=2000)
CALLBACKS_PAGINATION = PaginationPolicy(limit_max=5000, limit_default=20)


class LeadsResource(BaseResource):
    base_path = "/leads"

    async def insert(self, **params) -> Optional[M.Result]:
        return await self._get("insert", params, errors=M.LeadsInsertError)

    async def update(self, **params) -> Optional[M.Result]:
        return await self._get("update", params, errors=M.LeadsUpdateError)

    async def delete(self, **params) -> Optional[M.Result]:
        return await self._get("delete", params, errors=M.LeadsDeleteError)

    async def search(self, **params) -> Optional[M.Result]:
        return await self._get(
            "search", params, policy=LEADS_SEARCH_PAGINATION, errors=M.LeadsSearchError
        )

    async def get_recordings(self, **params) -> Optional[M.Result]:
        return await self._get(
            "get-recordings", params, policy=DEFAULT_PAGINATION, errors=M.LeadRecordingsError
        )


class LeadPostResource(BaseResource):
    base_path = "/lead-post-validation"

    async def insert(self, **params) -> Optional[M.Result]:
        # only the global FORBIDDEN variant is documented here
        return await self._get("insert", params)


class LeadValidationResource(BaseResource):
    base_path = "/lead-validation"

    async def search(self, criteria_key: str, phone_number: str, **params) -> Optional[M.Result]:
        return await self._get(
            "search", {"criteria_key": criteria_key, "phone_number": phone_number, **params}
        )


class ListsResource(BaseResource):
    base_path = "/lists"

    async def insert(self, **params) -> Optional[M.Result]:
        return await self._get("insert", params, errors=M.ListsInsertError)

    async def update(self, **params) -> Optional[M.Result]:
        return await self._get("update", params, errors=M.ListsUpdateError)

    async def delete(self, **params) -> Optional[M.Result]:
        return await self._get("delete", params, errors=M.ListsDeleteError)

    async def search(self, **params) -> Optional[M.Result]:
        return await self._get("search", params, errors=M.ListsSearchError)


class CallbacksResource(BaseResource):
    base_path = "/callbacks"

    async def insert(self, **params) -> Optional[M.Result]:
        return await self._get("insert", params, errors=M.CallbackInsertError)

    async def update(self, **params) -> Optional[M.Result]:
        return await self._get("update", params, errors=M.CallbackUpdateError)

    async def delete(self, **params) -> Optional[M.Result]:
        return await self._get("delete", params, errors=M.CallbackDeleteError)

    async def search(self, **params) -> Optional[M.Result]:
        return await self._get(
            "search", params, policy=CALLBACKS_PAGINATION, errors=M.CallbackSearchError
        )
