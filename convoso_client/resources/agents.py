# convoso_client/resources/agents.py
from __future__ import annotations
from typing import Optional

from .. import models as M
from ..params import DEFAULT_PAGINATION
from .base import BaseResource


class AgentMonitorResource(BaseResource):
    base_path = "/agent-monitor"

    async def search(self, **params) -> Optional[M.Result]:
        """Agents currently logged in, filterable by campaign, queue, user or skill."""
        return await self._get("search", params)

    async def logout(self, **params) -> Optional[M.Result]:
        return await self._get("logout", params)


class AgentPerformanceResource(BaseResource):
    base_path = "/agent-performance"

    async def search(self, **params) -> Optional[M.Result]:
        return await self._get("search", params)


class AgentProductivityResource(BaseResource):
    base_path = "/agent-productivity"

    async def search(self, **params) -> Optional[M.Result]:
        return await self._get("search", params, policy=DEFAULT_PAGINATION)


class UserActivityResource(BaseResource):
    base_path = "/user-activity"

    async def search(self, **params) -> Optional[M.Result]:
        """Returns counts of available and logged-in agents."""
        return await self._get("search", params)


class UsersResource(BaseResource):
    base_path = "/users"

    async def get_recordings(self, **params) -> Optional[M.Result]:
        return await self._get(
            "recordings", params, policy=DEFAULT_PAGINATION, errors=M.UsersRecordingsError
        )

    async def search(self, **params) -> Optional[M.Result]:
        return await self._get(
            "search", params, policy=DEFAULT_PAGINATION, errors=M.UsersSearchError
        )
