# convoso_client/client.py
from __future__ import annotations
from typing import Optional

import httpx

from .config import ClientConfig, ClientSettings
from .http import HttpClient
from . import resources as R


class ConvosoClient:
    """Entry point: one dispatcher shared by every resource family.

    Usage::

        async with ConvosoClient(ClientConfig(api_key="...")) as client:
            agents = await client.agent_monitor.search(campaign_id=[102, 104])
    """

    def __init__(self, config: ClientConfig, *, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.cfg = config
        self._http = HttpClient(config, transport=transport)

        self.agent_monitor = R.AgentMonitorResource(self._http)
        self.agent_performance = R.AgentPerformanceResource(self._http)
        self.agent_productivity = R.AgentProductivityResource(self._http)
        self.call_logs = R.CallLogsResource(self._http)
        self.callbacks = R.CallbacksResource(self._http)
        self.campaigns = R.CampaignsResource(self._http)
        self.dnc = R.DncResource(self._http)
        self.lead_post = R.LeadPostResource(self._http)
        self.lead_validation = R.LeadValidationResource(self._http)
        self.leads = R.LeadsResource(self._http)
        self.lists = R.ListsResource(self._http)
        self.revenue = R.RevenueResource(self._http)
        self.sms_opt_out = R.SmsOptOutResource(self._http)
        self.statuses = R.StatusesResource(self._http)
        self.user_activity = R.UserActivityResource(self._http)
        self.users = R.UsersResource(self._http)

    @classmethod
    def from_env(
        cls,
        settings: Optional[ClientSettings] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "ConvosoClient":
        settings = settings or ClientSettings()
        return cls(settings.to_config(), transport=transport)

    @property
    def http(self) -> HttpClient:
        return self._http

    async def __aenter__(self) -> "ConvosoClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()
