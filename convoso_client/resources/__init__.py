# convoso_client/resources/__init__.py
from .base import BaseResource
from .agents import (
    AgentMonitorResource,
    AgentPerformanceResource,
    AgentProductivityResource,
    UserActivityResource,
    UsersResource,
)
from .campaigns import CallLogsResource, CampaignsResource, RevenueResource, StatusesResource
from .compliance import DncResource, SmsOptOutResource
from .leads import (
    CallbacksResource,
    LeadPostResource,
    LeadsResource,
    LeadValidationResource,
    ListsResource,
)

__all__ = [
    "BaseResource",
    "AgentMonitorResource",
    "AgentPerformanceResource",
    "AgentProductivityResource",
    "CallLogsResource",
    "CallbacksResource",
    "CampaignsResource",
    "DncResource",
    "LeadPostResource",
    "LeadValidationResource",
    "LeadsResource",
    "ListsResource",
    "RevenueResource",
    "SmsOptOutResource",
    "StatusesResource",
    "UserActivityResource",
    "UsersResource",
]
