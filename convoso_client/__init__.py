# convoso_client/__init__.py
from .config import ClientConfig, ClientSettings
from .client import ConvosoClient
from .exceptions import ApiTimeoutError, ConvosoApiError, NetworkError
from .http import HttpClient, RequestSpec
from .logging_setup import configure_logging
from . import models
from . import params
from . import resources

__all__ = [
    "ClientConfig",
    "ClientSettings",
    "ConvosoClient",
    "ConvosoApiError",
    "ApiTimeoutError",
    "NetworkError",
    "HttpClient",
    "RequestSpec",
    "configure_logging",
    "models",
    "params",
    "resources",
]
