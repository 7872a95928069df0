# convoso_client/exceptions.py
from __future__ import annotations
from typing import Any

TIMEOUT = "TIMEOUT"
NETWORK_ERROR = "NETWORK_ERROR"


class ConvosoApiError(Exception):
    """Raised for every failed call: transport, timeout or non-2xx response."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        code: str | None = None,
        details: Any = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code
        self.details = details

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message={self.message!r}, "
            f"status_code={self.status_code!r}, code={self.code!r})"
        )


class ApiTimeoutError(ConvosoApiError):
    def __init__(self, message: str = "Request timeout"):
        super().__init__(message, None, TIMEOUT)


class NetworkError(ConvosoApiError):
    def __init__(self, message: str):
        super().__init__(message, None, NETWORK_ERROR)
