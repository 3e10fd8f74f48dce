"""
Custom Exception Classes

This module defines the exceptions raised by the Neynar client so callers
can tell configuration mistakes, missing arguments and API failures apart.
Network level failures are httpx's own exceptions and are not wrapped.
"""

from typing import Any, Optional


class NeynarBaseException(Exception):
    """Base exception for the Neynar client."""

    pass


class ConfigurationError(NeynarBaseException, ValueError):
    """Raised for configuration problems, such as a missing API key."""

    pass


class RequiredParameterError(NeynarBaseException, ValueError):
    """Raised when a required argument is missing, before any request is sent."""

    def __init__(self, operation: str, parameter: str):
        self.operation = operation
        self.parameter = parameter
        super().__init__(
            f"Required parameter '{parameter}' was null or undefined when calling {operation}."
        )


class NeynarAPIError(NeynarBaseException):
    """Raised when the Neynar API answers with a non-2xx status."""

    def __init__(self, status_code: int, payload: Any = None, method: Optional[str] = None, url: Optional[str] = None):
        self.status_code = status_code
        self.payload = payload
        self.method = method
        self.url = url

        details = payload if isinstance(payload, dict) else {}
        self.code: Optional[str] = details.get("code")
        self.message: Optional[str] = details.get("message")
        self.property: Optional[str] = details.get("property")

        summary = self.message or (payload if isinstance(payload, str) and payload else "no error message")
        if method and url:
            super().__init__(f"Neynar API error {status_code} for {method} {url}: {summary}")
        else:
            super().__init__(f"Neynar API error {status_code}: {summary}")

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404
