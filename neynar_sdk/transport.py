"""
HTTP transport for the Neynar API

Every endpoint group builds a RequestDescriptor and hands it to the one
ApiTransport owned by its versioned client. The transport injects the API key
header, executes the request with httpx, tracks rate limit headers and turns
non-2xx responses into NeynarAPIError.
"""
import json
import logging
import time
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import httpx

from .exceptions import NeynarAPIError


@dataclass(frozen=True)
class RequestDescriptor:
    """Canonical description of one API call, before it touches the network."""

    method: str
    path: str
    params: Dict[str, Any] = field(default_factory=dict)
    json: Optional[Dict[str, Any]] = None


class ApiTransport:
    """
    Executes RequestDescriptors against one versioned Neynar base URL.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str,
        http_client: Optional[httpx.AsyncClient] = None,
        logger: Optional[logging.Logger] = None,
        timeout: float = 30.0,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.logger = logger if logger is not None else logging.getLogger(__name__)

        self._owns_client = http_client is None
        if http_client is None:
            http_client = httpx.AsyncClient(
                timeout=httpx.Timeout(timeout=timeout, connect=10.0),
                limits=httpx.Limits(max_connections=10, max_keepalive_connections=5),
            )
        self._client = http_client

        self.rate_limit_info: Dict[str, Any] = {
            "limit": None,
            "remaining": None,
            "reset": None,
            "last_updated_client": 0.0,
        }

    def _get_headers(self, has_body: bool = False) -> Dict[str, str]:
        headers = {
            "accept": "application/json",
            "api_key": self.api_key,
        }
        if has_body:
            headers["content-type"] = "application/json"
        return headers

    def build_request(self, descriptor: RequestDescriptor) -> httpx.Request:
        url = f"{self.base_url}{descriptor.path}"
        return self._client.build_request(
            descriptor.method,
            url,
            params=descriptor.params or None,
            json=descriptor.json,
            headers=self._get_headers(has_body=descriptor.json is not None),
        )

    async def send(self, descriptor: RequestDescriptor) -> Any:
        """Issue the request and return the decoded JSON body."""
        request = self.build_request(descriptor)
        self.logger.debug(f"Making {request.method} request to {request.url}")

        response = await self._client.send(request)
        self._update_rate_limits(response)

        if response.is_success:
            if not response.content:
                return {}
            return response.json()

        payload = self._error_payload(response)
        if isinstance(payload, dict) and "message" in payload:
            self.logger.warning(f"API errors: {json.dumps(payload)}")
        else:
            self.logger.warning(
                f"API error {response.status_code} for {request.method} {request.url}: {payload}"
            )
        raise NeynarAPIError(
            response.status_code, payload, method=request.method, url=str(request.url)
        )

    @staticmethod
    def _error_payload(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError:
            return response.text

    def _update_rate_limits(self, response: httpx.Response):
        """
        Store rate limit information from Neynar response headers.

        Neynar reports x-ratelimit-limit, x-ratelimit-remaining and
        x-ratelimit-reset; the unprefixed ratelimit-* and retry-after names are
        accepted as fallbacks. The values are informational only, requests are
        never delayed or retried here.
        """
        headers = response.headers
        limit_hdr = headers.get("x-ratelimit-limit") or headers.get("ratelimit-limit")
        remaining_hdr = headers.get("x-ratelimit-remaining") or headers.get("ratelimit-remaining")
        reset_hdr = headers.get("x-ratelimit-reset") or headers.get("ratelimit-reset")
        retry_after_hdr = headers.get("x-ratelimit-retry-after") or headers.get("retry-after")

        updated = False
        if limit_hdr:
            try:
                self.rate_limit_info["limit"] = int(limit_hdr)
                updated = True
            except ValueError:
                self.logger.debug(f"Could not parse rate limit header value: {limit_hdr}")

        if remaining_hdr:
            try:
                remaining = int(remaining_hdr)
            except ValueError:
                self.logger.debug(f"Could not parse rate limit remaining header value: {remaining_hdr}")
            else:
                self.rate_limit_info["remaining"] = remaining
                updated = True
                if remaining < 10:
                    self.logger.warning(f"Neynar API rate limit approaching: {remaining} requests remaining")
                elif remaining < 50:
                    self.logger.debug(f"Neynar API rate limit status: {remaining} requests remaining")

        if reset_hdr:
            try:
                self.rate_limit_info["reset"] = int(reset_hdr)
                updated = True
            except ValueError:
                self.logger.warning(f"Could not parse rate limit reset header value: {reset_hdr}")

        if retry_after_hdr:
            try:
                self.rate_limit_info["retry_after"] = int(retry_after_hdr)
                updated = True
            except ValueError:
                self.logger.warning(f"Could not parse retry-after header value: {retry_after_hdr}")

        if updated:
            self.rate_limit_info["last_updated_client"] = time.time()

    async def close(self):
        """Close the HTTP client connection if this transport created it."""
        if self._owns_client:
            await self._client.aclose()
