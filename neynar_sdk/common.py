"""
Shared helpers for the endpoint groups and versioned clients.
"""
import logging
from enum import Enum
from typing import Any, Dict, Iterable, Mapping, Optional, Protocol, Union

import httpx

from .config import DEFAULT_BASE_URL
from .exceptions import ConfigurationError, RequiredParameterError
from .transport import ApiTransport, RequestDescriptor


class HasHash(Protocol):
    hash: str


CastOrHash = Union[HasHash, Mapping[str, Any], str]


def resolve_cast_hash(cast_or_hash: Optional[CastOrHash]) -> Optional[str]:
    """
    Return the cast hash for a Cast entity, a raw cast dict or a bare hash string.

    None is passed through so the endpoint's required parameter check reports it.
    """
    if cast_or_hash is None or isinstance(cast_or_hash, str):
        return cast_or_hash
    if isinstance(cast_or_hash, Mapping):
        return cast_or_hash.get("hash")
    return cast_or_hash.hash


def compact(values: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Drop entries whose value is None and unwrap enums; 0, False and "" stay."""
    if not values:
        return {}
    return {
        key: value.value if isinstance(value, Enum) else value
        for key, value in values.items()
        if value is not None
    }


def join_ids(values: Optional[Union[str, Iterable[Any]]]) -> Optional[str]:
    """Comma join a list of ids; a string is used as is. None and an empty list give None."""
    if values is None or isinstance(values, str):
        return values
    return ",".join(map(str, values)) or None


def assert_param_exists(operation: str, name: str, value: Any):
    if value is None:
        raise RequiredParameterError(operation, name)


class BaseApi:
    """
    Base class for one family of REST endpoints sharing a base path and API key.
    """

    def __init__(self, transport: ApiTransport):
        self.transport = transport

    def _descriptor(
        self,
        operation: str,
        method: str,
        path: str,
        query: Optional[Mapping[str, Any]] = None,
        body: Optional[Mapping[str, Any]] = None,
        required: Optional[Mapping[str, Any]] = None,
    ) -> RequestDescriptor:
        for name, value in (required or {}).items():
            assert_param_exists(operation, name, value)

        return RequestDescriptor(
            method=method,
            path=path,
            params=compact(query),
            json=compact(body) if body is not None else None,
        )

    async def _send(self, descriptor: RequestDescriptor) -> Any:
        return await self.transport.send(descriptor)


class BaseVersionedClient:
    """
    Owns one authenticated transport for a single API version.
    """

    API_VERSION = ""

    def __init__(
        self,
        api_key: str,
        base_path: Optional[str] = None,
        logger: Optional[logging.Logger] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        timeout: float = 30.0,
    ):
        if not api_key:
            raise ConfigurationError(
                "Attempt to use an authenticated API method without first providing an api key"
            )
        self.logger = logger if logger is not None else logging.getLogger(self.__class__.__module__)
        self.base_url = f"{(base_path or DEFAULT_BASE_URL).rstrip('/')}/{self.API_VERSION}"
        self.transport = ApiTransport(
            api_key,
            self.base_url,
            http_client=http_client,
            logger=self.logger,
            timeout=timeout,
        )

    async def close(self):
        await self.transport.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()
