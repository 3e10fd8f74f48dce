"""
Global test configuration and fixtures.
"""

import json
import logging
from typing import Any, Callable, Dict, List, Tuple, Union
from unittest.mock import MagicMock

import httpx
import pytest

from neynar_sdk import NeynarAPIClient, NeynarV1APIClient, NeynarV2APIClient

TEST_API_KEY = "test_key"

Route = Union[httpx.Response, Callable[[httpx.Request], httpx.Response]]


class StubNeynar:
    """
    Stub Neynar server for httpx.MockTransport.

    Routes are keyed by (method, path). Every request is recorded, so tests can
    assert on the exact method, path, query, headers and body that were sent.
    """

    def __init__(self):
        self.routes: Dict[Tuple[str, str], Route] = {}
        self.requests: List[httpx.Request] = []

    def add(self, method: str, path: str, json: Any = None, status_code: int = 200, headers=None):
        self.routes[(method, path)] = httpx.Response(status_code, json=json, headers=headers)

    def add_handler(self, method: str, path: str, handler: Callable[[httpx.Request], httpx.Response]):
        self.routes[(method, path)] = handler

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(500, json={"message": f"no stub for {request.method} {request.url.path}"})
        if callable(route):
            return route(request)
        return route

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_body(self) -> Dict[str, Any]:
        return json.loads(self.last_request.content)


@pytest.fixture
def stub() -> StubNeynar:
    return StubNeynar()


@pytest.fixture
def http_client(stub: StubNeynar) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(stub.handler))


@pytest.fixture
def mock_logger() -> MagicMock:
    return MagicMock(spec=logging.Logger)


@pytest.fixture
def v1_client(http_client, mock_logger) -> NeynarV1APIClient:
    return NeynarV1APIClient(TEST_API_KEY, http_client=http_client, logger=mock_logger)


@pytest.fixture
def v2_client(http_client, mock_logger) -> NeynarV2APIClient:
    return NeynarV2APIClient(TEST_API_KEY, http_client=http_client, logger=mock_logger)


@pytest.fixture
def client(http_client, mock_logger) -> NeynarAPIClient:
    return NeynarAPIClient(TEST_API_KEY, http_client=http_client, logger=mock_logger)


@pytest.fixture
def v1_user_data() -> dict:
    return {
        "fid": 3,
        "custodyAddress": "0x6b0bda3f2ffed5efc83fa8c024acff1dd45793f1",
        "username": "dwr.eth",
        "displayName": "Dan Romero",
        "pfp": {"url": "https://example.com/pfp.png"},
        "profile": {"bio": {"text": "Working on Farcaster", "mentionedProfiles": []}},
        "followerCount": 19000,
        "followingCount": 2500,
        "verifications": ["0xd7029bdea1c17493893aafe29aad69ef892b8ff2"],
        "activeStatus": "active",
        "viewerContext": {"following": True, "followedBy": False},
    }


@pytest.fixture
def v1_cast_data(v1_user_data) -> dict:
    return {
        "hash": "0xfe90f9de682273e05b201629ad2338bdcd89b6be",
        "threadHash": "0xfe90f9de682273e05b201629ad2338bdcd89b6be",
        "parentHash": None,
        "author": {"fid": 3, "username": "dwr.eth", "displayName": "Dan Romero"},
        "text": "gm",
        "timestamp": "2023-11-07T19:01:27.000Z",
        "embeds": [],
        "reactions": {"count": 2, "fids": [2, 5]},
        "recasts": {"count": 1, "fids": [2]},
        "recasters": ["v"],
        "replies": {"count": 0},
    }


@pytest.fixture
def v2_user_data() -> dict:
    return {
        "object": "user",
        "fid": 3,
        "username": "dwr.eth",
        "display_name": "Dan Romero",
        "custody_address": "0x6b0bda3f2ffed5efc83fa8c024acff1dd45793f1",
        "pfp_url": "https://example.com/pfp.png",
        "profile": {"bio": {"text": "Working on Farcaster"}},
        "follower_count": 19000,
        "following_count": 2500,
        "verifications": [],
        "verified_addresses": {"eth_addresses": [], "sol_addresses": []},
        "active_status": "active",
    }


@pytest.fixture
def v2_cast_data(v2_user_data) -> dict:
    return {
        "object": "cast",
        "hash": "0x71d5225f77e0164388b1d4c120825f3a2c1f131c",
        "thread_hash": "0x71d5225f77e0164388b1d4c120825f3a2c1f131c",
        "parent_hash": None,
        "parent_url": None,
        "author": v2_user_data,
        "text": "hello",
        "timestamp": "2023-11-07T19:01:27.000Z",
        "embeds": [],
        "reactions": {"likes": [{"fid": 2, "fname": "v"}], "recasts": []},
        "replies": {"count": 0},
        "mentioned_profiles": [],
    }
