"""
Tests for the request building helpers shared by every endpoint group.
"""
from unittest.mock import AsyncMock, MagicMock

import pytest

from neynar_sdk.common import BaseApi, compact, join_ids, resolve_cast_hash
from neynar_sdk.exceptions import RequiredParameterError
from neynar_sdk.transport import RequestDescriptor
from neynar_sdk.v1.models import Cast as CastV1
from neynar_sdk.v2.models import Cast, FeedType, ReactionType


class TestResolveCastHash:
    def test_bare_hash_is_used_verbatim(self):
        assert resolve_cast_hash("0xabc") == "0xabc"

    def test_v2_cast_entity(self, v2_cast_data):
        cast = Cast.model_validate(v2_cast_data)
        assert resolve_cast_hash(cast) == v2_cast_data["hash"]

    def test_v1_cast_entity(self, v1_cast_data):
        cast = CastV1.model_validate(v1_cast_data)
        assert resolve_cast_hash(cast) == v1_cast_data["hash"]

    def test_raw_cast_dict(self, v2_cast_data):
        assert resolve_cast_hash(v2_cast_data) == v2_cast_data["hash"]

    def test_none_passes_through(self):
        assert resolve_cast_hash(None) is None


class TestJoinIds:
    def test_list_is_comma_joined(self):
        assert join_ids([3, 2]) == "3,2"

    def test_string_is_used_as_is(self):
        assert join_ids("3,2") == "3,2"

    def test_missing_or_empty_gives_none(self):
        assert join_ids(None) is None
        assert join_ids([]) is None


class TestCompact:
    def test_none_values_are_dropped(self):
        assert compact({"fid": 3, "cursor": None, "limit": None}) == {"fid": 3}

    def test_falsy_values_are_kept(self):
        assert compact({"limit": 0, "with_recasts": False, "q": ""}) == {"limit": 0, "with_recasts": False, "q": ""}

    def test_enums_are_unwrapped(self):
        result = compact({"feed_type": FeedType.FILTER, "reaction_type": ReactionType.LIKE})
        assert result == {"feed_type": "filter", "reaction_type": "like"}
        assert type(result["feed_type"]) is str

    def test_empty_input(self):
        assert compact(None) == {}
        assert compact({}) == {}


class TestBaseApi:
    @pytest.fixture
    def api(self):
        transport = MagicMock()
        transport.send = AsyncMock(return_value={"ok": True})
        return BaseApi(transport)

    def test_descriptor_compacts_query(self, api):
        descriptor = api._descriptor("followers", "GET", "/farcaster/followers", query={"fid": 3, "cursor": None})

        assert descriptor == RequestDescriptor("GET", "/farcaster/followers", params={"fid": 3}, json=None)

    def test_descriptor_without_body_has_no_json(self, api):
        descriptor = api._descriptor("create_signer", "POST", "/farcaster/signer")

        assert descriptor.json is None
        assert descriptor.params == {}

    def test_descriptor_compacts_body(self, api):
        descriptor = api._descriptor(
            "post_cast", "POST", "/farcaster/cast", body={"signer_uuid": "u1", "text": "hi", "parent": None}
        )

        assert descriptor.json == {"signer_uuid": "u1", "text": "hi"}

    def test_missing_required_parameter_raises(self, api):
        with pytest.raises(RequiredParameterError) as exc_info:
            api._descriptor("followers", "GET", "/farcaster/followers", query={"fid": None}, required={"fid": None})

        assert exc_info.value.operation == "followers"
        assert exc_info.value.parameter == "fid"
        assert isinstance(exc_info.value, ValueError)

    @pytest.mark.asyncio
    async def test_send_delegates_to_transport(self, api):
        descriptor = RequestDescriptor("GET", "/farcaster/feed")

        result = await api._send(descriptor)

        assert result == {"ok": True}
        api.transport.send.assert_awaited_once_with(descriptor)
