"""
Tests for response model parsing.
"""

import pytest
from pydantic import ValidationError

from neynar_sdk.v1 import models as v1
from neynar_sdk.v2 import models as v2


class TestV1Models:
    def test_camel_case_keys(self, v1_user_data):
        user = v1.User.model_validate(v1_user_data)

        assert user.display_name == "Dan Romero"
        assert user.follower_count == 19000
        assert user.viewer_context.followed_by is False
        assert user.profile.bio.text == "Working on Farcaster"

    def test_snake_case_names_are_accepted(self):
        user = v1.User(fid=3, display_name="Dan")
        assert user.display_name == "Dan"

    def test_unknown_fields_are_kept(self, v1_user_data):
        user = v1.User.model_validate(dict(v1_user_data, powerBadge=True))
        assert user.model_extra["powerBadge"] is True

    def test_models_are_frozen(self, v1_cast_data):
        cast = v1.Cast.model_validate(v1_cast_data)

        with pytest.raises(ValidationError):
            cast.text = "changed"

    def test_cast_requires_hash(self):
        with pytest.raises(ValidationError):
            v1.Cast.model_validate({"text": "no hash"})

    def test_cursor_property(self):
        page = v1.FollowResponse.model_validate({"result": {"users": [], "next": {"cursor": "abc"}}})
        assert page.result.cursor == "abc"

        last = v1.FollowResponse.model_validate({"result": {"users": []}})
        assert last.result.cursor is None

    def test_thread_without_casts(self):
        response = v1.AllCastsInThreadResponse.model_validate({"result": {}})
        assert response.result.casts is None


class TestV2Models:
    def test_cast_with_author(self, v2_cast_data):
        cast = v2.Cast.model_validate(v2_cast_data)

        assert cast.author.username == "dwr.eth"
        assert cast.author.verified_addresses.eth_addresses == []
        assert cast.replies.count == 0

    def test_signer_status_enum(self):
        signer = v2.Signer.model_validate({"signer_uuid": "u1", "status": "revoked"})
        assert signer.status is v2.SignerStatus.REVOKED

    def test_unknown_signer_status_is_rejected(self):
        with pytest.raises(ValidationError):
            v2.Signer.model_validate({"signer_uuid": "u1", "status": "lost"})

    def test_enums_compare_to_wire_values(self):
        assert v2.ReactionType.LIKE == "like"
        assert v2.FeedType("filter") is v2.FeedType.FILTER
        assert v2.FilterType.GLOBAL_TRENDING.value == "global_trending"
        assert v2.CastParamType.URL.value == "url"

    def test_notification_type_alias(self):
        notification = v2.Notification.model_validate({"type": "follows", "follows": [{"fid": 2}]})
        assert notification.notification_type == "follows"

    def test_feed_cursor(self, v2_cast_data):
        feed = v2.FeedResponse.model_validate({"casts": [v2_cast_data], "next": {"cursor": "next"}})
        assert feed.cursor == "next"
        assert v2.FeedResponse.model_validate({"casts": []}).cursor is None
