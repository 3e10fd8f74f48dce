"""
Neynar v1 API client

Wraps the v1 endpoint groups, parses their responses into models and maps
HTTP 404 on single-resource lookups to None.
"""
import logging
from types import SimpleNamespace
from typing import List, Optional

import httpx

from ..common import BaseVersionedClient, CastOrHash, resolve_cast_hash
from ..exceptions import NeynarAPIError
from .apis import CastApi, FollowsApi, NotificationsApi, ReactionsApi, UserApi, VerificationApi
from .models import (
    AllCastsInThreadResponse,
    Cast,
    CastLikesResponse,
    CastReactionsResponse,
    CastRecasterResponse,
    CastResponse,
    CastsResponse,
    CustodyAddressResponse,
    FollowResponse,
    MentionsAndRepliesResponse,
    ReactionsAndRecastsResponse,
    RecentCastsResponse,
    RecentUsersResponse,
    User,
    UserCastLikeResponse,
    UserResponse,
    VerificationResponse,
    VerificationResponseResult,
)


class NeynarV1APIClient(BaseVersionedClient):
    """
    Client for https://api.neynar.com/v1.
    """

    API_VERSION = "v1"

    def __init__(
        self,
        api_key: str,
        base_path: Optional[str] = None,
        logger: Optional[logging.Logger] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        timeout: float = 30.0,
    ):
        super().__init__(api_key, base_path=base_path, logger=logger, http_client=http_client, timeout=timeout)
        self.apis = SimpleNamespace(
            user=UserApi(self.transport),
            cast=CastApi(self.transport),
            follows=FollowsApi(self.transport),
            verification=VerificationApi(self.transport),
            notifications=NotificationsApi(self.transport),
            reactions=ReactionsApi(self.transport),
        )

    # ------------ User ------------

    async def fetch_recent_users(
        self,
        viewer_fid: Optional[int] = None,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
    ) -> RecentUsersResponse:
        """Users in reverse chronological order of sign up."""
        data = await self.apis.user.recent_users(viewer_fid=viewer_fid, limit=limit, cursor=cursor)
        return RecentUsersResponse.model_validate(data)

    async def fetch_all_casts_liked_by_user(
        self,
        fid: int,
        viewer_fid: Optional[int] = None,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
    ) -> UserCastLikeResponse:
        data = await self.apis.user.user_cast_likes(fid, viewer_fid=viewer_fid, limit=limit, cursor=cursor)
        return UserCastLikeResponse.model_validate(data)

    async def lookup_user_by_fid(self, fid: int, viewer_fid: Optional[int] = None) -> Optional[User]:
        """Get a user by FID, or None if the API reports it as not found."""
        try:
            data = await self.apis.user.user(fid, viewer_fid=viewer_fid)
        except NeynarAPIError as e:
            if e.is_not_found:
                self.logger.debug(f"User with fid {fid} not found")
                return None
            raise
        return UserResponse.model_validate(data).result.user

    async def lookup_user_by_username(self, username: str, viewer_fid: Optional[int] = None) -> Optional[User]:
        """
        Get a user by username.

        The API may answer an unknown username with an empty result instead of
        a 404, so both are reported as None.
        """
        try:
            data = await self.apis.user.user_by_username(username, viewer_fid=viewer_fid)
        except NeynarAPIError as e:
            if e.is_not_found:
                self.logger.debug(f"User with username {username} not found")
                return None
            raise
        return UserResponse.model_validate(data).result.user

    async def lookup_custody_address_for_user(self, fid: int) -> Optional[str]:
        data = await self.apis.user.custody_address(fid)
        return CustodyAddressResponse.model_validate(data).result.custody_address

    # ------------ Cast ------------

    async def lookup_cast_by_hash(self, hash: str, viewer_fid: Optional[int] = None) -> Optional[Cast]:
        try:
            data = await self.apis.cast.cast(hash, viewer_fid=viewer_fid)
        except NeynarAPIError as e:
            if e.is_not_found:
                self.logger.debug(f"Cast {hash} not found")
                return None
            raise
        return CastResponse.model_validate(data).result.cast

    async def fetch_all_casts_in_thread(
        self, thread_parent: CastOrHash, viewer_fid: Optional[int] = None
    ) -> Optional[List[Cast]]:
        """
        All casts in a thread, root included, with no limit on reply depth.
        """
        data = await self.apis.cast.all_casts_in_thread(resolve_cast_hash(thread_parent), viewer_fid=viewer_fid)
        return AllCastsInThreadResponse.model_validate(data).result.casts

    async def fetch_all_casts_created_by_user(
        self,
        fid: int,
        parent_url: Optional[str] = None,
        viewer_fid: Optional[int] = None,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
    ) -> CastsResponse:
        data = await self.apis.cast.casts(
            fid, parent_url=parent_url, viewer_fid=viewer_fid, limit=limit, cursor=cursor
        )
        return CastsResponse.model_validate(data)

    async def fetch_recent_casts(
        self,
        viewer_fid: Optional[int] = None,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
    ) -> RecentCastsResponse:
        data = await self.apis.cast.recent_casts(viewer_fid=viewer_fid, limit=limit, cursor=cursor)
        return RecentCastsResponse.model_validate(data)

    # ------------ Verification ------------

    async def fetch_user_verifications(self, fid: int) -> Optional[VerificationResponseResult]:
        data = await self.apis.verification.verifications(fid)
        return VerificationResponse.model_validate(data).result

    async def lookup_user_by_verification(self, address: str) -> Optional[User]:
        """
        Find the user who verified an Ethereum address.

        When several users verified the same address, the API returns the one
        whose verification was received most recently.
        """
        try:
            data = await self.apis.verification.user_by_verification(address)
        except NeynarAPIError as e:
            if e.is_not_found:
                self.logger.debug(f"No user found for verified address {address}")
                return None
            raise
        return UserResponse.model_validate(data).result.user

    # ------------ Notifications ------------

    async def fetch_mention_and_reply_notifications(
        self,
        fid: int,
        viewer_fid: Optional[int] = None,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
    ) -> MentionsAndRepliesResponse:
        data = await self.apis.notifications.mentions_and_replies(
            fid, viewer_fid=viewer_fid, limit=limit, cursor=cursor
        )
        return MentionsAndRepliesResponse.model_validate(data)

    async def fetch_user_likes_and_recasts(
        self,
        fid: int,
        viewer_fid: Optional[int] = None,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
    ) -> ReactionsAndRecastsResponse:
        data = await self.apis.notifications.reactions_and_recasts(
            fid, viewer_fid=viewer_fid, limit=limit, cursor=cursor
        )
        return ReactionsAndRecastsResponse.model_validate(data)

    # ------------ Reactions ------------

    async def fetch_cast_likes(
        self,
        cast_or_cast_hash: CastOrHash,
        viewer_fid: Optional[int] = None,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
    ) -> CastLikesResponse:
        data = await self.apis.reactions.cast_likes(
            resolve_cast_hash(cast_or_cast_hash), viewer_fid=viewer_fid, limit=limit, cursor=cursor
        )
        return CastLikesResponse.model_validate(data)

    async def fetch_cast_reactions(
        self,
        cast_or_cast_hash: CastOrHash,
        viewer_fid: Optional[int] = None,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
    ) -> CastReactionsResponse:
        data = await self.apis.reactions.cast_reactions(
            resolve_cast_hash(cast_or_cast_hash), viewer_fid=viewer_fid, limit=limit, cursor=cursor
        )
        return CastReactionsResponse.model_validate(data)

    async def fetch_recasters(
        self,
        cast_or_cast_hash: CastOrHash,
        viewer_fid: Optional[int] = None,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
    ) -> CastRecasterResponse:
        data = await self.apis.reactions.cast_recasters(
            resolve_cast_hash(cast_or_cast_hash), viewer_fid=viewer_fid, limit=limit, cursor=cursor
        )
        return CastRecasterResponse.model_validate(data)

    # ------------ Follows ------------

    async def fetch_user_followers(
        self,
        fid: int,
        viewer_fid: Optional[int] = None,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
    ) -> FollowResponse:
        data = await self.apis.follows.followers(fid, viewer_fid=viewer_fid, limit=limit, cursor=cursor)
        return FollowResponse.model_validate(data)

    async def fetch_user_following(
        self,
        fid: int,
        viewer_fid: Optional[int] = None,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
    ) -> FollowResponse:
        data = await self.apis.follows.following(fid, viewer_fid=viewer_fid, limit=limit, cursor=cursor)
        return FollowResponse.model_validate(data)
