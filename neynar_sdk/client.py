"""
Neynar API Client for Farcaster

This module provides one client object covering both Neynar API versions.
Every method delegates to the v1 or v2 client and returns its result unchanged.
"""
import logging
from types import SimpleNamespace
from typing import Any, Dict, List, Optional, Union

import httpx

from .common import CastOrHash
from .config import NeynarSettings, get_settings
from .exceptions import ConfigurationError
from .v1 import NeynarV1APIClient
from .v1 import models as v1
from .v2 import NeynarV2APIClient
from .v2 import models as v2


class NeynarAPIClient:
    """
    A client for the Neynar Farcaster API, v1 and v2.

    Usage:
        async with NeynarAPIClient("NEYNAR_API_KEY") as client:
            user = await client.lookup_user_by_fid(3)
    """

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
        self.clients = SimpleNamespace(
            v1=NeynarV1APIClient(
                api_key, base_path=base_path, logger=logger, http_client=http_client, timeout=timeout
            ),
            v2=NeynarV2APIClient(
                api_key, base_path=base_path, logger=logger, http_client=http_client, timeout=timeout
            ),
        )

    @classmethod
    def from_settings(cls, settings: Optional[NeynarSettings] = None, **kwargs) -> "NeynarAPIClient":
        """Build a client from NeynarSettings (environment / .env by default)."""
        settings = settings or get_settings()
        logging.getLogger(__package__).setLevel(settings.log_level)
        kwargs.setdefault("base_path", settings.base_url)
        kwargs.setdefault("timeout", settings.timeout)
        return cls(settings.api_key or "", **kwargs)

    async def close(self):
        """Close the HTTP client connections."""
        await self.clients.v1.close()
        await self.clients.v2.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()

    # ============ v1 APIs ============

    # ------------ User ------------

    async def fetch_recent_users(
        self,
        viewer_fid: Optional[int] = None,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
    ) -> v1.RecentUsersResponse:
        """
        A list of users in reverse chronological order based on sign up.

        Args:
            viewer_fid: FID of the viewer, adds viewer context to each user
            limit: Page size, up to 1000
            cursor: Cursor from a previous page

        Returns:
            RecentUsersResponse with result.users and result.next.cursor
        """
        return await self.clients.v1.fetch_recent_users(viewer_fid=viewer_fid, limit=limit, cursor=cursor)

    async def fetch_all_casts_liked_by_user(
        self,
        fid: int,
        viewer_fid: Optional[int] = None,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
    ) -> v1.UserCastLikeResponse:
        """
        All casts liked by a user, newest first.

        Args:
            fid: FID of the user whose likes are fetched
            viewer_fid: FID of the viewer, adds viewer context
            limit: Page size
            cursor: Cursor from a previous page
        """
        return await self.clients.v1.fetch_all_casts_liked_by_user(
            fid, viewer_fid=viewer_fid, limit=limit, cursor=cursor
        )

    async def lookup_user_by_fid(self, fid: int, viewer_fid: Optional[int] = None) -> Optional[v1.User]:
        """Get a user by FID, None if not found."""
        return await self.clients.v1.lookup_user_by_fid(fid, viewer_fid=viewer_fid)

    async def lookup_user_by_username(self, username: str, viewer_fid: Optional[int] = None) -> Optional[v1.User]:
        """Get a user by username, None if not found."""
        return await self.clients.v1.lookup_user_by_username(username, viewer_fid=viewer_fid)

    async def lookup_custody_address_for_user(self, fid: int) -> Optional[str]:
        """Get the custody address of a user."""
        return await self.clients.v1.lookup_custody_address_for_user(fid)

    # ------------ Cast ------------

    async def lookup_cast_by_hash(self, hash: str, viewer_fid: Optional[int] = None) -> Optional[v1.Cast]:
        """Get a single cast by hash, None if not found."""
        return await self.clients.v1.lookup_cast_by_hash(hash, viewer_fid=viewer_fid)

    async def fetch_all_casts_in_thread(
        self, thread_parent: CastOrHash, viewer_fid: Optional[int] = None
    ) -> Optional[List[v1.Cast]]:
        """All casts in a thread, the parent included."""
        return await self.clients.v1.fetch_all_casts_in_thread(thread_parent, viewer_fid=viewer_fid)

    async def fetch_all_casts_created_by_user(
        self,
        fid: int,
        parent_url: Optional[str] = None,
        viewer_fid: Optional[int] = None,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
    ) -> v1.CastsResponse:
        """All casts (replies and recasts included) created by a user."""
        return await self.clients.v1.fetch_all_casts_created_by_user(
            fid, parent_url=parent_url, viewer_fid=viewer_fid, limit=limit, cursor=cursor
        )

    async def fetch_recent_casts(
        self,
        viewer_fid: Optional[int] = None,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
    ) -> v1.RecentCastsResponse:
        return await self.clients.v1.fetch_recent_casts(viewer_fid=viewer_fid, limit=limit, cursor=cursor)

    # ------------ Verification ------------

    async def fetch_user_verifications(self, fid: int) -> Optional[v1.VerificationResponseResult]:
        """All known verifications of a user."""
        return await self.clients.v1.fetch_user_verifications(fid)

    async def lookup_user_by_verification(self, address: str) -> Optional[v1.User]:
        """The user who verified an Ethereum address, None if nobody did."""
        return await self.clients.v1.lookup_user_by_verification(address)

    # ------------ Notifications ------------

    async def fetch_mention_and_reply_notifications(
        self,
        fid: int,
        viewer_fid: Optional[int] = None,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
    ) -> v1.MentionsAndRepliesResponse:
        """Mentions of and replies to a user's casts, newest first."""
        return await self.clients.v1.fetch_mention_and_reply_notifications(
            fid, viewer_fid=viewer_fid, limit=limit, cursor=cursor
        )

    async def fetch_user_likes_and_recasts(
        self,
        fid: int,
        viewer_fid: Optional[int] = None,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
    ) -> v1.ReactionsAndRecastsResponse:
        """Likes and recasts of a user's casts, newest first."""
        return await self.clients.v1.fetch_user_likes_and_recasts(
            fid, viewer_fid=viewer_fid, limit=limit, cursor=cursor
        )

    # ------------ Reactions ------------

    async def fetch_cast_likes(
        self,
        cast_or_cast_hash: CastOrHash,
        viewer_fid: Optional[int] = None,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
    ) -> v1.CastLikesResponse:
        return await self.clients.v1.fetch_cast_likes(
            cast_or_cast_hash, viewer_fid=viewer_fid, limit=limit, cursor=cursor
        )

    async def fetch_cast_reactions(
        self,
        cast_or_cast_hash: CastOrHash,
        viewer_fid: Optional[int] = None,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
    ) -> v1.CastReactionsResponse:
        return await self.clients.v1.fetch_cast_reactions(
            cast_or_cast_hash, viewer_fid=viewer_fid, limit=limit, cursor=cursor
        )

    async def fetch_recasters(
        self,
        cast_or_cast_hash: CastOrHash,
        viewer_fid: Optional[int] = None,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
    ) -> v1.CastRecasterResponse:
        return await self.clients.v1.fetch_recasters(
            cast_or_cast_hash, viewer_fid=viewer_fid, limit=limit, cursor=cursor
        )

    # ------------ Follows ------------

    async def fetch_user_followers(
        self,
        fid: int,
        viewer_fid: Optional[int] = None,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
    ) -> v1.FollowResponse:
        """
        Users following the given fid.

        Example:
            page = await client.fetch_user_followers(3, limit=50)
            next_page = await client.fetch_user_followers(3, limit=50, cursor=page.result.cursor)
        """
        return await self.clients.v1.fetch_user_followers(fid, viewer_fid=viewer_fid, limit=limit, cursor=cursor)

    async def fetch_user_following(
        self,
        fid: int,
        viewer_fid: Optional[int] = None,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
    ) -> v1.FollowResponse:
        """Users the given fid follows."""
        return await self.clients.v1.fetch_user_following(fid, viewer_fid=viewer_fid, limit=limit, cursor=cursor)

    # ============ v2 APIs ============

    # ------------ Signer ------------

    async def create_signer(self) -> v2.Signer:
        return await self.clients.v2.create_signer()

    async def lookup_signer(self, signer_uuid: str) -> Optional[v2.Signer]:
        """Fetch an existing signer, None if not found."""
        return await self.clients.v2.lookup_signer(signer_uuid)

    async def register_signer(self, signer_uuid: str, fid: int, deadline: int, signature: str) -> v2.Signer:
        """Register a signer with an app fid."""
        return await self.clients.v2.register_signer(signer_uuid, fid, deadline, signature)

    # ------------ User ------------

    async def remove_verification(self, signer_uuid: str, address: str) -> v2.OperationResponse:
        """Remove a verified eth address from the signer's user."""
        return await self.clients.v2.remove_verification(signer_uuid, address)

    async def add_verification(
        self, signer_uuid: str, address: str, block_hash: str, eth_signature: str
    ) -> v2.OperationResponse:
        """Add a verified eth address to the signer's user."""
        return await self.clients.v2.add_verification(signer_uuid, address, block_hash, eth_signature)

    async def follow_user(self, signer_uuid: str, target_fids: List[int]) -> v2.BulkFollowResponse:
        return await self.clients.v2.follow_user(signer_uuid, target_fids)

    async def unfollow_user(self, signer_uuid: str, target_fids: List[int]) -> v2.BulkFollowResponse:
        return await self.clients.v2.unfollow_user(signer_uuid, target_fids)

    async def update_user_profile(
        self,
        signer_uuid: str,
        bio: Optional[str] = None,
        pfp_url: Optional[str] = None,
        url: Optional[str] = None,
        username: Optional[str] = None,
        display_name: Optional[str] = None,
    ) -> v2.OperationResponse:
        """Update the signer's user profile; only the given fields are sent."""
        return await self.clients.v2.update_user_profile(
            signer_uuid,
            bio=bio,
            pfp_url=pfp_url,
            url=url,
            username=username,
            display_name=display_name,
        )

    async def fetch_users_in_bulk(
        self, fids: Union[str, List[int]], viewer_fid: Optional[int] = None
    ) -> v2.UserBulkResponse:
        return await self.clients.v2.fetch_users_in_bulk(fids, viewer_fid=viewer_fid)

    async def search_user(self, q: str, viewer_fid: int) -> v2.UserSearchResponse:
        return await self.clients.v2.search_user(q, viewer_fid)

    async def lookup_user_by_custody_address(self, custody_address: str) -> v2.UserResponse:
        return await self.clients.v2.lookup_user_by_custody_address(custody_address)

    # ------------ Cast ------------

    async def lookup_cast_by_hash_or_warpcast_url(
        self, cast_hash_or_url: str, type: Union[v2.CastParamType, str]
    ) -> Optional[v2.Cast]:
        """Look up a cast by hash or Warpcast URL, None if not found."""
        return await self.clients.v2.lookup_cast_by_hash_or_warpcast_url(cast_hash_or_url, type)

    async def fetch_bulk_casts_by_hash(self, casts: Union[str, List[str]]) -> v2.CastsResponse:
        """Fetch several casts; casts is a comma separated string of hashes or a list."""
        return await self.clients.v2.fetch_bulk_casts_by_hash(casts)

    async def publish_cast(
        self,
        signer_uuid: str,
        text: str,
        embeds: Optional[List[Dict[str, Any]]] = None,
        reply_to: Optional[str] = None,
    ) -> v2.PostCastResponseCast:
        """Publish a cast for the signer's user."""
        return await self.clients.v2.publish_cast(signer_uuid, text, embeds=embeds, reply_to=reply_to)

    async def delete_cast(self, signer_uuid: str, cast_or_cast_hash: CastOrHash) -> v2.OperationResponse:
        return await self.clients.v2.delete_cast(signer_uuid, cast_or_cast_hash)

    # ------------ Feed ------------

    async def fetch_feed_page(
        self,
        feed_type: Union[v2.FeedType, str],
        filter_type: Optional[Union[v2.FilterType, str]] = None,
        fid: Optional[int] = None,
        fids: Optional[str] = None,
        parent_url: Optional[str] = None,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
        with_recasts: Optional[bool] = None,
    ) -> v2.FeedResponse:
        """
        One page of a feed.

        Args:
            feed_type: "following" (needs fid) or "filter" (needs filter_type)
            filter_type: "fids", "parent_url", "channel_id" or "global_trending"
            fid: FID whose following feed is built
            fids: Comma separated FIDs for filter_type="fids"
            parent_url: Parent URL for filter_type="parent_url"
            limit: Page size (default 25, max 100)
            cursor: Cursor from a previous page
            with_recasts: Include recasts, true by default on the server
        """
        return await self.clients.v2.fetch_feed_page(
            feed_type,
            filter_type=filter_type,
            fid=fid,
            fids=fids,
            parent_url=parent_url,
            limit=limit,
            cursor=cursor,
            with_recasts=with_recasts,
        )

    # ------------ Reaction ------------

    async def react_to_cast(
        self, signer_uuid: str, reaction: Union[v2.ReactionType, str], cast_or_cast_hash: CastOrHash
    ) -> v2.OperationResponse:
        return await self.clients.v2.react_to_cast(signer_uuid, reaction, cast_or_cast_hash)

    async def remove_reaction_from_cast(
        self, signer_uuid: str, reaction: Union[v2.ReactionType, str], cast_or_cast_hash: CastOrHash
    ) -> v2.OperationResponse:
        return await self.clients.v2.remove_reaction_from_cast(signer_uuid, reaction, cast_or_cast_hash)

    # ------------ Notifications ------------

    async def fetch_all_notifications(
        self, fid: int, cursor: Optional[str] = None, limit: Optional[int] = None
    ) -> v2.NotificationsResponse:
        """Notifications for a user, newest first."""
        return await self.clients.v2.fetch_all_notifications(fid, cursor=cursor, limit=limit)

    # ------------ Follows ------------

    async def fetch_relevant_followers(self, target_fid: int, viewer_fid: int) -> v2.RelevantFollowersResponse:
        """Followers of target_fid that are relevant to viewer_fid."""
        return await self.clients.v2.fetch_relevant_followers(target_fid, viewer_fid)

    # ------------ Recommendation ------------

    async def fetch_relevant_mints(
        self, address: str, contract_address: str, token_id: Optional[str] = None
    ) -> v2.RelevantMintsResponse:
        return await self.clients.v2.fetch_relevant_mints(address, contract_address, token_id=token_id)
