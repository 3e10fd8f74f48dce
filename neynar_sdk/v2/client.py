"""
Neynar v2 API client

Wraps the v2 Farcaster and recommendation endpoint groups, parses responses
into models and maps HTTP 404 on single-resource lookups to None.
"""
import logging
from types import SimpleNamespace
from typing import Any, Dict, List, Optional, Union

import httpx

from ..common import BaseVersionedClient, CastOrHash, join_ids, resolve_cast_hash
from ..exceptions import NeynarAPIError
from .apis import CastApi, FeedApi, FollowsApi, NFTApi, NotificationsApi, ReactionApi, SignerApi, UserApi
from .models import (
    BulkFollowResponse,
    Cast,
    CastParamType,
    CastResponse,
    CastsResponse,
    FeedResponse,
    FeedType,
    FilterType,
    NotificationsResponse,
    OperationResponse,
    PostCastResponse,
    PostCastResponseCast,
    ReactionType,
    RelevantFollowersResponse,
    RelevantMintsResponse,
    Signer,
    UserBulkResponse,
    UserResponse,
    UserSearchResponse,
)


class NeynarV2APIClient(BaseVersionedClient):
    """
    Client for https://api.neynar.com/v2.
    """

    API_VERSION = "v2"

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
            signer=SignerApi(self.transport),
            user=UserApi(self.transport),
            cast=CastApi(self.transport),
            reaction=ReactionApi(self.transport),
            feed=FeedApi(self.transport),
            notifications=NotificationsApi(self.transport),
            follows=FollowsApi(self.transport),
            nft=NFTApi(self.transport),
        )

    # ------------ Signer ------------

    async def create_signer(self) -> Signer:
        data = await self.apis.signer.create_signer()
        return Signer.model_validate(data)

    async def lookup_signer(self, signer_uuid: str) -> Optional[Signer]:
        """Fetch an existing signer, or None if the API reports it as not found."""
        try:
            data = await self.apis.signer.signer(signer_uuid)
        except NeynarAPIError as e:
            if e.is_not_found:
                self.logger.debug(f"Signer {signer_uuid} not found")
                return None
            raise
        return Signer.model_validate(data)

    async def register_signer(self, signer_uuid: str, fid: int, deadline: int, signature: str) -> Signer:
        """
        Register a signer with an app fid.

        Args:
            signer_uuid: UUID returned by create_signer
            fid: FID of the app registering the key
            deadline: Unix timestamp the signature expires at
            signature: Signed key request signature
        """
        data = await self.apis.signer.register_signed_key(signer_uuid, fid, deadline, signature)
        return Signer.model_validate(data)

    # ------------ User ------------

    async def remove_verification(self, signer_uuid: str, address: str) -> OperationResponse:
        data = await self.apis.user.remove_verification(signer_uuid, address)
        return OperationResponse.model_validate(data)

    async def add_verification(
        self, signer_uuid: str, address: str, block_hash: str, eth_signature: str
    ) -> OperationResponse:
        data = await self.apis.user.add_verification(signer_uuid, address, block_hash, eth_signature)
        return OperationResponse.model_validate(data)

    async def follow_user(self, signer_uuid: str, target_fids: List[int]) -> BulkFollowResponse:
        data = await self.apis.user.follow(signer_uuid, target_fids)
        return BulkFollowResponse.model_validate(data)

    async def unfollow_user(self, signer_uuid: str, target_fids: List[int]) -> BulkFollowResponse:
        data = await self.apis.user.unfollow(signer_uuid, target_fids)
        return BulkFollowResponse.model_validate(data)

    async def update_user_profile(
        self,
        signer_uuid: str,
        bio: Optional[str] = None,
        pfp_url: Optional[str] = None,
        url: Optional[str] = None,
        username: Optional[str] = None,
        display_name: Optional[str] = None,
    ) -> OperationResponse:
        data = await self.apis.user.update_user(
            signer_uuid,
            bio=bio,
            pfp_url=pfp_url,
            url=url,
            username=username,
            display_name=display_name,
        )
        return OperationResponse.model_validate(data)

    async def fetch_users_in_bulk(self, fids: Union[str, List[int]], viewer_fid: Optional[int] = None) -> UserBulkResponse:
        """Fetch several users at once; fids is a comma separated string or a list."""
        data = await self.apis.user.user_bulk(join_ids(fids), viewer_fid=viewer_fid)
        return UserBulkResponse.model_validate(data)

    async def search_user(self, q: str, viewer_fid: int) -> UserSearchResponse:
        data = await self.apis.user.user_search(q, viewer_fid)
        return UserSearchResponse.model_validate(data)

    async def lookup_user_by_custody_address(self, custody_address: str) -> UserResponse:
        data = await self.apis.user.lookup_user_by_custody_address(custody_address)
        return UserResponse.model_validate(data)

    # ------------ Cast ------------

    async def lookup_cast_by_hash_or_warpcast_url(
        self, cast_hash_or_url: str, type: Union[CastParamType, str]
    ) -> Optional[Cast]:
        """Look up a cast by hash or Warpcast URL, or None if it does not exist."""
        try:
            data = await self.apis.cast.cast(cast_hash_or_url, type)
        except NeynarAPIError as e:
            if e.is_not_found:
                self.logger.debug(f"Cast {cast_hash_or_url} not found")
                return None
            raise
        return CastResponse.model_validate(data).cast

    async def fetch_bulk_casts_by_hash(self, casts: Union[str, List[str]]) -> CastsResponse:
        """Fetch several casts at once; casts is a comma separated string of hashes or a list."""
        data = await self.apis.cast.casts(join_ids(casts))
        return CastsResponse.model_validate(data)

    async def publish_cast(
        self,
        signer_uuid: str,
        text: str,
        embeds: Optional[List[Dict[str, Any]]] = None,
        reply_to: Optional[str] = None,
    ) -> PostCastResponseCast:
        """
        Publish a cast on behalf of the signer's fid.

        Args:
            signer_uuid: Approved signer authorizing the write
            text: Cast text
            embeds: Optional embeds, e.g. [{"url": ...}] or [{"cast_id": {"hash": ..., "fid": ...}}]
            reply_to: Parent cast hash or parent URL when replying
        """
        data = await self.apis.cast.post_cast(signer_uuid, text, embeds=embeds, parent=reply_to)
        return PostCastResponse.model_validate(data).cast

    async def delete_cast(self, signer_uuid: str, cast_or_cast_hash: CastOrHash) -> OperationResponse:
        data = await self.apis.cast.delete_cast(signer_uuid, resolve_cast_hash(cast_or_cast_hash))
        return OperationResponse.model_validate(data)

    # ------------ Feed ------------

    async def fetch_feed_page(
        self,
        feed_type: Union[FeedType, str],
        filter_type: Optional[Union[FilterType, str]] = None,
        fid: Optional[int] = None,
        fids: Optional[str] = None,
        parent_url: Optional[str] = None,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
        with_recasts: Optional[bool] = None,
    ) -> FeedResponse:
        """Get one feed page; pass the returned cursor back to get the next one."""
        data = await self.apis.feed.feed(
            feed_type,
            filter_type=filter_type,
            fid=fid,
            fids=fids,
            parent_url=parent_url,
            with_recasts=with_recasts,
            limit=limit,
            cursor=cursor,
        )
        return FeedResponse.model_validate(data)

    # ------------ Reaction ------------

    async def react_to_cast(
        self, signer_uuid: str, reaction: Union[ReactionType, str], cast_or_cast_hash: CastOrHash
    ) -> OperationResponse:
        data = await self.apis.reaction.post_reaction(signer_uuid, reaction, resolve_cast_hash(cast_or_cast_hash))
        return OperationResponse.model_validate(data)

    async def remove_reaction_from_cast(
        self, signer_uuid: str, reaction: Union[ReactionType, str], cast_or_cast_hash: CastOrHash
    ) -> OperationResponse:
        data = await self.apis.reaction.delete_reaction(signer_uuid, reaction, resolve_cast_hash(cast_or_cast_hash))
        return OperationResponse.model_validate(data)

    # ------------ Notifications ------------

    async def fetch_all_notifications(
        self, fid: int, cursor: Optional[str] = None, limit: Optional[int] = None
    ) -> NotificationsResponse:
        data = await self.apis.notifications.notifications(fid, limit=limit, cursor=cursor)
        return NotificationsResponse.model_validate(data)

    # ------------ Follows ------------

    async def fetch_relevant_followers(self, target_fid: int, viewer_fid: int) -> RelevantFollowersResponse:
        data = await self.apis.follows.relevant_followers(target_fid, viewer_fid)
        return RelevantFollowersResponse.model_validate(data)

    # ------------ Recommendation ------------

    async def fetch_relevant_mints(
        self, address: str, contract_address: str, token_id: Optional[str] = None
    ) -> RelevantMintsResponse:
        """
        Mint actions relevant to a contract address (and token id for ERC1155s)
        for a user's ethereum address.
        """
        data = await self.apis.nft.fetch_relevant_mints(address, contract_address, token_id=token_id)
        return RelevantMintsResponse.model_validate(data)
