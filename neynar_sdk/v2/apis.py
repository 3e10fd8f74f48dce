"""
Endpoint groups for the Neynar v2 API.

Each group builds RequestDescriptors for one family of endpoints and issues
them through the shared transport, returning the decoded JSON unchanged.
"""
from typing import Any, Dict, List, Optional, Union

from ..common import BaseApi
from .models import CastParamType, FeedType, FilterType, ReactionType


class SignerApi(BaseApi):
    async def create_signer(self) -> Dict[str, Any]:
        return await self._send(self._descriptor("create_signer", "POST", "/farcaster/signer"))

    async def signer(self, signer_uuid: str) -> Dict[str, Any]:
        descriptor = self._descriptor(
            "signer",
            "GET",
            "/farcaster/signer",
            query={"signer_uuid": signer_uuid},
            required={"signer_uuid": signer_uuid},
        )
        return await self._send(descriptor)

    async def register_signed_key(
        self, signer_uuid: str, app_fid: int, deadline: int, signature: str
    ) -> Dict[str, Any]:
        body = {
            "signer_uuid": signer_uuid,
            "app_fid": app_fid,
            "deadline": deadline,
            "signature": signature,
        }
        descriptor = self._descriptor(
            "register_signed_key", "POST", "/farcaster/signer/signed_key", body=body, required=body
        )
        return await self._send(descriptor)


class UserApi(BaseApi):
    async def remove_verification(self, signer_uuid: str, address: str) -> Dict[str, Any]:
        body = {"signer_uuid": signer_uuid, "address": address}
        descriptor = self._descriptor(
            "remove_verification", "DELETE", "/farcaster/user/verification", body=body, required=body
        )
        return await self._send(descriptor)

    async def add_verification(
        self, signer_uuid: str, address: str, block_hash: str, eth_signature: str
    ) -> Dict[str, Any]:
        body = {
            "signer_uuid": signer_uuid,
            "address": address,
            "block_hash": block_hash,
            "eth_signature": eth_signature,
        }
        descriptor = self._descriptor(
            "add_verification", "POST", "/farcaster/user/verification", body=body, required=body
        )
        return await self._send(descriptor)

    async def follow(self, signer_uuid: str, target_fids: List[int]) -> Dict[str, Any]:
        body = {"signer_uuid": signer_uuid, "target_fids": target_fids}
        descriptor = self._descriptor("follow", "POST", "/farcaster/user/follow", body=body, required=body)
        return await self._send(descriptor)

    async def unfollow(self, signer_uuid: str, target_fids: List[int]) -> Dict[str, Any]:
        body = {"signer_uuid": signer_uuid, "target_fids": target_fids}
        descriptor = self._descriptor("unfollow", "DELETE", "/farcaster/user/follow", body=body, required=body)
        return await self._send(descriptor)

    async def update_user(
        self,
        signer_uuid: str,
        bio: Optional[str] = None,
        pfp_url: Optional[str] = None,
        url: Optional[str] = None,
        username: Optional[str] = None,
        display_name: Optional[str] = None,
    ) -> Dict[str, Any]:
        descriptor = self._descriptor(
            "update_user",
            "PATCH",
            "/farcaster/user",
            body={
                "signer_uuid": signer_uuid,
                "bio": bio,
                "pfp_url": pfp_url,
                "url": url,
                "username": username,
                "display_name": display_name,
            },
            required={"signer_uuid": signer_uuid},
        )
        return await self._send(descriptor)

    async def user_bulk(self, fids: str, viewer_fid: Optional[int] = None) -> Dict[str, Any]:
        descriptor = self._descriptor(
            "user_bulk",
            "GET",
            "/farcaster/user/bulk",
            query={"fids": fids, "viewer_fid": viewer_fid},
            required={"fids": fids},
        )
        return await self._send(descriptor)

    async def user_search(self, q: str, viewer_fid: int) -> Dict[str, Any]:
        query = {"q": q, "viewer_fid": viewer_fid}
        descriptor = self._descriptor("user_search", "GET", "/farcaster/user/search", query=query, required=query)
        return await self._send(descriptor)

    async def lookup_user_by_custody_address(self, custody_address: str) -> Dict[str, Any]:
        query = {"custody_address": custody_address}
        descriptor = self._descriptor(
            "lookup_user_by_custody_address",
            "GET",
            "/farcaster/user/custody-address",
            query=query,
            required=query,
        )
        return await self._send(descriptor)


class CastApi(BaseApi):
    async def cast(self, identifier: str, type: Union[CastParamType, str]) -> Dict[str, Any]:
        query = {"identifier": identifier, "type": type}
        descriptor = self._descriptor("cast", "GET", "/farcaster/cast", query=query, required=query)
        return await self._send(descriptor)

    async def casts(self, casts: str) -> Dict[str, Any]:
        query = {"casts": casts}
        descriptor = self._descriptor("casts", "GET", "/farcaster/casts", query=query, required=query)
        return await self._send(descriptor)

    async def post_cast(
        self,
        signer_uuid: str,
        text: str,
        embeds: Optional[List[Dict[str, Any]]] = None,
        parent: Optional[str] = None,
    ) -> Dict[str, Any]:
        descriptor = self._descriptor(
            "post_cast",
            "POST",
            "/farcaster/cast",
            body={"signer_uuid": signer_uuid, "text": text, "embeds": embeds, "parent": parent},
            required={"signer_uuid": signer_uuid, "text": text},
        )
        return await self._send(descriptor)

    async def delete_cast(self, signer_uuid: str, target_hash: str) -> Dict[str, Any]:
        body = {"signer_uuid": signer_uuid, "target_hash": target_hash}
        descriptor = self._descriptor("delete_cast", "DELETE", "/farcaster/cast", body=body, required=body)
        return await self._send(descriptor)


class ReactionApi(BaseApi):
    async def post_reaction(
        self, signer_uuid: str, reaction_type: Union[ReactionType, str], target: str
    ) -> Dict[str, Any]:
        body = {"signer_uuid": signer_uuid, "reaction_type": reaction_type, "target": target}
        descriptor = self._descriptor("post_reaction", "POST", "/farcaster/reaction", body=body, required=body)
        return await self._send(descriptor)

    async def delete_reaction(
        self, signer_uuid: str, reaction_type: Union[ReactionType, str], target: str
    ) -> Dict[str, Any]:
        body = {"signer_uuid": signer_uuid, "reaction_type": reaction_type, "target": target}
        descriptor = self._descriptor("delete_reaction", "DELETE", "/farcaster/reaction", body=body, required=body)
        return await self._send(descriptor)


class FeedApi(BaseApi):
    async def feed(
        self,
        feed_type: Union[FeedType, str],
        filter_type: Optional[Union[FilterType, str]] = None,
        fid: Optional[int] = None,
        fids: Optional[str] = None,
        parent_url: Optional[str] = None,
        with_recasts: Optional[bool] = None,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
    ) -> Dict[str, Any]:
        descriptor = self._descriptor(
            "feed",
            "GET",
            "/farcaster/feed",
            query={
                "feed_type": feed_type,
                "filter_type": filter_type,
                "fid": fid,
                "fids": fids,
                "parent_url": parent_url,
                "with_recasts": with_recasts,
                "limit": limit,
                "cursor": cursor,
            },
            required={"feed_type": feed_type},
        )
        return await self._send(descriptor)


class NotificationsApi(BaseApi):
    async def notifications(
        self, fid: int, limit: Optional[int] = None, cursor: Optional[str] = None
    ) -> Dict[str, Any]:
        descriptor = self._descriptor(
            "notifications",
            "GET",
            "/farcaster/notifications",
            query={"fid": fid, "limit": limit, "cursor": cursor},
            required={"fid": fid},
        )
        return await self._send(descriptor)


class FollowsApi(BaseApi):
    async def relevant_followers(self, target_fid: int, viewer_fid: int) -> Dict[str, Any]:
        query = {"target_fid": target_fid, "viewer_fid": viewer_fid}
        descriptor = self._descriptor(
            "relevant_followers", "GET", "/farcaster/followers/relevant", query=query, required=query
        )
        return await self._send(descriptor)


class NFTApi(BaseApi):
    async def fetch_relevant_mints(
        self, address: str, contract_address: str, token_id: Optional[str] = None
    ) -> Dict[str, Any]:
        descriptor = self._descriptor(
            "fetch_relevant_mints",
            "GET",
            "/nft/relevant_mints",
            query={"address": address, "contract_address": contract_address, "token_id": token_id},
            required={"address": address, "contract_address": contract_address},
        )
        return await self._send(descriptor)
