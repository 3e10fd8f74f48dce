"""
Endpoint groups for the Neynar v1 API.

Each group builds RequestDescriptors for one family of endpoints and issues
them through the shared transport, returning the decoded JSON unchanged.
v1 query parameters keep the service's own names (viewerFid, castHash, ...).
"""
from typing import Any, Dict, Optional

from ..common import BaseApi


class UserApi(BaseApi):
    async def recent_users(
        self,
        viewer_fid: Optional[int] = None,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
    ) -> Dict[str, Any]:
        descriptor = self._descriptor(
            "recent_users",
            "GET",
            "/farcaster/recent-users",
            query={"viewerFid": viewer_fid, "limit": limit, "cursor": cursor},
        )
        return await self._send(descriptor)

    async def user_cast_likes(
        self,
        fid: int,
        viewer_fid: Optional[int] = None,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
    ) -> Dict[str, Any]:
        descriptor = self._descriptor(
            "user_cast_likes",
            "GET",
            "/farcaster/user-cast-likes",
            query={"fid": fid, "viewerFid": viewer_fid, "limit": limit, "cursor": cursor},
            required={"fid": fid},
        )
        return await self._send(descriptor)

    async def user(self, fid: int, viewer_fid: Optional[int] = None) -> Dict[str, Any]:
        descriptor = self._descriptor(
            "user",
            "GET",
            "/farcaster/user",
            query={"fid": fid, "viewerFid": viewer_fid},
            required={"fid": fid},
        )
        return await self._send(descriptor)

    async def user_by_username(self, username: str, viewer_fid: Optional[int] = None) -> Dict[str, Any]:
        descriptor = self._descriptor(
            "user_by_username",
            "GET",
            "/farcaster/user-by-username",
            query={"username": username, "viewerFid": viewer_fid},
            required={"username": username},
        )
        return await self._send(descriptor)

    async def custody_address(self, fid: int) -> Dict[str, Any]:
        descriptor = self._descriptor(
            "custody_address",
            "GET",
            "/farcaster/custody-address",
            query={"fid": fid},
            required={"fid": fid},
        )
        return await self._send(descriptor)


class CastApi(BaseApi):
    async def cast(self, hash: str, viewer_fid: Optional[int] = None) -> Dict[str, Any]:
        descriptor = self._descriptor(
            "cast",
            "GET",
            "/farcaster/cast",
            query={"hash": hash, "viewerFid": viewer_fid},
            required={"hash": hash},
        )
        return await self._send(descriptor)

    async def all_casts_in_thread(self, thread_hash: str, viewer_fid: Optional[int] = None) -> Dict[str, Any]:
        descriptor = self._descriptor(
            "all_casts_in_thread",
            "GET",
            "/farcaster/all-casts-in-thread",
            query={"threadHash": thread_hash, "viewerFid": viewer_fid},
            required={"threadHash": thread_hash},
        )
        return await self._send(descriptor)

    async def casts(
        self,
        fid: int,
        parent_url: Optional[str] = None,
        viewer_fid: Optional[int] = None,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
    ) -> Dict[str, Any]:
        descriptor = self._descriptor(
            "casts",
            "GET",
            "/farcaster/casts",
            query={
                "fid": fid,
                "parent_url": parent_url,
                "viewerFid": viewer_fid,
                "limit": limit,
                "cursor": cursor,
            },
            required={"fid": fid},
        )
        return await self._send(descriptor)

    async def recent_casts(
        self,
        viewer_fid: Optional[int] = None,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
    ) -> Dict[str, Any]:
        descriptor = self._descriptor(
            "recent_casts",
            "GET",
            "/farcaster/recent-casts",
            query={"viewerFid": viewer_fid, "limit": limit, "cursor": cursor},
        )
        return await self._send(descriptor)


class VerificationApi(BaseApi):
    async def verifications(self, fid: int) -> Dict[str, Any]:
        descriptor = self._descriptor(
            "verifications",
            "GET",
            "/farcaster/verifications",
            query={"fid": fid},
            required={"fid": fid},
        )
        return await self._send(descriptor)

    async def user_by_verification(self, address: str) -> Dict[str, Any]:
        descriptor = self._descriptor(
            "user_by_verification",
            "GET",
            "/farcaster/user-by-verification",
            query={"address": address},
            required={"address": address},
        )
        return await self._send(descriptor)


class NotificationsApi(BaseApi):
    async def mentions_and_replies(
        self,
        fid: int,
        viewer_fid: Optional[int] = None,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
    ) -> Dict[str, Any]:
        descriptor = self._descriptor(
            "mentions_and_replies",
            "GET",
            "/farcaster/mentions-and-replies",
            query={"fid": fid, "viewerFid": viewer_fid, "limit": limit, "cursor": cursor},
            required={"fid": fid},
        )
        return await self._send(descriptor)

    async def reactions_and_recasts(
        self,
        fid: int,
        viewer_fid: Optional[int] = None,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
    ) -> Dict[str, Any]:
        descriptor = self._descriptor(
            "reactions_and_recasts",
            "GET",
            "/farcaster/reactions-and-recasts",
            query={"fid": fid, "viewerFid": viewer_fid, "limit": limit, "cursor": cursor},
            required={"fid": fid},
        )
        return await self._send(descriptor)


class ReactionsApi(BaseApi):
    async def _cast_reaction_list(
        self,
        operation: str,
        path: str,
        cast_hash: str,
        viewer_fid: Optional[int],
        limit: Optional[int],
        cursor: Optional[str],
    ) -> Dict[str, Any]:
        descriptor = self._descriptor(
            operation,
            "GET",
            path,
            query={"castHash": cast_hash, "viewerFid": viewer_fid, "limit": limit, "cursor": cursor},
            required={"castHash": cast_hash},
        )
        return await self._send(descriptor)

    async def cast_likes(
        self,
        cast_hash: str,
        viewer_fid: Optional[int] = None,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
    ) -> Dict[str, Any]:
        return await self._cast_reaction_list(
            "cast_likes", "/farcaster/cast-likes", cast_hash, viewer_fid, limit, cursor
        )

    async def cast_reactions(
        self,
        cast_hash: str,
        viewer_fid: Optional[int] = None,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
    ) -> Dict[str, Any]:
        return await self._cast_reaction_list(
            "cast_reactions", "/farcaster/cast-reactions", cast_hash, viewer_fid, limit, cursor
        )

    async def cast_recasters(
        self,
        cast_hash: str,
        viewer_fid: Optional[int] = None,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
    ) -> Dict[str, Any]:
        return await self._cast_reaction_list(
            "cast_recasters", "/farcaster/cast-recasters", cast_hash, viewer_fid, limit, cursor
        )


class FollowsApi(BaseApi):
    async def followers(
        self,
        fid: int,
        viewer_fid: Optional[int] = None,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
    ) -> Dict[str, Any]:
        descriptor = self._descriptor(
            "followers",
            "GET",
            "/farcaster/followers",
            query={"fid": fid, "viewerFid": viewer_fid, "limit": limit, "cursor": cursor},
            required={"fid": fid},
        )
        return await self._send(descriptor)

    async def following(
        self,
        fid: int,
        viewer_fid: Optional[int] = None,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
    ) -> Dict[str, Any]:
        descriptor = self._descriptor(
            "following",
            "GET",
            "/farcaster/following",
            query={"fid": fid, "viewerFid": viewer_fid, "limit": limit, "cursor": cursor},
            required={"fid": fid},
        )
        return await self._send(descriptor)
