"""
Response models for the Neynar v1 API.

v1 payloads use camelCase keys on the wire; the models expose snake_case
attributes and accept either form. Unknown fields are kept.
"""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class V1Model(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
        frozen=True,
    )


class NextCursor(V1Model):
    cursor: Optional[str] = None


class PaginatedResult(V1Model):
    next: Optional[NextCursor] = None

    @property
    def cursor(self) -> Optional[str]:
        """Opaque cursor for the next page, None on the last page."""
        return self.next.cursor if self.next else None


# ------------ User ------------


class Pfp(V1Model):
    url: Optional[str] = None


class Bio(V1Model):
    text: Optional[str] = None
    mentioned_profiles: List[Any] = []


class Profile(V1Model):
    bio: Optional[Bio] = None


class UserViewerContext(V1Model):
    following: Optional[bool] = None
    followed_by: Optional[bool] = None


class User(V1Model):
    fid: int
    custody_address: Optional[str] = None
    username: Optional[str] = None
    display_name: Optional[str] = None
    pfp: Optional[Pfp] = None
    profile: Optional[Profile] = None
    follower_count: Optional[int] = None
    following_count: Optional[int] = None
    verifications: List[str] = []
    active_status: Optional[str] = None
    viewer_context: Optional[UserViewerContext] = None


# ------------ Cast ------------


class CastAuthor(V1Model):
    fid: Optional[int] = None
    username: Optional[str] = None
    display_name: Optional[str] = None
    pfp: Optional[Pfp] = None


class ParentAuthor(V1Model):
    fid: Optional[int] = None


class ReactionCount(V1Model):
    count: int = 0
    fids: List[int] = []


class ReplyCount(V1Model):
    count: int = 0


class CastViewerContext(V1Model):
    liked: Optional[bool] = None
    recasted: Optional[bool] = None


class Cast(V1Model):
    hash: str
    thread_hash: Optional[str] = None
    parent_hash: Optional[str] = None
    parent_url: Optional[str] = None
    parent_author: Optional[ParentAuthor] = None
    author: Optional[CastAuthor] = None
    text: str = ""
    timestamp: Optional[str] = None
    embeds: List[Dict[str, Any]] = []
    reactions: Optional[ReactionCount] = None
    recasts: Optional[ReactionCount] = None
    recasters: List[Any] = []
    replies: Optional[ReplyCount] = None
    viewer_context: Optional[CastViewerContext] = None


class Reaction(V1Model):
    reaction_type: Optional[str] = Field(default=None, alias="type")
    hash: Optional[str] = None
    reactor: Optional[CastAuthor] = None
    timestamp: Optional[str] = None
    cast_hash: Optional[str] = None


class UserCastLike(V1Model):
    reaction: Optional[Reaction] = None
    cast: Optional[Cast] = None


class ReactionNotification(V1Model):
    reaction_type: Optional[str] = None
    cast: Optional[Cast] = None
    reactor: Optional[CastAuthor] = None
    timestamp: Optional[str] = None


# ------------ Envelopes ------------


class UsersResult(PaginatedResult):
    users: List[User] = []


class RecentUsersResponse(V1Model):
    result: UsersResult


class FollowResponse(V1Model):
    result: UsersResult


class CastRecasterResponse(V1Model):
    result: UsersResult


class UserCastLikeResult(PaginatedResult):
    likes: List[UserCastLike] = []


class UserCastLikeResponse(V1Model):
    result: UserCastLikeResult


class UserResult(V1Model):
    user: Optional[User] = None


class UserResponse(V1Model):
    result: UserResult


class CustodyAddressResult(V1Model):
    fid: Optional[int] = None
    custody_address: Optional[str] = None


class CustodyAddressResponse(V1Model):
    result: CustodyAddressResult


class CastResult(V1Model):
    cast: Optional[Cast] = None


class CastResponse(V1Model):
    result: CastResult


class ThreadResult(V1Model):
    casts: Optional[List[Cast]] = None


class AllCastsInThreadResponse(V1Model):
    result: ThreadResult


class CastsResult(PaginatedResult):
    casts: List[Cast] = []


class CastsResponse(V1Model):
    result: CastsResult


class RecentCastsResponse(V1Model):
    result: CastsResult


class VerificationResponseResult(V1Model):
    fid: Optional[int] = None
    username: Optional[str] = None
    display_name: Optional[str] = None
    verifications: List[str] = []


class VerificationResponse(V1Model):
    result: Optional[VerificationResponseResult] = None


class MentionsAndRepliesResult(PaginatedResult):
    notifications: List[Cast] = []


class MentionsAndRepliesResponse(V1Model):
    result: MentionsAndRepliesResult


class ReactionsAndRecastsResult(PaginatedResult):
    notifications: List[ReactionNotification] = []


class ReactionsAndRecastsResponse(V1Model):
    result: ReactionsAndRecastsResult


class CastLikesResult(PaginatedResult):
    likes: List[Reaction] = []


class CastLikesResponse(V1Model):
    result: CastLikesResult


class CastReactionsResult(PaginatedResult):
    casts: List[Reaction] = []


class CastReactionsResponse(V1Model):
    result: CastReactionsResult
