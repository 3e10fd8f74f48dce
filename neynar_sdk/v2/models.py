"""
Request enums and response models for the Neynar v2 API.
"""
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class V2Model(BaseModel):
    model_config = ConfigDict(extra="allow", frozen=True, populate_by_name=True)


class ReactionType(str, Enum):
    LIKE = "like"
    RECAST = "recast"


class FeedType(str, Enum):
    FOLLOWING = "following"
    FILTER = "filter"


class FilterType(str, Enum):
    FIDS = "fids"
    PARENT_URL = "parent_url"
    CHANNEL_ID = "channel_id"
    GLOBAL_TRENDING = "global_trending"


class CastParamType(str, Enum):
    URL = "url"
    HASH = "hash"


class SignerStatus(str, Enum):
    GENERATED = "generated"
    PENDING_APPROVAL = "pending_approval"
    APPROVED = "approved"
    REVOKED = "revoked"


class NextCursor(V2Model):
    cursor: Optional[str] = None


class Paginated(V2Model):
    next: Optional[NextCursor] = None

    @property
    def cursor(self) -> Optional[str]:
        """Opaque cursor for the next page, None on the last page."""
        return self.next.cursor if self.next else None


# ------------ Signer ------------


class Signer(V2Model):
    signer_uuid: str
    public_key: Optional[str] = None
    status: Optional[SignerStatus] = None
    signer_approval_url: Optional[str] = None
    fid: Optional[int] = None


# ------------ User ------------


class Bio(V2Model):
    text: Optional[str] = None


class Profile(V2Model):
    bio: Optional[Bio] = None


class VerifiedAddresses(V2Model):
    eth_addresses: List[str] = []
    sol_addresses: List[str] = []


class UserViewerContext(V2Model):
    following: Optional[bool] = None
    followed_by: Optional[bool] = None


class User(V2Model):
    fid: int
    object: Optional[str] = None
    username: Optional[str] = None
    display_name: Optional[str] = None
    custody_address: Optional[str] = None
    pfp_url: Optional[str] = None
    profile: Optional[Profile] = None
    follower_count: Optional[int] = None
    following_count: Optional[int] = None
    verifications: List[str] = []
    verified_addresses: Optional[VerifiedAddresses] = None
    active_status: Optional[str] = None
    viewer_context: Optional[UserViewerContext] = None


# ------------ Cast ------------


class CastParentAuthor(V2Model):
    fid: Optional[int] = None


class ReactionUser(V2Model):
    fid: int
    fname: Optional[str] = None


class CastReactions(V2Model):
    likes: List[ReactionUser] = []
    recasts: List[ReactionUser] = []


class CastReplies(V2Model):
    count: int = 0


class CastViewerContext(V2Model):
    liked: Optional[bool] = None
    recasted: Optional[bool] = None


class Cast(V2Model):
    hash: str
    object: Optional[str] = None
    thread_hash: Optional[str] = None
    parent_hash: Optional[str] = None
    parent_url: Optional[str] = None
    root_parent_url: Optional[str] = None
    parent_author: Optional[CastParentAuthor] = None
    author: Optional[User] = None
    text: str = ""
    timestamp: Optional[str] = None
    embeds: List[Dict[str, Any]] = []
    reactions: Optional[CastReactions] = None
    replies: Optional[CastReplies] = None
    mentioned_profiles: List[User] = []
    viewer_context: Optional[CastViewerContext] = None


class PostCastResponseCastAuthor(V2Model):
    fid: int


class PostCastResponseCast(V2Model):
    hash: str
    author: Optional[PostCastResponseCastAuthor] = None
    text: str = ""


class PostCastResponse(V2Model):
    success: bool = True
    cast: PostCastResponseCast


class CastResponse(V2Model):
    cast: Optional[Cast] = None


class CastsResult(V2Model):
    casts: List[Cast] = []


class CastsResponse(V2Model):
    result: CastsResult


# ------------ Operations ------------


class OperationResponse(V2Model):
    success: bool


class FollowResult(V2Model):
    success: bool
    target_fid: Optional[int] = None
    hash: Optional[str] = None


class BulkFollowResponse(V2Model):
    success: bool
    details: List[FollowResult] = []


# ------------ Feed / notifications / follows ------------


class FeedResponse(Paginated):
    casts: List[Cast] = []


class Notification(V2Model):
    notification_type: Optional[str] = Field(default=None, alias="type")
    object: Optional[str] = None
    most_recent_timestamp: Optional[str] = None
    cast: Optional[Cast] = None
    follows: List[Dict[str, Any]] = []
    reactions: List[Dict[str, Any]] = []


class NotificationsResponse(Paginated):
    notifications: List[Notification] = []


class RelevantFollower(V2Model):
    object: Optional[str] = None
    user: Optional[User] = None


class RelevantFollowersResponse(V2Model):
    top_relevant_followers_hydrated: List[RelevantFollower] = []
    all_relevant_followers_dehydrated: List[RelevantFollower] = []


class UserBulkResponse(V2Model):
    users: List[User] = []


class UserSearchResult(Paginated):
    users: List[User] = []


class UserSearchResponse(V2Model):
    result: UserSearchResult


class UserResponse(V2Model):
    user: Optional[User] = None


# ------------ Recommendation ------------


class RelevantMint(V2Model):
    transaction_hash: Optional[str] = None
    address: Optional[str] = None
    collection: Optional[str] = None
    token_id: Optional[str] = None
    user: Optional[User] = None


class RelevantMintsResponse(V2Model):
    relevant_mints: List[RelevantMint] = []
