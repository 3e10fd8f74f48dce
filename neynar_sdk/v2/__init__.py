from .client import NeynarV2APIClient
from .models import CastParamType, FeedType, FilterType, ReactionType, SignerStatus

__all__ = [
    "NeynarV2APIClient",
    "CastParamType",
    "FeedType",
    "FilterType",
    "ReactionType",
    "SignerStatus",
]
