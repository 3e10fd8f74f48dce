"""
Async client for the Neynar Farcaster API (v1 and v2).
"""
import logging

from .client import NeynarAPIClient
from .common import resolve_cast_hash
from .config import NeynarSettings, get_settings
from .exceptions import (
    ConfigurationError,
    NeynarAPIError,
    NeynarBaseException,
    RequiredParameterError,
)
from .transport import ApiTransport, RequestDescriptor
from .v1 import NeynarV1APIClient
from .v2 import CastParamType, FeedType, FilterType, NeynarV2APIClient, ReactionType, SignerStatus

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "NeynarAPIClient",
    "NeynarV1APIClient",
    "NeynarV2APIClient",
    "NeynarSettings",
    "get_settings",
    "ApiTransport",
    "RequestDescriptor",
    "resolve_cast_hash",
    "NeynarBaseException",
    "ConfigurationError",
    "RequiredParameterError",
    "NeynarAPIError",
    "CastParamType",
    "FeedType",
    "FilterType",
    "ReactionType",
    "SignerStatus",
]
