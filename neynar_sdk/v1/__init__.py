from .client import NeynarV1APIClient

__all__ = ["NeynarV1APIClient"]
