"""Python client and session context for the Gift Tracker API."""

from gift_tracker.client.api import (
    ApiError,
    AuthPayload,
    ConnectionFailed,
    GiftTrackerClient,
    ResourceClient,
    UserProfile,
)
from gift_tracker.client.session import AuthResult, NotAuthenticated, SessionContext, SessionState
from gift_tracker.client.storage import FileTokenStore, MemoryTokenStore, TokenStore

__all__ = [
    "ApiError",
    "AuthPayload",
    "AuthResult",
    "ConnectionFailed",
    "FileTokenStore",
    "GiftTrackerClient",
    "MemoryTokenStore",
    "NotAuthenticated",
    "ResourceClient",
    "SessionContext",
    "SessionState",
    "TokenStore",
    "UserProfile",
]
