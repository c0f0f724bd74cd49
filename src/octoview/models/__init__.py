"""Data models for Octoview."""

from .schemas import (
    ANONYMOUS,
    PLACEHOLDER_AVATAR_URL,
    ErrorState,
    Follower,
    Organization,
    ProfileIdentity,
    RemotePayload,
    RemoteUser,
    Repository,
)

__all__ = [
    "ANONYMOUS",
    "PLACEHOLDER_AVATAR_URL",
    "ErrorState",
    "Follower",
    "Organization",
    "ProfileIdentity",
    "RemotePayload",
    "RemoteUser",
    "Repository",
]
