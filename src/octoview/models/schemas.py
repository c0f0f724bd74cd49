"""Pydantic schemas for Octoview.

Remote payloads mirror the GitHub REST responses (only the fields the
browser shows); ProfileIdentity and ErrorState are the immutable values the
controllers hand to the presentation layer.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator


# Shown whenever no avatar can be resolved
PLACEHOLDER_AVATAR_URL = "https://icons.veryicon.com/png/o/internet--web/prejudice/user-128.png"


class RemotePayload(BaseModel):
    """Base for GitHub API payloads; unknown fields are dropped."""

    model_config = ConfigDict(extra="ignore", frozen=True)


class RemoteUser(RemotePayload):
    """Response of ``GET /users/{handle}``."""

    login: str
    name: Optional[str] = None
    avatar_url: Optional[str] = None


class Organization(RemotePayload):
    """An entry of ``GET /users/{handle}/orgs``."""

    login: str


class Repository(RemotePayload):
    """An entry of ``GET /users/{handle}/repos``."""

    name: str
    full_name: str


class Follower(RemotePayload):
    """An entry of ``GET /users/{handle}/followers``."""

    login: str


class ProfileIdentity(BaseModel):
    """The account currently displayed.

    ``display_name`` and ``login_handle`` are both ``None`` only for the
    anonymous identity. ``avatar_url`` is never empty.
    """

    model_config = ConfigDict(frozen=True)

    display_name: Optional[str] = None
    login_handle: Optional[str] = None
    avatar_url: str = PLACEHOLDER_AVATAR_URL

    @field_validator("avatar_url", mode="before")
    @classmethod
    def _placeholder_when_empty(cls, value: Optional[str]) -> str:
        return value or PLACEHOLDER_AVATAR_URL

    @property
    def is_anonymous(self) -> bool:
        return self.display_name is None and self.login_handle is None


class ErrorState(BaseModel):
    """Contents of the single error slot."""

    model_config = ConfigDict(frozen=True)

    message: str = ""
    visible: bool = False


ANONYMOUS = ProfileIdentity()
