"""GitHub REST client for Octoview.

This module provides:
- Unauthenticated reads of a user's profile, organizations, repositories
  and followers (first page only)
- Not-found detection from the response body, independent of status code
- Conversion of every other failure into TransportError

Requests are never retried, cached or de-duplicated.
"""

import logging
from typing import Any, Optional, TypeVar
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from octoview.config import DEFAULT_API_ROOT, DEFAULT_USER_AGENT
from octoview.errors import NotFoundError, TransportError
from octoview.models import Follower, Organization, RemotePayload, RemoteUser, Repository


logger = logging.getLogger(__name__)

# Body marker GitHub returns for an absent user
NOT_FOUND_MESSAGE = "Not Found"

P = TypeVar("P", bound=RemotePayload)


def is_not_found(payload: Any) -> bool:
    """Check a decoded body for the not-found marker."""
    return isinstance(payload, dict) and payload.get("message") == NOT_FOUND_MESSAGE


class GitHubClient:
    """Async client for the four user endpoints of the GitHub API."""

    def __init__(
        self,
        api_root: str = DEFAULT_API_ROOT,
        user_agent: str = DEFAULT_USER_AGENT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize GitHub client.

        Args:
            api_root: Base URL of the REST API.
            user_agent: Value of the User-Agent header.
            transport: Optional httpx transport, mainly for tests.
        """
        self.api_root = api_root.rstrip("/")
        self.user_agent = user_agent
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            headers = {
                "Accept": "application/vnd.github.v3+json",
                "User-Agent": self.user_agent,
            }
            self._client = httpx.AsyncClient(
                base_url=self.api_root,
                headers=headers,
                timeout=None,
                follow_redirects=True,
                transport=self._transport,
            )
        return self._client

    async def aclose(self) -> None:
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "GitHubClient":
        return self

    async def __aexit__(self, *args) -> None:
        await self.aclose()

    async def get_json(self, path: str) -> Any:
        """GET a path and return the decoded body.

        Raises:
            NotFoundError: If the body carries the not-found marker,
                whatever the status code.
            TransportError: On network errors, non-2xx responses or
                undecodable bodies.
        """
        logger.debug("GET %s%s", self.api_root, path)
        try:
            response = await self.client.get(path)
        except httpx.HTTPError as e:
            raise TransportError(path, str(e) or type(e).__name__) from e

        try:
            payload = response.json()
        except ValueError:
            payload = None
            decoded = False
        else:
            decoded = True

        if is_not_found(payload):
            raise NotFoundError(path)
        if not response.is_success:
            raise TransportError(path, f"HTTP {response.status_code}")
        if not decoded:
            raise TransportError(path, "response body is not JSON")
        return payload

    def _parse(self, path: str, model: type[P], payload: Any) -> P:
        try:
            return model.model_validate(payload)
        except ValidationError as e:
            raise TransportError(path, f"unexpected payload: {e.error_count()} error(s)") from e

    def _parse_list(self, path: str, model: type[P], payload: Any) -> list[P]:
        if not isinstance(payload, list):
            raise TransportError(path, "expected a JSON array")
        return [self._parse(path, model, item) for item in payload]

    @staticmethod
    def user_path(handle: str, resource: str = "") -> str:
        """Build ``/users/{handle}[/{resource}]``."""
        path = f"/users/{quote(handle, safe='')}"
        return f"{path}/{resource}" if resource else path

    async def fetch_profile(self, handle: str) -> RemoteUser:
        """Fetch a user's public profile."""
        path = self.user_path(handle)
        return self._parse(path, RemoteUser, await self.get_json(path))

    async def fetch_organizations(self, handle: str) -> list[Organization]:
        """Fetch the organizations a user belongs to."""
        path = self.user_path(handle, "orgs")
        return self._parse_list(path, Organization, await self.get_json(path))

    async def fetch_repositories(self, handle: str) -> list[Repository]:
        """Fetch a user's public repositories."""
        path = self.user_path(handle, "repos")
        return self._parse_list(path, Repository, await self.get_json(path))

    async def fetch_followers(self, handle: str) -> list[Follower]:
        """Fetch a user's followers."""
        path = self.user_path(handle, "followers")
        return self._parse_list(path, Follower, await self.get_json(path))
