"""Screen controllers.

One controller per screen instance. A controller owns the screen's state,
talks to the GitHub client, asks the session for new identities and the
navigator for moves, and turns every failure into a message on the
ErrorReporter. Nothing raised by a collaborator escapes a controller.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Optional, Sequence, TypeVar

from octoview import messages
from octoview.config import OctoviewConfig
from octoview.errors import LinkOpenError, NotFoundError, TransportError
from octoview.links import LinkOpener, WebBrowserLinkOpener, open_link
from octoview.models import Follower, Organization, ProfileIdentity, Repository
from octoview.navigation import Destination, Navigator, Route
from octoview.remote import GitHubClient
from octoview.reporter import ErrorReporter
from octoview.session import ProfileSession
from octoview.state import (
    Event,
    HomeState,
    IdentityChanged,
    ItemsLoaded,
    ListState,
    LoadFailed,
    LoadStarted,
    SearchClosed,
    SearchOpened,
    SearchTextChanged,
    transition,
)


logger = logging.getLogger(__name__)

S = TypeVar("S", HomeState, ListState)
T = TypeVar("T")


@dataclass
class BrowserServices:
    """Collaborators handed to every controller."""

    client: GitHubClient
    session: ProfileSession
    navigator: Navigator
    reporter: ErrorReporter
    opener: LinkOpener = field(default_factory=WebBrowserLinkOpener)
    config: OctoviewConfig = field(default_factory=OctoviewConfig)


class ScreenController(Generic[S]):
    """State holder shared by all controllers.

    After ``detach`` the screen is gone: results of fetches still in flight
    are dropped without touching state, the reporter or the navigator.
    """

    def __init__(self, route: Route, services: BrowserServices, state: S):
        self.route = route
        self.services = services
        self._state = state
        self._listeners: list[Callable[[S], None]] = []
        self._attached = True

    @property
    def state(self) -> S:
        return self._state

    @property
    def identity(self) -> ProfileIdentity:
        return self._state.identity

    @property
    def attached(self) -> bool:
        return self._attached

    def subscribe(self, listener: Callable[[S], None]) -> Callable[[], None]:
        """Register a listener; returns a callable that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def detach(self) -> None:
        self._attached = False
        self._listeners.clear()

    def _dispatch(self, event: Event) -> None:
        self._state = transition(self._state, event)
        for listener in list(self._listeners):
            listener(self._state)

    def _report(self, message: str, error: Optional[Exception] = None) -> None:
        if error is not None:
            logger.warning("%s: %s", type(self).__name__, error)
        self.services.reporter.show(message)

    def _stale(self, what: str) -> bool:
        if not self._attached:
            logger.debug("Dropping %s result for a detached %s", what, type(self).__name__)
        return not self._attached


class HomeController(ScreenController[HomeState]):
    """Identity card, search and the menu of the other screens."""

    def __init__(self, route: Route, services: BrowserServices):
        super().__init__(route, services, HomeState(identity=route.identity))

    def open_search(self) -> None:
        self._dispatch(SearchOpened())

    def close_search(self) -> None:
        self._dispatch(SearchClosed())

    def set_search_text(self, text: str) -> None:
        self._dispatch(SearchTextChanged(text))

    async def submit_search(self, handle: Optional[str] = None) -> Optional[ProfileIdentity]:
        """Look up ``handle`` (or the typed text) and show that account.

        Returns the new identity, or None when the search failed.
        """
        handle = (handle if handle is not None else self.state.search_text).strip()
        if not handle:
            self._search_failed(messages.USER_NOT_FOUND, close_search=False)
            return None

        try:
            user = await self.services.client.fetch_profile(handle)
        except NotFoundError as e:
            if not self._stale("search"):
                self._search_failed(messages.USER_NOT_FOUND, close_search=False, error=e)
            return None
        except TransportError as e:
            if not self._stale("search"):
                self._search_failed(messages.SEARCH_FAILED, close_search=True, error=e)
            return None

        if self._stale("search"):
            return None
        identity = self.services.session.adopt_from(user)
        self._dispatch(IdentityChanged(identity))
        self.services.navigator.reset_to(Destination.HOME, identity)
        return identity

    def _search_failed(
        self,
        message: str,
        close_search: bool,
        error: Optional[Exception] = None,
    ) -> None:
        identity = self.services.session.reset()
        self._dispatch(IdentityChanged(identity, close_search=close_search))
        self._report(message, error)

    def reset_user(self) -> None:
        """Forget the current account and start over from an anonymous Home."""
        identity = self.services.session.reset()
        self._dispatch(IdentityChanged(identity))
        self.services.navigator.reset_to(Destination.HOME, identity)

    def open_profile_link(self) -> None:
        handle = self.identity.login_handle
        if not handle:
            self._report(messages.GENERIC_ERROR)
            return
        try:
            open_link(self.services.opener, self.services.config.profile_url(handle))
        except LinkOpenError as e:
            self._report(messages.GENERIC_ERROR, e)

    def navigate_to(self, name: str) -> Optional[Route]:
        return self.services.navigator.navigate(name, self.identity)


class ListController(ScreenController[ListState], Generic[T], ABC):
    """Screen showing one list fetched for the route's identity."""

    fetch_error_message = messages.GENERIC_ERROR

    def __init__(self, route: Route, services: BrowserServices):
        super().__init__(route, services, ListState(identity=route.identity))

    @property
    def items(self) -> tuple[T, ...]:
        return self.state.items

    @abstractmethod
    async def fetch(self, handle: str) -> Sequence[T]:
        """Fetch the rows for ``handle``."""
        pass

    async def load(self) -> None:
        """Fetch the list; on failure it stays empty."""
        handle = self.identity.login_handle
        if not handle:
            self._dispatch(LoadFailed())
            self._report(self.fetch_error_message)
            return

        self._dispatch(LoadStarted())
        try:
            items = await self.fetch(handle)
        except (NotFoundError, TransportError) as e:
            if not self._stale("list"):
                self._dispatch(LoadFailed())
                self._report(self.fetch_error_message, e)
            return

        if not self._stale("list"):
            self._dispatch(ItemsLoaded(tuple(items)))


class LinkListController(ListController[T]):
    """List whose rows open a github.com page."""

    link_error_message = messages.GENERIC_ERROR

    @abstractmethod
    def link_path(self, item: T) -> str:
        """Path of ``item`` under the github.com web root."""
        pass

    def select(self, item: T) -> None:
        url = self.services.config.profile_url(self.link_path(item))
        try:
            open_link(self.services.opener, url)
        except LinkOpenError as e:
            self._report(self.link_error_message, e)


class OrgsController(LinkListController[Organization]):
    fetch_error_message = messages.ORGS_FETCH_FAILED
    link_error_message = messages.ORGS_LINK_FAILED

    async def fetch(self, handle: str) -> Sequence[Organization]:
        return await self.services.client.fetch_organizations(handle)

    def link_path(self, item: Organization) -> str:
        return item.login


class ReposController(LinkListController[Repository]):
    fetch_error_message = messages.REPOS_FETCH_FAILED
    link_error_message = messages.REPOS_LINK_FAILED

    async def fetch(self, handle: str) -> Sequence[Repository]:
        return await self.services.client.fetch_repositories(handle)

    def link_path(self, item: Repository) -> str:
        return item.full_name


class FollowersController(ListController[Follower]):
    """Followers list; selecting one pivots the whole browser to them."""

    fetch_error_message = messages.FOLLOWERS_FAILED

    async def fetch(self, handle: str) -> Sequence[Follower]:
        return await self.services.client.fetch_followers(handle)

    async def select(self, follower: Follower) -> Optional[ProfileIdentity]:
        """Pivot to ``follower``: new identity, history reset to Home."""
        try:
            user = await self.services.client.fetch_profile(follower.login)
        except (NotFoundError, TransportError) as e:
            if not self._stale("pivot"):
                self._report(messages.FOLLOWERS_FAILED, e)
            return None

        if self._stale("pivot"):
            return None
        identity = self.services.session.adopt_from(user)
        self.services.navigator.reset_to(Destination.HOME, identity)
        return identity


CONTROLLERS: dict[Destination, type[ScreenController[Any]]] = {
    Destination.HOME: HomeController,
    Destination.ORGS: OrgsController,
    Destination.REPOS: ReposController,
    Destination.FOLLOWERS: FollowersController,
}


def build_controller(route: Route, services: BrowserServices) -> ScreenController[Any]:
    """Create the controller for a route's destination."""
    return CONTROLLERS[route.destination](route, services)
