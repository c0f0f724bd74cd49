"""Stack navigator over the four profile destinations."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from octoview import messages
from octoview.errors import NavigationError
from octoview.models import ProfileIdentity
from octoview.reporter import ErrorReporter


logger = logging.getLogger(__name__)


class Destination(str, Enum):
    """Screens reachable through the navigator."""

    HOME = "Home"
    ORGS = "Orgs"
    REPOS = "Repos"
    FOLLOWERS = "Followers"

    @classmethod
    def from_name(cls, name: str) -> "Destination":
        """Resolve a destination by name.

        Raises:
            NavigationError: If no destination has that name.
        """
        try:
            return cls(name)
        except ValueError as e:
            raise NavigationError(name) from e


@dataclass(frozen=True)
class Route:
    """A destination and the identity it was opened with."""

    destination: Destination
    identity: ProfileIdentity


class NavAction(str, Enum):
    PUSH = "push"
    BACK = "back"
    RESET = "reset"


@dataclass(frozen=True)
class NavigationChange:
    """Notification sent to listeners after every move."""

    action: NavAction
    route: Route
    depth: int


NavigationListener = Callable[[NavigationChange], None]


class Navigator:
    """History of routes; the last one is on screen.

    Every route keeps the identity it was pushed with, so going back shows
    the previous screen exactly as it was.
    """

    def __init__(self, root: Route, reporter: ErrorReporter):
        self._history: list[Route] = [root]
        self._reporter = reporter
        self._listeners: list[NavigationListener] = []

    @property
    def history(self) -> tuple[Route, ...]:
        return tuple(self._history)

    @property
    def top(self) -> Route:
        return self._history[-1]

    @property
    def depth(self) -> int:
        return len(self._history)

    def subscribe(self, listener: NavigationListener) -> Callable[[], None]:
        """Register a listener; returns a callable that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def push(self, destination: Destination, identity: ProfileIdentity) -> Route:
        route = Route(destination, identity)
        self._history.append(route)
        self._notify(NavAction.PUSH, route)
        return route

    def back(self) -> Optional[Route]:
        """Pop the top route; the root is never popped.

        Returns the route now on top, or None when already at the root.
        """
        if len(self._history) <= 1:
            return None
        self._history.pop()
        self._notify(NavAction.BACK, self.top)
        return self.top

    def reset_to(self, destination: Destination, identity: ProfileIdentity) -> Route:
        """Replace the whole history with a single root route."""
        route = Route(destination, identity)
        self._history = [route]
        self._notify(NavAction.RESET, route)
        return route

    def navigate(self, name: str, identity: ProfileIdentity) -> Optional[Route]:
        """Push a destination given by name.

        Unknown names are reported through the ErrorReporter and leave the
        history untouched.
        """
        try:
            destination = Destination.from_name(name)
        except NavigationError as e:
            logger.warning("%s", e)
            self._reporter.show(messages.REDIRECT_FAILED)
            return None
        return self.push(destination, identity)

    def _notify(self, action: NavAction, route: Route) -> None:
        logger.debug("%s -> %s (depth %d)", action.value, route.destination.value, self.depth)
        change = NavigationChange(action, route, self.depth)
        for listener in list(self._listeners):
            listener(change)
