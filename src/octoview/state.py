"""Screen states and the pure transition function.

Controllers never mutate a state; they build an event and replace their
state with ``transition(state, event)``. The presentation layer re-renders
whenever it receives a new state.
"""

from dataclasses import dataclass, replace
from typing import Any, Union

from octoview.models import ProfileIdentity


@dataclass(frozen=True)
class HomeState:
    """Home screen: identity card plus the search input."""

    identity: ProfileIdentity
    search_open: bool = False
    search_text: str = ""


@dataclass(frozen=True)
class ListState:
    """Orgs, Repos and Followers screens."""

    identity: ProfileIdentity
    items: tuple[Any, ...] = ()
    loading: bool = False
    failed: bool = False


ScreenState = Union[HomeState, ListState]


# Events

@dataclass(frozen=True)
class SearchOpened:
    pass


@dataclass(frozen=True)
class SearchClosed:
    pass


@dataclass(frozen=True)
class SearchTextChanged:
    text: str


@dataclass(frozen=True)
class IdentityChanged:
    identity: ProfileIdentity
    close_search: bool = True


@dataclass(frozen=True)
class LoadStarted:
    pass


@dataclass(frozen=True)
class ItemsLoaded:
    items: tuple[Any, ...]


@dataclass(frozen=True)
class LoadFailed:
    pass


Event = Union[
    SearchOpened,
    SearchClosed,
    SearchTextChanged,
    IdentityChanged,
    LoadStarted,
    ItemsLoaded,
    LoadFailed,
]


def transition(state: ScreenState, event: Event) -> ScreenState:
    """Return the state that follows ``state`` after ``event``.

    Events that do not apply to the kind of state given leave it unchanged.
    """
    if isinstance(state, HomeState):
        return _home_transition(state, event)
    return _list_transition(state, event)


def _home_transition(state: HomeState, event: Event) -> HomeState:
    if isinstance(event, SearchOpened):
        return replace(state, search_open=True)
    if isinstance(event, SearchClosed):
        return replace(state, search_open=False, search_text="")
    if isinstance(event, SearchTextChanged):
        return replace(state, search_text=event.text)
    if isinstance(event, IdentityChanged):
        if event.close_search:
            return HomeState(identity=event.identity)
        return replace(state, identity=event.identity)
    return state


def _list_transition(state: ListState, event: Event) -> ListState:
    if isinstance(event, LoadStarted):
        return replace(state, loading=True, failed=False)
    if isinstance(event, ItemsLoaded):
        return replace(state, items=tuple(event.items), loading=False, failed=False)
    if isinstance(event, LoadFailed):
        # no partial results survive a failed fetch
        return replace(state, items=(), loading=False, failed=True)
    return state
