"""Main Octoview TUI application.

Screens only render controller state and forward user input. The screen
stack mirrors the Navigator: the app listens to navigation changes and
pushes, pops or rebuilds screens accordingly.
"""

import logging
from typing import Any, Callable, Optional

from rich.markup import escape
from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import Screen
from textual.widgets import Button, Footer, Header, Input, Label, ListItem, ListView, Static

from octoview.config import OctoviewConfig
from octoview.controllers import (
    BrowserServices,
    FollowersController,
    HomeController,
    LinkListController,
    ListController,
    ScreenController,
    build_controller,
)
from octoview.links import LinkOpener, WebBrowserLinkOpener
from octoview.models import ErrorState, Follower, Organization, ProfileIdentity, Repository
from octoview.navigation import Destination, NavAction, NavigationChange, Navigator, Route
from octoview.remote import GitHubClient
from octoview.reporter import ErrorReporter
from octoview.session import ProfileSession
from octoview.state import HomeState, ListState


logger = logging.getLogger(__name__)

# (destination name, label, description) for the Home menu; None opens github.com
HOME_MENU = [
    (None, "Bio", "Um pouco sobre o usuário"),
    (Destination.ORGS.value, "Organizações", "Organizações que o usuário faz parte"),
    (Destination.REPOS.value, "Repositórios", "Lista contendo todos os repositórios"),
    (Destination.FOLLOWERS.value, "Seguidores", "Lista de seguidores"),
]


class IdentityCard(Static):
    """Avatar URL, display name and handle of a ProfileIdentity."""

    def show_identity(self, identity: ProfileIdentity) -> None:
        name = escape(identity.display_name or "")
        handle = escape(identity.login_handle or "")
        self.update(f"[b]{name}[/b]\n{handle}\n[dim]{escape(identity.avatar_url)}[/dim]")


class ErrorAlert(Vertical):
    """Inline rendition of the ErrorReporter slot."""

    def compose(self) -> ComposeResult:
        yield Label("", id="error-message")
        yield Button("OK", id="btn-error-ok", variant="error")

    def show_error(self, state: ErrorState) -> None:
        self.query_one("#error-message", Label).update(state.message)
        self.display = state.visible


class ItemRow(ListItem):
    """List row that remembers the model it renders."""

    def __init__(self, value: Any, text: str) -> None:
        super().__init__(Label(text))
        self.value = value


class ProfileScreen(Screen):
    """Common frame: identity card, body, error alert."""

    BINDINGS = [
        Binding("escape", "back", "Back"),
    ]

    def __init__(self, controller: ScreenController[Any]) -> None:
        super().__init__()
        self.controller = controller
        self._unsubscribers: list[Callable[[], None]] = []

    @property
    def reporter(self) -> ErrorReporter:
        return self.controller.services.reporter

    def compose(self) -> ComposeResult:
        yield Header()
        yield IdentityCard(id="identity-card")
        yield from self.compose_body()
        yield ErrorAlert(id="error-alert")
        yield Footer()

    def compose_body(self) -> ComposeResult:
        yield from ()

    def on_mount(self) -> None:
        self.sub_title = self.controller.route.destination.value
        self._unsubscribers = [
            self.controller.subscribe(self.render_state),
            self.reporter.subscribe(self.render_error),
        ]
        self.render_state(self.controller.state)
        self.render_error(self.reporter.state)
        self.start_screen()

    def start_screen(self) -> None:
        """Kick off the screen's work once it is on screen."""

    def on_unmount(self) -> None:
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers = []
        self.controller.detach()

    def render_state(self, state: Any) -> None:
        self.query_one(IdentityCard).show_identity(state.identity)

    def render_error(self, state: ErrorState) -> None:
        self.query_one(ErrorAlert).show_error(state)

    @on(Button.Pressed, "#btn-error-ok")
    def on_error_ok_pressed(self) -> None:
        self.reporter.dismiss()

    def action_back(self) -> None:
        self.controller.services.navigator.back()


class HomeScreen(ProfileScreen):
    """Identity card, search input and the menu of the other screens."""

    BINDINGS = [
        Binding("slash", "open_search", "Search"),
        Binding("ctrl+r", "reset_user", "Reset"),
    ]

    controller: HomeController

    def __init__(self, controller: HomeController, initial_search: Optional[str] = None) -> None:
        super().__init__(controller)
        self.initial_search = initial_search

    def compose_body(self) -> ComposeResult:
        with Vertical(id="search-panel"):
            yield Input(placeholder="Pesquisar usuário", id="search-input")
            with Horizontal(id="search-buttons"):
                yield Button("Pesquisar", id="btn-search", variant="primary")
                yield Button("Fechar", id="btn-search-close")
        yield ListView(
            *[
                ListItem(Label(f"[b]{label}[/b]\n{description}"), name=target or "bio")
                for target, label, description in HOME_MENU
            ],
            id="menu",
        )
        yield Button("Resetar", id="btn-reset")

    def start_screen(self) -> None:
        if self.initial_search:
            self.run_search(self.initial_search)

    def render_state(self, state: HomeState) -> None:
        super().render_state(state)
        self.query_one("#search-panel").display = state.search_open
        search_input = self.query_one("#search-input", Input)
        if search_input.value != state.search_text:
            search_input.value = state.search_text
        if state.search_open:
            search_input.focus()

    def run_search(self, handle: Optional[str] = None) -> None:
        self.run_worker(self.controller.submit_search(handle), exclusive=True, group="search")

    @on(Input.Changed, "#search-input")
    def on_search_changed(self, event: Input.Changed) -> None:
        self.controller.set_search_text(event.value)

    @on(Input.Submitted, "#search-input")
    def on_search_submitted(self, event: Input.Submitted) -> None:
        self.run_search(event.value)

    @on(Button.Pressed, "#btn-search")
    def on_search_pressed(self) -> None:
        self.run_search()

    @on(Button.Pressed, "#btn-search-close")
    def on_search_close_pressed(self) -> None:
        self.controller.close_search()

    @on(Button.Pressed, "#btn-reset")
    def on_reset_pressed(self) -> None:
        self.controller.reset_user()

    @on(ListView.Selected, "#menu")
    def on_menu_selected(self, event: ListView.Selected) -> None:
        if event.item.name == "bio":
            self.controller.open_profile_link()
        elif event.item.name:
            self.controller.navigate_to(event.item.name)

    def action_open_search(self) -> None:
        self.controller.open_search()

    def action_reset_user(self) -> None:
        self.controller.reset_user()


class ListScreen(ProfileScreen):
    """A fetched list under the identity card."""

    controller: ListController[Any]

    empty_text = "Nenhum item."

    def compose_body(self) -> ComposeResult:
        yield Static("", id="list-status")
        yield ListView(id="items")

    def start_screen(self) -> None:
        self.run_worker(self.controller.load(), exclusive=True, group="load")

    def describe(self, item: Any) -> str:
        return str(item)

    def render_state(self, state: ListState) -> None:
        super().render_state(state)
        status = self.query_one("#list-status", Static)
        if state.loading:
            status.update("Carregando...")
        elif not state.items:
            status.update(self.empty_text)
        else:
            status.update("")
        list_view = self.query_one("#items", ListView)
        list_view.clear()
        list_view.extend(ItemRow(item, self.describe(item)) for item in state.items)

    @on(ListView.Selected, "#items")
    def on_item_selected(self, event: ListView.Selected) -> None:
        if isinstance(event.item, ItemRow):
            self.choose(event.item.value)

    def choose(self, item: Any) -> None:
        self.controller.select(item)


class OrgsScreen(ListScreen):
    controller: LinkListController[Organization]

    empty_text = "Nenhuma organização."

    def describe(self, item: Organization) -> str:
        return item.login


class ReposScreen(ListScreen):
    controller: LinkListController[Repository]

    empty_text = "Nenhum repositório."

    def describe(self, item: Repository) -> str:
        return item.name


class FollowersScreen(ListScreen):
    controller: FollowersController

    empty_text = "Nenhum seguidor."

    def describe(self, item: Follower) -> str:
        return item.login

    def choose(self, item: Follower) -> None:
        self.run_worker(self.controller.select(item), exclusive=True, group="pivot")


SCREENS: dict[Destination, type[ProfileScreen]] = {
    Destination.HOME: HomeScreen,
    Destination.ORGS: OrgsScreen,
    Destination.REPOS: ReposScreen,
    Destination.FOLLOWERS: FollowersScreen,
}


class OctoviewApp(App):
    """Terminal browser for GitHub profiles."""

    TITLE = "Octoview"
    SUB_TITLE = "GitHub profile browser"

    CSS = """
    #identity-card {
        height: auto;
        padding: 1 2;
        margin: 1 2 0 2;
        border: round $primary;
        content-align: center middle;
        text-align: center;
    }

    #search-panel {
        height: auto;
        margin: 1 2;
        padding: 1;
        border: solid $accent;
    }

    #search-buttons {
        height: auto;
    }

    #search-buttons Button {
        margin: 0 1;
    }

    #menu, #items {
        height: 1fr;
        margin: 1 2;
    }

    #menu ListItem, #items ListItem {
        padding: 0 1;
    }

    #list-status {
        margin: 0 2;
        color: $text-muted;
    }

    #btn-reset {
        dock: bottom;
        margin: 0 2 1 2;
    }

    #error-alert {
        dock: bottom;
        height: auto;
        padding: 1 2;
        background: $error 20%;
        border: heavy $error;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
    ]

    def __init__(
        self,
        config: Optional[OctoviewConfig] = None,
        client: Optional[GitHubClient] = None,
        opener: Optional[LinkOpener] = None,
        initial_handle: Optional[str] = None,
    ):
        super().__init__()
        self.settings = config or OctoviewConfig()
        self.reporter = ErrorReporter()
        self.session = ProfileSession()
        self.navigator = Navigator(Route(Destination.HOME, self.session.current), self.reporter)
        self.services = BrowserServices(
            client=client or GitHubClient(self.settings.api_root, self.settings.user_agent),
            session=self.session,
            navigator=self.navigator,
            reporter=self.reporter,
            opener=opener or WebBrowserLinkOpener(),
            config=self.settings,
        )
        self.initial_handle = initial_handle

    def on_mount(self) -> None:
        if self.settings.theme in self.available_themes:
            self.theme = self.settings.theme
        self.navigator.subscribe(self.handle_navigation)
        self.push_screen(self.build_screen(self.navigator.top, initial_search=self.initial_handle))

    async def on_unmount(self) -> None:
        await self.services.client.aclose()

    def build_screen(self, route: Route, initial_search: Optional[str] = None) -> ProfileScreen:
        """Create the controller and screen for a route."""
        controller = build_controller(route, self.services)
        if route.destination is Destination.HOME:
            return HomeScreen(controller, initial_search=initial_search)
        return SCREENS[route.destination](controller)

    def handle_navigation(self, change: NavigationChange) -> None:
        logger.debug("Screen stack %s: %s", change.action.value, change.route.destination.value)
        if change.action is NavAction.PUSH:
            self.push_screen(self.build_screen(change.route))
        elif change.action is NavAction.BACK:
            self.pop_screen()
        else:
            self.run_worker(self.replace_screens(change.route), exclusive=True, group="navigation")

    async def replace_screens(self, route: Route) -> None:
        """Drop every profile screen and show ``route`` as the only one."""
        while len(self.screen_stack) > 2:
            await self.pop_screen()
        await self.switch_screen(self.build_screen(route))
