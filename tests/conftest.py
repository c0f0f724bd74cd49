"""Shared fixtures for Octoview tests."""

import pytest

from octoview.config import OctoviewConfig
from octoview.controllers import BrowserServices
from octoview.errors import LinkOpenError
from octoview.models import ANONYMOUS
from octoview.navigation import Destination, Navigator, Route
from octoview.remote import GitHubClient
from octoview.reporter import ErrorReporter
from octoview.session import ProfileSession


API = "https://api.github.com"


class RecordingOpener:
    """Link opener that records URLs instead of launching a browser."""

    def __init__(self, supported: bool = True, fail_on_open: bool = False) -> None:
        self.supported = supported
        self.fail_on_open = fail_on_open
        self.opened: list[str] = []

    def can_open(self, url: str) -> bool:
        return self.supported

    def open(self, url: str) -> None:
        if self.fail_on_open:
            raise LinkOpenError(url, "browser refused")
        self.opened.append(url)


@pytest.fixture
def reporter() -> ErrorReporter:
    return ErrorReporter()


@pytest.fixture
def session() -> ProfileSession:
    return ProfileSession()


@pytest.fixture
def navigator(reporter: ErrorReporter) -> Navigator:
    return Navigator(Route(Destination.HOME, ANONYMOUS), reporter)


@pytest.fixture
def opener() -> RecordingOpener:
    return RecordingOpener()


@pytest.fixture
def client() -> GitHubClient:
    return GitHubClient(api_root=API)


@pytest.fixture
def services(client, session, navigator, reporter, opener) -> BrowserServices:
    return BrowserServices(
        client=client,
        session=session,
        navigator=navigator,
        reporter=reporter,
        opener=opener,
        config=OctoviewConfig(),
    )
