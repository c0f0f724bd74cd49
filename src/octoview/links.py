"""Opening github.com pages outside the terminal."""

import logging
import webbrowser
from typing import Protocol
from urllib.parse import urlparse

from octoview.errors import LinkOpenError


logger = logging.getLogger(__name__)

SUPPORTED_SCHEMES = ("http", "https")


class LinkOpener(Protocol):
    """Platform capability for opening URLs."""

    def can_open(self, url: str) -> bool: ...

    def open(self, url: str) -> None: ...


class WebBrowserLinkOpener:
    """Opens web URLs with the system browser."""

    def can_open(self, url: str) -> bool:
        parsed = urlparse(url)
        return parsed.scheme in SUPPORTED_SCHEMES and bool(parsed.netloc)

    def open(self, url: str) -> None:
        try:
            opened = webbrowser.open(url)
        except webbrowser.Error as e:
            raise LinkOpenError(url, str(e)) from e
        if not opened:
            raise LinkOpenError(url, "no browser available")


def open_link(opener: LinkOpener, url: str) -> None:
    """Open ``url`` if the opener supports it.

    Raises:
        LinkOpenError: If the URL is unsupported or opening fails.
    """
    if not opener.can_open(url):
        raise LinkOpenError(url)
    logger.info("Opening %s", url)
    opener.open(url)
