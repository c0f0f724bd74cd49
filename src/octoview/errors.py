"""Error taxonomy for Octoview.

Every error is caught by the controller operation that triggered it and
turned into a single message on the ErrorReporter.
"""


class OctoviewError(Exception):
    """Base class for errors raised by Octoview components."""


class NotFoundError(OctoviewError):
    """The remote body carried the "Not Found" marker."""

    def __init__(self, path: str):
        super().__init__(f"Not found: {path}")
        self.path = path


class TransportError(OctoviewError):
    """Network failure, non-2xx status, or an unreadable payload."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Request to {path} failed: {reason}")
        self.path = path
        self.reason = reason


class NavigationError(OctoviewError):
    """A destination name the navigator does not know."""

    def __init__(self, name: str):
        super().__init__(f"Unknown destination: {name!r}")
        self.name = name


class LinkOpenError(OctoviewError):
    """The platform cannot open the given URL."""

    def __init__(self, url: str, reason: str = "unsupported URL"):
        super().__init__(f"Cannot open {url}: {reason}")
        self.url = url
        self.reason = reason
