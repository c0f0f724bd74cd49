"""Profile session: the identity currently being browsed."""

import logging
from typing import Any, Mapping, Optional, Union

from octoview.models import ANONYMOUS, ProfileIdentity, RemoteUser


logger = logging.getLogger(__name__)


class ProfileSession:
    """Owner of the displayed ProfileIdentity.

    Identities are immutable; every operation builds a new one and makes it
    ``current``. Screens hold their own snapshot and never see later
    replacements unless the navigator hands them a new route.
    """

    def __init__(self, override: Optional[ProfileIdentity] = None):
        self._current = ANONYMOUS
        self.initialize(override)

    @property
    def current(self) -> ProfileIdentity:
        return self._current

    def initialize(self, override: Optional[ProfileIdentity] = None) -> ProfileIdentity:
        """Start from ``override``, or from the anonymous identity."""
        self._current = override if override is not None else ANONYMOUS
        return self._current

    def reset(self) -> ProfileIdentity:
        """Go back to the anonymous identity."""
        self._current = ANONYMOUS
        return self._current

    def adopt_from(self, remote_user: Union[RemoteUser, Mapping[str, Any]]) -> ProfileIdentity:
        """Build the identity of a fetched user and make it current.

        A missing or empty ``avatar_url`` falls back to the placeholder.
        """
        if not isinstance(remote_user, RemoteUser):
            remote_user = RemoteUser.model_validate(dict(remote_user))
        self._current = ProfileIdentity(
            display_name=remote_user.name,
            login_handle=remote_user.login,
            avatar_url=remote_user.avatar_url,
        )
        logger.info("Now browsing %s", remote_user.login)
        return self._current
