"""Single-slot error channel shared by the screen controllers."""

import logging
from typing import Callable

from octoview.models import ErrorState


logger = logging.getLogger(__name__)

ErrorListener = Callable[[ErrorState], None]


class ErrorReporter:
    """Holds at most one user-facing error message.

    The slot is last-write-wins: calling ``show`` twice before ``dismiss``
    replaces the first message, which is never displayed again.
    """

    def __init__(self) -> None:
        self._state = ErrorState()
        self._listeners: list[ErrorListener] = []

    @property
    def state(self) -> ErrorState:
        return self._state

    @property
    def visible(self) -> bool:
        return self._state.visible

    @property
    def message(self) -> str:
        return self._state.message

    def subscribe(self, listener: ErrorListener) -> Callable[[], None]:
        """Register a listener; returns a callable that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def show(self, message: str) -> None:
        if self._state.visible and self._state.message != message:
            logger.debug("Replacing unread error %r", self._state.message)
        self._set(ErrorState(message=message, visible=True))

    def dismiss(self) -> None:
        self._set(ErrorState(message=self._state.message, visible=False))

    def _set(self, state: ErrorState) -> None:
        self._state = state
        for listener in list(self._listeners):
            listener(state)
