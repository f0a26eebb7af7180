"""
Route handling for the auth flow.
"""
from typing import MutableMapping, Optional

from talenthub.config.settings import settings
from talenthub.core.logging import get_logger
from talenthub.core.session import (
    REDIRECT_FROM_KEY,
    ROUTE_KEY,
    _session,
    is_authenticated,
)

logger = get_logger(__name__)

LANDING_PATH = "/"
PROTECTED_PATHS = (settings.DEFAULT_REDIRECT_PATH,)


class Navigator:
    """Keeps the current route in session state."""

    def __init__(self, state: Optional[MutableMapping] = None):
        self._state = state

    @property
    def current(self) -> str:
        return _session(self._state).get(ROUTE_KEY) or LANDING_PATH

    @property
    def redirect_from(self) -> Optional[str]:
        return _session(self._state).get(REDIRECT_FROM_KEY)

    def navigate(self, path: str, from_path: Optional[str] = None) -> None:
        session = _session(self._state)
        logger.debug(f"Navigating | {self.current} -> {path} | from: {from_path}")
        session[ROUTE_KEY] = path
        session[REDIRECT_FROM_KEY] = from_path


def resolve_route(navigator: Navigator, state: Optional[MutableMapping] = None) -> str:
    """
    Apply the fixed redirects and return the route to render.

    The landing page always forwards to the auth page. Protected pages
    forward unauthenticated users to the auth page and remember where
    they came from.
    """
    route = navigator.current
    if route == LANDING_PATH:
        navigator.navigate(settings.AUTH_PATH)
        return settings.AUTH_PATH
    if route in PROTECTED_PATHS and not is_authenticated(state):
        navigator.navigate(settings.AUTH_PATH, from_path=route)
        return settings.AUTH_PATH
    return route
