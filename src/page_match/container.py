"""Dependency injection container.

Owns the settings and one QueryMatcher per search session. Matchers are
cheap but stateful (they remember the last parsed query), so concurrent
sessions never share one. Configurable: call configure() to override the
default settings (e.g. in tests).
"""

import threading
from collections import OrderedDict

import structlog

from page_match.config import Settings, get_settings
from page_match.search.matcher import QueryMatcher
from page_match.services.filter_service import FilterService

log = structlog.get_logger()

DEFAULT_SESSION = "default"


class Container:
    """Hands out per-session matchers and fresh services.

    Caching strategy:
    - Matchers: per-session, least recently used evicted past max_sessions
    - Services: created fresh (cheap, wrap the session's matcher)
    """

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self._matchers: OrderedDict[str, QueryMatcher] = OrderedDict()
        self._lock = threading.Lock()

    @property
    def session_count(self) -> int:
        return len(self._matchers)

    def create_matcher(self) -> QueryMatcher:
        """Create a matcher configured from settings."""
        return QueryMatcher(window=self.settings.match_window)

    def get_matcher(self, session_id: str = DEFAULT_SESSION) -> QueryMatcher:
        """Get or create the matcher owned by a session."""
        with self._lock:
            matcher = self._matchers.get(session_id)
            if matcher is not None:
                self._matchers.move_to_end(session_id)
                return matcher

            matcher = self.create_matcher()
            self._matchers[session_id] = matcher
            log.debug("session_created", session_id=session_id)

            while len(self._matchers) > self.settings.max_sessions:
                evicted, _ = self._matchers.popitem(last=False)
                log.info("session_evicted", session_id=evicted)

            return matcher

    def drop_session(self, session_id: str) -> bool:
        """Forget a session's matcher. Returns whether the session existed."""
        with self._lock:
            return self._matchers.pop(session_id, None) is not None

    def create_filter_service(self, session_id: str = DEFAULT_SESSION) -> FilterService:
        """Create a FilterService bound to a session's matcher."""
        return FilterService(
            matcher=self.get_matcher(session_id),
            default_limit=self.settings.default_limit,
        )


# --- Global container lifecycle ---

_container: Container | None = None


def configure(settings: Settings) -> Container:
    """Initialize the global container with explicit settings (e.g. tests)."""
    global _container
    _container = Container(settings)
    return _container


def get_container() -> Container:
    """Get the global container, auto-configuring with default Settings if needed."""
    global _container
    if _container is None:
        _container = Container(get_settings())
    return _container
