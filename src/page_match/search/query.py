"""Query parsing with a single-slot cache for incremental search."""

import threading
from collections.abc import Callable

import structlog

from page_match.models import QueryTerm
from page_match.search.text import strip_prefix

log = structlog.get_logger()

# Called with (query, terms) every time a query is actually parsed
ParseHook = Callable[[str, tuple[QueryTerm, ...]], None]


def parse_query(query: str) -> tuple[QueryTerm, ...]:
    """Split a query into terms, last typed term first.

    The last term is the one still being typed in an incremental search, so
    it is the most likely to fail and is checked first.

    Args:
        query: Raw query text.

    Returns:
        Terms in reverse query order.
    """
    tokens = strip_prefix(query).split()
    return tuple(QueryTerm.from_token(token) for token in reversed(tokens))


class QueryParser:
    """Parses queries, remembering only the most recent one.

    Typing a query keystroke by keystroke re-runs matching against every
    record with the same query, so the parse is reused until the query
    changes. The cache holds one generation: a new query replaces it.
    """

    def __init__(self, on_parse: ParseHook | None = None) -> None:
        """Initialize the parser.

        Args:
            on_parse: Optional hook called after each real (uncached) parse.
        """
        self.on_parse = on_parse
        self.parse_count = 0
        self._last_query: str | None = None
        self._terms: tuple[QueryTerm, ...] = ()
        self._lock = threading.Lock()

    @property
    def last_query(self) -> str | None:
        return self._last_query

    def parse(self, query: str) -> tuple[QueryTerm, ...]:
        """Get the terms for a query, reusing the cached parse when it matches.

        Args:
            query: Raw query text. The empty query is handled by callers.

        Returns:
            Terms in matching order.
        """
        with self._lock:
            if query == self._last_query:
                return self._terms

            terms = parse_query(query)
            self._last_query = query
            self._terms = terms
            self.parse_count += 1

        log.debug("query_parsed", query=query, terms=len(terms))
        if self.on_parse is not None:
            self.on_parse(query, terms)
        return terms

    def clear(self) -> None:
        """Forget the cached query."""
        with self._lock:
            self._last_query = None
            self._terms = ()
