"""Protocols for dependency injection."""

from typing import Protocol

from page_match.models import QueryTerm, Record


class MatcherProtocol(Protocol):
    """Interface for query-to-page matching."""

    def matches_page(self, query: str, record: Record) -> bool:
        """Check whether every query term matches the record."""
        ...

    def terms_for(self, query: str) -> tuple[QueryTerm, ...]:
        """Get the parsed terms for a query."""
        ...

    def reset(self) -> None:
        """Forget any cached query state."""
        ...
