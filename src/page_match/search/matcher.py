"""Query-to-page matching."""

import structlog

from page_match.models import QueryTerm, Record
from page_match.search.boundary import matches_boundary
from page_match.search.query import ParseHook, QueryParser
from page_match.search.text import DEFAULT_MATCH_WINDOW, prepare_match_text

log = structlog.get_logger()


class QueryMatcher:
    """Decides whether a query matches a page's title or url.

    Every query term has to match one of the two fields on a word boundary.
    Terms without uppercase letters ignore case; any uppercase letter makes a
    term case-sensitive. One matcher belongs to one search session: it keeps
    the parse of the last query it saw.
    """

    def __init__(
        self,
        window: int = DEFAULT_MATCH_WINDOW,
        on_parse: ParseHook | None = None,
    ) -> None:
        """Initialize the matcher.

        Args:
            window: Number of title/url characters searched.
            on_parse: Optional hook called whenever a query is parsed.
        """
        self.window = window
        self.parser = QueryParser(on_parse=on_parse)

    @property
    def parse_count(self) -> int:
        return self.parser.parse_count

    def terms_for(self, query: str) -> tuple[QueryTerm, ...]:
        """Terms used to match a query, empty for the empty query."""
        if query == "":
            return ()
        return self.parser.parse(query)

    def matches_page(self, query: str, record: Record) -> bool:
        """Check if a query string matches some page information.

        Args:
            query: Raw query text. The empty query matches everything.
            record: Page title and url.

        Returns:
            True if every query term matches the title or the url.
        """
        if query == "":
            return True

        terms = self.parser.parse(query)
        title, lower_title = prepare_match_text(record.title, self.window)
        url, lower_url = prepare_match_text(record.url, self.window)

        for query_term in terms:
            term = query_term.term
            if query_term.ignore_case:
                # Search lowercase text, but classify boundaries with the real casing
                matched = matches_boundary(term, lower_title, title) or matches_boundary(
                    term, lower_url, url
                )
            else:
                matched = matches_boundary(term, title, title) or matches_boundary(term, url, url)

            if not matched:
                return False

        return True

    def reset(self) -> None:
        """Clear the cached query so the next call parses again."""
        self.parser.clear()
        log.debug("matcher_reset")
