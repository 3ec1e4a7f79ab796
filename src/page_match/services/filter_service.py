"""Filter service - narrows page lists down to query matches."""

import asyncio
import time
from collections.abc import Iterable
from dataclasses import dataclass

import structlog

from page_match.models import Record
from page_match.protocols import MatcherProtocol

log = structlog.get_logger()


@dataclass
class FilterOutcome:
    """Domain result from a filter operation."""

    records: list[Record]
    scanned_count: int
    matched_count: int
    query_terms: int = 0
    filter_ms: float = 0.0
    total_ms: float = 0.0


class FilterService:
    """Filters records with one session's matcher, keeping input order."""

    def __init__(self, matcher: MatcherProtocol, default_limit: int | None = None) -> None:
        self.matcher = matcher
        self.default_limit = default_limit

    async def filter(
        self,
        query: str,
        records: Iterable[Record],
        limit: int | None = None,
    ) -> FilterOutcome:
        """Filter records off the event loop.

        Args:
            query: Raw query text. The empty query keeps every record.
            records: Candidate pages.
            limit: Maximum number of records returned. Falls back to the default limit.

        Returns:
            FilterOutcome with matching records and timing info.
        """
        return await asyncio.to_thread(self.filter_sync, query, list(records), limit)

    def filter_sync(
        self,
        query: str,
        records: Iterable[Record],
        limit: int | None = None,
    ) -> FilterOutcome:
        """Filter records in the calling thread."""
        total_start = time.perf_counter()
        if limit is None:
            limit = self.default_limit

        terms = self.matcher.terms_for(query)

        t0 = time.perf_counter()
        matched: list[Record] = []
        scanned = 0
        for record in records:
            scanned += 1
            if self.matcher.matches_page(query, record):
                matched.append(record)
        filter_ms = (time.perf_counter() - t0) * 1000

        returned = matched if limit is None else matched[:limit]
        total_ms = (time.perf_counter() - total_start) * 1000

        log.info(
            "filter_completed",
            query=query,
            scanned=scanned,
            matched=len(matched),
            returned=len(returned),
        )

        return FilterOutcome(
            records=returned,
            scanned_count=scanned,
            matched_count=len(matched),
            query_terms=len(terms),
            filter_ms=round(filter_ms, 1),
            total_ms=round(total_ms, 1),
        )
