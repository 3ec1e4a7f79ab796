"""API response models for MCP tool return types."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from page_match.models.domain import Record

if TYPE_CHECKING:
    from page_match.services.filter_service import FilterOutcome


class FilterTimings(BaseModel):
    """Timing breakdown for a filter operation."""

    filter_ms: float
    total_ms: float


class FilterStats(BaseModel):
    """Statistics about a filter operation."""

    scanned_count: int
    matched_count: int
    returned_count: int
    truncated: bool

    @classmethod
    def from_outcome(cls, outcome: FilterOutcome) -> FilterStats:
        return cls(
            scanned_count=outcome.scanned_count,
            matched_count=outcome.matched_count,
            returned_count=len(outcome.records),
            truncated=outcome.matched_count > len(outcome.records),
        )


class FilterDebugInfo(BaseModel):
    """Debug information included in filter responses."""

    timings: FilterTimings
    stats: FilterStats
    session_id: str
    query_terms: int


class FilterResponse(BaseModel):
    """Complete filter response with matching pages and debug info."""

    results: list[Record]
    debug: FilterDebugInfo

    @classmethod
    def from_outcome(cls, outcome: FilterOutcome, session_id: str) -> FilterResponse:
        return cls(
            results=outcome.records,
            debug=FilterDebugInfo(
                timings=FilterTimings(filter_ms=outcome.filter_ms, total_ms=outcome.total_ms),
                stats=FilterStats.from_outcome(outcome),
                session_id=session_id,
                query_terms=outcome.query_terms,
            ),
        )


class MatchPageResponse(BaseModel):
    """Response from the match_page tool."""

    matches: bool


class ResetSessionResponse(BaseModel):
    """Response from the reset_session tool."""

    session_id: str
    existed: bool


class ErrorResponse(BaseModel):
    """Error response for tool failures."""

    error: str
