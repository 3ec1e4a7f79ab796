"""Domain models and API response types."""

from page_match.models.domain import MatchText, QueryTerm, Record
from page_match.models.responses import (
    ErrorResponse,
    FilterDebugInfo,
    FilterResponse,
    FilterStats,
    FilterTimings,
    MatchPageResponse,
    ResetSessionResponse,
)

__all__ = [
    # Domain
    "MatchText",
    "QueryTerm",
    "Record",
    # Responses
    "ErrorResponse",
    "FilterDebugInfo",
    "FilterResponse",
    "FilterStats",
    "FilterTimings",
    "MatchPageResponse",
    "ResetSessionResponse",
]
