"""FastMCP server and tool definitions."""

import structlog
from mcp.server.fastmcp import FastMCP
from pydantic import ValidationError

from page_match.container import DEFAULT_SESSION, get_container
from page_match.models import (
    ErrorResponse,
    FilterResponse,
    MatchPageResponse,
    Record,
    ResetSessionResponse,
)
from page_match.profiling import profile

log = structlog.get_logger()

mcp = FastMCP("page-match")


@mcp.tool()
@profile("filter_pages")
async def filter_pages(
    query: str,
    pages: list[dict],
    session_id: str = DEFAULT_SESSION,
    limit: int | None = None,
) -> dict:
    """Filter pages down to those whose title or url match every query term.

    Terms match at word starts: "dash" finds "home-dash" and "Dash" finds
    "homeDash", but "ash" finds neither. A term with an uppercase letter is
    case-sensitive; an all-lowercase term ignores case. Only the first 50
    characters of each title and url are searched, after dropping prefixes
    like "https://www.".

    Reuse the same session_id while the user types a query one keystroke at
    a time so the parsed query is reused between calls.

    Args:
        query: Whitespace-separated search terms. Empty keeps every page.
        pages: Objects with "title" and "url" string fields.
        session_id: Search session owning the query cache.
        limit: Maximum number of pages to return (default: no limit).

    Returns:
        Matching pages in input order, with timing and count debug info.
    """
    if limit is not None and limit < 1:
        return ErrorResponse(error=f"limit must be >= 1, got {limit}").model_dump()

    try:
        records = [Record.model_validate(page) for page in pages]
    except ValidationError as e:
        log.warning("invalid_pages", session_id=session_id, error=str(e))
        return ErrorResponse(error=f"Invalid pages: {e}").model_dump()

    service = get_container().create_filter_service(session_id)
    outcome = await service.filter(query, records, limit=limit)
    return FilterResponse.from_outcome(outcome, session_id).model_dump()


@mcp.tool()
@profile("match_page")
async def match_page(
    query: str,
    title: str = "",
    url: str = "",
    session_id: str = DEFAULT_SESSION,
) -> dict:
    """Check whether a single page matches a query.

    Uses the same word-boundary and case rules as filter_pages.

    Args:
        query: Whitespace-separated search terms. Empty matches every page.
        title: Page title.
        url: Page url.
        session_id: Search session owning the query cache.

    Returns:
        Whether every query term matches the title or url.
    """
    matcher = get_container().get_matcher(session_id)
    matches = matcher.matches_page(query, Record(title=title, url=url))
    return MatchPageResponse(matches=matches).model_dump()


@mcp.tool()
async def reset_session(session_id: str = DEFAULT_SESSION) -> dict:
    """Forget a search session and its cached query.

    Args:
        session_id: Search session to drop.

    Returns:
        The session id and whether it existed.
    """
    existed = get_container().drop_session(session_id)
    log.info("session_reset", session_id=session_id, existed=existed)
    return ResetSessionResponse(session_id=session_id, existed=existed).model_dump()
