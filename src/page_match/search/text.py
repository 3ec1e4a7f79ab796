"""Text normalization applied to queries and page fields before matching."""

import re

from page_match.models import MatchText

# Optional ftp/http/https scheme, then an optional "ftp" or "www<digits>" subdomain,
# then an optional dot. Anchored so only the very start of the text is stripped.
PREFIX_PATTERN = re.compile(r"^(?:(?:ftp|https?):/{0,2})?(?:ftp|w{3}\d*)?\.?", re.ASCII)

# Only the first characters of a title or url take part in matching
DEFAULT_MATCH_WINDOW = 50


def strip_prefix(text: str) -> str:
    """Remove a leading protocol and subdomain prefix.

    Args:
        text: Text that may start with something like "https://www2.".

    Returns:
        The text with at most one leading prefix removed.
    """
    return PREFIX_PATTERN.sub("", text, count=1)


def prepare_match_text(text: str | None, window: int = DEFAULT_MATCH_WINDOW) -> MatchText:
    """Get both the original-case and lowercase prepared text.

    Args:
        text: Raw title or url. None is treated as empty.
        window: Number of characters kept after stripping the prefix.

    Returns:
        MatchText with the truncated text and its lowercase copy.
    """
    prepared = strip_prefix(text or "")[:window]
    return MatchText(prepared, prepared.lower())
