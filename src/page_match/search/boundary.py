"""Word-boundary substring matching.

Boundaries are classified with ASCII code point ranges only. A match is at a
boundary when it starts the string, when a lowercase letter follows a
non-letter, or when an uppercase letter follows anything but another
uppercase letter (so camelCase humps count). Matches starting on a non-letter
are always boundaries. Only the start of a match is checked, never its end.
"""

UPPER_A, UPPER_Z = 65, 90
LOWER_A, LOWER_Z = 97, 122


def _code_at(text: str, pos: int) -> int | None:
    """Code point at pos, or None when pos falls outside the text."""
    if 0 <= pos < len(text):
        return ord(text[pos])
    return None


def _is_upper(code: int | None) -> bool:
    return code is not None and UPPER_A <= code <= UPPER_Z


def _is_lower(code: int | None) -> bool:
    return code is not None and LOWER_A <= code <= LOWER_Z


def _is_boundary(cased_target: str, pos: int) -> bool:
    at = _code_at(cased_target, pos)
    prev = _code_at(cased_target, pos - 1)

    # Lowercase needs a non-letter before it
    if _is_lower(at):
        return prev is not None and not _is_upper(prev) and not _is_lower(prev)

    # Uppercase only needs to not continue an uppercase run
    if _is_upper(at):
        return prev is not None and not _is_upper(prev)

    return True


def matches_boundary(term: str, target: str, cased_target: str) -> bool:
    """Check if a term matches on a word boundary.

    Args:
        term: Text to look for.
        target: Text searched for the term, lowercased for case-insensitive terms.
        cased_target: Original-case copy of target used to classify boundaries.

    Returns:
        True if some occurrence of term in target starts at a word boundary.
    """
    pos = target.find(term)
    if pos == -1:
        return False

    # Matching at the very beginning is a boundary success
    if pos == 0:
        return True

    while pos != -1:
        if _is_boundary(cased_target, pos):
            return True

        # Continue just past where it matched so overlapping occurrences count
        pos = target.find(term, pos + 1)

    return False
