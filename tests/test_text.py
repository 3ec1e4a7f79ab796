"""Tests for prefix stripping and match text preparation."""

import pytest

from page_match.models import MatchText
from page_match.search.text import DEFAULT_MATCH_WINDOW, prepare_match_text, strip_prefix


class TestStripPrefix:
    """Tests for strip_prefix()."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("https://www.example.com", "example.com"),
            ("http://example.com/path", "example.com/path"),
            ("https:example.com", "example.com"),
            ("http:/example.com", "example.com"),
            ("www2.example.com", "example.com"),
            ("ftp://ftp.gnu.org", "gnu.org"),
            ("ftp.gnu.org", "gnu.org"),
            ("https://www123.site.net", "site.net"),
        ],
    )
    def test_strips_known_prefixes(self, text: str, expected: str):
        """Schemes and www-like subdomains are removed from the start."""
        assert strip_prefix(text) == expected

    def test_leaves_text_without_prefix_unchanged(self):
        """Text without a prefix comes back as is."""
        assert strip_prefix("Home page") == "Home page"

    def test_only_strips_at_start(self):
        """Prefixes later in the text are kept."""
        assert strip_prefix("see https://www.example.com") == "see https://www.example.com"

    def test_strips_only_once(self):
        """A second prefix after the first one is kept."""
        assert strip_prefix("https://https://example.com") == "https://example.com"

    def test_empty_text(self):
        """Empty text stays empty."""
        assert strip_prefix("") == ""

    def test_scheme_only(self):
        """A bare scheme strips to nothing."""
        assert strip_prefix("https://") == ""

    @pytest.mark.parametrize(
        "text",
        [
            "https://www.example.com",
            "www2.mozilla.org",
            "ftp://ftp.gnu.org/pub",
            "Home page",
            "",
            "!!!",
        ],
    )
    def test_stripping_twice_changes_nothing_more(self, text: str):
        """A single prefix leaves no strippable residue."""
        once = strip_prefix(text)
        assert strip_prefix(once) == once


class TestPrepareMatchText:
    """Tests for prepare_match_text()."""

    def test_returns_original_and_lowercase(self):
        """Both casings of the prepared text are returned."""
        result = prepare_match_text("The CAT Show")
        assert result == MatchText("The CAT Show", "the cat show")
        assert result.text == "The CAT Show"
        assert result.lower == "the cat show"

    def test_strips_prefix_before_truncating(self):
        """The window counts characters after the prefix."""
        url = "https://www." + "a" * 60
        text, lower = prepare_match_text(url)
        assert text == "a" * DEFAULT_MATCH_WINDOW
        assert lower == text

    def test_truncates_long_text(self):
        """Only the first 50 characters are kept."""
        title = "x" * 80
        text, _ = prepare_match_text(title)
        assert len(text) == 50

    def test_short_text_unchanged(self):
        """Text shorter than the window is kept whole."""
        text, _ = prepare_match_text("short")
        assert text == "short"

    def test_none_is_empty(self):
        """Absent text is treated as empty."""
        assert prepare_match_text(None) == MatchText("", "")

    def test_custom_window(self):
        """The window can be changed."""
        text, lower = prepare_match_text("Hello World", window=5)
        assert text == "Hello"
        assert lower == "hello"
