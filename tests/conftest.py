"""Pytest configuration and fixtures."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from page_match.config import Settings
from page_match.container import Container, configure
from page_match.models import Record
from page_match.protocols import MatcherProtocol
from page_match.search.matcher import QueryMatcher

# Settings fixtures


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Create test settings with a temp profiles dir."""
    return Settings(profiles_dir=tmp_path / "profiles")


@pytest.fixture
def container(test_settings: Settings) -> Container:
    """Install a fresh global container for the test."""
    return configure(test_settings)


# Matcher fixtures


@pytest.fixture
def matcher() -> QueryMatcher:
    """Create a matcher with the default window."""
    return QueryMatcher()


@pytest.fixture
def mock_matcher() -> MatcherProtocol:
    """Create a mock matcher implementing the protocol."""
    mock = MagicMock(spec=MatcherProtocol)
    mock.matches_page.return_value = True
    mock.terms_for.return_value = ()
    return mock


# Sample data fixtures


@pytest.fixture
def sample_records() -> list[Record]:
    """A handful of open tabs."""
    return [
        Record(title="Home Dash", url="https://github.com/mozilla/homeDash"),
        Record(title="Firefox Add-ons", url="https://addons.mozilla.org/en-US/firefox/"),
        Record(title="The CAT and DOG show", url="example.com"),
        Record(title="abcxyzdef", url="test.com"),
        Record(title="home page", url="http://www.example.org/home"),
    ]
