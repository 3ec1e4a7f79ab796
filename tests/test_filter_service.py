"""Tests for FilterService."""

import pytest

from page_match.models import Record
from page_match.search.matcher import QueryMatcher
from page_match.services.filter_service import FilterService


@pytest.fixture
def filter_service(matcher) -> FilterService:
    return FilterService(matcher=matcher)


class TestFilterSync:
    """Tests for filter_sync() with a real matcher."""

    def test_keeps_matching_records_in_order(self, filter_service, sample_records):
        """Matches are returned in input order."""
        outcome = filter_service.filter_sync("home", sample_records)

        assert [r.title for r in outcome.records] == ["Home Dash", "home page"]
        assert outcome.scanned_count == 5
        assert outcome.matched_count == 2
        assert outcome.query_terms == 1

    def test_empty_query_keeps_everything(self, filter_service, sample_records):
        """The empty query keeps every record and parses nothing."""
        outcome = filter_service.filter_sync("", sample_records)

        assert outcome.records == sample_records
        assert outcome.query_terms == 0
        assert filter_service.matcher.parse_count == 0

    def test_case_sensitive_query(self, filter_service, sample_records):
        """Uppercase terms narrow down to exact casing."""
        outcome = filter_service.filter_sync("Home", sample_records)
        assert [r.title for r in outcome.records] == ["Home Dash"]

    def test_limit(self, filter_service, sample_records):
        """Only the first limit matches are returned."""
        outcome = filter_service.filter_sync("home", sample_records, limit=1)

        assert [r.title for r in outcome.records] == ["Home Dash"]
        assert outcome.matched_count == 2

    def test_default_limit(self, sample_records):
        """The service default limit applies when none is given."""
        service = FilterService(matcher=QueryMatcher(), default_limit=1)
        outcome = service.filter_sync("", sample_records)
        assert len(outcome.records) == 1

    def test_query_parsed_once_per_keystroke(self, filter_service, sample_records):
        """Filtering many records parses each distinct query once."""
        for typed in ["h", "ho", "ho", "hom", "home"]:
            filter_service.filter_sync(typed, sample_records)

        assert filter_service.matcher.parse_count == 4

    def test_no_matches(self, filter_service, sample_records):
        """A query nothing matches returns no records."""
        outcome = filter_service.filter_sync("xyz", sample_records)
        assert outcome.records == []
        assert outcome.matched_count == 0


class TestFilterWithMock:
    """Tests for filter_sync() with a mocked matcher."""

    def test_asks_matcher_for_every_record(self, mock_matcher, sample_records):
        """Each record is checked with the raw query."""
        service = FilterService(matcher=mock_matcher)
        service.filter_sync("cat", sample_records)

        assert mock_matcher.matches_page.call_count == len(sample_records)
        mock_matcher.matches_page.assert_any_call("cat", sample_records[0])

    def test_rejected_records_dropped(self, mock_matcher, sample_records):
        """Records the matcher rejects are not returned."""
        mock_matcher.matches_page.side_effect = lambda query, record: record.url == "test.com"
        service = FilterService(matcher=mock_matcher)

        outcome = service.filter_sync("xyz", sample_records)
        assert outcome.records == [Record(title="abcxyzdef", url="test.com")]


class TestFilterAsync:
    """Tests for the async filter()."""

    @pytest.mark.asyncio
    async def test_filter_returns_matches(self, filter_service, sample_records):
        """filter() gives the same result as filter_sync()."""
        outcome = await filter_service.filter("cat dog", sample_records)
        assert [r.title for r in outcome.records] == ["The CAT and DOG show"]

    @pytest.mark.asyncio
    async def test_filter_accepts_generators(self, filter_service, sample_records):
        """Records may come from any iterable."""
        outcome = await filter_service.filter("firefox", (r for r in sample_records))
        assert outcome.scanned_count == len(sample_records)
        assert [r.title for r in outcome.records] == ["Firefox Add-ons"]
