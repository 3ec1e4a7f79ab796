#!/usr/bin/env python3
"""Benchmark incremental search with and without a shared session matcher.

Replays a query typed one keystroke at a time, filtering the same page list
after every keystroke, like a search box narrowing down open tabs.

Measures:
- Query parses performed
- Time spent filtering
- Pages left after the final keystroke
"""

import random
import string
import time
from dataclasses import dataclass

from page_match.config import Settings
from page_match.container import Container
from page_match.models import Record
from page_match.search.matcher import QueryMatcher

WORDS = [
    "home", "dash", "mozilla", "firefox", "add-ons", "developer", "network",
    "Search", "Results", "python", "docs", "tutorial", "GitHub", "issues",
]


@dataclass
class BenchmarkResult:
    """Result of one replay."""

    approach: str
    keystrokes: int
    parses: int
    time_seconds: float
    final_matches: int


def make_records(count: int, seed: int = 7) -> list[Record]:
    """Build synthetic pages from a fixed vocabulary."""
    rng = random.Random(seed)
    records = []
    for i in range(count):
        title = " ".join(rng.choice(WORDS) for _ in range(rng.randint(2, 6)))
        host = "".join(rng.choice(string.ascii_lowercase) for _ in range(8))
        records.append(Record(title=title, url=f"https://www.{host}.com/page/{i}"))
    return records


def keystrokes(query: str) -> list[str]:
    """Every prefix of the query, as typed."""
    return [query[: i + 1] for i in range(len(query))]


def replay_shared(query: str, records: list[Record]) -> BenchmarkResult:
    """One matcher for the whole typing session."""
    container = Container(Settings())
    service = container.create_filter_service("bench")

    start = time.perf_counter()
    outcome = None
    for typed in keystrokes(query):
        outcome = service.filter_sync(typed, records)
    elapsed = time.perf_counter() - start

    return BenchmarkResult(
        approach="shared",
        keystrokes=len(query),
        parses=container.get_matcher("bench").parse_count,
        time_seconds=elapsed,
        final_matches=outcome.matched_count if outcome else 0,
    )


def replay_fresh(query: str, records: list[Record]) -> BenchmarkResult:
    """A new matcher for every record, so nothing is reused."""
    parses = 0
    start = time.perf_counter()
    matched = 0
    for typed in keystrokes(query):
        matched = 0
        for record in records:
            matcher = QueryMatcher()
            if matcher.matches_page(typed, record):
                matched += 1
            parses += matcher.parse_count
    elapsed = time.perf_counter() - start

    return BenchmarkResult(
        approach="fresh",
        keystrokes=len(query),
        parses=parses,
        time_seconds=elapsed,
        final_matches=matched,
    )


def print_result(result: BenchmarkResult) -> None:
    print(
        f"  {result.approach:<8} keystrokes={result.keystrokes:<3} parses={result.parses:<7} "
        f"time={result.time_seconds * 1000:8.1f}ms matches={result.final_matches}"
    )


def main() -> None:
    records = make_records(5000)

    for query in ["fire dev", "GitHub iss", "https://www.mozilla add"]:
        print(f"Query: {query!r} over {len(records)} pages")
        print_result(replay_shared(query, records))
        print_result(replay_fresh(query, records))
        print()


if __name__ == "__main__":
    main()
