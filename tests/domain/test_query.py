"""Tests for filtering and counting records."""

from __future__ import annotations

from adrctl.domain.query import count_by_status, filter_by_query
from adrctl.domain.records import ADR
from adrctl.domain.status import Status

RECORDS = [
    ADR(number=12, title="A"),
    ADR(number=123, title="B"),
    ADR(number=2, title="Rule 12a"),
]


class TestFilterByQuery:
    def test_number_or_title(self) -> None:
        result = filter_by_query(RECORDS, "12")
        assert [r.number for r in result] == [12, 2]

    def test_title_case_insensitive(self) -> None:
        assert [r.number for r in filter_by_query(RECORDS, "rule")] == [2]

    def test_blank_query_returns_all(self) -> None:
        assert filter_by_query(RECORDS, "   ") == RECORDS

    def test_no_duplicates(self) -> None:
        records = [ADR(number=7, title="Chapter 7")]
        assert len(filter_by_query(records, "7")) == 1

    def test_no_match(self) -> None:
        assert filter_by_query(RECORDS, "zzz") == []


class TestCountByStatus:
    def test_every_status_present(self) -> None:
        counts = count_by_status(
            [
                ADR(number=1, title="a", status=Status.ACCEPTED),
                ADR(number=2, title="b", status=Status.ACCEPTED),
                ADR(number=3, title="c", status=Status.SUPERSEDED),
            ]
        )
        assert list(counts) == list(Status)
        assert counts[Status.ACCEPTED] == 2
        assert counts[Status.SUPERSEDED] == 1
        assert counts[Status.PROPOSED] == 0
        assert sum(counts.values()) == 3

    def test_empty(self) -> None:
        assert set(count_by_status([]).values()) == {0}
