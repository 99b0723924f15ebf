"""Tests for the ADR record and assembler."""

from __future__ import annotations

import datetime as dt

import pytest

from adrctl.domain.errors import AdrError, ErrorKind
from adrctl.domain.records import ADR, Metadata, assemble, first_non_empty_line, parse_date
from adrctl.domain.status import Status


class TestADR:
    def test_new_is_proposed_today(self) -> None:
        record = ADR.new(3, "Use Go")
        assert record.number == 3
        assert record.status is Status.PROPOSED
        assert record.date == dt.date.today()

    def test_frozen(self) -> None:
        record = ADR.new(1, "A")
        with pytest.raises(ValueError):
            record.title = "B"  # type: ignore[misc]

    def test_summary_shapes(self) -> None:
        record = ADR(number=1, title="A", status=Status.ACCEPTED, date=dt.date(2024, 1, 5))
        assert record.summary() == {
            "number": 1,
            "title": "A",
            "status": "Accepted",
            "date": "2024-01-05",
        }
        assert record.detail()["content"] == ""

    def test_unknown_date_is_empty_string(self) -> None:
        assert ADR(number=1, title="A").summary()["date"] == ""


class TestAssemble:
    def test_uses_heading_number(self) -> None:
        record = assemble(Metadata(number=7, title="A", status="Accepted"), 99)
        assert record.number == 7

    def test_falls_back_to_filename_number(self) -> None:
        assert assemble(Metadata(title="A"), 4).number == 4

    def test_non_positive_number_is_invalid(self) -> None:
        with pytest.raises(AdrError) as exc_info:
            assemble(Metadata(title="A"), 0)
        assert exc_info.value.kind is ErrorKind.INVALID

    def test_empty_status_is_proposed(self) -> None:
        assert assemble(Metadata(title="A"), 1).status is Status.PROPOSED

    def test_first_line_names_status(self) -> None:
        meta = Metadata(title="A", status="Accepted\n\nSupersedes [ADR-0001](0001-a.md)")
        assert assemble(meta, 2).status is Status.ACCEPTED

    def test_madr_supersedes_suffix(self) -> None:
        meta = Metadata(
            title="A", status="proposed, supersedes [ADR-0001](0001-a.md)", dialect="madr"
        )
        assert assemble(meta, 2).status is Status.PROPOSED

    def test_nygard_status_keeps_comma(self) -> None:
        meta = Metadata(title="A", status="Accepted, with caveats", dialect="nygard")
        with pytest.raises(AdrError) as exc_info:
            assemble(meta, 1)
        assert exc_info.value.kind is ErrorKind.INVALID

    def test_comma_without_dialect_is_invalid(self) -> None:
        with pytest.raises(AdrError):
            assemble(Metadata(title="A", status="proposed, supersedes x"), 1)

    def test_superseded_by(self) -> None:
        meta = Metadata(title="A", status="Superseded by [ADR-0002](0002-b.md)")
        assert assemble(meta, 1).status is Status.SUPERSEDED

    def test_unparseable_status(self) -> None:
        with pytest.raises(AdrError) as exc_info:
            assemble(Metadata(title="A", status="What is the status?"), 1)
        assert exc_info.value.kind is ErrorKind.INVALID
        assert "What is the status?" in exc_info.value.message

    def test_bad_date_is_none(self) -> None:
        assert assemble(Metadata(title="A", date="someday"), 1).date is None
        assert assemble(Metadata(title="A", date="2024-13-01"), 1).date is None


class TestHelpers:
    def test_first_non_empty_line(self) -> None:
        assert first_non_empty_line("\n\n  Accepted  \nmore") == "Accepted"
        assert first_non_empty_line("   \n") == ""

    def test_parse_date(self) -> None:
        assert parse_date("2024-01-15") == dt.date(2024, 1, 15)
        assert parse_date("") is None
        assert parse_date("2024-1-5") is None
        assert parse_date("2024-01-15T10:00") is None

    @pytest.mark.parametrize("text", ["2024-W01-1", "20240115", "2024-02-30", "2024-01-15\n"])
    def test_parse_date_rejects_other_iso_forms(self, text: str) -> None:
        assert parse_date(text) is None
