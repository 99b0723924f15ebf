"""Tests for terminal rendering of ADR markdown."""

from rich.text import Text

from adrctl.output.markdown import format_adr


def _styles_of(text: Text, fragment: str) -> set[str]:
    """Styles of every span overlapping the first occurrence of *fragment*."""
    start = text.plain.index(fragment)
    end = start + len(fragment)
    return {str(span.style) for span in text.spans if span.start < end and span.end > start}


NYGARD = (
    "# 1. Use Postgres\n\nDate: 2024-01-15\n\n## Status\n\nAccepted\n\n"
    "Supersedes [ADR-0001](0001-old.md)\n\n## Context\n\n- one\n  * two\n"
)


class TestFormatAdr:
    def test_plain_text_preserved(self) -> None:
        out = format_adr(NYGARD)
        assert "# 1. Use Postgres" in out.plain
        assert "Date: 2024-01-15" in out.plain
        assert "Supersedes [ADR-0001](0001-old.md)" in out.plain

    def test_heading_styles(self) -> None:
        out = format_adr(NYGARD)
        assert _styles_of(out, "# 1. Use Postgres") == {"adr.h1"}
        assert _styles_of(out, "## Context") == {"adr.heading"}

    def test_date_dimmed(self) -> None:
        assert _styles_of(format_adr(NYGARD), "Date: 2024-01-15") == {"adr.dim"}

    def test_status_line_styled(self) -> None:
        assert _styles_of(format_adr(NYGARD), "Accepted") == {"adr.status.active"}

    def test_bullets(self) -> None:
        out = format_adr(NYGARD)
        assert "• one" in out.plain
        assert "  • two" in out.plain

    def test_links_styled(self) -> None:
        out = format_adr("See [ADR-0003](0003-x.md) for more.")
        assert out.plain == "See ADR-0003(0003-x.md) for more."
        assert _styles_of(out, "ADR-0003") == {"adr.link"}
        assert _styles_of(out, "(0003-x.md)") == {"adr.link.target"}

    def test_frontmatter_dimmed(self) -> None:
        out = format_adr('---\nstatus: "accepted"\n---\n\n# Title\n')
        assert _styles_of(out, 'status: "accepted"') == {"adr.dim"}
        assert _styles_of(out, "# Title") == {"adr.h1"}
