"""Status rewriting for the two ADR dialects.

Documents carry their status in one of two places:

- Nygard: the body of a ``## Status`` section, running from the heading to
  the next ``\\n\\n## `` boundary (or end of file).
- MADR: a ``status:`` key inside the leading ``---`` frontmatter block.

Every function here is a pure ``str -> str`` transform working on raw
text.  Only the status region is touched; all other bytes are preserved.
When both carriers exist the Nygard section wins.

Superseding is deliberately asymmetric: :func:`set_superseded_by`
overwrites whatever status was there, while :func:`set_supersedes`
appends references below the existing status.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

from adrctl.domain.errors import AdrError, ErrorKind
from adrctl.domain.frontmatter import frontmatter_bounds, strip_quotes
from adrctl.domain.status import Status, parse_status

STATUS_HEADING_PATTERN = re.compile(r"^## Status[ \t]*$", re.MULTILINE)
FRONTMATTER_STATUS_PATTERN = re.compile(r"^status:[ \t]*(.*)$", re.MULTILINE)

_SECTION_BOUNDARY = "\n\n## "
_NO_CARRIER = "no status section found: expected ## Status heading or status: in YAML frontmatter"


@dataclass(frozen=True)
class SupersedesLink:
    """Cross-reference to another ADR file."""

    number: int
    filename: str

    def markdown(self) -> str:
        """Inline link, e.g. ``[ADR-0002](0002-use-postgres.md)``."""
        return f"[ADR-{self.number:04d}]({self.filename})"


# ---------------------------------------------------------------------------
# Nygard: ## Status section
# ---------------------------------------------------------------------------


def has_status_section(content: str) -> bool:
    """True if *content* has a ``## Status`` heading line."""
    return STATUS_HEADING_PATTERN.search(content) is not None


def _section_span(content: str) -> tuple[int, int] | None:
    """``(after_heading, end)`` of the status section body, end exclusive."""
    match = STATUS_HEADING_PATTERN.search(content)
    if match is None:
        return None
    after = match.end()
    boundary = content.find(_SECTION_BOUNDARY, after)
    return after, (boundary if boundary >= 0 else len(content))


def replace_status_section_content(content: str, new_content: str) -> str:
    """Replace the body of the ``## Status`` section with *new_content*.

    The blank line and heading that follow the section are kept intact.
    When the section runs to end of file, the result ends with a single
    newline.  Content without a status heading is returned unchanged.
    """
    span = _section_span(content)
    if span is None:
        return content
    after, end = span
    if end == len(content):
        return content[:after] + "\n\n" + new_content + "\n"
    return content[:after] + "\n\n" + new_content + content[end:]


def extract_status_section_content(content: str) -> str:
    """Trimmed body of the ``## Status`` section, or ``""``."""
    span = _section_span(content)
    if span is None:
        return ""
    after, end = span
    return content[after:end].strip()


def append_to_status_section_content(content: str, extra: str) -> str:
    """Add *extra* below the current section body, separated by a blank line."""
    existing = extract_status_section_content(content)
    if not existing:
        return replace_status_section_content(content, extra)
    return replace_status_section_content(content, existing + "\n\n" + extra)


# ---------------------------------------------------------------------------
# MADR: status: key in frontmatter
# ---------------------------------------------------------------------------


def has_frontmatter_status(content: str) -> bool:
    """True if the frontmatter block (and only it) has a ``status:`` line."""
    bounds = frontmatter_bounds(content)
    if bounds is None:
        return False
    start, end, _after = bounds
    return FRONTMATTER_STATUS_PATTERN.search(content, start, end) is not None


def get_frontmatter_status_value(content: str) -> str:
    """Value of the frontmatter ``status:`` key with quotes stripped."""
    bounds = frontmatter_bounds(content)
    if bounds is None:
        return ""
    start, end, _after = bounds
    match = FRONTMATTER_STATUS_PATTERN.search(content, start, end)
    if match is None:
        return ""
    return strip_quotes(match.group(1).strip())


def replace_frontmatter_status(content: str, new_value: str) -> str:
    """Rewrite the frontmatter ``status:`` line as ``status: "<new_value>"``.

    Look-alike ``status:`` lines in the body are never touched.
    """
    bounds = frontmatter_bounds(content)
    if bounds is None:
        return content
    start, end, _after = bounds
    match = FRONTMATTER_STATUS_PATTERN.search(content, start, end)
    if match is None:
        return content
    return content[: match.start()] + f'status: "{new_value}"' + content[match.end() :]


# ---------------------------------------------------------------------------
# Dialects
# ---------------------------------------------------------------------------


class StatusDialect:
    """Capabilities shared by the two status carriers."""

    name: str = ""

    def detect(self, content: str) -> bool:
        raise NotImplementedError

    def extract_status(self, content: str) -> str:
        raise NotImplementedError

    def replace_status(self, content: str, text: str) -> str:
        raise NotImplementedError

    def status_text(self, status: Status) -> str:
        """How *status* is spelled inside this dialect's carrier."""
        raise NotImplementedError

    def superseded_by(self, content: str, link: SupersedesLink) -> str:
        raise NotImplementedError

    def add_supersedes(self, content: str, links: Sequence[SupersedesLink]) -> str:
        raise NotImplementedError

    def set_first_status(self, content: str, status: Status) -> str:
        raise NotImplementedError


class NygardDialect(StatusDialect):
    """``## Status`` heading followed by free text."""

    name = "nygard"

    def detect(self, content: str) -> bool:
        return has_status_section(content)

    def extract_status(self, content: str) -> str:
        return extract_status_section_content(content)

    def replace_status(self, content: str, text: str) -> str:
        return replace_status_section_content(content, text)

    def status_text(self, status: Status) -> str:
        return str(status)

    def superseded_by(self, content: str, link: SupersedesLink) -> str:
        return self.replace_status(content, "Superseded by " + link.markdown())

    def add_supersedes(self, content: str, links: Sequence[SupersedesLink]) -> str:
        lines = "\n".join("Supersedes " + link.markdown() for link in links)
        return append_to_status_section_content(content, lines)

    def set_first_status(self, content: str, status: Status) -> str:
        existing = self.extract_status(content)
        first, sep, rest = existing.partition("\n")
        if not first:
            return self.replace_status(content, self.status_text(status))
        return self.replace_status(content, self.status_text(status) + sep + rest)


class MadrDialect(StatusDialect):
    """``status:`` key in YAML frontmatter, lower-case and double-quoted."""

    name = "madr"

    def detect(self, content: str) -> bool:
        return has_frontmatter_status(content)

    def extract_status(self, content: str) -> str:
        return get_frontmatter_status_value(content)

    def replace_status(self, content: str, text: str) -> str:
        return replace_frontmatter_status(content, text)

    def status_text(self, status: Status) -> str:
        return str(status).lower()

    def superseded_by(self, content: str, link: SupersedesLink) -> str:
        return self.replace_status(content, "superseded by " + link.markdown())

    def add_supersedes(self, content: str, links: Sequence[SupersedesLink]) -> str:
        refs = ", ".join(link.markdown() for link in links)
        return self.replace_status(content, f"{self.extract_status(content)}, supersedes {refs}")

    def set_first_status(self, content: str, status: Status) -> str:
        # "proposed, supersedes [...]" keeps everything from the first comma
        _word, sep, rest = self.extract_status(content).partition(",")
        return self.replace_status(content, self.status_text(status) + sep + rest)


DIALECTS: tuple[StatusDialect, ...] = (NygardDialect(), MadrDialect())


def detect_dialect(content: str) -> StatusDialect | None:
    """First dialect whose status carrier is present in *content*."""
    for dialect in DIALECTS:
        if dialect.detect(content):
            return dialect
    return None


def _require_dialect(content: str) -> StatusDialect:
    dialect = detect_dialect(content)
    if dialect is None:
        raise AdrError(ErrorKind.INVALID, _NO_CARRIER)
    return dialect


# ---------------------------------------------------------------------------
# Public rewrites
# ---------------------------------------------------------------------------


def set_superseded_by(content: str, link: SupersedesLink) -> str:
    """Replace the status with "superseded by *link*".

    Any prior status text, including an earlier supersession, is dropped.

    Raises:
        AdrError: ``INVALID`` if the document has no status carrier.
    """
    return _require_dialect(content).superseded_by(content, link)


def set_supersedes(content: str, links: Sequence[SupersedesLink]) -> str:
    """Append "supersedes" references for *links* below the current status.

    Raises:
        AdrError: ``INVALID`` if the document has no status carrier.
    """
    return _require_dialect(content).add_supersedes(content, links)


def update_status(content: str, status_name: str) -> str:
    """Set the status word to *status_name*, keeping trailing references.

    Only the first line of the Nygard section (or the leading word of the
    MADR value) changes; "Supersedes ..." lines stay verbatim.

    Raises:
        AdrError: ``INVALID`` for an unknown status name or a document
            without a status carrier.
    """
    status = parse_status(status_name)
    if status is None:
        raise AdrError(ErrorKind.INVALID, f"invalid status {status_name!r}")
    return _require_dialect(content).set_first_status(content, status)


def set_status(content: str, status: Status) -> str:
    """Overwrite the whole status carrier with *status*, if one exists."""
    dialect = detect_dialect(content)
    if dialect is None:
        return content
    return dialect.replace_status(content, dialect.status_text(status))
