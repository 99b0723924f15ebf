"""ADR status vocabulary.

Five lifecycle states, each belonging to exactly one display category:

- Pending: proposed
- Active: accepted
- Inactive: rejected, deprecated, superseded

The declaration order below is load-bearing: it is the order of the
``/api/adr/statuses`` array and the numbering of the interactive menu.
"""

from __future__ import annotations

from enum import StrEnum

from adrctl.domain.errors import AdrError, ErrorKind


class StatusCategory(StrEnum):
    """Display grouping for statuses."""

    PENDING = "pending"
    ACTIVE = "active"
    INACTIVE = "inactive"


class Status(StrEnum):
    """Lifecycle state of an ADR.  String form is the capitalized name."""

    PROPOSED = "Proposed"
    ACCEPTED = "Accepted"
    REJECTED = "Rejected"
    DEPRECATED = "Deprecated"
    SUPERSEDED = "Superseded"

    @property
    def category(self) -> StatusCategory:
        return _CATEGORIES[self]


_CATEGORIES: dict[Status, StatusCategory] = {
    Status.PROPOSED: StatusCategory.PENDING,
    Status.ACCEPTED: StatusCategory.ACTIVE,
    Status.REJECTED: StatusCategory.INACTIVE,
    Status.DEPRECATED: StatusCategory.INACTIVE,
    Status.SUPERSEDED: StatusCategory.INACTIVE,
}

# Maximum edit distance for a "did you mean" suggestion.
SUGGESTION_MAX_DISTANCE = 3


def all_statuses() -> list[Status]:
    """All statuses in canonical order."""
    return list(Status)


def all_status_names() -> list[str]:
    """Capitalized status names in canonical order."""
    return [str(s) for s in Status]


def category(status: Status) -> StatusCategory:
    """Display category of *status*."""
    return status.category


def parse_status(text: str) -> Status | None:
    """Parse *text* into a :class:`Status`, case-insensitively.

    Matches when the trimmed text equals a status name or starts with
    ``"<name> "`` (so ``"Superseded by [ADR-0002](...)"`` parses).
    Returns None for empty or unrecognized input.

    Examples:
        >>> parse_status("ACCEPTED")
        <Status.ACCEPTED: 'Accepted'>
        >>> parse_status("superseded by ADR-0005")
        <Status.SUPERSEDED: 'Superseded'>
        >>> parse_status("unknown") is None
        True
    """
    lowered = text.strip().lower()
    if not lowered:
        return None
    for status in Status:
        name = status.value.lower()
        if lowered == name or lowered.startswith(name + " "):
            return status
    return None


def levenshtein(a: str, b: str) -> int:
    """Edit distance between *a* and *b* (two-row dynamic programming)."""
    if not a:
        return len(b)
    if not b:
        return len(a)

    prev = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        curr = [i] + [0] * len(b)
        for j, cb in enumerate(b, start=1):
            cost = 0 if ca == cb else 1
            curr[j] = min(curr[j - 1] + 1, prev[j] + 1, prev[j - 1] + cost)
        prev = curr
    return prev[len(b)]


def closest_status(text: str) -> tuple[str, int]:
    """Return ``(lower-case name, distance)`` of the status nearest to *text*."""
    lowered = text.lower()
    names = [name.lower() for name in all_status_names()]
    best = names[0]
    best_dist = levenshtein(lowered, best)
    for name in names[1:]:
        dist = levenshtein(lowered, name)
        if dist < best_dist:
            best, best_dist = name, dist
    return best, best_dist


def resolve_status_name(text: str) -> str:
    """Resolve user input to a lower-case status name.

    Only exact (case-insensitive) names are accepted.  Near misses raise
    an error carrying a suggestion; anything else lists the valid names.

    Raises:
        AdrError: ``INVALID`` if *text* is not a status name.
    """
    lowered = text.strip().lower()
    names = [name.lower() for name in all_status_names()]
    if lowered in names:
        return lowered

    best, dist = closest_status(lowered)
    if dist <= SUGGESTION_MAX_DISTANCE:
        msg = f"unknown status {text!r}, did you mean {best!r}?"
    else:
        msg = f"unknown status {text!r}, valid statuses: {', '.join(names)}"
    raise AdrError(ErrorKind.INVALID, msg)
