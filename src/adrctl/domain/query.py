"""Filtering and counting over lists of records."""

from __future__ import annotations

from collections.abc import Sequence

from adrctl.domain.records import ADR
from adrctl.domain.status import Status, all_statuses


def filter_by_query(records: Sequence[ADR], query: str) -> list[ADR]:
    """Records whose title contains *query* (case-insensitive).

    An all-digit query also matches the record with exactly that number.
    Each record appears at most once, in input order.  A blank query
    returns every record.

    Examples:
        Given records 12 "A", 123 "B" and 2 "Rule 12a", the query ``"12"``
        returns 12 (number match) and 2 (title match), but not 123.
    """
    query = query.strip()
    if not query:
        return list(records)

    lowered = query.lower()
    number = int(query) if query.isascii() and query.isdigit() else None

    result: list[ADR] = []
    for record in records:
        if lowered in record.title.lower() or (number is not None and record.number == number):
            result.append(record)
    return result


def count_by_status(records: Sequence[ADR]) -> dict[Status, int]:
    """Tally *records* per status.  Every status has an entry, even zero."""
    counts = dict.fromkeys(all_statuses(), 0)
    for record in records:
        counts[record.status] += 1
    return counts
