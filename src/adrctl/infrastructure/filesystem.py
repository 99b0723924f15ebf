"""File-backed ADR repository.

INVARIANT: Files are truth. Every read goes to disk and every mutation is
a read -> pure rewrite -> write cycle; nothing is cached between calls.

Pure parsing/rewriting lives in :mod:`adrctl.domain` (correct dependency
direction: infrastructure -> domain). This module handles the actual file
I/O, file discovery, and the write ordering of multi-file operations.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from adrctl.domain.errors import AdrError, ErrorKind
from adrctl.domain.extract import extract_metadata
from adrctl.domain.records import ADR, assemble
from adrctl.domain.render import render_template
from adrctl.domain.rewrite import SupersedesLink, set_superseded_by, set_supersedes, update_status
from adrctl.domain.slug import format_filename, parse_filename

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# File I/O
# ---------------------------------------------------------------------------


def read_adr_file(path: Path) -> str:
    """Read *path* as UTF-8, wrapping OS errors as ``IO_FAILURE``."""
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise AdrError(ErrorKind.IO_FAILURE, f"reading {path.name!r}: {exc}", path=path) from exc


def write_adr_file(path: Path, content: str) -> None:
    """Write *content* to *path* as UTF-8, wrapping OS errors as ``IO_FAILURE``."""
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise AdrError(ErrorKind.IO_FAILURE, f"writing {path.name!r}: {exc}", path=path) from exc


@dataclass
class _PendingWrite:
    """A computed file write, applied only after every rewrite succeeded."""

    path: Path
    content: str
    backup: str | None = field(default=None, repr=False)  # None for creates

    def rollback(self) -> None:
        """Undo this write (best-effort)."""
        try:
            if self.backup is not None:
                self.path.write_text(self.backup, encoding="utf-8")
            else:
                self.path.unlink(missing_ok=True)
        except OSError:
            logger.warning("Failed to roll back write to %s", self.path)


def _apply_writes(writes: list[_PendingWrite]) -> None:
    """Apply *writes* in order; on failure, undo the ones already written."""
    done: list[_PendingWrite] = []
    for write in writes:
        try:
            write_adr_file(write.path, write.content)
        except AdrError:
            for applied in reversed(done):
                applied.rollback()
            raise
        done.append(write)
        logger.debug("Wrote %s", write.path)


# ---------------------------------------------------------------------------
# Discovery
# ---------------------------------------------------------------------------


def _scan(directory: Path) -> list[tuple[int, Path]]:
    """``(number, path)`` for every ADR file in *directory*, unsorted."""
    try:
        entries = list(directory.iterdir())
    except OSError as exc:
        msg = f"reading directory {str(directory)!r}: {exc}"
        raise AdrError(ErrorKind.IO_FAILURE, msg, path=directory) from exc

    found: list[tuple[int, Path]] = []
    for entry in entries:
        parsed = parse_filename(entry.name)
        if parsed is None or not entry.is_file():
            continue
        found.append((parsed[0], entry))
    return found


def next_number(directory: Path) -> int:
    """Highest numeric prefix in *directory* plus one, or 1 when empty."""
    return max((number for number, _path in _scan(directory)), default=0) + 1


def find_adr_file(directory: Path, number: int) -> Path:
    """The unique ADR file in *directory* whose prefix equals *number*.

    Raises:
        AdrError: ``NOT_FOUND`` when no file matches, ``INVALID`` when
            more than one does.
    """
    matches = sorted(path for n, path in _scan(directory) if n == number)
    if not matches:
        raise AdrError(ErrorKind.NOT_FOUND, f"ADR {number:04d} not found", number=number)
    if len(matches) > 1:
        names = ", ".join(p.name for p in matches)
        msg = f"ADR {number:04d} is ambiguous: {names}"
        raise AdrError(ErrorKind.INVALID, msg, number=number)
    return matches[0]


def _parse(content: str, number: int) -> ADR:
    record = assemble(extract_metadata(content), number)
    return record.model_copy(update={"content": content})


# ---------------------------------------------------------------------------
# Repository
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class CreatedAdr:
    """Outcome of :meth:`FileRepository.create`."""

    record: ADR
    path: Path
    superseded: tuple[Path, ...] = ()


class FileRepository:
    """ADRs stored as ``NNNN-slug.md`` files in a single directory.

    Usage::

        repo = FileRepository(Path("docs/adr"))
        for record in repo.list():
            ...
        repo.supersede(1, 3)
    """

    def __init__(self, directory: Path) -> None:
        self._directory = directory

    @property
    def directory(self) -> Path:
        return self._directory

    def list(self) -> list[ADR]:
        """Every parseable ADR, sorted by number.

        Files that cannot be read or assembled are skipped. A missing
        directory is an ``IO_FAILURE``.
        """
        records: list[ADR] = []
        for number, path in _scan(self._directory):
            try:
                content = read_adr_file(path)
                records.append(assemble(extract_metadata(content), number))
            except AdrError as exc:
                logger.debug("Skipping %s: %s", path.name, exc.message)
        records.sort(key=lambda r: r.number)
        return records

    def get(self, number: int) -> ADR:
        """The ADR with *number*, with its raw content attached."""
        path = find_adr_file(self._directory, number)
        return _parse(read_adr_file(path), number)

    def next_number(self) -> int:
        return next_number(self._directory)

    def find_file(self, number: int) -> Path:
        return find_adr_file(self._directory, number)

    def update_status(self, number: int, status_name: str) -> ADR:
        """Rewrite the status of ADR *number* to *status_name*.

        Only the first status line changes; supersede references stay.
        """
        path = find_adr_file(self._directory, number)
        updated = update_status(read_adr_file(path), status_name)
        write_adr_file(path, updated)
        logger.debug("Updated status of %s to %s", path.name, status_name)
        return _parse(updated, number)

    def supersede(self, superseded: int, superseding: int) -> ADR:
        """Mark ADR *superseded* as replaced by ADR *superseding*.

        Both rewrites are computed before anything is written. The
        superseding file is written first, so a failure there leaves the
        superseded file untouched.

        Returns:
            The updated superseded record.
        """
        if superseded == superseding:
            msg = f"ADR {superseded:04d} cannot supersede itself"
            raise AdrError(ErrorKind.INVALID, msg, number=superseded)

        old_path = find_adr_file(self._directory, superseded)
        new_path = find_adr_file(self._directory, superseding)
        old_content = read_adr_file(old_path)
        new_content = read_adr_file(new_path)

        updated_old = set_superseded_by(
            old_content, SupersedesLink(number=superseding, filename=new_path.name)
        )
        updated_new = set_supersedes(
            new_content, [SupersedesLink(number=superseded, filename=old_path.name)]
        )

        _apply_writes(
            [
                _PendingWrite(new_path, updated_new, backup=new_content),
                _PendingWrite(old_path, updated_old, backup=old_content),
            ]
        )
        logger.debug("ADR %04d superseded by %04d", superseded, superseding)
        return _parse(updated_old, superseded)

    def create(
        self,
        title: str,
        template_text: str,
        supersedes: Iterable[int] = (),
    ) -> CreatedAdr:
        """Render *template_text* into the next numbered ADR file.

        When *supersedes* names existing ADRs, every rewrite is computed up
        front; the new file is written first and each superseded file after
        it.

        Raises:
            AdrError: ``INVALID`` for a non-positive ID or an empty slug,
                ``NOT_FOUND`` for an unknown superseded ADR.
        """
        ids = normalize_ids(supersedes)
        number = self.next_number()
        filename = format_filename(number, title)
        path = self._directory / filename
        if path.exists():
            msg = f"ADR file {filename!r} already exists"
            raise AdrError(ErrorKind.INVALID, msg, path=path)

        record = ADR.new(number, title)
        rendered = render_template(template_text, record)

        writes: list[_PendingWrite] = []
        links: list[SupersedesLink] = []
        new_link = SupersedesLink(number=number, filename=filename)
        for old_id in ids:
            try:
                old_path = find_adr_file(self._directory, old_id)
            except AdrError as exc:
                msg = f"cannot supersede ADR {old_id:04d}: {exc.message}"
                raise AdrError(exc.kind, msg, number=old_id) from exc
            old_content = read_adr_file(old_path)
            links.append(SupersedesLink(number=old_id, filename=old_path.name))
            writes.append(
                _PendingWrite(old_path, set_superseded_by(old_content, new_link), old_content)
            )

        if links:
            rendered = set_supersedes(rendered, links)

        _apply_writes([_PendingWrite(path, rendered), *writes])
        logger.debug("Created %s", path)
        return CreatedAdr(
            record=_parse(rendered, number),
            path=path,
            superseded=tuple(w.path for w in writes),
        )


def normalize_ids(ids: Iterable[int]) -> list[int]:
    """Deduplicated, sorted ADR IDs.

    Raises:
        AdrError: ``INVALID`` for a non-positive ID.
    """
    seen: set[int] = set()
    for value in ids:
        if value <= 0:
            msg = f"invalid ADR ID {value}: must be positive"
            raise AdrError(ErrorKind.INVALID, msg, number=value)
        seen.add(value)
    return sorted(seen)
