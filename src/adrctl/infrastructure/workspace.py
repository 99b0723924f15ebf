"""Workspace — the single dependency injected into every service.

Resolves the project config, the ADR directory and the repository once
per invocation.  Everything is lazy so ``adrctl init`` can run in a
directory that has no ``.adr.json`` yet.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from adrctl.config.discovery import load_config
from adrctl.domain.errors import AdrError, ErrorKind
from adrctl.infrastructure.filesystem import FileRepository, read_adr_file

if TYPE_CHECKING:
    from adrctl.config.models import AdrConfig
    from adrctl.config.settings import AdrSettings

logger = logging.getLogger(__name__)


class Workspace:
    """A project root plus its ``.adr.json`` and ADR directory."""

    def __init__(self, settings: AdrSettings) -> None:
        self._settings = settings
        self._config: AdrConfig | None = None
        self._repository: FileRepository | None = None

    @property
    def settings(self) -> AdrSettings:
        return self._settings

    @property
    def root(self) -> Path:
        return self._settings.project_root

    @property
    def config(self) -> AdrConfig:
        """The loaded ``.adr.json`` (raises ``NOT_FOUND`` before ``init``)."""
        if self._config is None:
            self._config = load_config(self.root, path=self._settings.config_path)
        return self._config

    @property
    def adr_dir(self) -> Path:
        """The configured ADR directory, resolved against the project root."""
        return self.root / self.config.directory

    @property
    def repository(self) -> FileRepository:
        """Repository over :attr:`adr_dir`; the directory must exist."""
        if self._repository is None:
            directory = self.adr_dir
            if not directory.is_dir():
                msg = f"ADR directory {str(directory)!r} not found"
                raise AdrError(ErrorKind.NOT_FOUND, msg, path=directory)
            self._repository = FileRepository(directory)
            logger.debug("Using ADR directory %s", directory)
        return self._repository

    def template_path(self) -> Path:
        return self.adr_dir / self.config.template_file

    def template_text(self) -> str:
        """Contents of the project's template file."""
        return read_adr_file(self.template_path())
