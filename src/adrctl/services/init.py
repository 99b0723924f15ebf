"""InitService — project scaffolding.

Pipeline: VALIDATE → PREFLIGHT → WRITE

All checks run before anything touches the disk, so a refused init
leaves the directory exactly as it was.
"""

from __future__ import annotations

import logging
from pathlib import Path, PurePath

from adrctl.config.discovery import CONFIG_FILENAME, save_config
from adrctl.config.models import (
    CONFIG_VERSION,
    DEFAULT_TEMPLATE_FILE,
    AdrConfig,
    TemplateName,
)
from adrctl.domain.errors import AdrError, ErrorKind
from adrctl.infrastructure.filesystem import write_adr_file
from adrctl.infrastructure.templates import template_content
from adrctl.services.base import BaseService
from adrctl.services.result import ServiceResult
from adrctl.services.telemetry import traced

logger = logging.getLogger(__name__)


def validate_template_file(name: str) -> None:
    """Check that *name* is a bare ``.md`` file name.

    Raises:
        AdrError: ``INVALID`` for an empty name, a name with path
            separators, or a non-``.md`` extension.
    """
    if not name:
        raise AdrError(ErrorKind.INVALID, "template file name must not be empty")
    if "/" in name or "\\" in name:
        msg = f"template file name must not contain path separators: {name!r}"
        raise AdrError(ErrorKind.INVALID, msg)
    if PurePath(name).suffix != ".md":
        msg = f"template file name must have .md extension: {name!r}"
        raise AdrError(ErrorKind.INVALID, msg)


class InitService(BaseService):
    """Handles ``adrctl init``.

    Init runs before a workspace exists, so the entry point is a static
    method taking the project root directly.
    """

    @staticmethod
    @traced
    def init_project(
        root: Path,
        *,
        directory: str = ".",
        template: str = str(TemplateName.NYGARD),
        template_file: str = DEFAULT_TEMPLATE_FILE,
        force: bool = False,
    ) -> ServiceResult:
        """Create the ADR directory, its template file, and ``.adr.json``.

        Args:
            root: Project root; ``.adr.json`` is written here.
            directory: ADR directory, relative to *root* (or absolute).
            template: Packaged template name.
            template_file: File name for the template inside *directory*.
            force: Overwrite an existing config or template.
        """
        op = "init"
        try:
            # ── VALIDATE ─────────────────────────────────────────
            validate_template_file(template_file)
            content = template_content(template, project_root=root)

            # ── PREFLIGHT ────────────────────────────────────────
            config_path = root / CONFIG_FILENAME
            if config_path.exists() and not force:
                msg = f"config already exists at {str(config_path)!r}, use --force to overwrite"
                raise AdrError(ErrorKind.INVALID, msg, path=config_path)

            adr_dir = root / directory
            template_path = adr_dir / template_file
            if template_path.exists() and not force:
                msg = (
                    f"template already exists at {str(template_path)!r}, "
                    "use --force to overwrite"
                )
                raise AdrError(ErrorKind.INVALID, msg, path=template_path)

            # ── WRITE ────────────────────────────────────────────
            try:
                adr_dir.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                msg = f"creating directory {directory!r}: {exc}"
                raise AdrError(ErrorKind.IO_FAILURE, msg, path=adr_dir) from exc
            write_adr_file(template_path, content)

            config = AdrConfig(
                version=CONFIG_VERSION,
                directory=directory,
                template=template,
                template_file=template_file,
            )
            save_config(root, config)
        except AdrError as exc:
            return BaseService._failure(op, exc)

        logger.debug("Initialized %s with template %s", adr_dir, template)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "directory": directory,
                "template": template,
                "template_file": str(template_path),
                "config": str(config_path),
            },
        )
