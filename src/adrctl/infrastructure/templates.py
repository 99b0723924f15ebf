"""Packaged ADR templates with per-project override support.

Templates are plain markdown with placeholder text, not Jinja markup: the
environment is only used to locate the source, and :func:`template_content`
returns it unrendered.
"""

from __future__ import annotations

from pathlib import Path

from jinja2 import (
    BaseLoader,
    ChoiceLoader,
    Environment,
    FileSystemLoader,
    PackageLoader,
    TemplateNotFound,
)

from adrctl.config.models import valid_template_names
from adrctl.domain.errors import AdrError, ErrorKind

TEMPLATE_GROUP = "adr"


def build_template_environment(
    group: str = TEMPLATE_GROUP, *, project_root: Path | None = None
) -> Environment:
    """Build a Jinja2 environment with user overrides before packaged defaults.

    User overrides are loaded from ``.adrctl/templates/`` inside the
    project. Both a namespaced directory (``.adrctl/templates/adr/``) and
    the shared root are searched.
    """

    loaders: list[BaseLoader] = []
    if project_root is not None:
        template_root = project_root / ".adrctl" / "templates"
        loaders.append(FileSystemLoader([str(template_root / group), str(template_root)]))

    loaders.append(PackageLoader("adrctl", f"templates/{group}"))
    return Environment(loader=ChoiceLoader(loaders), keep_trailing_newline=True)


def template_content(name: str, *, project_root: Path | None = None) -> str:
    """Raw markdown of the template called *name*.

    Raises:
        AdrError: ``INVALID`` for an unknown name.
    """
    valid = valid_template_names()
    if name not in valid:
        msg = f"unknown template {name!r}: valid templates are {', '.join(valid)}"
        raise AdrError(ErrorKind.INVALID, msg)

    env = build_template_environment(project_root=project_root)
    assert env.loader is not None
    try:
        source, _filename, _uptodate = env.loader.get_source(env, f"{name}.md")
    except TemplateNotFound as exc:
        raise AdrError(ErrorKind.NOT_FOUND, f"template {name!r} is not installed") from exc
    return source
