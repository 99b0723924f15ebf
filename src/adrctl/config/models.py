"""Pydantic model for the ``.adr.json`` project config.

The file is tiny and versioned: ``version`` is required and must equal
:data:`CONFIG_VERSION`, and ``directory`` must be non-empty, otherwise the
load fails closed.  ``templateFile`` was added later and defaults to
``template.md`` so older files keep loading.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field, field_validator

CONFIG_VERSION = "1"
DEFAULT_TEMPLATE_FILE = "template.md"


class TemplateName(StrEnum):
    """Packaged ADR templates."""

    NYGARD = "nygard"
    MADR_MINIMAL = "madr-minimal"
    MADR_FULL = "madr-full"


def valid_template_names() -> list[str]:
    """Template names accepted by ``init --template``."""
    return [str(t) for t in TemplateName]


class AdrConfig(BaseModel):
    """Contents of ``.adr.json``."""

    model_config = {"frozen": True, "populate_by_name": True}

    version: str
    directory: str
    template: str = str(TemplateName.NYGARD)
    template_file: str = Field(default=DEFAULT_TEMPLATE_FILE, alias="templateFile")

    @field_validator("version")
    @classmethod
    def _check_version(cls, value: str) -> str:
        if value != CONFIG_VERSION:
            msg = f"unsupported config version {value!r}"
            raise ValueError(msg)
        return value

    @field_validator("directory")
    @classmethod
    def _check_directory(cls, value: str) -> str:
        if not value:
            msg = "directory must not be empty"
            raise ValueError(msg)
        return value

    @field_validator("template_file")
    @classmethod
    def _default_template_file(cls, value: str) -> str:
        return value or DEFAULT_TEMPLATE_FILE
