"""Tests for the .adr.json model."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from adrctl.config.models import (
    CONFIG_VERSION,
    AdrConfig,
    TemplateName,
    valid_template_names,
)


class TestAdrConfig:
    def test_alias_and_field_name(self) -> None:
        by_alias = AdrConfig.model_validate(
            {"version": "1", "directory": "adr", "templateFile": "a.md"}
        )
        by_name = AdrConfig(version="1", directory="adr", template_file="a.md")
        assert by_alias == by_name

    def test_defaults(self) -> None:
        cfg = AdrConfig(version=CONFIG_VERSION, directory="adr")
        assert cfg.template == TemplateName.NYGARD
        assert cfg.template_file == "template.md"

    def test_version_required(self) -> None:
        with pytest.raises(ValidationError):
            AdrConfig.model_validate({"directory": "adr"})

    def test_empty_template_file_defaults(self) -> None:
        cfg = AdrConfig(version="1", directory="adr", template_file="")
        assert cfg.template_file == "template.md"

    def test_wrong_version(self) -> None:
        with pytest.raises(ValidationError):
            AdrConfig(version="0", directory="adr")

    def test_frozen(self) -> None:
        cfg = AdrConfig(version="1", directory="adr")
        with pytest.raises(ValidationError):
            cfg.directory = "other"  # type: ignore[misc]


def test_valid_template_names() -> None:
    assert valid_template_names() == ["nygard", "madr-minimal", "madr-full"]
