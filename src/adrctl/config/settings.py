"""Process settings — CLI flags, env vars, and the discovered project root.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``ADRCTL_*`` prefix
  3. Code defaults

The project root is the directory holding ``.adr.json`` (found via
walk-up, :func:`adrctl.config.discovery.find_config`), or the working
directory when no config exists yet (``adrctl init``).
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings

from adrctl.config.discovery import find_config


class AdrSettings(BaseSettings):
    """Unified settings for the adrctl CLI and web server.

    Frozen after construction and stored on the Click context object.

    Attributes:
        project_root: Directory holding ``.adr.json`` (or CWD).
        config_path: The discovered or explicit config file, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "ADRCTL_",
    }

    project_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    no_interact: bool = False
    plain: bool = False

    @property
    def color(self) -> bool:
        """Whether terminal output may use ANSI colors.

        Honours ``--plain`` and the ``NO_COLOR`` convention.
        """
        return not self.plain and not os.environ.get("NO_COLOR")

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        project_root: Path | None = None,
        **cli_flags: Any,
    ) -> AdrSettings:
        """Construct settings from a CLI invocation.

        An explicit *config_path* pins the project root to its parent
        directory; otherwise ``.adr.json`` is discovered by walking up from
        *project_root* (or the CWD).
        """
        found: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                found = p
        else:
            found = find_config(project_root)

        resolved_root = project_root
        if resolved_root is None:
            resolved_root = found.parent if found else Path.cwd()

        return cls(project_root=resolved_root, config_path=found, **cli_flags)
