"""Config file discovery, loading and saving.

Walk-up finder locates ``.adr.json``, similar to how git finds ``.git/``.
Supports the ``ADRCTL_CONFIG`` env var and the ``--config`` CLI flag.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from pydantic import ValidationError

from adrctl.config.models import CONFIG_VERSION, AdrConfig
from adrctl.domain.errors import AdrError, ErrorKind

CONFIG_FILENAME = ".adr.json"
CONFIG_ENV_VAR = "ADRCTL_CONFIG"

logger = logging.getLogger(__name__)


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for ``.adr.json``.

    Returns the path to the config file, or None if not found.
    Checks ADRCTL_CONFIG env var first.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        if p.is_file():
            return p
        return None

    current = (start or Path.cwd()).resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


def load_config(root: Path, *, path: Path | None = None) -> AdrConfig:
    """Load and validate ``root/.adr.json`` (or an explicit *path*).

    Raises:
        AdrError: ``NOT_FOUND`` when the file is missing, ``INVALID`` when
            it is not JSON, has the wrong version, or lacks a directory.
    """
    path = path or root / CONFIG_FILENAME
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        msg = f"config not found: {path} (run 'adrctl init' first)"
        raise AdrError(ErrorKind.NOT_FOUND, msg, path=path) from exc
    except OSError as exc:
        raise AdrError(ErrorKind.IO_FAILURE, f"reading {path}: {exc}", path=path) from exc

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise AdrError(ErrorKind.INVALID, f"config invalid: parsing {path}", path=path) from exc

    try:
        config = AdrConfig.model_validate(data)
    except ValidationError as exc:
        reasons = "; ".join(str(e["msg"]) for e in exc.errors())
        raise AdrError(ErrorKind.INVALID, f"config invalid: {reasons}", path=path) from exc

    logger.debug("Loaded config from %s", path)
    return config


def save_config(root: Path, config: AdrConfig) -> Path:
    """Write *config* to ``root/.adr.json`` as indented JSON.

    The version is always stamped as :data:`CONFIG_VERSION`.
    """
    path = root / CONFIG_FILENAME
    payload = config.model_dump(by_alias=True)
    payload["version"] = CONFIG_VERSION
    try:
        path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        raise AdrError(ErrorKind.IO_FAILURE, f"writing {path}: {exc}", path=path) from exc
    return path
