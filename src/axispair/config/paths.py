"""Location of the optional axispair config file.

The file lives at ``<repo_root>/config/axispair.toml`` unless the
``AXISPAIR_CONFIG`` environment variable names another path.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Final


CONFIG_ENV_VAR: Final[str] = "AXISPAIR_CONFIG"


def _detect_repo_root(start: Path | None = None) -> Path:
    """Walk up from ``start`` to the first directory holding ``pyproject.toml`` or ``.git``.

    Falls back to the current working directory.
    """
    here = (start or Path(__file__).resolve()).parent
    for p in [here, *here.parents]:
        if (p / "pyproject.toml").exists() or (p / ".git").exists():
            return p
    return Path.cwd()


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Return the config file path, honouring ``AXISPAIR_CONFIG``."""

    mapping = env if env is not None else os.environ
    override = (mapping.get(CONFIG_ENV_VAR) or "").strip()
    if override:
        return Path(override).expanduser().resolve()
    return (_detect_repo_root() / "config" / "axispair.toml").resolve()


__all__ = ["CONFIG_ENV_VAR", "default_config_path"]
