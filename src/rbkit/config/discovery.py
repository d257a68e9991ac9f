"""Config file discovery and loading.

Walk-up finder locates rbkit.toml, similar to how git finds .git/.
Supports the RBKIT_CONFIG env var override.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

from rbkit.config.models import RbkitConfig

CONFIG_FILENAME = "rbkit.toml"
CONFIG_ENV_VAR = "RBKIT_CONFIG"


class ConfigError(ValueError):
    """Raised when a discovered config file cannot be parsed."""


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for rbkit.toml.

    Returns the path to the config file, or None if not found.
    Checks RBKIT_CONFIG env var first.
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


def read_toml(path: Path) -> dict[str, Any]:
    """Parse *path* as TOML.

    Raises:
        ConfigError: If the file is not valid TOML.
    """
    raw = path.read_text(encoding="utf-8")
    try:
        return tomllib.loads(raw)
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise ConfigError(msg) from exc


def load_config(path: Path | None = None, cwd: Path | None = None) -> RbkitConfig:
    """Load and validate config from a TOML file.

    If *path* is None, uses find_config(*cwd*) to discover the file.
    Returns default RbkitConfig if no file is found.
    """
    if path is None:
        path = find_config(cwd)

    if path is None:
        return RbkitConfig()

    return RbkitConfig.model_validate(read_toml(path))
