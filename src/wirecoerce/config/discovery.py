"""Config file discovery.

Walk-up finder locates wirecoerce.toml, the way git finds .git/.
The WIRECOERCE_CONFIG env var short-circuits the walk.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "wirecoerce.toml"
CONFIG_ENV_VAR = "WIRECOERCE_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for wirecoerce.toml.

    Returns the path to the config file, or None if not found.
    An explicit WIRECOERCE_CONFIG wins, but only if that file exists.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        if current.parent == current:
            return None
        current = current.parent
