"""Config file discovery.

Walk-up finder locates binctl.toml the way git finds .git/.
The BINCTL_CONFIG env var, when set, wins over the walk-up.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "binctl.toml"
CONFIG_ENV_VAR = "BINCTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest binctl.toml at or above *start* (default: cwd).

    A BINCTL_CONFIG pointing at a missing file disables discovery
    instead of falling back to the walk-up.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
