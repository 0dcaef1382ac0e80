"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, binctl.toml only contains overrides.
An empty (or missing) binctl.toml behaves exactly like the defaults.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- binctl.toml sections ---


class IoConfig(BaseModel):
    """[io] section."""

    model_config = {"frozen": True}

    trim_input: bool = True
    trailing_newline: bool = True


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    color: bool = True
