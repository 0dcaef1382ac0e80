"""BinSettings: the resolved configuration of one binctl invocation.

Sources, highest priority first:
  1. Flags given on the command line
  2. ``BINCTL_*`` environment variables (``BINCTL_IO__TRIM_INPUT`` for sections)
  3. The ``binctl.toml`` in effect (``--config``, ``BINCTL_CONFIG`` or walk-up)
  4. Defaults of the section models

A flag left off the command line is not passed on at all, so the matching
environment variable can still switch it on.
"""

from __future__ import annotations

import tomllib
from contextvars import ContextVar
from pathlib import Path

import click
from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from binctl.config.discovery import find_config
from binctl.config.models import IoConfig, OutputConfig

# TOML file for the BinSettings currently being built.
_toml_file: ContextVar[Path | None] = ContextVar("binctl_toml_file", default=None)


class BinSettings(BaseSettings):
    """Global flags plus the ``[io]`` and ``[output]`` config sections.

    Attributes:
        config_path: The TOML file that was loaded, or None.
        decode: Root-level direction flag (``-d``).
        no_trim: Keep a trailing line terminator on the input.
        no_newline: Do not append a newline to the output.
    """

    model_config = SettingsConfigDict(
        frozen=True,
        env_prefix="BINCTL_",
        env_nested_delimiter="__",
    )

    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    decode: bool = False
    no_trim: bool = False
    no_newline: bool = False

    io: IoConfig = Field(default_factory=IoConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @property
    def trim_input(self) -> bool:
        """Whether one trailing line terminator is stripped from the input."""
        return self.io.trim_input and not self.no_trim

    @property
    def trailing_newline(self) -> bool:
        return self.io.trailing_newline and not self.no_newline

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        toml = TomlConfigSettingsSource(settings_cls, toml_file=_toml_file.get())
        return (init_settings, env_settings, toml)

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        search_root: Path | None = None,
        **flags: bool,
    ) -> BinSettings:
        """Build settings for a CLI run.

        Only flags that are on count as given; an off flag falls through to
        the environment and then to the config file.

        Raises:
            click.ClickException: The config file is not valid TOML.
        """
        toml_path = _resolve_toml(config_path, search_root)
        given = {name: value for name, value in flags.items() if value}
        token = _toml_file.set(toml_path)
        try:
            return cls(config_path=toml_path, **given)
        except tomllib.TOMLDecodeError as exc:
            msg = f"Invalid TOML in {toml_path}: {exc}"
            raise click.ClickException(msg) from exc
        finally:
            _toml_file.reset(token)


def _resolve_toml(config_path: str | None, search_root: Path | None) -> Path | None:
    """An explicit *config_path* that is a file, else walk-up discovery."""
    if config_path:
        path = Path(config_path)
        return path if path.is_file() else None
    return find_config(search_root)
