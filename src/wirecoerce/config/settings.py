"""Unified settings: CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs: CLI flags passed by Click
  2. Env vars: ``WIRECOERCE_*`` prefix, ``__`` for nested sections
  3. TOML file: ``wirecoerce.toml`` discovered via walk-up
  4. Code defaults: baked into the section models
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from wirecoerce.config.discovery import find_config
from wirecoerce.config.models import DecodeConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``wirecoerce.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# TOML path handed to settings_customise_sources during construction.
_tls = threading.local()


class WireSettings(BaseSettings):
    """Settings for the wirecoerce CLI and decode service.

    Attributes:
        config_path: The TOML file that was loaded, if any.
        decode: Engine options (strict mode, date parsing).
    """

    model_config = {
        "frozen": True,
        "env_prefix": "WIRECOERCE_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    decode: DecodeConfig = Field(default_factory=DecodeConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert the TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        strict: bool | None = None,
        **cli_flags: Any,
    ) -> WireSettings:
        """Construct settings from a CLI invocation.

        Uses *config_path* when given, otherwise discovers wirecoerce.toml by
        walking up from *start*.  *strict* overrides ``[decode] strict`` only
        when not None, so an absent flag keeps the configured value.  Boolean
        *cli_flags* apply only when true: Click reports an absent flag as
        False, which would otherwise outrank env vars and the TOML file.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if not p.is_file():
                msg = f"Config file not found: {config_path}"
                raise click.ClickException(msg)
            toml_path = p
        else:
            toml_path = find_config(start)

        flags = {name: value for name, value in cli_flags.items() if value}
        _tls.toml_path = toml_path
        try:
            settings = cls(config_path=toml_path, **flags)
        finally:
            _tls.toml_path = None

        if strict is not None:
            decode = settings.decode.model_copy(update={"strict": strict})
            settings = settings.model_copy(update={"decode": decode})
        return settings
