"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``NEEDFUL_*`` prefix
  3. TOML file    — ``needful.toml`` discovered via walk-up
  4. Code defaults — baked into the section models

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource` that
reuses the ``find_config`` walk-up discovery from
:mod:`needful.config.discovery`.
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from needful.config.discovery import find_config
from needful.config.models import LintConfig, LoaderConfig, NeedfulConfig, OutputConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``needful.toml`` file discovered via walk-up."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            self._data = _read_sections(toml_path)

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


def _read_sections(toml_path: Path) -> dict[str, Any]:
    """Parse *toml_path* and validate it against :class:`NeedfulConfig`.

    Only the keys the file actually sets are returned, so env vars can still
    override individual fields inside a section.
    """
    import click

    raw = toml_path.read_text(encoding="utf-8")
    try:
        data = tomllib.loads(raw)
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {toml_path}: {exc}"
        raise click.ClickException(msg) from exc
    try:
        config = NeedfulConfig.model_validate(data)
    except ValidationError as exc:
        msg = f"Invalid config in {toml_path}: {exc}"
        raise click.ClickException(msg) from exc
    return config.model_dump(exclude_unset=True)


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class NeedfulSettings(BaseSettings):
    """Unified settings for the needful CLI and services.

    Attributes:
        config_root: Directory relative loader paths resolve against (parent
            of ``needful.toml``, or CWD if no config found).
        config_path: The TOML file in use, or None.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "NEEDFUL_",
        "env_nested_delimiter": "__",
    }

    # --- Resolved path (not in TOML — derived from config location) ---
    config_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    loader: LoaderConfig = Field(default_factory=LoaderConfig)
    lint: LintConfig = Field(default_factory=LintConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @property
    def use_json(self) -> bool:
        """JSON output requested by flag or by ``[output] format``."""
        return self.json_output or self.output.format == "json"

    @property
    def search_paths(self) -> list[Path]:
        """Loader search paths, relative entries resolved against config_root."""
        return [
            p if p.is_absolute() else self.config_root / p
            for p in (Path(entry) for entry in self.loader.search_paths)
        ]

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
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
        **cli_flags: Any,
    ) -> NeedfulSettings:
        """Construct settings from CLI invocation.

        Discovers ``needful.toml`` via walk-up from *start* (or uses the
        explicit *config_path*) and merges CLI flags as highest-priority
        overrides. Flags left at ``False`` do not mask env or TOML values.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(start)

        config_root = toml_path.parent if toml_path else (start or Path.cwd())
        flags = {key: value for key, value in cli_flags.items() if value}

        _tls.toml_path = toml_path
        try:
            return cls(config_root=config_root, config_path=toml_path, **flags)
        finally:
            _tls.toml_path = None
