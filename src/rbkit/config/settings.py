"""Unified settings — init kwargs, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — explicit overrides from the caller
  2. Env vars     — ``RBKIT_*`` prefix, ``__`` for nested sections
  3. TOML file    — ``rbkit.toml`` discovered via walk-up
  4. Code defaults — baked into the section models
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from rbkit.config.discovery import find_config, read_toml
from rbkit.config.logging import configure_logging
from rbkit.config.models import LoggingConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``rbkit.toml`` file discovered via walk-up."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            self._data = read_toml(toml_path)

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class RbkitSettings(BaseSettings):
    """Unified, frozen settings for rbkit.

    Attributes:
        config_path: The TOML file the settings were read from, if any.
        verbose: Shortcut for ``logging.level = "DEBUG"``.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "RBKIT_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None
    verbose: bool = False
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

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
    def load(
        cls,
        *,
        config_path: str | Path | None = None,
        start: Path | None = None,
        **overrides: Any,
    ) -> RbkitSettings:
        """Construct settings, discovering ``rbkit.toml`` from *start* unless
        *config_path* names one explicitly."""
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(start)

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **overrides)
        finally:
            _tls.toml_path = None

    @property
    def log_level(self) -> str:
        return "DEBUG" if self.verbose else self.logging.level

    def configure_logging(self) -> None:
        """Apply the logging section to the process-wide logging setup."""
        configure_logging(
            level=self.log_level,
            log_json=self.logging.json_output,
            quiet_loggers=self.logging.quiet_loggers,
        )
