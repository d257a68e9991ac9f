"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, rbkit.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LoggingConfig(BaseModel):
    """[logging] section."""

    model_config = {"frozen": True}

    level: str = "WARNING"
    json_output: bool = False
    quiet_loggers: list[str] = Field(default_factory=list)

    @field_validator("level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        normalized = value.upper()
        if normalized not in LOG_LEVELS:
            msg = f"Unknown log level {value!r}; expected one of {', '.join(LOG_LEVELS)}"
            raise ValueError(msg)
        return normalized


class RbkitConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
