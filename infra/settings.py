"""
Runtime settings for tools embedding the vision engine.

Settings come from environment variables (optionally from a `.env` file
at the project root). The engine itself never reads them; callers pass
the resulting values in explicitly.

Variables:
    FOG_LOG_LEVEL: Root logging level (default: INFO)
    FOG_LOG_JSON: Emit JSON log lines (default: false)
    FOG_ENGINE_LOG_LEVEL: Level for the "fog" loggers only (default: inherit)
    FOG_LOG_FILE: Log file path; empty disables file output
    FOG_STRICT_CONVERGENCE: Raise instead of returning an empty set when
        the common vision solver hits its pass bound (default: false)
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from infra.logger import configure_logging
from infra.paths import DOTENV_PATH, LOG_DIR

ENV_PREFIX = "FOG_"


class VisionSettings(BaseModel):
    """Validated settings; construct via load_settings() or directly in tests."""
    log_level: str = Field(default="INFO", description="Root logging level name")
    log_json: bool = Field(default=False, description="Emit JSON log lines")
    engine_log_level: Optional[str] = Field(default=None, description="Level for the fog.* loggers")
    log_file: Optional[Path] = Field(default=LOG_DIR / "fog.log", description="Log file, None disables it")
    strict_convergence: bool = Field(
        default=False,
        description="Raise ConvergenceError when the solver hits its pass bound",
    )

    @field_validator("log_level", "engine_log_level")
    @classmethod
    def _known_level(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level '{value}'")
        return level

    @field_validator("log_file", mode="before")
    @classmethod
    def _empty_disables_file(cls, value):
        if value is None or (isinstance(value, str) and not value.strip()):
            return None
        return value

    def apply_logging(self) -> None:
        """Configure the root logger from these settings."""
        configure_logging(
            self.log_level,
            json=self.log_json,
            logfile=self.log_file,
            engine_level=self.engine_log_level,
        )


def load_settings(
    environ: Optional[Mapping[str, str]] = None,
    dotenv_path: Optional[Path] = DOTENV_PATH,
) -> VisionSettings:
    """
    Build settings from FOG_* environment variables.

    Args:
        environ: Mapping to read instead of os.environ (the .env file is
            not loaded in that case)
        dotenv_path: .env file merged into os.environ first; None skips it

    Returns:
        Validated VisionSettings

    Raises:
        pydantic.ValidationError: If a variable holds an invalid value
    """
    if environ is None:
        if dotenv_path is not None:
            load_dotenv(dotenv_path)
        environ = os.environ

    values = {
        key[len(ENV_PREFIX):].lower(): value
        for key, value in environ.items()
        if key.startswith(ENV_PREFIX)
    }
    known = {name: values[name] for name in VisionSettings.model_fields if name in values}
    return VisionSettings(**known)
