# config.py

import logging
import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field, field_validator

ENV_PREFIX = "SMARTCALC_"

_TRUE_VALUES = {"1", "true", "yes", "on"}


class Settings(BaseModel):
    """Shell settings, read from SMARTCALC_* environment variables and CLI flags."""
    prompt: str = Field("> ", description="Prompt shown before each input line")
    log_level: str = Field("WARNING", description="Root logging level name")
    history_file: Optional[str] = Field(None, description="Keep input history in this file")
    show_banner: bool = Field(False, description="Print a banner before the first prompt")
    exit_message: str = Field("Bye!", min_length=1, description="Printed on /exit")

    @field_validator('log_level')
    @classmethod
    def log_level_must_be_known(cls, v: str) -> str:
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator('history_file')
    @classmethod
    def history_file_must_not_be_blank(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            return None
        return v

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides) -> "Settings":
        """
        Build settings from the environment, then apply explicit overrides.

        Args:
            environ: Mapping to read instead of os.environ
            **overrides: Field values that win over the environment; None values are ignored

        Returns:
            Validated Settings instance

        Raises:
            pydantic.ValidationError: If a value fails validation
        """
        environ = os.environ if environ is None else environ
        values = {}
        if f"{ENV_PREFIX}PROMPT" in environ:
            values["prompt"] = environ[f"{ENV_PREFIX}PROMPT"]
        if f"{ENV_PREFIX}LOG_LEVEL" in environ:
            values["log_level"] = environ[f"{ENV_PREFIX}LOG_LEVEL"]
        if f"{ENV_PREFIX}HISTORY_FILE" in environ:
            values["history_file"] = environ[f"{ENV_PREFIX}HISTORY_FILE"]
        if f"{ENV_PREFIX}BANNER" in environ:
            values["show_banner"] = environ[f"{ENV_PREFIX}BANNER"].strip().lower() in _TRUE_VALUES
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
