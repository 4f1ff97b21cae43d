"""
Environment-driven settings.

Environment Variables:
    COMMITVAULT_STATE: Path to the JSON state file - default: ~/.commitvault/state.json
    COMMITVAULT_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR, CRITICAL - default: WARNING
    COMMITVAULT_LOG_FORMAT: json, text - default: json
"""

import os
from pathlib import Path
from typing import Mapping, Optional

from pydantic import BaseModel, ValidationError, field_validator

from .core.errors import ConfigError
from .logging_config import FORMATS, LEVELS

DEFAULT_STATE_PATH = str(Path.home() / ".commitvault" / "state.json")


class Settings(BaseModel):
    state_path: str = DEFAULT_STATE_PATH
    log_level: str = "WARNING"
    log_format: str = "json"

    @field_validator("state_path")
    @classmethod
    def _state_path_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("state path must not be blank")
        return os.path.expanduser(v)

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        v = v.strip().upper()
        if v not in LEVELS:
            raise ValueError(f"unknown log level {v!r}, expected one of {sorted(LEVELS)}")
        return v

    @field_validator("log_format")
    @classmethod
    def _known_format(cls, v: str) -> str:
        v = v.strip().lower()
        if v not in FORMATS:
            raise ValueError(f"unknown log format {v!r}, expected one of {list(FORMATS)}")
        return v


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build Settings from an environment mapping (os.environ by default).

    Raises:
        ConfigError: If any variable fails validation
    """
    env = os.environ if env is None else env
    values = {}
    for field, key in (
        ("state_path", "COMMITVAULT_STATE"),
        ("log_level", "COMMITVAULT_LOG_LEVEL"),
        ("log_format", "COMMITVAULT_LOG_FORMAT"),
    ):
        val = env.get(key)
        if val:
            values[field] = val
    try:
        return Settings(**values)
    except ValidationError as ex:
        raise ConfigError(str(ex)) from ex
