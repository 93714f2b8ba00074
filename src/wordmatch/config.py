# Area: Shared
"""
wordmatch.config — Settings loading and validation
==================================================

Settings are resolved in this order, later sources winning:

    1. Field defaults
    2. JSON config file (``--config path``)
    3. Environment variables (a ``.env`` file in the working
       directory is loaded first)

Environment variables:
    WORDMATCH_CAPACITY          players per match
    WORDMATCH_ROUND_TIMEOUT     seconds before an open round times out
    WORDMATCH_LOG_FILE          JSON log file path
    WORDMATCH_LOG_LEVEL         DEBUG / INFO / WARNING / ...
    WORDMATCH_DEMO_ROUNDS       rounds the demo plays before giving up
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger("wordmatch.config")

# Environment variable -> settings field
ENV_MAPPINGS = {
    "WORDMATCH_CAPACITY": "capacity",
    "WORDMATCH_ROUND_TIMEOUT": "round_timeout_seconds",
    "WORDMATCH_LOG_FILE": "log_file",
    "WORDMATCH_LOG_LEVEL": "log_level",
    "WORDMATCH_DEMO_ROUNDS": "demo_rounds",
}


class MatchSettings(BaseModel):
    """Validated settings shared by the Matchmaker, its matches and the CLI."""

    capacity: int = Field(default=2, ge=1)
    round_timeout_seconds: Optional[float] = Field(default=None, gt=0)
    log_file: str = "wordmatch.log"
    log_level: str = "INFO"
    demo_rounds: int = Field(default=10, ge=1)

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


def read_config_file(config_path: Optional[str]) -> Dict[str, Any]:
    """Load a JSON config file. A missing path yields an empty dict."""
    if not config_path:
        return {}
    path = Path(config_path)
    if not path.exists():
        logger.warning("Config file not found: %s", path)
        return {}
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def read_environment() -> Dict[str, Any]:
    """Collect settings overrides from ``WORDMATCH_*`` environment variables."""
    overrides: Dict[str, Any] = {}
    for env_key, field_name in ENV_MAPPINGS.items():
        value = os.environ.get(env_key)
        if value is not None and value != "":
            overrides[field_name] = value
    return overrides


def load_settings(
    config_path: Optional[str] = None,
    overrides: Optional[Dict[str, Any]] = None,
    dotenv_path: Optional[str] = None,
) -> MatchSettings:
    """
    Build MatchSettings from file, environment and explicit overrides.

    Raises:
        pydantic.ValidationError: If any value is out of range
    """
    load_dotenv(dotenv_path)
    data = read_config_file(config_path)
    data.update(read_environment())
    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return MatchSettings(**data)
