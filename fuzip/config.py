from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping, Optional

import yaml
from pydantic import BaseModel, field_validator

from .execute import MissingPolicy
from .log import LOG_ENV

CONFIG_NAMES = ("fuzip.yaml", "fuzip.yml", ".fuzip.yaml")
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class FuzipSettings(BaseModel):
    log_level: str = "INFO"
    full_only: bool = False
    missing: MissingPolicy = MissingPolicy.ERROR
    verbose: bool = False

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = str(value).strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"unknown log level {value!r}")
        return level

    @classmethod
    def load(cls, path: Optional[Path]) -> "FuzipSettings":
        if path is None:
            return cls()
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
        return cls.model_validate(raw or {})

    def with_env(self, environ: Optional[Mapping[str, str]] = None) -> "FuzipSettings":
        environ = os.environ if environ is None else environ
        level = env_log_level(environ.get(LOG_ENV, ""))
        if not level:
            return self
        return self.model_validate({**self.model_dump(), "log_level": level})


def env_log_level(value: str) -> Optional[str]:
    """
    Pick a level out of a `FUZIP_LOG` filter such as `warn,fuzip=debug`.

    A `fuzip` directive wins over a bare level; other modules are ignored.
    """
    bare: Optional[str] = None
    for directive in value.split(","):
        directive = directive.strip()
        if not directive:
            continue
        if "=" not in directive:
            bare = directive
            continue
        name, _, level = directive.rpartition("=")
        if name.strip() == "fuzip" or name.strip().startswith("fuzip."):
            return _level_name(level)
    return _level_name(bare) if bare else None


def _level_name(level: str) -> str:
    level = level.strip()
    if level.lower() == "warn":
        return "WARNING"
    if level.lower() == "trace":
        return "DEBUG"
    return level


def find_config(explicit_path: Optional[Path]) -> Optional[Path]:
    if explicit_path:
        return explicit_path
    cwd = Path.cwd()
    for name in CONFIG_NAMES:
        candidate = cwd / name
        if candidate.exists():
            return candidate
    return None
