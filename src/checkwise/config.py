from __future__ import annotations

from enum import Enum
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from checkwise.diff import DEFAULT_MAX_MISMATCHES

DEFAULT_CHUNK_SIZE = 0x10000


class ConfigError(ValueError):
    """Raised when a checkwise config file cannot be loaded."""


class LogLevel(str, Enum):
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class DiffConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    max_mismatches: int = Field(DEFAULT_MAX_MISMATCHES, ge=1)
    color: bool = True


class FilesConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    chunk_size: int = Field(DEFAULT_CHUNK_SIZE, ge=1)


class OutputConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    max_repr_length: int = Field(0, ge=0)


class CheckwiseConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    log_level: LogLevel = LogLevel.WARNING
    diff: DiffConfig = Field(default_factory=DiffConfig)
    files: FilesConfig = Field(default_factory=FilesConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: object) -> object:
        if isinstance(v, str):
            return v.lower()
        return v


def load_config(path: Path) -> CheckwiseConfig:
    """Load and validate a checkwise config from a YAML file."""
    path = Path(path)
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")

    try:
        with open(path) as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid YAML in {path}: {exc}") from exc

    # An empty file means all defaults
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"{path}: top level must be a mapping, got {type(raw).__name__}")

    try:
        return CheckwiseConfig(**raw)
    except ValidationError as exc:
        raise ConfigError(f"invalid config in {path}:\n{exc}") from exc


_active_config: CheckwiseConfig | None = None


def get_config() -> CheckwiseConfig:
    """Return the process-wide config used when a checker is given none."""
    global _active_config
    if _active_config is None:
        _active_config = CheckwiseConfig()
    return _active_config


def set_config(config: CheckwiseConfig) -> None:
    global _active_config
    _active_config = config


def reset_config() -> None:
    global _active_config
    _active_config = None
