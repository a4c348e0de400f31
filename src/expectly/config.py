from __future__ import annotations

from pathlib import Path

import yaml
from expandvars import expandvars
from pydantic import BaseModel, ConfigDict, field_validator


class ExpectlyConfig(BaseModel):
    """Settings for the test-execution frame."""

    model_config = ConfigDict(extra="forbid")
    stop_on_failure: bool = False
    traceback: bool = True
    max_traceback_frames: int | None = None
    colour: bool = False
    verbose: bool = False
    debug_log: str | None = None

    @field_validator("max_traceback_frames")
    @classmethod
    def frames_must_be_positive(cls, v: int | None) -> int | None:
        if v is not None and v < 1:
            raise ValueError("max_traceback_frames must be at least 1")
        return v

    @field_validator("debug_log")
    @classmethod
    def expand_debug_log(cls, v: str | None) -> str | None:
        if v is None:
            return v
        try:
            return expandvars(v, nounset=True)
        except Exception as e:
            raise ValueError(f"debug_log references an unset variable: {v}") from e


def load_config(path: Path) -> ExpectlyConfig:
    """Load and validate an expectly config from a YAML file."""
    config_dir = path.parent.resolve()

    with open(path) as f:
        raw = yaml.safe_load(f)

    config = ExpectlyConfig(**(raw or {}))

    # Resolve a relative debug log path against the config file location
    if config.debug_log:
        log_path = Path(config.debug_log)
        if not log_path.is_absolute():
            config.debug_log = str((config_dir / log_path).resolve())

    return config
