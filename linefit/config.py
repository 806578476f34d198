"""Run settings, read from ``LINEFIT_*`` environment variables.

Command line values are passed to :meth:`Settings.from_env` as overrides and
win over the environment.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional

from .regression import DEFAULT_ALPHA, DEFAULT_ITERATIONS, Strategy

ENV_PREFIX = "LINEFIT_"


@dataclass(frozen=True)
class Settings:
    data_path: Path = Path("data.txt")
    output_path: Path = Path("out.png")
    iterations: int = DEFAULT_ITERATIONS
    alpha: float = DEFAULT_ALPHA
    strategy: Strategy = Strategy.GRADIENT_DESCENT
    trace_path: Optional[Path] = None
    log_level: str = "INFO"

    def __post_init__(self):
        if self.iterations < 0:
            raise ValueError(f"iterations must be non-negative, got {self.iterations}")
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"unknown log level: {self.log_level!r}")

    @classmethod
    def from_env(cls, environ=None, **overrides) -> "Settings":
        env = os.environ if environ is None else environ
        values = {}

        if f"{ENV_PREFIX}OUTPUT" in env:
            values["output_path"] = Path(env[f"{ENV_PREFIX}OUTPUT"])
        if f"{ENV_PREFIX}TRACE" in env:
            values["trace_path"] = Path(env[f"{ENV_PREFIX}TRACE"])
        if f"{ENV_PREFIX}ALPHA" in env:
            raw = env[f"{ENV_PREFIX}ALPHA"]
            try:
                values["alpha"] = float(raw)
            except ValueError:
                raise ValueError(f"{ENV_PREFIX}ALPHA is not a number: {raw!r}") from None
        if f"{ENV_PREFIX}STRATEGY" in env:
            raw = env[f"{ENV_PREFIX}STRATEGY"].strip().lower()
            try:
                values["strategy"] = Strategy(raw)
            except ValueError:
                choices = ", ".join(s.value for s in Strategy)
                raise ValueError(
                    f"{ENV_PREFIX}STRATEGY must be one of {choices}, got {raw!r}"
                ) from None
        if f"{ENV_PREFIX}LOG_LEVEL" in env:
            values["log_level"] = env[f"{ENV_PREFIX}LOG_LEVEL"].strip().upper()

        settings = cls(**values)
        overrides = {k: v for k, v in overrides.items() if v is not None}
        if "data_path" in overrides:
            overrides["data_path"] = Path(overrides["data_path"])
        return replace(settings, **overrides)
