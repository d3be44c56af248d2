# skicomb/config.py
"""
Simplification settings, passed explicitly into the engine.

The library never consults process state. The CLI is the one place
that turns environment flags into a SimplifyConfig:

    SKI_TRACE=1          stream each intermediate form to stderr
    SKI_MAX_PASSES=N     give up (StepLimitExceeded) after N tree passes
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from typing import Mapping, Optional, TextIO


@dataclass(frozen=True)
class SimplifyConfig:
    trace: Optional[TextIO] = None
    max_passes: Optional[int] = None

    def __post_init__(self) -> None:
        mp = self.max_passes
        if mp is not None and (isinstance(mp, bool) or not isinstance(mp, int) or mp <= 0):
            raise ValueError(f"max_passes must be a positive int or None, got {mp!r}")

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        stream: Optional[TextIO] = None,
    ) -> "SimplifyConfig":
        env = os.environ if environ is None else environ

        trace = None
        if env.get("SKI_TRACE", "0") == "1":
            trace = stream if stream is not None else sys.stderr

        max_passes = None
        raw = env.get("SKI_MAX_PASSES", "").strip()
        if raw:
            try:
                max_passes = int(raw)
            except ValueError as e:
                raise ValueError(f"SKI_MAX_PASSES must be an integer, got {raw!r}") from e

        return cls(trace=trace, max_passes=max_passes)


DEFAULT_CONFIG = SimplifyConfig()
