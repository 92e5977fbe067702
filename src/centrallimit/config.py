# Copyright (c) 2025 CentralLimit contributors
# SPDX-License-Identifier: MIT
#
# This file is part of the CentralLimit project.
# Licensed under the MIT License – see LICENSE in the repo root.

# src/centrallimit/config.py
from __future__ import annotations

import math
from dataclasses import dataclass, fields, replace
from typing import Any

import yaml

MODES = ("cumulative", "batch")
MAX_TICK_RATE = 3600.0  # curses timeouts are C ints in milliseconds


def _is_int(v) -> bool:
    # bool is an int subclass; YAML "yes"/"true" must not pass as a count
    return isinstance(v, int) and not isinstance(v, bool)


def _is_number(v) -> bool:
    return (isinstance(v, (int, float)) and not isinstance(v, bool)) and not math.isnan(v)


@dataclass(frozen=True)
class Config:
    trials: int = 5000  # trials drawn per tick ("iterations per render")
    steps: int = 19  # ±1 steps summed per trial; must be odd
    p: float = 0.5  # probability of a +1 step
    padding: int = 3  # extra bucket range past +steps
    tick_rate: float = 0.5  # seconds between ticks
    mode: str = "cumulative"
    seed: int | None = None
    bar_width: int = 7
    bar_gap: int = 1
    max_ticks: int | None = None  # headless only
    verbose_every: int = 10

    def validate(self) -> "Config":
        if not _is_int(self.trials) or self.trials <= 0:
            raise ValueError(f"trials must be a positive integer, got {self.trials!r}")
        if not _is_int(self.steps) or self.steps < 1 or self.steps % 2 == 0:
            raise ValueError(f"steps must be a positive odd integer, got {self.steps!r}")
        if not _is_number(self.p) or not 0.0 <= float(self.p) <= 1.0:
            raise ValueError(f"p must be a number in [0, 1], got {self.p!r}")
        if not _is_int(self.padding) or self.padding < 0:
            raise ValueError(f"padding must be a non-negative integer, got {self.padding!r}")
        if not _is_number(self.tick_rate) or not 0.0 < float(self.tick_rate) <= MAX_TICK_RATE:
            raise ValueError(
                f"tick_rate must be a number in (0, {MAX_TICK_RATE:g}] seconds, got {self.tick_rate!r}"
            )
        if self.mode not in MODES:
            raise ValueError(f"mode must be one of {MODES}, got {self.mode!r}")
        if not _is_int(self.bar_width) or self.bar_width < 1:
            raise ValueError(f"bar_width must be an integer >= 1, got {self.bar_width!r}")
        if not _is_int(self.bar_gap) or self.bar_gap < 0:
            raise ValueError(f"bar_gap must be a non-negative integer, got {self.bar_gap!r}")
        if self.seed is not None and not _is_int(self.seed):
            raise ValueError(f"seed must be an integer or null, got {self.seed!r}")
        if self.max_ticks is not None and (not _is_int(self.max_ticks) or self.max_ticks < 0):
            raise ValueError(f"max_ticks must be a non-negative integer or null, got {self.max_ticks!r}")
        if not _is_int(self.verbose_every) or self.verbose_every < 0:
            raise ValueError(f"verbose_every must be a non-negative integer, got {self.verbose_every!r}")
        return self


FIELD_NAMES = frozenset(f.name for f in fields(Config))


def merge(cfg: Config, overrides: dict[str, Any], skip_none: bool = True) -> Config:
    """
    Return ``cfg`` with ``overrides`` applied, validated.
    CLI flags left unset arrive as None and are skipped; YAML values are taken as given.
    """
    unknown = set(overrides) - FIELD_NAMES
    if unknown:
        raise ValueError(f"Unknown config keys: {sorted(map(str, unknown))}")
    changes = {k: v for k, v in overrides.items() if v is not None or not skip_none}
    return replace(cfg, **changes).validate()


def load_config(path: str | None, base: Config | None = None) -> Config:
    base = Config() if base is None else base
    if path is None:
        return base.validate()
    with open(path, "r", encoding="utf-8") as fh:
        raw = yaml.safe_load(fh)
    if raw is None:
        return base.validate()
    if not isinstance(raw, dict):
        raise ValueError(f"{path}: expected a mapping at top level, got {type(raw).__name__}")
    return merge(base, raw, skip_none=False)
