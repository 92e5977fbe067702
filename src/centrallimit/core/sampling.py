# Copyright (c) 2025 CentralLimit contributors
# SPDX-License-Identifier: MIT
#
# This file is part of the CentralLimit project.
# Licensed under the MIT License – see LICENSE in the repo root.

# src/centrallimit/core/sampling.py
from __future__ import annotations

import numpy as np


def make_rng(seed: int | None = None) -> np.random.Generator:
    return np.random.default_rng(seed)


def draw_sums(rng: np.random.Generator, trials: int, steps: int, p: float = 0.5) -> np.ndarray:
    """
    One aggregate per trial: the sum of `steps` independent ±1 steps.

    The number of +1 steps is Binomial(steps, p), so the sum is
    2 * ups - steps; drawing the binomial directly keeps large batches cheap.
    """
    if trials <= 0:
        return np.zeros(0, dtype=np.int64)
    ups = rng.binomial(steps, p, size=trials)
    return (2 * ups - steps).astype(np.int64)
