# Copyright (c) 2025 CentralLimit contributors
# SPDX-License-Identifier: MIT
#
# This file is part of the CentralLimit project.
# Licensed under the MIT License – see LICENSE in the repo root.

# src/centrallimit/core/stats.py
from __future__ import annotations

import math

import numpy as np
from sklearn.metrics import mean_absolute_error, mean_squared_error, r2_score

from centrallimit.core.histogram import Histogram

# =========================
# (1) Moments of the sum of ±1 steps
# =========================

def theoretical_moments(steps: int, p: float = 0.5) -> tuple[float, float]:
    """
    Mean and variance of the sum of `steps` i.i.d. steps in {-1, +1}
    with P(+1) = p: E = steps*(2p-1), Var = 4*steps*p*(1-p).
    """
    return steps * (2.0 * p - 1.0), 4.0 * steps * p * (1.0 - p)


def empirical_moments(hist: Histogram) -> tuple[float, float]:
    """Population mean and variance of the counted sums (NaN when empty)."""
    n = hist.total
    if n == 0:
        return math.nan, math.nan
    x = hist.labels.astype(float)
    w = hist.counts.astype(float)
    mean = float(np.dot(w, x) / n)
    var = float(np.dot(w, (x - mean) ** 2) / n)
    return mean, var

# =========================
# (2) Normal approximation per bucket
# =========================

def normal_pdf(x: np.ndarray, mean: float, var: float) -> np.ndarray:
    x = np.asarray(x, dtype=float)
    if var <= 0:
        # degenerate: all mass on the mean
        return np.where(np.isclose(x, mean), 1.0, 0.0)
    return np.exp(-((x - mean) ** 2) / (2.0 * var)) / math.sqrt(2.0 * math.pi * var)


def expected_counts(hist: Histogram, steps: int, p: float = 0.5) -> np.ndarray:
    """
    Expected count per bucket under the CLT normal approximation.
    Sums of `steps` ±1 steps are spaced 2 apart, so each bucket covers width 2.
    """
    mean, var = theoretical_moments(steps, p)
    if var <= 0:
        return hist.total * normal_pdf(hist.labels, mean, var)
    return hist.total * 2.0 * normal_pdf(hist.labels, mean, var)

# =========================
# (3) Goodness-of-fit summary
# =========================

def fit_report(hist: Histogram, steps: int, p: float = 0.5) -> dict:
    mean, var = empirical_moments(hist)
    t_mean, t_var = theoretical_moments(steps, p)
    report = {
        "n": hist.total,
        "dropped": hist.dropped,
        "mean": mean,
        "variance": var,
        "theory_mean": t_mean,
        "theory_variance": t_var,
        "mae": math.nan,
        "rmse": math.nan,
        "r2": math.nan,
    }
    if hist.total == 0:
        return report
    observed = hist.counts.astype(float)
    expected = expected_counts(hist, steps, p)
    report["mae"] = float(mean_absolute_error(observed, expected))
    report["rmse"] = float(np.sqrt(mean_squared_error(observed, expected)))
    # r2 is undefined for a constant target (e.g. p in {0, 1})
    if np.ptp(observed) > 0:
        report["r2"] = float(r2_score(observed, expected))
    return report
