# Copyright (c) 2025 CentralLimit contributors
# SPDX-License-Identifier: MIT
#
# This file is part of the CentralLimit project.
# Licensed under the MIT License – see LICENSE in the repo root.

# src/centrallimit/core/histogram.py
from __future__ import annotations

import numpy as np
import pandas as pd


def bucket_labels(steps: int, padding: int = 3) -> np.ndarray:
    """Odd integers in [-steps, steps + padding]."""
    r = np.arange(-steps, steps + padding + 1)
    return r[r % 2 != 0]


class Histogram:
    """
    Fixed, ordered set of integer buckets with in-place counts.

    Labels must be evenly spaced and increasing; a value is counted only when
    it equals a label. Anything else is tallied in `dropped`.
    """

    def __init__(self, labels: np.ndarray):
        labels = np.asarray(labels, dtype=np.int64)
        if labels.ndim != 1 or labels.size == 0:
            raise ValueError("Histogram needs a non-empty 1-D array of labels")
        if labels.size > 1:
            diffs = np.diff(labels)
            if np.any(diffs != diffs[0]) or diffs[0] <= 0:
                raise ValueError("Histogram labels must be increasing and evenly spaced")
            self._step = int(diffs[0])
        else:
            self._step = 1
        self.labels = labels
        self.counts = np.zeros(labels.size, dtype=np.int64)
        self.dropped = 0

    @classmethod
    def for_steps(cls, steps: int, padding: int = 3) -> "Histogram":
        return cls(bucket_labels(steps, padding))

    @property
    def total(self) -> int:
        return int(self.counts.sum())

    def __len__(self) -> int:
        return int(self.labels.size)

    def add(self, sums: np.ndarray) -> int:
        sums = np.asarray(sums, dtype=np.int64).ravel()
        offset = sums - self.labels[0]
        idx = offset // self._step
        hit = (offset % self._step == 0) & (idx >= 0) & (idx < self.labels.size)
        # np.add.at handles repeated indices, unlike fancy-index +=
        np.add.at(self.counts, idx[hit], 1)
        n_hit = int(hit.sum())
        self.dropped += int(sums.size - n_hit)
        return n_hit

    def clear(self) -> None:
        self.counts[:] = 0
        self.dropped = 0

    def items(self) -> list[tuple[str, int]]:
        return [(str(int(b)), int(c)) for b, c in zip(self.labels, self.counts)]

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame({"bucket": self.labels.copy(), "count": self.counts.copy()})
