# Copyright (c) 2025 CentralLimit contributors
# SPDX-License-Identifier: MIT
#
# This file is part of the CentralLimit project.
# Licensed under the MIT License – see LICENSE in the repo root.
# src/centrallimit/demos/simulate_demo.py
from __future__ import annotations

import os

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np

from centrallimit.config import Config
from centrallimit.core.stats import expected_counts, normal_pdf
from centrallimit.tui.app import run_headless


def main(cfg: Config | None = None, ticks: int | None = None, outputs_dir: str | None = "outputs"):
    cfg = Config() if cfg is None else cfg
    app = run_headless(cfg, ticks=ticks)
    r = app.report()

    print(f"Central limit: ticks={app.ticks}, trials/tick={cfg.trials}, steps={cfg.steps}, p={cfg.p}")
    print(f"  mean     = {r['mean']:.4f}  (theory {r['theory_mean']:.4f})")
    print(f"  variance = {r['variance']:.4f}  (theory {r['theory_variance']:.4f})")
    print(f"  MAE  = {r['mae']:.4f}")
    print(f"  RMSE = {r['rmse']:.4f}")
    print(f"  R^2  = {r['r2']:.4f}")

    if outputs_dir is None:
        return app

    # --- Export ---
    os.makedirs(outputs_dir, exist_ok=True)
    df = app.hist.to_frame()
    df["expected"] = expected_counts(app.hist, cfg.steps, cfg.p)
    csv_out = os.path.join(outputs_dir, "histogram.csv")
    df.to_csv(csv_out, index=False)
    print("Saved:", csv_out)

    # --- Plot ---
    xs = np.linspace(app.hist.labels[0], app.hist.labels[-1], 400)
    var = r["theory_variance"]
    plt.figure(figsize=(7, 4))
    plt.bar(df["bucket"], df["count"], width=1.6, color="tab:green", label="observed")
    if var > 0:
        curve = app.hist.total * 2.0 * normal_pdf(xs, r["theory_mean"], var)
        plt.plot(xs, curve, "k--", label="normal approximation")
    plt.xlabel("Sum of steps")
    plt.ylabel("Count")
    plt.legend()
    plt.tight_layout()
    pdf_out = os.path.join(outputs_dir, "histogram.pdf")
    plt.savefig(pdf_out, bbox_inches="tight")
    plt.close()
    print("Saved:", pdf_out)
    return app


if __name__ == "__main__":
    main()
