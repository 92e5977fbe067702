# Copyright (c) 2025 CentralLimit contributors
# SPDX-License-Identifier: MIT
#
# This file is part of the CentralLimit project.
# Licensed under the MIT License – see LICENSE in the repo root.

# src/centrallimit/cli.py
from __future__ import annotations

import argparse
import sys

from centrallimit.config import load_config, merge


def _add_common(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--config", default=None, help="Path to YAML config")
    parser.add_argument("--trials", type=int, default=None, help="Trials drawn per tick")
    parser.add_argument("--steps", type=int, default=None, help="±1 steps summed per trial (odd)")
    parser.add_argument("--p", type=float, default=None, help="Probability of a +1 step")
    parser.add_argument("--mode", choices=["cumulative", "batch"], default=None)
    parser.add_argument("--seed", type=int, default=None)


def _config(args: argparse.Namespace, **extra):
    cfg = load_config(args.config)
    overrides = {
        "trials": args.trials,
        "steps": args.steps,
        "p": args.p,
        "mode": args.mode,
        "seed": args.seed,
        **extra,
    }
    return merge(cfg, overrides)


def cmd_tui(args: argparse.Namespace) -> None:
    from centrallimit.tui.app import run_tui

    run_tui(_config(args, tick_rate=args.tick_rate))


def cmd_simulate(args: argparse.Namespace) -> None:
    from centrallimit.demos.simulate_demo import main

    cfg = _config(args, max_ticks=args.ticks, verbose_every=args.verbose_every)
    main(cfg=cfg, outputs_dir=None if args.no_export else args.outputs_dir)


def main(argv: list[str] | None = None) -> int:
    from centrallimit.tui.app import TerminalError

    argv = sys.argv[1:] if argv is None else argv
    p = argparse.ArgumentParser(prog="centrallimit", description="Central Limit Theorem terminal demo")
    sub = p.add_subparsers(dest="cmd")

    sp = sub.add_parser("tui", help="Live histogram in the terminal (q to quit)")
    _add_common(sp)
    sp.add_argument("--tick_rate", type=float, default=None, help="Seconds between ticks")
    sp.set_defaults(func=cmd_tui)

    sp = sub.add_parser("simulate", help="Headless run with fit report and CSV/PDF export")
    _add_common(sp)
    sp.add_argument("--ticks", type=int, default=None, help="Ticks to run (default: config max_ticks or 1)")
    sp.add_argument("--verbose_every", type=int, default=None, help="Print progress every N ticks")
    sp.add_argument("--outputs_dir", default="outputs", help="Where histogram.csv/pdf are written")
    sp.add_argument("--no_export", action="store_true", help="Skip CSV/PDF export")
    sp.set_defaults(func=cmd_simulate)

    if not argv or argv[0] not in {"tui", "simulate", "-h", "--help"}:
        argv = ["tui", *argv]
    args = p.parse_args(argv)
    try:
        args.func(args)
    except (ValueError, TerminalError) as exc:
        print(f"centrallimit: error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
