# Copyright (c) 2025 CentralLimit contributors
# SPDX-License-Identifier: MIT
#
# This file is part of the CentralLimit project.
# Licensed under the MIT License – see LICENSE in the repo root.

# src/centrallimit/tui/app.py
from __future__ import annotations

import curses
import sys
import time

from centrallimit.config import Config
from centrallimit.core.histogram import Histogram
from centrallimit.core.sampling import draw_sums, make_rng
from centrallimit.core.stats import fit_report

QUIT_KEYS = {ord("q"), ord("Q"), 27}


class TerminalError(RuntimeError):
    """The terminal UI cannot start (no TTY or curses failed to initialise)."""


class App:
    def __init__(self, cfg: Config):
        self.cfg = cfg.validate()
        self.rng = make_rng(cfg.seed)
        self.hist = Histogram.for_steps(cfg.steps, cfg.padding)
        self.ticks = 0

    def on_tick(self) -> int:
        sums = draw_sums(self.rng, self.cfg.trials, self.cfg.steps, self.cfg.p)
        if self.cfg.mode == "batch":
            self.hist.clear()
        counted = self.hist.add(sums)
        self.ticks += 1
        return counted

    def report(self) -> dict:
        return fit_report(self.hist, self.cfg.steps, self.cfg.p)


def run_app(stdscr, app: App, clock=time.monotonic) -> None:
    from centrallimit.tui.render import draw, init_colors

    try:
        curses.curs_set(0)
    except curses.error:
        pass
    init_colors()
    stdscr.keypad(True)

    tick_rate = app.cfg.tick_rate
    last_tick = clock()
    while True:
        draw(stdscr, app)

        remaining = max(0.0, tick_rate - (clock() - last_tick))
        stdscr.timeout(int(remaining * 1000))
        key = stdscr.getch()
        if key in QUIT_KEYS:
            return
        if key == curses.KEY_RESIZE:
            curses.update_lines_cols()

        if clock() - last_tick >= tick_rate:
            app.on_tick()
            last_tick = clock()


def run_tui(cfg: Config) -> App:
    if not (sys.stdin.isatty() and sys.stdout.isatty()):
        raise TerminalError("centrallimit needs an interactive terminal (stdin/stdout must be a TTY)")
    app = App(cfg)
    try:
        curses.wrapper(run_app, app)
    except curses.error as exc:
        raise TerminalError(f"Could not initialise the terminal: {exc}") from exc
    return app


def run_headless(cfg: Config, ticks: int | None = None, verbose_every: int | None = None) -> App:
    """Run `ticks` ticks without a terminal, printing progress every `verbose_every` ticks."""
    app = App(cfg)
    ticks = cfg.max_ticks if ticks is None else ticks
    ticks = 1 if ticks is None else ticks
    verbose_every = cfg.verbose_every if verbose_every is None else verbose_every
    for it in range(1, ticks + 1):
        app.on_tick()
        if verbose_every and it % verbose_every == 0:
            r = app.report()
            print(
                f"[CLT] tick {it}: n={r['n']} mean={r['mean']:.4f} "
                f"var={r['variance']:.4f} (theory {r['theory_mean']:.4f}/{r['theory_variance']:.4f})"
            )
    return app
