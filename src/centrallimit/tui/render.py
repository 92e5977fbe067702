# Copyright (c) 2025 CentralLimit contributors
# SPDX-License-Identifier: MIT
#
# This file is part of the CentralLimit project.
# Licensed under the MIT License – see LICENSE in the repo root.

# src/centrallimit/tui/render.py
from __future__ import annotations

import curses
import math

import numpy as np

from centrallimit.config import Config

TITLE = "Central Limit Theorem - A simple TUI demo"
MARGIN = 2
HEADER_FRACTION = 0.15
MIN_CHART_H = 5  # border, label row, value row and two bar rows
BAR_CHAR = "█"

PAIR_TITLE = 1
PAIR_BAR = 2
PAIR_VALUE = 3
PAIR_LABEL = 4


def init_colors() -> None:
    if not curses.has_colors():
        return
    curses.start_color()
    try:
        curses.use_default_colors()
        bg = -1
    except curses.error:
        bg = curses.COLOR_BLACK
    curses.init_pair(PAIR_TITLE, curses.COLOR_GREEN, curses.COLOR_BLACK)
    curses.init_pair(PAIR_BAR, curses.COLOR_GREEN, bg)
    curses.init_pair(PAIR_VALUE, curses.COLOR_WHITE, curses.COLOR_GREEN)
    curses.init_pair(PAIR_LABEL, curses.COLOR_WHITE, bg)


def bar_heights(counts: np.ndarray, rows: int) -> np.ndarray:
    """
    Scale counts to bar heights in [0, rows], tallest bucket filling `rows`.
    Any non-zero count gets at least one row so small tails stay visible.
    """
    counts = np.asarray(counts, dtype=float)
    heights = np.zeros(counts.shape, dtype=int)
    if rows <= 0 or counts.size == 0:
        return heights
    top = counts.max()
    if top <= 0:
        return heights
    heights = np.floor(counts / top * rows).astype(int)
    heights[(counts > 0) & (heights == 0)] = 1
    return heights


def visible_bars(n: int, width: int, bar_width: int, bar_gap: int) -> int:
    """How many of `n` bars fit in `width` columns."""
    if width < bar_width:
        return 0
    return min(n, (width + bar_gap) // (bar_width + bar_gap))


def _fmt(x: float, spec: str = ".3f") -> str:
    return "-" if x is None or (isinstance(x, float) and math.isnan(x)) else format(x, spec)


def header_lines(cfg: Config, ticks: int, report: dict, n_buckets: int) -> list[str]:
    return [
        TITLE,
        "",
        f"Iterations per render: {cfg.trials} | Steps: {cfg.steps} | Buckets: {n_buckets} | "
        f"Mode: {cfg.mode} | Ticks: {ticks}",
        f"mean {_fmt(report.get('mean'))} (theory {_fmt(report.get('theory_mean'))}) | "
        f"variance {_fmt(report.get('variance'))} (theory {_fmt(report.get('theory_variance'))})",
        "Press q to quit",
    ]


def _put(win, y: int, x: int, text: str, attr: int = 0) -> None:
    # bottom-right cell writes raise even when they succeed
    try:
        win.addstr(y, x, text, attr)
    except curses.error:
        pass


def _box(win, top: int, left: int, height: int, width: int) -> None:
    if height < 2 or width < 2:
        return
    right, bottom = left + width - 1, top + height - 1
    _put(win, top, left, "┌" + "─" * (width - 2) + "┐")
    for y in range(top + 1, bottom):
        _put(win, y, left, "│")
        _put(win, y, right, "│")
    _put(win, bottom, left, "└" + "─" * (width - 2) + "┘")


def draw(stdscr, app) -> None:
    cfg = app.cfg
    stdscr.erase()
    max_y, max_x = stdscr.getmaxyx()
    inner_h, inner_w = max_y - 2 * MARGIN, max_x - 2 * MARGIN
    if inner_h <= MIN_CHART_H or inner_w < cfg.bar_width + 2:
        _put(stdscr, 0, 0, "Terminal too small"[:max_x])
        stdscr.refresh()
        return

    color = curses.has_colors()
    title_attr = (curses.color_pair(PAIR_TITLE) if color else 0) | curses.A_BOLD
    bar_attr = curses.color_pair(PAIR_BAR) if color else 0
    value_attr = curses.color_pair(PAIR_VALUE) if color else curses.A_REVERSE
    label_attr = (curses.color_pair(PAIR_LABEL) if color else 0) | curses.A_DIM

    lines = header_lines(cfg, app.ticks, app.report(), len(app.hist))
    room = inner_h - MIN_CHART_H
    if len(lines) > room:
        lines = [line for line in lines if line][:room]
    header_h = min(max(len(lines), int(inner_h * HEADER_FRACTION)), room)
    for i, line in enumerate(lines):
        line = line[:inner_w]
        _put(stdscr, MARGIN + i, MARGIN + (inner_w - len(line)) // 2, line, title_attr)

    top = MARGIN + header_h
    chart_h = inner_h - header_h
    _box(stdscr, top, MARGIN, chart_h, inner_w)

    # inside the border: one row for labels, one for values at the bar base
    plot_w = inner_w - 2
    rows = chart_h - 3
    items = app.hist.items()
    n = visible_bars(len(items), plot_w, cfg.bar_width, cfg.bar_gap)
    if n == 0 or rows <= 0:
        stdscr.refresh()
        return
    # heights are relative to every bucket, visible or not
    heights = bar_heights(app.hist.counts, rows)[:n]
    items = items[:n]
    base = top + chart_h - 3  # row of the value cell
    label_row = base + 1
    for i, ((label, count), h) in enumerate(zip(items, heights)):
        x = MARGIN + 1 + i * (cfg.bar_width + cfg.bar_gap)
        for k in range(1, h):
            _put(stdscr, base - k, x, BAR_CHAR * cfg.bar_width, bar_attr)
        value = str(count)[: cfg.bar_width].center(cfg.bar_width)
        _put(stdscr, base, x, value, value_attr if h > 0 else label_attr)
        _put(stdscr, label_row, x, label[: cfg.bar_width].center(cfg.bar_width), label_attr)
    stdscr.refresh()
