import curses
import io
import itertools

import numpy as np
import pytest

import centrallimit.tui.render as render
from centrallimit.config import Config
from centrallimit.tui.app import App, TerminalError, run_app, run_headless, run_tui


class FakeScreen:
    def __init__(self, keys, size=(40, 200)):
        self.keys = list(keys)
        self.size = size
        self.cells = {}
        self.timeouts = []

    def keypad(self, flag):
        pass

    def timeout(self, ms):
        self.timeouts.append(ms)

    def getch(self):
        return self.keys.pop(0) if self.keys else -1

    def erase(self):
        self.cells.clear()

    def refresh(self):
        pass

    def getmaxyx(self):
        return self.size

    def addstr(self, y, x, text, attr=0):
        h, w = self.size
        if not (0 <= y < h and 0 <= x < w):
            raise curses.error("addstr out of range")
        self.cells[(y, x)] = text

    def text(self):
        return "\n".join(self.cells.values())


def test_bar_heights_scale_to_tallest():
    heights = render.bar_heights(np.array([0, 1, 50, 100]), 20)
    assert heights.tolist() == [0, 1, 10, 20]
    assert render.bar_heights(np.zeros(4), 20).tolist() == [0, 0, 0, 0]
    assert render.bar_heights(np.array([5, 5]), 0).tolist() == [0, 0]


def test_visible_bars():
    assert render.visible_bars(21, 200, 7, 1) == 21
    assert render.visible_bars(21, 40, 7, 1) == 5
    assert render.visible_bars(21, 6, 7, 1) == 0


def test_header_lines_mention_settings():
    app = run_headless(Config(trials=100, seed=0), ticks=2, verbose_every=0)
    lines = render.header_lines(app.cfg, app.ticks, app.report(), len(app.hist))
    assert lines[0] == render.TITLE
    assert "Iterations per render: 100" in lines[2]
    assert "Buckets: 21" in lines[2]
    assert "Ticks: 2" in lines[2]


def test_app_batch_mode_only_keeps_latest_tick():
    app = App(Config(trials=300, mode="batch", seed=0))
    counts = app.hist.counts
    app.on_tick()
    app.on_tick()
    assert app.hist.total == 300
    assert app.hist.counts is counts


def test_app_cumulative_mode_accumulates():
    app = App(Config(trials=300, seed=0))
    for _ in range(3):
        assert app.on_tick() == 300
    assert app.hist.total == 900
    assert app.ticks == 3
    # padding buckets past +steps never fill
    assert app.hist.counts[-1] == 0


def test_run_headless_prints_progress(capsys):
    run_headless(Config(trials=50, seed=1), ticks=4, verbose_every=2)
    out = capsys.readouterr().out
    assert out.count("[CLT] tick") == 2


def test_draw_renders_title_labels_and_values(monkeypatch):
    monkeypatch.setattr(curses, "has_colors", lambda: False)
    app = App(Config(trials=1000, seed=0))
    app.on_tick()
    screen = FakeScreen([])
    render.draw(screen, app)
    text = screen.text()
    assert render.TITLE in text
    assert "-19" in text
    assert render.BAR_CHAR in text


def test_draw_small_terminal(monkeypatch):
    monkeypatch.setattr(curses, "has_colors", lambda: False)
    screen = FakeScreen([], size=(5, 10))
    render.draw(screen, App(Config()))
    assert "Terminal too small" in screen.text()


def test_run_app_ticks_then_quits_on_q(monkeypatch):
    monkeypatch.setattr(curses, "curs_set", lambda n: None)
    monkeypatch.setattr(render, "init_colors", lambda: None)
    drawn = []
    monkeypatch.setattr(render, "draw", lambda scr, app: drawn.append(app.ticks))

    clock = itertools.count(0.0, 0.3).__next__
    app = App(Config(trials=10, seed=0, tick_rate=0.5))
    screen = FakeScreen([-1, -1, -1, ord("q")])
    run_app(screen, app, clock=clock)

    assert app.ticks >= 1
    assert len(drawn) == 4
    assert all(ms >= 0 for ms in screen.timeouts)


def test_run_tui_requires_tty(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO())
    with pytest.raises(TerminalError):
        run_tui(Config())


def _bar_rows_per_column(screen):
    columns = {}
    for (y, x), text in screen.cells.items():
        if text.startswith(render.BAR_CHAR):
            columns[x] = columns.get(x, 0) + 1
    return columns


def test_draw_narrow_terminal_scales_to_hidden_peak(monkeypatch):
    monkeypatch.setattr(curses, "has_colors", lambda: False)
    app = App(Config(trials=5000, seed=0))
    app.on_tick()

    wide = FakeScreen([], size=(40, 200))
    render.draw(wide, app)
    narrow = FakeScreen([], size=(40, 80))
    render.draw(narrow, app)

    # 80 columns fit buckets -19..-3; the peak near 0 is clipped
    assert "-3" in narrow.text()
    assert max(_bar_rows_per_column(narrow).values()) < max(_bar_rows_per_column(wide).values())


def test_draw_standard_terminal_shows_full_header(monkeypatch):
    monkeypatch.setattr(curses, "has_colors", lambda: False)
    app = App(Config(seed=0))
    app.on_tick()
    screen = FakeScreen([], size=(24, 80))
    render.draw(screen, app)
    text = screen.text()
    assert render.TITLE in text
    assert "Iterations per render" in text
    assert "mean" in text and "theory" in text
    assert "Press q to quit" in text


def test_draw_short_terminal_drops_spacer_first(monkeypatch):
    monkeypatch.setattr(curses, "has_colors", lambda: False)
    app = App(Config(seed=0))
    screen = FakeScreen([], size=(13, 80))  # 9 inner rows: room for 4 header lines
    render.draw(screen, app)
    text = screen.text()
    assert "mean" in text
    assert "Press q to quit" in text


def _quiet_run_app(monkeypatch):
    monkeypatch.setattr(curses, "curs_set", lambda n: None)
    monkeypatch.setattr(render, "init_colors", lambda: None)
    monkeypatch.setattr(render, "draw", lambda scr, app: None)


def test_run_app_quits_on_escape(monkeypatch):
    _quiet_run_app(monkeypatch)
    app = App(Config(trials=10, seed=0))
    screen = FakeScreen([27])
    run_app(screen, app, clock=lambda: 0.0)
    assert app.ticks == 0
    assert screen.keys == []


def test_run_app_handles_resize(monkeypatch):
    _quiet_run_app(monkeypatch)
    resized = []
    monkeypatch.setattr(curses, "update_lines_cols", lambda: resized.append(True))
    app = App(Config(trials=10, seed=0))
    screen = FakeScreen([curses.KEY_RESIZE, ord("Q")])
    run_app(screen, app, clock=lambda: 0.0)
    assert resized == [True]
    assert app.ticks == 0
