# demos/demo_quickstart.py
from centrallimit.config import Config
from centrallimit.tui.app import run_headless


def main():
    # A few quiet ticks, then the moments against the theory
    app = run_headless(Config(trials=2000, seed=0), ticks=5, verbose_every=0)
    r = app.report()
    print(f"Quickstart OK. n={r['n']} mean={r['mean']:.3f} var={r['variance']:.3f}")


if __name__ == "__main__":
    main()
