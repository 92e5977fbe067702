import numpy as np


def test_imports():
    import centrallimit  # noqa: F401
    import centrallimit.cli as cli  # noqa: F401
    import centrallimit.config as config  # noqa: F401
    import centrallimit.core.histogram as histogram  # noqa: F401
    import centrallimit.core.sampling as sampling  # noqa: F401
    import centrallimit.core.stats as stats  # noqa: F401
    import centrallimit.tui.app as app  # noqa: F401
    import centrallimit.tui.render as render  # noqa: F401


def test_moments_are_consistent():
    # 19 fair ±1 steps: mean 0, variance 19
    from centrallimit.core.stats import theoretical_moments

    mean, var = theoretical_moments(19, 0.5)
    assert np.isclose(mean, 0.0)
    assert np.isclose(var, 19.0)
