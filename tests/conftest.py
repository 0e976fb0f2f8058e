"""Shared fixtures for the plot tests.

The reference panel is 200x300 pixels showing ``[(0, 0), (1, 2), (2, -1)]``.
Bounds are (0, 2, -1, 2), so the scale is min(200/2, 300/3) = 100 px per unit
and the samples land on pixels (0, 200), (100, 0) and (200, 300).
"""

import pytest

from pyfuncplotqt.plot_state import PlotState

SAMPLES = [(0.0, 0.0), (1.0, 2.0), (2.0, -1.0)]
PANEL_WIDTH = 200
PANEL_HEIGHT = 300


@pytest.fixture
def samples():
    return list(SAMPLES)


@pytest.fixture
def state(samples):
    """PlotState with the reference samples on the reference panel."""
    s = PlotState()
    s.resize(PANEL_WIDTH, PANEL_HEIGHT)
    s.load(samples)
    return s
