#!/usr/bin/env python3
"""Styles and signals example.

Shows how to:
- Customise the look with PlotStyle / LineStyle / MarkerStyle
- React to zoom and hover through viewBoundsChanged / hoveredPointChanged
- Handle rejected input (InvalidInput)

Run:
    python examples/02_styles_and_signals.py
"""

import sys

import numpy as np
from PySide6.QtWidgets import QApplication, QLabel, QVBoxLayout, QWidget

from pyfuncplotqt import (
    FunctionPlotWidget,
    InvalidInput,
    LineStyle,
    MarkerStyle,
    PlotStyle,
)


def main():
    app = QApplication(sys.argv)

    style = PlotStyle(
        background_color="#fafafa",
        curve=LineStyle(color="#1f77b4", width=2.0, dash=(6.0, 3.0)),
        abs_curve=LineStyle(color="#ff7f0e", width=2.0, dash=(2.0, 2.0)),
        marker=MarkerStyle(color="#d62728", radius=4.0),
    )

    window = QWidget()
    window.setWindowTitle("pyfuncplotqt: styles and signals")
    layout = QVBoxLayout(window)

    plot = FunctionPlotWidget(style=style, hover_threshold=8.0)
    status = QLabel("Hover a marker or drag to zoom")
    layout.addWidget(plot, 1)
    layout.addWidget(status)

    def on_bounds(bounds):
        status.setText(
            f"x: [{bounds.min_x:.3f}, {bounds.max_x:.3f}]  "
            f"y: [{bounds.min_y:.3f}, {bounds.max_y:.3f}]"
        )

    def on_hover(point):
        if point is not None:
            status.setText(f"f({point[0]:.3f}) = {point[1]:.3f}")

    plot.viewBoundsChanged.connect(on_bounds)
    plot.hoveredPointChanged.connect(on_hover)

    try:
        plot.load([])
    except InvalidInput as e:
        print(f"Rejected: {e}")

    xs = np.linspace(-2.0, 2.0, 41)
    plot.load(np.column_stack([xs, xs ** 3 - xs]))

    window.resize(900, 600)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
