#!/usr/bin/env python3
"""Quick Start Example

This example shows the most basic usage of pyfuncplotqt:
- Creating a plot widget
- Loading a sampled function
- Turning on the |f(x)| curve
- Displaying the plot

Left-drag to zoom, right-click to reset, hover a marker to see its value.
"""

import sys

import numpy as np
from PySide6 import QtWidgets

from pyfuncplotqt import FunctionPlotWidget

def main():
    """Run the quick start example."""
    app = QtWidgets.QApplication(sys.argv)

    # Sample sin(x) on [-pi, pi]
    xs = np.linspace(-np.pi, np.pi, 25)
    samples = np.column_stack([xs, np.sin(xs)])

    plot = FunctionPlotWidget()
    plot.load(samples)
    plot.set_show_abs_curve(True)

    plot.resize(800, 400)
    plot.show()
    sys.exit(app.exec())

if __name__ == "__main__":
    main()
