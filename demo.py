import sys
import numpy as np

from PySide6.QtWidgets import (
    QApplication,
    QComboBox,
    QHBoxLayout,
    QMainWindow,
    QVBoxLayout,
    QWidget,
)

from pyfuncplotqt import FunctionPlotWidget, PlotOptionsWidget


FUNCTIONS = {
    "sin(x)": (np.sin, (-2 * np.pi, 2 * np.pi)),
    "x^2 - 2": (lambda x: x ** 2 - 2.0, (-2.0, 2.0)),
    "exp(-x) * cos(3x)": (lambda x: np.exp(-x) * np.cos(3 * x), (0.0, 4.0)),
    "constant": (lambda x: np.full_like(x, 1.5), (0.0, 1.0)),
}


def sample(fn, lo, hi, n=60):
    xs = np.linspace(lo, hi, n)
    return np.column_stack([xs, fn(xs)])


class MainWindow(QMainWindow):
    def __init__(self):
        super().__init__()
        self.setWindowTitle("pyfuncplotqt demo")
        self.resize(1100, 700)

        self.plot = FunctionPlotWidget()
        self.options = PlotOptionsWidget()
        self.options.bind(self.plot)

        self.function_combo = QComboBox()
        self.function_combo.addItems(list(FUNCTIONS))
        self.function_combo.currentTextChanged.connect(self._load_function)

        side = QVBoxLayout()
        side.addWidget(self.function_combo)
        side.addWidget(self.options)

        central = QWidget()
        layout = QHBoxLayout(central)
        layout.addWidget(self.plot, 1)
        layout.addLayout(side)
        self.setCentralWidget(central)

        self.plot.hoveredPointChanged.connect(self._on_hover)
        self._load_function(self.function_combo.currentText())

    def _load_function(self, name):
        fn, (lo, hi) = FUNCTIONS[name]
        self.plot.load(sample(fn, lo, hi))
        self.statusBar().showMessage(f"Loaded {name}", 2000)

    def _on_hover(self, point):
        if point is None:
            self.statusBar().clearMessage()
        else:
            self.statusBar().showMessage(f"({point[0]:.4f}, {point[1]:.4f})")


if __name__ == "__main__":
    app = QApplication(sys.argv)
    w = MainWindow()
    w.show()
    sys.exit(app.exec())
