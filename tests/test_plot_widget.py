"""Tests for FunctionPlotWidget and PlotOptionsWidget in plot_widget.py.

Runs on Qt's offscreen platform. Mouse events are built by hand and fed to the
widget's handlers; rendering goes through paint_to onto a QImage so pixel
colours can be checked without a visible window.
"""

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

QtWidgets = pytest.importorskip("PySide6.QtWidgets")
pytest.importorskip("pyqtgraph")

from PySide6 import QtCore, QtGui  # noqa: E402
from PySide6.QtCore import QEvent, QPointF, Qt  # noqa: E402

from pyfuncplotqt import FunctionPlotWidget, PlotOptionsWidget  # noqa: E402
from pyfuncplotqt.exceptions import InvalidInput  # noqa: E402
from pyfuncplotqt.models import ViewBounds  # noqa: E402
from pyfuncplotqt.plot_models import LineStyle  # noqa: E402
from pyfuncplotqt.plot_widget import line_pen  # noqa: E402

SAMPLES = [(0.0, 0.0), (1.0, 2.0), (2.0, -1.0)]
PANEL_WIDTH = 200
PANEL_HEIGHT = 300
FULL = ViewBounds(0.0, 2.0, -1.0, 2.0)
NO_BUTTON = Qt.MouseButton.NoButton
LEFT = Qt.MouseButton.LeftButton
RIGHT = Qt.MouseButton.RightButton


@pytest.fixture(scope="module")
def qapp():
    app = QtWidgets.QApplication.instance()
    if app is None:
        app = QtWidgets.QApplication([])
    return app


@pytest.fixture
def plot(qapp):
    widget = FunctionPlotWidget()
    widget.resize(PANEL_WIDTH, PANEL_HEIGHT)
    widget.load(SAMPLES)
    yield widget
    widget.deleteLater()


def mouse_event(kind, x, y, button=NO_BUTTON, buttons=NO_BUTTON):
    pos = QPointF(x, y)
    return QtGui.QMouseEvent(
        kind, pos, pos, button, buttons, Qt.KeyboardModifier.NoModifier
    )


def press(widget, x, y, button=LEFT):
    widget.mousePressEvent(mouse_event(QEvent.Type.MouseButtonPress, x, y, button, button))


def drag(widget, x, y, buttons=LEFT):
    widget.mouseMoveEvent(mouse_event(QEvent.Type.MouseMove, x, y, NO_BUTTON, buttons))


def hover(widget, x, y):
    widget.mouseMoveEvent(mouse_event(QEvent.Type.MouseMove, x, y))


def release(widget, x, y, button=LEFT):
    widget.mouseReleaseEvent(
        mouse_event(QEvent.Type.MouseButtonRelease, x, y, button, NO_BUTTON)
    )


def render(widget, width=PANEL_WIDTH, height=PANEL_HEIGHT):
    image = QtGui.QImage(width, height, QtGui.QImage.Format.Format_ARGB32)
    image.fill(QtGui.QColor(0, 255, 0))
    painter = QtGui.QPainter(image)
    try:
        widget.paint_to(painter, width, height)
    finally:
        painter.end()
    return image


def rgb(image, x, y):
    color = image.pixelColor(x, y)
    return (color.red(), color.green(), color.blue())


def count_pixels(image, xs, ys, predicate):
    return sum(1 for x in xs for y in ys if predicate(*rgb(image, x, y)))


def count_changed(a, b, xs, ys):
    return sum(1 for x in xs for y in ys if a.pixel(x, y) != b.pixel(x, y))


def is_blue(r, g, b):
    return b > 200 and r < 160 and g < 160


class TestLoad:
    """Tests for loading data into the widget."""

    def test_bounds_after_load(self, plot):
        assert plot.view_bounds() == FULL
        assert plot.samples().shape == (3, 2)

    def test_load_emits_bounds(self, qapp):
        widget = FunctionPlotWidget()
        received = []
        widget.viewBoundsChanged.connect(received.append)
        widget.load(SAMPLES)
        assert received == [FULL]

    def test_empty_load_rejected(self, plot):
        with pytest.raises(InvalidInput):
            plot.load([])
        assert plot.view_bounds() == FULL

    def test_clear(self, plot):
        plot.clear()
        assert plot.samples() is None
        assert plot.view_bounds() is None


class TestMouse:
    """Tests for mouse-driven zoom, reset and hover."""

    def test_drag_zoom(self, plot):
        received = []
        plot.viewBoundsChanged.connect(received.append)

        press(plot, 10, 10)
        drag(plot, 50, 50)
        assert plot.state.selection_rect() is not None
        release(plot, 50, 50)

        assert plot.view_bounds().as_tuple() == pytest.approx((0.1, 0.5, 1.5, 1.9))
        assert plot.state.selection_rect() is None
        assert len(received) == 1

    def test_click_without_drag_keeps_bounds(self, plot):
        received = []
        plot.viewBoundsChanged.connect(received.append)
        press(plot, 10, 10)
        release(plot, 10, 10)
        assert plot.view_bounds() == FULL
        assert received == []

    def test_right_click_resets(self, plot):
        press(plot, 10, 10)
        drag(plot, 50, 50)
        release(plot, 50, 50)
        release(plot, 0, 0, RIGHT)
        assert plot.view_bounds() == FULL

    def test_reset_view(self, plot):
        press(plot, 10, 10)
        release(plot, 50, 50)
        plot.reset_view()
        assert plot.view_bounds() == FULL

    def test_hover_signal(self, plot):
        received = []
        plot.hoveredPointChanged.connect(received.append)

        hover(plot, 100, 0)
        hover(plot, 101, 1)
        hover(plot, 150, 150)

        assert received == [(1.0, 2.0), None]

    def test_drag_with_right_button_does_not_select(self, plot):
        drag(plot, 50, 50, buttons=RIGHT)
        assert plot.state.selection_rect() is None


class TestFlags:
    """Tests for the display flag setters."""

    def test_defaults(self, plot):
        assert plot.show_axes()
        assert plot.show_markers()
        assert not plot.show_abs_curve()

    def test_setters_leave_bounds(self, plot):
        """Test that toggling and redrawing never touches bounds or samples."""
        before = plot.samples().copy()
        plot.set_show_axes(False)
        render(plot)
        plot.set_show_markers(False)
        render(plot)
        plot.set_show_abs_curve(True)
        render(plot)
        assert (plot.samples() == before).all()
        assert not plot.show_axes()
        assert not plot.show_markers()
        assert plot.show_abs_curve()
        assert plot.view_bounds() == FULL


class TestRendering:
    """Tests for paint_to output."""

    def test_background_is_white(self, plot):
        image = render(plot)
        assert rgb(image, 190, 100) == (255, 255, 255)

    def test_marker_is_red(self, plot):
        # Sample (1, 2) maps to pixel (100, 0)
        image = render(plot)
        assert rgb(image, 100, 2) == (255, 0, 0)

    def test_axis_toggle(self, plot):
        # The x axis (y = 0) runs along pixel row 200
        r, g, b = rgb(render(plot), 150, 200)
        assert max(r, g, b) < 64

        plot.set_show_axes(False)
        assert rgb(render(plot), 150, 200) == (255, 255, 255)

    def test_markers_toggle(self, plot):
        plot.set_show_markers(False)
        assert rgb(render(plot), 100, 2) != (255, 0, 0)

    def test_render_with_everything_on(self, plot):
        """Test a frame with hover tooltip, |f(x)| and a live selection."""
        plot.set_show_abs_curve(True)
        hover(plot, 100, 0)
        press(plot, 20, 20)
        drag(plot, 120, 80)
        image = render(plot)
        assert not image.isNull()
        assert plot.view_bounds() == FULL

    def test_selection_is_outline_only(self, plot):
        press(plot, 130, 20)
        drag(plot, 190, 90)
        image = render(plot)
        # Inside the rectangle, clear of the curve
        assert rgb(image, 160, 55) == (255, 255, 255)
        top_edge = count_pixels(image, range(130, 191), range(19, 22), is_blue)
        assert top_edge > 10

    def test_tooltip_up_and_right_of_marker(self, plot):
        """Test that hovering (0, 0) at pixel (0, 200) adds text above-right."""
        if not QtGui.QFontDatabase.families():
            pytest.skip("no fonts available to the offscreen platform")
        plain = render(plot)
        hover(plot, 0, 200)
        assert plot.state.hover_point() == (0.0, 0.0)
        labelled = render(plot)

        assert count_changed(plain, labelled, range(10, 150), range(165, 196)) > 10
        assert count_changed(plain, labelled, range(0, 150), range(205, 260)) == 0

    def test_abs_curve_mirrored_only_when_enabled(self, plot):
        # Sample (2, -1) mirrors to (2, 1), so |f| runs (100, 0) -> (200, 100)
        # while the primary curve runs (100, 0) -> (200, 300)
        region = (range(140, 161), range(40, 61))
        assert count_pixels(render(plot), *region, is_blue) == 0

        plot.set_show_abs_curve(True)
        assert count_pixels(render(plot), *region, is_blue) > 0

        plot.set_show_abs_curve(False)
        assert count_pixels(render(plot), *region, is_blue) == 0

    def test_resize_clears_hover(self, plot):
        received = []
        hover(plot, 100, 0)
        plot.hoveredPointChanged.connect(received.append)
        plot.resize(PANEL_WIDTH * 2, PANEL_HEIGHT * 2)
        plot.resizeEvent(
            QtGui.QResizeEvent(plot.size(), QtCore.QSize(PANEL_WIDTH, PANEL_HEIGHT))
        )
        assert plot.state.hover_point() is None
        assert received == [None]

    def test_empty_widget_renders_background(self, qapp):
        image = render(FunctionPlotWidget(), 50, 50)
        assert rgb(image, 25, 25) == (255, 255, 255)

    def test_grab(self, plot):
        assert not plot.grab().isNull()


class TestLinePen:
    """Tests for line_pen."""

    def test_dash_in_pen_widths(self):
        pen = line_pen(LineStyle(color="k", width=2.0, dash=(10.0, 4.0)))
        assert pen.widthF() == pytest.approx(2.0)
        assert list(pen.dashPattern()) == pytest.approx([5.0, 2.0])
        assert pen.capStyle() == Qt.PenCapStyle.FlatCap

    def test_solid(self):
        pen = line_pen(LineStyle(color="b", width=1.0))
        assert pen.style() == Qt.PenStyle.SolidLine
        assert pen.color().blue() == 255


class TestPlotOptionsWidget:
    """Tests for PlotOptionsWidget."""

    def test_bind_syncs_checkboxes(self, plot):
        plot.set_show_abs_curve(True)
        options = PlotOptionsWidget()
        options.bind(plot)
        assert options.axes_check.isChecked()
        assert options.markers_check.isChecked()
        assert options.abs_check.isChecked()

    def test_checkboxes_drive_plot(self, plot):
        options = PlotOptionsWidget()
        options.bind(plot)

        options.axes_check.setChecked(False)
        options.markers_check.setChecked(False)
        options.abs_check.setChecked(True)

        assert not plot.show_axes()
        assert not plot.show_markers()
        assert plot.show_abs_curve()

    def test_reset_button(self, plot):
        options = PlotOptionsWidget()
        options.bind(plot)
        press(plot, 10, 10)
        release(plot, 50, 50)
        options.reset_btn.click()
        assert plot.view_bounds() == FULL
