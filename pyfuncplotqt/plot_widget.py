"""Interactive function plot widget.

This module provides a QPainter-based widget that draws a precomputed 2D
function sample and lets the user explore it with the mouse.

Key features:
  - Axes through the origin when it is in view
  - Dashed polyline of the samples, optional dashed |f(x)| curve
  - Filled markers with a coordinate tooltip on hover
  - Left-drag box zoom, right-click reset to the full extent
  - Signals for view bounds and hover changes

Typical usage:

    plot = FunctionPlotWidget()
    plot.load([(x, math.sin(x)) for x in xs])
    plot.set_show_abs_curve(True)

    plot.viewBoundsChanged.connect(on_bounds)
    plot.hoveredPointChanged.connect(on_hover)

All methods must be called from the GUI thread; the widget is not thread-safe.

Google-style docstrings + PEP8.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

import numpy as np
import pyqtgraph as pg
from PySide6 import QtGui
from PySide6.QtCore import QPointF, QRectF, Qt, Signal
from PySide6.QtWidgets import (
    QCheckBox,
    QGroupBox,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from .mapping import CoordinateMapper
from .models import (
    MouseButton,
    PointerEvent,
    PointerKind,
    SamplePoint,
    ViewBounds,
)
from .plot_models import LineStyle, PlotStyle
from .plot_state import DEFAULT_HOVER_THRESHOLD, DEFAULT_MIN_SPAN, PlotState
from .utils import format_point

logger = logging.getLogger(__name__)

_BUTTON_MAP = {
    Qt.MouseButton.NoButton: MouseButton.NONE,
    Qt.MouseButton.LeftButton: MouseButton.LEFT,
    Qt.MouseButton.RightButton: MouseButton.RIGHT,
}


def line_pen(style: LineStyle) -> QtGui.QPen:
    """Convert a line style to a pen.

    Dash lengths in the style are pixels; Qt measures them in pen widths.
    """
    pen = pg.mkPen(color=style.color, width=style.width)
    pen.setCapStyle(Qt.PenCapStyle.FlatCap)
    pen.setJoinStyle(Qt.PenJoinStyle.RoundJoin)
    if style.dash:
        unit = style.width if style.width > 0 else 1.0
        pen.setDashPattern([float(d) / unit for d in style.dash])
    return pen


def _to_button(button: Qt.MouseButton) -> MouseButton:
    return _BUTTON_MAP.get(button, MouseButton.OTHER)


class FunctionPlotWidget(QWidget):
    """Panel that renders one function sample with zoom and hover support.

    Attributes:
        viewBoundsChanged: Emitted with the new ``ViewBounds`` after a load,
            zoom or reset.
        hoveredPointChanged: Emitted with the hovered ``(x, y)`` sample, or
            ``None`` when the pointer leaves all markers.
    """

    viewBoundsChanged = Signal(object)
    hoveredPointChanged = Signal(object)

    def __init__(
        self,
        parent: Optional[QWidget] = None,
        *,
        style: Optional[PlotStyle] = None,
        hover_threshold: float = DEFAULT_HOVER_THRESHOLD,
        min_span: float = DEFAULT_MIN_SPAN,
    ) -> None:
        """Initialize the plot widget.

        Args:
            parent: Parent widget.
            style: Appearance of the plot elements. Defaults to ``PlotStyle()``.
            hover_threshold: Pointer-to-marker distance (pixels) that counts as hover.
            min_span: Extent used for an axis whose samples have zero span.
        """
        super().__init__(parent)

        self._state = PlotState(hover_threshold=hover_threshold, min_span=min_span)
        self._style = style if style is not None else PlotStyle()

        # Hover needs move events without a pressed button
        self.setMouseTracking(True)
        self.setMinimumSize(100, 100)

    # ------------------------------------------------------------------
    # Data
    # ------------------------------------------------------------------

    @property
    def state(self) -> PlotState:
        return self._state

    def load(self, samples: Sequence[SamplePoint]) -> None:
        """Display new samples and zoom to their full extent.

        Args:
            samples: Non-empty sequence of (x, y) pairs sorted by ascending x.

        Raises:
            InvalidInput: If samples is empty or malformed. The previous plot
                stays as it was.
        """
        had_hover = self._state.hover_point() is not None
        bounds = self._state.load(samples)
        self.viewBoundsChanged.emit(bounds)
        if had_hover:
            self.hoveredPointChanged.emit(None)
        self.update()

    def clear(self) -> None:
        """Remove the samples and blank the panel."""
        self._run(self._state.clear)
        self.update()

    def samples(self) -> Optional[np.ndarray]:
        return self._state.samples

    def view_bounds(self) -> Optional[ViewBounds]:
        return self._state.view_bounds

    def reset_view(self) -> None:
        """Zoom back to the full extent of the loaded samples."""
        self._run(self._state.reset_view)
        self.update()

    # ------------------------------------------------------------------
    # Display flags
    # ------------------------------------------------------------------

    def set_show_axes(self, show: bool) -> None:
        self._state.flags.show_axes = bool(show)
        self.update()

    def set_show_markers(self, show: bool) -> None:
        self._state.flags.show_markers = bool(show)
        self.update()

    def set_show_abs_curve(self, show: bool) -> None:
        """Toggle the |f(x)| curve drawn on top of the primary curve."""
        self._state.flags.show_abs_curve = bool(show)
        self.update()

    def show_axes(self) -> bool:
        return self._state.flags.show_axes

    def show_markers(self) -> bool:
        return self._state.flags.show_markers

    def show_abs_curve(self) -> bool:
        return self._state.flags.show_abs_curve

    def plot_style(self) -> PlotStyle:
        return self._style

    def set_plot_style(self, style: PlotStyle) -> None:
        self._style = style
        self.update()

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def resizeEvent(self, event: QtGui.QResizeEvent) -> None:
        self._run(lambda: self._state.resize(self.width(), self.height()))
        super().resizeEvent(event)

    def mousePressEvent(self, event: QtGui.QMouseEvent) -> None:
        self._dispatch(event, PointerKind.PRESS, _to_button(event.button()))

    def mouseMoveEvent(self, event: QtGui.QMouseEvent) -> None:
        if event.buttons() == Qt.MouseButton.NoButton:
            self._dispatch(event, PointerKind.MOVE, MouseButton.NONE)
        else:
            self._dispatch(event, PointerKind.DRAG, MouseButton.NONE)

    def mouseReleaseEvent(self, event: QtGui.QMouseEvent) -> None:
        self._dispatch(event, PointerKind.RELEASE, _to_button(event.button()))

    def _dispatch(
        self, event: QtGui.QMouseEvent, kind: PointerKind, button: MouseButton
    ) -> None:
        pos = event.position()
        pointer = PointerEvent(kind=kind, x=pos.x(), y=pos.y(), button=button)
        self._state.resize(self.width(), self.height())
        redraw = self._run(lambda: self._state.dispatch(pointer))
        if redraw:
            self.update()
        event.accept()

    def _run(self, action):
        """Run a state change and emit signals for what it changed."""
        prev_bounds = self._state.view_bounds
        prev_hover = self._state.hover_point()

        result = action()

        bounds = self._state.view_bounds
        if bounds is not None and bounds != prev_bounds:
            self.viewBoundsChanged.emit(bounds)
            self.update()
        hover = self._state.hover_point()
        if hover != prev_hover:
            self.hoveredPointChanged.emit(hover)
        return result

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def paintEvent(self, event: QtGui.QPaintEvent) -> None:
        self._state.resize(self.width(), self.height())
        painter = QtGui.QPainter(self)
        try:
            self.paint_to(painter, self.width(), self.height())
        finally:
            painter.end()

    def paint_to(self, painter: QtGui.QPainter, width: float, height: float) -> None:
        """Render the plot onto any painter.

        Order: background, axes, curve, |f(x)| curve, markers with the hover
        tooltip, selection rectangle.

        Args:
            painter: Active painter for the target device.
            width: Target width in pixels.
            height: Target height in pixels.
        """
        style = self._style
        painter.setRenderHint(QtGui.QPainter.RenderHint.Antialiasing, style.antialias)
        painter.fillRect(QRectF(0, 0, width, height), pg.mkColor(style.background_color))

        samples = self._state.samples
        bounds = self._state.view_bounds
        if samples is None or bounds is None:
            return

        mapper = CoordinateMapper(bounds, width, height)
        if mapper.scale <= 0:
            return

        flags = self._state.flags
        xs = samples[:, 0]
        ys = samples[:, 1]
        sx, sy = mapper.to_screen_array(xs, ys)

        if flags.show_axes:
            self._paint_axes(painter, mapper)

        self._paint_polyline(painter, sx, sy, style.curve)

        if flags.show_abs_curve:
            ax, ay = mapper.to_screen_array(xs, np.abs(ys))
            self._paint_polyline(painter, ax, ay, style.abs_curve)

        if flags.show_markers:
            self._paint_markers(painter, sx, sy)

        self._paint_selection(painter)

    def _paint_axes(self, painter: QtGui.QPainter, mapper: CoordinateMapper) -> None:
        bounds = mapper.bounds
        painter.setPen(line_pen(self._style.axis))

        if bounds.contains_x(0.0):
            top = mapper.to_screen(0.0, bounds.max_y)
            bottom = mapper.to_screen(0.0, bounds.min_y)
            painter.drawLine(QPointF(*top), QPointF(*bottom))

        if bounds.contains_y(0.0):
            left = mapper.to_screen(bounds.min_x, 0.0)
            right = mapper.to_screen(bounds.max_x, 0.0)
            painter.drawLine(QPointF(*left), QPointF(*right))

    def _paint_polyline(
        self,
        painter: QtGui.QPainter,
        sx: np.ndarray,
        sy: np.ndarray,
        style: LineStyle,
    ) -> None:
        path = QtGui.QPainterPath()
        path.moveTo(float(sx[0]), float(sy[0]))
        for x, y in zip(sx[1:], sy[1:]):
            path.lineTo(float(x), float(y))

        painter.setPen(line_pen(style))
        painter.setBrush(Qt.BrushStyle.NoBrush)
        painter.drawPath(path)

    def _paint_markers(
        self, painter: QtGui.QPainter, sx: np.ndarray, sy: np.ndarray
    ) -> None:
        marker = self._style.marker
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(pg.mkBrush(marker.color))
        for x, y in zip(sx, sy):
            painter.drawEllipse(QPointF(float(x), float(y)), marker.radius, marker.radius)

        hover = self._state.hover_target()
        if hover is None or hover.index >= len(sx):
            return

        tooltip = self._style.tooltip
        font = QtGui.QFont(tooltip.font_family, tooltip.point_size)
        font.setBold(tooltip.bold)
        painter.setFont(font)
        painter.setPen(pg.mkPen(tooltip.color))
        anchor = QPointF(
            float(sx[hover.index]) + tooltip.offset[0],
            float(sy[hover.index]) + tooltip.offset[1],
        )
        painter.drawText(anchor, format_point(hover.x, hover.y))

    def _paint_selection(self, painter: QtGui.QPainter) -> None:
        rect = self._state.selection_rect()
        if rect is None:
            return
        painter.setPen(line_pen(self._style.selection))
        painter.setBrush(Qt.BrushStyle.NoBrush)
        painter.drawRect(QRectF(*rect.normalized()))


class PlotOptionsWidget(QWidget):
    """Control panel for the plot display flags.

    Provides UI controls for:
    - Axes, markers and |f(x)| curve visibility
    - Resetting the zoom
    """

    showAxesToggled = Signal(bool)
    showMarkersToggled = Signal(bool)
    showAbsCurveToggled = Signal(bool)
    resetRequested = Signal()

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        """Initialize the control widget.

        Args:
            parent: Parent widget
        """
        super().__init__(parent)

        self._build_ui()

    def _build_ui(self) -> None:
        """Build the user interface."""
        layout = QVBoxLayout(self)

        display_group = QGroupBox("Display")
        display_layout = QVBoxLayout(display_group)

        self.axes_check = QCheckBox("Show axes")
        self.axes_check.setChecked(True)
        self.axes_check.toggled.connect(self._on_axes_toggled)
        display_layout.addWidget(self.axes_check)

        self.markers_check = QCheckBox("Show markers")
        self.markers_check.setChecked(True)
        self.markers_check.toggled.connect(self._on_markers_toggled)
        display_layout.addWidget(self.markers_check)

        self.abs_check = QCheckBox("Show |f(x)|")
        self.abs_check.toggled.connect(self._on_abs_toggled)
        display_layout.addWidget(self.abs_check)

        layout.addWidget(display_group)

        self.reset_btn = QPushButton("Reset Zoom")
        self.reset_btn.clicked.connect(self._on_reset)
        layout.addWidget(self.reset_btn)

        layout.addStretch()

    def bind(self, plot: FunctionPlotWidget) -> None:
        """Sync the checkboxes with ``plot`` and forward every change to it."""
        for check, value in (
            (self.axes_check, plot.show_axes()),
            (self.markers_check, plot.show_markers()),
            (self.abs_check, plot.show_abs_curve()),
        ):
            blocked = check.blockSignals(True)
            check.setChecked(value)
            check.blockSignals(blocked)

        self.showAxesToggled.connect(plot.set_show_axes)
        self.showMarkersToggled.connect(plot.set_show_markers)
        self.showAbsCurveToggled.connect(plot.set_show_abs_curve)
        self.resetRequested.connect(plot.reset_view)
        logger.debug("Options panel bound to %r", plot)

    def _on_axes_toggled(self, checked: bool) -> None:
        """Handle axes checkbox toggle."""
        self.showAxesToggled.emit(checked)

    def _on_markers_toggled(self, checked: bool) -> None:
        """Handle markers checkbox toggle."""
        self.showMarkersToggled.emit(checked)

    def _on_abs_toggled(self, checked: bool) -> None:
        """Handle |f(x)| checkbox toggle."""
        self.showAbsCurveToggled.emit(checked)

    def _on_reset(self) -> None:
        """Handle reset button click."""
        self.resetRequested.emit()
