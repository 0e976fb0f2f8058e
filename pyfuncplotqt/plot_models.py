"""Style models for the function plot widget.

Provides frozen dataclasses describing how each plot element is drawn. They
hold plain values only (colour strings, widths, dash lengths in pixels) so
they can be built and compared without a running Qt application; the widget
turns them into pens and brushes at paint time.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class LineStyle:
    """Stroke configuration for a line element.

    Attributes:
        color: Any colour accepted by ``pyqtgraph.mkColor`` (name, "#RRGGBB", ...).
        width: Stroke width in pixels.
        dash: Alternating dash/gap lengths in pixels. ``None`` draws a solid line.
    """

    color: str = "k"
    width: float = 1.0
    dash: Optional[Tuple[float, ...]] = None


@dataclass(frozen=True)
class MarkerStyle:
    """Filled disc drawn at each sample."""

    color: str = "r"
    radius: float = 5.0


@dataclass(frozen=True)
class TooltipStyle:
    """Hover label showing the data coordinates of a marker."""

    color: str = "k"
    font_family: str = "Arial"
    point_size: int = 14
    bold: bool = True
    offset: Tuple[float, float] = (10.0, -10.0)  # up and to the right


@dataclass(frozen=True)
class PlotStyle:
    """Overall plot appearance."""

    background_color: str = "w"
    axis: LineStyle = LineStyle(color="k", width=2.0)
    curve: LineStyle = LineStyle(color="k", width=3.0, dash=(10.0, 10.0))
    abs_curve: LineStyle = LineStyle(color="b", width=2.0, dash=(5.0, 5.0))
    selection: LineStyle = LineStyle(color="b", width=1.0, dash=(5.0, 5.0))
    marker: MarkerStyle = MarkerStyle()
    tooltip: TooltipStyle = TooltipStyle()
    antialias: bool = True
