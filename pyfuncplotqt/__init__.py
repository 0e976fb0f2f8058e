import logging

from .exceptions import PlotError, InvalidInput, DegenerateBounds
from .models import (
    ViewBounds,
    SelectionRect,
    DisplayFlags,
    HoverTarget,
    PointerEvent,
    PointerKind,
    MouseButton,
    InteractionMode,
)
from .mapping import CoordinateMapper
from .plot_state import PlotState
from .plot_models import LineStyle, MarkerStyle, TooltipStyle, PlotStyle

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Errors
    "PlotError",
    "InvalidInput",
    "DegenerateBounds",
    # Data and view models
    "ViewBounds",
    "SelectionRect",
    "DisplayFlags",
    "HoverTarget",
    "PointerEvent",
    "PointerKind",
    "MouseButton",
    "InteractionMode",
    "CoordinateMapper",
    "PlotState",
    # Styles
    "LineStyle",
    "MarkerStyle",
    "TooltipStyle",
    "PlotStyle",
    # Qt widgets
    "FunctionPlotWidget",
    "PlotOptionsWidget",
]


def __getattr__(name):
    # Qt widgets load lazily so the core imports without PySide6
    if name in ("FunctionPlotWidget", "PlotOptionsWidget"):
        from . import plot_widget

        return getattr(plot_widget, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
