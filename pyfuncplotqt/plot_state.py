"""Qt-free state for the function plot: data holder plus interaction state machine.

``PlotState`` owns the loaded samples, the full-extent and current view bounds,
the display flags and the transient selection/hover state. It never draws; the
widget reads it while painting and forwards pointer events to ``dispatch``.

Pointer state machine:

    IDLE      --left press-->    SELECTING   (start = end = press point)
    SELECTING --drag-->          SELECTING   (end follows the pointer)
    SELECTING --left release-->  IDLE        (zoom to the dragged rectangle)
    any       --right release--> IDLE        (reset to the full extent)
    any       --move-->          unchanged   (hover hit-test)

Not thread-safe: create, mutate and read it from the GUI thread only.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional, Sequence

import numpy as np

from .exceptions import DegenerateBounds, InvalidInput
from .mapping import CoordinateMapper
from .models import (
    DisplayFlags,
    HoverTarget,
    InteractionMode,
    MouseButton,
    PointerEvent,
    PointerKind,
    SamplePoint,
    SelectionRect,
    ViewBounds,
)
from .utils import clamp_point

logger = logging.getLogger(__name__)

DEFAULT_HOVER_THRESHOLD = 5.0
DEFAULT_MIN_SPAN = 1.0


def as_sample_array(samples: Any) -> np.ndarray:
    """Validate samples and return them as a read-only ``(n, 2)`` float array.

    Args:
        samples: Sequence of (x, y) pairs or an array-like of shape ``(n, 2)``.

    Returns:
        A private, read-only copy of the samples.

    Raises:
        InvalidInput: If samples is empty, not shaped as (x, y) pairs, holds
            non-finite values, or is not sorted by ascending x.
    """
    try:
        arr = np.array(samples, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise InvalidInput(f"Samples must be (x, y) number pairs: {e}") from e

    if arr.size == 0:
        raise InvalidInput("Cannot load an empty sample sequence")
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise InvalidInput(f"Samples must have shape (n, 2), got {arr.shape}")
    if not np.all(np.isfinite(arr)):
        raise InvalidInput("Samples must contain only finite values")
    if arr.shape[0] > 1 and np.any(np.diff(arr[:, 0]) < 0):
        raise InvalidInput("Samples must be sorted by ascending x")

    arr.setflags(write=False)
    return arr


class PlotState:
    """Data, view bounds and interaction state of one function plot.

    Args:
        hover_threshold: Pixel distance under which a marker counts as hovered.
        min_span: Span used in place of a zero-width or zero-height extent
            when loading (single point or constant function).
    """

    def __init__(
        self,
        *,
        hover_threshold: float = DEFAULT_HOVER_THRESHOLD,
        min_span: float = DEFAULT_MIN_SPAN,
    ) -> None:
        if hover_threshold <= 0:
            raise ValueError("hover_threshold must be positive")
        if min_span <= 0:
            raise ValueError("min_span must be positive")

        self.hover_threshold = float(hover_threshold)
        self.min_span = float(min_span)
        self.flags = DisplayFlags()

        # Data
        self._samples: Optional[np.ndarray] = None
        self._full_bounds: Optional[ViewBounds] = None
        self._bounds: Optional[ViewBounds] = None

        # Panel size in pixels
        self._width = 0.0
        self._height = 0.0

        # Transient interaction state
        self._mode = InteractionMode.IDLE
        self._selection: Optional[SelectionRect] = None
        self._hover: Optional[HoverTarget] = None

        self._handlers: Dict[PointerKind, Callable[[PointerEvent], bool]] = {
            PointerKind.MOVE: self._on_move,
            PointerKind.PRESS: self._on_press,
            PointerKind.DRAG: self._on_drag,
            PointerKind.RELEASE: self._on_release,
        }

    # ------------------------------------------------------------------
    # Data holder
    # ------------------------------------------------------------------

    @property
    def has_data(self) -> bool:
        return self._samples is not None

    @property
    def samples(self) -> Optional[np.ndarray]:
        """The loaded ``(n, 2)`` sample array (read-only), or None."""
        return self._samples

    @property
    def view_bounds(self) -> Optional[ViewBounds]:
        return self._bounds

    @property
    def full_bounds(self) -> Optional[ViewBounds]:
        return self._full_bounds

    @property
    def mode(self) -> InteractionMode:
        return self._mode

    def load(self, samples: Sequence[SamplePoint]) -> ViewBounds:
        """Replace the samples and reset the view to their full extent.

        On failure nothing changes.

        Raises:
            InvalidInput: See ``as_sample_array``.
        """
        arr = as_sample_array(samples)
        full = ViewBounds.from_samples(arr, self.min_span)

        self._samples = arr
        self._full_bounds = full
        self._bounds = full
        self._cancel_selection()
        self._hover = None

        logger.debug("Loaded %d samples, bounds=%s", arr.shape[0], full.as_tuple())
        return full

    def clear(self) -> None:
        """Drop the loaded samples and all view state."""
        self._samples = None
        self._full_bounds = None
        self._bounds = None
        self._cancel_selection()
        self._hover = None

    # ------------------------------------------------------------------
    # View
    # ------------------------------------------------------------------

    def resize(self, width: float, height: float) -> None:
        """Record the panel size in pixels.

        A size change moves every marker on screen, so the hover target is
        dropped until the next pointer move.
        """
        width = max(float(width), 0.0)
        height = max(float(height), 0.0)
        if (width, height) != (self._width, self._height):
            self._hover = None
        self._width = width
        self._height = height

    @property
    def size(self) -> tuple[float, float]:
        return (self._width, self._height)

    def mapper(self) -> Optional[CoordinateMapper]:
        """Mapper for the current bounds and panel size, or None without data."""
        if self._bounds is None:
            return None
        return CoordinateMapper(self._bounds, self._width, self._height)

    def zoom_to(self, bounds: ViewBounds) -> None:
        """Show ``bounds``. A loaded sample set is required."""
        if not self.has_data:
            return
        self._bounds = bounds
        self._hover = None
        logger.debug("Zoomed to %s", bounds.as_tuple())

    def reset_view(self) -> Optional[ViewBounds]:
        """Zoom back to the full extent of the loaded samples."""
        self._cancel_selection()
        if self._samples is None:
            return None
        self._full_bounds = ViewBounds.from_samples(self._samples, self.min_span)
        self._bounds = self._full_bounds
        self._hover = None
        logger.debug("View reset to %s", self._bounds.as_tuple())
        return self._bounds

    def selection_rect(self) -> Optional[SelectionRect]:
        """Rectangle being dragged, only while selecting."""
        if self._mode is InteractionMode.SELECTING:
            return self._selection
        return None

    def hover_target(self) -> Optional[HoverTarget]:
        return self._hover

    def hover_point(self) -> Optional[SamplePoint]:
        return None if self._hover is None else self._hover.as_point()

    # ------------------------------------------------------------------
    # Interaction
    # ------------------------------------------------------------------

    def dispatch(self, event: PointerEvent) -> bool:
        """Route a pointer event through the state machine.

        Returns:
            True when the panel should be redrawn.
        """
        if not self.has_data:
            return False
        return self._handlers[event.kind](event)

    def _cancel_selection(self) -> None:
        self._mode = InteractionMode.IDLE
        self._selection = None

    def _on_press(self, event: PointerEvent) -> bool:
        if event.button is not MouseButton.LEFT:
            return False
        start = clamp_point(event.x, event.y, self._width, self._height)
        self._selection = SelectionRect(start=start, end=start)
        self._mode = InteractionMode.SELECTING
        return True

    def _on_drag(self, event: PointerEvent) -> bool:
        if self._mode is not InteractionMode.SELECTING or self._selection is None:
            return False
        end = clamp_point(event.x, event.y, self._width, self._height)
        self._selection = self._selection.with_end(end)
        return True

    def _on_release(self, event: PointerEvent) -> bool:
        if event.button is MouseButton.RIGHT:
            self.reset_view()
            return True

        if event.button is not MouseButton.LEFT:
            return False
        if self._mode is not InteractionMode.SELECTING or self._selection is None:
            return False

        end = clamp_point(event.x, event.y, self._width, self._height)
        rect = self._selection.with_end(end)
        self._cancel_selection()

        if rect.is_empty():
            logger.debug("Ignoring zero-size selection at %s", rect.start)
            return True

        try:
            self.zoom_to(self._selection_bounds(rect))
        except DegenerateBounds as e:
            logger.debug("Rejected zoom: %s", e)
        return True

    def _selection_bounds(self, rect: SelectionRect) -> ViewBounds:
        mapper = self.mapper()
        if mapper is None:
            raise DegenerateBounds("No view to zoom in")
        return ViewBounds.from_corners(
            mapper.to_data(*rect.start),
            mapper.to_data(*rect.end),
        )

    def _on_move(self, event: PointerEvent) -> bool:
        self._hover = self._hit_test(event.x, event.y)
        return True

    def _hit_test(self, px: float, py: float) -> Optional[HoverTarget]:
        """First sample whose marker lies within the hover threshold."""
        mapper = self.mapper()
        if mapper is None or mapper.scale <= 0 or self._samples is None:
            return None

        sx, sy = mapper.to_screen_array(self._samples[:, 0], self._samples[:, 1])
        distance = np.hypot(sx - px, sy - py)
        hits = np.flatnonzero(distance < self.hover_threshold)
        if hits.size == 0:
            return None

        index = int(hits[0])
        x, y = self._samples[index]
        return HoverTarget(index=index, x=float(x), y=float(y))
