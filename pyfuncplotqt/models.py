from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

import numpy as np

from .exceptions import DegenerateBounds

SamplePoint = Tuple[float, float]  # (x, y) in data space
PixelPoint = Tuple[float, float]  # (px, py), y grows downward


class InteractionMode(Enum):
    """States of the drag-to-zoom state machine."""

    IDLE = "idle"
    SELECTING = "selecting"


class MouseButton(Enum):
    """Toolkit-independent mouse button identifiers."""

    NONE = "none"
    LEFT = "left"
    RIGHT = "right"
    OTHER = "other"


class PointerKind(Enum):
    """Kinds of pointer events the plot state consumes."""

    MOVE = "move"
    PRESS = "press"
    DRAG = "drag"
    RELEASE = "release"


@dataclass(frozen=True)
class PointerEvent:
    """A raw pointer event in panel pixel coordinates.

    Attributes:
        kind: What happened (move, press, drag or release).
        x: Horizontal pixel position relative to the panel.
        y: Vertical pixel position relative to the panel, growing downward.
        button: Button pressed or released. ``MouseButton.NONE`` for moves and drags.
    """

    kind: PointerKind
    x: float
    y: float
    button: MouseButton = MouseButton.NONE


@dataclass(frozen=True)
class ViewBounds:
    """Visible rectangle in data space.

    Construction validates the span: both axes must be finite with
    ``max > min``, otherwise ``DegenerateBounds`` is raised.
    """

    min_x: float
    max_x: float
    min_y: float
    max_y: float

    def __post_init__(self) -> None:
        values = (self.min_x, self.max_x, self.min_y, self.max_y)
        if not all(math.isfinite(v) for v in values):
            raise DegenerateBounds(f"View bounds must be finite, got {values}")
        if self.max_x <= self.min_x:
            raise DegenerateBounds(
                f"Zero-width view: min_x={self.min_x!r}, max_x={self.max_x!r}"
            )
        if self.max_y <= self.min_y:
            raise DegenerateBounds(
                f"Zero-height view: min_y={self.min_y!r}, max_y={self.max_y!r}"
            )

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    def contains_x(self, x: float) -> bool:
        return self.min_x <= x <= self.max_x

    def contains_y(self, y: float) -> bool:
        return self.min_y <= y <= self.max_y

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.min_x, self.max_x, self.min_y, self.max_y)

    @classmethod
    def from_corners(cls, a: SamplePoint, b: SamplePoint) -> "ViewBounds":
        """Build bounds from two opposite corners given in any order."""
        return cls(
            min_x=min(a[0], b[0]),
            max_x=max(a[0], b[0]),
            min_y=min(a[1], b[1]),
            max_y=max(a[1], b[1]),
        )

    @classmethod
    def from_samples(cls, samples: np.ndarray, min_span: float = 1.0) -> "ViewBounds":
        """Compute the full extent of an x-sorted ``(n, 2)`` sample array.

        The x range is taken from the first and last samples; the y range comes
        from a scan over every sample. A zero span on either axis is widened to
        at least ``min_span`` around the value, more for large magnitudes.

        Args:
            samples: Non-empty array of shape ``(n, 2)``, sorted by x.
            min_span: Span substituted for a zero-width or zero-height axis.

        Returns:
            The bounding box of the samples.
        """
        min_x = float(samples[0, 0])
        max_x = float(samples[-1, 0])
        min_y = float(np.min(samples[:, 1]))
        max_y = float(np.max(samples[:, 1]))

        if max_x <= min_x:
            min_x, max_x = _widen(min_x, min_span)
        if max_y <= min_y:
            min_y, max_y = _widen(min_y, min_span)

        return cls(min_x=min_x, max_x=max_x, min_y=min_y, max_y=max_y)


def _widen(value: float, min_span: float) -> Tuple[float, float]:
    """Return a non-empty range centred on ``value``.

    The half-width is ``min_span / 2`` or a tiny fraction of ``|value|``,
    whichever is larger, so it survives float rounding at any magnitude.
    A side that would overflow stays at ``value``.
    """
    half = max(float(min_span) / 2.0, abs(value) * 1e-9)
    lo, hi = value - half, value + half
    if not math.isfinite(lo):
        lo = value
    if not math.isfinite(hi):
        hi = value
    return lo, hi


@dataclass(frozen=True)
class SelectionRect:
    """Pixel-space rectangle dragged out by the user.

    Attributes:
        start: Pixel position where the left button went down.
        end: Current (or final) pointer position.
    """

    start: PixelPoint
    end: PixelPoint

    def normalized(self) -> Tuple[float, float, float, float]:
        """Return ``(left, top, width, height)`` with a top-left origin."""
        left = min(self.start[0], self.end[0])
        top = min(self.start[1], self.end[1])
        width = abs(self.end[0] - self.start[0])
        height = abs(self.end[1] - self.start[1])
        return left, top, width, height

    def is_empty(self) -> bool:
        """True when the rectangle has no area on at least one axis."""
        _, _, width, height = self.normalized()
        return width == 0 or height == 0

    def with_end(self, end: PixelPoint) -> "SelectionRect":
        return SelectionRect(start=self.start, end=end)


@dataclass
class DisplayFlags:
    """Independent display toggles for the plot."""

    show_axes: bool = True
    show_markers: bool = True
    show_abs_curve: bool = False


@dataclass(frozen=True)
class HoverTarget:
    """Sample currently under the pointer.

    Attributes:
        index: Row of the sample in the loaded array.
        x: Data-space x of the sample.
        y: Data-space y of the sample.
    """

    index: int
    x: float
    y: float

    def as_point(self) -> SamplePoint:
        return (self.x, self.y)

