"""Data space <-> pixel space conversion for the function plot.

The mapper uses one uniform scale factor for both axes, picked so the whole
view fits the panel along its tighter dimension:

    scale = min(width / (max_x - min_x), height / (max_y - min_y))

Pixel rows grow downward while data y grows upward, so y is flipped against
``max_y``. The panel may be left partly empty along the other axis.

Typical usage:

    mapper = CoordinateMapper(bounds, width=640, height=480)
    px, py = mapper.to_screen(1.0, 2.0)
    x, y = mapper.to_data(px, py)

Google-style docstrings + PEP8.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np

from .exceptions import DegenerateBounds
from .models import PixelPoint, SamplePoint, ViewBounds


@dataclass(frozen=True)
class CoordinateMapper:
    """Maps between data coordinates and panel pixels for fixed bounds and size.

    Attributes:
        bounds: Visible data-space rectangle.
        width: Panel width in pixels.
        height: Panel height in pixels.
    """

    bounds: ViewBounds
    width: float
    height: float

    @property
    def scale(self) -> float:
        """Pixels per data unit, or 0.0 when the panel has no area."""
        if self.width <= 0 or self.height <= 0:
            return 0.0
        scale_x = self.width / self.bounds.width
        scale_y = self.height / self.bounds.height
        return min(scale_x, scale_y)

    def to_screen(self, x: float, y: float) -> PixelPoint:
        """Convert a data-space point to pixel coordinates."""
        scale = self.scale
        return (
            (x - self.bounds.min_x) * scale,
            (self.bounds.max_y - y) * scale,
        )

    def to_data(self, px: float, py: float) -> SamplePoint:
        """Convert a pixel position back to data space.

        Raises:
            DegenerateBounds: If the panel has no area, so no inverse exists.
        """
        scale = self.scale
        if scale <= 0:
            raise DegenerateBounds(
                f"Cannot map pixels to data on a {self.width}x{self.height} panel"
            )
        return (
            px / scale + self.bounds.min_x,
            self.bounds.max_y - py / scale,
        )

    def to_screen_array(
        self, xs: np.ndarray, ys: np.ndarray
    ) -> Tuple[np.ndarray, np.ndarray]:
        """Vectorised ``to_screen`` over numpy arrays of equal length."""
        scale = self.scale
        px = (np.asarray(xs, dtype=np.float64) - self.bounds.min_x) * scale
        py = (self.bounds.max_y - np.asarray(ys, dtype=np.float64)) * scale
        return px, py
