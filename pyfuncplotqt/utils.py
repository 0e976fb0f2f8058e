from __future__ import annotations

import numpy as np


def clamp(value: float, vmin: float = 0.0, vmax: float = 1.0) -> float:
    """Clamp numeric values to [vmin, vmax]."""
    lo = float(vmin)
    hi = float(vmax)
    if lo > hi:
        lo, hi = hi, lo

    try:
        v = float(value)
    except (TypeError, ValueError):
        return lo

    if not np.isfinite(v):
        return lo

    return float(np.clip(v, lo, hi))


def format_point(x: float, y: float) -> str:
    """Format a data-space point the way the hover tooltip shows it."""
    return f"({x:.2f}, {y:.2f})"


def clamp_point(px: float, py: float, width: float, height: float) -> tuple[float, float]:
    """Clamp a pixel position to the panel rectangle ``[0, width] x [0, height]``."""
    return clamp(px, 0.0, max(float(width), 0.0)), clamp(py, 0.0, max(float(height), 0.0))
