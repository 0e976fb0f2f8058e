"""Exceptions raised by the function plot widget and its Qt-free core."""

from __future__ import annotations


class PlotError(ValueError):
    """Base class for all plot errors."""


class InvalidInput(PlotError):
    """Raised when ``load`` receives an empty or malformed sample sequence."""


class DegenerateBounds(PlotError):
    """Raised when a view would have a zero, negative or non-finite span.

    Also raised when mapping pixels back to data space while the scale factor
    is zero (for example, a panel that has not been laid out yet).
    """
