"""Small value types and defaults used when building gnuplot plots."""

from __future__ import annotations

from enum import Enum
from typing import Union

from .gnuplot import GOLDEN_RATIO

DEFAULT_FIGURE_HEIGHT = 200
DEFAULT_FIGURE_WIDTH = DEFAULT_FIGURE_HEIGHT * GOLDEN_RATIO
DEFAULT_FIGURE_BOXWIDTH_RELATIVE = 0.9

DEFAULT_PALETTE = "dark2"

DEFAULT_TEXTCOLOR = "#404040"

DEFAULT_LINEWIDTH = 2
DEFAULT_POINTSIZE = 2

DEFAULT_FILL_INTENSITY = 1.0
DEFAULT_FILL_TRANSPARENCY = False
DEFAULT_FILL_BORDER_LINEWIDTH = 2

DEFAULT_BORDER_LINECOLOR = "#404040"
DEFAULT_BORDER_LINETYPE = 1
DEFAULT_BORDER_LINEWIDTH = 2

DEFAULT_GRID_LINECOLOR = "#d6d7d9"
DEFAULT_GRID_LINEWIDTH = 1
DEFAULT_GRID_LINETYPE = 1
DEFAULT_GRID_DASHTYPE = 0

DEFAULT_LEGEND_TEXTCOLOR = DEFAULT_TEXTCOLOR
DEFAULT_LEGEND_FRAME_SHOW = False
DEFAULT_LEGEND_FRAME_LINECOLOR = DEFAULT_GRID_LINECOLOR
DEFAULT_LEGEND_FRAME_LINEWIDTH = DEFAULT_GRID_LINEWIDTH
DEFAULT_LEGEND_FRAME_LINETYPE = 1
DEFAULT_LEGEND_FRAME_EXTRA_WIDTH = 0
DEFAULT_LEGEND_FRAME_EXTRA_HEIGHT = 1
DEFAULT_LEGEND_SPACING = 1
DEFAULT_LEGEND_SAMPLE_LENGTH = 4

DEFAULT_TICS_MIRROR = False
DEFAULT_TICS_ROTATE = False
DEFAULT_TICS_SCALE_MAJOR_BY = 0.50
DEFAULT_TICS_SCALE_MINOR_BY = 0.25
DEFAULT_TICS_MINOR_SHOW = False


class Extension(Enum):
    """File formats a plot can be saved in."""

    EMF = "emf"
    PNG = "png"
    SVG = "svg"
    PDF = "pdf"
    EPS = "eps"


class ColumnIndex:
    """A data column, given by its number or by its header name."""

    __slots__ = ("value",)

    def __init__(self, col: Union[int, str] = 0) -> None:
        if isinstance(col, str):
            self.value = "'" + col + "'"
        else:
            self.value = str(int(col))

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"ColumnIndex({self.value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColumnIndex):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)


class StringOrDouble:
    """A value stored as text that may be given as a string or a number."""

    __slots__ = ("value",)

    def __init__(self, val: Union[float, str] = 0.0) -> None:
        if isinstance(val, str):
            self.value = val
        else:
            self.value = "%f" % float(val)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"StringOrDouble({self.value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StringOrDouble):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)


def linspace(x0: float, x1: float, num_intervals: int) -> list[float]:
    """Return ``num_intervals + 1`` evenly spaced values from ``x0`` to ``x1``."""
    if num_intervals <= 0:
        raise ValueError("number of intervals must be positive")
    return [x0 + i * (x1 - x0) / float(num_intervals) for i in range(num_intervals + 1)]


def unit_range(x0: int, x1: int) -> list[float]:
    """Return the values from ``x0`` to ``x1`` inclusive in unit steps."""
    incr = 1 if x1 > x0 else -1
    return [float(x) for x in range(x0, x1 + incr, incr)]