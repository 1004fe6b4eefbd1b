"""Option objects that render themselves as gnuplot option strings.

Each class can be used on its own or combined with others through
inheritance; setters return the object itself so calls can be chained.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TypeVar

from .gnuplot import option_str, remove_extra_whitespaces, to_str

_S = TypeVar("_S", bound="Specs")


class Specs(ABC):
    """Base of every option object; renders to a gnuplot formatted string."""

    @abstractmethod
    def render(self) -> str:
        """Return the gnuplot formatted string for these options."""

    def __str__(self) -> str:
        return self.render()


class LineSpecs(Specs):
    """Line options: style, type, width, colour and dash type."""

    _linestyle: str = ""
    _linetype: str = ""
    _linewidth: str = ""
    _linecolor: str = ""
    _dashtype: str = ""

    def line_style(self: _S, value: int) -> _S:
        """Set the line style."""
        self._linestyle = "linestyle " + to_str(value)
        return self

    def line_type(self: _S, value: int) -> _S:
        """Set the line type."""
        self._linetype = "linetype " + to_str(value)
        return self

    def line_width(self: _S, value: int) -> _S:
        """Set the line width."""
        self._linewidth = "linewidth " + to_str(value)
        return self

    def line_color(self: _S, value: str) -> _S:
        """Set the line colour."""
        self._linecolor = "linecolor '" + value + "'"
        return self

    def dash_type(self: _S, value: int) -> _S:
        """Set the dash type."""
        self._dashtype = "dashtype " + to_str(value)
        return self

    def render(self) -> str:
        parts = (
            self._linestyle,
            self._linetype,
            self._linewidth,
            self._linecolor,
            self._dashtype,
        )
        return remove_extra_whitespaces("".join(part + " " for part in parts))


class PointSpecs(Specs):
    """Point options: type and size."""

    _pointtype: str = ""
    _pointsize: str = ""

    def point_type(self: _S, value: int) -> _S:
        """Set the point type."""
        self._pointtype = "pointtype " + to_str(value)
        return self

    def point_size(self: _S, value: int) -> _S:
        """Set the point size."""
        self._pointsize = "pointsize " + to_str(value)
        return self

    def render(self) -> str:
        return remove_extra_whitespaces(self._pointtype + " " + self._pointsize)


class FontSpecs(Specs):
    """Font options: name and point size."""

    _fontname: str = ""
    _fontsize: str = ""

    def font_name(self: _S, name: str) -> _S:
        """Set the font name (e.g. Helvetica, Georgia, Times)."""
        self._fontname = name
        return self

    def font_size(self: _S, size: int) -> _S:
        """Set the font point size."""
        if size < 0:
            raise ValueError("font size must not be negative")
        self._fontsize = str(int(size))
        return self

    def render(self) -> str:
        if self._fontname or self._fontsize:
            return f"font '{self._fontname},{self._fontsize}'"
        return ""


class OffsetSpecs(Specs):
    """Offset options, in characters or in graph or screen coordinates."""

    _xoffset: str = "0"
    _yoffset: str = "0"

    def shift_along_x(self: _S, chars: float) -> _S:
        """Shift along x by a number of characters (may be fractional)."""
        self._xoffset = to_str(float(chars))
        return self

    def shift_along_y(self: _S, chars: float) -> _S:
        """Shift along y by a number of characters (may be fractional)."""
        self._yoffset = to_str(float(chars))
        return self

    def shift_along_graph_x(self: _S, val: float) -> _S:
        """Shift along x in graph coordinates."""
        self._xoffset = "graph " + to_str(float(val))
        return self

    def shift_along_graph_y(self: _S, val: float) -> _S:
        """Shift along y in graph coordinates."""
        self._yoffset = "graph " + to_str(float(val))
        return self

    def shift_along_screen_x(self: _S, val: float) -> _S:
        """Shift along x in screen coordinates."""
        self._xoffset = "screen " + to_str(float(val))
        return self

    def shift_along_screen_y(self: _S, val: float) -> _S:
        """Shift along y in screen coordinates."""
        self._yoffset = "screen " + to_str(float(val))
        return self

    def render(self) -> str:
        offset = ""
        if self._xoffset != "0" or self._yoffset != "0":
            offset = f"offset {self._xoffset}, {self._yoffset}"
        return remove_extra_whitespaces(option_str(offset))