"""Fill, filled-curve and histogram style options rendered for gnuplot."""

from __future__ import annotations

from typing import TypeVar

from .gnuplot import option_value_str, remove_extra_whitespaces, to_str
from .specs import Specs

_S = TypeVar("_S", bound="Specs")


class FillSpecs(Specs):
    """Colour or pattern fill options, with an optional border."""

    _fillmode: str = ""
    _fillcolor: str = ""
    _transparent: str = ""
    _density: str = ""
    _pattern_number: str = ""
    _bordercolor: str = ""
    _borderlinewidth: str = ""
    _bordershow: str = ""

    def fill_empty(self: _S) -> _S:
        """Use an empty fill style."""
        self._fillmode = "empty"
        return self

    def fill_solid(self: _S) -> _S:
        """Use a solid fill style."""
        self._fillmode = "solid"
        return self

    def fill_pattern(self: _S, number: int) -> _S:
        """Use a pattern fill style with the given pattern number."""
        self._fillmode = "pattern"
        self._pattern_number = to_str(int(number))
        return self

    def fill_color(self: _S, color: str) -> _S:
        """Set the colour of the solid or pattern fill."""
        self._fillcolor = "fillcolor '" + color + "'"
        return self

    def fill_intensity(self: _S, value: float) -> _S:
        """Set the fill intensity, clamped to [0, 1]; this selects a solid fill."""
        value = min(max(0.0, float(value)), 1.0)
        self._density = to_str(value)
        self._fillmode = "solid"
        return self

    def fill_transparent(self: _S, active: bool = True) -> _S:
        """Make the fill transparent or not; selects a solid fill if none is set."""
        self._transparent = "transparent" if active else ""
        if not self._fillmode:
            self._fillmode = "solid"
        return self

    def border_line_color(self: _S, color: str) -> _S:
        """Set the border line colour."""
        self._bordercolor = "'" + color + "'"
        return self

    def border_line_width(self: _S, value: int) -> _S:
        """Set the border line width."""
        self._borderlinewidth = to_str(int(value))
        return self

    def border_show(self: _S, show: bool = True) -> _S:
        """Show or hide the border."""
        self._bordershow = "yes" if show else "no"
        return self

    def border_hide(self: _S) -> _S:
        """Hide the border."""
        return self.border_show(False)

    def render(self) -> str:
        fillstyle = ""
        if self._fillmode == "solid":
            fillstyle = f"fillstyle {self._transparent} solid {self._density}"
        elif self._fillmode == "pattern":
            fillstyle = f"fillstyle {self._transparent} pattern {self._pattern_number}"
        elif self._fillmode == "empty":
            fillstyle = "fillstyle empty"

        borderstyle = ""
        if self._bordershow == "yes":
            borderstyle = (
                "border "
                + option_value_str("linecolor", self._bordercolor)
                + option_value_str("linewidth", self._borderlinewidth)
            )
        elif self._bordershow == "no":
            borderstyle = "noborder"

        return remove_extra_whitespaces(f"{self._fillcolor} {fillstyle} {borderstyle}")


class FilledCurvesSpecs(Specs):
    """Options limiting the filled area of filled curves."""

    _fill_mode: str = ""

    def above(self: _S) -> _S:
        """Fill only the area above the curves."""
        self._fill_mode = "above"
        return self

    def below(self: _S) -> _S:
        """Fill only the area below the curves."""
        self._fill_mode = "below"
        return self

    def render(self) -> str:
        return remove_extra_whitespaces(" " + self._fill_mode)


class HistogramStyleSpecs(Specs):
    """Histogram style options."""

    def __init__(self) -> None:
        self._type = ""
        self._gap_clustered = ""
        self._gap_errorbars = ""
        self._linewidth = ""

    def clustered(self) -> "HistogramStyleSpecs":
        """Use clustered histograms."""
        self._type = "clustered"
        return self

    def clustered_with_gap(self, value: float) -> "HistogramStyleSpecs":
        """Use clustered histograms with the given gap size."""
        self._type = "clustered"
        self._gap_clustered = "gap " + to_str(float(value))
        return self

    def row_stacked(self) -> "HistogramStyleSpecs":
        """Stack histograms with groups formed along rows."""
        self._type = "rowstacked"
        return self

    def column_stacked(self) -> "HistogramStyleSpecs":
        """Stack histograms with groups formed along columns."""
        self._type = "columnstacked"
        return self

    def error_bars(self) -> "HistogramStyleSpecs":
        """Use histograms with error bars."""
        self._type = "errorbars"
        return self

    def error_bars_with_gap(self, value: float) -> "HistogramStyleSpecs":
        """Use histograms with error bars and the given gap size."""
        self._type = "errorbars"
        self._gap_errorbars = "gap " + to_str(float(value))
        return self

    def error_bars_with_line_width(self, value: float) -> "HistogramStyleSpecs":
        """Use histograms with error bars and the given line width."""
        self._type = "errorbars"
        self._linewidth = "linewidth " + to_str(float(value))
        return self

    def render(self) -> str:
        parts = ["set style histogram", self._type]
        if self._type == "clustered":
            parts.append(self._gap_clustered)
        if self._type == "errorbars":
            parts.append(self._gap_errorbars)
            parts.append(self._linewidth)
        return remove_extra_whitespaces("".join(part + " " for part in parts))