"""Helpers that build gnuplot script text and run gnuplot on a script."""

from __future__ import annotations

import math
import subprocess
from typing import Any, Sequence

PI = 3.14159265359
GOLDEN_RATIO = 1.618034
GOLDEN_RATIO_INVERSE = 1.0 / GOLDEN_RATIO
INCH_TO_POINTS = 72.0
POINT_TO_INCHES = 1.0 / INCH_TO_POINTS

NAN = math.nan
MISSING_INDICATOR = '"?"'

_RULE = "#" + "=" * 78
_INVALID_PATH_CHARS = frozenset(':*?!"<>|')


def to_str(val: Any = "") -> str:
    """Format a value the way a default-configured text stream would."""
    if isinstance(val, bool):
        return "1" if val else "0"
    if isinstance(val, int):
        return str(val)
    if isinstance(val, float):
        return "%g" % val
    return str(val)


def trim_left(text: str, character: str = " ") -> str:
    """Remove leading occurrences of ``character``."""
    return text.lstrip(character)


def trim_right(text: str, character: str = " ") -> str:
    """Remove trailing occurrences of ``character``."""
    return text.rstrip(character)


def trim(text: str, character: str = " ") -> str:
    """Remove ``character`` from both ends."""
    return trim_left(trim_right(text, character), character)


def collapse_whitespaces(text: str) -> str:
    """Reduce every run of whitespace to its first character."""
    kept: list[str] = []
    for ch in text:
        if kept and kept[-1].isspace() and ch.isspace():
            continue
        kept.append(ch)
    return "".join(kept)


def remove_extra_whitespaces(text: str) -> str:
    """Collapse whitespace runs and trim spaces from both ends."""
    return trim(collapse_whitespaces(text))


def escape_if_needed(val: Any) -> str:
    """Quote strings; write non-finite numbers as the missing indicator."""
    if isinstance(val, str):
        return "'" + val + "'"
    return to_str(val) if math.isfinite(float(val)) else MISSING_INDICATOR


def format_rows(*args: Sequence[Any]) -> str:
    """Write the columns ``args`` side by side, one row per line.

    Only as many rows as the shortest column holds are written.
    """
    if not args:
        raise ValueError("at least one column is required")
    size = min(len(column) for column in args)
    return "".join(
        " ".join(escape_if_needed(column[i]) for column in args) + "\n"
        for i in range(size)
    )


def write_dataset(index: int, *args: Sequence[Any]) -> str:
    """Return a gnuplot data set block holding the given columns."""
    header = f"{_RULE}\n# DATASET #{index}\n{_RULE}\n"
    return header + format_rows(*args) + "\n\n"


def title_str(word: str) -> str:
    """Return the formatted string for a plot title."""
    return word if word == "columnheader" else "'" + word + "'"


def option_str(option: str) -> str:
    """Return ``option`` followed by a space, or nothing if it is empty."""
    return option + " " if option else ""


def option_value_str(option: str, value: str) -> str:
    """Return ``option value `` or nothing if ``value`` is empty."""
    return f"{option} {value} " if value else ""


def command_value_str(cmd: str, value: str) -> str:
    """Return a ``cmd value`` line, or nothing if ``value`` is empty."""
    return f"{cmd} {value}\n" if value else ""


def size_str(width: float, height: float, as_inches: bool) -> str:
    """Return a canvas size in points, or in inches when ``as_inches``."""
    if as_inches:
        return (
            to_str(width * POINT_TO_INCHES)
            + "in,"
            + to_str(height * POINT_TO_INCHES)
            + "in"
        )
    return to_str(width) + "," + to_str(height)


def rgb(color: str | int) -> str:
    """Return a gnuplot colour spec for a colour name or a hex number."""
    if isinstance(color, int) and not isinstance(color, bool):
        return "rgb " + to_str(color)
    return "rgb '" + str(color) + "'"


class Angle:
    """Angle values formatted for gnuplot."""

    @staticmethod
    def deg(val: float) -> str:
        """Return the angle in degree units."""
        return to_str(int(val)) + "deg"

    @staticmethod
    def rad(val: float) -> str:
        """Return the angle in radian units."""
        return to_str(float(val))

    @staticmethod
    def pi(val: float) -> str:
        """Return the angle as a multiple of pi."""
        return to_str(float(val)) + "pi"


def show_terminal_cmd(size: str, font: Any = "") -> str:
    """Return terminal commands used when a plot is shown in a window."""
    font_text = str(font)
    lines = [_RULE, "# TERMINAL", _RULE, "set termoption enhanced"]
    if font_text:
        lines.append("set termoption " + font_text)
    lines.append("set terminal GNUTERM size " + size)
    lines.append("set encoding utf8")
    return "\n".join(lines) + "\n"


def save_terminal_cmd(extension: str, size: str, font: Any = "") -> str:
    """Return terminal commands used when a plot is saved to a file."""
    return (
        f"{_RULE}\n# TERMINAL\n{_RULE}\n"
        f"set terminal {extension} size {size} enhanced rounded {font}\n"
        "set encoding utf8\n"
    )


def output_cmd(filename: str) -> str:
    """Return the commands that direct gnuplot output to ``filename``."""
    return (
        f"{_RULE}\n# OUTPUT\n{_RULE}\n"
        f"set output '{filename}'\n"
        "set encoding utf8\n"
    )


def multiplot_cmd(rows: int, columns: int, title: str = "") -> str:
    """Return the command that starts a multiplot layout."""
    command = "set multiplot"
    if rows != 0 or columns != 0:
        command += f" layout {rows},{columns}"
    command += " rowsfirst downwards"
    if title:
        command += f" title '{title}'"
    return f"{_RULE}\n# MULTIPLOT\n{_RULE}\n{command}\n"


def run_script(script_filename: str, persistent: bool) -> bool:
    """Run gnuplot on a script; return True if it finished successfully.

    A persistent run keeps the plot window open after gnuplot exits.
    """
    command = ["gnuplot"]
    if persistent:
        command.append("-persistent")
    command.append(script_filename)
    try:
        result = subprocess.run(command, check=False)
    except OSError:
        return False
    return result.returncode == 0


def clean_path(path: str) -> str:
    """Remove characters that gnuplot cannot take in an output path."""
    return "".join(ch for ch in path if ch not in _INVALID_PATH_CHARS)