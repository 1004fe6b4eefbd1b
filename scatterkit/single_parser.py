"""Parsers that read one scattering order per file line.

Each line holds whitespace-separated numbers: refractive index ``m``,
scattering angle, the order's angle in degrees and two amplitudes.
"""

from __future__ import annotations

import os
import warnings
from typing import Iterable, Optional, Union

from .parameters import ScatteringMode, ScatteringOrderParameters
from .utility import almost_equal, radians

PathLike = Union[str, "os.PathLike[str]"]

DEFAULT_ULP = 10e11


def _match_line(line: str, theta_sca: float, ulp: float) -> Optional[tuple[float, float, list[str]]]:
    fields = line.split()
    try:
        m = float(fields[0])
        file_theta = float(fields[1])
    except (IndexError, ValueError):
        return None
    if not almost_equal(theta_sca, file_theta, ulp):
        return None
    return m, file_theta, fields[2:]


def _build(
    mode: ScatteringMode, m: float, file_theta: float, rest: list[str], line: str
) -> ScatteringOrderParameters:
    try:
        theta, amp_p1, amp_p2 = (float(value) for value in rest[:3])
    except ValueError:
        raise ValueError(f"malformed parameter line: {line.strip()!r}") from None
    if mode == ScatteringMode.P0:
        theta = -theta
    return ScatteringOrderParameters(
        mode=mode,
        m=m,
        theta_sca=file_theta,
        theta=radians(theta),
        amp_p1=amp_p1,
        amp_p2=amp_p2,
    )


class SingleSignalParametersParser:
    """Reads the parameters of a single scattering order from a file."""

    def parse(
        self,
        mode: ScatteringMode,
        file_path: PathLike,
        theta_sca: float,
        ulp: float = DEFAULT_ULP,
    ) -> Optional[ScatteringOrderParameters]:
        """Return the parameters at ``theta_sca``, or None with a warning if absent."""
        mode = ScatteringMode(mode)
        with open(file_path, encoding="utf-8") as handle:
            for line in handle:
                found = _match_line(line, theta_sca, ulp)
                if found is not None:
                    return _build(mode, *found, line)
        warnings.warn(
            f"<parse warning>: file with P{int(mode)} doesn't have "
            f"{theta_sca:.4g} scattering angle",
            stacklevel=2,
        )
        return None

    def parse_many(
        self,
        mode: ScatteringMode,
        file_path: PathLike,
        thetas_sca: Iterable[float],
        ulp: float = DEFAULT_ULP,
    ) -> list[ScatteringOrderParameters]:
        """Return one parameter set per angle, searched in file order.

        Angles are looked up one after another down the file; an angle that
        is not found leaves a default entry carrying only the mode.
        """
        mode = ScatteringMode(mode)
        thetas = list(thetas_sca)
        results = [ScatteringOrderParameters(mode=mode) for _ in thetas]
        index = 0
        with open(file_path, encoding="utf-8") as handle:
            for line in handle:
                if index == len(thetas):
                    break
                found = _match_line(line, thetas[index], ulp)
                if found is not None:
                    results[index] = _build(mode, *found, line)
                    index += 1
        return results


class P21ParametersParser:
    """Parser bound to the P21 scattering order."""

    mode = ScatteringMode.P21

    def __init__(self) -> None:
        self._parser = SingleSignalParametersParser()

    def parse(
        self, file_path: PathLike, theta_sca: float, ulp: float = DEFAULT_ULP
    ) -> Optional[ScatteringOrderParameters]:
        """Return the P21 parameters at ``theta_sca``, or None if absent."""
        return self._parser.parse(self.mode, file_path, theta_sca, ulp)

    def parse_many(
        self, file_path: PathLike, thetas_sca: Iterable[float], ulp: float = DEFAULT_ULP
    ) -> list[ScatteringOrderParameters]:
        """Return the P21 parameters for each angle in ``thetas_sca``."""
        return self._parser.parse_many(self.mode, file_path, thetas_sca, ulp)