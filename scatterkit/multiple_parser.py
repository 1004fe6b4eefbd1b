"""Parser that reads several scattering orders from one file line.

Lines are whitespace-separated: refractive index ``m``, scattering angle,
a reference angle (ignored), then one angle per mode starting in the
fourth column, and amplitude pairs starting in the sixth column, one pair
per mode. This layout fits files holding two orders side by side.
"""

from __future__ import annotations

import warnings
from typing import Iterable, Optional, Sequence

from .parameters import ParameterHolder, ScatteringMode, ScatteringOrderParameters
from .single_parser import DEFAULT_ULP, PathLike
from .utility import almost_equal, radians

Entry = tuple[ScatteringMode, ScatteringOrderParameters]


def _parse_line(
    line: str, theta_sca: float, modes: Sequence[ScatteringMode], ulp: float
) -> Optional[list[Entry]]:
    fields = line.split()
    try:
        m = float(fields[0])
        file_theta = float(fields[1])
    except (IndexError, ValueError):
        return None
    if not almost_equal(theta_sca, file_theta, ulp):
        return None

    rest = fields[3:]
    entries: list[Entry] = []
    for index, mode in enumerate(modes):
        try:
            theta = float(rest[index])
            amp_p1 = float(rest[2 + 2 * index])
            amp_p2 = float(rest[3 + 2 * index])
        except (IndexError, ValueError):
            raise ValueError(f"malformed parameter line: {line.strip()!r}") from None
        entries.append((
            mode,
            ScatteringOrderParameters(
                mode=mode,
                m=m,
                theta_sca=theta_sca,
                theta=radians(theta),
                amp_p1=amp_p1,
                amp_p2=amp_p2,
            ),
        ))
    return entries


class MultipleSignalParametersParser:
    """Reads the parameters of several scattering orders stored per line."""

    def parse(
        self,
        modes: Iterable[ScatteringMode],
        file_path: PathLike,
        theta_sca: float,
        ulp: float = DEFAULT_ULP,
    ) -> ParameterHolder:
        """Return the parameters of ``modes`` at ``theta_sca``.

        An empty holder is returned, with a warning, if the angle is absent.
        """
        mode_list = [ScatteringMode(mode) for mode in modes]
        with open(file_path, encoding="utf-8") as handle:
            for line in handle:
                entries = _parse_line(line, theta_sca, mode_list, ulp)
                if entries is not None:
                    return ParameterHolder(entries)
        warnings.warn(
            f"<parse warning>: file doesn't have {theta_sca:.4g} scattering angle",
            stacklevel=2,
        )
        return ParameterHolder()

    def parse_many(
        self,
        modes: Iterable[ScatteringMode],
        file_path: PathLike,
        thetas_sca: Iterable[float],
        ulp: float = DEFAULT_ULP,
    ) -> ParameterHolder:
        """Return the parameters of ``modes`` for each angle, searched in file order."""
        mode_list = [ScatteringMode(mode) for mode in modes]
        thetas = list(thetas_sca)
        collected: list[Entry] = []
        index = 0
        with open(file_path, encoding="utf-8") as handle:
            for line in handle:
                if index == len(thetas):
                    break
                entries = _parse_line(line, thetas[index], mode_list, ulp)
                if entries is not None:
                    collected.extend(entries)
                    index += 1
        if not collected:
            warnings.warn("No angles from the input array were found!", stacklevel=2)
        return ParameterHolder(collected)