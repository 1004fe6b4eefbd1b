"""Scattering modes and the parameters that describe one scattering order."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Optional


class Polarization(IntEnum):
    """Polarization of the incident laser light."""

    ONE = 1
    TWO = 2


class ScatteringMode(IntEnum):
    """Scattering order, numbered as in the parameter files."""

    P0 = 0
    P1 = 1
    P21 = 21
    P22 = 22
    P23 = 23
    P31 = 31
    P32 = 32


@dataclass
class ScatteringOrderParameters:
    """Parameters of one scattering order at one scattering angle."""

    mode: ScatteringMode = ScatteringMode.P0
    m: float = 0.0
    theta_sca: Optional[float] = None
    theta: float = 0.0
    amp_p1: float = 0.0
    amp_p2: float = 0.0


class ParameterHolder:
    """Collection of parameters grouped by scattering mode.

    A mode may hold several entries (one per scattering angle); they keep
    the order in which they were added.
    """

    def __init__(
        self,
        params: Iterable[tuple[ScatteringMode, ScatteringOrderParameters]] = (),
    ) -> None:
        self._params: dict[ScatteringMode, list[ScatteringOrderParameters]] = {}
        for mode, entry in params:
            self._params.setdefault(ScatteringMode(mode), []).append(entry)

    def __getitem__(self, mode: ScatteringMode) -> ScatteringOrderParameters:
        """Return the first parameters stored for ``mode``."""
        entries = self._params.get(mode)
        if not entries:
            raise KeyError(f"no parameters for mode {mode!r}")
        return entries[0]

    def select(self, mode: ScatteringMode) -> list[ScatteringOrderParameters]:
        """Return every parameter set stored for ``mode``."""
        return list(self._params.get(mode, ()))

    def __len__(self) -> int:
        return sum(len(entries) for entries in self._params.values())

    def __repr__(self) -> str:
        return f"ParameterHolder({self._params!r})"