"""Grid cells: a generic cell and the Fast Marching cell."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from .console import str_info
from .utils import COMP_MARGIN


def _fmt(x: float) -> str:
    return format(x, "g")


@dataclass(eq=False)
class Cell:
    """Generic grid cell. ``occupancy`` of 1 means clear, 0 occupied."""

    value: float = -1.0
    occupancy: float = 1.0
    index: int = 0

    def set_default(self) -> None:
        """Restore the default value; occupancy is kept."""
        self.value = -1.0

    def is_occupied(self) -> bool:
        """True when the cell is an obstacle."""
        return self.occupancy < COMP_MARGIN

    def type_name(self) -> str:
        """Description of the cell type."""
        return "Cell - Basic cell"

    def __str__(self) -> str:
        return (
            str_info("Basic cell information:")
            + f"\tIndex: {self.index}\n"
            + f"\tValue: {_fmt(self.value)}\n"
            + f"\tOccupancy: {_fmt(self.occupancy)}\n"
        )


class FMState(Enum):
    """States of a cell during wave propagation."""

    OPEN = "OPEN"
    NARROW = "NARROW"
    FROZEN = "FROZEN"


@dataclass(eq=False)
class FMCell(Cell):
    """Fast Marching cell: ``value`` is the arrival time and ``occupancy``
    the propagation velocity."""

    value: float = math.inf
    state: FMState = FMState.OPEN
    bucket: int = 0
    h_value: float = 0.0

    @property
    def arrival_time(self) -> float:
        return self.value

    @arrival_time.setter
    def arrival_time(self, t: float) -> None:
        self.value = t

    @property
    def velocity(self) -> float:
        return self.occupancy

    @velocity.setter
    def velocity(self, v: float) -> None:
        self.occupancy = v

    @property
    def total_value(self) -> float:
        """Arrival time plus heuristic value."""
        return self.value + self.h_value

    def set_default(self) -> None:
        """Reset arrival time, state, bucket and heuristic; velocity is kept."""
        super().set_default()
        self.value = math.inf
        self.bucket = 0
        self.h_value = 0.0
        self.state = FMState.OPEN

    def type_name(self) -> str:
        """Description of the cell type."""
        return "FMCell - Fast Marching cell"

    def __str__(self) -> str:
        return (
            str_info("Fast Marching cell information:")
            + f"\tIndex: {self.index}\n"
            + f"\tValue: {_fmt(self.value)}\n"
            + f"\tVelocity: {_fmt(self.occupancy)}\n"
            + f"\tState: {self.state.value}\n"
        )