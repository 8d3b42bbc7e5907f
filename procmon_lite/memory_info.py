"""Memory sizes and the units they can be reported in."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class MemoryUnit(Enum):
    """Unit of measurement for a memory size, valued by its power-of-two shift."""

    BYTE = 0
    KB = 10
    MB = 20
    GB = 30


def to_unit(num_bytes: int, unit: MemoryUnit) -> float:
    """Convert a byte count to ``unit``, truncating to a whole number of units."""
    return float(num_bytes >> unit.value)


@dataclass
class MemoryInfo:
    """Total and available memory, both held in bytes."""

    total_bytes: int = 0
    available_bytes: int = 0

    def total(self, unit: MemoryUnit = MemoryUnit.BYTE) -> float:
        """Total memory size in ``unit``."""
        return to_unit(self.total_bytes, unit)

    def available(self, unit: MemoryUnit = MemoryUnit.BYTE) -> float:
        """Available memory size in ``unit``."""
        return to_unit(self.available_bytes, unit)

    def used(self, unit: MemoryUnit = MemoryUnit.BYTE) -> float:
        """Used memory in ``unit``: total minus available, each converted first."""
        return self.total(unit) - self.available(unit)