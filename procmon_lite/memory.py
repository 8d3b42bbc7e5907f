"""Memory usage read from ``/proc/meminfo``."""

from __future__ import annotations

from typing import Iterable, NamedTuple

from procmon_lite.memory_info import MemoryInfo

MEMINFO_PATH = "/proc/meminfo"


class MeminfoField(NamedTuple):
    """One parsed meminfo line, e.g. ``("MemTotal:", 32746836, "kB")``."""

    name: str
    amount: int
    unit: str


def parse_line(line: str) -> MeminfoField:
    """Split a meminfo line into field name, amount and unit.

    Missing parts come back empty; an amount that is missing or not a number is 0.
    """
    tokens = line.split()
    name = tokens[0] if tokens else ""
    amount = 0
    unit = ""
    if len(tokens) > 1:
        try:
            amount = int(tokens[1])
        except ValueError:
            return MeminfoField(name, 0, "")
        unit = tokens[2] if len(tokens) > 2 else ""
    return MeminfoField(name, amount, unit)


def parse_meminfo(lines: Iterable[str]) -> MemoryInfo:
    """Build a MemoryInfo from the MemTotal and MemAvailable lines (given in kB)."""
    info = MemoryInfo()
    for line in lines:
        field = parse_line(line)
        if field.name == "MemTotal:":
            info.total_bytes = field.amount << 10
        elif field.name == "MemAvailable:":
            info.available_bytes = field.amount << 10
    return info


def get_memory_usage(path: str = MEMINFO_PATH) -> MemoryInfo:
    """Read the meminfo file; raises OSError when it cannot be opened."""
    with open(path, encoding="ascii") as meminfo:
        return parse_meminfo(meminfo)