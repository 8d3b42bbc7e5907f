"""CPU usage sampled from the aggregate line of ``/proc/stat``."""

from __future__ import annotations

import math
import time
from dataclasses import dataclass

STAT_PATH = "/proc/stat"

# Position of the idle and iowait counters among the values after the "cpu" label.
_IDLE_INDEX = 3
_IOWAIT_INDEX = 4


@dataclass
class CPUInfo:
    """CPU usage as a percentage (0.0 to 100.0)."""

    usage: float = 0.0


def _counters(line: str) -> list[int]:
    """Leading integer counters that follow the label of a stat line."""
    values = []
    for token in line.split()[1:]:
        try:
            values.append(int(token))
        except ValueError:
            break
    return values


def idle_jiffies(line: str) -> int:
    """Accumulated idle time (idle plus iowait) in jiffies from a stat line."""
    values = _counters(line)
    if len(values) <= _IOWAIT_INDEX:
        raise ValueError(f"not a cpu stat line: {line!r}")
    return values[_IDLE_INDEX] + values[_IOWAIT_INDEX]


def total_jiffies(line: str) -> int:
    """Accumulated total CPU time in jiffies: the sum of every counter."""
    return sum(_counters(line))


def usage_between(first_line: str, second_line: str) -> CPUInfo:
    """CPU usage over the interval between two samples of the aggregate stat line."""
    idle_delta = float(idle_jiffies(second_line) - idle_jiffies(first_line))
    total_delta = float(total_jiffies(second_line) - total_jiffies(first_line))
    if total_delta:
        ratio = idle_delta / total_delta
    elif idle_delta:
        ratio = math.copysign(math.inf, idle_delta)
    else:
        ratio = math.nan
    return CPUInfo(usage=100.0 * (1.0 - ratio))


def read_stat_line(path: str = STAT_PATH) -> str:
    """First line of the stat file, without its line ending."""
    with open(path, encoding="ascii") as stat:
        return stat.readline().rstrip("\n")


def get_cpu_usage(path: str = STAT_PATH, interval: float = 0.5) -> CPUInfo:
    """Sample the stat file twice, ``interval`` seconds apart, and return the usage."""
    first = read_stat_line(path)
    time.sleep(interval)
    second = read_stat_line(path)
    return usage_between(first, second)