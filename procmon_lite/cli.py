"""Command that prints CPU and memory usage once a second."""

from __future__ import annotations

import argparse
import itertools
import math
import sys
import time

from procmon_lite.cpu import STAT_PATH, CPUInfo, get_cpu_usage
from procmon_lite.memory import MEMINFO_PATH, get_memory_usage
from procmon_lite.memory_info import MemoryInfo, MemoryUnit


def format_cpu(info: CPUInfo) -> str:
    """The CPU report line."""
    return f"[CPU] CPU Usage: {info.usage:.2f}%"


def format_memory(info: MemoryInfo) -> str:
    """The memory report line, in gigabytes with the percentage used."""
    used = info.used(MemoryUnit.GB)
    total = info.total(MemoryUnit.GB)
    if total:
        percent = 100.0 * used / total
    elif used:
        percent = math.copysign(math.inf, used)
    else:
        percent = math.nan
    return f"[MEM] Used: {used:.2f}GB / {total:.2f}GB ({percent:.1f}%)"


def _parse_args(argv):
    parser = argparse.ArgumentParser(
        prog="procmon-lite", description="Print CPU and memory usage periodically."
    )
    parser.add_argument("--iterations", type=int, default=None,
                        help="number of reports to print (default: run until interrupted)")
    parser.add_argument("--interval", type=float, default=0.5,
                        help="seconds between the two CPU samples")
    parser.add_argument("--delay", type=float, default=1.0,
                        help="seconds to wait after each report")
    parser.add_argument("--stat", default=STAT_PATH, help="path of the stat file")
    parser.add_argument("--meminfo", default=MEMINFO_PATH, help="path of the meminfo file")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Run the monitor loop."""
    args = _parse_args(argv)
    rounds = itertools.count() if args.iterations is None else range(args.iterations)
    try:
        for _ in rounds:
            print(format_cpu(get_cpu_usage(args.stat, args.interval)), flush=True)
            try:
                memory = get_memory_usage(args.meminfo)
            except OSError:
                print(f"Fail to open {args.meminfo}", file=sys.stderr, flush=True)
            else:
                print(format_memory(memory), flush=True)
            time.sleep(args.delay)
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())