# procmon-lite

A small monitor for Linux. It prints CPU usage and memory usage at a
steady pace until you stop it. The readings come from `/proc/stat` and
`/proc/meminfo`.

## Installation

```
pip install .
```

To install with the test dependencies as well:

```
pip install ".[test]"
```

## Command line

```
procmon-lite
```

Output looks like this:

```
[CPU] CPU Usage: 12.34%
[MEM] Used: 6.00GB / 15.00GB (40.0%)
```

Each round samples the first line of the stat file twice, prints the CPU
line, reads the meminfo file, prints the memory line and then waits. If the
meminfo file cannot be opened, `Fail to open <path>` is written to standard
error instead of the memory line and the loop goes on. Press Ctrl+C to stop;
the command then exits with status 0.

Options:

| Option | Default | Meaning |
| --- | --- | --- |
| `--iterations N` | run until interrupted | number of rounds to print |
| `--interval SECONDS` | `0.5` | time between the two CPU samples |
| `--delay SECONDS` | `1.0` | time to wait after each round |
| `--stat PATH` | `/proc/stat` | stat file to read |
| `--meminfo PATH` | `/proc/meminfo` | meminfo file to read |

How the numbers are worked out:

- CPU usage is `100 * (1 - idle_delta / total_delta)` over the sampling
  interval. Idle time is the `idle` plus `iowait` counters; total time is the
  sum of every counter on the line.
- Memory used is `MemTotal - MemAvailable`. Both values are converted to
  whole gigabytes, rounded down, before the subtraction, and the percentage
  is taken from those whole-gigabyte figures. When the total comes to 0 GB
  the percentage is shown as `nan` (or `inf` if something is still used).

## Library use

The parsing functions take plain strings, so they work on saved snapshots as
well as on the live files:

```python
from procmon_lite.cpu import usage_between, get_cpu_usage
from procmon_lite.memory import parse_meminfo, get_memory_usage
from procmon_lite.memory_info import MemoryUnit

info = usage_between(
    "cpu  100 0 100 800 0 0 0 0 0 0",
    "cpu  150 0 150 900 0 0 0 0 0 0",
)
print(info.usage)  # 50.0

mem = parse_meminfo([
    "MemTotal:       16329928 kB",
    "MemAvailable:    9601144 kB",
])
print(mem.total(MemoryUnit.GB), mem.used(MemoryUnit.MB))

print(get_cpu_usage().usage)
print(get_memory_usage().available(MemoryUnit.GB))
```

Modules:

- `procmon_lite.cpu`: `CPUInfo` (field `usage`), `idle_jiffies(line)`,
  `total_jiffies(line)`, `usage_between(first_line, second_line)`,
  `read_stat_line(path)` and `get_cpu_usage(path, interval)`.
  `idle_jiffies` raises `ValueError` for a line with fewer than five counters.
- `procmon_lite.memory`: `parse_line(line)`, which returns a `MeminfoField`
  named tuple `(name, amount, unit)`; `parse_meminfo(lines)`; and
  `get_memory_usage(path)`, which raises `OSError` when the file cannot be
  opened. Amounts in `MemTotal:` and `MemAvailable:` lines are taken as kB.
- `procmon_lite.memory_info`: `MemoryUnit`, `to_unit(num_bytes, unit)` and
  `MemoryInfo` with the fields `total_bytes` and `available_bytes` and the
  methods `total(unit)`, `available(unit)` and `used(unit)`.
- `procmon_lite.cli`: `format_cpu(info)`, `format_memory(info)` and
  `main(argv=None)`.

`MemoryUnit` has the members `BYTE`, `KB`, `MB` and `GB`. Conversion shifts
the byte count right by 0, 10, 20 or 30 bits, so every value is a whole
number of the unit you ask for.

## What it does not do

It reports only the system-wide CPU figure and total memory use. It has no
per-core or per-process figures, keeps no history, and works only where the
`/proc` files exist (Linux), unless you point `--stat` and `--meminfo` at
files of the same format.

## Running the tests

```
pytest
```