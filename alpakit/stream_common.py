"""Settings, argument handling and timing helpers for the stream benchmark."""

from __future__ import annotations

import enum
import math
import re
import sys
import time
from dataclasses import dataclass
from typing import Any, Iterable, Sequence

__all__ = [
    "DEFAULT_ARRAY_SIZE",
    "MIN_ARRAY_SIZE",
    "SCALAR_VAL",
    "BLOCK_THREAD_EXTENT",
    "DOT_GRID_BLOCK_EXTENT",
    "DEFAULT_NUMBER_OF_RUNS",
    "INIT_A",
    "INIT_B",
    "INIT_C",
    "KernelsToRun",
    "StreamConfig",
    "handle_custom_arguments",
    "fuzzy_equal",
    "current_timestamp",
    "join_elements",
    "find_min_max",
    "find_average",
    "get_data_throughput",
    "calculate_bandwidth",
    "calculate_expected_results",
]

# At least 2**25 elements and 100 runs are needed for meaningful measurements;
# the small defaults keep automated runs short.
DEFAULT_ARRAY_SIZE = 1024 * 256
MIN_ARRAY_SIZE = 1024 * 256
DEFAULT_NUMBER_OF_RUNS = 2

SCALAR_VAL = 0.4
BLOCK_THREAD_EXTENT = 1024
DOT_GRID_BLOCK_EXTENT = 256

INIT_A = 0.1
INIT_B = 0.2
INIT_C = 0.0

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class KernelsToRun(enum.Enum):
    """Which kernels a benchmark run executes."""

    ALL = "all"  # init, add, copy, mul, triad, dot
    TRIAD = "triad"  # only init and triad
    NSTREAM = "nstream"  # only init and nstream


@dataclass
class StreamConfig:
    """Run-time settings of the benchmark."""

    array_size: int = DEFAULT_ARRAY_SIZE
    number_of_runs: int = DEFAULT_NUMBER_OF_RUNS
    kernels: KernelsToRun = KernelsToRun.ALL


def _parse_leading_int(text: str) -> int:
    """Parse the leading integer of ``text`` the way ``std::stoi`` does."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"no integer at the start of {text!r}")
    value = int(match.group(1))
    if not _INT32_MIN <= value <= _INT32_MAX:
        raise OverflowError(f"integer {value} is out of range")
    return value


def _print_help() -> None:
    print(
        "Usage of custom arguments (arguments which are not Catch2):  "
        "--array-size=33554432 and --number-runs=100\n"
    )
    print(
        "If you want to run only nstream kernel or triad kernel use "
        "--run-kernels=nstream or  --run-kernels=triad. Otherwise all 5 standard "
        "kernels will be executed. Copy, Mul, Add, Triad and Dot kernel."
    )


def handle_custom_arguments(argv: Sequence[str], config: StreamConfig) -> list[str]:
    """Apply the benchmark's own options to ``config`` and return the other arguments.

    ``argv[0]`` is the program name and is always kept. Recognised options are
    ``--array-size=N``, ``--number-runs=N`` and ``--run-kernels=all|triad|nstream``.
    Raises :class:`RuntimeError` if the resulting array size is not a multiple
    of the block size.
    """
    args = list(argv)
    remaining = args[:1]

    for arg in args[1:]:
        if arg.startswith("--array-size="):
            try:
                size = _parse_leading_int(arg[len("--array-size="):])
            except ValueError:
                print(f"Invalid array size argument: {arg}. Default value used.", file=sys.stderr)
            else:
                if size > MIN_ARRAY_SIZE:
                    config.array_size = size
                    print(f"Array size set to: {config.array_size}")
                else:
                    print(
                        f"Array size too small. Must be at least {MIN_ARRAY_SIZE}, "
                        f"using default: {config.array_size}"
                    )
        elif arg.startswith("--number-runs="):
            try:
                runs = _parse_leading_int(arg[len("--number-runs="):])
            except ValueError:
                print(
                    f"Invalid number of runs argument: {arg} . Default value used.",
                    file=sys.stderr,
                )
            else:
                if runs > 0:
                    config.number_of_runs = runs
                    print(f"Number of runs provided: {config.number_of_runs}")
                else:
                    print(f"Using default number of runs: {config.number_of_runs}")
        elif arg.startswith("--run-kernels="):
            choice = arg[len("--run-kernels="):]
            if choice == "nstream":
                print("Only nstream kernel will be executed.")
                config.kernels = KernelsToRun.NSTREAM
            elif choice == "triad":
                config.kernels = KernelsToRun.TRIAD
                print("Only triad kernel will be executed.")
            elif choice == "all":
                config.kernels = KernelsToRun.ALL
                print("All 5 babelstream kernels are going to be executed.")
        else:
            remaining.append(arg)

        if arg.startswith(("-?", "--help", "-h")):
            _print_help()

    if config.array_size % BLOCK_THREAD_EXTENT != 0:
        raise RuntimeError(
            f"Array size is {config.array_size}. It must be a multiple of block-size "
            f"{BLOCK_THREAD_EXTENT}"
        )
    return remaining


def _is_integral(value: Any) -> bool:
    return isinstance(value, int)


def fuzzy_equal(a: Any, b: Any) -> bool:
    """Approximate equality for floats, exact equality for integers."""
    if not all(isinstance(v, (int, float)) for v in (a, b)):
        raise TypeError("fuzzy_equal is only supported for integral or floating-point values")
    if isinstance(a, float) or isinstance(b, float):
        return math.fabs(a - b) < sys.float_info.epsilon * 100.0
    return a == b


def current_timestamp() -> str:
    """The local time formatted as ``YYYY-MM-DD HH:MM:SS``."""
    return time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())


def _format_element(value: Any) -> str:
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, float):
        return "%.5g" % value
    return str(value)


def join_elements(values: Iterable[Any], delim: str) -> str:
    """Join values with ``delim``; floats are written with five significant digits."""
    result = ""
    for value in values:
        prefix = result + delim if result else ""
        result = prefix + _format_element(value)
    return result


def find_min_max(times: Sequence[Any]) -> tuple[Any, Any]:
    """Minimum and maximum, ignoring the first element when there is more than one."""
    if len(times) == 0:
        return (0.0, 0.0)
    if len(times) == 1:
        return (times[0], times[0])
    rest = times[1:]
    return (min(rest), max(rest))


def find_average(elements: Sequence[Any]) -> Any:
    """Average of the elements, ignoring the first when there is more than one."""
    if len(elements) == 0:
        return 0.0
    if len(elements) == 1:
        return elements[0]
    rest = elements[1:]
    total = sum(rest)
    count = len(rest)
    if all(_is_integral(v) for v in rest):
        quotient = abs(total) // count
        return quotient if total >= 0 else -quotient
    return total / count


def get_data_throughput(reads_writes: int, array_size: int, item_size: int) -> float:
    """Data moved for one pass over the array, in MB (not MiB)."""
    return float(reads_writes * item_size * array_size) * 1.0e-6


def calculate_bandwidth(bytes_read_write_mb: float, run_time_seconds: float) -> float:
    """Bandwidth in GB/s (not GiB/s) for data in MB moved in the given time."""
    gigabytes = float(bytes_read_write_mb) * 1.0e-3
    seconds = float(run_time_seconds)
    if seconds == 0.0:
        if gigabytes == 0.0 or math.isnan(gigabytes):
            return math.nan
        return math.copysign(math.inf, gigabytes) * math.copysign(1.0, seconds)
    return gigabytes / seconds


def calculate_expected_results(
    a: float, b: float, c: float, config: StreamConfig | None = None
) -> tuple[float, float, float]:
    """Apply the configured kernels ``number_of_runs`` times to single array values.

    All elements of each array hold the same value, so one value per array
    predicts the whole result. Returns the new ``(a, b, c)``.
    """
    if config is None:
        config = StreamConfig()
    for _ in range(config.number_of_runs):
        if config.kernels is KernelsToRun.ALL:
            c = a
            b = SCALAR_VAL * c
            c = a + b
            a = b + SCALAR_VAL * c
        elif config.kernels is KernelsToRun.TRIAD:
            a = b + SCALAR_VAL * c
        elif config.kernels is KernelsToRun.NSTREAM:
            a += b + SCALAR_VAL * c
    return (a, b, c)