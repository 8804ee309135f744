"""Per-kernel timing results and the benchmark report built from them."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Callable

from alpakit.stream_common import (
    calculate_bandwidth,
    find_average,
    find_min_max,
    get_data_throughput,
)

__all__ = [
    "BMInfoDataType",
    "type_to_type_str",
    "RuntimeResults",
    "BenchmarkMetaData",
]


class BMInfoDataType(enum.IntEnum):
    """Kinds of information held in a benchmark report, in report order."""

    ACCELERATOR_TYPE = 0
    TIME_STAMP = enum.auto()
    NUM_RUNS = enum.auto()
    DATA_SIZE = enum.auto()
    DATA_TYPE = enum.auto()
    COPY_TIME_FROM_ACC_TO_HOST = enum.auto()
    WORK_DIV_INIT = enum.auto()
    WORK_DIV_COPY = enum.auto()
    WORK_DIV_ADD = enum.auto()
    WORK_DIV_TRIAD = enum.auto()
    WORK_DIV_MULT = enum.auto()
    WORK_DIV_DOT = enum.auto()
    WORK_DIV_NSTREAM = enum.auto()
    DEVICE_NAME = enum.auto()
    TIME_UNIT = enum.auto()
    KERNEL_NAMES = enum.auto()
    KERNEL_BANDWIDTHS = enum.auto()
    KERNEL_DATA_USAGE_VALUES = enum.auto()
    KERNEL_MIN_TIMES = enum.auto()
    KERNEL_MAX_TIMES = enum.auto()
    KERNEL_AVG_TIMES = enum.auto()


_TYPE_STRINGS = {
    BMInfoDataType.ACCELERATOR_TYPE: "AcceleratorType",
    BMInfoDataType.TIME_STAMP: "TimeStamp",
    BMInfoDataType.NUM_RUNS: "NumberOfRuns",
    BMInfoDataType.DATA_SIZE: "DataSize(items)",
    BMInfoDataType.DATA_TYPE: "Precision",
    BMInfoDataType.COPY_TIME_FROM_ACC_TO_HOST: "AccToHost Memcpy Time(sec)",
    BMInfoDataType.DEVICE_NAME: "DeviceName",
    BMInfoDataType.TIME_UNIT: "TimeUnitForXMLReport",
    BMInfoDataType.KERNEL_NAMES: "Kernels",
    BMInfoDataType.KERNEL_DATA_USAGE_VALUES: "DataUsage(MB)",
    BMInfoDataType.KERNEL_BANDWIDTHS: "Bandwidths(GB/s)",
    BMInfoDataType.KERNEL_MIN_TIMES: "MinTime(s)",
    BMInfoDataType.KERNEL_MAX_TIMES: "MaxTime(s)",
    BMInfoDataType.KERNEL_AVG_TIMES: "AvgTime(s)",
    BMInfoDataType.WORK_DIV_INIT: "WorkDivInit ",
    BMInfoDataType.WORK_DIV_COPY: "WorkDivCopy ",
    BMInfoDataType.WORK_DIV_ADD: "WorkDivAdd  ",
    BMInfoDataType.WORK_DIV_TRIAD: "WorkDivTriad",
    BMInfoDataType.WORK_DIV_MULT: "WorkDivMult ",
    BMInfoDataType.WORK_DIV_DOT: "WorkDivDot  ",
    BMInfoDataType.WORK_DIV_NSTREAM: "WorkDivNStream",
}


def type_to_type_str(item: BMInfoDataType) -> str:
    """Label used for ``item`` in reports; empty for unknown values."""
    return _TYPE_STRINGS.get(item, "")


# Number of read/write passes over the arrays made by each kernel.
_KERNEL_READS_WRITES = {
    "InitKernel": 3,
    "CopyKernel": 2,
    "MultKernel": 2,
    "AddKernel": 3,
    "TriadKernel": 3,
    "DotKernel": 2,
    "NStreamKernel": 2,
}


@dataclass
class _KernelRunData:
    timings: list[float] = field(default_factory=list)
    byte_read_write_mb: float = 0.0
    bandwidth: float = 0.0
    min_exec_time: float = 0.0
    max_exec_time: float = 0.0
    avg_exec_time: float = 0.0


class RuntimeResults:
    """Timings of successive kernel runs and the figures derived from them.

    Result lists are ordered by kernel name.
    """

    def __init__(self) -> None:
        self._kernels: dict[str, _KernelRunData] = {}

    def add_kernel(self, kernel_name: str) -> None:
        """Start a fresh, empty record for ``kernel_name``."""
        self._kernels[kernel_name] = _KernelRunData()

    def record_timing(self, kernel_name: str, seconds: float) -> None:
        """Append the duration of one run of ``kernel_name``."""
        try:
            data = self._kernels[kernel_name]
        except KeyError:
            raise KeyError(f"unknown kernel {kernel_name!r}") from None
        data.timings.append(seconds)

    def initialize_byte_read_write(self, item_size: int, array_size: int) -> None:
        """Set the data volume in MB of each known kernel for arrays of ``array_size`` items."""
        for name, reads_writes in _KERNEL_READS_WRITES.items():
            data = self._kernels.get(name)
            if data is not None:
                data.byte_read_write_mb = get_data_throughput(reads_writes, array_size, item_size)

    def calculate_bandwidths_for_kernels(self) -> None:
        """Derive min, max and average times and the bandwidth of every kernel."""
        for data in self._kernels.values():
            minimum, maximum = find_min_max(data.timings)
            data.min_exec_time = minimum
            data.max_exec_time = maximum
            data.avg_exec_time = find_average(data.timings)
            data.bandwidth = calculate_bandwidth(data.byte_read_write_mb, minimum)

    def _collect(self, accessor: Callable[[_KernelRunData], Any]) -> list[float]:
        return [accessor(self._kernels[name]) for name in sorted(self._kernels)]

    def bandwidths(self) -> list[float]:
        """Bandwidth of each kernel in GB/s."""
        return self._collect(lambda d: d.bandwidth)

    def throughputs(self) -> list[float]:
        """Data volume of each kernel in MB."""
        return self._collect(lambda d: d.byte_read_write_mb)

    def avg_exec_times(self) -> list[float]:
        """Average run time of each kernel."""
        return self._collect(lambda d: d.avg_exec_time)

    def min_exec_times(self) -> list[float]:
        """Minimum run time of each kernel."""
        return self._collect(lambda d: d.min_exec_time)

    def max_exec_times(self) -> list[float]:
        """Maximum run time of each kernel."""
        return self._collect(lambda d: d.max_exec_time)


def _to_text(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float):
        return "%g" % value
    return str(value)


def _split_list(text: str) -> list[str]:
    tokens = text.split(",")
    if tokens and tokens[-1] == "":
        tokens.pop()
    result = []
    for token in tokens:
        stripped = token.lstrip(" ")
        result.append(stripped if stripped else token)
    return result


_TABLE_HEADER_ITEMS = (
    BMInfoDataType.ACCELERATOR_TYPE,
    BMInfoDataType.NUM_RUNS,
    BMInfoDataType.DATA_TYPE,
    BMInfoDataType.DATA_SIZE,
    BMInfoDataType.DEVICE_NAME,
    BMInfoDataType.WORK_DIV_INIT,
    BMInfoDataType.WORK_DIV_COPY,
    BMInfoDataType.WORK_DIV_MULT,
    BMInfoDataType.WORK_DIV_ADD,
    BMInfoDataType.WORK_DIV_TRIAD,
    BMInfoDataType.WORK_DIV_DOT,
    BMInfoDataType.WORK_DIV_NSTREAM,
    BMInfoDataType.COPY_TIME_FROM_ACC_TO_HOST,
)


class BenchmarkMetaData:
    """Benchmark information keyed by :class:`BMInfoDataType`, stored as text."""

    def __init__(self) -> None:
        self._items: dict[BMInfoDataType, str] = {}

    def set_item(self, key: BMInfoDataType, value: Any) -> None:
        """Store ``value`` as text under ``key``, replacing any earlier value."""
        self._items[BMInfoDataType(key)] = _to_text(value)

    def serialize(self) -> str:
        """Every item as ``\\n<label>:<value>``, in key order."""
        return "".join(
            f"\n{type_to_type_str(key)}:{self._items[key]}" for key in sorted(self._items)
        )

    def _list_item(self, item: BMInfoDataType, index: int) -> str:
        if index < 1:
            raise ValueError("Index must be 1 or greater.")
        tokens = _split_list(self._items[item])
        if index > len(tokens):
            raise IndexError("Index out of range")
        return tokens[index - 1]

    def serialize_as_table(self) -> str:
        """General information followed by a table with one row per kernel.

        Raises :class:`KeyError` if a kernel column is missing and
        :class:`IndexError` if a column has fewer entries than there are kernels.
        """
        parts = ["\n"]
        for item in _TABLE_HEADER_ITEMS:
            if item in self._items:
                parts.append(f"\n{type_to_type_str(item)}:{self._items[item]}")
        parts.append("\n")
        parts.append(
            type_to_type_str(BMInfoDataType.KERNEL_NAMES).ljust(15) + " "
            + type_to_type_str(BMInfoDataType.KERNEL_BANDWIDTHS).ljust(15) + " "
            + type_to_type_str(BMInfoDataType.KERNEL_MIN_TIMES).ljust(10) + " "
            + type_to_type_str(BMInfoDataType.KERNEL_MAX_TIMES).ljust(10) + " "
            + type_to_type_str(BMInfoDataType.KERNEL_AVG_TIMES).ljust(10) + " "
            + type_to_type_str(BMInfoDataType.KERNEL_DATA_USAGE_VALUES).ljust(6) + " "
        )
        parts.append("\n")

        names = self._items[BMInfoDataType.KERNEL_NAMES]
        for i in range(1, names.count(",") + 2):
            parts.append(
                " " + self._list_item(BMInfoDataType.KERNEL_NAMES, i).ljust(15) + " "
                + self._list_item(BMInfoDataType.KERNEL_BANDWIDTHS, i).ljust(15) + " "
                + self._list_item(BMInfoDataType.KERNEL_MIN_TIMES, i).ljust(8) + " "
                + self._list_item(BMInfoDataType.KERNEL_MAX_TIMES, i).ljust(8) + " "
                + self._list_item(BMInfoDataType.KERNEL_AVG_TIMES, i).ljust(8) + " "
                + self._list_item(BMInfoDataType.KERNEL_DATA_USAGE_VALUES, i).ljust(6) + " "
                + "\n"
            )
        return "".join(parts)