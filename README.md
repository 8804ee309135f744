# alpakit

Small, dependency-free building blocks for the host side of parallel kernel
frameworks, plus helpers for STREAM-style memory bandwidth benchmarks.

## Installation

```
pip install alpakit
```

## Modules

- `alpakit.version`: `version_number(major, minor, patch)` packs a version
  triple into one comparable integer (major and minor kept to three digits,
  patch to five); `yyyymmdd_to_version` and `yyyymm_to_version` convert
  date-style versions. `host_os()` returns `"windows"`, `"linux"`, `"ios"`,
  `"cygwin"` or `"unknown"`; `host_arch()` returns `"x86"`, `"riscv"`, `"arm"`
  or `"unknown"`.
- `alpakit.debug`: `DebugLevel` (`DISABLED`, `MINIMAL`, `FULL`); `ScopeLog`, a
  context manager (also usable as a decorator) that writes `[+] scope` on entry
  and `[-] scope` on exit to a given stream or standard output; `debug_scope`,
  which returns a `ScopeLog` when the level reaches the threshold and a no-op
  context otherwise.
- `alpakit.callback_thread`: `CallbackThread` runs submitted callables one
  after another on a single background thread, started on the first
  `submit`. Each `submit` returns a `concurrent.futures.Future`; an exception
  raised by the callable is set on that future. `empty()` tells whether any
  task is queued or running, and `close()` (or leaving the `with` block)
  finishes the queued tasks and stops the thread. Submitting after `close()`
  raises `RuntimeError`.
- `alpakit.tagdict`: `TagDict`, an ordered collection looked up by tag, built
  from `DictEntry` objects or `(key, value)` pairs. Tags are compared by
  equality and must be distinct; a missing tag raises `KeyError`. `index`
  returns the position or -1, `has_tag` tests for presence. `join_dict` joins
  two dictionaries; `conditional_append_dict` joins them only if a condition
  holds.
- `alpakit.meta`: n-dimensional loops — `iterate_nd(order, extent)` yields
  index tuples with loops nested in the given order, `nd_loop` calls a function
  for each, `nd_loop_inc_idx` loops with dimension 0 outermost — and sequence
  helpers: `make_integer_sequence_offset`, `values_unique`, `values_in_range`,
  `is_set`, `concatenate`, `front`, `contains`, `to_tuple`, `filter_items`.
- `alpakit.stream_common`: benchmark settings (`StreamConfig`,
  `KernelsToRun`) and the default constants; `handle_custom_arguments` applies
  `--array-size=N`, `--number-runs=N` and `--run-kernels=all|triad|nstream` to
  a `StreamConfig` and returns the remaining arguments, raising `RuntimeError`
  if the array size is not a multiple of 1024. Numeric helpers:
  `fuzzy_equal`, `find_min_max` and `find_average` (both ignore the first
  measurement when there is more than one), `get_data_throughput` (MB),
  `calculate_bandwidth` (GB/s), `calculate_expected_results`,
  `join_elements`, `current_timestamp`.
- `alpakit.stream_report`: `RuntimeResults` collects per-kernel timings and
  derives min, max and average times and bandwidths, listed by kernel name;
  `BenchmarkMetaData` stores report items keyed by `BMInfoDataType` and
  serialises them as `label:value` lines (`serialize`) or as a table with one
  row per kernel (`serialize_as_table`). `type_to_type_str` gives each item's
  label.

## Examples

Run work on a background thread:

```python
from alpakit.callback_thread import CallbackThread

with CallbackThread() as worker:
    future = worker.submit(lambda: print("hello from the worker"))
    future.result()
```

Loop over a 2-D extent, dimension 0 outermost:

```python
from alpakit.meta import nd_loop_inc_idx

nd_loop_inc_idx((2, 3), print)   # (0, 0), (0, 1), ... (1, 2)
```

Apply benchmark options and compute a bandwidth:

```python
from alpakit.stream_common import StreamConfig, handle_custom_arguments
from alpakit.stream_common import get_data_throughput, calculate_bandwidth

config = StreamConfig()
rest = handle_custom_arguments(["prog", "--number-runs=10"], config)
mb = get_data_throughput(2, config.array_size, 8)
print(calculate_bandwidth(mb, 0.01), "GB/s")
```

Collect timings and build a report:

```python
from alpakit.stream_report import BenchmarkMetaData, BMInfoDataType, RuntimeResults
from alpakit.stream_common import join_elements

results = RuntimeResults()
results.add_kernel("CopyKernel")
for t in (0.5, 0.2, 0.3):
    results.record_timing("CopyKernel", t)
results.initialize_byte_read_write(8, 1024 * 256)
results.calculate_bandwidths_for_kernels()

meta = BenchmarkMetaData()
meta.set_item(BMInfoDataType.KERNEL_NAMES, "CopyKernel")
meta.set_item(BMInfoDataType.KERNEL_BANDWIDTHS, join_elements(results.bandwidths(), ", "))
meta.set_item(BMInfoDataType.KERNEL_MIN_TIMES, join_elements(results.min_exec_times(), ", "))
meta.set_item(BMInfoDataType.KERNEL_MAX_TIMES, join_elements(results.max_exec_times(), ", "))
meta.set_item(BMInfoDataType.KERNEL_AVG_TIMES, join_elements(results.avg_exec_times(), ", "))
meta.set_item(BMInfoDataType.KERNEL_DATA_USAGE_VALUES, join_elements(results.throughputs(), ", "))
print(meta.serialize_as_table())
```

## What this package does not do

It runs no kernels and manages no devices, queues or memory buffers. The
stream helpers handle settings, expected values, timing statistics and
reports; they do not include the benchmark kernels themselves, and the
package installs no command-line program.

## Running the tests

```
pip install "alpakit[test]"
pytest
```