import math
from datetime import datetime, timedelta

import pytest

from alpakit.stream_common import (
    BLOCK_THREAD_EXTENT,
    DEFAULT_ARRAY_SIZE,
    DEFAULT_NUMBER_OF_RUNS,
    INIT_A,
    INIT_B,
    INIT_C,
    MIN_ARRAY_SIZE,
    SCALAR_VAL,
    KernelsToRun,
    StreamConfig,
    calculate_bandwidth,
    calculate_expected_results,
    current_timestamp,
    find_average,
    find_min_max,
    fuzzy_equal,
    get_data_throughput,
    handle_custom_arguments,
    join_elements,
)


def test_config_defaults():
    config = StreamConfig()
    assert config.array_size == 1024 * 256
    assert config.number_of_runs == 2
    assert config.kernels is KernelsToRun.ALL


def test_array_size_set(capsys):
    config = StreamConfig()
    size = MIN_ARRAY_SIZE * 2
    rest = handle_custom_arguments(["prog", f"--array-size={size}"], config)
    assert rest == ["prog"]
    assert config.array_size == size
    assert f"Array size set to: {size}" in capsys.readouterr().out


def test_array_size_too_small_keeps_default(capsys):
    config = StreamConfig()
    handle_custom_arguments(["prog", f"--array-size={MIN_ARRAY_SIZE}"], config)
    assert config.array_size == DEFAULT_ARRAY_SIZE
    out = capsys.readouterr().out
    assert f"Must be at least {MIN_ARRAY_SIZE}" in out


def test_array_size_invalid(capsys):
    config = StreamConfig()
    handle_custom_arguments(["prog", "--array-size=abc"], config)
    assert config.array_size == DEFAULT_ARRAY_SIZE
    err = capsys.readouterr().err
    assert "Invalid array size argument: --array-size=abc" in err


def test_array_size_leading_digits_parsed():
    config = StreamConfig()
    size = MIN_ARRAY_SIZE * 4
    handle_custom_arguments(["prog", f"--array-size={size}xyz"], config)
    assert config.array_size == size


def test_array_size_not_multiple_of_block_raises():
    config = StreamConfig()
    size = MIN_ARRAY_SIZE + BLOCK_THREAD_EXTENT + 1
    with pytest.raises(RuntimeError, match="multiple of block-size"):
        handle_custom_arguments(["prog", f"--array-size={size}"], config)
    assert config.array_size == size


def test_number_of_runs(capsys):
    config = StreamConfig()
    handle_custom_arguments(["prog", "--number-runs=100"], config)
    assert config.number_of_runs == 100
    assert "Number of runs provided: 100" in capsys.readouterr().out


def test_number_of_runs_non_positive_keeps_default():
    config = StreamConfig()
    handle_custom_arguments(["prog", "--number-runs=0"], config)
    assert config.number_of_runs == DEFAULT_NUMBER_OF_RUNS


def test_number_of_runs_invalid(capsys):
    config = StreamConfig()
    handle_custom_arguments(["prog", "--number-runs=x"], config)
    assert config.number_of_runs == DEFAULT_NUMBER_OF_RUNS
    assert "Invalid number of runs argument" in capsys.readouterr().err


@pytest.mark.parametrize(
    "choice, expected",
    [("nstream", KernelsToRun.NSTREAM), ("triad", KernelsToRun.TRIAD), ("all", KernelsToRun.ALL)],
)
def test_run_kernels(choice, expected):
    config = StreamConfig(kernels=KernelsToRun.TRIAD if choice == "all" else KernelsToRun.ALL)
    handle_custom_arguments(["prog", f"--run-kernels={choice}"], config)
    assert config.kernels is expected


def test_unknown_run_kernels_value_ignored():
    config = StreamConfig()
    rest = handle_custom_arguments(["prog", "--run-kernels=other"], config)
    assert config.kernels is KernelsToRun.ALL
    assert rest == ["prog"]


def test_other_arguments_kept_in_order():
    config = StreamConfig()
    rest = handle_custom_arguments(["prog", "-s", "--number-runs=5", "--reporter", "xml"], config)
    assert rest == ["prog", "-s", "--reporter", "xml"]


def test_help_printed_and_kept(capsys):
    config = StreamConfig()
    rest = handle_custom_arguments(["prog", "--help"], config)
    assert rest == ["prog", "--help"]
    assert "--run-kernels=nstream" in capsys.readouterr().out


def test_fuzzy_equal_floats():
    assert fuzzy_equal(0.1 + 0.2, 0.3)
    assert not fuzzy_equal(1.0, 1.001)


def test_fuzzy_equal_integers():
    assert fuzzy_equal(7, 7)
    assert not fuzzy_equal(7, 8)


def test_fuzzy_equal_rejects_other_types():
    with pytest.raises(TypeError):
        fuzzy_equal("a", "a")


def test_current_timestamp_is_local_now():
    before = datetime.now().replace(microsecond=0)
    stamp = current_timestamp()
    after = datetime.now()
    assert len(stamp) == 19
    parsed = datetime.strptime(stamp, "%Y-%m-%d %H:%M:%S")
    assert before - timedelta(seconds=1) <= parsed <= after + timedelta(seconds=1)


def test_join_elements():
    assert join_elements([1.0, 2.5], ", ") == "1, 2.5"
    assert join_elements([], ", ") == ""
    assert join_elements(["a", "b", "c"], "-") == "a-b-c"


def test_join_elements_precision():
    assert join_elements([3.14159265], ",") == "3.1416"


def test_find_min_max():
    assert find_min_max([]) == (0.0, 0.0)
    assert find_min_max([5.0]) == (5.0, 5.0)
    assert find_min_max([0.5, 2.0, 3.0]) == (2.0, 3.0)


def test_find_average_ignores_first():
    assert find_average([]) == 0.0
    assert find_average([4.5]) == 4.5
    values = [100.0, 2.0, 4.0]
    avg = find_average(values)
    low, high = find_min_max(values)
    assert low <= avg <= high
    assert avg == pytest.approx(sum(values[1:]) / 2)


def test_get_data_throughput():
    assert get_data_throughput(3, 1_000_000, 8) == pytest.approx(24.0)
    assert get_data_throughput(2, 10, 4) * 2 == pytest.approx(get_data_throughput(2, 20, 4))


def test_calculate_bandwidth_round_trip():
    mb = get_data_throughput(3, 1024, 8)
    seconds = 0.25
    bandwidth = calculate_bandwidth(mb, seconds)
    assert bandwidth * seconds * 1.0e3 == pytest.approx(mb)


def test_calculate_bandwidth_zero_time():
    assert calculate_bandwidth(10.0, 0.0) == math.inf
    assert math.isnan(calculate_bandwidth(0.0, 0.0))


def test_expected_results_no_runs_unchanged():
    config = StreamConfig(number_of_runs=0)
    assert calculate_expected_results(INIT_A, INIT_B, INIT_C, config) == (INIT_A, INIT_B, INIT_C)


def test_expected_results_all_one_run():
    config = StreamConfig(number_of_runs=1)
    a, b, c = calculate_expected_results(INIT_A, INIT_B, INIT_C, config)
    assert b == pytest.approx(SCALAR_VAL * INIT_A)
    assert c == pytest.approx(INIT_A + b)
    assert a == pytest.approx(0.096)


def test_expected_results_triad_is_idempotent():
    once = calculate_expected_results(
        INIT_A, INIT_B, INIT_C, StreamConfig(number_of_runs=1, kernels=KernelsToRun.TRIAD)
    )
    many = calculate_expected_results(
        INIT_A, INIT_B, INIT_C, StreamConfig(number_of_runs=5, kernels=KernelsToRun.TRIAD)
    )
    assert once == many
    assert once[1:] == (INIT_B, INIT_C)


def test_expected_results_nstream_accumulates():
    one = calculate_expected_results(
        INIT_A, INIT_B, INIT_C, StreamConfig(number_of_runs=1, kernels=KernelsToRun.NSTREAM)
    )
    three = calculate_expected_results(
        INIT_A, INIT_B, INIT_C, StreamConfig(number_of_runs=3, kernels=KernelsToRun.NSTREAM)
    )
    step = one[0] - INIT_A
    assert three[0] == pytest.approx(INIT_A + 3 * step)
    assert three[1:] == (INIT_B, INIT_C)