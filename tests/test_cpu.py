from unittest import mock

import pytest

from panelkit.cpu import (
    CpuSampler,
    cpu_frequency,
    cpu_usage,
    load_average,
    parse_frequencies,
    parse_stat,
    read_cpufreq_dir,
)

STAT = (
    "cpu  10 20 30 40 50 0 0\n"
    "cpu0 5 10 15 20 25 0 0\n"
    "cpu1 5 10 15 20 25 0 0\n"
    "intr 123 456\n"
    "cpu9 1 1 1 1\n"
)


def test_parse_stat_stops_at_first_non_cpu_line():
    result = parse_stat(STAT)
    assert len(result) == 3


def test_parse_stat_idle_is_fourth_field_and_total_is_sum():
    idle, total = parse_stat(STAT)[0]
    assert idle == 40
    assert total == sum([10, 20, 30, 40, 50, 0, 0])


def test_parse_stat_short_line_yields_zeros():
    assert parse_stat("cpu  1 2 3\n") == [(0, 0)]


def test_parse_frequencies_truncates_fraction():
    text = "processor\t: 0\ncpu MHz\t\t: 2400.750\nflags\t: fpu\n"
    assert parse_frequencies(text) == [2400.0]


def test_parse_frequencies_without_entries_is_empty():
    assert parse_frequencies("processor\t: 0\n") == []


def test_read_cpufreq_dir(tmp_path):
    policy = tmp_path / "policy0"
    policy.mkdir()
    (policy / "cpuinfo_min_freq").write_text("800000\n")
    (policy / "cpuinfo_max_freq").write_text("3600000\n")
    assert read_cpufreq_dir(tmp_path) == [800.0, 3600.0]


def test_read_cpufreq_dir_missing_is_empty(tmp_path):
    assert read_cpufreq_dir(tmp_path / "nope") == []


def test_cpu_usage_fully_idle_interval_is_lowest():
    prev = [(100, 200), (50, 100)]
    curr = [(200, 300), (100, 150)]
    usage, tooltip = cpu_usage(prev, curr)
    busy_usage, _ = cpu_usage(prev, [(100, 300), (50, 150)])
    assert all(u <= b for u, b in zip(usage, busy_usage))
    assert tooltip.splitlines()[0].startswith("Total: ")
    assert tooltip.splitlines()[1].startswith("Core0: ")


def test_cpu_usage_values_within_percentage_range():
    prev = parse_stat(STAT)
    curr = [(idle + 3, total + 10) for idle, total in prev]
    usage, tooltip = cpu_usage(prev, curr)
    assert len(usage) == len(curr)
    assert all(0 <= u <= 100 for u in usage)
    assert len(tooltip.splitlines()) == len(curr)


def test_cpu_usage_length_mismatch_raises():
    with pytest.raises(ValueError):
        cpu_usage([(1, 2)], [(1, 2), (3, 4)])


def test_cpu_frequency_empty():
    assert cpu_frequency([]) == (0.0, 0.0, 0.0)


def test_cpu_frequency_ordering():
    maximum, minimum, average = cpu_frequency([1200.0, 2800.0, 3100.0])
    assert minimum <= average <= maximum


def test_load_average_rounds_up():
    with mock.patch("os.getloadavg", return_value=(1.234, 0.5, 0.1)):
        value = load_average()
    assert 1.234 <= value < 1.234 + 0.01


def test_load_average_failure_raises_runtime_error():
    with mock.patch("os.getloadavg", side_effect=OSError("no load")):
        with pytest.raises(RuntimeError):
            load_average()


def test_sampler_usage_uses_previous_sample(tmp_path):
    stat = tmp_path / "stat"
    stat.write_text(STAT)
    sampler = CpuSampler(stat, tmp_path / "cpuinfo", tmp_path / "cpufreq")
    first, _ = sampler.usage()
    assert len(first) == 3
    stat.write_text("cpu  10 20 30 140 50 0 0\ncpu0 5 10 15 20 125 0 0\ncpu1 5 10 15 70 75 0 0\n")
    second, tooltip = sampler.usage()
    assert len(second) == 3
    assert all(0 <= u <= 100 for u in second)
    assert second[1] >= second[2]
    assert tooltip.count("\n") == 2


def test_sampler_missing_stat_raises(tmp_path):
    sampler = CpuSampler(tmp_path / "missing", tmp_path / "cpuinfo", tmp_path / "cpufreq")
    with pytest.raises(RuntimeError):
        sampler.usage()


def test_sampler_frequencies_fall_back_to_cpufreq(tmp_path):
    cpuinfo = tmp_path / "cpuinfo"
    cpuinfo.write_text("processor\t: 0\n")
    cpufreq = tmp_path / "cpufreq"
    policy = cpufreq / "policy0"
    policy.mkdir(parents=True)
    (policy / "cpuinfo_max_freq").write_text("2000000\n")
    sampler = CpuSampler(tmp_path / "stat", cpuinfo, cpufreq)
    assert sampler.frequencies() == read_cpufreq_dir(cpufreq)
    assert len(sampler.frequencies()) == 1