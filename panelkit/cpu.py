"""CPU usage, load and frequency readings taken from the Linux proc and sys trees."""

from __future__ import annotations

import math
import os
import re
import time
from pathlib import Path

_STAT_PATH = "/proc/stat"
_CPUINFO_PATH = "/proc/cpuinfo"
_CPUFREQ_DIR = "/sys/devices/system/cpu/cpufreq"
_FREQUENCY_FILES = ("cpuinfo_min_freq", "cpuinfo_max_freq")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _strtol(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _read_text(path: str | os.PathLike) -> str:
    try:
        return Path(path).read_text()
    except OSError as exc:
        raise RuntimeError(f"Can't open {path}") from exc


def parse_stat(text: str) -> list[tuple[int, int]]:
    """Return ``(idle, total)`` jiffies for the aggregate line and each core.

    Reading stops at the first line that does not start with ``cpu``.
    """
    cpuinfo: list[tuple[int, int]] = []
    for line in text.splitlines():
        if not line.startswith("cpu"):
            break
        times: list[int] = []
        for token in line[5:].split():
            try:
                times.append(int(token))
            except ValueError:
                break
        if len(times) >= 4:
            cpuinfo.append((times[3], sum(times)))
        else:
            cpuinfo.append((0, 0))
    return cpuinfo


def parse_frequencies(text: str) -> list[float]:
    """Return the integral MHz values of every ``cpu MHz`` line of a cpuinfo listing."""
    frequencies: list[float] = []
    for line in text.splitlines():
        if not line.startswith("cpu MHz"):
            continue
        _, _, value = line.partition(":")
        frequencies.append(float(_strtol(value[1:])))
    return frequencies


def read_cpufreq_dir(path: str | os.PathLike) -> list[float]:
    """Read min and max frequencies (MHz) of every cpufreq policy under ``path``."""
    base = Path(path)
    if not base.exists():
        return []
    frequencies: list[float] = []
    for policy in sorted(base.iterdir()):
        for name in _FREQUENCY_FILES:
            freq_file = policy / name
            if not freq_file.exists():
                continue
            try:
                with freq_file.open() as handle:
                    first_line = handle.readline()
            except OSError:
                continue
            frequencies.append(_strtol(first_line) / 1000)
    return frequencies


def cpu_usage(
    prev: list[tuple[int, int]], curr: list[tuple[int, int]]
) -> tuple[list[int], str]:
    """Compute per-entry usage percentages between two samples, plus a tooltip."""
    if len(prev) != len(curr):
        raise ValueError("samples cover a different number of CPUs")
    usage: list[int] = []
    lines: list[str] = []
    for index, ((curr_idle, curr_total), (prev_idle, prev_total)) in enumerate(zip(curr, prev)):
        delta_idle = float(curr_idle - prev_idle)
        delta_total = float(curr_total - prev_total)
        if delta_total == 0:
            value = 0
        else:
            value = min(max(int(100 * (1 - delta_idle / delta_total)), 0), 0xFFFF)
        if index == 0:
            lines.append(f"Total: {value}%")
        else:
            lines.append(f"Core{index - 1}: {value}%")
        usage.append(value)
    return usage, "\n".join(lines)


def cpu_frequency(frequencies: list[float]) -> tuple[float, float, float]:
    """Return ``(max, min, avg)`` frequency in GHz rounded up to two decimals."""
    if not frequencies:
        return 0.0, 0.0, 0.0
    average = sum(frequencies) / len(frequencies)

    def to_ghz(mhz: float) -> float:
        return math.ceil(mhz / 10.0) / 100.0

    return to_ghz(max(frequencies)), to_ghz(min(frequencies)), to_ghz(average)


def load_average() -> float:
    """Return the one-minute load average rounded up to two decimals."""
    try:
        load = os.getloadavg()[0]
    except OSError as exc:
        raise RuntimeError("Can't get Cpu load") from exc
    return math.ceil(load * 100.0) / 100.0


class CpuSampler:
    """Keeps the previous stat sample so that successive calls yield usage deltas."""

    def __init__(
        self,
        stat_path: str | os.PathLike = _STAT_PATH,
        cpuinfo_path: str | os.PathLike = _CPUINFO_PATH,
        cpufreq_dir: str | os.PathLike = _CPUFREQ_DIR,
    ) -> None:
        self.stat_path = stat_path
        self.cpuinfo_path = cpuinfo_path
        self.cpufreq_dir = cpufreq_dir
        self._prev: list[tuple[int, int]] = []

    def _sample(self) -> list[tuple[int, int]]:
        return parse_stat(_read_text(self.stat_path))

    def usage(self) -> tuple[list[int], str]:
        """Return usage percentages (total first, then cores) and the tooltip text."""
        if not self._prev:
            self._prev = self._sample()
            time.sleep(0.1)
        curr = self._sample()
        result = cpu_usage(self._prev, curr)
        self._prev = curr
        return result

    def frequencies(self) -> list[float]:
        """Return core frequencies in MHz, falling back to the cpufreq tree."""
        frequencies = parse_frequencies(_read_text(self.cpuinfo_path))
        if not frequencies:
            frequencies = read_cpufreq_dir(self.cpufreq_dir)
        return frequencies