"""Memory and swap statistics read from /proc/meminfo and the ZFS ARC counters."""

from __future__ import annotations

import math
import os
import re
from dataclasses import dataclass
from pathlib import Path

_MEMINFO_PATH = "/proc/meminfo"
_ARCSTATS_PATH = "/proc/spl/kstat/zfs/arcstats"
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _stol(text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"no number in {text!r}")
    return int(match.group(1))


def _round(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _gib(kib: float) -> float:
    return 0.01 * _round(kib / 10485.76)


def parse_meminfo(text: str) -> dict[str, int]:
    """Parse ``Name: value kB`` lines into a mapping of kibibyte counts."""
    meminfo: dict[str, int] = {}
    for line in text.splitlines():
        name, sep, value = line.partition(":")
        if not sep:
            continue
        meminfo[name] = _stol(value)
    return meminfo


def zfs_arc_size(text: str) -> int:
    """Return the ARC ``size`` counter of an arcstats listing in KiB, or 0."""
    for line in text.splitlines():
        fields = line.split()
        if fields and fields[0] == "size":
            try:
                data = int(fields[2])
            except (IndexError, ValueError):
                data = 0
            return data // 1024
    return 0


def read_meminfo(
    meminfo_path: str | os.PathLike = _MEMINFO_PATH,
    arcstats_path: str | os.PathLike = _ARCSTATS_PATH,
) -> dict[str, int]:
    """Read meminfo and add the ZFS ARC size under ``zfs_size``."""
    try:
        text = Path(meminfo_path).read_text()
    except OSError as exc:
        raise RuntimeError(f"Can't open {meminfo_path}") from exc
    meminfo = parse_meminfo(text)
    try:
        meminfo["zfs_size"] = zfs_arc_size(Path(arcstats_path).read_text())
    except OSError:
        meminfo["zfs_size"] = 0
    return meminfo


@dataclass(frozen=True)
class MemoryStats:
    """Derived RAM and swap figures; sizes are in GiB."""

    used_ram_percentage: int
    used_swap_percentage: int
    total_ram_gigabytes: float
    total_swap_gigabytes: float
    used_ram_gigabytes: float
    used_swap_gigabytes: float
    available_ram_gigabytes: float
    available_swap_gigabytes: float

    def format_args(self) -> dict[str, float | int]:
        """Named arguments for label and tooltip formats."""
        return {
            "total": self.total_ram_gigabytes,
            "swapTotal": self.total_swap_gigabytes,
            "percentage": self.used_ram_percentage,
            "swapPercentage": self.used_swap_percentage,
            "used": self.used_ram_gigabytes,
            "swapUsed": self.used_swap_gigabytes,
            "avail": self.available_ram_gigabytes,
            "swapAvail": self.available_swap_gigabytes,
        }

    def default_tooltip(self) -> str:
        """Tooltip used when no tooltip format is configured."""
        return f"{self.used_ram_gigabytes:.1f}GiB used"


def memory_stats(meminfo: dict[str, int]) -> MemoryStats | None:
    """Compute memory statistics, or ``None`` when the total is unknown."""
    memtotal = meminfo.get("MemTotal", 0)
    if memtotal <= 0:
        return None
    swaptotal = meminfo.get("SwapTotal", 0)
    swapfree = meminfo.get("SwapFree", 0)
    zfs_size = meminfo.get("zfs_size", 0)
    if "MemAvailable" in meminfo:
        memfree = meminfo["MemAvailable"] + zfs_size
    else:
        memfree = (
            meminfo.get("MemFree", 0)
            + meminfo.get("Buffers", 0)
            + meminfo.get("Cached", 0)
            + meminfo.get("SReclaimable", 0)
            - meminfo.get("Shmem", 0)
            + zfs_size
        )

    used_swap_percentage = 0
    if swaptotal and swapfree:
        used_swap_percentage = 100 * (swaptotal - swapfree) // swaptotal

    return MemoryStats(
        used_ram_percentage=100 * (memtotal - memfree) // memtotal,
        used_swap_percentage=used_swap_percentage,
        total_ram_gigabytes=_gib(memtotal),
        total_swap_gigabytes=_gib(swaptotal),
        used_ram_gigabytes=_gib(memtotal - memfree),
        used_swap_gigabytes=_gib(swaptotal - swapfree),
        available_ram_gigabytes=_gib(memfree),
        available_swap_gigabytes=_gib(swapfree),
    )