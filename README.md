# panelkit

panelkit holds the logic behind status bar modules: readers for system
statistics, a client for the Hyprland compositor's sockets, and the formatting
that turns their state into label and tooltip text. It has no GUI of its own; a
bar implementation calls into it and displays the strings it returns.

## What is inside

| Module | Purpose |
| --- | --- |
| `panelkit.jsonparse` | `parse(data)`: parse JSON text; empty input gives an empty dict, invalid input raises `ValueError`. |
| `panelkit.cpu` | `parse_stat`, `parse_frequencies`, `read_cpufreq_dir`, `cpu_usage`, `cpu_frequency`, `load_average`. `CpuSampler` reads `/proc/stat` and `/proc/cpuinfo` and keeps the previous sample between reads. |
| `panelkit.memory` | `parse_meminfo`, `zfs_arc_size`, `read_meminfo` and `memory_stats`, which gives a `MemoryStats` with RAM and swap figures in GiB and percent. |
| `panelkit.mpris_text` | Column-width aware `utf8_truncate`, `text_width` and `truncate` (with an ellipsis), `format_duration` (microseconds to `HH:MM:SS`) and `icon_from_json`. |
| `panelkit.mpris` | `MprisFormatter` renders a `PlayerInfo` (with a `PlaybackStatus`) into label markup and tooltip text, including the `{dynamic}` field with `dynamic-len` and `dynamic-priority`. |
| `panelkit.keyboard_state` | `LockFormats.from_config` and `render_locks`, which return one `LockLabel` each for Num, Caps and Scroll lock. |
| `panelkit.gamemode` | `GamemodeSettings.from_config` and `GamemodeView`, whose `render` returns a `GamemodeRender` for the running-games indicator. |
| `panelkit.inhibitor` | `check_inhibitor`, `get_inhibitors` (colon-joined logind lock list from `what`) and `status_text`. |
| `panelkit.custom` | `parse_output_raw` and `parse_output_json` turn a script's output into `CustomOutput`; `should_hide` and `format_custom` decide and render the label. |
| `panelkit.hyprland.ipc` | `HyprlandIPC` sends requests on the command socket (`request`, `request_json`) and relays the event stream (`listen`, `dispatch`) to `EventHandler` objects. |
| `panelkit.hyprland.workspaces` | `Workspaces` keeps `Workspace` entries sorted by id in step with `workspace`, `createworkspace` and `destroyworkspace` events. |
| `panelkit.hyprland.window` | `WindowWorkspace.parse`, `find_monitor_workspace` and `compute_window_state`, giving a `WindowState` with solo class, solo, all-floating and fullscreen flags. |
| `panelkit.hyprland.submap` | `parse_submap_event` and `SubmapView`, which tracks and renders the active submap. |

## Examples

Memory usage from the running system:

```python
from panelkit.memory import read_meminfo, memory_stats

stats = memory_stats(read_meminfo("/proc/meminfo", "/proc/spl/kstat/zfs/arcstats"))
if stats is not None:
    print("{percentage}% used".format(**stats.format_args()))
    print(stats.default_tooltip())
```

CPU usage between two reads:

```python
from panelkit.cpu import CpuSampler

sampler = CpuSampler("/proc/stat", "/proc/cpuinfo", "/sys/devices/system/cpu/cpufreq")
usage, tooltip = sampler.usage()
print(tooltip)
```

Truncating a title to a column width:

```python
from panelkit.mpris_text import truncate

print(truncate("A very long song title", "…", 10))
```

Rendering a player label:

```python
from panelkit.mpris import MprisFormatter, PlaybackStatus, PlayerInfo

formatter = MprisFormatter({"dynamic-len": 30})
info = PlayerInfo(name="spotify", status=PlaybackStatus.PLAYING,
                  artist="Artist", title="Title", length="00:03:20")
print(formatter.render(info))
```

Reading the output of a custom script:

```python
from panelkit.custom import parse_output_json

result = parse_output_json('{"text": "ok", "class": ["good"], "percentage": 42}', False)
print(result.text, result.classes, result.percentage)
```

Following Hyprland events:

```python
import os

from panelkit.hyprland.ipc import HyprlandIPC
from panelkit.hyprland.submap import SubmapView

ipc = HyprlandIPC(os.environ["HYPRLAND_INSTANCE_SIGNATURE"])
view = SubmapView("{}")
ipc.register("submap", view)
ipc.listen()
```

## Configuration

Functions and classes that take a `config` argument expect a plain `dict` with
the same keys a bar configuration file uses, such as `format`,
`format-playing`, `tooltip-format`, `format-icons`, and module-specific
options like `artist-len`, `dynamic-priority`, `hide-not-running` or `what`.
Entries of the wrong type are ignored and the default is used.

## What it does not do

- It draws nothing: there is no bar, window or widget, and no command to run.
- It does not talk to D-Bus, logind, the GameMode daemon or media players;
  the caller fetches that state and passes it in.
- It has no support for the JACK audio server or for MPD.
- It reads keyboard lock states from nowhere; the caller supplies them.

## Requirements

Python 3.10 or later and `wcwidth`. The system readers expect a Linux `/proc`
filesystem; the Hyprland client expects its sockets under `/tmp/hypr/<signature>/`.