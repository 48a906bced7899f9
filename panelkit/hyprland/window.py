"""Focused window information derived from compositor query replies."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

log = logging.getLogger(__name__)


def _as_int(value: Any) -> int:
    if isinstance(value, (int, float)):
        return int(value)
    return 0


def _as_str(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return value if isinstance(value, str) else str(value)


@dataclass(frozen=True)
class WindowWorkspace:
    """The workspace holding the focused window."""

    id: int
    windows: int
    last_window: str
    last_window_title: str

    @classmethod
    def parse(cls, value: Mapping[str, Any]) -> "WindowWorkspace":
        """Build from a workspace object of a JSON reply."""
        return cls(
            id=_as_int(value.get("id")),
            windows=_as_int(value.get("windows")),
            last_window=_as_str(value.get("lastwindow")),
            last_window_title=_as_str(value.get("lastwindowtitle")),
        )


_NOT_FOUND = WindowWorkspace(-1, 0, "", "")


def find_monitor_workspace(monitors: list[Mapping[str, Any]], monitor_name: str) -> WindowWorkspace:
    """Look up the active workspace of ``monitor_name``.

    The entry is searched among ``monitors`` by the active workspace id; an
    empty workspace with id -1 is returned when nothing matches.
    """
    monitor = next((m for m in monitors if m.get("name") == monitor_name), None)
    if monitor is None:
        log.warning("Monitor not found: %s", monitor_name)
        return _NOT_FOUND
    active = monitor.get("activeWorkspace")
    workspace_id = _as_int(active.get("id")) if isinstance(active, dict) else 0
    match = next((m for m in monitors if m.get("id") == workspace_id), None)
    if match is None:
        log.warning("No workspace with id %s", workspace_id)
        return _NOT_FOUND
    return WindowWorkspace.parse(match)


@dataclass(frozen=True)
class WindowState:
    """Classes describing the windows on the focused workspace."""

    solo_class: str = ""
    solo: bool = False
    all_floating: bool = False
    fullscreen: bool = False


def compute_window_state(
    workspace: WindowWorkspace, clients: list[Mapping[str, Any]]
) -> Optional[WindowState]:
    """Derive window state; ``None`` means the focused window was not listed."""
    if workspace.windows <= 0:
        return WindowState()
    active = next((c for c in clients if c.get("address") == workspace.last_window), None)
    if active is None:
        return None

    floating = bool(active.get("floating"))
    solo_class = _as_str(active.get("class")) if workspace.windows == 1 and not floating else ""

    def on_workspace(client: Mapping[str, Any]) -> bool:
        ws = client.get("workspace")
        ws_id = ws.get("id") if isinstance(ws, dict) else None
        return ws_id == workspace.id and bool(client.get("mapped"))

    workspace_windows = [c for c in clients if on_workspace(c)]
    tiled = sum(1 for c in workspace_windows if not c.get("floating"))
    return WindowState(
        solo_class=solo_class,
        solo=tiled == 1,
        all_floating=all(bool(c.get("floating")) for c in workspace_windows),
        fullscreen=bool(active.get("fullscreen")),
    )