"""Workspace list kept in step with compositor events."""

from __future__ import annotations

import re
import threading
from dataclasses import dataclass
from typing import Any, Mapping, Optional

DEFAULT_FORMAT = "{id}"
_LEADING_INT = re.compile(r"-?\d+")


def _from_chars(text: str) -> Optional[int]:
    match = _LEADING_INT.match(text)
    return int(match.group(0)) if match else None


def _as_int(value: Any) -> int:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return int(value)
    return 0


@dataclass
class Workspace:
    """One workspace button."""

    id: int
    active: bool = False

    def select_icon(self, icons: Mapping[str, str]) -> str:
        """Pick the active icon, then one named by id, then the default one."""
        if self.active and "active" in icons:
            return icons["active"]
        named = icons.get(str(self.id))
        if named is not None:
            return named
        if "default" in icons:
            return icons["default"]
        return icons.get("", "")

    def label(self, fmt: str, icon: str) -> str:
        """Render the button label."""
        return fmt.format(id=self.id, icon=icon)


class Workspaces:
    """Workspace buttons ordered by id, with the active one marked."""

    def __init__(self, config: Mapping[str, Any]) -> None:
        fmt = config.get("format")
        self.format = fmt if isinstance(fmt, str) else DEFAULT_FORMAT
        self.with_icon = "{icon}" in self.format
        self.icons: dict[str, str] = {}
        if self.with_icon:
            format_icons = config.get("format-icons")
            if isinstance(format_icons, dict):
                for name, value in format_icons.items():
                    self.icons[name] = value if isinstance(value, str) else str(value)
            self.icons.setdefault("", "")
        self.active_id = 0
        self.workspaces: list[Workspace] = []
        self._lock = threading.Lock()

    def _sort(self) -> None:
        self.workspaces.sort(key=lambda workspace: workspace.id)

    def load(self, active: Mapping[str, Any], workspaces: list[Mapping[str, Any]]) -> None:
        """Set the initial state from ``activeworkspace`` and ``workspaces`` replies."""
        with self._lock:
            self.active_id = _as_int(active.get("id"))
            self.workspaces = [Workspace(_as_int(item.get("id"))) for item in workspaces]
            self._sort()

    def on_event(self, event: str) -> None:
        """Apply a ``workspace``, ``createworkspace`` or ``destroyworkspace`` event."""
        name, _, _ = event.partition(">")
        payload = event[len(name) + 2:]
        number = _from_chars(payload)
        with self._lock:
            if name == "workspace":
                if number is not None:
                    self.active_id = number
            elif name == "destroyworkspace":
                self.workspaces = [w for w in self.workspaces if w.id != number]
            elif name == "createworkspace":
                if number is not None:
                    self.workspaces.append(Workspace(number))
                    self._sort()

    def render(self) -> list[tuple[Workspace, str]]:
        """Mark the active workspace and return each workspace with its label."""
        with self._lock:
            rendered = []
            for workspace in self.workspaces:
                workspace.active = workspace.id == self.active_id
                icon = workspace.select_icon(self.icons) if self.with_icon else self.icons.get("", "")
                rendered.append((workspace, workspace.label(self.format, icon)))
            return rendered