"""Display of the compositor's active key binding submap."""

from __future__ import annotations

import threading
from typing import Optional


def parse_submap_event(event: str) -> Optional[str]:
    """Return the submap named by a ``submap`` event, or ``None`` for other events."""
    if "submap" not in event:
        return None
    return event[event.rfind(">") + 1:]


class SubmapView:
    """Tracks the current submap and renders it."""

    def __init__(self, fmt: str = "{}") -> None:
        self.format = fmt
        self.submap = ""
        self._lock = threading.Lock()

    def on_event(self, event: str) -> None:
        """Update the submap from an event line."""
        name = parse_submap_event(event)
        if name is None:
            return
        with self._lock:
            self.submap = name

    def render(self) -> Optional[str]:
        """Label text, or ``None`` when no submap is active and the label is hidden."""
        with self._lock:
            if not self.submap:
                return None
            return self.format.format(self.submap)