"""Rendering of num, caps and scroll lock indicators."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

DEFAULT_FORMAT = "{name} {icon}"
DEFAULT_ICON_LOCKED = "locked"
DEFAULT_ICON_UNLOCKED = "unlocked"


@dataclass(frozen=True)
class LockLabel:
    """Rendered text of one lock indicator and whether the lock is on."""

    name: str
    text: str
    locked: bool


@dataclass(frozen=True)
class LockFormats:
    """Per-indicator formats and the icons for the locked and unlocked states."""

    numlock: str = DEFAULT_FORMAT
    capslock: str = DEFAULT_FORMAT
    scrolllock: str = DEFAULT_FORMAT
    icon_locked: str = DEFAULT_ICON_LOCKED
    icon_unlocked: str = DEFAULT_ICON_UNLOCKED

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> "LockFormats":
        """Build formats from a module configuration."""
        fmt = config.get("format")

        def pick(key: str) -> str:
            if isinstance(fmt, str):
                return fmt
            if isinstance(fmt, dict) and isinstance(fmt.get(key), str):
                return fmt[key]
            return DEFAULT_FORMAT

        icons = config.get("format-icons")
        if not isinstance(icons, dict):
            icons = {}
        locked = icons.get("locked")
        unlocked = icons.get("unlocked")
        return cls(
            numlock=pick("numlock"),
            capslock=pick("capslock"),
            scrolllock=pick("scrolllock"),
            icon_locked=locked if isinstance(locked, str) else DEFAULT_ICON_LOCKED,
            icon_unlocked=unlocked if isinstance(unlocked, str) else DEFAULT_ICON_UNLOCKED,
        )


def render_locks(
    formats: LockFormats, numlock: bool, capslock: bool, scrolllock: bool
) -> list[LockLabel]:
    """Render the num, caps and scroll lock labels, in that order."""
    entries = (
        ("Num", formats.numlock, numlock),
        ("Caps", formats.capslock, capslock),
        ("Scroll", formats.scrolllock, scrolllock),
    )
    labels = []
    for name, fmt, state in entries:
        icon = formats.icon_locked if state else formats.icon_unlocked
        labels.append(LockLabel(name=name, text=fmt.format(icon=icon, name=name), locked=bool(state)))
    return labels