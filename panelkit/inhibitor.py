"""Selection of the logind inhibitor locks requested by the inhibitor module."""

from __future__ import annotations

from typing import Any, Mapping

INHIBITORS = (
    "idle",
    "shutdown",
    "sleep",
    "handle-power-key",
    "handle-suspend-key",
    "handle-hibernate-key",
    "handle-lid-switch",
)

DEFAULT_INHIBITORS = "idle"


def check_inhibitor(name: str) -> str:
    """Return ``name`` if it is a known inhibitor lock, else raise ``ValueError``."""
    if name not in INHIBITORS:
        raise ValueError(f"invalid logind inhibitor {name}")
    return name


def get_inhibitors(config: Mapping[str, Any]) -> str:
    """Return the colon separated lock list configured under ``what``."""
    what = config.get("what")
    if what is None or (isinstance(what, (list, dict)) and not what):
        return DEFAULT_INHIBITORS
    if isinstance(what, str):
        return check_inhibitor(what)
    if isinstance(what, list):
        return ":".join(check_inhibitor(item if isinstance(item, str) else str(item)) for item in what)
    return DEFAULT_INHIBITORS


def status_text(activated: bool) -> str:
    """Status word shown in the label and used as CSS class."""
    return "activated" if activated else "deactivated"