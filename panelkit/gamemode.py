"""Presentation of the GameMode daemon's running game count."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

DEFAULT_ICON_NAME = "input-gaming-symbolic"
DEFAULT_FORMAT = "{glyph}"
DEFAULT_FORMAT_ALT = "{glyph} {count}"
DEFAULT_TOOLTIP_FORMAT = "Games running: {count}"
DEFAULT_GLYPH = ""

DBUS_NAME = "com.feralinteractive.GameMode"
DBUS_OBJECT_PATH = "/com/feralinteractive/GameMode"
DBUS_INTERFACE = "org.freedesktop.DBus.Properties"


def _is_uint(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


@dataclass(frozen=True)
class GamemodeSettings:
    """Configuration of the GameMode indicator."""

    format: str = DEFAULT_FORMAT
    format_alt: str = DEFAULT_FORMAT_ALT
    tooltip_format: str = DEFAULT_TOOLTIP_FORMAT
    glyph: str = DEFAULT_GLYPH
    tooltip: bool = True
    hide_not_running: bool = True
    use_icon: bool = True
    icon_size: int = 20
    icon_spacing: int = 4
    icon_name: str = DEFAULT_ICON_NAME

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> "GamemodeSettings":
        """Build settings, ignoring entries of the wrong type."""
        values: dict[str, Any] = {}
        for key, attr in (
            ("format", "format"),
            ("format-alt", "format_alt"),
            ("tooltip-format", "tooltip_format"),
            ("glyph", "glyph"),
            ("icon-name", "icon_name"),
        ):
            if isinstance(config.get(key), str):
                values[attr] = config[key]
        for key, attr in (
            ("tooltip", "tooltip"),
            ("hide-not-running", "hide_not_running"),
            ("use-icon", "use_icon"),
        ):
            if isinstance(config.get(key), bool):
                values[attr] = config[key]
        for key, attr in (("icon-size", "icon_size"), ("icon-spacing", "icon_spacing")):
            if _is_uint(config.get(key)):
                values[attr] = config[key]
        return cls(**values)


@dataclass(frozen=True)
class GamemodeRender:
    """What the indicator shows after an update.

    ``status`` is the CSS class to apply and ``previous_status`` the one to remove.
    """

    visible: bool
    text: str = ""
    tooltip: str | None = None
    status: str = ""
    previous_status: str = ""
    icon: str | None = None


class GamemodeView:
    """Keeps the indicator's alternate-text toggle and last status class."""

    def __init__(self, settings: GamemodeSettings) -> None:
        self.settings = settings
        self.show_alt = False
        self.last_status = ""

    def toggle(self) -> bool:
        """Switch between the main and alternate format; returns the new choice."""
        self.show_alt = not self.show_alt
        return self.show_alt

    def render(self, running: bool, count: int) -> GamemodeRender:
        """Render the indicator for the daemon state and number of running games."""
        settings = self.settings
        if not running or (count <= 0 and settings.hide_not_running):
            return GamemodeRender(visible=False)

        status = "running" if count > 0 else ""
        previous = self.last_status
        self.last_status = status

        tooltip = None
        if settings.tooltip:
            tooltip = settings.tooltip_format.format(count=count)

        fmt = settings.format_alt if self.show_alt else settings.format
        text = fmt.format(
            glyph="" if settings.use_icon else settings.glyph,
            count=str(count) if count > 0 else "",
        )
        return GamemodeRender(
            visible=True,
            text=text,
            tooltip=tooltip,
            status=status,
            previous_status=previous,
            icon=settings.icon_name if settings.use_icon else None,
        )