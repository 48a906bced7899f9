"""Label and tooltip rendering for media players exposed over MPRIS."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Any, Mapping

from panelkit.mpris_text import icon_from_json, text_width, truncate

log = logging.getLogger(__name__)

DEFAULT_FORMAT = "{player} ({status}): {dynamic}"
DEFAULT_PLAYER = "playerctld"
DEFAULT_ELLIPSIS = "\u2026"
DEFAULT_DYNAMIC_PRIORITY = ("title", "length", "position", "artist", "album")

_MARKUP_ESCAPES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    "'": "&apos;",
    '"': "&quot;",
}


def _escape(text: str) -> str:
    return "".join(_MARKUP_ESCAPES.get(char, char) for char in text)


def _is_uint(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def _string_list(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, str)]


class PlaybackStatus(enum.Enum):
    """Playback state reported by a player."""

    PLAYING = "playing"
    PAUSED = "paused"
    STOPPED = "stopped"


@dataclass(frozen=True)
class PlayerInfo:
    """Metadata of the current track; ``length`` and ``position`` are ``HH:MM:SS``."""

    name: str
    status: PlaybackStatus
    status_string: str = ""
    artist: str | None = None
    album: str | None = None
    title: str | None = None
    length: str | None = None
    position: str | None = None

    def __post_init__(self) -> None:
        if not self.status_string:
            object.__setattr__(self, "status_string", self.status.value)


class MprisFormatter:
    """Renders player information according to a module configuration."""

    def __init__(self, config: Mapping[str, Any]) -> None:
        self.config = config
        fmt = config.get("format")
        self.format = fmt if isinstance(fmt, str) else DEFAULT_FORMAT
        self.format_playing = self._opt_str("format-playing")
        self.format_paused = self._opt_str("format-paused")
        self.format_stopped = self._opt_str("format-stopped")
        ellipsis = config.get("ellipsis")
        self.ellipsis = ellipsis if isinstance(ellipsis, str) else DEFAULT_ELLIPSIS

        tooltip = config.get("tooltip")
        self.tooltip_enabled = tooltip if isinstance(tooltip, bool) else True
        self.tooltip_format = DEFAULT_FORMAT
        self.tooltip_playing = ""
        self.tooltip_paused = ""
        self.tooltip_stopped = ""
        self.tooltip_len_limits = False
        if self.tooltip_enabled:
            self.tooltip_format = self._opt_str("tooltip-format") or DEFAULT_FORMAT
            self.tooltip_playing = self._opt_str("tooltip-format-playing")
            self.tooltip_paused = self._opt_str("tooltip-format-paused")
            self.tooltip_stopped = self._opt_str("tooltip-format-stopped")
            limits = config.get("enable-tooltip-len-limits")
            if isinstance(limits, bool):
                self.tooltip_len_limits = limits

        self.artist_len = self._opt_len("artist-len")
        self.album_len = self._opt_len("album-len")
        self.title_len = self._opt_len("title-len")
        self.dynamic_len = self._opt_len("dynamic-len")

        priority = config.get("dynamic-priority")
        if isinstance(priority, list):
            self.dynamic_priority = _string_list(priority)
        else:
            self.dynamic_priority = list(DEFAULT_DYNAMIC_PRIORITY)

        truncate_hours = config.get("truncate-hours")
        self.truncate_hours = truncate_hours if isinstance(truncate_hours, bool) else True
        player = config.get("player")
        self.player = player if isinstance(player, str) else DEFAULT_PLAYER
        self.ignored_players = _string_list(config.get("ignored-players"))

    def _opt_str(self, key: str) -> str:
        value = self.config.get(key)
        return value if isinstance(value, str) else ""

    def _opt_len(self, key: str) -> int:
        value = self.config.get(key)
        return value if _is_uint(value) else -1

    def is_ignored(self, name: str) -> bool:
        """Whether updates from the named player are ignored."""
        return name in self.ignored_players

    def artist(self, info: PlayerInfo, truncated: bool) -> str:
        artist = info.artist or ""
        if truncated and self.artist_len >= 0:
            artist = truncate(artist, self.ellipsis, self.artist_len)
        return artist

    def album(self, info: PlayerInfo, truncated: bool) -> str:
        album = info.album or ""
        if truncated and self.album_len >= 0:
            album = truncate(album, self.ellipsis, self.album_len)
        return album

    def title(self, info: PlayerInfo, truncated: bool) -> str:
        title = info.title or ""
        if truncated and self.title_len >= 0:
            title = truncate(title, self.ellipsis, self.title_len)
        return title

    @staticmethod
    def _drop_hours(value: str | None, truncated: bool) -> str:
        if value is None:
            return ""
        return value[3:] if truncated and value.startswith("00:") else value

    def length(self, info: PlayerInfo, truncated: bool) -> str:
        return self._drop_hours(info.length, truncated)

    def position(self, info: PlayerInfo, truncated: bool) -> str:
        return self._drop_hours(info.position, truncated)

    def dynamic(self, info: PlayerInfo, truncated: bool, html: bool) -> str:
        """Compose artist, album, title and times, dropping parts beyond ``dynamic-len``."""
        artist = self.artist(info, truncated)
        album = self.album(info, truncated)
        title = self.title(info, truncated)
        length = self.length(info, truncated and self.truncate_hours)
        position = self.position(info, truncated and self.truncate_hours and len(length) < 6)

        artist_len = text_width(artist)
        album_len = text_width(album)
        title_len = text_width(title)
        length_len = len(length)
        pos_len = len(position)

        show_artist = artist_len != 0
        show_album = album_len != 0
        show_title = title_len != 0
        show_length = length_len != 0
        show_pos = pos_len != 0

        if truncated and self.dynamic_len >= 0:
            limit = self.dynamic_len
            if show_artist:
                artist_len += 3
            if show_album:
                album_len += 3
            if show_length:
                length_len += 3
            if show_pos:
                pos_len += 3

            total = 0
            for item in self.dynamic_priority:
                if item == "artist":
                    if total + artist_len > limit:
                        show_artist = False
                    elif show_artist:
                        total += artist_len
                elif item == "album":
                    if total + album_len > limit:
                        show_album = False
                    elif show_album:
                        total += album_len
                elif item == "title":
                    if total + title_len > limit:
                        show_title = False
                    elif show_title:
                        total += title_len
                elif item == "length":
                    if total + length_len > limit:
                        show_length = False
                    elif show_length:
                        total += length_len
                        pos_len = max(2, pos_len) - 2
                elif item == "position":
                    if total + pos_len > limit:
                        show_pos = False
                    elif show_pos:
                        total += pos_len
                        length_len = max(2, length_len) - 2

        if html:
            artist = _escape(artist)
            album = _escape(album)
            title = _escape(title)

        parts: list[str] = []
        if show_artist:
            parts.append(f"{artist} - ")
        if show_album:
            parts.append(f"{album} - ")
        if show_title:
            parts.append(title)
        if show_length or show_pos:
            parts.append(" ")
            if html:
                parts.append("<small>")
            parts.append("[")
            if show_pos:
                parts.append(position)
                if show_length:
                    parts.append("/")
            if show_length:
                parts.append(length)
            parts.append("]")
            if html:
                parts.append("</small>")
        return "".join(parts)

    def _formats_for(self, status: PlaybackStatus) -> tuple[str, str]:
        label, tooltip = self.format, self.tooltip_format
        choices = {
            PlaybackStatus.PLAYING: (self.format_playing, self.tooltip_playing),
            PlaybackStatus.PAUSED: (self.format_paused, self.tooltip_paused),
            PlaybackStatus.STOPPED: (self.format_stopped, self.tooltip_stopped),
        }
        status_label, status_tooltip = choices[status]
        return status_label or label, status_tooltip or tooltip

    def _icons(self, info: PlayerInfo) -> dict[str, str]:
        return {
            "player_icon": icon_from_json(self.config.get("player-icons"), info.name),
            "status_icon": icon_from_json(self.config.get("status-icons"), info.status_string),
        }

    def render(self, info: PlayerInfo) -> str | None:
        """Render the label markup.

        Returns ``None`` when the player is stopped or the format cannot be applied;
        an empty string means the label is to be hidden.
        """
        if info.status is PlaybackStatus.STOPPED:
            return None
        fmt, _ = self._formats_for(info.status)
        length = self.length(info, self.truncate_hours)
        position = self.position(info, self.truncate_hours and len(length) < 6)
        try:
            return fmt.format(
                player=_escape(info.name),
                status=info.status_string,
                artist=_escape(self.artist(info, True)),
                title=_escape(self.title(info, True)),
                album=_escape(self.album(info, True)),
                length=length,
                position=position,
                dynamic=self.dynamic(info, True, True),
                **self._icons(info),
            )
        except (KeyError, IndexError, ValueError) as exc:
            log.warning("mpris: format error: %s", exc)
            return None

    def tooltip(self, info: PlayerInfo) -> str | None:
        """Render the tooltip text, or ``None`` when tooltips are off or not applicable."""
        if not self.tooltip_enabled or info.status is PlaybackStatus.STOPPED:
            return None
        _, fmt = self._formats_for(info.status)
        limits = self.tooltip_len_limits
        length = self.length(info, self.truncate_hours)
        tooltip_length = length if (limits or len(length) > 5) else self.length(info, False)
        position = self.position(info, self.truncate_hours and len(length) < 6)
        tooltip_position = (
            position if (limits or len(position) > 5) else self.position(info, False)
        )
        try:
            return fmt.format(
                player=info.name,
                status=info.status_string,
                artist=self.artist(info, limits),
                title=self.title(info, limits),
                album=self.album(info, limits),
                length=tooltip_length,
                position=tooltip_position,
                dynamic=self.dynamic(info, limits, False),
                **self._icons(info),
            )
        except (KeyError, IndexError, ValueError) as exc:
            log.warning("mpris: format error (tooltip): %s", exc)
            return None