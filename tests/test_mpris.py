import pytest

from panelkit.mpris import MprisFormatter, PlaybackStatus, PlayerInfo
from panelkit.mpris_text import text_width


def info(**kwargs):
    base = dict(name="vlc", status=PlaybackStatus.PLAYING)
    base.update(kwargs)
    return PlayerInfo(**base)


def test_status_string_defaults_to_status_value():
    assert info(status=PlaybackStatus.PAUSED).status_string == "paused"


def test_default_render_uses_dynamic():
    fmt = MprisFormatter({})
    text = fmt.render(info(artist="A", title="T"))
    assert text == "vlc (playing): A - T"


def test_stopped_player_renders_nothing():
    fmt = MprisFormatter({})
    assert fmt.render(info(status=PlaybackStatus.STOPPED, title="T")) is None
    assert fmt.tooltip(info(status=PlaybackStatus.STOPPED, title="T")) is None


def test_length_drops_zero_hours_only_when_truncated():
    fmt = MprisFormatter({})
    i = info(length="00:03:25")
    assert fmt.length(i, True) == "03:25"
    assert fmt.length(i, False) == "00:03:25"
    assert fmt.length(info(length="01:03:25"), True) == "01:03:25"
    assert fmt.position(info(), True) == ""


def test_artist_truncated_with_ellipsis():
    fmt = MprisFormatter({"artist-len": 5})
    result = fmt.artist(info(artist="abcdefghij"), True)
    assert result.endswith("\u2026")
    assert result.startswith("abcd")
    assert text_width(result) <= 5
    assert fmt.artist(info(artist="abcdefghij"), False) == "abcdefghij"


def test_custom_ellipsis():
    fmt = MprisFormatter({"title-len": 4, "ellipsis": "."})
    assert fmt.title(info(title="abcdefgh"), True) == "abc."


def test_negative_len_is_ignored():
    fmt = MprisFormatter({"album-len": -3})
    assert fmt.album(info(album="abcdefgh"), True) == "abcdefgh"


def test_dynamic_escapes_html():
    fmt = MprisFormatter({})
    text = fmt.dynamic(info(title="R&B", length="00:01:00"), True, True)
    assert "R&amp;B" in text
    assert "<small>[" in text and "]</small>" in text
    assert fmt.dynamic(info(title="R&B"), True, False) == "R&B"


def test_dynamic_len_drops_parts_by_priority():
    fmt = MprisFormatter({"dynamic-len": 5})
    text = fmt.dynamic(info(title="abc", artist="longartist"), True, False)
    assert text == "abc"


def test_dynamic_shows_position_and_length():
    fmt = MprisFormatter({})
    text = fmt.dynamic(info(title="t", length="00:02:00", position="00:01:00"), True, False)
    assert text == "t [01:00/02:00]"


def test_format_paused_selected():
    fmt = MprisFormatter({"format-paused": "P {title}", "format-playing": "Y {title}"})
    assert fmt.render(info(status=PlaybackStatus.PAUSED, title="x")) == "P x"
    assert fmt.render(info(title="x")) == "Y x"


def test_icons_from_config():
    fmt = MprisFormatter(
        {
            "format": "{player_icon}{status_icon}",
            "player-icons": {"default": "D"},
            "status-icons": {"playing": "S"},
        }
    )
    assert fmt.render(info()) == "DS"


def test_bad_format_key_returns_none():
    fmt = MprisFormatter({"format": "{nope}"})
    assert fmt.render(info()) is None


def test_tooltip_disabled():
    fmt = MprisFormatter({"tooltip": False, "tooltip-format": "{title}"})
    assert fmt.tooltip(info(title="x")) is None


def test_tooltip_uses_full_length_without_limits():
    fmt = MprisFormatter({"tooltip-format": "{length}"})
    assert fmt.tooltip(info(length="00:03:25")) == "00:03:25"
    limited = MprisFormatter({"tooltip-format": "{length}", "enable-tooltip-len-limits": True})
    assert limited.tooltip(info(length="00:03:25")) == "03:25"


def test_ignored_players():
    fmt = MprisFormatter({"ignored-players": ["spotify", 3]})
    assert fmt.is_ignored("spotify")
    assert not fmt.is_ignored("vlc")
    assert fmt.player == "playerctld"


@pytest.mark.parametrize("width", [0, 1, 3, 8])
def test_truncated_title_width_bounded(width):
    fmt = MprisFormatter({"title-len": width})
    assert text_width(fmt.title(info(title="a long title here"), True)) <= width