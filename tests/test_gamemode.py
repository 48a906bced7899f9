from panelkit.gamemode import (
    DEFAULT_ICON_NAME,
    GamemodeSettings,
    GamemodeView,
)


def test_defaults_from_empty_config():
    settings = GamemodeSettings.from_config({})
    assert settings == GamemodeSettings()
    assert settings.format == "{glyph}"
    assert settings.tooltip_format == "Games running: {count}"
    assert settings.icon_name == DEFAULT_ICON_NAME


def test_config_overrides_and_wrong_types_ignored():
    settings = GamemodeSettings.from_config(
        {
            "format": "{count}",
            "glyph": "G",
            "use-icon": False,
            "icon-size": -1,
            "icon-spacing": 7,
            "hide-not-running": "no",
        }
    )
    assert settings.format == "{count}"
    assert settings.glyph == "G"
    assert settings.use_icon is False
    assert settings.icon_size == GamemodeSettings().icon_size
    assert settings.icon_spacing == 7
    assert settings.hide_not_running is True


def test_hidden_when_not_running():
    view = GamemodeView(GamemodeSettings())
    assert view.render(False, 5).visible is False


def test_hidden_when_no_games_by_default():
    view = GamemodeView(GamemodeSettings())
    assert view.render(True, 0).visible is False


def test_shown_without_games_when_not_hiding():
    view = GamemodeView(GamemodeSettings(hide_not_running=False, format="[{count}]"))
    result = view.render(True, 0)
    assert result.visible is True
    assert result.status == ""
    assert result.text == "[]"


def test_tooltip_and_status_when_running():
    view = GamemodeView(GamemodeSettings())
    result = view.render(True, 3)
    assert result.tooltip == "Games running: 3"
    assert result.status == "running"
    assert result.icon == DEFAULT_ICON_NAME
    assert result.text == ""


def test_tooltip_disabled():
    view = GamemodeView(GamemodeSettings(tooltip=False))
    assert view.render(True, 2).tooltip is None


def test_toggle_uses_alt_format_with_glyph():
    view = GamemodeView(GamemodeSettings(use_icon=False, glyph="G"))
    assert view.toggle() is True
    result = view.render(True, 2)
    assert result.text == "G 2"
    assert result.icon is None
    assert view.toggle() is False
    assert view.render(True, 2).text == "G"


def test_previous_status_tracked():
    view = GamemodeView(GamemodeSettings(hide_not_running=False))
    first = view.render(True, 1)
    second = view.render(True, 0)
    assert first.previous_status == ""
    assert second.previous_status == first.status
    assert view.last_status == second.status