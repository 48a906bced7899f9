from panelkit.keyboard_state import LockFormats, render_locks


def test_defaults_from_empty_config():
    formats = LockFormats.from_config({})
    assert formats.numlock == "{name} {icon}"
    assert formats.capslock == "{name} {icon}"
    assert formats.scrolllock == "{name} {icon}"
    assert formats.icon_locked == "locked"
    assert formats.icon_unlocked == "unlocked"


def test_string_format_applies_to_all():
    formats = LockFormats.from_config({"format": "{icon}"})
    assert {formats.numlock, formats.capslock, formats.scrolllock} == {"{icon}"}


def test_per_lock_formats():
    formats = LockFormats.from_config(
        {"format": {"numlock": "N {icon}", "capslock": 5}}
    )
    assert formats.numlock == "N {icon}"
    assert formats.capslock == "{name} {icon}"
    assert formats.scrolllock == "{name} {icon}"


def test_custom_icons():
    formats = LockFormats.from_config({"format-icons": {"locked": "X", "unlocked": 1}})
    assert formats.icon_locked == "X"
    assert formats.icon_unlocked == "unlocked"


def test_render_default_order_and_text():
    labels = render_locks(LockFormats(), True, False, True)
    assert [label.name for label in labels] == ["Num", "Caps", "Scroll"]
    assert [label.text for label in labels] == [
        "Num locked",
        "Caps unlocked",
        "Scroll locked",
    ]
    assert [label.locked for label in labels] == [True, False, True]


def test_render_custom_format():
    formats = LockFormats.from_config(
        {"format": "{name}:{icon}", "format-icons": {"locked": "on", "unlocked": "off"}}
    )
    labels = render_locks(formats, False, True, False)
    assert [label.text for label in labels] == ["Num:off", "Caps:on", "Scroll:off"]