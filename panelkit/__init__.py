"""Parsers, system readers and text rendering for status bar modules."""

__version__ = "0.1.0"

__all__ = [
    "cpu",
    "custom",
    "gamemode",
    "hyprland",
    "inhibitor",
    "jsonparse",
    "keyboard_state",
    "memory",
    "mpris",
    "mpris_text",
]