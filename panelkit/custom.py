"""Parsing and formatting of the output of user-defined script modules."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Mapping

from panelkit.jsonparse import parse

_MARKUP_ESCAPES = {"&": "&amp;", "<": "&lt;", ">": "&gt;", "'": "&apos;", '"': "&quot;"}


def _escape(text: str) -> str:
    return "".join(_MARKUP_ESCAPES.get(char, char) for char in text)


def _lines(output: str) -> list[str]:
    lines = output.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def _as_str(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        raise ValueError("value is not convertible to a string")
    return value if isinstance(value, str) else str(value)


def _lround(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


@dataclass
class CustomOutput:
    """What a script reported: text, alternative, tooltip, CSS classes, percentage."""

    text: str = ""
    alt: str = ""
    tooltip: str = ""
    classes: list[str] = field(default_factory=list)
    percentage: int = 0


def parse_output_raw(output: str, escape: bool = False) -> CustomOutput:
    """Read text, tooltip and class from the first three lines of plain output."""
    result = CustomOutput()
    for index, line in enumerate(_lines(output)[:3]):
        if index == 0:
            result.text = _escape(line) if escape else line
            result.tooltip = line
            result.classes = []
        elif index == 1:
            result.tooltip = line
        else:
            result.classes.append(line)
    return result


def parse_output_json(output: str, escape: bool = False) -> CustomOutput:
    """Read the first line of output as a JSON object.

    Raises ``ValueError`` for invalid JSON or a value that is not an object.
    """
    result = CustomOutput()
    lines = _lines(output)
    if not lines:
        return result
    parsed = parse(lines[0])
    if not isinstance(parsed, dict):
        raise ValueError("expected a JSON object")

    text = _as_str(parsed.get("text"))
    alt = _as_str(parsed.get("alt"))
    result.text = _escape(text) if escape else text
    result.alt = _escape(alt) if escape else alt
    result.tooltip = _as_str(parsed.get("tooltip"))

    classes = parsed.get("class")
    if isinstance(classes, str):
        result.classes.append(classes)
    elif isinstance(classes, list):
        result.classes.extend(_as_str(item) for item in classes)

    percentage = parsed.get("percentage")
    if isinstance(percentage, (int, float)) and not isinstance(percentage, bool):
        result.percentage = _lround(float(percentage))
    return result


def should_hide(config: Mapping[str, Any], exit_code: int, out: str) -> bool:
    """Whether a command-driven module hides for empty output or a failed command."""
    runs_command = isinstance(config.get("exec"), str) or isinstance(config.get("exec-if"), str)
    return runs_command and (not out or exit_code != 0)


def format_custom(fmt: str, result: CustomOutput, icon: str = "") -> str:
    """Render the label; the text is the positional argument."""
    return fmt.format(result.text, alt=result.alt, icon=icon, percentage=result.percentage)