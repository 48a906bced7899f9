"""Parsing of JSON documents received from commands and sockets."""

from __future__ import annotations

import json
from typing import Any


def parse(data: str) -> Any:
    """Parse ``data`` as JSON; an empty string yields an empty object.

    Raises ``ValueError`` with the parser's message when the text is not valid JSON.
    """
    if not data:
        return {}
    try:
        return json.loads(data)
    except json.JSONDecodeError as exc:
        raise ValueError(str(exc)) from exc