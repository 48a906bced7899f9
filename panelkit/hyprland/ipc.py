"""Client for the compositor's command socket and event socket."""

from __future__ import annotations

import logging
import os
import socket
import threading
from typing import Any, Optional, Protocol, runtime_checkable

from panelkit.jsonparse import parse

log = logging.getLogger(__name__)

SIGNATURE_VARIABLE = "HYPRLAND_INSTANCE_SIGNATURE"
COMMAND_SOCKET = ".socket.sock"
EVENT_SOCKET = ".socket2.sock"
_READ_SIZE = 8192


def socket_path(signature: str, name: str) -> str:
    """Path of the socket ``name`` belonging to the instance ``signature``."""
    return f"/tmp/hypr/{signature}/{name}"


@runtime_checkable
class EventHandler(Protocol):
    """Receives event lines such as ``workspace>>3``."""

    def on_event(self, event: str) -> None: ...


class HyprlandIPC:
    """Sends commands to the compositor and relays its events to registered handlers."""

    def __init__(self, signature: Optional[str] = None) -> None:
        self.signature = signature if signature is not None else os.environ.get(SIGNATURE_VARIABLE)
        self._callbacks: list[tuple[str, EventHandler]] = []
        self._lock = threading.RLock()

    def _require_signature(self) -> str:
        if not self.signature:
            raise RuntimeError(
                f"{SIGNATURE_VARIABLE} was not set! (Is Hyprland running?)"
            )
        return self.signature

    def register(self, event: str, handler: Optional[EventHandler]) -> None:
        """Call ``handler`` for every event named ``event``."""
        if handler is None:
            return
        with self._lock:
            self._callbacks.append((event, handler))

    def unregister(self, handler: Optional[EventHandler]) -> None:
        """Remove every registration of ``handler``."""
        if handler is None:
            return
        with self._lock:
            self._callbacks = [(name, h) for name, h in self._callbacks if h is not handler]

    def dispatch(self, line: str) -> None:
        """Pass one event line to the handlers registered for its name."""
        event = line.split("\n", 1)[0]
        name = event.split(">", 1)[0]
        log.debug("hyprland IPC received %s", event)
        with self._lock:
            handlers = [h for registered, h in self._callbacks if registered == name]
            for handler in handlers:
                handler.on_event(event)

    def request(self, command: str) -> str:
        """Send ``command`` on the command socket and return the whole reply."""
        path = socket_path(self._require_signature(), COMMAND_SOCKET)
        with socket.socket(socket.AF_UNIX, socket.SOCK_STREAM) as sock:
            sock.connect(path)
            sock.sendall(command.encode("utf-8"))
            chunks: list[bytes] = []
            while True:
                chunk = sock.recv(_READ_SIZE)
                if not chunk:
                    break
                chunks.append(chunk)
        return b"".join(chunks).decode("utf-8", errors="replace")

    def request_json(self, command: str) -> Any:
        """Send ``command`` asking for a JSON reply and return it parsed."""
        return parse(self.request("j/" + command))

    def listen(self) -> None:
        """Read events from the event socket and dispatch them until it closes."""
        path = socket_path(self._require_signature(), EVENT_SOCKET)
        log.info("Hyprland IPC starting")
        with socket.socket(socket.AF_UNIX, socket.SOCK_STREAM) as sock:
            sock.connect(path)
            with sock.makefile("r", encoding="utf-8", errors="replace", newline="\n") as stream:
                for line in stream:
                    self.dispatch(line)