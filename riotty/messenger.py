"""Messages from the window to the pseudo terminal: input bytes and resizes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Union

from riotty.bindings import NO_MODIFIERS, Modifiers

_U16_MAX = 0xFFFF


@dataclass(frozen=True)
class WindowSize:
    """Size of the terminal in cells and in pixels."""

    rows: int
    cols: int
    width: int
    height: int

    def __post_init__(self) -> None:
        for name in ("rows", "cols", "width", "height"):
            value = getattr(self, name)
            if not 0 <= value <= _U16_MAX:
                raise ValueError(f"{name} must fit in 16 bits, got {value}")


@dataclass(frozen=True)
class InputMessage:
    """Bytes to write to the terminal."""

    data: bytes


@dataclass(frozen=True)
class ResizeMessage:
    """A new terminal size."""

    size: WindowSize


Message = Union[InputMessage, ResizeMessage]


class MessengerError(Exception):
    """A message could not be delivered."""


class Messenger:
    """Sends input and resize messages down a channel and tracks the modifiers held.

    ``channel`` is called with each message; it raises if the receiving end is gone.
    """

    def __init__(self, channel: Callable[[Message], None]) -> None:
        self._channel = channel
        self.modifiers: Modifiers = NO_MODIFIERS

    def send_bytes(self, data: bytes) -> None:
        """Queue ``data`` for the terminal; delivery failures are ignored."""
        try:
            self._channel(InputMessage(bytes(data)))
        except Exception:
            pass

    def send_resize(self, width: int, height: int, cols: int, rows: int) -> str:
        """Announce a new size; raises ``MessengerError`` if it cannot be sent."""
        size = WindowSize(rows=rows, cols=cols, width=width, height=height)
        try:
            self._channel(ResizeMessage(size))
        except Exception as err:
            raise MessengerError("Error sending message") from err
        return "Resized"