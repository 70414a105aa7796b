import pytest

from riotty.bindings import Modifiers, NO_MODIFIERS
from riotty.messenger import (
    InputMessage,
    Messenger,
    MessengerError,
    ResizeMessage,
    WindowSize,
)


def broken_channel(message):
    raise ConnectionError("receiver gone")


def test_send_bytes_delivers_input():
    received = []
    messenger = Messenger(received.append)
    messenger.send_bytes(b"\x1b[A")
    assert received == [InputMessage(b"\x1b[A")]


def test_send_bytes_accepts_bytearray():
    received = []
    messenger = Messenger(received.append)
    messenger.send_bytes(bytearray(b"ls\r"))
    assert received[0].data == b"ls\r"


def test_send_bytes_ignores_failures():
    messenger = Messenger(broken_channel)
    messenger.send_bytes(b"abc")
    assert messenger.modifiers == NO_MODIFIERS


def test_send_resize_delivers_size():
    received = []
    messenger = Messenger(received.append)
    result = messenger.send_resize(800, 600, 80, 24)
    assert result == "Resized"
    assert received == [ResizeMessage(WindowSize(rows=24, cols=80, width=800, height=600))]


def test_send_resize_failure_raises():
    messenger = Messenger(broken_channel)
    with pytest.raises(MessengerError, match="Error sending message"):
        messenger.send_resize(800, 600, 80, 24)


def test_send_resize_rejects_out_of_range():
    received = []
    messenger = Messenger(received.append)
    with pytest.raises(ValueError):
        messenger.send_resize(70000, 600, 80, 24)
    assert received == []


def test_modifiers_round_trip():
    messenger = Messenger(lambda message: None)
    assert messenger.modifiers == NO_MODIFIERS
    messenger.modifiers = Modifiers.SHIFT | Modifiers.CTRL
    assert Modifiers.CTRL in messenger.modifiers
    assert Modifiers.ALT not in messenger.modifiers