"""Key bindings: which key and modifier combinations trigger which actions."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum, IntFlag, auto
from typing import Optional, Union


class Modifiers(IntFlag):
    """Modifier keys held while a key is pressed."""

    SHIFT = 1
    CTRL = 2
    ALT = 4
    LOGO = 8


NO_MODIFIERS = Modifiers(0)


class BindingMode(IntFlag):
    """Terminal modes a binding can require or exclude."""

    APP_CURSOR = 0b0000_0001
    APP_KEYPAD = 0b0000_0010
    ALT_SCREEN = 0b0000_0100
    VI = 0b0000_1000
    SEARCH = 0b0001_0000

    @classmethod
    def from_terminal_mode(
        cls, app_cursor: bool, app_keypad: bool, alt_screen: bool, vi: bool
    ) -> BindingMode:
        """Build the binding mode matching the given terminal mode switches."""
        mode = cls(0)
        if app_cursor:
            mode |= cls.APP_CURSOR
        if app_keypad:
            mode |= cls.APP_KEYPAD
        if alt_screen:
            mode |= cls.ALT_SCREEN
        if vi:
            mode |= cls.VI
        return mode


NO_MODE = BindingMode(0)
ALL_MODES = (
    BindingMode.APP_CURSOR
    | BindingMode.APP_KEYPAD
    | BindingMode.ALT_SCREEN
    | BindingMode.VI
    | BindingMode.SEARCH
)


class KeyCode(Enum):
    """Virtual key codes known to the bindings."""

    KEY0 = auto()
    A = auto()
    B = auto()
    C = auto()
    D = auto()
    E = auto()
    F = auto()
    G = auto()
    H = auto()
    I = auto()  # noqa: E741
    J = auto()
    K = auto()
    L = auto()
    M = auto()
    N = auto()
    O = auto()  # noqa: E741
    P = auto()
    Q = auto()
    R = auto()
    S = auto()
    T = auto()
    U = auto()
    V = auto()
    W = auto()
    X = auto()
    Y = auto()
    Z = auto()
    F1 = auto()
    F2 = auto()
    F3 = auto()
    F4 = auto()
    F5 = auto()
    F6 = auto()
    F7 = auto()
    F8 = auto()
    F9 = auto()
    F10 = auto()
    F11 = auto()
    F12 = auto()
    F13 = auto()
    F14 = auto()
    F15 = auto()
    F16 = auto()
    F17 = auto()
    F18 = auto()
    F19 = auto()
    F20 = auto()
    ESCAPE = auto()
    INSERT = auto()
    HOME = auto()
    DELETE = auto()
    END = auto()
    PAGE_DOWN = auto()
    PAGE_UP = auto()
    LEFT = auto()
    UP = auto()
    RIGHT = auto()
    DOWN = auto()
    BACK = auto()
    RETURN = auto()
    SPACE = auto()
    TAB = auto()
    NUMPAD_ENTER = auto()
    NUMPAD_ADD = auto()
    NUMPAD_SUBTRACT = auto()
    EQUALS = auto()
    PLUS = auto()
    MINUS = auto()
    COPY = auto()
    PASTE = auto()


@dataclass(frozen=True)
class Key:
    """A key identified either by its virtual key code or by a raw scancode."""

    code: Union[KeyCode, int]

    def __post_init__(self) -> None:
        if isinstance(self.code, KeyCode):
            return
        if isinstance(self.code, bool) or not isinstance(self.code, int):
            raise TypeError("a key is a KeyCode or an integer scancode")
        if self.code < 0:
            raise ValueError("scancodes cannot be negative")

    @property
    def is_scancode(self) -> bool:
        return not isinstance(self.code, KeyCode)


class ActionKind(Enum):
    """What a binding does when it is triggered."""

    ESC = auto()
    PASTE = auto()
    COPY = auto()
    COPY_SELECTION = auto()
    PASTE_SELECTION = auto()
    INCREASE_FONT_SIZE = auto()
    DECREASE_FONT_SIZE = auto()
    RESET_FONT_SIZE = auto()
    SCROLL_PAGE_UP = auto()
    SCROLL_PAGE_DOWN = auto()
    SCROLL_HALF_PAGE_UP = auto()
    SCROLL_HALF_PAGE_DOWN = auto()
    SCROLL_LINE_UP = auto()
    SCROLL_LINE_DOWN = auto()
    SCROLL_TO_TOP = auto()
    SCROLL_TO_BOTTOM = auto()
    CLEAR_HISTORY = auto()
    HIDE = auto()
    HIDE_OTHER_APPLICATIONS = auto()
    MINIMIZE = auto()
    QUIT = auto()
    CLEAR_LOG_NOTICE = auto()
    SPAWN_NEW_INSTANCE = auto()
    WINDOW_CREATE_NEW = auto()
    TAB_CREATE_NEW = auto()
    TAB_SWITCH_NEXT = auto()
    TOGGLE_FULLSCREEN = auto()
    TOGGLE_MAXIMIZED = auto()
    TOGGLE_SIMPLE_FULLSCREEN = auto()
    CLEAR_SELECTION = auto()
    TOGGLE_VI_MODE = auto()
    RECEIVE_CHAR = auto()
    NONE = auto()


@dataclass(frozen=True)
class Action:
    """An action; escape actions carry the sequence to write to the terminal."""

    kind: ActionKind
    sequence: Optional[str] = None

    def __post_init__(self) -> None:
        if (self.kind is ActionKind.ESC) != (self.sequence is not None):
            raise ValueError("only escape actions carry a sequence, and they always do")

    @classmethod
    def esc(cls, sequence: str) -> Action:
        """An action writing ``sequence`` to the terminal."""
        return cls(ActionKind.ESC, sequence)


@dataclass(frozen=True)
class Binding:
    """A trigger key with the modifiers and modes under which it fires an action."""

    trigger: Key
    action: Action
    mods: Modifiers = NO_MODIFIERS
    mode: BindingMode = NO_MODE
    notmode: BindingMode = NO_MODE

    def is_triggered_by(self, mode: BindingMode, mods: Modifiers, key: Key) -> bool:
        """Whether pressing ``key`` with ``mods`` in ``mode`` fires this binding."""
        return (
            self.trigger == key
            and self.mods == mods
            and (mode & self.mode) == self.mode
            and not (mode & self.notmode)
        )

    def triggers_match(self, other: Binding) -> bool:
        """Whether this binding and ``other`` can be fired by the same input."""
        if self.trigger != other.trigger or self.mods != other.mods:
            return False

        own_mode = self.mode or ALL_MODES
        other_mode = other.mode or ALL_MODES
        if not (own_mode & other_mode):
            return False

        # Never active together when one requires what the other forbids.
        if (self.mode & other.notmode) or (other.mode & self.notmode):
            return False

        return True


def _bind(
    key: KeyCode,
    action: Union[Action, ActionKind, str],
    mods: Modifiers = NO_MODIFIERS,
    mode: BindingMode = NO_MODE,
    notmode: BindingMode = NO_MODE,
) -> Binding:
    if isinstance(action, str):
        action = Action.esc(action)
    elif isinstance(action, ActionKind):
        action = Action(action)
    return Binding(Key(key), action, mods, mode, notmode)


def _current_platform() -> str:
    if sys.platform == "darwin":
        return "macos"
    if sys.platform.startswith("win"):
        return "windows"
    return "linux"


_K = KeyCode
_A = ActionKind
_M = Modifiers
_B = BindingMode


def _base_bindings() -> list[Binding]:
    vi = _B.VI
    app_cursor = _B.APP_CURSOR
    alt = _B.ALT_SCREEN
    shift_ctrl = _M.SHIFT | _M.CTRL

    bindings = [
        _bind(_K.COPY, _A.COPY),
        _bind(_K.COPY, _A.CLEAR_SELECTION, mode=vi),
        _bind(_K.PASTE, _A.PASTE, notmode=vi),
        _bind(_K.L, _A.CLEAR_LOG_NOTICE, _M.CTRL),
        _bind(_K.L, "\x0c", _M.CTRL, notmode=vi),
        _bind(_K.TAB, "\x1b[Z", _M.SHIFT, notmode=vi),
        _bind(_K.BACK, "\x1b\x7f", _M.ALT, notmode=vi),
        _bind(_K.BACK, "\x7f", _M.SHIFT, notmode=vi),
        _bind(_K.HOME, _A.SCROLL_TO_TOP, _M.SHIFT, notmode=alt),
        _bind(_K.END, _A.SCROLL_TO_BOTTOM, _M.SHIFT, notmode=alt),
        _bind(_K.PAGE_UP, _A.SCROLL_PAGE_UP, _M.SHIFT, notmode=alt),
        _bind(_K.PAGE_DOWN, _A.SCROLL_PAGE_DOWN, _M.SHIFT, notmode=alt),
        _bind(_K.HOME, "\x1b[1;2H", _M.SHIFT, mode=alt, notmode=vi),
        _bind(_K.END, "\x1b[1;2F", _M.SHIFT, mode=alt, notmode=vi),
        _bind(_K.PAGE_UP, "\x1b[5;2~", _M.SHIFT, mode=alt, notmode=vi),
        _bind(_K.PAGE_DOWN, "\x1b[6;2~", _M.SHIFT, mode=alt, notmode=vi),
    ]

    cursor_keys = [
        (_K.HOME, "H"),
        (_K.END, "F"),
        (_K.UP, "A"),
        (_K.DOWN, "B"),
        (_K.RIGHT, "C"),
        (_K.LEFT, "D"),
    ]
    for key, letter in cursor_keys:
        bindings.append(_bind(key, f"\x1bO{letter}", mode=app_cursor, notmode=vi))
        bindings.append(_bind(key, f"\x1b[{letter}", notmode=app_cursor | vi))

    plain_sequences = [
        (_K.BACK, "\x7f"),
        (_K.INSERT, "\x1b[2~"),
        (_K.DELETE, "\x1b[3~"),
        (_K.PAGE_UP, "\x1b[5~"),
        (_K.PAGE_DOWN, "\x1b[6~"),
        (_K.F1, "\x1bOP"),
        (_K.F2, "\x1bOQ"),
        (_K.F3, "\x1bOR"),
        (_K.F4, "\x1bOS"),
        (_K.F5, "\x1b[15~"),
        (_K.F6, "\x1b[17~"),
        (_K.F7, "\x1b[18~"),
        (_K.F8, "\x1b[19~"),
        (_K.F9, "\x1b[20~"),
        (_K.F10, "\x1b[21~"),
        (_K.F11, "\x1b[23~"),
        (_K.F12, "\x1b[24~"),
        (_K.F13, "\x1b[25~"),
        (_K.F14, "\x1b[26~"),
        (_K.F15, "\x1b[28~"),
        (_K.F16, "\x1b[29~"),
        (_K.F17, "\x1b[31~"),
        (_K.F18, "\x1b[32~"),
        (_K.F19, "\x1b[33~"),
        (_K.F20, "\x1b[34~"),
        (_K.NUMPAD_ENTER, "\n"),
    ]
    bindings.extend(_bind(key, seq, notmode=vi) for key, seq in plain_sequences)

    bindings.extend(
        [
            _bind(_K.SPACE, _A.TOGGLE_VI_MODE, shift_ctrl),
            _bind(_K.SPACE, _A.SCROLL_TO_BOTTOM, shift_ctrl, mode=vi),
            _bind(_K.ESCAPE, _A.CLEAR_SELECTION, mode=vi),
            _bind(_K.I, _A.TOGGLE_VI_MODE, mode=vi),
            _bind(_K.I, _A.SCROLL_TO_BOTTOM, mode=vi),
            _bind(_K.C, _A.TOGGLE_VI_MODE, _M.CTRL, mode=vi),
            _bind(_K.Y, _A.SCROLL_LINE_UP, _M.CTRL, mode=vi),
            _bind(_K.E, _A.SCROLL_LINE_DOWN, _M.CTRL, mode=vi),
            _bind(_K.G, _A.SCROLL_TO_TOP, mode=vi),
            _bind(_K.G, _A.SCROLL_TO_BOTTOM, _M.SHIFT, mode=vi),
            _bind(_K.B, _A.SCROLL_PAGE_UP, _M.CTRL, mode=vi),
            _bind(_K.F, _A.SCROLL_PAGE_DOWN, _M.CTRL, mode=vi),
            _bind(_K.U, _A.SCROLL_HALF_PAGE_UP, _M.CTRL, mode=vi),
            _bind(_K.D, _A.SCROLL_HALF_PAGE_DOWN, _M.CTRL, mode=vi),
            _bind(_K.Y, _A.COPY, mode=vi),
            _bind(_K.Y, _A.CLEAR_SELECTION, mode=vi),
            _bind(_K.T, _A.TAB_CREATE_NEW, _M.LOGO),
            _bind(_K.TAB, _A.TAB_SWITCH_NEXT, _M.CTRL),
        ]
    )
    return bindings


def platform_key_bindings(platform: Optional[str] = None) -> list[Binding]:
    """Bindings specific to ``platform`` ("macos", "windows" or anything else for Unix)."""
    platform = platform or _current_platform()
    vi = _B.VI

    if platform == "windows":
        return []

    if platform == "macos":
        return [
            _bind(_K.KEY0, _A.RESET_FONT_SIZE, _M.LOGO),
            _bind(_K.EQUALS, _A.INCREASE_FONT_SIZE, _M.LOGO),
            _bind(_K.PLUS, _A.INCREASE_FONT_SIZE, _M.LOGO),
            _bind(_K.NUMPAD_ADD, _A.INCREASE_FONT_SIZE, _M.LOGO),
            _bind(_K.MINUS, _A.DECREASE_FONT_SIZE, _M.LOGO),
            _bind(_K.NUMPAD_SUBTRACT, _A.DECREASE_FONT_SIZE, _M.LOGO),
            _bind(_K.INSERT, "\x1b[2;2~", _M.SHIFT, notmode=vi),
            _bind(_K.LEFT, "\x1bb", _M.ALT, notmode=vi),
            _bind(_K.RIGHT, "\x1bf", _M.ALT, notmode=vi),
            _bind(_K.K, "\x0c", _M.LOGO, notmode=vi),
            _bind(_K.K, _A.CLEAR_HISTORY, _M.LOGO, notmode=vi),
            _bind(_K.V, _A.PASTE, _M.LOGO, notmode=vi),
            _bind(_K.N, _A.WINDOW_CREATE_NEW, _M.LOGO),
            _bind(_K.F, _A.TOGGLE_FULLSCREEN, _M.CTRL | _M.LOGO),
            _bind(_K.C, _A.COPY, _M.LOGO),
            _bind(_K.C, _A.CLEAR_SELECTION, _M.LOGO, mode=vi),
            _bind(_K.H, _A.HIDE, _M.LOGO),
            _bind(_K.H, _A.HIDE_OTHER_APPLICATIONS, _M.LOGO | _M.ALT),
            _bind(_K.M, _A.MINIMIZE, _M.LOGO),
            _bind(_K.Q, _A.QUIT, _M.LOGO),
            _bind(_K.W, _A.QUIT, _M.LOGO),
        ]

    ctrl_shift = _M.CTRL | _M.SHIFT
    return [
        _bind(_K.V, _A.PASTE, ctrl_shift, notmode=vi),
        _bind(_K.C, _A.COPY, ctrl_shift),
        _bind(_K.C, _A.CLEAR_SELECTION, ctrl_shift, mode=vi),
        _bind(_K.INSERT, _A.PASTE_SELECTION, _M.SHIFT, notmode=vi),
        _bind(_K.KEY0, _A.RESET_FONT_SIZE, _M.CTRL),
        _bind(_K.EQUALS, _A.INCREASE_FONT_SIZE, _M.CTRL),
        _bind(_K.PLUS, _A.INCREASE_FONT_SIZE, _M.CTRL),
        _bind(_K.NUMPAD_ADD, _A.INCREASE_FONT_SIZE, _M.CTRL),
        _bind(_K.MINUS, _A.DECREASE_FONT_SIZE, _M.CTRL),
        _bind(_K.NUMPAD_SUBTRACT, _A.DECREASE_FONT_SIZE, _M.CTRL),
    ]


def default_key_bindings(platform: Optional[str] = None) -> list[Binding]:
    """The built-in bindings followed by those of ``platform``."""
    return _base_bindings() + platform_key_bindings(platform)