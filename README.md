# riotty

Building blocks for a terminal emulator. They use only the standard library.

- `riotty.point`: grid positions (`Pos`, ordered by row and then by column), cell sides (`Side`), grid sizes (`Dimensions`, with optional scrollback history), `Anchor`, `CursorShape` and `SelectionRange`. `SelectionRange` provides `contains` and `contains_square`.
- `riotty.selection`: `Selection` in four kinds (`SelectionType.SIMPLE`, `BLOCK`, `SEMANTIC`, `LINES`). Methods:
  - `update` moves the end of the selection.
  - `rotate` shifts the selection inside a scrolling region.
  - `is_empty` checks whether the selection covers any cell.
  - `intersects_range(top, bottom)` checks overlap with a line range.
  - `include_all` sets the sides so both end cells are included.
  - `to_range(term)` converts the selection to a `SelectionRange`.
- `riotty.bindings`: keyboard `Binding`s built from `Key` (a `KeyCode` or a raw scancode), `Modifiers`, `BindingMode` and `Action` / `ActionKind`.
  - `Binding.is_triggered_by` and `Binding.triggers_match` test bindings against input and against each other.
  - `default_key_bindings(platform)` and `platform_key_bindings(platform)` return the built-in sets. `platform` is `"macos"`, `"windows"` or anything else for Unix; left out, it is taken from the running system.
- `riotty.tabs`: `TabsControl`, an ordered list of `Tab`s with a current tab and a capacity (10 by default). It supports adding, closing and switching tabs. The last tab is never closed.
- `riotty.scheduler`: `Scheduler`, which keeps `Timer`s identified by `TimerId` (a `Topic` and a tab id).
  - Timers are ordered by deadline, and intervals are in seconds.
  - `update()` passes every due event to the `send` callable and returns the nearest remaining deadline.
  - Repeating timers are rescheduled automatically.
  - You can supply the clock, which makes the scheduler easy to drive in tests.
- `riotty.messenger`: `Messenger` passes `InputMessage`s and `ResizeMessage`s (carrying a `WindowSize`) to a channel callable and tracks the held `modifiers`.
  - Failures in `send_bytes` are ignored.
  - `send_resize` raises `MessengerError` when the channel refuses the message; otherwise it returns `"Resized"`.

## Install

    pip install .

For the tests:

    pip install ".[test]"
    pytest

## Example

    from riotty.tabs import TabsControl

    tabs = TabsControl.with_capacity(3)
    tabs.add_tab(True)       # current is now 1
    tabs.switch_to_next()
    print(tabs.current)      # 0

    from riotty.point import Pos, Side
    from riotty.selection import Selection, SelectionType

    sel = Selection(SelectionType.SIMPLE, Pos(0, 0), Side.LEFT)
    sel.update(Pos(0, 0), Side.RIGHT)
    print(sel.is_empty())    # False

    from riotty.messenger import Messenger

    sent = []
    messenger = Messenger(sent.append)
    messenger.send_bytes(b"ls\r")
    print(messenger.send_resize(800, 600, 80, 24))   # Resized

## What it does not do

- It has no window, no renderer and no command to start a terminal.
- It does not spawn or read a pseudo terminal. `Messenger` only hands messages to the callable you give it.
- It has no terminal grid or escape-sequence parser. `Selection.to_range` needs an object you supply that has:
  - a `dimensions` attribute;
  - the methods `bracket_search`, `semantic_search_left`, `semantic_search_right`, `row_search_left` and `row_search_right`.
- Key bindings describe which action a key fires. Carrying out the action is left to the caller.