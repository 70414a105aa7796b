"""Bookkeeping for the tabs of a terminal window."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

DEFAULT_TABS_CAPACITY = 10
_MAX_TAB_ID = 255


@dataclass(frozen=True)
class Tab:
    """A single tab, known by its identifier."""

    id: int


class TabsControl:
    """An ordered list of tabs with a current one and a maximum count."""

    def __init__(self, capacity: int = DEFAULT_TABS_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must allow at least one tab")
        initial = Tab(0)
        self._tabs: list[Tab] = [initial]
        self._current = initial.id
        self._capacity = capacity

    @classmethod
    def with_capacity(cls, capacity: int) -> TabsControl:
        """A control holding a single tab that allows at most ``capacity`` tabs."""
        return cls(capacity)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def current(self) -> int:
        """Identifier of the active tab."""
        return self._current

    @property
    def tabs(self) -> tuple[Tab, ...]:
        return tuple(self._tabs)

    def __len__(self) -> int:
        return len(self._tabs)

    def __iter__(self) -> Iterator[Tab]:
        return iter(list(self._tabs))

    def __contains__(self, tab_id: object) -> bool:
        return isinstance(tab_id, int) and self.contains(tab_id)

    def increase_capacity(self, amount: int) -> None:
        """Allow ``amount`` more tabs."""
        if amount < 0:
            raise ValueError("capacity can only be increased")
        self._capacity += amount

    def set_current(self, tab_id: int) -> None:
        """Make ``tab_id`` the active tab; unknown identifiers are ignored."""
        if self.contains(tab_id):
            self._current = tab_id

    def contains(self, tab_id: int) -> bool:
        return any(tab.id == tab_id for tab in self._tabs)

    def position(self, tab_id: int) -> Optional[int]:
        """Index of the tab with ``tab_id``, or ``None`` if there is none."""
        return next((i for i, tab in enumerate(self._tabs) if tab.id == tab_id), None)

    def close_tab(self, tab_id: int) -> None:
        """Close a tab; the last remaining tab is never closed.

        Closing the active tab makes the first tab active.
        """
        if len(self._tabs) <= 1:
            return
        index = self.position(tab_id)
        if index is None:
            return
        removed = self._tabs.pop(index)
        if removed.id == self._current:
            self._current = self._tabs[0].id

    def switch_to_next(self) -> None:
        """Activate the tab after the current one, wrapping around to the first."""
        index = self.position(self._current)
        if index is None:
            return
        following = self._tabs[index + 1:]
        self._current = following[0].id if following else self._tabs[0].id

    def add_tab(self, redirect: bool) -> None:
        """Append a tab if capacity allows; ``redirect`` makes it the active one."""
        if len(self._tabs) >= self._capacity:
            return
        new_id = self._tabs[-1].id + 1
        if new_id > _MAX_TAB_ID:
            raise OverflowError("tab identifiers are exhausted")
        self._tabs.append(Tab(new_id))
        if redirect:
            self._current = new_id