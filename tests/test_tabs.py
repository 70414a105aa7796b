import pytest

from riotty.tabs import DEFAULT_TABS_CAPACITY, Tab, TabsControl


def test_capacity():
    tabs_control = TabsControl()
    assert tabs_control.capacity == DEFAULT_TABS_CAPACITY

    tabs_control = TabsControl.with_capacity(5)
    assert tabs_control.capacity == 5

    tabs_control = TabsControl.with_capacity(5)
    tabs_control.increase_capacity(3)
    assert tabs_control.capacity == 8


def test_add_tab():
    tabs_control = TabsControl.with_capacity(5)
    assert tabs_control.capacity == 5
    assert tabs_control.current == 0

    tabs_control.add_tab(False)
    assert tabs_control.capacity == 5
    assert tabs_control.current == 0

    tabs_control.add_tab(True)
    assert tabs_control.capacity == 5
    assert tabs_control.current == 2


def test_add_tab_with_capacity_limit():
    tabs_control = TabsControl.with_capacity(3)
    assert tabs_control.capacity == 3
    assert tabs_control.current == 0
    tabs_control.add_tab(False)
    assert len(tabs_control) == 2
    tabs_control.add_tab(False)
    assert len(tabs_control) == 3

    for _ in range(20):
        tabs_control.add_tab(False)

    assert len(tabs_control) == 3
    assert tabs_control.capacity == 3


def test_set_current():
    tabs_control = TabsControl.with_capacity(8)

    tabs_control.add_tab(True)
    assert tabs_control.current == 1
    tabs_control.set_current(0)
    assert tabs_control.current == 0
    assert len(tabs_control) == 2
    assert tabs_control.capacity == 8

    tabs_control.set_current(8)
    assert tabs_control.current == 0
    tabs_control.set_current(2)
    assert tabs_control.current == 0

    tabs_control.add_tab(False)
    tabs_control.add_tab(False)
    tabs_control.set_current(3)
    assert tabs_control.current == 3


def test_close_tab():
    tabs_control = TabsControl.with_capacity(3)

    tabs_control.add_tab(False)
    tabs_control.add_tab(False)
    assert len(tabs_control) == 3

    assert tabs_control.current == 0
    tabs_control.set_current(2)
    assert tabs_control.current == 2
    tabs_control.set_current(0)

    tabs_control.close_tab(2)
    tabs_control.set_current(2)
    assert tabs_control.current == 0
    assert len(tabs_control) == 2


def test_close_tab_upcoming_ids():
    tabs_control = TabsControl.with_capacity(5)
    for _ in range(4):
        tabs_control.add_tab(False)

    for tab_id in range(4):
        tabs_control.close_tab(tab_id)

    assert len(tabs_control) == 1
    assert tabs_control.current == 4

    tabs_control.add_tab(False)

    assert len(tabs_control) == 2
    tabs_control.set_current(5)
    assert tabs_control.current == 5
    tabs_control.close_tab(4)
    assert len(tabs_control) == 1
    assert tabs_control.current == 5


def test_close_last_tab():
    tabs_control = TabsControl.with_capacity(2)

    tabs_control.add_tab(False)
    tabs_control.add_tab(False)
    assert len(tabs_control) == 2
    assert tabs_control.current == 0

    tabs_control.close_tab(1)
    assert len(tabs_control) == 1

    tabs_control.close_tab(0)
    assert len(tabs_control) == 1


def test_switch_to_next():
    tabs_control = TabsControl.with_capacity(5)
    for _ in range(5):
        tabs_control.add_tab(False)
    assert len(tabs_control) == 5
    assert tabs_control.current == 0

    for expected in [1, 2, 3, 4, 0, 1]:
        tabs_control.switch_to_next()
        assert tabs_control.current == expected


def test_position_and_contains():
    tabs_control = TabsControl.with_capacity(4)
    tabs_control.add_tab(False)
    tabs_control.add_tab(False)
    tabs_control.close_tab(1)

    assert tabs_control.position(2) == 1
    assert tabs_control.position(1) is None
    assert tabs_control.contains(2)
    assert not tabs_control.contains(1)
    assert list(tabs_control) == [Tab(0), Tab(2)]


def test_close_unknown_tab_keeps_tabs():
    tabs_control = TabsControl.with_capacity(3)
    tabs_control.add_tab(False)
    tabs_control.close_tab(7)
    assert len(tabs_control) == 2


def test_invalid_capacity_changes():
    with pytest.raises(ValueError):
        TabsControl.with_capacity(0)
    with pytest.raises(ValueError):
        TabsControl().increase_capacity(-1)