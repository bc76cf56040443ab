"""Tests for the selection tracker"""

from todoedit.core.selection import SelectionTracker


def test_starts_empty():
    assert SelectionTracker().position is None


def test_moves_on_empty_store_never_select():
    """Test move_up()/move_down() are no-ops with no items"""
    selection = SelectionTracker()

    selection.move_up(0)
    assert selection.position is None
    selection.move_down(0)
    assert selection.position is None


def test_first_move_selects_top():
    """Test the first move in either direction selects position 0"""
    up = SelectionTracker()
    up.move_up(3)
    down = SelectionTracker()
    down.move_down(3)

    assert up.position == 0
    assert down.position == 0


def test_move_up_floors_at_zero():
    """Test move_up() at the top stays put"""
    selection = SelectionTracker()
    selection.move_down(3)
    selection.move_down(3)
    selection.move_up(3)
    assert selection.position == 0

    selection.move_up(3)
    assert selection.position == 0


def test_move_down_caps_at_last():
    """Test move_down() at the bottom stays put, no wraparound"""
    selection = SelectionTracker()
    for _ in range(5):
        selection.move_down(3)

    assert selection.position == 2


def test_select():
    """Test select() accepts only in-range positions"""
    selection = SelectionTracker()

    assert selection.select(1, 3)
    assert selection.position == 1
    assert not selection.select(3, 3)
    assert not selection.select(-1, 3)
    assert selection.position == 1


def test_reconcile_clears_out_of_range():
    """Test reconcile() after the store shrinks"""
    selection = SelectionTracker()
    selection.select(2, 3)

    selection.reconcile(3)
    assert selection.position == 2  # Still valid

    selection.reconcile(2)
    assert selection.position is None

    selection.select(0, 1)
    selection.reconcile(0)
    assert selection.position is None


def test_clear():
    selection = SelectionTracker()
    selection.select(0, 1)
    selection.clear()

    assert selection.position is None
