from __future__ import annotations

import pytest

from snapdraft.history import UndoRedoManager


def test_undo_redo_walks_snapshots() -> None:
    history: UndoRedoManager[tuple] = UndoRedoManager()
    for state in ((), ("a",), ("a", "b")):
        history.save_state(state)
    assert history.undo() == ("a",)
    assert history.undo() == ()
    assert history.undo() is None
    assert history.redo() == ("a",)
    assert history.current == ("a",)


def test_duplicate_state_is_ignored_and_new_state_clears_redo() -> None:
    history: UndoRedoManager[str] = UndoRedoManager()
    history.save_state("x")
    history.save_state("x")
    assert history.history_size() == 1
    history.save_state("y")
    history.undo()
    assert history.can_redo()
    history.save_state("z")
    assert not history.can_redo()


def test_limit_evicts_oldest_and_can_shrink() -> None:
    history: UndoRedoManager[int] = UndoRedoManager(max_history=3)
    for value in range(5):
        history.save_state(value)
    assert history.history_size() == 3
    history.set_max_history_size(2)
    assert history.history_size() == 2
    assert history.undo() == 3
    assert not history.can_undo()
    history.clear()
    assert history.current is None
    with pytest.raises(ValueError):
        UndoRedoManager(max_history=0)
