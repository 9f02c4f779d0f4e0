"""Bounded undo/redo over immutable scene snapshots."""
from __future__ import annotations

from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")

DEFAULT_HISTORY_LIMIT = 20


class UndoRedoManager(Generic[T]):
    """Snapshot history.

    The last entry of the undo stack is always the current state, so
    ``undo`` needs at least two entries to step back. Snapshots are stored
    as-is; callers hand in immutable values (the scene tuple).
    """

    def __init__(self, max_history: int = DEFAULT_HISTORY_LIMIT):
        if max_history < 1:
            raise ValueError("max_history must be at least 1")
        self._max_history = int(max_history)
        self._undo_stack: List[T] = []
        self._redo_stack: List[T] = []

    @property
    def max_history(self) -> int:
        return self._max_history

    @property
    def current(self) -> Optional[T]:
        return self._undo_stack[-1] if self._undo_stack else None

    def save_state(self, state: T) -> None:
        if self._undo_stack and self._undo_stack[-1] == state:
            return
        self._undo_stack.append(state)
        if len(self._undo_stack) > self._max_history:
            self._undo_stack.pop(0)
        self._redo_stack.clear()

    def undo(self) -> Optional[T]:
        if not self.can_undo():
            return None
        self._redo_stack.append(self._undo_stack.pop())
        return self._undo_stack[-1]

    def redo(self) -> Optional[T]:
        if not self.can_redo():
            return None
        state = self._redo_stack.pop()
        self._undo_stack.append(state)
        return state

    def can_undo(self) -> bool:
        return len(self._undo_stack) > 1

    def can_redo(self) -> bool:
        return bool(self._redo_stack)

    def history_size(self) -> int:
        return len(self._undo_stack)

    def clear(self) -> None:
        self._undo_stack.clear()
        self._redo_stack.clear()

    def set_max_history_size(self, size: int) -> None:
        if size < 1:
            raise ValueError("max_history must be at least 1")
        self._max_history = int(size)
        while len(self._undo_stack) > self._max_history:
            self._undo_stack.pop(0)


__all__ = ["DEFAULT_HISTORY_LIMIT", "UndoRedoManager"]
