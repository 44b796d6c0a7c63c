"""Task Board State — the owned store object shared by BoardStore and TaskStore.

Invariants:
    - boards and tasks are the two halves of one bidirectional relationship:
      task.board_id == b.id  <=>  task.id in b.tasks (except archived tasks
      orphaned by a single-board delete)
    - Id counters only ever increase; reset() is the only way back to zero
    - Every mutation (counter increment included) runs under `lock`

Design Decisions:
    - One object holds both containers and both counters so a move or a
      delete-all touches a single critical section
    - RLock: store operations call each other's resolution helpers while
      already holding the lock
    - `clock` injectable so tests can pin dateCreated values
"""

import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable

from taskboard.core.domain_types import BoardId, TaskId, INITIAL_ID
from taskboard.core.errors import (
    BoardNotFoundError, TaskNotFoundError, TaskNotOnBoardError,
)
from taskboard.core.records import Board, Task


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class TaskBoard:
    """In-memory boards + tasks with their id counters."""

    boards: dict[BoardId, Board] = field(default_factory=dict)
    tasks: dict[TaskId, Task] = field(default_factory=dict)
    next_board_id: int = INITIAL_ID
    next_task_id: int = INITIAL_ID
    clock: Callable[[], datetime] = field(default=utc_now, repr=False)
    lock: threading.RLock = field(
        default_factory=threading.RLock, repr=False, compare=False,
    )

    # --- Identifier sequences --------------------------------------------------

    def allocate_board_id(self) -> BoardId:
        board_id = BoardId(str(self.next_board_id))
        self.next_board_id += 1
        return board_id

    def allocate_task_id(self) -> TaskId:
        task_id = TaskId(str(self.next_task_id))
        self.next_task_id += 1
        return task_id

    # --- Resolution ------------------------------------------------------------

    def has_board(self, board_id: str) -> bool:
        return board_id in self.boards

    def require_board(self, board_id: str) -> Board:
        """Get board or raise BoardNotFoundError."""
        board = self.boards.get(board_id)
        if board is None:
            raise BoardNotFoundError(board_id)
        return board

    def resolve_task(self, board_id: str, task_id: str) -> tuple[Board, Task]:
        """Three-stage lookup: board exists, task exists, task is on the board."""
        board = self.require_board(board_id)
        task = self.tasks.get(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        if not board.has_task(task.id):
            raise TaskNotOnBoardError(board_id, task_id)
        return board, task

    def all_archived(self, board: Board) -> bool:
        """True when every task on the board is archived (vacuously for none)."""
        return all(self.tasks[tid].archived for tid in board.tasks)

    # --- Lifecycle -------------------------------------------------------------

    def reset(self) -> None:
        """Clear both containers and both counters."""
        self.boards = {}
        self.tasks = {}
        self.next_board_id = INITIAL_ID
        self.next_task_id = INITIAL_ID
