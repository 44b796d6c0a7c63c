"""Board Store — create/read/update/delete for boards over a shared TaskBoard.

Invariants:
    - Board ids come from a strictly increasing counter, never reused
    - update/delete require the board to exist and every task on it archived
    - update touches name/description only; id and task set are immutable here
    - delete does not cascade: archived tasks stay in the task container
    - delete_all snapshots every board (tasks expanded) before clearing

Design Decisions:
    - Methods return projections (dicts), never live records, so callers
      cannot mutate store state behind the lock
"""

import logging
from typing import Any, Mapping

from taskboard.core.records import Board, board_summary, board_to_dict
from taskboard.core.task_board import TaskBoard
from taskboard.core.errors import UnarchivedTasksError
from taskboard.core.validation import validate_board_fields

logger = logging.getLogger(__name__)


class BoardStore:
    """Board operations over a TaskBoard."""

    def __init__(self, state: TaskBoard):
        self._state = state

    def create(self, fields: Mapping[str, Any]) -> dict:
        with self._state.lock:
            name, description = validate_board_fields(fields)
            board = Board(
                id=self._state.allocate_board_id(),
                name=name, description=description,
            )
            self._state.boards[board.id] = board
            logger.info("Board created", extra={"board_id": board.id})
            return board_to_dict(board)

    def exists(self, board_id: str) -> bool:
        return self._state.has_board(board_id)

    def get(self, board_id: str) -> dict:
        with self._state.lock:
            return board_to_dict(self._state.require_board(board_id))

    def update(self, board_id: str, fields: Mapping[str, Any]) -> dict:
        with self._state.lock:
            board = self._state.require_board(board_id)
            name, description = validate_board_fields(fields)
            self._require_all_archived(board)
            board.name = name
            board.description = description
            logger.info("Board updated", extra={"board_id": board_id})
            return board_to_dict(board)

    def delete(self, board_id: str) -> dict:
        with self._state.lock:
            board = self._state.require_board(board_id)
            self._require_all_archived(board)
            snapshot = board_to_dict(board, self._state.tasks)
            del self._state.boards[board_id]
            logger.info(
                f"Board deleted ({len(board.tasks)} archived task(s) left in store)",
                extra={"board_id": board_id},
            )
            return snapshot

    def list_all(self) -> list[dict]:
        with self._state.lock:
            return [board_summary(b) for b in self._state.boards.values()]

    def delete_all(self) -> list[dict]:
        """Reset both stores and both counters. Returns the pre-reset snapshot."""
        with self._state.lock:
            snapshot = [
                board_to_dict(b, self._state.tasks)
                for b in self._state.boards.values()
            ]
            self._state.reset()
            logger.warning(f"All boards deleted ({len(snapshot)} board(s))")
            return snapshot

    def _require_all_archived(self, board: Board) -> None:
        if not self._state.all_archived(board):
            raise UnarchivedTasksError(board.id)
