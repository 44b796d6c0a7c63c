"""Task Store — create/read/patch/delete/list for tasks over a shared TaskBoard.

Invariants:
    - Task ids come from their own strictly increasing counter, never reused
    - get/delete/patch resolve board, then task, then membership (three 404s)
    - A task's board_id and its owning board's task set change together
    - PATCH is all-or-nothing: every present field is validated before any is applied
    - Listing sorts ascending and stably; unsorted listing keeps insertion order

Design Decisions:
    - Sorting runs on projections so dateCreated compares as integer millis,
      exactly what clients see
"""

import logging
from typing import Any, Mapping

from taskboard.core.domain_types import TaskField
from taskboard.core.records import Task, task_to_dict
from taskboard.core.task_board import TaskBoard
from taskboard.core.validation import (
    validate_new_task, validate_task_patch, validate_sort_key,
)

logger = logging.getLogger(__name__)


class TaskStore:
    """Task operations over a TaskBoard."""

    def __init__(self, state: TaskBoard):
        self._state = state

    def create(self, board_id: str, fields: Mapping[str, Any]) -> dict:
        with self._state.lock:
            board = self._state.require_board(board_id)
            task_name = validate_new_task(fields)
            task = Task(
                id=self._state.allocate_task_id(),
                board_id=board.id,
                task_name=task_name,
                date_created=self._state.clock(),
            )
            self._state.tasks[task.id] = task
            board.add_task(task.id)
            logger.info(
                "Task created", extra={"board_id": board.id, "task_id": task.id},
            )
            return task_to_dict(task)

    def get(self, board_id: str, task_id: str) -> dict:
        with self._state.lock:
            _, task = self._state.resolve_task(board_id, task_id)
            return task_to_dict(task)

    def delete(self, board_id: str, task_id: str) -> dict:
        with self._state.lock:
            board, task = self._state.resolve_task(board_id, task_id)
            snapshot = task_to_dict(task)
            del self._state.tasks[task.id]
            board.remove_task(task.id)
            logger.info(
                "Task deleted", extra={"board_id": board_id, "task_id": task_id},
            )
            return snapshot

    def patch(
        self, board_id: str, task_id: str, fields: Mapping[str, Any],
    ) -> dict:
        with self._state.lock:
            board, task = self._state.resolve_task(board_id, task_id)
            changes = validate_task_patch(fields, self._state.has_board)

            if TaskField.TASK_NAME in changes:
                task.task_name = changes[TaskField.TASK_NAME]
            if TaskField.ARCHIVED in changes:
                task.archived = changes[TaskField.ARCHIVED]
            if TaskField.BOARD_ID in changes:
                self._move(task, board.id, changes[TaskField.BOARD_ID])

            logger.info(
                f"Task patched ({', '.join(f.value for f in changes)})",
                extra={"board_id": task.board_id, "task_id": task_id},
            )
            return task_to_dict(task)

    def list_for_board(self, board_id: str, sort: str | None = None) -> list[dict]:
        with self._state.lock:
            board = self._state.require_board(board_id)
            sort_key = validate_sort_key(sort)
            projected = [task_to_dict(self._state.tasks[tid]) for tid in board.tasks]
            if sort_key is not None:
                projected.sort(key=lambda t: t[sort_key.value])
            return projected

    def _move(self, task: Task, old_board_id: str, new_board_id: str) -> None:
        """Move membership and back-reference together."""
        self._state.boards[old_board_id].remove_task(task.id)
        self._state.boards[new_board_id].add_task(task.id)
        task.board_id = new_board_id
        logger.info(
            f"Task moved from board {old_board_id}",
            extra={"board_id": new_board_id, "task_id": task.id},
        )
