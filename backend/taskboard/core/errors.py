"""Error Hierarchy — typed, categorized exceptions for all task-board failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory) and http_status (int)
    - Errors are request-local: raised before any store mutation, never retried
    - to_response() produces the REST envelope {"message": ...}

Design Decisions:
    - Single hierarchy with TaskBoardError base: FastAPI global handler catches all (ADR: uniform error shape)
    - Three distinct NotFound classes: board missing, task missing, task not on board
      each carry their own message so clients can tell them apart
    - Unarchived-tasks conflict is reported as 400, matching the public API contract
"""

from enum import Enum


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    UNSUPPORTED = "unsupported"


class TaskBoardError(Exception):
    """Base exception for all task-board errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        http_status: int = 400,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the REST error body."""
        return {"message": self.message}


# ─── NotFound (404) ─────────────────────────────────────────────

class BoardNotFoundError(TaskBoardError):
    """Board id does not resolve."""
    def __init__(self, board_id: str):
        super().__init__(
            f"Board with id {board_id} does not exist.",
            "BOARD_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND, 404,
        )
        self.board_id = board_id


class TaskNotFoundError(TaskBoardError):
    """Task id is unknown system-wide."""
    def __init__(self, task_id: str):
        super().__init__(
            f"Task with id {task_id} does not exist.",
            "TASK_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND, 404,
        )
        self.task_id = task_id


class TaskNotOnBoardError(TaskBoardError):
    """Task exists but belongs to a different board."""
    def __init__(self, board_id: str, task_id: str):
        super().__init__(
            f"Board with id {board_id} has no task with id {task_id}.",
            "TASK_NOT_ON_BOARD", ErrorCategory.RESOURCE_NOT_FOUND, 404,
        )
        self.board_id = board_id
        self.task_id = task_id


# ─── InvalidInput (400) ─────────────────────────────────────────

class InvalidInputError(TaskBoardError):
    """Request body or query failed validation."""
    def __init__(self, message: str, field: str | None = None):
        super().__init__(
            message, "INVALID_INPUT", ErrorCategory.VALIDATION, 400,
        )
        self.field = field


# ─── Conflict (reported as 400) ─────────────────────────────────

class UnarchivedTasksError(TaskBoardError):
    """Board update/delete blocked while it still holds unarchived tasks."""
    def __init__(self, board_id: str):
        super().__init__(
            f"Board with id {board_id} has unarchived tasks.",
            "UNARCHIVED_TASKS", ErrorCategory.CONFLICT, 400,
        )
        self.board_id = board_id


# ─── Unsupported (405) ──────────────────────────────────────────

class OperationNotSupportedError(TaskBoardError):
    """No route matches the method/path pair."""
    def __init__(self):
        super().__init__(
            "Operation not supported.",
            "OPERATION_NOT_SUPPORTED", ErrorCategory.UNSUPPORTED, 405,
        )
