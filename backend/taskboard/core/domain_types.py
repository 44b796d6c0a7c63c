"""Domain Types — identifier wrappers, sort keys and field names shared across the core.

Invariants:
    - BoardId and TaskId are opaque strings derived from monotonic counters
    - TaskSortKey lists the only fields a task listing may be ordered by
    - Field names match the public JSON keys exactly (camelCase)

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

BoardId = NewType("BoardId", str)
TaskId = NewType("TaskId", str)


# ─── Enums ───────────────────────────────────────────────────────

class TaskSortKey(str, Enum):
    """Fields a board's task listing can be sorted by (ascending)."""
    TASK_NAME = "taskName"
    DATE_CREATED = "dateCreated"
    ID = "id"


class TaskField(str, Enum):
    """Fields a task PATCH recognizes, in validation order."""
    TASK_NAME = "taskName"
    ARCHIVED = "archived"
    BOARD_ID = "boardId"


# ─── Constants ───────────────────────────────────────────────────

INITIAL_ID = 0
