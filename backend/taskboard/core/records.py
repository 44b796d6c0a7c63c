"""Records & Projections — board/task records and their external JSON shape.

Invariants:
    - Task.date_created is a timezone-aware UTC datetime, immutable after creation
    - A task projection exposes dateCreated as integer milliseconds since epoch
    - A board projection exposes tasks as an ordered list of task ids, or as
      full task projections in expanded mode
    - Board.tasks is an insertion-ordered set (dict keys, values unused)

Design Decisions:
    - Plain dataclasses, no IO: projections are pure functions over records
    - Projection functions live beside the records, not on the stores, so the
      delete-all snapshot can reuse them before the stores are cleared
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone

from taskboard.core.domain_types import BoardId, TaskId


@dataclass
class Task:
    """One card. boardId is the back-reference to its owning board."""
    id: TaskId
    board_id: BoardId
    task_name: str
    date_created: datetime
    archived: bool = False


@dataclass
class Board:
    """One column. tasks holds the ids of the tasks it owns."""
    id: BoardId
    name: str
    description: str
    tasks: dict[TaskId, None] = field(default_factory=dict)

    def add_task(self, task_id: TaskId) -> None:
        self.tasks[task_id] = None

    def remove_task(self, task_id: TaskId) -> None:
        self.tasks.pop(task_id, None)

    def has_task(self, task_id: TaskId) -> bool:
        return task_id in self.tasks


_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MS = timedelta(milliseconds=1)


def to_epoch_millis(moment: datetime) -> int:
    """Milliseconds since the Unix epoch, floored to an integer."""
    return (moment - _EPOCH) // _ONE_MS


def task_to_dict(task: Task) -> dict:
    """Project a task to its public JSON shape."""
    return {
        "id": task.id,
        "boardId": task.board_id,
        "taskName": task.task_name,
        "dateCreated": to_epoch_millis(task.date_created),
        "archived": task.archived,
    }


def board_summary(board: Board) -> dict:
    """Project a board without its task membership (used by list-all)."""
    return {
        "id": board.id,
        "name": board.name,
        "description": board.description,
    }


def board_to_dict(
    board: Board, tasks: dict[TaskId, Task] | None = None,
) -> dict:
    """Project a board with its task ids, or expanded tasks when `tasks` is given."""
    data = board_summary(board)
    if tasks is None:
        data["tasks"] = list(board.tasks)
    else:
        data["tasks"] = [task_to_dict(tasks[tid]) for tid in board.tasks]
    return data
