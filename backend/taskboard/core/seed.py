"""Demo Seed — the starter boards and tasks a fresh process serves by default.

Invariants:
    - Seeded records satisfy the board/task relationship in both directions
    - Counters start past every seeded id (board id 2 is intentionally absent)
"""

from datetime import datetime, timezone

from taskboard.core.domain_types import BoardId, TaskId
from taskboard.core.records import Board, Task
from taskboard.core.task_board import TaskBoard


_BOARDS = [
    ("0", "Planned", "Everything that's on the todo list."),
    ("1", "Ongoing", "Currently in progress."),
    ("3", "Done", "Completed tasks."),
]

_TASKS = [
    ("0", "0", "Another task", datetime(2021, 1, 21, 15, 48, tzinfo=timezone.utc), False),
    ("1", "0", "Prepare exam draft", datetime(2021, 1, 21, 16, 48, tzinfo=timezone.utc), False),
    ("2", "0", "Discuss exam organisation", datetime(2021, 1, 21, 14, 48, tzinfo=timezone.utc), False),
    ("3", "3", "Prepare assignment 2", datetime(2021, 1, 10, 16, 0, tzinfo=timezone.utc), True),
]

_NEXT_ID = 4


def seed_demo_data(state: TaskBoard) -> None:
    """Replace the state's contents with the demo boards and tasks."""
    with state.lock:
        state.reset()
        for board_id, name, description in _BOARDS:
            state.boards[BoardId(board_id)] = Board(
                id=BoardId(board_id), name=name, description=description,
            )
        for task_id, board_id, task_name, created, archived in _TASKS:
            state.tasks[TaskId(task_id)] = Task(
                id=TaskId(task_id), board_id=BoardId(board_id),
                task_name=task_name, date_created=created, archived=archived,
            )
            state.boards[BoardId(board_id)].add_task(TaskId(task_id))
        state.next_board_id = _NEXT_ID
        state.next_task_id = _NEXT_ID
