"""Records & Projections — pure tests for the public JSON shapes.

Tests cover:
    - dateCreated projected as integer epoch milliseconds
    - Board projection keeps task ids in insertion order
    - Expanded projection replaces ids with task projections
    - Board membership behaves as an ordered set
"""

from datetime import datetime, timezone

from taskboard.core.records import (
    Board, Task, board_summary, board_to_dict, task_to_dict, to_epoch_millis,
)


def _task(task_id="0", board_id="0", name="T", archived=False) -> Task:
    return Task(
        id=task_id, board_id=board_id, task_name=name,
        date_created=datetime(2021, 1, 21, 15, 48, tzinfo=timezone.utc),
        archived=archived,
    )


def test_epoch_millis_of_known_date():
    moment = datetime(2021, 1, 21, 15, 48, tzinfo=timezone.utc)
    assert to_epoch_millis(moment) == 1611244080000


def test_epoch_millis_keeps_millisecond_precision():
    moment = datetime(1970, 1, 1, 0, 0, 1, 234_999, tzinfo=timezone.utc)
    assert to_epoch_millis(moment) == 1234


def test_task_projection_uses_camel_case_and_integer_date():
    data = task_to_dict(_task())
    assert data == {
        "id": "0",
        "boardId": "0",
        "taskName": "T",
        "dateCreated": 1611244080000,
        "archived": False,
    }
    assert isinstance(data["dateCreated"], int)


def test_board_summary_has_no_tasks_field():
    board = Board(id="1", name="Ongoing", description="")
    board.add_task("5")
    assert board_summary(board) == {"id": "1", "name": "Ongoing", "description": ""}


def test_board_projection_lists_task_ids_in_insertion_order():
    board = Board(id="0", name="B", description="d")
    for tid in ("3", "1", "2"):
        board.add_task(tid)
    assert board_to_dict(board)["tasks"] == ["3", "1", "2"]


def test_expanded_board_projection_inlines_tasks():
    board = Board(id="0", name="B", description="d")
    board.add_task("0")
    tasks = {"0": _task()}
    expanded = board_to_dict(board, tasks)
    assert expanded["tasks"] == [task_to_dict(tasks["0"])]


def test_board_membership_is_a_set():
    board = Board(id="0", name="B", description="d")
    board.add_task("0")
    board.add_task("0")
    assert list(board.tasks) == ["0"]
    board.remove_task("0")
    board.remove_task("0")
    assert not board.has_task("0")
