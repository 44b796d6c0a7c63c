"""Input Validation — pure presence/type checks for request payloads.

Invariants:
    - Every check runs before any store mutation; first failure wins
    - Payloads are mappings of the fields the client actually sent
      (an explicit null is present and fails its type check)
    - Unknown fields are ignored
    - Task PATCH fields are validated in order: taskName, archived, boardId

Design Decisions:
    - Raise InvalidInputError rather than returning error dicts: routes stay
      free of branching, the global handler renders the message
    - Board existence for a PATCH boardId is a predicate argument so this
      module never touches the store
"""

from typing import Any, Callable, Mapping

from taskboard.core.domain_types import TaskField, TaskSortKey
from taskboard.core.errors import BoardNotFoundError, InvalidInputError


BOARD_FIELDS_REQUIRED = (
    "The name and description fields are required in the request body."
)
BOARD_FIELDS_NOT_STRINGS = "The name and description fields must be strings."
BOARD_NAME_EMPTY = "The name field cannot be empty."
TASK_NAME_REQUIRED = "The taskName field is required in the request body."
TASK_NAME_NOT_STRING = "The taskName field must be a string."
TASK_NAME_EMPTY = "The taskName field cannot be empty."
ARCHIVED_NOT_BOOLEAN = "The archived field must be a boolean."
BOARD_ID_NOT_STRING = "The boardId field must be a string."
PATCH_EMPTY = "At least 1 field must be provided."


def validate_board_fields(fields: Mapping[str, Any]) -> tuple[str, str]:
    """Validate a board create/update body. Returns (name, description)."""
    if "name" not in fields or "description" not in fields:
        raise InvalidInputError(BOARD_FIELDS_REQUIRED)
    name, description = fields["name"], fields["description"]
    if not isinstance(name, str) or not isinstance(description, str):
        raise InvalidInputError(BOARD_FIELDS_NOT_STRINGS)
    if name == "":
        raise InvalidInputError(BOARD_NAME_EMPTY, field="name")
    return name, description


def validate_task_name(value: Any) -> str:
    if not isinstance(value, str):
        raise InvalidInputError(TASK_NAME_NOT_STRING, field="taskName")
    if value == "":
        raise InvalidInputError(TASK_NAME_EMPTY, field="taskName")
    return value


def validate_new_task(fields: Mapping[str, Any]) -> str:
    """Validate a task create body. Returns the taskName."""
    if "taskName" not in fields:
        raise InvalidInputError(TASK_NAME_REQUIRED, field="taskName")
    return validate_task_name(fields["taskName"])


def validate_task_patch(
    fields: Mapping[str, Any], board_exists: Callable[[str], bool],
) -> dict[TaskField, Any]:
    """Validate a task PATCH body left to right.

    Returns the validated changes keyed by TaskField, in validation order.
    Raises on the first bad field, so callers apply nothing unless every
    present field passed.
    """
    present = [f for f in TaskField if f.value in fields]
    if not present:
        raise InvalidInputError(PATCH_EMPTY)

    changes: dict[TaskField, Any] = {}
    for task_field in present:
        value = fields[task_field.value]
        if task_field is TaskField.TASK_NAME:
            changes[task_field] = validate_task_name(value)
        elif task_field is TaskField.ARCHIVED:
            if not isinstance(value, bool):
                raise InvalidInputError(ARCHIVED_NOT_BOOLEAN, field="archived")
            changes[task_field] = value
        elif task_field is TaskField.BOARD_ID:
            if not isinstance(value, str):
                raise InvalidInputError(BOARD_ID_NOT_STRING, field="boardId")
            if not board_exists(value):
                raise BoardNotFoundError(value)
            changes[task_field] = value
    return changes


def validate_sort_key(sort: str | None) -> TaskSortKey | None:
    """Map a ?sort= value to a TaskSortKey. None means unsorted."""
    if sort is None:
        return None
    try:
        return TaskSortKey(sort)
    except ValueError:
        raise InvalidInputError(
            f"Can only sort by taskName, dateCreated, or id. Not {sort}.",
            field="sort",
        ) from None
