"""Board Schemas — request body and response shapes for /api/v1/boards.

Invariants:
    - BoardInput fields are untyped (Any): presence/type checks belong to
      core.validation so the API reports its own messages
    - model_dump(exclude_unset=True) yields exactly the fields the client sent
    - Unknown body fields are ignored

Design Decisions:
    - Separate summary/plain/expanded response models: list-all hides the task
      set, delete endpoints expand it
"""

from typing import Any

from pydantic import BaseModel, ConfigDict

from taskboard.schemas.task import TaskResponse


class BoardInput(BaseModel):
    """Board create/update body (PUT replaces both fields)."""
    model_config = ConfigDict(extra="ignore")

    name: Any = None
    description: Any = None


class BoardSummary(BaseModel):
    """Board without its task membership."""
    id: str
    name: str
    description: str


class BoardResponse(BoardSummary):
    """Board with the ids of its tasks, in insertion order."""
    tasks: list[str]


class ExpandedBoardResponse(BoardSummary):
    """Board with each task id replaced by the full task."""
    tasks: list[TaskResponse]
