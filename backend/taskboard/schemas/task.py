"""Task Schemas — request bodies and response shape for board tasks.

Invariants:
    - dateCreated is integer milliseconds since epoch, never a date string
    - Request fields are untyped (Any); core.validation owns the type rules
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class TaskCreateInput(BaseModel):
    model_config = ConfigDict(extra="ignore")

    taskName: Any = None


class TaskPatchInput(BaseModel):
    """Partial task update. Any subset of the three fields; others ignored."""
    model_config = ConfigDict(extra="ignore")

    taskName: Any = None
    archived: Any = None
    boardId: Any = None


class TaskResponse(BaseModel):
    id: str
    boardId: str
    taskName: str
    dateCreated: int
    archived: bool
