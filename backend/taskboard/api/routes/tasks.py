"""Task Routes — tasks nested under their owning board.

Invariants:
    - Every route resolves the board first; task routes then resolve the task
      and its membership (three distinct 404 messages)
    - ?sort= accepts taskName, dateCreated or id only
"""

from fastapi import APIRouter, Depends, Query, status

from taskboard.api.routes.fallback import READ_METHODS
from taskboard.infrastructure.memory_store import StoreManager, get_store
from taskboard.schemas.task import TaskCreateInput, TaskPatchInput, TaskResponse

router = APIRouter(prefix="/api/v1/boards/{board_id}/tasks", tags=["tasks"])


@router.api_route("", methods=READ_METHODS, response_model=list[TaskResponse])
async def list_tasks(
    board_id: str,
    sort: str | None = Query(None),
    store: StoreManager = Depends(get_store),
):
    """List a board's tasks, optionally sorted ascending by one field."""
    return store.tasks.list_for_board(board_id, sort)


@router.api_route("/{task_id}", methods=READ_METHODS, response_model=TaskResponse)
async def get_task(
    board_id: str, task_id: str, store: StoreManager = Depends(get_store),
):
    """Fetch one task after board, task and membership checks."""
    return store.tasks.get(board_id, task_id)


@router.post(
    "", response_model=TaskResponse, status_code=status.HTTP_201_CREATED,
)
async def create_task(
    board_id: str,
    body: TaskCreateInput | None = None,
    store: StoreManager = Depends(get_store),
):
    """Create an unarchived task on the board."""
    fields = body.model_dump(exclude_unset=True) if body else {}
    return store.tasks.create(board_id, fields)


@router.delete("/{task_id}", response_model=TaskResponse)
async def delete_task(
    board_id: str, task_id: str, store: StoreManager = Depends(get_store),
):
    """Delete a task and drop it from its board."""
    return store.tasks.delete(board_id, task_id)


@router.patch("/{task_id}", response_model=TaskResponse)
async def patch_task(
    board_id: str,
    task_id: str,
    body: TaskPatchInput | None = None,
    store: StoreManager = Depends(get_store),
):
    """Partially update a task; a boardId moves it to that board."""
    fields = body.model_dump(exclude_unset=True) if body else {}
    return store.tasks.patch(board_id, task_id, fields)
