"""Board Routes — CRUD over the board collection.

Invariants:
    - Routes never validate or mutate directly: everything goes through BoardStore
    - Store errors propagate to the global TaskBoardError handler
    - A missing body is treated as an empty object (fields then fail as "required")

Design Decisions:
    - DELETE on the collection is the full-store reset (boards, tasks, counters)
"""

from fastapi import APIRouter, Depends, status

from taskboard.api.routes.fallback import READ_METHODS
from taskboard.infrastructure.memory_store import StoreManager, get_store
from taskboard.schemas.board import (
    BoardInput, BoardSummary, BoardResponse, ExpandedBoardResponse,
)

router = APIRouter(prefix="/api/v1/boards", tags=["boards"])


def _fields(body: BoardInput | None) -> dict:
    return body.model_dump(exclude_unset=True) if body else {}


@router.api_route("", methods=READ_METHODS, response_model=list[BoardSummary])
async def list_boards(store: StoreManager = Depends(get_store)):
    """List every board without its task set."""
    return store.boards.list_all()


@router.api_route("/{board_id}", methods=READ_METHODS, response_model=BoardResponse)
async def get_board(board_id: str, store: StoreManager = Depends(get_store)):
    """Fetch one board with its task ids."""
    return store.boards.get(board_id)


@router.post(
    "", response_model=BoardResponse, status_code=status.HTTP_201_CREATED,
)
async def create_board(
    body: BoardInput | None = None, store: StoreManager = Depends(get_store),
):
    """Create an empty board."""
    return store.boards.create(_fields(body))


@router.put("/{board_id}", response_model=BoardResponse)
async def update_board(
    board_id: str,
    body: BoardInput | None = None,
    store: StoreManager = Depends(get_store),
):
    """Replace name and description. Blocked while unarchived tasks remain."""
    return store.boards.update(board_id, _fields(body))


@router.delete("/{board_id}", response_model=ExpandedBoardResponse)
async def delete_board(board_id: str, store: StoreManager = Depends(get_store)):
    """Delete a board whose tasks are all archived. Returns it with tasks expanded."""
    return store.boards.delete(board_id)


@router.delete("", response_model=list[ExpandedBoardResponse])
async def delete_all_boards(store: StoreManager = Depends(get_store)):
    """Reset everything. Returns every board (tasks expanded) as it was before."""
    return store.boards.delete_all()
