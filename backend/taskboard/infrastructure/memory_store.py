"""Memory Store Manager — process-scoped TaskBoard singleton and its FastAPI dependency.

Invariants:
    - One TaskBoard per process; both stores share it
    - get_store() fails loudly if startup never initialized the store
    - Tests swap the store via app.dependency_overrides[get_store]

Design Decisions:
    - Singleton store_manager initialized on startup: FastAPI lifespan manages lifecycle
      (ADR: no global import side effects)
    - State lost on restart: single-process uvicorn, no multi-worker
"""

import logging

from taskboard.core.board_store import BoardStore
from taskboard.core.seed import seed_demo_data
from taskboard.core.task_board import TaskBoard
from taskboard.core.task_store import TaskStore

logger = logging.getLogger(__name__)


class StoreManager:
    """Owns the TaskBoard and the two stores built over it."""

    def __init__(self, state: TaskBoard | None = None, seed: bool = False):
        self.state = state or TaskBoard()
        if seed:
            seed_demo_data(self.state)
        self.boards = BoardStore(self.state)
        self.tasks = TaskStore(self.state)

    def health_check(self) -> dict:
        """Record counts for readiness probes."""
        with self.state.lock:
            return {
                "boards": len(self.state.boards),
                "tasks": len(self.state.tasks),
            }


# Singleton (initialized on startup)
store_manager: StoreManager | None = None


def init_store(seed: bool = False) -> StoreManager:
    global store_manager
    store_manager = StoreManager(seed=seed)
    counts = store_manager.health_check()
    logger.info(
        f"Store initialized ({counts['boards']} board(s), {counts['tasks']} task(s))",
    )
    return store_manager


def get_store() -> StoreManager:
    """FastAPI dependency for the in-memory store."""
    if not store_manager:
        raise RuntimeError("Store not initialized")
    return store_manager
