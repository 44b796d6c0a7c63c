"""Fallback Route — every unmatched method/path answers 405.

Invariants:
    - Registered LAST in main.py so real routes always match first
    - Also catches supported paths hit with an unsupported method
    - HEAD and trailing-slash variants of real routes never land here
      (READ_METHODS on GET routes, TrailingSlashMiddleware in main.py)
"""

from fastapi import APIRouter

from taskboard.core.errors import OperationNotSupportedError

router = APIRouter(tags=["fallback"])

ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"]

# Every readable route answers HEAD too
READ_METHODS = ["GET", "HEAD"]


@router.api_route(
    "/{path:path}", methods=ALL_METHODS, include_in_schema=False,
)
async def operation_not_supported(path: str):
    raise OperationNotSupportedError()
