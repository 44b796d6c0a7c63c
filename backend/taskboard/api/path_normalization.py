"""Path Normalization — ASGI middleware that ignores one trailing slash.

Invariants:
    - "/api/v1/boards/" routes exactly like "/api/v1/boards"
    - The root path "/" is left untouched
    - Runs before routing, so the 405 fallback never sees a slash-suffixed
      alias of a real route
"""

from starlette.types import ASGIApp, Receive, Scope, Send


class TrailingSlashMiddleware:
    """Strip trailing slashes from http request paths before routing."""

    def __init__(self, app: ASGIApp):
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http":
            path = scope["path"]
            if len(path) > 1 and path.endswith("/"):
                scope = dict(scope, path=path.rstrip("/") or "/")
        await self.app(scope, receive, send)
