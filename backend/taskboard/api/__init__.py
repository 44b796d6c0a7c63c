"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return JSON; errors share the {"message": ...} body

Design Decisions:
    - Thin routes delegate to the core stores
"""
