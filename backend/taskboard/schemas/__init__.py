"""Pydantic Schemas — request/response shapes for API endpoints.

Invariants:
    - Schemas describe the wire format (camelCase keys) at the system boundary

Design Decisions:
    - Separate from core records: schemas are API contracts, records are state
"""
