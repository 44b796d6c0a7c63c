"""Task Board Package — in-memory boards and tasks behind a JSON HTTP API.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
