"""Core Layer — pure domain logic, no IO, no async, no HTTP.

Invariants:
    - No module in core/ imports from api/, schemas/ or infrastructure/
    - All validation happens here, before any store mutation

Design Decisions:
    - Functional core separated from imperative shell: routes only translate
      HTTP to store calls and back
"""
