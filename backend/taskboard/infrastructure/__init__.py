"""Infrastructure Layer — process-scoped state holders and cross-cutting concerns.

Invariants:
    - Infrastructure wires core objects together but adds no domain rules

Design Decisions:
    - Singletons created in the lifespan, exposed through FastAPI dependencies
"""
