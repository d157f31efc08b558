"""Infrastructure Layer — external library wrappers and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from api/ or services/
"""
