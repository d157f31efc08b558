"""Pydantic Schemas — response models for API endpoints.

Invariants:
    - Schemas describe the public JSON contract, not domain internals
"""
