"""Pydantic Schemas — request/response records for API endpoints.

Invariants:
    - Wire names are camelCase, Python attributes snake_case (alias generator)
    - Response records convert from core dataclasses via from_attributes
    - Unknown request fields are ignored, never rejected
"""
