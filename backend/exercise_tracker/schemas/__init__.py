"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (user input, API responses)
    - Responses expose the user id as `_id`

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
