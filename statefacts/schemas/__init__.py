"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (request bodies, API responses)
    - Payload failures surface as InvalidPayloadError, never raw pydantic errors

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
