"""Pydantic Schemas — request/response records for API endpoints.

Design Decisions:
    - Separate from the store: schemas are API contracts, documents are persistence
"""
