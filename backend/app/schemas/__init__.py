"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas check types and lengths only; blank/missing title and author are
      left to the core validation gate so the error shape is the same everywhere

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
