"""Pydantic Schemas — tool input validation and result serialization.

Invariants:
    - *Input schemas validate at the tool boundary, before any store access
    - *Out schemas read ORM rows (from_attributes) and dump to JSON-safe dicts
    - Enum fields use domain types from core/

Design Decisions:
    - Separate from models: schemas are tool contracts, models are persistence
"""
