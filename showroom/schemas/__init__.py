"""Pydantic Schemas — request validation and response projections for the API.

Invariants:
    - Request schemas validate at the system boundary, before any store call
    - Response schemas mirror the store's result-set columns (camelCase on the wire)
    - Domain enums from core/ used for enumerated fields
"""
