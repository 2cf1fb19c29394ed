"""Core Layer — pure contract logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or client/
    - All functions are pure and deterministic
"""
