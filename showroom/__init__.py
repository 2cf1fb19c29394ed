"""Showroom — public vehicle catalog and contact API over stored procedures.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
