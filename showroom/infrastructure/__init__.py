"""Infrastructure Layer — the store connection pool and cross-cutting concerns.

Invariants:
    - Infrastructure imports core/ only for errors, signals and protocols
    - Driver errors carrying the reserved error number are mapped to StoreRuleViolation
"""
