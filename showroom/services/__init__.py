"""Services Layer — parameter assembly and result shaping around stored procedures.

Invariants:
    - One service class per resource, constructed with a ProcedureGateway
    - Services never translate StoreRuleViolation; endpoint handlers own that mapping
"""
