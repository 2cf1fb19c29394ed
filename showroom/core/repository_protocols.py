"""Boundary Protocols — contracts between the service layer and the store.

Invariants:
    - Services never import infrastructure/ — they receive a ProcedureGateway
    - A gateway call returns every result set that has columns, in order
    - Domain failures surface as StoreRuleViolation (core/store_signals.py)
"""

from typing import Any, Protocol

ResultSet = list[dict[str, Any]]


class ProcedureGateway(Protocol):
    """Contract for stored-procedure invocation — implemented by infrastructure."""
    async def call_procedure(
        self, procedure: str, params: dict[str, Any],
    ) -> list[ResultSet]: ...
