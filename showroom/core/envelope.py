"""Response Envelope — the uniform JSON wrapper returned by every endpoint.

Invariants:
    - Success:  {"success": true, "data": ..., "meta"?: {...}}
    - Failure:  {"success": false, "error": str, "code": str, "details"?: [...]}
    - Optional keys are omitted, never sent as null
"""

from typing import Any

from pydantic import BaseModel


def success_response(data: Any, meta: dict | None = None) -> dict:
    """Wrap a payload in the success envelope. Pydantic models are dumped to JSON types."""
    if isinstance(data, BaseModel):
        data = data.model_dump(mode="json")
    envelope: dict[str, Any] = {"success": True, "data": data}
    if meta is not None:
        envelope["meta"] = meta
    return envelope


def error_response(error: str, code: str, details: list | None = None) -> dict:
    """Build the failure envelope."""
    envelope: dict[str, Any] = {"success": False, "error": error, "code": code}
    if details is not None:
        envelope["details"] = details
    return envelope
