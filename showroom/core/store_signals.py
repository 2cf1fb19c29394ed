"""Store Signals — the reserved error-number convention raised by stored procedures.

Invariants:
    - Only error number 51000 is a domain signal; every other error is unclassified
    - The message "vehicleNotFound" is the single secondary discriminant
    - No other message is interpreted — anything else under 51000 is BUSINESS_RULE

Design Decisions:
    - Tagged variant (StoreSignal.kind) decided once at the store boundary;
      endpoint handlers map kinds to HTTP, never re-parse driver text
"""

import re
from dataclasses import dataclass
from enum import Enum

RESERVED_ERROR_NUMBER = 51000
VEHICLE_NOT_FOUND_MESSAGE = "vehicleNotFound"

# ODBC text: "[42000] [Microsoft][ODBC Driver 18 for SQL Server][SQL Server]vehicleNotFound (51000) (SQLExecDirectW)"
# The number is the last parenthesised integer; the message may contain its own
_ODBC_MESSAGE = re.compile(
    r"\[SQL Server\](?P<message>.*)\s*\((?P<number>\d+)\)\s*(?:\(SQL\w+\)|$)"
)


class StoreSignalKind(str, Enum):
    VEHICLE_NOT_FOUND = "vehicle_not_found"
    BUSINESS_RULE = "business_rule"


@dataclass(frozen=True)
class StoreSignal:
    """A classified domain failure reported by the store."""
    kind: StoreSignalKind
    message: str
    number: int = RESERVED_ERROR_NUMBER


class StoreRuleViolation(Exception):
    """Raised by the data access shim when a procedure reports a StoreSignal."""

    def __init__(self, signal: StoreSignal):
        super().__init__(signal.message)
        self.signal = signal


def _extract_number_and_message(exc: BaseException) -> tuple[int, str] | None:
    number = getattr(exc, "number", None)
    if isinstance(number, int):
        return number, str(getattr(exc, "message", None) or exc)
    for arg in exc.args:
        if not isinstance(arg, str):
            continue
        match = _ODBC_MESSAGE.search(arg)
        if match:
            return int(match.group("number")), match.group("message").strip()
    return None


def classify_store_error(exc: BaseException) -> StoreSignal | None:
    """Return the StoreSignal carried by a driver error, or None if unclassified."""
    extracted = _extract_number_and_message(exc)
    if extracted is None:
        return None
    number, message = extracted
    if number != RESERVED_ERROR_NUMBER:
        return None
    kind = (
        StoreSignalKind.VEHICLE_NOT_FOUND
        if message == VEHICLE_NOT_FOUND_MESSAGE
        else StoreSignalKind.BUSINESS_RULE
    )
    return StoreSignal(kind=kind, message=message, number=number)
