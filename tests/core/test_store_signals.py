"""Store Signals — classification of driver errors by the reserved error number.

Tests:
    - ODBC-formatted 51000 errors classified; message extracted
    - "vehicleNotFound" is the only message mapped to VEHICLE_NOT_FOUND
    - Other error numbers and plain exceptions are unclassified (None)
    - Errors exposing a numeric `number` attribute are also understood
"""

from showroom.core.store_signals import (
    RESERVED_ERROR_NUMBER,
    StoreRuleViolation,
    StoreSignal,
    StoreSignalKind,
    classify_store_error,
)


class _OdbcError(Exception):
    """Stand-in for pyodbc.Error: args = (sqlstate, message)."""


def _odbc(message: str, number: int = 51000) -> _OdbcError:
    return _OdbcError(
        "42000",
        f"[42000] [Microsoft][ODBC Driver 18 for SQL Server][SQL Server]"
        f"{message} ({number}) (SQLExecDirectW)",
    )


class _NumberedError(Exception):
    def __init__(self, number, message):
        super().__init__(message)
        self.number = number
        self.message = message


def test_vehicle_not_found_signal():
    signal = classify_store_error(_odbc("vehicleNotFound"))
    assert signal == StoreSignal(
        StoreSignalKind.VEHICLE_NOT_FOUND, "vehicleNotFound", RESERVED_ERROR_NUMBER,
    )


def test_other_message_is_business_rule():
    signal = classify_store_error(_odbc("vehicleUnavailable"))
    assert signal.kind is StoreSignalKind.BUSINESS_RULE
    assert signal.message == "vehicleUnavailable"


def test_message_match_is_exact():
    signal = classify_store_error(_odbc("vehicleNotFoundOrSold"))
    assert signal.kind is StoreSignalKind.BUSINESS_RULE


def test_other_error_number_is_unclassified():
    assert classify_store_error(_odbc("Invalid column name 'x'.", 207)) is None


def test_plain_exception_is_unclassified():
    assert classify_store_error(RuntimeError("connection reset")) is None


def test_numbered_error_attribute():
    signal = classify_store_error(_NumberedError(51000, "vehicleNotFound"))
    assert signal.kind is StoreSignalKind.VEHICLE_NOT_FOUND


def test_numbered_error_other_number():
    assert classify_store_error(_NumberedError(2627, "duplicate key")) is None


def test_rule_violation_carries_signal():
    signal = StoreSignal(StoreSignalKind.BUSINESS_RULE, "contactLimitExceeded")
    exc = StoreRuleViolation(signal)
    assert exc.signal is signal
    assert str(exc) == "contactLimitExceeded"


def test_message_containing_parenthesised_number():
    signal = classify_store_error(_odbc("maxContacts (3) reached"))
    assert signal.kind is StoreSignalKind.BUSINESS_RULE
    assert signal.message == "maxContacts (3) reached"


def test_odbc_text_without_call_suffix():
    err = _OdbcError("42000", "[Microsoft][SQL Server]vehicleNotFound (51000)")
    assert classify_store_error(err).kind is StoreSignalKind.VEHICLE_NOT_FOUND
