"""Domain Types — identifiers, enums and store constants shared across layers.

Invariants:
    - VehicleId wraps an int — the store assigns it
    - Sort fields and sort directions encoded as Enums — no raw string matching
    - Stored procedure names live here, schema prefix applied by the caller
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

VehicleId = NewType("VehicleId", int)


# ─── Enums ───────────────────────────────────────────────────────

class SortField(str, Enum):
    """Columns the vehicle list procedure accepts for ordering."""
    PRICE = "price"
    YEAR = "year"
    MODEL = "model"
    DATE_CREATED = "dateCreated"
    MILEAGE = "mileage"


class SortOrder(str, Enum):
    """Sort direction, passed verbatim to the list procedure."""
    ASC = "ASC"
    DESC = "DESC"


class Procedure(str, Enum):
    """Stored procedures exposed by the store (unqualified names)."""
    VEHICLE_LIST = "spVehicleList"
    VEHICLE_GET = "spVehicleGet"
    CONTACT_FORM_CREATE = "spContactFormCreate"


# ─── List Defaults ───────────────────────────────────────────────

DEFAULT_SORT_BY = SortField.DATE_CREATED
DEFAULT_SORT_ORDER = SortOrder.DESC
DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100

YEAR_MIN = 1900
YEAR_MAX = 2100
