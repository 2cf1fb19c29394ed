"""Vehicle Schemas — list filters, detail lookup, and the store's row projections.

Invariants:
    - VehicleListQuery: every field optional; ids positive; years in [1900, 2100];
      prices >= 0; page >= 1; pageSize in [1, 100]
    - featuredOnly string form is truthy only for "true" and "1" — never an error
    - sortBy / sortOrder restricted to SortField / SortOrder
    - Row projections ignore extra columns; price and mileage non-negative
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from showroom.core.domain_types import (
    SortField, SortOrder, MAX_PAGE_SIZE, YEAR_MIN, YEAR_MAX,
)

_TRUTHY_FLAGS = ("true", "1")


class VehicleListQuery(BaseModel):
    """Query-string filters for GET /external/vehicle."""
    model_config = ConfigDict(extra="ignore")

    idBrand: int | None = Field(None, gt=0)
    idFuelType: int | None = Field(None, gt=0)
    idTransmission: int | None = Field(None, gt=0)
    idColor: int | None = Field(None, gt=0)
    yearMin: int | None = Field(None, ge=YEAR_MIN, le=YEAR_MAX)
    yearMax: int | None = Field(None, ge=YEAR_MIN, le=YEAR_MAX)
    priceMin: float | None = Field(None, ge=0, allow_inf_nan=False)
    priceMax: float | None = Field(None, ge=0, allow_inf_nan=False)
    featuredOnly: bool | None = None
    sortBy: SortField | None = None
    sortOrder: SortOrder | None = None
    page: int | None = Field(None, ge=1)
    pageSize: int | None = Field(None, ge=1, le=MAX_PAGE_SIZE)

    @field_validator("featuredOnly", mode="before")
    @classmethod
    def coerce_featured_flag(cls, v: object) -> object:
        if isinstance(v, str):
            return v in _TRUTHY_FLAGS
        return v


class VehicleDetailParams(BaseModel):
    """Path parameters for GET /external/vehicle/{id}."""
    id: int = Field(gt=0)


# ─── Row projections ────────────────────────────────────────────

class _VehicleBase(BaseModel):
    model_config = ConfigDict(extra="ignore")

    idVehicle: int
    model: str
    year: int
    price: float = Field(ge=0)
    mileage: int = Field(ge=0)
    description: str
    engineSize: float | None = None
    doors: int | None = None
    featured: bool
    idBrand: int
    brandName: str
    idFuelType: int
    fuelTypeName: str
    idTransmission: int
    transmissionName: str
    idColor: int
    colorName: str
    colorHex: str | None = None


class VehicleListItem(_VehicleBase):
    """One row of spVehicleList's first result set."""
    primaryImageUrl: str | None = None


class VehicleDetail(_VehicleBase):
    """The single row of spVehicleGet's first result set."""
    brandCode: str
    fuelTypeCode: str
    transmissionCode: str
    colorCode: str
    dateCreated: datetime
    dateModified: datetime


class VehicleImage(BaseModel):
    model_config = ConfigDict(extra="ignore")

    idVehicleImage: int
    idVehicle: int
    imageUrl: str
    isPrimary: bool
    displayOrder: int
    dateCreated: datetime


class VehicleListResult(BaseModel):
    """data payload of the list endpoint."""
    vehicles: list[VehicleListItem]
    total: int
    page: int
    pageSize: int
    totalPages: int

    def meta(self) -> dict:
        return {"page": self.page, "pageSize": self.pageSize, "total": self.total}


class VehicleGetResult(BaseModel):
    """data payload of the detail endpoint."""
    vehicle: VehicleDetail
    images: list[VehicleImage]
