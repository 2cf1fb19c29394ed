"""Vehicle Service — list and detail reads via spVehicleList / spVehicleGet.

Invariants:
    - Unset filters are sent as NULL; featuredOnly as 0/1; sort and paging defaulted
    - List: first result set = rows, second = single-row {total}; missing count → 0
    - totalPages = ceil(total / pageSize)
    - Detail: empty first result set raises VehicleNotFoundError (never an empty success)
"""

from typing import Any

from showroom.core.domain_types import (
    Procedure, VehicleId,
    DEFAULT_SORT_BY, DEFAULT_SORT_ORDER, DEFAULT_PAGE, DEFAULT_PAGE_SIZE,
)
from showroom.core.errors import ErrorContext, VehicleNotFoundError
from showroom.core.pagination import compute_total_pages
from showroom.core.repository_protocols import ProcedureGateway, ResultSet
from showroom.schemas.vehicle import (
    VehicleListQuery, VehicleListResult, VehicleListItem,
    VehicleGetResult, VehicleDetail, VehicleImage,
)



def build_list_params(query: VehicleListQuery) -> dict[str, Any]:
    """Ordered spVehicleList parameters with defaults applied."""
    return {
        "idBrand": query.idBrand,
        "idFuelType": query.idFuelType,
        "idTransmission": query.idTransmission,
        "idColor": query.idColor,
        "yearMin": query.yearMin,
        "yearMax": query.yearMax,
        "priceMin": query.priceMin,
        "priceMax": query.priceMax,
        "featuredOnly": 1 if query.featuredOnly else 0,
        "sortBy": (query.sortBy or DEFAULT_SORT_BY).value,
        "sortOrder": (query.sortOrder or DEFAULT_SORT_ORDER).value,
        "page": query.page or DEFAULT_PAGE,
        "pageSize": query.pageSize or DEFAULT_PAGE_SIZE,
    }


def _result_set(result_sets: list[ResultSet], index: int) -> ResultSet:
    return result_sets[index] if len(result_sets) > index else []


def read_total(count_rows: ResultSet) -> int:
    if not count_rows:
        return 0
    return int(count_rows[0].get("total") or 0)


class VehicleService:
    """Catalog reads — no side effects."""

    def __init__(self, gateway: ProcedureGateway):
        self.gateway = gateway

    async def list_vehicles(self, query: VehicleListQuery) -> VehicleListResult:
        """Filtered, sorted, paginated catalog page."""
        params = build_list_params(query)
        result_sets = await self.gateway.call_procedure(
            Procedure.VEHICLE_LIST.value, params,
        )
        rows = _result_set(result_sets, 0)
        total = read_total(_result_set(result_sets, 1))
        page_size = params["pageSize"]
        return VehicleListResult(
            vehicles=[VehicleListItem.model_validate(row) for row in rows],
            total=total,
            page=params["page"],
            pageSize=page_size,
            totalPages=compute_total_pages(total, page_size),
        )

    async def get_vehicle(self, vehicle_id: VehicleId) -> VehicleGetResult:
        """Vehicle detail with its images; raises VehicleNotFoundError on no row."""
        result_sets = await self.gateway.call_procedure(
            Procedure.VEHICLE_GET.value, {"idVehicle": vehicle_id},
        )
        vehicle_rows = _result_set(result_sets, 0)
        if not vehicle_rows:
            raise VehicleNotFoundError(
                context=ErrorContext(
                    vehicle_id=vehicle_id, procedure=Procedure.VEHICLE_GET.value,
                ),
            )
        return VehicleGetResult(
            vehicle=VehicleDetail.model_validate(vehicle_rows[0]),
            images=[
                VehicleImage.model_validate(row)
                for row in _result_set(result_sets, 1)
            ],
        )
