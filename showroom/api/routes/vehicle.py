"""Vehicle Routes — public catalog list and detail.

Invariants:
    - Input validated before the store is called (400 VALIDATION_ERROR)
    - List: store signals → 400 BUSINESS_RULE_ERROR
    - Detail: no row or any store signal → 404 NOT_FOUND
    - Only StoreRuleViolation is caught here; everything else propagates
"""

from fastapi import APIRouter, Depends, Request

from showroom.core.domain_types import VehicleId
from showroom.core.envelope import success_response
from showroom.core.errors import BusinessRuleError, ErrorContext, VehicleNotFoundError
from showroom.core.repository_protocols import ProcedureGateway
from showroom.core.store_signals import StoreRuleViolation
from showroom.infrastructure.database import get_gateway
from showroom.schemas.validation import validate_input
from showroom.schemas.vehicle import VehicleListQuery, VehicleDetailParams
from showroom.services.vehicle_service import VehicleService

router = APIRouter(prefix="/external/vehicle", tags=["vehicle"])


@router.get("")
async def list_vehicles(
    request: Request, gateway: ProcedureGateway = Depends(get_gateway),
):
    """Filtered, sorted and paginated vehicle list."""
    query = validate_input(
        VehicleListQuery, dict(request.query_params), "Validation failed",
    )
    try:
        result = await VehicleService(gateway).list_vehicles(query)
    except StoreRuleViolation as e:
        raise BusinessRuleError(e.signal.message) from e
    return success_response(result, meta=result.meta())


@router.get("/{vehicle_id}")
async def get_vehicle(
    vehicle_id: str, gateway: ProcedureGateway = Depends(get_gateway),
):
    """Vehicle detail with images."""
    params = validate_input(
        VehicleDetailParams, {"id": vehicle_id}, "Invalid vehicle ID",
    )
    try:
        result = await VehicleService(gateway).get_vehicle(VehicleId(params.id))
    except StoreRuleViolation as e:
        raise VehicleNotFoundError(
            e.signal.message, ErrorContext(vehicle_id=params.id),
        ) from e
    return success_response(result)
