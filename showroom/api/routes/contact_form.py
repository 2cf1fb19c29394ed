"""Contact Form Route — public vehicle inquiry submission.

Invariants:
    - Body validated before the store is called (400 VALIDATION_ERROR, no write)
    - 201 with {idContactForm} on success
    - Store signal "vehicleNotFound" → 404 NOT_FOUND; any other signal → 400 BUSINESS_RULE_ERROR
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, status

from showroom.core.envelope import success_response
from showroom.core.errors import (
    BusinessRuleError, ErrorContext, ShowroomError, VehicleNotFoundError,
)
from showroom.core.repository_protocols import ProcedureGateway
from showroom.core.store_signals import StoreRuleViolation, StoreSignal, StoreSignalKind
from showroom.infrastructure.database import get_gateway
from showroom.schemas.contact_form import ContactFormCreate
from showroom.schemas.validation import validate_input
from showroom.services.contact_form_service import ContactFormService

router = APIRouter(prefix="/external/contact-form", tags=["contact-form"])


def map_contact_signal(signal: StoreSignal, vehicle_id: int) -> ShowroomError:
    """Translate a store signal raised during contact creation."""
    context = ErrorContext(vehicle_id=vehicle_id)
    if signal.kind is StoreSignalKind.VEHICLE_NOT_FOUND:
        return VehicleNotFoundError(signal.message, context)
    return BusinessRuleError(signal.message, context)


@router.post("", status_code=status.HTTP_201_CREATED)
async def submit_contact_form(
    payload: Any = Body(None),
    gateway: ProcedureGateway = Depends(get_gateway),
):
    """Create a contact form submission for a vehicle."""
    body = validate_input(ContactFormCreate, payload, "Validation failed")
    try:
        created = await ContactFormService(gateway).create(body)
    except StoreRuleViolation as e:
        raise map_contact_signal(e.signal, body.idVehicle) from e
    return success_response(created)
