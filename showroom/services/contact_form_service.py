"""Contact Form Service — write-once inquiry creation via spContactFormCreate.

The store checks that the vehicle exists and is available; failures arrive as
StoreRuleViolation and are mapped by the endpoint handler.
"""

import logging

from showroom.core.domain_types import Procedure
from showroom.core.repository_protocols import ProcedureGateway
from showroom.schemas.contact_form import ContactFormCreate, ContactFormCreated

logger = logging.getLogger(__name__)


class ContactFormService:

    def __init__(self, gateway: ProcedureGateway):
        self.gateway = gateway

    async def create(self, body: ContactFormCreate) -> ContactFormCreated:
        result_sets = await self.gateway.call_procedure(
            Procedure.CONTACT_FORM_CREATE.value,
            {
                "idVehicle": body.idVehicle,
                "name": body.name,
                "email": body.email,
                "phone": body.phone,
                "message": body.message,
            },
        )
        created = ContactFormCreated.model_validate(result_sets[0][0])
        logger.info(
            f"Contact form {created.idContactForm} created",
            extra={"vehicle_id": body.idVehicle},
        )
        return created
