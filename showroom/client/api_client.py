"""Showroom API Client — httpx wrapper mirroring the catalog, detail and contact calls.

Invariants:
    - Success envelopes are unwrapped to their data payload and parsed into schemas
    - Transport errors, non-JSON bodies, failure envelopes and malformed payloads
      all raise ShowroomClientError (status_code/code/details when known)
    - None filters are never sent; booleans travel as "true"/"false"
"""

import logging
from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from showroom.schemas.contact_form import ContactFormCreate, ContactFormCreated
from showroom.schemas.validation import format_validation_errors
from showroom.schemas.vehicle import (
    VehicleGetResult, VehicleImage, VehicleListQuery, VehicleListResult,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

DEFAULT_BASE_URL = "http://localhost:8000"


class ShowroomClientError(Exception):
    """Any failed call to the showroom API."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        code: str | None = None,
        details: list | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code
        self.details = details


def sort_images_for_display(images: Iterable[VehicleImage]) -> list[VehicleImage]:
    """Primary image first, then ascending displayOrder."""
    return sorted(images, key=lambda image: (not image.isPrimary, image.displayOrder))


def _encode_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def encode_filters(
    filters: VehicleListQuery | Mapping[str, Any] | None,
) -> dict[str, str]:
    """Query-string params for the list endpoint."""
    if filters is None:
        return {}
    if isinstance(filters, VehicleListQuery):
        filters = filters.model_dump(exclude_none=True)
    return {
        key: _encode_value(value)
        for key, value in filters.items()
        if value is not None
    }


class ShowroomClient:
    """Async client for /external/* endpoints."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = 10.0,
    ):
        self._owns_client = http_client is None
        self._http = http_client or httpx.AsyncClient(
            base_url=base_url, timeout=timeout,
        )

    async def __aenter__(self) -> "ShowroomClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._http.aclose()

    async def list_vehicles(
        self, filters: VehicleListQuery | Mapping[str, Any] | None = None,
    ) -> VehicleListResult:
        """GET /external/vehicle"""
        data = await self._request(
            "GET", "/external/vehicle", params=encode_filters(filters),
        )
        return self._parse(VehicleListResult, data)

    async def get_vehicle(self, vehicle_id: int) -> VehicleGetResult:
        """GET /external/vehicle/{id}"""
        data = await self._request("GET", f"/external/vehicle/{vehicle_id}")
        return self._parse(VehicleGetResult, data)

    async def submit_contact_form(
        self, body: ContactFormCreate | Mapping[str, Any],
    ) -> ContactFormCreated:
        """POST /external/contact-form. Mappings are validated before sending."""
        if not isinstance(body, ContactFormCreate):
            try:
                body = ContactFormCreate.model_validate(body)
            except ValidationError as e:
                raise ShowroomClientError(
                    "Validation failed",
                    code="VALIDATION_ERROR",
                    details=format_validation_errors(e.errors()),
                ) from e
        data = await self._request(
            "POST", "/external/contact-form", json=body.model_dump(mode="json"),
        )
        return self._parse(ContactFormCreated, data)

    async def _request(self, method: str, path: str, **kwargs) -> Any:
        try:
            response = await self._http.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logger.warning(f"{method} {path} failed: {e}")
            raise ShowroomClientError(f"Request to {path} failed") from e
        try:
            envelope = response.json()
        except ValueError as e:
            raise ShowroomClientError(
                "Response is not valid JSON", status_code=response.status_code,
            ) from e
        if not isinstance(envelope, dict):
            raise ShowroomClientError(
                "Unexpected response shape", status_code=response.status_code,
            )
        if not response.is_success or envelope.get("success") is not True:
            raise ShowroomClientError(
                envelope.get("error") or f"HTTP {response.status_code}",
                status_code=response.status_code,
                code=envelope.get("code"),
                details=envelope.get("details"),
            )
        return envelope.get("data")

    @staticmethod
    def _parse(model: type[ModelT], data: Any) -> ModelT:
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise ShowroomClientError("Unexpected response payload") from e
