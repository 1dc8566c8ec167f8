"""
Wavix Python SDK - E911 Resource

This module provides methods for managing emergency service addresses.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Dict, Any, Union

from wavix.resources.base import BaseResource, PaginatedResponse
from wavix.models import E911Address, E911AddressValidation, E911Record, SuccessResponse
from wavix.payloads import E911RecordPayload
from wavix.config import Endpoints

if TYPE_CHECKING:
    from wavix.client import Wavix

AddressInput = Union[E911Address, Dict[str, Any]]


class E911Resource(BaseResource):
    """
    Resource for E911 records.

    Every address field is required: location, street_number, street,
    city, state, zip_code and zip_plus_four.

    Example:
        >>> address = E911Address(
        ...     location="Suite 100",
        ...     street_number="1600",
        ...     street="Pennsylvania Ave NW",
        ...     city="Washington",
        ...     state="DC",
        ...     zip_code="20500",
        ...     zip_plus_four="0003",
        ... )
        >>> check = client.e911.validate_address("12025550100", "Jane Doe", address)
        >>> client.e911.create("12025550100", "Jane Doe", check.corrected_address)
    """

    def _record(self, phone_number: str, name: str, address: AddressInput) -> E911RecordPayload:
        if isinstance(address, E911Address):
            address = address.to_dict()
        return self._validate(
            E911RecordPayload,
            phone_number=phone_number,
            name=name,
            address=address,
        )

    def list(
        self,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
        phone_number: Optional[str] = None,
    ) -> PaginatedResponse[E911Record]:
        """
        List E911 records.

        Args:
            page: Page number
            per_page: Number of items per page
            phone_number: Phone number filter

        Returns:
            PaginatedResponse containing E911Record objects
        """
        params = self._build_pagination_params(
            page=page, per_page=per_page, phone_number=phone_number
        )
        response = self._get(Endpoints.E911_RECORDS, params=params)
        return self._parse_paginated_response(response, E911Record)

    def validate_address(
        self,
        phone_number: str,
        name: str,
        address: AddressInput,
    ) -> E911AddressValidation:
        """
        Check an emergency address with the API.

        Returns:
            E911AddressValidation with the corrected address
        """
        payload = self._record(phone_number, name, address)
        response = self._post(Endpoints.E911_VALIDATE_ADDRESS, json=payload)
        return self._decode(E911AddressValidation, response)

    def create(
        self,
        phone_number: str,
        name: str,
        address: AddressInput,
    ) -> SuccessResponse:
        """Register an emergency address for a phone number."""
        payload = self._record(phone_number, name, address)
        response = self._post(Endpoints.E911_RECORDS, json=payload)
        return self._decode(SuccessResponse, response)

    def delete(self, phone_number: str) -> SuccessResponse:
        """Remove the emergency address of a phone number."""
        response = self._delete(Endpoints.E911_RECORDS, params={"phone_number": phone_number})
        return self._decode(SuccessResponse, response)
