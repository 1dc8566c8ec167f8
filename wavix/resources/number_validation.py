"""
Wavix Python SDK - Number Validation Resource

This module provides phone number validation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

from wavix.resources.base import BaseResource
from wavix.models import NumberValidation, NumberValidationBatch, NumberValidationRequest
from wavix.payloads import NumberValidationPayload
from wavix.config import Endpoints

if TYPE_CHECKING:
    from wavix.client import Wavix


class NumberValidationResource(BaseResource):
    """
    Resource for validating phone numbers.

    ``validation_type`` selects the depth of the check, e.g. ``format``,
    ``analysis`` or ``validation``.

    Example:
        >>> result = client.number_validation.validate_single("12025550100", "format")
        >>> print(result.valid, result.number_type)
        >>> request = client.number_validation.validate_batch_async(numbers, "analysis")
        >>> batch = client.number_validation.get_validation_result(request.request_uuid)
    """

    def validate_single(self, number: str, validation_type: str) -> NumberValidation:
        """Validate one phone number."""
        response = self._get(
            Endpoints.VALIDATION,
            params={"phone_number": number, "type": validation_type},
        )
        return self._decode(NumberValidation, response)

    def validate_batch(self, numbers: List[str], validation_type: str) -> NumberValidationBatch:
        """Validate phone numbers and wait for all results."""
        payload = self._validate(
            NumberValidationPayload, phone_numbers=numbers, type=validation_type
        )
        response = self._post(Endpoints.VALIDATION, json=payload)
        return self._decode(NumberValidationBatch, response)

    def validate_batch_async(
        self, numbers: List[str], validation_type: str
    ) -> NumberValidationRequest:
        """
        Start validating phone numbers in the background.

        Returns:
            NumberValidationRequest whose ``request_uuid`` is passed to
            ``get_validation_result``
        """
        payload = self._validate(
            NumberValidationPayload,
            phone_numbers=numbers,
            type=validation_type,
            run_async=True,
        )
        response = self._post(Endpoints.VALIDATION, json=payload)
        return self._decode(NumberValidationRequest, response)

    def get_validation_result(self, request_uuid: str) -> NumberValidationBatch:
        """Get the results of a background validation."""
        response = self._get(Endpoints.VALIDATION_RESULT.format(request_uuid=request_uuid))
        return self._decode(NumberValidationBatch, response)
