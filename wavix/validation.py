"""
Wavix Python SDK - Validation

Request inputs are checked locally against their payload model before any
network call is made.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Type, TypeVar

from pydantic import BaseModel as PydanticModel
from pydantic import ValidationError as PydanticValidationError

from wavix.exceptions import ValidationError

P = TypeVar("P", bound=PydanticModel)


class Validator:
    """
    Validates request inputs against a payload model.

    A single instance is shared by all resources of a client. Pass a custom
    subclass to ``Wavix(validator=...)`` to add checks of your own.

    Example:
        >>> validator = Validator()
        >>> payload = validator.validate(TtsPayload, {"text": "Hi", "voice": "Joanna"})
    """

    def validate(self, model: Type[P], data: Mapping[str, Any]) -> P:
        """
        Build a payload from raw inputs.

        Args:
            model: Payload model declaring the field rules
            data: Raw inputs keyed by field name or alias

        Returns:
            Validated payload

        Raises:
            ValidationError: If any field breaks its rule
        """
        try:
            return model.model_validate(dict(data))
        except PydanticValidationError as e:
            field_errors = self._field_errors(e)
            raise ValidationError(
                f"Invalid value for field(s): {', '.join(field_errors)}",
                field_errors=field_errors,
            ) from e

    @staticmethod
    def _field_errors(error: PydanticValidationError) -> Dict[str, str]:
        field_errors: Dict[str, str] = {}
        for item in error.errors():
            name = ".".join(str(part) for part in item["loc"]) or error.title
            field_errors.setdefault(name, item["msg"])
        return field_errors
