"""
Wavix Python SDK - Base Resource

This module contains the base class for all API resources.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Dict, Any, List, Type, TypeVar, Generic, Union
from dataclasses import dataclass, field
from enum import Enum

from wavix.exceptions import InternalError
from wavix.models import Pagination
from wavix.payloads import Payload

if TYPE_CHECKING:
    from wavix.client import Wavix


T = TypeVar("T")
P = TypeVar("P", bound=Payload)


@dataclass
class PaginatedResponse(Generic[T]):
    """
    Paginated response container.

    Attributes:
        items: List of items in the current page
        pagination: Pagination block exactly as returned by the API
    """
    items: List[T] = field(default_factory=list)
    pagination: Pagination = field(default_factory=Pagination)

    @property
    def has_more(self) -> bool:
        return self.pagination.current_page < self.pagination.total_pages

    def __iter__(self):
        return iter(self.items)

    def __len__(self):
        return len(self.items)


class BaseResource:
    """
    Base class for all API resources.

    Provides common functionality for validating inputs, making API
    requests and decoding responses. Resources keep no state of their own.
    """

    def __init__(self, client: "Wavix") -> None:
        """
        Initialize the resource.

        Args:
            client: The Wavix client instance
        """
        self._client = client

    def _validate(self, model: Type[P], **data: Any) -> P:
        """Build a payload, raising ValidationError on invalid input."""
        return self._client.validator.validate(model, data)

    def _get(
        self,
        path: str,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Make a GET request."""
        return self._client.request("GET", path, params=self._build_query(params))

    def _post(
        self,
        path: str,
        json: Optional[Union[Payload, Dict[str, Any]]] = None,
    ) -> Any:
        """Make a POST request."""
        return self._client.request("POST", path, json=json)

    def _put(
        self,
        path: str,
        json: Optional[Union[Payload, Dict[str, Any]]] = None,
    ) -> Any:
        """Make a PUT request."""
        return self._client.request("PUT", path, json=json)

    def _patch(
        self,
        path: str,
        json: Optional[Union[Payload, Dict[str, Any]]] = None,
    ) -> Any:
        """Make a PATCH request."""
        return self._client.request("PATCH", path, json=json)

    def _delete(
        self,
        path: str,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Make a DELETE request."""
        return self._client.request("DELETE", path, params=self._build_query(params))

    @staticmethod
    def _build_query(params: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
        """
        Build query parameters.

        Unset values (None, empty strings, 0 and False) are dropped and
        booleans are sent as ``true``.
        """
        if not params:
            return None

        query: Dict[str, Any] = {}
        for key, value in params.items():
            if value is None or value is False or value == "" or value == 0 or value == []:
                continue
            if isinstance(value, Enum):
                value = value.value
            if value is True:
                value = "true"
            elif isinstance(value, list):
                value = [str(v) for v in value]
            query[key] = value
        return query or None

    def _build_pagination_params(
        self,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
        **kwargs,
    ) -> Dict[str, Any]:
        """Build pagination query parameters."""
        params: Dict[str, Any] = {"page": page, "per_page": per_page}
        params.update(kwargs)
        return params

    @staticmethod
    def _decode(model: Type[T], data: Any) -> T:
        """Decode a JSON response into ``model``."""
        try:
            return model.from_dict(data)
        except (TypeError, ValueError, KeyError) as e:
            raise InternalError() from e

    @staticmethod
    def _decode_list(model: Type[T], data: Any) -> List[T]:
        """Decode a JSON array response into a list of ``model``."""
        if data is None:
            return []
        if not isinstance(data, list):
            raise InternalError()
        try:
            return [model.from_dict(item) for item in data]
        except (TypeError, ValueError, KeyError) as e:
            raise InternalError() from e

    def _parse_paginated_response(
        self,
        response: Any,
        model_class: type,
        items_key: str = "items",
    ) -> PaginatedResponse:
        """Parse a paginated response into a PaginatedResponse object."""
        if response is None:
            return PaginatedResponse()
        if not isinstance(response, dict):
            raise InternalError()

        return PaginatedResponse(
            items=self._decode_list(model_class, response.get(items_key)),
            pagination=self._decode(Pagination, response.get("pagination")),
        )
