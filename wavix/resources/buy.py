"""
Wavix Python SDK - Buy Resource

This module provides access to the catalogue of DIDs available for purchase.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

from wavix.resources.base import BaseResource, PaginatedResponse
from wavix.models import CartDid, City, Country, Region
from wavix.config import Endpoints
from wavix.exceptions import InternalError

if TYPE_CHECKING:
    from wavix.client import Wavix


class BuyResource(BaseResource):
    """
    Resource for browsing DIDs by location.

    Example:
        >>> countries = client.buy.get_countries()
        >>> cities = client.buy.get_country_cities(countries[0].id)
        >>> dids = client.buy.get_available_dids(countries[0].id, cities[0].id)
    """

    def _get_list(self, path: str, key: str, model: type) -> list:
        response = self._get(path)
        if response is None:
            return []
        if not isinstance(response, dict):
            raise InternalError()
        return self._decode_list(model, response.get(key))

    def get_countries(self) -> List[Country]:
        """List countries with DIDs for sale."""
        return self._get_list(Endpoints.BUY_COUNTRIES, "countries", Country)

    def get_regions(self, country_id: int) -> List[Region]:
        """List regions of a country."""
        return self._get_list(
            Endpoints.BUY_REGIONS.format(country_id=country_id), "regions", Region
        )

    def get_country_cities(self, country_id: int) -> List[City]:
        """List cities of a country."""
        return self._get_list(
            Endpoints.BUY_COUNTRY_CITIES.format(country_id=country_id), "cities", City
        )

    def get_region_cities(self, country_id: int, region_id: int) -> List[City]:
        """List cities of a region."""
        return self._get_list(
            Endpoints.BUY_REGION_CITIES.format(country_id=country_id, region_id=region_id),
            "cities",
            City,
        )

    def get_available_dids(
        self,
        country_id: int,
        city_id: int,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
        text_enabled_only: bool = False,
        type_filter: Optional[str] = None,
    ) -> PaginatedResponse[CartDid]:
        """
        List DIDs available for purchase in a city.

        Args:
            country_id: Country ID
            city_id: City ID
            page: Page number
            per_page: Number of items per page
            text_enabled_only: Only list SMS-enabled numbers
            type_filter: Number type filter

        Returns:
            PaginatedResponse containing CartDid objects
        """
        params = self._build_pagination_params(
            page=page,
            per_page=per_page,
            text_enabled_only=text_enabled_only,
            type_filter=type_filter,
        )
        response = self._get(
            Endpoints.BUY_AVAILABLE_DIDS.format(country_id=country_id, city_id=city_id),
            params=params,
        )
        return self._parse_paginated_response(response, CartDid, items_key="dids")
