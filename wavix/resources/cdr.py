"""
Wavix Python SDK - CDR Resource

This module provides access to call detail records.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Optional, Union

from wavix.resources.base import BaseResource, PaginatedResponse
from wavix.models import Cdr, CallType, CdrDisposition
from wavix.payloads import CdrQuery
from wavix.config import Endpoints

if TYPE_CHECKING:
    from wavix.client import Wavix


class CdrResource(BaseResource):
    """
    Resource for call detail records.

    Example:
        >>> records = client.cdr.list(
        ...     from_date="2024-01-01",
        ...     to_date="2024-01-31",
        ...     type=CallType.PLACED,
        ...     disposition=CdrDisposition.ANSWERED,
        ... )
        >>> print(records.pagination.total)
    """

    def list(
        self,
        from_date: Union[str, date],
        to_date: Union[str, date],
        type: Union[CallType, str],
        disposition: Optional[Union[CdrDisposition, str]] = None,
        from_search: Optional[str] = None,
        to_search: Optional[str] = None,
        sip_trunk: Optional[str] = None,
        uuid: Optional[str] = None,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
    ) -> PaginatedResponse[Cdr]:
        """
        List call detail records.

        Args:
            from_date: Start of the period, YYYY-MM-DD
            to_date: End of the period, YYYY-MM-DD
            type: Call direction, ``placed`` or ``received``
            disposition: Call outcome filter
            from_search: Caller number filter
            to_search: Destination number filter
            sip_trunk: SIP trunk filter
            uuid: Call UUID filter
            page: Page number
            per_page: Number of items per page

        Returns:
            PaginatedResponse containing Cdr objects
        """
        query = self._validate(
            CdrQuery,
            from_date=from_date,
            to_date=to_date,
            type=type,
            disposition=disposition,
            from_search=from_search,
            to_search=to_search,
            sip_trunk=sip_trunk,
            uuid=uuid,
            page=page,
            per_page=per_page,
        )
        response = self._get(Endpoints.CDR, params=query.to_body())
        return self._parse_paginated_response(response, Cdr)
