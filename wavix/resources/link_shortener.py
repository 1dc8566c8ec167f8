"""
Wavix Python SDK - Link Shortener Resource

This module provides methods for creating short links and reading their
click metrics.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, List, Optional, Union

from wavix.resources.base import BaseResource
from wavix.models import ShortLink, ShortLinkMetric, ShortLinkMetrics
from wavix.payloads import CreateShortLinkPayload, ShortLinkMetricsQuery
from wavix.config import Endpoints

if TYPE_CHECKING:
    from wavix.client import Wavix


class LinkShortenerResource(BaseResource):
    """Resource for short links."""

    def get_metrics(
        self,
        from_date: Union[str, date],
        to_date: Union[str, date],
        phone: Optional[str] = None,
        utm_campaign: Optional[str] = None,
    ) -> List[ShortLinkMetric]:
        """
        Get click metrics for short links.

        Args:
            from_date: Start of the period, YYYY-MM-DD
            to_date: End of the period, YYYY-MM-DD
            phone: Recipient phone number filter
            utm_campaign: Campaign filter

        Returns:
            List of ShortLinkMetric objects
        """
        query = self._validate(
            ShortLinkMetricsQuery,
            from_date=from_date,
            to_date=to_date,
            phone=phone,
            utm_campaign=utm_campaign,
        )
        response = self._get(Endpoints.SHORT_LINKS_METRICS, params=query.to_body())
        return self._decode(ShortLinkMetrics, response).metrics

    def create(
        self,
        link: str,
        expiration_time: str,
        fallback_url: str,
        phone: str,
        utm_campaign: str,
    ) -> str:
        """
        Create a short link.

        Args:
            link: Target URL
            expiration_time: When the link stops redirecting to ``link``
            fallback_url: URL used once the link has expired
            phone: Recipient phone number
            utm_campaign: Campaign name

        Returns:
            The short link URL
        """
        payload = self._validate(
            CreateShortLinkPayload,
            link=link,
            expiration_time=expiration_time,
            fallback_url=fallback_url,
            phone=phone,
            utm_campaign=utm_campaign,
        )
        response = self._post(Endpoints.SHORT_LINKS, json=payload)
        return self._decode(ShortLink, response).short_link
