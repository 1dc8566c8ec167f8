"""
Wavix Python SDK - SIP Trunks Resource

This module provides methods for managing SIP trunks.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Any, List

from wavix.resources.base import BaseResource, PaginatedResponse
from wavix.models import SipTrunk, SipTrunkConfiguration, SuccessResponse
from wavix.payloads import SipTrunkPayload
from wavix.config import Endpoints

if TYPE_CHECKING:
    from wavix.client import Wavix


class SipTrunksResource(BaseResource):
    """
    Resource for SIP trunks.

    ``create`` and ``update`` take the same arguments. Label, password,
    caller ID and maximum call cost are always required.

    Example:
        >>> trunk = client.sip_trunks.create(
        ...     label="office",
        ...     password="s3cret-Passw0rd",
        ...     caller_id="12025550100",
        ...     max_call_cost="0.10",
        ...     ip_restrict=True,
        ...     allowed_ips=["203.0.113.10"],
        ... )
        >>> client.sip_trunks.delete(trunk.id)
    """

    def list(
        self,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
    ) -> PaginatedResponse[SipTrunk]:
        """
        List SIP trunks.

        Args:
            page: Page number
            per_page: Number of items per page

        Returns:
            PaginatedResponse containing SipTrunk objects
        """
        params = self._build_pagination_params(page=page, per_page=per_page)
        response = self._get(Endpoints.TRUNKS, params=params)
        return self._parse_paginated_response(response, SipTrunk, items_key="sip_trunks")

    def get(self, trunk_id: int) -> SipTrunkConfiguration:
        """Get the configuration of a SIP trunk."""
        response = self._get(Endpoints.TRUNK.format(trunk_id=trunk_id))
        return self._decode(SipTrunkConfiguration, response)

    def create(
        self,
        label: str,
        password: str,
        caller_id: str,
        max_call_cost: str,
        host: Optional[str] = None,
        allowed_ips: Optional[List[str]] = None,
        rewrite_prefix: Optional[str] = None,
        rewrite_cond: Optional[str] = None,
        max_channels: Optional[int] = None,
        call_limit: Optional[int] = None,
        transcription_threshold: int = 0,
        cost_limit: bool = False,
        ip_restrict: bool = False,
        channels_restrict: bool = False,
        call_restrict: bool = False,
        rewrite_enabled: bool = False,
        transcription_enabled: bool = False,
        did_info_enabled: bool = False,
        machine_detection_enabled: Optional[bool] = None,
        call_recording_enabled: Optional[bool] = None,
    ) -> SipTrunkConfiguration:
        """
        Create a SIP trunk.

        Args:
            label: Trunk label
            password: SIP password
            caller_id: Default caller ID
            max_call_cost: Maximum cost of a single call
            host: Host for IP authentication
            allowed_ips: IP addresses allowed to use the trunk
            rewrite_prefix: Prefix added to dialled numbers
            rewrite_cond: Condition for the prefix rewrite
            max_channels: Maximum concurrent channels
            call_limit: Maximum call duration
            transcription_threshold: Minimum call length to transcribe
            cost_limit: Enforce ``max_call_cost``
            ip_restrict: Only accept calls from ``allowed_ips``
            channels_restrict: Enforce ``max_channels``
            call_restrict: Enforce ``call_limit``
            rewrite_enabled: Apply the prefix rewrite
            transcription_enabled: Transcribe calls
            did_info_enabled: Send DID information
            machine_detection_enabled: Detect answering machines
            call_recording_enabled: Record calls

        Returns:
            The SipTrunkConfiguration created
        """
        payload = self._trunk_payload(**locals())
        response = self._post(Endpoints.TRUNKS, json=payload)
        return self._decode(SipTrunkConfiguration, response)

    def update(
        self,
        trunk_id: int,
        label: str,
        password: str,
        caller_id: str,
        max_call_cost: str,
        host: Optional[str] = None,
        allowed_ips: Optional[List[str]] = None,
        rewrite_prefix: Optional[str] = None,
        rewrite_cond: Optional[str] = None,
        max_channels: Optional[int] = None,
        call_limit: Optional[int] = None,
        transcription_threshold: int = 0,
        cost_limit: bool = False,
        ip_restrict: bool = False,
        channels_restrict: bool = False,
        call_restrict: bool = False,
        rewrite_enabled: bool = False,
        transcription_enabled: bool = False,
        did_info_enabled: bool = False,
        machine_detection_enabled: Optional[bool] = None,
        call_recording_enabled: Optional[bool] = None,
    ) -> SipTrunkConfiguration:
        """
        Replace the configuration of a SIP trunk.

        Takes the same arguments as ``create``.

        Returns:
            The updated SipTrunkConfiguration
        """
        fields = dict(locals())
        fields.pop("trunk_id")
        payload = self._trunk_payload(**fields)
        response = self._put(Endpoints.TRUNK.format(trunk_id=trunk_id), json=payload)
        return self._decode(SipTrunkConfiguration, response)

    def delete(self, trunk_id: int) -> SuccessResponse:
        """Delete a SIP trunk."""
        response = self._delete(Endpoints.TRUNK.format(trunk_id=trunk_id))
        return self._decode(SuccessResponse, response)

    def _trunk_payload(self, **fields: Any) -> SipTrunkPayload:
        fields.pop("self", None)
        return self._validate(SipTrunkPayload, **fields)
