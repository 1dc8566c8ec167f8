"""
Wavix Python SDK - Voice Campaigns Resource
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from wavix.resources.base import BaseResource
from wavix.models import VoiceCampaign, VoiceCampaignResult
from wavix.payloads import TriggerScenarioPayload
from wavix.config import Endpoints

if TYPE_CHECKING:
    from wavix.client import Wavix


class VoiceCampaignsResource(BaseResource):
    """Resource for triggering voice campaign scenarios."""

    def trigger_scenario(self, callflow_id: int, caller_id: str, contact: str) -> VoiceCampaign:
        """
        Run a call flow against one contact.

        Args:
            callflow_id: Call flow ID
            caller_id: Caller ID used for the call
            contact: Number to call

        Returns:
            The VoiceCampaign run
        """
        payload = self._validate(
            TriggerScenarioPayload,
            voice_campaign={
                "callflow_id": callflow_id,
                "caller_id": caller_id,
                "contact": contact,
            },
        )
        response = self._post(Endpoints.VOICE_CAMPAIGNS, json=payload)
        return self._decode(VoiceCampaignResult, response).voice_campaign
