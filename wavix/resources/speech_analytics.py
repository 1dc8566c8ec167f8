"""
Wavix Python SDK - Speech Analytics Resource

This module provides call transcriptions and transcript search.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Optional, Dict, Any, Union

from wavix.resources.base import BaseResource, PaginatedResponse
from wavix.models import (
    CallType,
    SpeechAnalyticsCall,
    SpeechAnalyticsLanguage,
    SuccessResponse,
    Transcription,
)
from wavix.payloads import SpeechAnalyticsCallsPayload, TranscribePayload
from wavix.config import Endpoints

if TYPE_CHECKING:
    from wavix.client import Wavix


class SpeechAnalyticsResource(BaseResource):
    """
    Resource for speech analytics.

    Example:
        >>> calls = client.speech_analytics.list_calls(
        ...     from_date="2024-01-01",
        ...     to_date="2024-01-31",
        ...     type=CallType.RECEIVED,
        ...     transcription={"any": {"match": ["refund"]}},
        ... )
        >>> client.speech_analytics.transcribe(
        ...     calls.items[0].uuid,
        ...     language=SpeechAnalyticsLanguage.ENGLISH,
        ...     webhook_url="https://example.com/transcripts",
        ... )
    """

    def list_calls(
        self,
        from_date: Union[str, date],
        to_date: Union[str, date],
        type: Union[CallType, str],
        from_search: Optional[str] = None,
        to_search: Optional[str] = None,
        sip_trunk: Optional[str] = None,
        min_duration: Optional[int] = None,
        transcription: Optional[Dict[str, Any]] = None,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
    ) -> PaginatedResponse[SpeechAnalyticsCall]:
        """
        Search calls and their transcriptions.

        Args:
            from_date: Start of the period, YYYY-MM-DD
            to_date: End of the period, YYYY-MM-DD
            type: Call direction, ``received`` or ``placed``
            from_search: Caller number filter
            to_search: Destination number filter
            sip_trunk: SIP trunk filter
            min_duration: Minimum call duration in seconds
            transcription: Transcript filter keyed by ``agent``, ``client``
                or ``any``, each with ``must``, ``match`` and ``exclude``
                word lists
            page: Page number
            per_page: Number of items per page

        Returns:
            PaginatedResponse containing SpeechAnalyticsCall objects
        """
        payload = self._validate(
            SpeechAnalyticsCallsPayload,
            from_date=from_date,
            to_date=to_date,
            type=type,
            from_search=from_search,
            to_search=to_search,
            sip_trunk=sip_trunk,
            min_duration=min_duration,
            transcription=transcription,
            page=page,
            per_page=per_page,
        )
        response = self._post(Endpoints.CDR, json=payload)
        return self._parse_paginated_response(response, SpeechAnalyticsCall)

    def transcribe(
        self,
        call_id: str,
        language: Union[SpeechAnalyticsLanguage, str],
        webhook_url: str,
    ) -> SuccessResponse:
        """
        Request a new transcription of a call.

        Args:
            call_id: Call UUID
            language: Spoken language, ``en``, ``de`` or ``es``
            webhook_url: URL notified when the transcription is ready

        Returns:
            SuccessResponse
        """
        payload = self._validate(TranscribePayload, language=language, webhook_url=webhook_url)
        response = self._put(Endpoints.CDR_RETRANSCRIBE.format(call_id=call_id), json=payload)
        return self._decode(SuccessResponse, response)

    def get_transcription(self, call_id: str) -> Transcription:
        """Get the transcription of a call."""
        response = self._get(Endpoints.CDR_TRANSCRIPTION.format(call_id=call_id))
        return self._decode(Transcription, response)
