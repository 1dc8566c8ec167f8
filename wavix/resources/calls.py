"""
Wavix Python SDK - Calls Resource

This module provides methods for placing and controlling voice calls,
and access to the live call event stream.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Union

from wavix.resources.base import BaseResource
from wavix.config import Endpoints
from wavix.exceptions import APIError, InternalError, StartCallError, ValidationError
from wavix.models import CallEvent, CallList, SuccessResponse, TtsVoice
from wavix.payloads import (
    CollectDtmfPayload,
    PlayAudioPayload,
    StartCallPayload,
    TransferPayload,
    TtsPayload,
)
from wavix.streaming import EventHandler

if TYPE_CHECKING:
    from wavix.client import Wavix


class CallsResource(BaseResource):
    """
    Resource for programmable voice calls.

    Outbound calls are started over HTTP. Their progress is reported as
    call events on the events socket, see ``connect`` and ``on_event``.

    Example:
        >>> client = Wavix(appid="...")
        >>> @client.calls.on_event
        ... def handle(event):
        ...     print(event.event_type)
        >>> await client.calls.connect()
        >>> event = client.calls.start(
        ...     from_number="12025550100",
        ...     to="12025550199",
        ...     status_callback="https://example.com/status",
        ... )
        >>> client.calls.tts(event.uuid, text="Hello", voice=TtsVoice.JOANNA)
    """

    def list(self) -> CallList:
        """
        List active calls.

        Returns:
            CallList of calls in progress
        """
        response = self._get(Endpoints.CALLS)
        return self._decode(CallList, response)

    def start(
        self,
        from_number: str,
        to: str,
        status_callback: str,
        call_recording: bool = False,
        machine_detection: bool = False,
    ) -> CallEvent:
        """
        Start an outbound call.

        Args:
            from_number: Caller ID
            to: Destination number
            status_callback: URL receiving call status updates
            call_recording: Record the call
            machine_detection: Detect answering machines

        Returns:
            The call's initial CallEvent

        Raises:
            StartCallError: If the input is invalid or the API refuses the call
        """
        try:
            payload = self._validate(
                StartCallPayload,
                from_number=from_number,
                to=to,
                status_callback=status_callback,
                call_recording=call_recording,
                machine_detection=machine_detection,
            )
            response = self._post(Endpoints.CALLS, json=payload)
            return self._decode(CallEvent, response)
        except (ValidationError, APIError) as e:
            raise StartCallError(e.message, errors=e.field_errors) from e
        except InternalError as e:
            raise StartCallError(e.message) from e

    def play_audio(
        self,
        call_id: str,
        audio_file: str,
        timeout_before_playing: Optional[int] = None,
        timeout_between_playing: Optional[int] = None,
    ) -> SuccessResponse:
        """
        Play an audio file into a call.

        Args:
            call_id: Call UUID
            audio_file: URL of the audio file
            timeout_before_playing: Seconds to wait before playback starts
            timeout_between_playing: Seconds between repeated playbacks

        Returns:
            SuccessResponse
        """
        payload = self._validate(
            PlayAudioPayload,
            audio_file=audio_file,
            timeout_before_playing=timeout_before_playing,
            timeout_between_playing=timeout_between_playing,
        )
        response = self._post(Endpoints.CALL_PLAY.format(call_id=call_id), json=payload)
        return self._decode(SuccessResponse, response)

    def tts(
        self,
        call_id: str,
        text: str,
        voice: Union[TtsVoice, str],
        delay_before_playing: int = 0,
        max_repeat_count: int = 0,
    ) -> SuccessResponse:
        """
        Speak text into a call.

        Args:
            call_id: Call UUID
            text: Text to synthesize
            voice: Voice to use, see ``TtsVoice``
            delay_before_playing: Seconds to wait before speaking
            max_repeat_count: How many times to repeat the text

        Returns:
            SuccessResponse
        """
        payload = self._validate(
            TtsPayload,
            text=text,
            voice=voice,
            delay_before_playing=delay_before_playing,
            max_repeat_count=max_repeat_count,
        )
        response = self._post(Endpoints.CALL_TTS.format(call_id=call_id), json=payload)
        return self._decode(SuccessResponse, response)

    def transfer(
        self,
        call_id: str,
        from_number: str,
        to: str,
        call_recording: bool = False,
        dual_channel_recording: bool = False,
        machine_detection: bool = False,
        a_playback_audio: Optional[str] = None,
        b_playback_audio: Optional[str] = None,
    ) -> SuccessResponse:
        """
        Transfer a call to another number.

        Args:
            call_id: Call UUID
            from_number: Caller ID for the transferred leg
            to: Transfer destination
            call_recording: Record the transferred call
            dual_channel_recording: Record each party on its own channel
            machine_detection: Detect answering machines
            a_playback_audio: Audio URL played to the original party
            b_playback_audio: Audio URL played to the transfer destination

        Returns:
            SuccessResponse
        """
        payload = self._validate(
            TransferPayload,
            from_number=from_number,
            to=to,
            call_recording=call_recording,
            dual_channel_recording=dual_channel_recording,
            machine_detection=machine_detection,
            a_playback_audio=a_playback_audio,
            b_playback_audio=b_playback_audio,
        )
        response = self._post(Endpoints.CALL_TRANSFER.format(call_id=call_id), json=payload)
        return self._decode(SuccessResponse, response)

    def collect_dtmf(
        self,
        call_id: str,
        audio_url: str,
        stop_on_keypress: bool = False,
        min_digits: Optional[int] = None,
        max_digits: Optional[int] = None,
        timeout: Optional[int] = None,
        termination_character: Optional[str] = None,
        callback_url: Optional[str] = None,
    ) -> SuccessResponse:
        """
        Play a prompt and collect DTMF digits.

        Collected digits arrive as an ``in_call_event`` whose data is a
        ``DigitsAndReasonEventData``.

        Args:
            call_id: Call UUID
            audio_url: URL of the prompt
            stop_on_keypress: Stop the prompt on the first key press
            min_digits: Minimum number of digits
            max_digits: Maximum number of digits
            timeout: Seconds to wait for input
            termination_character: Key ending the input
            callback_url: URL receiving the collected digits

        Returns:
            SuccessResponse
        """
        payload = self._validate(
            CollectDtmfPayload,
            audio={"url": audio_url, "stop_on_keypress": stop_on_keypress},
            min_digits=min_digits,
            max_digits=max_digits,
            timeout=timeout,
            termination_character=termination_character,
            callback_url=callback_url,
        )
        response = self._post(Endpoints.CALL_COLLECT.format(call_id=call_id), json=payload)
        return self._decode(SuccessResponse, response)

    def hangup(self, call_id: str) -> SuccessResponse:
        """
        Hang up a call.

        Args:
            call_id: Call UUID

        Returns:
            SuccessResponse
        """
        response = self._delete(Endpoints.CALL.format(call_id=call_id))
        return self._decode(SuccessResponse, response)

    # Event stream

    async def connect(self) -> None:
        """Open the call events socket. See ``CallEventStream.connect``."""
        await self._client.events.connect()

    async def disconnect(self) -> None:
        """Close the call events socket. See ``CallEventStream.disconnect``."""
        await self._client.events.disconnect()

    def on_event(self, handler: EventHandler) -> EventHandler:
        """
        Register a call event handler.

        Can be used as a decorator.
        """
        return self._client.events.on_event(handler)
