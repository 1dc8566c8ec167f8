"""
Wavix Python SDK - Request Payloads

Pydantic models describing request bodies and query strings, together with
the rules their fields must satisfy. Resources build them through
``wavix.validation.Validator`` so invalid input never reaches the API.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import Annotated, Any, Dict, List, Optional
from urllib.parse import urlsplit
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    EmailStr,
    Field,
    PositiveInt,
    field_validator,
)

from wavix.models import (
    CallType,
    CdrDisposition,
    DidDocumentType,
    DidTransport,
    SpeechAnalyticsLanguage,
    TtsVoice,
    TwoFaChannel,
)

DATE_FORMAT = "%Y-%m-%d"
_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")


def _format_date(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.strftime(DATE_FORMAT)
    if isinstance(value, date):
        return value.isoformat()
    return value


def _check_date(value: str) -> str:
    if not _DATE_PATTERN.fullmatch(value):
        raise ValueError("must be a date in YYYY-MM-DD format")
    datetime.strptime(value, DATE_FORMAT)
    return value


def _check_url(value: str) -> str:
    parts = urlsplit(value)
    if not parts.scheme or not parts.netloc:
        raise ValueError("must be an absolute URL")
    return value


def _check_timezone(value: str) -> str:
    try:
        ZoneInfo(value)
    except (ZoneInfoNotFoundError, ValueError):
        raise ValueError(f"unknown timezone: {value}") from None
    return value


RequiredStr = Annotated[str, Field(min_length=1)]
DateString = Annotated[str, BeforeValidator(_format_date), AfterValidator(_check_date)]
UrlString = Annotated[str, AfterValidator(_check_url)]
TimezoneName = Annotated[str, AfterValidator(_check_timezone)]


class Payload(BaseModel):
    """Base class for request payloads."""

    model_config = ConfigDict(populate_by_name=True)

    def to_body(self) -> Dict[str, Any]:
        """JSON body with API key names; unset optional fields are omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class PageQuery(Payload):
    page: Optional[int] = None
    per_page: Optional[int] = None


# =============================================================================
# Calls
# =============================================================================

class StartCallPayload(Payload):
    from_number: RequiredStr = Field(alias="from")
    to: RequiredStr
    status_callback: RequiredStr
    call_recording: bool = False
    machine_detection: bool = False


class PlayAudioPayload(Payload):
    audio_file: UrlString
    timeout_before_playing: Optional[int] = None
    timeout_between_playing: Optional[int] = None


class TtsPayload(Payload):
    text: RequiredStr
    voice: TtsVoice
    delay_before_playing: int = 0
    max_repeat_count: int = 0


class TransferPayload(Payload):
    from_number: RequiredStr = Field(alias="from")
    to: RequiredStr
    call_recording: bool = False
    dual_channel_recording: bool = False
    machine_detection: bool = False
    a_playback_audio: Optional[str] = None
    b_playback_audio: Optional[str] = None


class CollectDtmfAudio(Payload):
    url: RequiredStr
    stop_on_keypress: bool = False


class CollectDtmfPayload(Payload):
    audio: CollectDtmfAudio
    min_digits: Optional[int] = None
    max_digits: Optional[int] = None
    timeout: Optional[int] = None
    termination_character: Optional[str] = None
    callback_url: Optional[str] = None


# =============================================================================
# Messaging and Number Validation
# =============================================================================

class MessageBodyPayload(Payload):
    text: str = ""
    media: Optional[List[str]] = None


class SendMessagePayload(Payload):
    from_number: str = Field(alias="from")
    to: str
    message_body: MessageBodyPayload
    callback_url: Optional[str] = None
    validity: Optional[int] = None
    external_id: Optional[str] = None


class NumberValidationPayload(Payload):
    phone_numbers: List[str]
    type: str
    run_async: bool = Field(default=False, alias="async")


# =============================================================================
# Billing, CDR and Speech Analytics
# =============================================================================

class TransactionsQuery(PageQuery):
    from_date: Optional[DateString] = Field(default=None, alias="from")
    to_date: Optional[DateString] = Field(default=None, alias="to")


class CdrQuery(PageQuery):
    from_date: DateString = Field(alias="from")
    to_date: DateString = Field(alias="to")
    type: CallType
    disposition: Optional[CdrDisposition] = None
    from_search: Optional[str] = None
    to_search: Optional[str] = None
    sip_trunk: Optional[str] = None
    uuid: Optional[str] = None


class TranscriptionFilterItem(Payload):
    must: Optional[List[str]] = None
    match: Optional[List[str]] = None
    exclude: Optional[List[str]] = None


class TranscriptionFilter(Payload):
    agent: Optional[TranscriptionFilterItem] = None
    client: Optional[TranscriptionFilterItem] = None
    any_party: Optional[TranscriptionFilterItem] = Field(default=None, alias="any")


class SpeechAnalyticsCallsPayload(PageQuery):
    from_date: DateString = Field(alias="from")
    to_date: DateString = Field(alias="to")
    type: CallType
    from_search: Optional[str] = None
    to_search: Optional[str] = None
    sip_trunk: Optional[str] = None
    min_duration: Optional[int] = None
    transcription: Optional[TranscriptionFilter] = None


class TranscribePayload(Payload):
    language: SpeechAnalyticsLanguage
    webhook_url: UrlString


# =============================================================================
# DIDs
# =============================================================================

class DidDestinationPayload(Payload):
    destination: RequiredStr
    transport: DidTransport
    trunk_id: PositiveInt
    priority: Optional[int] = None


class UpdateDestinationsPayload(Payload):
    ids: List[int] = Field(min_length=1)
    sms_relay_url: Optional[UrlString] = None
    destinations: Optional[List[DidDestinationPayload]] = Field(default=None, min_length=1)


class UploadDocumentPayload(Payload):
    did_ids: List[str] = Field(min_length=1)
    file_name: RequiredStr
    file: Any
    doc_id: DidDocumentType

    @field_validator("file")
    @classmethod
    def validate_file(cls, v: Any) -> Any:
        if v is None or (isinstance(v, (bytes, bytearray)) and not v):
            raise ValueError("file is required")
        if not isinstance(v, (bytes, bytearray)) and not hasattr(v, "read"):
            raise ValueError("file must be bytes or a readable stream")
        return v


# =============================================================================
# E911 and Short Links
# =============================================================================

class E911AddressPayload(Payload):
    location: RequiredStr
    street_number: RequiredStr
    street: RequiredStr
    city: RequiredStr
    state: RequiredStr
    zip_code: RequiredStr
    zip_plus_four: RequiredStr


class E911RecordPayload(Payload):
    phone_number: RequiredStr
    name: RequiredStr
    address: E911AddressPayload


class ShortLinkMetricsQuery(Payload):
    from_date: DateString = Field(alias="from")
    to_date: DateString = Field(alias="to")
    phone: Optional[str] = None
    utm_campaign: Optional[str] = None


class CreateShortLinkPayload(Payload):
    link: RequiredStr
    expiration_time: RequiredStr
    fallback_url: RequiredStr
    phone: RequiredStr
    utm_campaign: RequiredStr


# =============================================================================
# Profile and SIP Trunks
# =============================================================================

class DefaultDestinationPayload(Payload):
    transport: str
    value: str


class UpdateProfilePayload(Payload):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None
    company_name: Optional[str] = None
    contact_email: Optional[EmailStr] = None
    attn_contact_name: Optional[str] = None
    billing_address: Optional[str] = None
    additional_info: Optional[str] = None
    timezone: Optional[TimezoneName] = None
    default_destinations: Optional[List[DefaultDestinationPayload]] = None


class SipTrunkPayload(Payload):
    label: RequiredStr
    password: RequiredStr
    caller_id: RequiredStr = Field(alias="callerid")
    max_call_cost: RequiredStr
    host: Optional[str] = None
    allowed_ips: Optional[List[str]] = None
    rewrite_prefix: Optional[str] = None
    rewrite_cond: Optional[str] = None
    max_channels: Optional[int] = None
    call_limit: Optional[int] = None
    transcription_threshold: int = 0
    cost_limit: bool = False
    ip_restrict: bool = False
    channels_restrict: bool = False
    call_restrict: bool = False
    rewrite_enabled: bool = False
    transcription_enabled: bool = False
    did_info_enabled: bool = Field(default=False, alias="didinfo_enabled")
    machine_detection_enabled: Optional[bool] = None
    call_recording_enabled: Optional[bool] = None


# =============================================================================
# 2FA and Voice Campaigns
# =============================================================================

class VerificationsQuery(Payload):
    from_date: DateString = Field(alias="from")
    to_date: DateString = Field(alias="to")


class CreateVerificationPayload(Payload):
    service_id: RequiredStr
    to: RequiredStr
    channel: TwoFaChannel


class ResendCodePayload(Payload):
    channel: TwoFaChannel


class CheckCodePayload(Payload):
    code: RequiredStr


class VoiceCampaignPayload(Payload):
    callflow_id: PositiveInt
    caller_id: RequiredStr
    contact: RequiredStr


class TriggerScenarioPayload(Payload):
    voice_campaign: VoiceCampaignPayload
