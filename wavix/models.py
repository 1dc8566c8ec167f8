"""
Wavix Python SDK - Data Models

This module contains the response models returned by the SDK.
Models are dataclasses built from decoded JSON with ``from_dict``. Every
field has a zero-value default, so an empty response yields a default
instance rather than an error.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, asdict
from enum import Enum, IntEnum
from typing import Optional, List, Dict, Any, Union
import json


def attr(key: str, default: Any = "") -> Any:
    """Scalar field stored under a different JSON key."""
    return field(default=default, metadata={"key": key})


def nested(model: type, key: Optional[str] = None, optional: bool = False) -> Any:
    """Field holding a nested model."""
    metadata = {"model": model}
    if key:
        metadata["key"] = key
    if optional:
        return field(default=None, metadata=metadata)
    return field(default_factory=model, metadata=metadata)


def nested_list(model: type, key: Optional[str] = None) -> Any:
    """Field holding a list of nested models."""
    metadata = {"model": model, "many": True}
    if key:
        metadata["key"] = key
    return field(default_factory=list, metadata=metadata)


class BaseModel:
    """Base class for all models with common functionality."""

    def to_dict(self) -> Dict[str, Any]:
        """Convert model to dictionary."""
        return asdict(self)

    def to_json(self) -> str:
        """Convert model to JSON string."""
        return json.dumps(self.to_dict(), default=str)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "BaseModel":
        """
        Create model instance from a decoded JSON object.

        Unknown keys are ignored and missing keys keep their defaults.
        ``None`` yields the zero-value instance.

        Raises:
            TypeError: If ``data`` or a nested value has the wrong shape
        """
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise TypeError(
                f"Expected an object for {cls.__name__}, got {type(data).__name__}"
            )

        values: Dict[str, Any] = {}
        for f in fields(cls):
            key = f.metadata.get("key", f.name)
            if key not in data:
                continue
            value = data[key]
            type_name, optional = _unwrap_optional(f.type)
            if value is None:
                # null keeps the zero value unless the field is optional
                if optional:
                    values[f.name] = None
                continue
            model = f.metadata.get("model")
            if model is not None:
                if f.metadata.get("many"):
                    if not isinstance(value, list):
                        raise TypeError(f"Expected a list for '{key}'")
                    value = [model.from_dict(item) for item in value]
                else:
                    value = model.from_dict(value)
            else:
                _check_type(cls, key, type_name, value)
            values[f.name] = value
        return cls(**values)


# Scalar annotations checked on decode; other annotations are taken as-is.
_SCALAR_TYPES: Dict[str, tuple] = {
    "str": (str,),
    "int": (int,),
    "float": (int, float),
    "bool": (bool,),
    "Dict[str, Any]": (dict,),
}


def _unwrap_optional(annotation: Any) -> tuple:
    name = annotation if isinstance(annotation, str) else getattr(annotation, "__name__", "")
    if name.startswith("Optional[") and name.endswith("]"):
        return name[len("Optional["):-1], True
    return name, False


def _check_type(cls: type, key: str, type_name: str, value: Any) -> None:
    """Raise TypeError when a scalar value does not match its annotation."""
    if type_name == "List[str]":
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise TypeError(f"Expected a list of strings for '{key}' in {cls.__name__}")
        return

    expected = _SCALAR_TYPES.get(type_name)
    if expected is None:
        return
    # bool is an int subclass but never a valid number here
    if not isinstance(value, expected) or (type_name in ("int", "float") and isinstance(value, bool)):
        raise TypeError(
            f"Expected {type_name} for '{key}' in {cls.__name__}, got {type(value).__name__}"
        )


# =============================================================================
# Enums
# =============================================================================

class CallEventType(str, Enum):
    """Type of a call event."""
    ANSWERED = "answered"
    CALL_SETUP = "call_setup"
    COMPLETED = "completed"
    IN_CALL_EVENT = "in_call_event"
    RINGING = "ringing"


class TtsVoice(str, Enum):
    """
    Text-to-speech voices.

    See https://docs.aws.amazon.com/polly/latest/dg/voicelist.html
    """
    # English
    IVY = "Ivy"
    JOANNA = "Joanna"
    KENDRA = "Kendra"
    KIMBERLY = "Kimberly"
    SALLI = "Salli"
    JOEY = "Joey"
    JUSTIN = "Justin"
    MATTHEW = "Matthew"
    # Spanish
    CONCHITA = "Conchita"
    LUCIA = "Lucia"
    ENRIQUE = "Enrique"
    # German
    MARLENE = "Marlene"
    VICKI = "Vicki"
    HANS = "Hans"
    # Russian
    RUSSIAN = "Russian"
    TATYANA = "Tatyana"
    MAXIM = "Maxim"


class TransactionType(IntEnum):
    """Type of an account transaction."""
    ADJUSTMENTS = 0
    DEAL = 1
    ACTIVATION = 2
    MONTH = 3
    ACTIVATION_FEE = 4
    MONTH_FEE = 5
    CALL = 6
    CALL_FEE = 7
    PAYPAL_IN = 8
    PAYPAL_OUT = 9
    TAX = 10
    CALL_FIX_FEE = 11
    WEBCALL = 12
    SIP = 14
    SMS = 15
    CHANNEL = 16
    CHANNEL_FEE = 17
    CALL_SKYPE_FEE = 18
    CC_IN = 19
    PAYMENT_FEE = 20
    CONNECTION = 21
    CONNECTION_FEE = 22
    PORTING = 23
    INBOUND_SMS = 24
    WIRE_TRANSFER = 25
    SUBSCRIPTION = 26
    SURCHARGE = 27
    HLR = 28
    NUMBER_VALIDATION = 29
    CALL_RECORDING = 30
    CALL_RECORDING_STORAGE = 31
    CAMPAIGN_BUILDER_RUN = 32
    VOICEMAIL_DETECTION = 33
    SENDER_ID_DESTINATION_REGISTRATION = 34
    SENDER_ID_DESTINATION_FEE = 35
    TWO_FA_SERVICE = 36
    IVR = 37
    E911_ACTIVATION = 38
    MMS = 39
    INBOUND_MMS = 40
    CALL_TRANSCRIPTION = 41
    TENDLC_BRANDS = 42
    TENDLC_CAMPAIGN_FEE = 43
    DID_ORDER = 44
    ADJUSTMENTS_IN = 45


class CallType(str, Enum):
    """Direction filter for CDR and speech analytics queries."""
    PLACED = "placed"
    RECEIVED = "received"


class CdrDisposition(str, Enum):
    """Disposition filter for CDR queries."""
    ANSWERED = "answered"
    NO_ANSWER = "noanswer"
    BUSY = "busy"
    FAILED = "failed"
    ALL = "all"


class DidTransport(IntEnum):
    """Transport used to route a DID destination."""
    SIP_URI = 1
    PSTN = 4
    SIP_TRUNK = 5


class DidDocumentType(IntEnum):
    """Document type attached to a DID."""
    GENERAL = 1
    ADDRESS = 2
    LOCAL_ADDRESS = 3


class SpeechAnalyticsLanguage(str, Enum):
    """Transcription language."""
    ENGLISH = "en"
    GERMAN = "de"
    SPANISH = "es"


class TwoFaChannel(str, Enum):
    """Channel a verification code is delivered on."""
    SMS = "sms"
    VOICE = "voice"


# =============================================================================
# Common Models
# =============================================================================

@dataclass
class SuccessResponse(BaseModel):
    """Acknowledgement returned by action endpoints."""
    success: bool = False


@dataclass
class Pagination(BaseModel):
    """Pagination block of a list response."""
    current_page: int = 0
    per_page: int = 0
    total: int = 0
    total_pages: int = 0


# =============================================================================
# Calls
# =============================================================================

@dataclass
class Call(BaseModel):
    """Active call."""
    id: str = attr("uuid")
    from_number: str = attr("from")
    to: str = ""
    started_at: str = attr("call_started")
    answered_at: str = attr("call_answered")


@dataclass
class CallList(BaseModel):
    """Active calls on the account."""
    calls: List[Call] = nested_list(Call)


@dataclass
class DigitsAndReasonEventData(BaseModel):
    """Result of a DTMF collection: collected digits and termination reason."""
    digits: str = ""
    reason: str = ""


@dataclass
class PlaybackIdEventData(BaseModel):
    """Reference to an audio playback."""
    playback_id: str = ""


InCallEventData = Union[DigitsAndReasonEventData, PlaybackIdEventData]

# The API sends no discriminator for in-call event data, so variants are
# tried in this order and the first one whose keys are all present wins.
IN_CALL_EVENT_DATA_VARIANTS = (DigitsAndReasonEventData, PlaybackIdEventData)


def decode_in_call_event_data(data: Any) -> InCallEventData:
    """
    Decode in-call event data into the first variant it matches.

    Raises:
        ValueError: If the data matches none of the known variants
    """
    if isinstance(data, dict):
        for variant in IN_CALL_EVENT_DATA_VARIANTS:
            names = [f.name for f in fields(variant)]
            if all(isinstance(data.get(name), str) for name in names):
                return variant(**{name: data[name] for name in names})
    raise ValueError("unknown in_call_event_data type")


@dataclass
class CallEventPayload(BaseModel):
    """Payload of an ``in_call_event`` call event."""
    in_call_event: str = ""
    in_call_event_data: Optional[InCallEventData] = None

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "CallEventPayload":
        if not isinstance(data, dict):
            raise TypeError("Expected an object for CallEventPayload")

        in_call_event = data.get("in_call_event", "")
        if not isinstance(in_call_event, str):
            raise TypeError("in_call_event must be a string")

        return cls(
            in_call_event=in_call_event,
            in_call_event_data=decode_in_call_event_data(data.get("in_call_event_data")),
        )


@dataclass
class CallEvent(BaseModel):
    """Call event, delivered on the events socket or returned by call start."""
    uuid: str = ""
    event_type: str = ""
    event_time: str = ""
    event_payload: Optional[CallEventPayload] = nested(CallEventPayload, optional=True)
    from_number: str = attr("from")
    to: str = ""
    call_started: str = ""
    call_answered: str = ""
    machine_detected: bool = False
    tag: str = ""


# =============================================================================
# Messaging
# =============================================================================

@dataclass
class MessageBody(BaseModel):
    """SMS/MMS body."""
    text: str = ""
    media: Optional[List[str]] = None


@dataclass
class Message(BaseModel):
    """Sent message."""
    message_id: str = ""
    message_type: str = ""
    from_number: str = attr("from")
    to: str = ""
    message_body: MessageBody = nested(MessageBody)
    direction: str = ""
    status: str = ""
    charge: str = ""
    mcc: str = ""
    mnc: str = ""
    segments: int = 0
    submitted_at: str = ""
    sent_at: Optional[str] = None
    delivered_at: Optional[str] = None
    error_message: Optional[str] = None
    tag: Optional[str] = None


# =============================================================================
# Number Validation
# =============================================================================

@dataclass
class NumberValidation(BaseModel):
    """Validation result for one phone number."""
    phone_number: str = ""
    valid: bool = False
    country_code: str = ""
    e164_format: str = ""
    national_format: str = ""
    ported: bool = False
    mcc: str = ""
    mnc: str = ""
    number_type: str = ""
    carrier_name: str = ""
    risky_destination: bool = False
    unallocated_range: bool = False
    reachable: bool = False
    roaming: bool = False
    timezone: str = ""
    charge: str = ""
    error_code: str = ""


@dataclass
class NumberValidationBatch(BaseModel):
    """Validation results for a batch of phone numbers."""
    status: str = ""
    count: int = 0
    pending: int = 0
    items: List[NumberValidation] = nested_list(NumberValidation)


@dataclass
class NumberValidationRequest(BaseModel):
    """Handle of an asynchronous batch validation."""
    request_uuid: str = ""


# =============================================================================
# Billing
# =============================================================================

@dataclass
class Transaction(BaseModel):
    """Account transaction."""
    id: int = 0
    amount: str = ""
    balance_after: str = ""
    date: str = ""
    details: str = ""
    show_invoice: bool = False
    status: str = ""
    type: int = TransactionType.ADJUSTMENTS


@dataclass
class Invoice(BaseModel):
    """Account invoice."""
    id: int = 0
    amount: str = ""
    from_date: str = ""
    to_date: str = ""


# =============================================================================
# Buy and Cart
# =============================================================================

@dataclass
class Country(BaseModel):
    id: int = 0
    name: str = ""
    has_provinces_or_states: bool = False


@dataclass
class Region(BaseModel):
    id: int = 0
    name: str = ""


@dataclass
class City(BaseModel):
    id: int = 0
    area_code: int = 0
    name: str = ""


@dataclass
class CartDid(BaseModel):
    """DID offered for purchase or placed in the cart."""
    id: int = 0
    number: str = ""
    activation_fee: str = ""
    monthly_fee: str = ""
    per_min: str = ""
    channels: int = 0
    city: str = ""
    country: str = ""
    country_short_name: str = ""
    cnam: bool = False
    free_min: int = 0
    require_docs: List[str] = field(default_factory=list)
    sms_enabled: bool = False
    sms_price: str = ""


@dataclass
class CartDocType(BaseModel):
    id: int = 0
    name: str = ""
    title: str = ""


@dataclass
class CartContent(BaseModel):
    """Content of the cart."""
    dids: List[CartDid] = nested_list(CartDid)
    doc_types: List[CartDocType] = nested_list(CartDocType)


# =============================================================================
# CDR and Speech Analytics
# =============================================================================

@dataclass
class Cdr(BaseModel):
    """Call detail record."""
    uuid: str = ""
    date: str = ""
    from_number: str = attr("from")
    to: str = ""
    destination: str = ""
    disposition: str = ""
    duration: int = 0
    charge: str = ""
    forward_fee: str = ""
    per_minute: str = ""


@dataclass
class TranscriptionReference(BaseModel):
    uuid: str = ""
    url: str = ""


@dataclass
class SpeechAnalyticsCall(Cdr):
    """Call detail record with its transcription reference."""
    sip_trunk: str = ""
    transcription: Optional[TranscriptionReference] = nested(
        TranscriptionReference, optional=True
    )


@dataclass
class TranscriptionTurn(BaseModel):
    """One speaker turn of a transcription."""
    phone_number: str = ""
    start: str = attr("s")
    end: str = attr("e")
    text: str = ""


@dataclass
class Transcription(BaseModel):
    """Call transcription."""
    uuid: str = ""
    language: str = ""
    duration: int = 0
    charge: str = ""
    status: str = ""
    transcription_date: str = ""
    transcription: Dict[str, Any] = field(default_factory=dict)
    turns: List[TranscriptionTurn] = nested_list(TranscriptionTurn)


# =============================================================================
# DIDs
# =============================================================================

@dataclass
class DidDestination(BaseModel):
    id: int = 0
    destination: str = ""
    priority: int = 0
    transport: int = 0
    trunk_id: int = 0
    trunk_label: str = ""


@dataclass
class DidDocument(BaseModel):
    id: int = 0
    allow_replace: bool = False
    did_number: str = ""
    doc_content_type: str = ""
    doc_file_name: str = ""
    doc_type_id: int = 0
    status: str = ""
    url: str = ""


@dataclass
class Did(BaseModel):
    """DID on the account."""
    id: int = 0
    number: str = ""
    label: str = ""
    status: str = ""
    added: str = ""
    paid_until: str = ""
    activation_fee: str = ""
    monthly_fee: str = ""
    per_min: str = ""
    seconds: str = ""
    channels: int = 0
    city: str = ""
    country: str = ""
    country_short_name: str = ""
    cnam: bool = False
    call_recording_enabled: bool = False
    sms_enabled: bool = False
    sms_relay_url: str = ""
    transcription_enabled: bool = False
    transcription_threshold: int = 0
    require_docs: List[str] = field(default_factory=list)
    destination: List[DidDestination] = nested_list(DidDestination)
    documents: List[DidDocument] = nested_list(DidDocument)


# =============================================================================
# E911
# =============================================================================

@dataclass
class E911Address(BaseModel):
    location: str = ""
    street_number: str = ""
    street: str = ""
    city: str = ""
    state: str = ""
    zip_code: str = ""
    zip_plus_four: str = ""


@dataclass
class E911Record(BaseModel):
    """Emergency address registered for a phone number."""
    phone_number: str = ""
    name: str = ""
    address: E911Address = nested(E911Address)


@dataclass
class E911AddressValidation(BaseModel):
    """Result of an E911 address check."""
    status: int = 0
    number: str = ""
    corrected_address: E911Address = nested(E911Address)


# =============================================================================
# Short Links
# =============================================================================

@dataclass
class ShortLinkMetric(BaseModel):
    latitude: float = 0.0
    longitude: float = 0.0
    operating_system: str = ""
    browser: str = ""
    language: str = ""
    phone: str = ""
    utm_campaign: str = ""
    created_at: str = ""
    user_id: int = 0


@dataclass
class ShortLinkMetrics(BaseModel):
    metrics: List[ShortLinkMetric] = nested_list(ShortLinkMetric)


@dataclass
class ShortLink(BaseModel):
    short_link: str = ""


# =============================================================================
# Profile
# =============================================================================

@dataclass
class DefaultDestination(BaseModel):
    transport: str = ""
    value: str = ""


@dataclass
class Profile(BaseModel):
    """Customer information."""
    id: int = 0
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    company_name: str = ""
    contact_email: str = ""
    attn_contact_name: str = ""
    billing_address: str = ""
    additional_info: str = ""
    timezone: str = ""
    default_destinations: List[DefaultDestination] = nested_list(DefaultDestination)


@dataclass
class GlobalLimits(BaseModel):
    max_call_duration: int = 0
    max_sip_channels: int = 0
    max_call_rate: str = ""


@dataclass
class AccountSettings(BaseModel):
    balance: str = ""
    global_limits: GlobalLimits = nested(GlobalLimits)


# =============================================================================
# SIP Trunks
# =============================================================================

@dataclass
class HostRequest(BaseModel):
    host: str = ""
    status: str = ""


@dataclass
class SipTrunk(BaseModel):
    """SIP trunk as listed on the account."""
    id: int = 0
    name: str = ""
    label: str = ""
    status: str = ""
    auth_method: str = ""
    caller_id: str = attr("callerid")
    charge: str = ""
    talk_time: int = 0
    host_request: Optional[HostRequest] = nested(HostRequest, optional=True)
    transcription_enabled: bool = False
    transcription_threshold: int = 0
    multiple_numbers: bool = False
    passthrough: bool = False
    machine_detection_enabled: bool = False
    call_recording_enabled: bool = False


@dataclass
class AllowedIp(BaseModel):
    id: int = 0
    ip: str = ""


@dataclass
class SipTrunkConfiguration(BaseModel):
    """Full configuration of a SIP trunk."""
    id: int = 0
    name: str = ""
    label: str = ""
    caller_id: str = attr("callerid")
    auth_method: str = ""
    host: str = ""
    created_at: str = ""
    max_channels: int = 0
    call_limit: int = 0
    max_call_cost: str = ""
    rewrite_prefix: str = ""
    rewrite_cond: str = ""
    allowed_ips: List[AllowedIp] = nested_list(AllowedIp)
    call_restrict: bool = False
    channels_restrict: bool = False
    ip_restrict: bool = False
    cost_limit: bool = False
    rewrite_enabled: bool = False
    call_recording_enabled: bool = False
    machine_detection_enabled: bool = False
    did_info_enabled: bool = attr("didinfo_enabled", False)
    transcription_enabled: bool = False
    transcription_threshold: int = 0


# =============================================================================
# 2FA
# =============================================================================

@dataclass
class TwoFaVerification(BaseModel):
    """Verification session of a 2FA service."""
    session_id: str = ""
    service_id: str = ""
    service_name: str = ""
    phone_number: str = ""
    destination_country: str = ""
    status: str = ""
    charge: str = ""
    created_at: str = ""


@dataclass
class TwoFaEvent(BaseModel):
    """Event of a verification session."""
    event: str = ""
    status: str = ""
    charge: str = ""
    error: str = ""
    created_at: str = ""


@dataclass
class TwoFaLookup(BaseModel):
    number_type: str = ""
    country: str = ""
    current_carrier: str = ""


@dataclass
class TwoFaSession(BaseModel):
    """Newly created verification session."""
    success: bool = False
    service_id: str = ""
    session_id: str = ""
    session_url: str = ""
    destination: str = ""
    created_at: str = ""
    charge: str = ""
    lookup: TwoFaLookup = nested(TwoFaLookup)


@dataclass
class TwoFaResend(BaseModel):
    success: bool = False
    channel: str = ""
    destination: str = ""
    created_at: str = ""


@dataclass
class TwoFaCodeCheck(BaseModel):
    is_valid: bool = False


# =============================================================================
# Voice Campaigns
# =============================================================================

@dataclass
class VoiceCampaign(BaseModel):
    """Voice campaign run."""
    id: int = 0
    status: str = ""
    timestamp: str = ""
    caller_id: str = ""
    contact: str = ""


@dataclass
class VoiceCampaignResult(BaseModel):
    voice_campaign: VoiceCampaign = nested(VoiceCampaign)
