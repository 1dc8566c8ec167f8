"""
Wavix Python SDK

A Python client for the Wavix telephony API: programmable calls, SMS,
number management, SIP trunks, E911, 2FA, speech analytics and billing,
plus a live call event stream.

Example:
    >>> from wavix import Wavix
    >>> client = Wavix(appid="your-appid")
    >>> message = client.sms.send(
    ...     from_number="12025550100",
    ...     to="12025550199",
    ...     text="Hello from Wavix",
    ... )
    >>> event = client.calls.start(
    ...     from_number="12025550100",
    ...     to="12025550199",
    ...     status_callback="https://example.com/status",
    ... )
"""

__version__ = "1.0.0"
__license__ = "MIT"

from wavix.client import Wavix
from wavix.config import ClientConfig, Endpoints
from wavix.models import (
    Call,
    CallEvent,
    CallEventPayload,
    CallEventType,
    CallType,
    CdrDisposition,
    DidDocumentType,
    DidTransport,
    DigitsAndReasonEventData,
    E911Address,
    Pagination,
    PlaybackIdEventData,
    SpeechAnalyticsLanguage,
    SuccessResponse,
    TransactionType,
    TtsVoice,
    TwoFaChannel,
)
from wavix.exceptions import (
    WavixError,
    AuthenticationError,
    ValidationError,
    APIError,
    InternalError,
    DownloadError,
    UploadError,
    StartCallError,
    WebSocketError,
)
from wavix.resources.base import PaginatedResponse
from wavix.streaming import CallEventStream, StreamState
from wavix.validation import Validator

__all__ = [
    # Main client
    "Wavix",
    "ClientConfig",
    "Endpoints",
    "Validator",

    # Models
    "Call",
    "CallEvent",
    "CallEventPayload",
    "CallEventType",
    "CallType",
    "CdrDisposition",
    "DidDocumentType",
    "DidTransport",
    "DigitsAndReasonEventData",
    "E911Address",
    "Pagination",
    "PaginatedResponse",
    "PlaybackIdEventData",
    "SpeechAnalyticsLanguage",
    "SuccessResponse",
    "TransactionType",
    "TtsVoice",
    "TwoFaChannel",

    # Exceptions
    "WavixError",
    "AuthenticationError",
    "ValidationError",
    "APIError",
    "InternalError",
    "DownloadError",
    "UploadError",
    "StartCallError",
    "WebSocketError",

    # Streaming
    "CallEventStream",
    "StreamState",
]
