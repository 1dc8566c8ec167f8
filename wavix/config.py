"""
Wavix Python SDK - Configuration

This module contains configuration classes and defaults for the SDK.
"""

from dataclasses import dataclass


DEFAULT_BASE_URL = "https://api.wavix.com"

# Fixed for every HTTP call, callers cannot override it.
REQUEST_TIMEOUT = 10.0

# Path of the call events socket on the API host.
EVENTS_PATH = "/sip"

APPID_ENV_VAR = "WAVIX_APPID"
BASE_URL_ENV_VAR = "WAVIX_BASE_URL"


@dataclass(frozen=True)
class ClientConfig:
    """
    Configuration shared by every resource and the event stream.

    Attributes:
        appid: Application identifier appended to every request as ``appid``
        base_url: Base URL for the API
    """
    appid: str
    base_url: str = DEFAULT_BASE_URL


class Endpoints:
    """API endpoint paths."""

    # Calls
    CALLS = "/v1/call"
    CALL = "/v1/call/{call_id}"
    CALL_PLAY = "/v1/call/{call_id}/play"
    CALL_TTS = "/v1/call/{call_id}/tts"
    CALL_TRANSFER = "/v1/call/{call_id}/transfer"
    CALL_COLLECT = "/v1/call/{call_id}/collect"

    # Messaging
    MESSAGES = "/v2/messages"

    # Number validation
    VALIDATION = "/v1/validation"
    VALIDATION_RESULT = "/v1/validation/{request_uuid}"

    # Billing
    BILLING_TRANSACTIONS = "/v1/billing/transactions"
    BILLING_INVOICES = "/v1/billing/invoices"
    BILLING_INVOICE = "/v1/billing/invoices/{invoice_id}"

    # Buy
    BUY_COUNTRIES = "/v1/buy/countries"
    BUY_REGIONS = "/v1/buy/countries/{country_id}/regions"
    BUY_COUNTRY_CITIES = "/v1/buy/countries/{country_id}/cities"
    BUY_REGION_CITIES = "/v1/buy/countries/{country_id}/regions/{region_id}/cities"
    BUY_AVAILABLE_DIDS = "/v1/buy/countries/{country_id}/cities/{city_id}/dids"

    # Cart
    CART = "/v1/buy/cart"
    CART_CHECKOUT = "/v1/buy/cart/checkout"

    # CDR and speech analytics
    CDR = "/v1/cdr"
    CDR_RETRANSCRIBE = "/v1/cdr/{call_id}/retranscribe"
    CDR_TRANSCRIPTION = "/v1/cdr/{call_id}/transcription"

    # DIDs
    MY_DIDS = "/v1/mydids"
    MY_DIDS_UPDATE_DESTINATIONS = "/v1/mydids/update-destinations"
    MY_DIDS_PAPERS = "/v1/mydids/papers"

    # E911
    E911_RECORDS = "/v1/e911-records"
    E911_VALIDATE_ADDRESS = "/v1/e911-records/validate-address"

    # Short links
    SHORT_LINKS = "/v1/short-links"
    SHORT_LINKS_METRICS = "/v1/short-links/metrics"

    # Profile
    PROFILE = "/v1/profile"
    PROFILE_CONFIG = "/v1/profile/config"

    # SIP trunks
    TRUNKS = "/v1/trunks"
    TRUNK = "/v1/trunks/{trunk_id}"

    # 2FA
    TWO_FA_SERVICE_SESSIONS = "/v1/two-fa/service/{service_id}/sessions"
    TWO_FA_SESSION_EVENTS = "/v1/two-fa/session/{session_id}/events"
    TWO_FA_VERIFICATION = "/v1/two-fa/verification"
    TWO_FA_VERIFICATION_SESSION = "/v1/two-fa/verification/{session_id}"
    TWO_FA_VERIFICATION_CHECK = "/v1/two-fa/verification/{session_id}/check"
    TWO_FA_VERIFICATION_CANCEL = "/v1/two-fa/verification/{session_id}/cancel"

    # Voice campaigns
    VOICE_CAMPAIGNS = "/v1/voice_campaigns"
