"""
Wavix Python SDK - Resources

This module contains all API resource classes.
"""

from wavix.resources.base import BaseResource, PaginatedResponse
from wavix.resources.billing import BillingResource
from wavix.resources.buy import BuyResource
from wavix.resources.calls import CallsResource
from wavix.resources.cart import CartResource
from wavix.resources.cdr import CdrResource
from wavix.resources.dids import DidsResource
from wavix.resources.e911 import E911Resource
from wavix.resources.link_shortener import LinkShortenerResource
from wavix.resources.number_validation import NumberValidationResource
from wavix.resources.profile import ProfileResource
from wavix.resources.sip_trunks import SipTrunksResource
from wavix.resources.sms import SmsResource
from wavix.resources.speech_analytics import SpeechAnalyticsResource
from wavix.resources.two_fa import TwoFaResource
from wavix.resources.voice_campaigns import VoiceCampaignsResource

__all__ = [
    "BaseResource",
    "PaginatedResponse",
    "BillingResource",
    "BuyResource",
    "CallsResource",
    "CartResource",
    "CdrResource",
    "DidsResource",
    "E911Resource",
    "LinkShortenerResource",
    "NumberValidationResource",
    "ProfileResource",
    "SipTrunksResource",
    "SmsResource",
    "SpeechAnalyticsResource",
    "TwoFaResource",
    "VoiceCampaignsResource",
]
