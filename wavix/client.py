"""
Wavix Python SDK - Main Client

This module provides the main Wavix client class that serves as
the entry point for all API interactions.
"""

from __future__ import annotations

import os
import logging
from urllib.parse import quote
from typing import Optional, Dict, Any, Union, IO

import httpx

from wavix import __version__
from wavix.config import (
    ClientConfig,
    DEFAULT_BASE_URL,
    REQUEST_TIMEOUT,
    APPID_ENV_VAR,
    BASE_URL_ENV_VAR,
)
from wavix.exceptions import (
    AuthenticationError,
    APIError,
    InternalError,
    DownloadError,
    UploadError,
    UNKNOWN_ERROR_MESSAGE,
)
from wavix.models import SuccessResponse
from wavix.payloads import Payload
from wavix.validation import Validator
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
from wavix.streaming import CallEventStream

logger = logging.getLogger("wavix")

JSON_CONTENT_TYPE = "application/json; charset=UTF-8"


class Wavix:
    """
    Main client for interacting with the Wavix API.

    Args:
        appid: Your Wavix application id. If not provided, will look for
            the WAVIX_APPID environment variable.
        base_url: The base URL for the API. Defaults to https://api.wavix.com
        debug: Enable debug logging. Defaults to False.
        validator: Validator used to check request inputs. Defaults to a
            plain ``Validator``.

    Example:
        >>> client = Wavix(appid="your-appid")
        >>> page = client.dids.list(page=1, per_page=25)
        >>> for did in page:
        ...     print(did.number)

    Attributes:
        number_validation: Phone number validation
        sms: Outbound SMS and MMS
        billing: Transactions and invoices
        cart: Shopping cart for DIDs
        buy: DID catalogue
        cdr: Call detail records
        profile: Account profile and settings
        sip_trunks: SIP trunk management
        dids: DIDs on the account
        e911: Emergency address records
        link_shortener: Short links and their metrics
        two_fa: Two-factor verification
        speech_analytics: Call transcriptions
        voice_campaigns: Voice campaign triggers
        calls: Programmable calls
        events: Live call event stream
    """

    def __init__(
        self,
        appid: Optional[str] = None,
        base_url: Optional[str] = None,
        debug: bool = False,
        validator: Optional[Validator] = None,
    ) -> None:
        # Get app id from parameter or environment
        appid = appid or os.environ.get(APPID_ENV_VAR)
        if not appid:
            raise AuthenticationError(
                "Application id is required. Provide it as a parameter or set "
                f"the {APPID_ENV_VAR} environment variable."
            )

        self._config = ClientConfig(
            appid=appid,
            base_url=(base_url or os.environ.get(BASE_URL_ENV_VAR) or DEFAULT_BASE_URL).rstrip("/"),
        )
        self.validator = validator or Validator()

        # Setup logging
        if debug:
            logging.basicConfig(level=logging.DEBUG)
            logger.setLevel(logging.DEBUG)

        self._http_client = self._create_http_client()
        self.events = CallEventStream(self._config)
        self._init_resources()

        logger.debug(f"Wavix client initialized with base URL: {self._config.base_url}")

    @property
    def config(self) -> ClientConfig:
        return self._config

    def _create_http_client(self) -> httpx.Client:
        """Create and configure the HTTP client."""
        headers = {
            "Accept": "application/json",
            "User-Agent": f"wavix-python/{__version__}",
        }

        return httpx.Client(
            headers=headers,
            timeout=httpx.Timeout(REQUEST_TIMEOUT),
        )

    def _init_resources(self) -> None:
        """Initialize all API resources."""
        self.number_validation = NumberValidationResource(self)
        self.sms = SmsResource(self)
        self.billing = BillingResource(self)
        self.cart = CartResource(self)
        self.buy = BuyResource(self)
        self.cdr = CdrResource(self)
        self.profile = ProfileResource(self)
        self.sip_trunks = SipTrunksResource(self)
        self.dids = DidsResource(self)
        self.e911 = E911Resource(self)
        self.link_shortener = LinkShortenerResource(self)
        self.two_fa = TwoFaResource(self)
        self.speech_analytics = SpeechAnalyticsResource(self)
        self.voice_campaigns = VoiceCampaignsResource(self)
        self.calls = CallsResource(self)

    def _build_url(self, path: str) -> str:
        """Absolute URL for ``path`` with the app id appended to its query."""
        url = self._config.base_url + path
        separator = "&" if "?" in url else "?"
        return f"{url}{separator}appid={quote(self._config.appid, safe='')}"

    def request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Union[Payload, Dict[str, Any]]] = None,
    ) -> Any:
        """
        Make an HTTP request to the API.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE, PATCH)
            path: API endpoint path, optionally with a query string
            params: Query parameters
            json: Request payload; no body is sent when omitted

        Returns:
            Decoded JSON response, or None for an empty response

        Raises:
            APIError: If the API reports a failure
            InternalError: If the request fails or the response is not JSON
        """
        body = json.to_body() if isinstance(json, Payload) else json

        logger.debug(f"Making {method} request to {path}")
        logger.debug(f"Params: {params}")
        logger.debug(f"JSON: {body}")

        try:
            response = self._http_client.request(
                method=method,
                url=self._build_url(path),
                params=params,
                json=body,
                headers={"Content-Type": JSON_CONTENT_TYPE},
            )
        except httpx.RequestError as e:
            logger.debug(f"Request to {path} failed: {e.__class__.__name__}")
            raise InternalError() from e

        return self._handle_response(response)

    def _handle_response(self, response: httpx.Response) -> Any:
        """Normalize the API response envelope."""
        logger.debug(f"Response status: {response.status_code}")

        # No content
        if response.status_code == 204:
            return None
        if response.status_code == 200 and not response.content:
            return None

        try:
            data = response.json()
        except ValueError as e:
            raise InternalError() from e

        if isinstance(data, dict) and (data.get("error") is True or data.get("success") is False):
            raise self._api_error(response.status_code, data)

        return data

    @staticmethod
    def _api_error(status_code: int, data: Dict[str, Any]) -> APIError:
        message = data.get("message")
        if not isinstance(message, str) or not message:
            message = UNKNOWN_ERROR_MESSAGE

        field_errors = {}
        errors = data.get("errors")
        if isinstance(errors, dict):
            for key, value in errors.items():
                if isinstance(value, list):
                    value = ", ".join(str(v) for v in value)
                field_errors[str(key)] = str(value)

        return APIError(message, status_code=status_code, field_errors=field_errors)

    def download(self, path: str) -> bytes:
        """
        Download a file attachment.

        Args:
            path: API endpoint path

        Returns:
            Raw file content

        Raises:
            DownloadError: If the response does not carry a file attachment
        """
        logger.debug(f"Downloading {path}")

        try:
            response = self._http_client.get(self._build_url(path))
        except httpx.RequestError as e:
            raise DownloadError() from e

        logger.debug(f"Response status: {response.status_code}")

        if "attachment" not in response.headers.get("Content-Disposition", ""):
            raise DownloadError()

        return response.content

    def upload(
        self,
        path: str,
        file_key: str,
        file_name: str,
        file: Union[bytes, IO[bytes]],
        fields: Optional[Dict[str, str]] = None,
    ) -> SuccessResponse:
        """
        Upload a file as a multipart form.

        Args:
            path: API endpoint path
            file_key: Form field name of the file part
            file_name: File name sent with the file part
            file: File content, as bytes or a readable binary stream
            fields: Additional form fields

        Returns:
            SuccessResponse with success set to True

        Raises:
            APIError: If the API reports a failure
            UploadError: If the file cannot be read or the upload fails
        """
        if isinstance(file, (bytes, bytearray)):
            content = bytes(file)
        else:
            try:
                content = file.read()
            except (OSError, ValueError) as e:
                raise UploadError("Failed to copy file data") from e

        logger.debug(f"Uploading {file_name} to {path}")

        try:
            response = self._http_client.post(
                self._build_url(path),
                files={file_key: (file_name, content)},
                data=fields or {},
            )
        except httpx.RequestError as e:
            raise UploadError(str(e)) from e

        logger.debug(f"Response status: {response.status_code}")

        if response.status_code != 200:
            try:
                data = response.json()
            except ValueError as e:
                raise UploadError(str(e)) from e

            if isinstance(data, dict) and data.get("error") is True:
                raise self._api_error(response.status_code, data)

            raise UploadError(
                f"Unknown error with status {response.status_code} {response.reason_phrase}"
            )

        return SuccessResponse(success=True)

    def close(self) -> None:
        """Close the HTTP client and release resources."""
        self._http_client.close()
        logger.debug("Wavix client closed")

    def __enter__(self) -> "Wavix":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.close()

    def __repr__(self) -> str:
        return f"Wavix(base_url='{self._config.base_url}')"
