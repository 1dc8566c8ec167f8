"""
Wavix Python SDK - 2FA Resource

This module provides methods for phone number verification with one-time
codes.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, List, Union

from wavix.resources.base import BaseResource
from wavix.models import (
    SuccessResponse,
    TwoFaChannel,
    TwoFaCodeCheck,
    TwoFaEvent,
    TwoFaResend,
    TwoFaSession,
    TwoFaVerification,
)
from wavix.payloads import (
    CheckCodePayload,
    CreateVerificationPayload,
    ResendCodePayload,
    VerificationsQuery,
)
from wavix.config import Endpoints

if TYPE_CHECKING:
    from wavix.client import Wavix


class TwoFaResource(BaseResource):
    """
    Resource for 2FA verifications.

    Example:
        >>> session = client.two_fa.create_verification(
        ...     service_id="svc_1",
        ...     to="12025550199",
        ...     channel=TwoFaChannel.SMS,
        ... )
        >>> check = client.two_fa.validate_code(session.session_id, code="123456")
        >>> print(check.is_valid)
    """

    def get_verifications(
        self,
        service_id: str,
        from_date: Union[str, date],
        to_date: Union[str, date],
    ) -> List[TwoFaVerification]:
        """
        List verification sessions of a 2FA service.

        Args:
            service_id: 2FA service ID
            from_date: Start of the period, YYYY-MM-DD
            to_date: End of the period, YYYY-MM-DD

        Returns:
            List of TwoFaVerification objects
        """
        query = self._validate(VerificationsQuery, from_date=from_date, to_date=to_date)
        response = self._get(
            Endpoints.TWO_FA_SERVICE_SESSIONS.format(service_id=service_id),
            params=query.to_body(),
        )
        return self._decode_list(TwoFaVerification, response)

    def get_verification_events(self, session_id: str) -> List[TwoFaEvent]:
        """List the events of a verification session."""
        response = self._get(Endpoints.TWO_FA_SESSION_EVENTS.format(session_id=session_id))
        return self._decode_list(TwoFaEvent, response)

    def create_verification(
        self,
        service_id: str,
        to: str,
        channel: Union[TwoFaChannel, str],
    ) -> TwoFaSession:
        """
        Send a verification code.

        Args:
            service_id: 2FA service ID
            to: Phone number to verify
            channel: Delivery channel, ``sms`` or ``voice``

        Returns:
            The TwoFaSession created
        """
        payload = self._validate(
            CreateVerificationPayload, service_id=service_id, to=to, channel=channel
        )
        response = self._post(Endpoints.TWO_FA_VERIFICATION, json=payload)
        return self._decode(TwoFaSession, response)

    def resend_code(
        self,
        session_id: str,
        channel: Union[TwoFaChannel, str],
    ) -> TwoFaResend:
        """Send a new code for a verification session."""
        payload = self._validate(ResendCodePayload, channel=channel)
        response = self._post(
            Endpoints.TWO_FA_VERIFICATION_SESSION.format(session_id=session_id), json=payload
        )
        return self._decode(TwoFaResend, response)

    def validate_code(self, session_id: str, code: str) -> TwoFaCodeCheck:
        """Check a code entered by the user."""
        payload = self._validate(CheckCodePayload, code=code)
        response = self._post(
            Endpoints.TWO_FA_VERIFICATION_CHECK.format(session_id=session_id), json=payload
        )
        return self._decode(TwoFaCodeCheck, response)

    def cancel_verification(self, session_id: str) -> SuccessResponse:
        """Cancel a verification session."""
        response = self._patch(Endpoints.TWO_FA_VERIFICATION_CANCEL.format(session_id=session_id))
        return self._decode(SuccessResponse, response)
