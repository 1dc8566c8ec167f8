"""
Wavix Python SDK - SMS Resource

This module provides methods for sending SMS and MMS messages.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, List

from wavix.resources.base import BaseResource
from wavix.models import Message
from wavix.payloads import SendMessagePayload
from wavix.config import Endpoints

if TYPE_CHECKING:
    from wavix.client import Wavix


class SmsResource(BaseResource):
    """
    Resource for outbound messages.

    Example:
        >>> message = client.sms.send(
        ...     from_number="12025550100",
        ...     to="12025550199",
        ...     text="Your order has shipped",
        ... )
        >>> print(message.message_id, message.status)
    """

    def send(
        self,
        from_number: str,
        to: str,
        text: str = "",
        media: Optional[List[str]] = None,
        callback_url: Optional[str] = None,
        validity: Optional[int] = None,
        external_id: Optional[str] = None,
    ) -> Message:
        """
        Send an SMS, or an MMS when ``media`` is given.

        Args:
            from_number: Sender ID or number
            to: Destination number
            text: Message text
            media: URLs of media attachments
            callback_url: URL receiving delivery reports
            validity: Seconds the message may wait for delivery
            external_id: Your own reference for the message

        Returns:
            The Message sent
        """
        payload = self._validate(
            SendMessagePayload,
            from_number=from_number,
            to=to,
            message_body={"text": text, "media": media},
            callback_url=callback_url,
            validity=validity,
            external_id=external_id,
        )
        response = self._post(Endpoints.MESSAGES, json=payload)
        return self._decode(Message, response)
