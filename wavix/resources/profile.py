"""
Wavix Python SDK - Profile Resource

This module provides access to the account profile and settings.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Dict, Any, List, Union

from wavix.resources.base import BaseResource
from wavix.models import AccountSettings, DefaultDestination, Profile
from wavix.payloads import UpdateProfilePayload
from wavix.config import Endpoints

if TYPE_CHECKING:
    from wavix.client import Wavix


class ProfileResource(BaseResource):
    """
    Resource for the account profile.

    Example:
        >>> profile = client.profile.update(
        ...     contact_email="ops@example.com",
        ...     timezone="Europe/Berlin",
        ... )
        >>> print(client.profile.get_settings().balance)
    """

    def get(self) -> Profile:
        """Get the account profile."""
        response = self._get(Endpoints.PROFILE)
        return self._decode(Profile, response)

    def update(
        self,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        phone: Optional[str] = None,
        company_name: Optional[str] = None,
        contact_email: Optional[str] = None,
        attn_contact_name: Optional[str] = None,
        billing_address: Optional[str] = None,
        additional_info: Optional[str] = None,
        timezone: Optional[str] = None,
        default_destinations: Optional[List[Union[DefaultDestination, Dict[str, Any]]]] = None,
    ) -> Profile:
        """
        Update the account profile. Only the given fields are changed.

        Args:
            first_name: First name
            last_name: Last name
            phone: Phone number
            company_name: Company name
            contact_email: Contact email address
            attn_contact_name: Attention contact name
            billing_address: Billing address
            additional_info: Free-form notes
            timezone: IANA timezone name, e.g. ``America/New_York``
            default_destinations: Default routing destinations

        Returns:
            The updated Profile

        Raises:
            ValidationError: If the email or timezone is invalid
        """
        if default_destinations is not None:
            default_destinations = [
                d.to_dict() if isinstance(d, DefaultDestination) else d
                for d in default_destinations
            ]

        payload = self._validate(
            UpdateProfilePayload,
            first_name=first_name,
            last_name=last_name,
            phone=phone,
            company_name=company_name,
            contact_email=contact_email,
            attn_contact_name=attn_contact_name,
            billing_address=billing_address,
            additional_info=additional_info,
            timezone=timezone,
            default_destinations=default_destinations,
        )
        response = self._put(Endpoints.PROFILE, json=payload)
        return self._decode(Profile, response)

    def get_settings(self) -> AccountSettings:
        """Get the account balance and global limits."""
        response = self._get(Endpoints.PROFILE_CONFIG)
        return self._decode(AccountSettings, response)
