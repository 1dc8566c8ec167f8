"""
Wavix Python SDK - Cart Resource

This module provides methods for purchasing DIDs through the cart.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

from wavix.resources.base import BaseResource
from wavix.models import CartContent, CartDid, SuccessResponse
from wavix.config import Endpoints

if TYPE_CHECKING:
    from wavix.client import Wavix


class CartResource(BaseResource):
    """
    Resource for the DID shopping cart.

    Example:
        >>> client.cart.add_dids(["1001", "1002"])
        >>> client.cart.checkout(["1001", "1002"])
    """

    def get_content(self) -> CartContent:
        """Get the DIDs in the cart and the documents they require."""
        response = self._get(Endpoints.CART)
        return self._decode(CartContent, response)

    def add_dids(self, ids: List[str]) -> List[CartDid]:
        """
        Add DIDs to the cart.

        Args:
            ids: DID IDs to add

        Returns:
            DIDs now in the cart
        """
        response = self._put(Endpoints.CART, json={"ids": [str(i) for i in ids]})
        return self._decode_list(CartDid, response)

    def checkout(self, ids: List[str]) -> SuccessResponse:
        """
        Purchase DIDs from the cart.

        Args:
            ids: DID IDs to purchase

        Returns:
            SuccessResponse
        """
        response = self._post(Endpoints.CART_CHECKOUT, json={"ids": [str(i) for i in ids]})
        return self._decode(SuccessResponse, response)
