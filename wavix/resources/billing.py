"""
Wavix Python SDK - Billing Resource

This module provides access to account transactions and invoices.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Optional, Union

from wavix.resources.base import BaseResource, PaginatedResponse
from wavix.models import Invoice, Transaction
from wavix.payloads import TransactionsQuery
from wavix.config import Endpoints

if TYPE_CHECKING:
    from wavix.client import Wavix


class BillingResource(BaseResource):
    """
    Resource for account billing.

    Example:
        >>> transactions = client.billing.get_transactions(
        ...     from_date="2024-01-01",
        ...     to_date="2024-01-31",
        ... )
        >>> for transaction in transactions:
        ...     print(transaction.amount, TransactionType(transaction.type).name)
    """

    def get_transactions(
        self,
        from_date: Optional[Union[str, date]] = None,
        to_date: Optional[Union[str, date]] = None,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
    ) -> PaginatedResponse[Transaction]:
        """
        List account transactions.

        Args:
            from_date: Start of the period, YYYY-MM-DD
            to_date: End of the period, YYYY-MM-DD
            page: Page number
            per_page: Number of items per page

        Returns:
            PaginatedResponse containing Transaction objects
        """
        query = self._validate(
            TransactionsQuery,
            from_date=from_date,
            to_date=to_date,
            page=page,
            per_page=per_page,
        )
        response = self._get(Endpoints.BILLING_TRANSACTIONS, params=query.to_body())
        return self._parse_paginated_response(response, Transaction, items_key="transactions")

    def get_invoices(
        self,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
    ) -> PaginatedResponse[Invoice]:
        """
        List account invoices.

        Args:
            page: Page number
            per_page: Number of items per page

        Returns:
            PaginatedResponse containing Invoice objects
        """
        params = self._build_pagination_params(page=page, per_page=per_page)
        response = self._get(Endpoints.BILLING_INVOICES, params=params)
        return self._parse_paginated_response(response, Invoice, items_key="invoices")

    def download_invoice(self, invoice_id: int) -> bytes:
        """
        Download an invoice document.

        Args:
            invoice_id: Invoice ID

        Returns:
            Invoice file content

        Raises:
            DownloadError: If no file was returned
        """
        return self._client.download(Endpoints.BILLING_INVOICE.format(invoice_id=invoice_id))
