"""
Wavix Python SDK - DIDs Resource

This module provides methods for managing the DIDs on the account.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Dict, Any, List, Union, IO

from wavix.resources.base import BaseResource, PaginatedResponse
from wavix.models import Did, DidDocumentType, SuccessResponse
from wavix.payloads import UpdateDestinationsPayload, UploadDocumentPayload
from wavix.config import Endpoints

if TYPE_CHECKING:
    from wavix.client import Wavix

DOCUMENT_FILE_KEY = "doc_attachment"


class DidsResource(BaseResource):
    """
    Resource for DIDs owned by the account.

    Example:
        >>> client.dids.update_destinations(
        ...     ids=[101, 102],
        ...     destinations=[{
        ...         "destination": "12025550100",
        ...         "transport": DidTransport.PSTN,
        ...         "trunk_id": 7,
        ...     }],
        ... )
        >>> with open("passport.pdf", "rb") as f:
        ...     client.dids.upload_document(
        ...         did_ids=["101"],
        ...         file=f,
        ...         file_name="passport.pdf",
        ...         doc_id=DidDocumentType.GENERAL,
        ...     )
    """

    def list(
        self,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
        city_id: Optional[int] = None,
        search: Optional[str] = None,
        label: Optional[str] = None,
        label_present: Optional[str] = None,
    ) -> PaginatedResponse[Did]:
        """
        List DIDs on the account.

        Args:
            page: Page number
            per_page: Number of items per page
            city_id: City filter
            search: Number search
            label: Label filter
            label_present: Filter on whether a label is set

        Returns:
            PaginatedResponse containing Did objects
        """
        params = self._build_pagination_params(
            page=page,
            per_page=per_page,
            city_id=city_id,
            search=search,
            label=label,
            label_present=label_present,
        )
        response = self._get(Endpoints.MY_DIDS, params=params)
        return self._parse_paginated_response(response, Did)

    def update_destinations(
        self,
        ids: List[int],
        sms_relay_url: Optional[str] = None,
        destinations: Optional[List[Dict[str, Any]]] = None,
    ) -> SuccessResponse:
        """
        Set where calls and messages to DIDs are routed.

        Args:
            ids: DID IDs to update, at least one
            sms_relay_url: URL receiving inbound SMS
            destinations: Routing destinations, each with ``destination``,
                ``transport`` (see ``DidTransport``), ``trunk_id`` and an
                optional ``priority``

        Returns:
            SuccessResponse
        """
        payload = self._validate(
            UpdateDestinationsPayload,
            ids=ids,
            sms_relay_url=sms_relay_url,
            destinations=destinations,
        )
        response = self._post(Endpoints.MY_DIDS_UPDATE_DESTINATIONS, json=payload)
        return self._decode(SuccessResponse, response)

    def upload_document(
        self,
        did_ids: List[str],
        file: Union[bytes, IO[bytes]],
        file_name: str,
        doc_id: Union[DidDocumentType, int],
    ) -> SuccessResponse:
        """
        Upload a document required by DIDs.

        Args:
            did_ids: DID IDs the document applies to, at least one
            file: Document content, as bytes or a readable binary stream
            file_name: Document file name
            doc_id: Document type

        Returns:
            SuccessResponse
        """
        payload = self._validate(
            UploadDocumentPayload,
            did_ids=did_ids,
            file=file,
            file_name=file_name,
            doc_id=doc_id,
        )
        return self._client.upload(
            Endpoints.MY_DIDS_PAPERS,
            file_key=DOCUMENT_FILE_KEY,
            file_name=payload.file_name,
            file=payload.file,
            fields={
                "did_ids": ",".join(payload.did_ids),
                "doc_id": str(int(payload.doc_id)),
            },
        )

    def return_to_stock(self, ids: List[str]) -> SuccessResponse:
        """
        Release DIDs from the account.

        Args:
            ids: DID IDs to release

        Returns:
            SuccessResponse
        """
        response = self._delete(Endpoints.MY_DIDS, params={"ids[]": [str(i) for i in ids]})
        return self._decode(SuccessResponse, response)
