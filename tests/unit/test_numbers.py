"""Unit tests for number management: catalogue, cart, DIDs, validation and E911."""

import io
import json

import httpx
import pytest


ADDRESS = {
    "location": "Suite 100",
    "street_number": "1600",
    "street": "Pennsylvania Ave NW",
    "city": "Washington",
    "state": "DC",
    "zip_code": "20500",
    "zip_plus_four": "0003",
}


class TestBuyResource:
    """Tests for the DID catalogue."""

    def test_get_countries(self, client, api):
        """Test listing countries."""
        api.get("/v1/buy/countries").mock(
            return_value=httpx.Response(
                200,
                json={"countries": [{"id": 1, "name": "United States", "has_provinces_or_states": True}]},
            )
        )

        countries = client.buy.get_countries()

        assert countries[0].name == "United States"
        assert countries[0].has_provinces_or_states is True

    def test_get_regions(self, client, api):
        """Test listing regions of a country."""
        api.get("/v1/buy/countries/1/regions").mock(
            return_value=httpx.Response(200, json={"regions": [{"id": 12, "name": "Texas"}]})
        )

        assert client.buy.get_regions(1)[0].id == 12

    def test_get_cities(self, client, api):
        """Test listing cities of a country and of a region."""
        api.get("/v1/buy/countries/1/cities").mock(
            return_value=httpx.Response(200, json={"cities": [{"id": 5, "area_code": 212, "name": "New York"}]})
        )
        api.get("/v1/buy/countries/1/regions/12/cities").mock(
            return_value=httpx.Response(200, json={"cities": [{"id": 6, "area_code": 512, "name": "Austin"}]})
        )

        assert client.buy.get_country_cities(1)[0].area_code == 212
        assert client.buy.get_region_cities(1, 12)[0].name == "Austin"

    def test_empty_list(self, client, api):
        """Test a response without the list key."""
        api.get("/v1/buy/countries").mock(return_value=httpx.Response(200, json={}))

        assert client.buy.get_countries() == []

    def test_get_available_dids(self, client, api):
        """Test listing DIDs for sale."""
        route = api.get("/v1/buy/countries/1/cities/5/dids").mock(
            return_value=httpx.Response(
                200,
                json={
                    "dids": [{"id": 900, "number": "12125550100", "monthly_fee": "1.00"}],
                    "pagination": {"current_page": 1, "per_page": 25, "total": 30, "total_pages": 2},
                },
            )
        )

        page = client.buy.get_available_dids(1, 5, page=1, per_page=25, text_enabled_only=True)

        assert page.items[0].number == "12125550100"
        assert page.pagination.total == 30
        assert page.has_more is True
        params = route.calls.last.request.url.params
        assert params["page"] == "1"
        assert params["text_enabled_only"] == "true"
        assert "type_filter" not in params


class TestCartResource:
    """Tests for the cart."""

    def test_get_content(self, client, api):
        """Test reading the cart."""
        api.get("/v1/buy/cart").mock(
            return_value=httpx.Response(
                200,
                json={
                    "dids": [{"id": 900, "number": "12125550100", "require_docs": ["address"]}],
                    "doc_types": [{"id": 2, "name": "address", "title": "Proof of address"}],
                },
            )
        )

        cart = client.cart.get_content()

        assert cart.dids[0].require_docs == ["address"]
        assert cart.doc_types[0].title == "Proof of address"

    def test_add_dids(self, client, api):
        """Test adding DIDs to the cart."""
        route = api.put("/v1/buy/cart").mock(
            return_value=httpx.Response(200, json=[{"id": 900}, {"id": 901}])
        )

        dids = client.cart.add_dids([900, "901"])

        assert [d.id for d in dids] == [900, 901]
        assert json.loads(route.calls.last.request.content) == {"ids": ["900", "901"]}

    def test_checkout(self, client, api):
        """Test checking out the cart."""
        route = api.post("/v1/buy/cart/checkout").mock(
            return_value=httpx.Response(200, json={"success": True})
        )

        assert client.cart.checkout(["900"]).success is True
        assert json.loads(route.calls.last.request.content) == {"ids": ["900"]}

    def test_checkout_insufficient_funds(self, client, api):
        """Test a refused checkout."""
        from wavix import APIError

        api.post("/v1/buy/cart/checkout").mock(
            return_value=httpx.Response(402, json={"success": False, "message": "Insufficient funds"})
        )

        with pytest.raises(APIError, match="Insufficient funds"):
            client.cart.checkout(["900"])


class TestDidsResource:
    """Tests for account DIDs."""

    def test_list(self, client, api):
        """Test listing DIDs with filters."""
        route = api.get("/v1/mydids").mock(
            return_value=httpx.Response(
                200,
                json={
                    "items": [
                        {
                            "id": 1,
                            "number": "12025550100",
                            "sms_enabled": True,
                            "destination": [{"id": 3, "destination": "12025550111", "transport": 4}],
                        }
                    ],
                    "pagination": {"current_page": 1, "per_page": 10, "total": 1, "total_pages": 1},
                },
            )
        )

        page = client.dids.list(per_page=10, search="202")

        assert len(page) == 1
        did = list(page)[0]
        assert did.destination[0].transport == 4
        assert page.has_more is False
        params = route.calls.last.request.url.params
        assert params["search"] == "202"
        assert "page" not in params

    def test_update_destinations(self, client, api):
        """Test routing DIDs."""
        from wavix import DidTransport

        route = api.post("/v1/mydids/update-destinations").mock(
            return_value=httpx.Response(200, json={"success": True})
        )

        client.dids.update_destinations(
            ids=[1, 2],
            destinations=[
                {"destination": "12025550111", "transport": DidTransport.PSTN, "trunk_id": 7, "priority": 1}
            ],
        )

        assert json.loads(route.calls.last.request.content) == {
            "ids": [1, 2],
            "destinations": [
                {"destination": "12025550111", "transport": 4, "trunk_id": 7, "priority": 1}
            ],
        }

    def test_update_destinations_requires_ids(self, client, api):
        """Test at least one DID is required."""
        from wavix import ValidationError

        with pytest.raises(ValidationError) as exc_info:
            client.dids.update_destinations(ids=[])

        assert "ids" in exc_info.value.field_errors

    def test_upload_document(self, client, api):
        """Test uploading a DID document."""
        from wavix import DidDocumentType

        route = api.post("/v1/mydids/papers").mock(
            return_value=httpx.Response(200, json={"success": True})
        )

        result = client.dids.upload_document(
            did_ids=["1", "2"],
            file=io.BytesIO(b"%PDF-1.4"),
            file_name="lease.pdf",
            doc_id=DidDocumentType.ADDRESS,
        )

        assert result.success is True
        content = route.calls.last.request.content
        assert b'name="doc_attachment"; filename="lease.pdf"' in content
        assert b"1,2" in content
        assert b'name="doc_id"\r\n\r\n2' in content

    def test_upload_document_invalid(self, client, api):
        """Test upload input is checked first."""
        from wavix import ValidationError

        route = api.post("/v1/mydids/papers")

        with pytest.raises(ValidationError):
            client.dids.upload_document(did_ids=[], file=b"x", file_name="", doc_id=9)

        assert not route.called

    def test_return_to_stock(self, client, api):
        """Test releasing DIDs."""
        route = api.delete("/v1/mydids").mock(
            return_value=httpx.Response(200, json={"success": True})
        )

        client.dids.return_to_stock([1, 2])

        params = route.calls.last.request.url.params
        assert params.get_list("ids[]") == ["1", "2"]
        assert params["appid"] == "test-appid"


class TestNumberValidationResource:
    """Tests for number validation."""

    def test_validate_single(self, client, api):
        """Test validating one number."""
        route = api.get("/v1/validation").mock(
            return_value=httpx.Response(
                200,
                json={"phone_number": "12025550100", "valid": True, "number_type": "mobile"},
            )
        )

        result = client.number_validation.validate_single("+12025550100", "analysis")

        assert result.valid is True
        params = route.calls.last.request.url.params
        assert params["phone_number"] == "+12025550100"
        assert params["type"] == "analysis"

    def test_validate_batch(self, client, api):
        """Test validating several numbers."""
        route = api.post("/v1/validation").mock(
            return_value=httpx.Response(
                200,
                json={
                    "status": "completed",
                    "count": 2,
                    "pending": 0,
                    "items": [{"phone_number": "1", "valid": True}, {"phone_number": "2"}],
                },
            )
        )

        batch = client.number_validation.validate_batch(["1", "2"], "format")

        assert batch.count == 2
        assert batch.items[1].valid is False
        assert json.loads(route.calls.last.request.content) == {
            "phone_numbers": ["1", "2"],
            "type": "format",
            "async": False,
        }

    def test_validate_batch_async(self, client, api):
        """Test starting a background validation and reading its result."""
        route = api.post("/v1/validation").mock(
            return_value=httpx.Response(200, json={"request_uuid": "req-1"})
        )
        api.get("/v1/validation/req-1").mock(
            return_value=httpx.Response(200, json={"status": "pending", "count": 2, "pending": 2})
        )

        request = client.number_validation.validate_batch_async(["1", "2"], "format")
        result = client.number_validation.get_validation_result(request.request_uuid)

        assert json.loads(route.calls.last.request.content)["async"] is True
        assert result.pending == 2
        assert result.items == []


class TestE911Resource:
    """Tests for E911 records."""

    def test_list(self, client, api):
        """Test listing E911 records."""
        route = api.get("/v1/e911-records").mock(
            return_value=httpx.Response(
                200,
                json={
                    "items": [{"phone_number": "12025550100", "name": "Jane", "address": ADDRESS}],
                    "pagination": {"current_page": 1, "per_page": 25, "total": 1, "total_pages": 1},
                },
            )
        )

        page = client.e911.list(phone_number="12025550100")

        assert page.items[0].address.city == "Washington"
        assert route.calls.last.request.url.params["phone_number"] == "12025550100"

    def test_validate_address(self, client, api):
        """Test checking an address with a model instance."""
        from wavix import E911Address

        route = api.post("/v1/e911-records/validate-address").mock(
            return_value=httpx.Response(
                200,
                json={"status": 1, "number": "12025550100", "corrected_address": dict(ADDRESS, street="PENNSYLVANIA AVE NW")},
            )
        )

        check = client.e911.validate_address("12025550100", "Jane", E911Address(**ADDRESS))

        assert check.corrected_address.street == "PENNSYLVANIA AVE NW"
        body = json.loads(route.calls.last.request.content)
        assert body["address"] == ADDRESS
        assert body["name"] == "Jane"

    def test_create_incomplete_address(self, client, api):
        """Test every address field is required."""
        from wavix import ValidationError

        with pytest.raises(ValidationError) as exc_info:
            client.e911.create("12025550100", "Jane", dict(ADDRESS, zip_plus_four=""))

        assert list(exc_info.value.field_errors) == ["address.zip_plus_four"]

    def test_create(self, client, api):
        """Test registering an address."""
        api.post("/v1/e911-records").mock(return_value=httpx.Response(201, json={"success": True}))

        assert client.e911.create("12025550100", "Jane", ADDRESS).success is True

    def test_delete(self, client, api):
        """Test removing a record."""
        route = api.delete("/v1/e911-records").mock(
            return_value=httpx.Response(200, json={"success": True})
        )

        client.e911.delete("12025550100")

        assert route.calls.last.request.url.params["phone_number"] == "12025550100"
