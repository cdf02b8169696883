import asyncio
from unittest.mock import patch

import httpx
import pytest

from cep_weather.exceptions.lookup import AddressNotFoundError, LookupServiceError
from cep_weather.models.address.address import AddressRecord
from tests.conftest import ADDRESS_BASE_URL, make_response


class TestAddressService:
    """Test cases for the AddressService class."""

    @pytest.mark.asyncio
    async def test_get_address_success(self, address_service, mock_http_client, address_payload):
        """Test successful address lookup."""
        url = f"{ADDRESS_BASE_URL}/json/01001000"
        mock_http_client.get.return_value = make_response(200, url, address_payload)

        result = await address_service.get_address("01001000")

        assert isinstance(result, AddressRecord)
        assert result.code == "01001000"
        assert result.city == "São Paulo"
        assert result.district == "Sé"
        assert result.lat == "-23.5"
        assert result.has_coordinates()

        mock_http_client.get.assert_called_once()
        assert mock_http_client.get.call_args[0][0] == url

    @pytest.mark.asyncio
    async def test_get_address_accepts_code_field(self, address_service, mock_http_client):
        """Test payloads carrying ``code`` instead of ``cep``."""
        url = f"{ADDRESS_BASE_URL}/json/01001000"
        mock_http_client.get.return_value = make_response(
            200, url, {"code": "01001-000", "city": "São Paulo", "lat": -23.5, "lng": -46.6}
        )

        result = await address_service.get_address("01001000")

        assert result.code == "01001-000"
        assert result.lat == -23.5

    @pytest.mark.asyncio
    async def test_get_address_not_found(self, address_service, mock_http_client):
        """Test address lookup with 404 response."""
        url = f"{ADDRESS_BASE_URL}/json/00000000"
        mock_http_client.get.return_value = make_response(404, url, {"code": "not_found"})

        with pytest.raises(AddressNotFoundError, match="CEP não encontrado"):
            await address_service.get_address("00000000")

    @pytest.mark.asyncio
    async def test_get_address_server_error_is_not_found(self, address_service, mock_http_client):
        """Any non-success status is treated as not found."""
        url = f"{ADDRESS_BASE_URL}/json/01001000"
        mock_http_client.get.return_value = make_response(503, url, text="unavailable")

        with pytest.raises(AddressNotFoundError):
            await address_service.get_address("01001000")

    @pytest.mark.asyncio
    async def test_get_address_empty_code(self, address_service, mock_http_client):
        """Test that an empty code is rejected without a request."""
        with pytest.raises(AddressNotFoundError):
            await address_service.get_address("")

        mock_http_client.get.assert_not_called()

    @pytest.mark.asyncio
    async def test_get_address_timeout(self, address_service, mock_http_client):
        """Test that a timeout surfaces as a lookup error."""
        mock_http_client.get.side_effect = httpx.ReadTimeout("Timeout")

        with pytest.raises(LookupServiceError, match="Tempo esgotado") as exc_info:
            await address_service.get_address("01001000")

        assert exc_info.value.kind == "unknown_failure"
        assert mock_http_client.get.call_count == 1

    @pytest.mark.asyncio
    async def test_get_address_connection_error(self, address_service, mock_http_client):
        """Test transport errors."""
        mock_http_client.get.side_effect = httpx.ConnectError("Connection refused")

        with pytest.raises(LookupServiceError, match="Erro ao consultar dados"):
            await address_service.get_address("01001000")

    @pytest.mark.asyncio
    async def test_get_address_invalid_json(self, address_service, mock_http_client):
        """Test a success status with a body that is not JSON."""
        url = f"{ADDRESS_BASE_URL}/json/01001000"
        mock_http_client.get.return_value = make_response(200, url, text="<html>oops</html>")

        with pytest.raises(LookupServiceError) as exc_info:
            await address_service.get_address("01001000")

        assert not isinstance(exc_info.value, AddressNotFoundError)

    @pytest.mark.asyncio
    async def test_get_address_unexpected_payload(self, address_service, mock_http_client):
        """Test a JSON body that is not an address object."""
        url = f"{ADDRESS_BASE_URL}/json/01001000"
        mock_http_client.get.return_value = make_response(200, url, ["not", "an", "object"])

        with pytest.raises(LookupServiceError, match="Erro ao consultar dados"):
            await address_service.get_address("01001000")

    @pytest.mark.asyncio
    async def test_get_address_follows_redirect(self, address_service, address_payload):
        """Test that a redirect to the canonical URL is followed before the status check."""
        requested_paths = []

        def handler(request: httpx.Request) -> httpx.Response:
            requested_paths.append(request.url.path)
            if request.url.path == "/json/01001000":
                return httpx.Response(301, headers={"Location": "/json/01001000/"})
            return httpx.Response(200, json=address_payload)

        transport = httpx.MockTransport(handler)
        real_client_class = httpx.AsyncClient

        with patch('httpx.AsyncClient', side_effect=lambda **kwargs: real_client_class(transport=transport, **kwargs)) \
                as mock_client_class:
            result = await address_service.get_address("01001000")

        assert result.city == "São Paulo"
        assert requested_paths == ["/json/01001000", "/json/01001000/"]
        assert mock_client_class.call_args[1]["follow_redirects"] is True

    @pytest.mark.asyncio
    async def test_get_address_overall_time_limit(self, address_service, mock_http_client):
        """Test that a response slower than the overall limit is cut off."""
        address_service.request_timeout = 0.01

        async def slow_get(url, params=None):
            await asyncio.sleep(1)

        mock_http_client.get.side_effect = slow_get

        with pytest.raises(LookupServiceError, match="Tempo esgotado ao consultar endereço"):
            await address_service.get_address("01001000")
