from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from cep_weather.models.address.address import AddressRecord
from cep_weather.services.address_service import AddressService
from cep_weather.services.lookup_orchestrator import LookupOrchestrator
from cep_weather.services.weather_service import WeatherService

ADDRESS_BASE_URL = "https://cep.example.test"
WEATHER_BASE_URL = "https://weather.example.test"


def make_response(status_code: int, url: str, json_data=None, text: str = "") -> httpx.Response:
    """Build a real httpx response for the mocked client to return."""
    request = httpx.Request("GET", url)
    if json_data is not None:
        return httpx.Response(status_code, json=json_data, request=request)
    return httpx.Response(status_code, text=text, request=request)


def _fresh_service(service_class, module_path, mock_config):
    """Build a new singleton of ``service_class`` against ``mock_config``, restoring the original afterwards."""
    original = service_class._instances.pop(service_class, None)
    with patch(f'{module_path}.config', mock_config), \
            patch('cep_weather.services.base_service.config', mock_config):
        service = service_class()
    yield service
    service_class._instances.pop(service_class, None)
    if original is not None:
        service_class._instances[service_class] = original


@pytest.fixture
def mock_config():
    """Mock config with test upstream URLs and short timeouts."""
    mock_config = MagicMock()
    mock_config.address_base_url = ADDRESS_BASE_URL
    mock_config.weather_base_url = WEATHER_BASE_URL
    mock_config.request_timeout = 2.0
    mock_config.connect_timeout = 1.0
    return mock_config


@pytest.fixture
def address_service(mock_config):
    yield from _fresh_service(AddressService, 'cep_weather.services.address_service', mock_config)


@pytest.fixture
def weather_service(mock_config):
    yield from _fresh_service(WeatherService, 'cep_weather.services.weather_service', mock_config)


@pytest.fixture
def orchestrator(address_service, weather_service):
    """Orchestrator wired to the test service instances."""
    orchestrator = LookupOrchestrator()
    with patch.object(orchestrator, 'address_service', address_service), \
            patch.object(orchestrator, 'weather_service', weather_service):
        yield orchestrator


@pytest.fixture
def mock_http_client():
    """Patch httpx.AsyncClient; configure ``get`` on the yielded client mock."""
    with patch('httpx.AsyncClient') as mock_client_class:
        mock_client = AsyncMock()
        mock_client_class.return_value.__aenter__.return_value = mock_client
        yield mock_client


@pytest.fixture
def address_payload():
    """Address service payload for CEP 01001-000."""
    return {
        "cep": "01001000",
        "address_type": "Praça",
        "address_name": "da Sé",
        "address": "Praça da Sé",
        "state": "SP",
        "district": "Sé",
        "lat": "-23.5",
        "lng": "-46.6",
        "city": "São Paulo",
        "city_ibge": "3550308",
        "ddd": "11",
    }


@pytest.fixture
def forecast_payload():
    """Forecast service payload with two hourly temperatures."""
    return {
        "latitude": -23.5,
        "longitude": -46.625,
        "timezone": "GMT",
        "hourly_units": {"time": "iso8601", "temperature_2m": "°C"},
        "hourly": {
            "time": ["2024-05-01T00:00", "2024-05-01T01:00"],
            "temperature_2m": [21.4, 22.0],
        },
    }


@pytest.fixture
def sample_address_record(address_payload):
    return AddressRecord.model_validate(address_payload)
