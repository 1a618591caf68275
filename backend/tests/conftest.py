"""
Pytest configuration and shared fixtures for Coverage Hub tests.

Provides mock clients, stores, services, and sample provider payloads.
"""
import pytest
from unittest.mock import AsyncMock, MagicMock

from coverage_hub.utils import background


@pytest.fixture(autouse=True)
def _reset_background_tasks():
    """Forget tasks left over from a previous test's event loop."""
    background._pending.clear()
    yield
    background._pending.clear()


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_settings():
    """Settings object with test defaults (no real credentials)."""
    from coverage_hub.core.config import Settings
    return Settings(
        supabase_url="https://test.supabase.co",
        supabase_service_role_key="test-supabase-key",
        openweather_api_key="test-weather-key",
        weather_api_url="https://weather.test/data/2.5/weather",
        crypto_api_url="https://crypto.test/v1/bpi/currentprice.json",
    )


@pytest.fixture
def unconfigured_settings():
    """Settings with every secret missing."""
    from coverage_hub.core.config import Settings
    return Settings(
        supabase_url=None,
        supabase_service_role_key=None,
        openweather_api_key=None,
    )


# ---------------------------------------------------------------------------
# Clients (mocked)
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_supabase_client():
    """Mocked SupabaseClient connection handle with a chained table builder."""
    client = MagicMock()
    mock_table = MagicMock()
    mock_table.select.return_value = mock_table
    mock_table.insert.return_value = mock_table
    mock_table.order.return_value = mock_table
    mock_table.limit.return_value = mock_table
    mock_table.execute.return_value = MagicMock(data=[], count=0)
    client.client.table.return_value = mock_table
    client.is_configured = True
    client.is_connected = True
    client.state = "connected"
    client.masked_url = "https://test.supabase.co"
    return client


@pytest.fixture
def mock_weather_client(sample_weather_payload):
    client = MagicMock()
    client.fetch_current_weather = AsyncMock(return_value=sample_weather_payload)
    client.has_api_key = True
    return client


@pytest.fixture
def mock_crypto_client(sample_crypto_payload):
    client = MagicMock()
    client.fetch_current_price = AsyncMock(return_value=sample_crypto_payload)
    return client


# ---------------------------------------------------------------------------
# DB Stores (mocked)
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_coverage_store():
    """Mocked CoverageRequestStore."""
    store = MagicMock()
    store.insert_coverage_request = AsyncMock(return_value={"id": 1})
    store.list_recent = AsyncMock(return_value=[])
    store.count = AsyncMock(return_value=0)
    return store


@pytest.fixture
def mock_api_call_store():
    """Mocked ApiCallStore."""
    store = MagicMock()
    store.insert_api_call = AsyncMock(return_value={"id": 1})
    store.list_recent = AsyncMock(return_value=[])
    store.count = AsyncMock(return_value=0)
    return store


# ---------------------------------------------------------------------------
# Sample provider payloads
# ---------------------------------------------------------------------------

@pytest.fixture
def sample_weather_payload():
    """OpenWeatherMap /weather response for a mild day."""
    return {
        "name": "Mumbai",
        "main": {"temp": 29.4, "humidity": 74},
        "weather": [{"main": "Haze", "description": "haze"}],
        "cod": 200,
    }


@pytest.fixture
def sample_crypto_payload():
    """CoinDesk currentprice response below the bull-market threshold."""
    return {
        "time": {"updated": "Oct 19, 2026 06:00:00 UTC"},
        "bpi": {
            "USD": {"code": "USD", "rate": "43,210.5678", "rate_float": 43210.5678},
        },
    }


@pytest.fixture
def valid_form():
    return {
        "name": "Asha Rao",
        "age": 30,
        "city": "Mumbai",
        "annualIncome": 600000,
        "dependents": 2,
    }
