import pytest
from unittest.mock import MagicMock

from fastapi.testclient import TestClient

from deteksi.config import Settings


# --- Canned API responses ---

INDONESIA_RECORD = {
    "name": {"common": "Indonesia", "official": "Republic of Indonesia"},
    "flags": {
        "png": "https://flagcdn.com/w320/id.png",
        "svg": "https://flagcdn.com/id.svg",
        "alt": "The flag of Indonesia",
    },
    "latlng": [-5.0, 120.0],
    "population": 275501339,
    "area": 1904569.0,
    "region": "Asia",
    "subregion": "South-Eastern Asia",
    "capital": ["Jakarta"],
    "timezones": ["UTC+07:00", "UTC+08:00", "UTC+09:00"],
    "languages": {"ind": "Indonesian"},
    "currencies": {"IDR": {"name": "Indonesian rupiah", "symbol": "Rp"}},
    "independent": True,
    "unMember": True,
    "landlocked": False,
    "borders": ["TLS", "MYS", "PNG"],
    "fifa": "IDN",
    "continents": ["Asia"],
    "startOfWeek": "monday",
    "capitalInfo": {"latlng": [-6.17, 106.82]},
    "postalCode": {"format": "#####", "regex": "^(\\d{5})$"},
    "gini": {"2019": 38.2},
}

# REST Countries occasionally returns partial records; these must be filtered out.
RECORD_WITHOUT_FLAGS = {"name": {"common": "Nowhere"}, "latlng": [0, 0]}
RECORD_WITHOUT_COORDS = {"name": {"common": "Floatland"}, "flags": {"png": "x.png"}}
RECORD_WITHOUT_NAME = {"flags": {"png": "x.png"}, "latlng": [1, 1]}


@pytest.fixture
def gemini_settings(mocker):
    settings = Settings(
        google_ai_api_key="test-key",
        gemini_model="gemini-test",
        max_retries=3,
        retry_delay_seconds=2.0,
    )
    mocker.patch("deteksi.services.gemini.get_settings", return_value=settings)
    return settings


@pytest.fixture
def mock_genai_client(mocker, gemini_settings):
    """Gemini client whose generate_content is a MagicMock."""
    client = MagicMock()
    mocker.patch("deteksi.services.gemini.genai.Client", return_value=client)
    return client


@pytest.fixture
def mock_sleep(mocker):
    return mocker.patch("deteksi.services.gemini.time.sleep")


@pytest.fixture
def mock_session(mocker):
    session = MagicMock()
    mocker.patch("deteksi.services.countries.get_session", return_value=session)
    return session


def make_response(text):
    resp = MagicMock()
    resp.text = text
    return resp


def make_http_response(status_code, payload=None):
    resp = MagicMock()
    resp.status_code = status_code
    resp.json.return_value = payload
    resp.text = str(payload)
    return resp


@pytest.fixture
def api_client():
    """FastAPI TestClient for router tests."""
    from deteksi.main import api
    return TestClient(api)
