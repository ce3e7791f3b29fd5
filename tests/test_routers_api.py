import pytest

from deteksi.exceptions import (
    AuthenticationError,
    IntegrationError,
    InvalidInputError,
    NotFoundError,
    RateLimitError,
    ServiceBusyError,
)
from deteksi.models.countries import Country, CountryFlags, CountryName
from deteksi.services.gemini import BUSY_MESSAGE, SEARCH_FAILURE_MESSAGE

SAMPLE_COUNTRY = Country(
    name=CountryName(common="Japan", official="Japan"),
    flags=CountryFlags(png="jp.png", svg="jp.svg"),
    latlng=[36.0, 138.0],
    population=125_000_000,
    area=377_930,
)


@pytest.fixture
def client(api_client):
    return api_client


@pytest.fixture
def mock_gemini(mocker):
    mocker.patch("deteksi.routers.gemini.gemini_service")
    return mocker.patch("deteksi.routers.text_search.gemini_service")


@pytest.fixture
def mock_analyze(mocker):
    return mocker.patch("deteksi.routers.gemini.gemini_service")


@pytest.fixture
def mock_countries(mocker):
    return mocker.patch("deteksi.routers.countries.countries_service")


class TestTextSearch:
    def test_returns_result(self, client, mock_gemini):
        mock_gemini.generate_text.return_value = "Soekarno adalah proklamator"
        resp = client.post("/api/text-search", json={"query": "Soekarno", "prompt": "Siapa Soekarno?"})
        assert resp.status_code == 200
        assert resp.json() == {"result": "Soekarno adalah proklamator"}
        mock_gemini.generate_text.assert_called_once_with("Siapa Soekarno?")

    @pytest.mark.parametrize("body", [
        {"query": "Soekarno"},
        {"prompt": "Siapa?"},
        {"query": "  ", "prompt": "Siapa?"},
        {"query": "Soekarno", "prompt": ""},
        {},
    ])
    def test_missing_fields_return_400(self, client, mock_gemini, body):
        resp = client.post("/api/text-search", json=body)
        assert resp.status_code == 400
        assert resp.json() == {"error": "Query dan prompt diperlukan"}
        mock_gemini.generate_text.assert_not_called()

    def test_no_body_returns_400(self, client, mock_gemini):
        resp = client.post("/api/text-search")
        assert resp.status_code == 400
        assert resp.json() == {"error": "Query dan prompt diperlukan"}
        mock_gemini.generate_text.assert_not_called()

    @pytest.mark.parametrize("raw", ["null", "[]", '"Soekarno"'])
    def test_non_object_body_returns_400(self, client, mock_gemini, raw):
        resp = client.post(
            "/api/text-search", content=raw, headers={"Content-Type": "application/json"},
        )
        assert resp.status_code == 400
        assert resp.json() == {"error": "Query dan prompt diperlukan"}
        mock_gemini.generate_text.assert_not_called()

    @pytest.mark.parametrize("body", [
        {"query": 1945, "prompt": "Siapa?"},
        {"query": "Soekarno", "prompt": ["Siapa?"]},
    ])
    def test_non_string_fields_return_400(self, client, mock_gemini, body):
        resp = client.post("/api/text-search", json=body)
        assert resp.status_code == 400
        assert resp.json() == {"error": "Query dan prompt diperlukan"}
        mock_gemini.generate_text.assert_not_called()

    def test_overloaded_returns_503(self, client, mock_gemini):
        mock_gemini.generate_text.side_effect = ServiceBusyError(BUSY_MESSAGE)
        resp = client.post("/api/text-search", json={"query": "x", "prompt": "y"})
        assert resp.status_code == 503
        assert resp.json() == {"error": BUSY_MESSAGE}

    @pytest.mark.parametrize("exc", [
        IntegrationError("boom"),
        RateLimitError("slow down"),
        AuthenticationError("no key"),
    ])
    def test_other_failures_return_500(self, client, mock_gemini, exc):
        mock_gemini.generate_text.side_effect = exc
        resp = client.post("/api/text-search", json={"query": "x", "prompt": "y"})
        assert resp.status_code == 500
        assert resp.json() == {"error": SEARCH_FAILURE_MESSAGE}


class TestAnalyzeImage:
    def test_plant(self, client, mock_analyze):
        mock_analyze.analyze_image.return_value = "Monstera"
        resp = client.post("/api/analyze/image", json={"image_base64": "aGVsbG8=", "kind": "plant"})
        assert resp.status_code == 200
        data = resp.json()
        assert data["analysis"] == "Monstera"
        assert data["kind"] == "plant"
        args = mock_analyze.analyze_image.call_args.args
        assert args[0] == "aGVsbG8="
        assert "Analisis gambar tumbuhan ini" in args[1]
        assert args[2] == "image/jpeg"

    def test_animal_requires_food(self, client, mock_analyze):
        resp = client.post("/api/analyze/image", json={"image_base64": "aGVsbG8=", "kind": "animal"})
        assert resp.status_code == 400
        assert resp.json()["error_code"] == "invalid_input"
        mock_analyze.analyze_image.assert_not_called()

    def test_animal_prompt_includes_food(self, client, mock_analyze):
        mock_analyze.analyze_image.return_value = "Kelinci"
        client.post("/api/analyze/image", json={"image_base64": "aGVsbG8=", "kind": "animal", "food": "wortel"})
        assert "MAKANAN: wortel" in mock_analyze.analyze_image.call_args.args[1]

    def test_unknown_kind_is_422(self, client, mock_analyze):
        resp = client.post("/api/analyze/image", json={"image_base64": "aGVsbG8=", "kind": "car"})
        assert resp.status_code == 422


class TestAnalyzeText:
    def test_forwards_type(self, client, mock_analyze):
        mock_analyze.analyze_text.return_value = "BAHASA: Indonesia"
        resp = client.post("/api/analyze/text", json={"text": "Selamat pagi", "analysis_type": "language"})
        assert resp.status_code == 200
        assert resp.json()["analysis"] == "BAHASA: Indonesia"
        mock_analyze.analyze_text.assert_called_once_with("Selamat pagi", "language")


class TestCountries:
    def test_search(self, client, mock_countries):
        mock_countries.search_countries.return_value = [SAMPLE_COUNTRY]
        resp = client.get("/api/countries/search?name=japan")
        assert resp.status_code == 200
        assert resp.json()[0]["name"]["common"] == "Japan"
        mock_countries.search_countries.assert_called_once_with("japan")

    def test_not_found_returns_404(self, client, mock_countries):
        mock_countries.search_countries.side_effect = NotFoundError("Negara tidak ditemukan")
        resp = client.get("/api/countries/search?name=atlantis")
        assert resp.status_code == 404
        assert resp.json()["error_code"] == "not_found"


class TestExceptionMapping:
    @pytest.mark.parametrize("exc, status", [
        (AuthenticationError("no key"), 401),
        (InvalidInputError("kosong"), 400),
        (RateLimitError("slow"), 429),
        (ServiceBusyError("busy"), 503),
        (IntegrationError("failed"), 500),
    ])
    def test_status_codes(self, client, mock_analyze, exc, status):
        mock_analyze.analyze_text.side_effect = exc
        resp = client.post("/api/analyze/text", json={"text": "halo"})
        assert resp.status_code == status
        assert resp.json()["message"] == str(exc)


class TestStatus:
    def test_reports_gemini_config(self, client):
        resp = client.get("/api/status")
        assert resp.status_code == 200
        assert "model" in resp.json()["gemini"]
