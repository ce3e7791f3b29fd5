import base64

import pytest

from deteksi.exceptions import IntegrationError, NotFoundError, ServiceBusyError
from deteksi.services import countries as countries_service
from deteksi.services.gemini import BUSY_MESSAGE
from conftest import INDONESIA_RECORD

JPEG = b"\xff\xd8\xff fake jpeg"


@pytest.fixture
def client(api_client):
    return api_client


@pytest.fixture
def mock_analyze_image(mocker):
    return mocker.patch("deteksi.services.gemini.analyze_image", return_value="Nama: Kelinci")


@pytest.fixture
def mock_analyze_text(mocker):
    return mocker.patch("deteksi.services.gemini.analyze_text", return_value="SENTIMEN: POSITIF")


@pytest.fixture
def mock_generate_text(mocker):
    return mocker.patch("deteksi.services.gemini.generate_text", return_value="Proklamator Indonesia")


class TestHome:
    def test_links_to_every_page(self, client):
        resp = client.get("/")
        assert resp.status_code == 200
        for path in ("/deteksi-hewan", "/deteksi-tumbuhan", "/deteksi-obat",
                     "/deteksi-sejarah", "/deteksi-teks", "/deteksi-negara"):
            assert f'href="{path}"' in resp.text


class TestImagePages:
    @pytest.mark.parametrize("path", ["/deteksi-hewan", "/deteksi-tumbuhan", "/deteksi-obat", "/deteksi-sejarah"])
    def test_form_renders(self, client, path):
        resp = client.get(path)
        assert resp.status_code == 200
        assert 'type="file"' in resp.text

    def test_plant_detection(self, client, mock_analyze_image):
        resp = client.post("/deteksi-tumbuhan", files={"image": ("daun.jpg", JPEG, "image/jpeg")})
        assert resp.status_code == 200
        assert "Nama: Kelinci" in resp.text
        image_b64, prompt, mime_type = mock_analyze_image.call_args.args
        assert image_b64 == base64.b64encode(JPEG).decode()
        assert "Analisis gambar tumbuhan ini" in prompt
        assert mime_type == "image/jpeg"

    def test_medicinal_uses_herbal_prompt(self, client, mock_analyze_image):
        client.post("/deteksi-obat", files={"image": ("daun.jpg", JPEG, "image/jpeg")})
        assert "deteksi obat herbal" in mock_analyze_image.call_args.args[1]

    def test_animal_requires_food(self, client, mock_analyze_image):
        resp = client.post(
            "/deteksi-hewan",
            files={"image": ("kucing.jpg", JPEG, "image/jpeg")},
            data={"food": "   "},
        )
        assert resp.status_code == 200
        assert "Silakan upload gambar dan masukkan jenis makanan!" in resp.text
        mock_analyze_image.assert_not_called()

    def test_animal_with_food(self, client, mock_analyze_image):
        resp = client.post(
            "/deteksi-hewan",
            files={"image": ("kelinci.jpg", JPEG, "image/jpeg")},
            data={"food": "wortel"},
        )
        assert resp.status_code == 200
        assert "MAKANAN: wortel" in mock_analyze_image.call_args.args[1]

    def test_missing_image(self, client, mock_analyze_image):
        resp = client.post("/deteksi-tumbuhan", data={})
        assert resp.status_code == 200
        assert "Silakan upload gambar tumbuhan terlebih dahulu!" in resp.text
        mock_analyze_image.assert_not_called()

    def test_service_error_is_displayed(self, client, mock_analyze_image):
        mock_analyze_image.side_effect = ServiceBusyError(BUSY_MESSAGE)
        resp = client.post("/deteksi-sejarah", files={"image": ("tokoh.jpg", JPEG, "image/jpeg")})
        assert resp.status_code == 200
        assert BUSY_MESSAGE in resp.text


class TestHistorySearch:
    def test_text_search(self, client, mock_generate_text, mock_analyze_text):
        resp = client.post("/deteksi-sejarah/cari", data={"query": "Soekarno"})
        assert resp.status_code == 200
        assert "Proklamator Indonesia" in resp.text
        assert '"Soekarno"' in mock_generate_text.call_args.args[0]
        mock_analyze_text.assert_not_called()

    def test_blank_query_skips_network(self, client, mock_generate_text):
        resp = client.post("/deteksi-sejarah/cari", data={"query": "  "})
        assert "Silakan masukkan nama tokoh atau peristiwa sejarah!" in resp.text
        mock_generate_text.assert_not_called()

    def test_falls_back_to_keyword_analysis(self, client, mock_generate_text, mock_analyze_text):
        mock_generate_text.side_effect = IntegrationError("Gagal mencari informasi sejarah")
        mock_analyze_text.return_value = "KATA KUNCI UTAMA"
        resp = client.post("/deteksi-sejarah/cari", data={"query": "Sumpah Pemuda"})
        assert "KATA KUNCI UTAMA" in resp.text
        prompt, analysis_type = mock_analyze_text.call_args.args
        assert "Sumpah Pemuda" in prompt
        assert analysis_type == "keywords"

    def test_fallback_failure(self, client, mock_generate_text, mock_analyze_text):
        mock_generate_text.side_effect = ServiceBusyError(BUSY_MESSAGE)
        mock_analyze_text.side_effect = IntegrationError("gagal")
        resp = client.post("/deteksi-sejarah/cari", data={"query": "Majapahit"})
        assert resp.status_code == 200
        assert "Maaf, tidak dapat menemukan informasi" in resp.text


class TestTextPage:
    def test_form_lists_analysis_types(self, client):
        resp = client.get("/deteksi-teks")
        assert resp.status_code == 200
        for value in ("sentiment", "language", "keywords", "factargument"):
            assert f'value="{value}"' in resp.text

    def test_analysis(self, client, mock_analyze_text):
        resp = client.post("/deteksi-teks", data={"text": "Saya senang", "analysis_type": "sentiment"})
        assert "SENTIMEN: POSITIF" in resp.text
        mock_analyze_text.assert_called_once_with("Saya senang", "sentiment")

    def test_blank_text_skips_network(self, client, mock_analyze_text):
        resp = client.post("/deteksi-teks", data={"text": " \n ", "analysis_type": "sentiment"})
        assert "Silakan masukkan teks untuk dianalisis!" in resp.text
        mock_analyze_text.assert_not_called()


class TestCountryPage:
    @pytest.fixture
    def indonesia(self):
        return countries_service._parse_country(INDONESIA_RECORD)

    def test_empty_form(self, client, mocker):
        search = mocker.patch("deteksi.services.countries.search_countries")
        resp = client.get("/deteksi-negara")
        assert resp.status_code == 200
        search.assert_not_called()

    def test_results_list(self, client, mocker, indonesia):
        mocker.patch("deteksi.services.countries.search_countries", return_value=[indonesia])
        resp = client.get("/deteksi-negara?q=indo")
        assert "Hasil Pencarian (1 negara ditemukan)" in resp.text
        assert "Republic of Indonesia" in resp.text
        assert "Sektor Unggulan" not in resp.text

    def test_selected_country_detail(self, client, mocker, indonesia):
        mocker.patch("deteksi.services.countries.search_countries", return_value=[indonesia])
        resp = client.get("/deteksi-negara?q=indo&selected=Indonesia")
        assert "5° 0′ 0″ LS, 120° 0′ 0″ BT" in resp.text
        assert "Lintang (Latitude): -5.000000°" in resp.text
        assert "Bujur (Longitude): 120.000000°" in resp.text
        assert "(-6.170000°, 106.820000°)" in resp.text
        assert "275.501.339 jiwa" in resp.text
        assert "Republik Presidensial Demokratis" in resp.text
        assert "Sektor Unggulan" in resp.text

    def test_not_found_message(self, client, mocker):
        mocker.patch(
            "deteksi.services.countries.search_countries",
            side_effect=NotFoundError(countries_service.NOT_FOUND_MESSAGE),
        )
        resp = client.get("/deteksi-negara?q=atlantis")
        assert resp.status_code == 200
        assert "Negara tidak ditemukan" in resp.text
