import logging
import math
from urllib.parse import quote

import requests

from deteksi.config import get_settings
from deteksi.data.country_notes import COUNTRY_HISTORIES, DEFAULT_HISTORY, GOVERNMENT_TYPES
from deteksi.exceptions import IntegrationError, NotFoundError, RateLimitError
from deteksi.http_client import get_session
from deteksi.models.countries import (
    CapitalInfo,
    CoatOfArms,
    Country,
    CountryFlags,
    CountryName,
    CountryProfile,
    Currency,
    PostalCode,
)

logger = logging.getLogger(__name__)

COUNTRY_FIELDS = (
    "name,official,capital,region,subregion,population,area,borders,languages,"
    "currencies,timezones,latlng,landlocked,independent,unMember,status,flags,"
    "coatOfArms,capitalInfo,postalCode,startOfWeek,continents,gini,fifa"
)

NOT_FOUND_MESSAGE = (
    "Negara tidak ditemukan. Coba gunakan nama negara dalam bahasa Inggris "
    "(contoh: Indonesia, Singapore, Malaysia)"
)
CONNECTION_MESSAGE = "Terjadi kesalahan saat mengambil data negara. Periksa koneksi internet Anda."
INVALID_DATA_MESSAGE = "Data negara tidak valid atau tidak lengkap"

_ID_SEPARATORS = str.maketrans(",.", ".,")


def _handle_response(resp: requests.Response) -> list:
    if resp.status_code == 404:
        raise NotFoundError(NOT_FOUND_MESSAGE)
    if resp.status_code == 429:
        raise RateLimitError("Terlalu banyak permintaan. Silakan tunggu sebentar dan coba lagi.")
    if resp.status_code != 200:
        logger.error("REST Countries HTTP error %d: %s", resp.status_code, resp.text[:200])
        raise IntegrationError(CONNECTION_MESSAGE)
    try:
        data = resp.json()
    except ValueError as exc:
        raise IntegrationError(INVALID_DATA_MESSAGE) from exc
    if not isinstance(data, list):
        raise IntegrationError(INVALID_DATA_MESSAGE)
    return data


def is_valid_record(item: dict) -> bool:
    """A usable record has a common name, flags and coordinates."""
    name = item.get("name") or {}
    return bool(name.get("common")) and item.get("flags") is not None and item.get("latlng") is not None


def _parse_country(item: dict) -> Country:
    name = item["name"]
    flags = item.get("flags") or {}
    currencies = item.get("currencies")
    capital_info = item.get("capitalInfo")
    postal_code = item.get("postalCode")
    coat_of_arms = item.get("coatOfArms")
    return Country(
        name=CountryName(common=name["common"], official=name.get("official", "")),
        flags=CountryFlags(png=flags.get("png", ""), svg=flags.get("svg", ""), alt=flags.get("alt")),
        latlng=item.get("latlng") or [],
        population=item.get("population") or 0,
        area=item.get("area") or 0,
        region=item.get("region", ""),
        subregion=item.get("subregion", ""),
        capital=item.get("capital"),
        timezones=item.get("timezones") or [],
        languages=item.get("languages"),
        currencies={
            code: Currency(name=c.get("name", ""), symbol=c.get("symbol", ""))
            for code, c in currencies.items()
        } if currencies else None,
        independent=item.get("independent"),
        un_member=item.get("unMember"),
        status=item.get("status"),
        landlocked=item.get("landlocked"),
        borders=item.get("borders"),
        fifa=item.get("fifa") or None,
        continents=item.get("continents"),
        start_of_week=item.get("startOfWeek"),
        capital_info=CapitalInfo(latlng=capital_info.get("latlng")) if capital_info else None,
        postal_code=PostalCode(format=postal_code.get("format"), regex=postal_code.get("regex"))
        if postal_code else None,
        gini=item.get("gini") or None,
        coat_of_arms=CoatOfArms(png=coat_of_arms.get("png"), svg=coat_of_arms.get("svg"))
        if coat_of_arms else None,
    )


def search_countries(name: str) -> list[Country]:
    """Search REST Countries by (partial) English name.

    A blank name returns an empty list without calling the API.
    """
    if not name or not name.strip():
        return []
    base = get_settings().restcountries_base
    url = f"{base}/name/{quote(name.strip(), safe='')}"
    try:
        resp = get_session().get(url, params={"fields": COUNTRY_FIELDS}, timeout=15)
    except requests.RequestException as exc:
        logger.error("REST Countries request failed: %s", exc)
        raise IntegrationError(CONNECTION_MESSAGE) from exc

    records = [item for item in _handle_response(resp) if isinstance(item, dict) and is_valid_record(item)]
    if not records:
        raise IntegrationError(INVALID_DATA_MESSAGE)
    return [_parse_country(item) for item in records]


# --- Display helpers ---

def _js_round(value: float) -> int:
    return int(math.floor(value + 0.5))


def convert_to_dms(decimal: float, is_latitude: bool) -> str:
    """Decimal degrees to degrees/minutes/seconds with Indonesian hemisphere codes."""
    absolute = abs(decimal)
    degrees = math.floor(absolute)
    minutes = math.floor((absolute - degrees) * 60)
    seconds = _js_round(((absolute - degrees) * 60 - minutes) * 60)
    if is_latitude:
        direction = "LU" if decimal >= 0 else "LS"  # Lintang Utara / Lintang Selatan
    else:
        direction = "BT" if decimal >= 0 else "BB"  # Bujur Timur / Bujur Barat
    return f"{degrees}° {minutes}′ {seconds}″ {direction}"


def format_coordinates(latlng: list[float] | None) -> str:
    if not latlng or len(latlng) < 2:
        return "Koordinat tidak tersedia"
    return f"{convert_to_dms(latlng[0], True)}, {convert_to_dms(latlng[1], False)}"


def format_decimal_degrees(value: float | None) -> str:
    """Six-place decimal degrees as shown next to the DMS coordinates."""
    if value is None:
        return "Tidak tersedia"
    return f"{value:.6f}"


def format_number_id(value: float) -> str:
    """Format a number with Indonesian separators: 1.234.567,89"""
    if float(value).is_integer():
        text = f"{int(value):,}"
    else:
        text = f"{value:,.3f}".rstrip("0").rstrip(".")
    return text.translate(_ID_SEPARATORS)


def format_population(population: int | None) -> str:
    if not population:
        return "Data tidak tersedia"
    return format_number_id(population)


def population_category(population: int) -> str:
    if population > 100_000_000:
        return "Negara Berpenduduk Sangat Besar (>100 juta)"
    if population > 50_000_000:
        return "Negara Berpenduduk Besar (50-100 juta)"
    if population > 10_000_000:
        return "Negara Berpenduduk Menengah (10-50 juta)"
    if population > 1_000_000:
        return "Negara Berpenduduk Kecil (1-10 juta)"
    return "Negara Berpenduduk Sangat Kecil (<1 juta)"


def area_category(area: float) -> str:
    if area > 1_000_000:
        return "Negara Sangat Luas (>1 juta km²)"
    if area > 100_000:
        return "Negara Luas (100rb-1jt km²)"
    if area > 10_000:
        return "Negara Menengah (10rb-100rb km²)"
    return "Negara Kecil (<10rb km²)"


def development_status(country: Country) -> str:
    if country.independent is False:
        return "Wilayah Dependensi/Teritorial"
    if country.un_member:
        return "Anggota Perserikatan Bangsa-Bangsa"
    return ""


def government_type(country: Country) -> str:
    known = GOVERNMENT_TYPES.get(country.name.common)
    if known:
        return known
    if country.independent is False:
        return "Wilayah Dependensi"
    return "Sistem Pemerintahan (Memerlukan penelitian lebih lanjut)"


def country_history(common_name: str) -> dict:
    return COUNTRY_HISTORIES.get(common_name, DEFAULT_HISTORY)


def build_profile(country: Country) -> CountryProfile:
    """Derive the Indonesian display strings for the country detail view."""
    density = None
    if country.area:
        density = format_number_id(_js_round(country.population / country.area))
    latlng = country.latlng or []
    capital_coordinates = capital_decimal = None
    capital_latlng = country.capital_info.latlng if country.capital_info else None
    if capital_latlng and len(capital_latlng) >= 2:
        capital_coordinates = format_coordinates(capital_latlng)
        capital_decimal = (
            f"({format_decimal_degrees(capital_latlng[0])}°, "
            f"{format_decimal_degrees(capital_latlng[1])}°)"
        )
    notes = country_history(country.name.common)
    return CountryProfile(
        country=country,
        coordinates=format_coordinates(country.latlng),
        latitude=format_decimal_degrees(latlng[0] if len(latlng) > 0 else None),
        longitude=format_decimal_degrees(latlng[1] if len(latlng) > 1 else None),
        capital_coordinates=capital_coordinates,
        capital_decimal=capital_decimal,
        population=format_population(country.population),
        population_category=population_category(country.population),
        area=format_number_id(country.area),
        area_category=area_category(country.area),
        density=density,
        development_status=development_status(country),
        government_type=government_type(country),
        history=notes["history"],
        sectors=list(notes["sectors"]),
    )


def search_profiles(name: str) -> list[CountryProfile]:
    return [build_profile(country) for country in search_countries(name)]
