from fastapi import APIRouter

from deteksi.models.countries import Country, CountryProfile
from deteksi.services import countries as countries_service

router = APIRouter(prefix="/api/countries", tags=["countries"])


@router.get("/search")
def search_countries(name: str) -> list[Country]:
    return countries_service.search_countries(name)


@router.get("/profile")
def country_profiles(name: str) -> list[CountryProfile]:
    return countries_service.search_profiles(name)
