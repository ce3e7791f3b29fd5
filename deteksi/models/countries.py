from pydantic import BaseModel


class CountryName(BaseModel):
    common: str
    official: str = ""


class CountryFlags(BaseModel):
    png: str = ""
    svg: str = ""
    alt: str | None = None


class Currency(BaseModel):
    name: str = ""
    symbol: str = ""


class CapitalInfo(BaseModel):
    latlng: list[float] | None = None


class PostalCode(BaseModel):
    format: str | None = None
    regex: str | None = None


class CoatOfArms(BaseModel):
    png: str | None = None
    svg: str | None = None


class Country(BaseModel):
    name: CountryName
    flags: CountryFlags
    latlng: list[float]
    population: int = 0
    area: float = 0
    region: str = ""
    subregion: str = ""
    capital: list[str] | None = None
    timezones: list[str] = []
    languages: dict[str, str] | None = None
    currencies: dict[str, Currency] | None = None
    independent: bool | None = None
    un_member: bool | None = None
    status: str | None = None
    landlocked: bool | None = None
    borders: list[str] | None = None
    fifa: str | None = None
    continents: list[str] | None = None
    start_of_week: str | None = None
    capital_info: CapitalInfo | None = None
    postal_code: PostalCode | None = None
    gini: dict[str, float] | None = None
    coat_of_arms: CoatOfArms | None = None


class CountryProfile(BaseModel):
    """A country plus the Indonesian display strings derived from it."""
    country: Country
    coordinates: str
    latitude: str = "Tidak tersedia"
    longitude: str = "Tidak tersedia"
    capital_coordinates: str | None = None
    capital_decimal: str | None = None
    population: str
    population_category: str
    area: str
    area_category: str
    density: str | None = None
    development_status: str = ""
    government_type: str
    history: str
    sectors: list[str]
