"""Core property and search models."""

from datetime import date
from enum import StrEnum
from typing import Final

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    HttpUrl,
    NonNegativeInt,
    field_validator,
)
from pydantic.alias_generators import to_camel

# Records arrive with the demo's camelCase keys (zipCode, squareFeet, ...).
_RECORD_CONFIG: Final = ConfigDict(
    frozen=True,
    alias_generator=to_camel,
    populate_by_name=True,
)


class PropertyCategory(StrEnum):
    """Coarse property category offered by the search form."""

    RESIDENTIAL = "residential"
    APARTMENT = "apartment"
    COMMERCIAL = "commercial"
    LAND = "land"


class ListingStatus(StrEnum):
    """Listing status shown on property cards."""

    FOR_SALE = "For Sale"
    UNDER_CONTRACT = "Under Contract"


class Agent(BaseModel):
    """Listing agent contact details."""

    model_config = ConfigDict(frozen=True)

    name: str
    phone: str
    email: str


class Property(BaseModel):
    """A property listing in the in-memory dataset."""

    model_config = _RECORD_CONFIG

    id: int = Field(gt=0)
    title: str
    description: str = ""
    type: str = Field(description="Listing type, e.g. Apartment, Villa, Penthouse")
    price: int = Field(ge=0, description="Asking price in whole currency units")
    address: str
    city: str
    state: str
    zip_code: str
    beds: int = Field(ge=0)
    baths: int = Field(ge=0)
    square_feet: int = Field(gt=0)
    features: frozenset[str] = frozenset()

    # Display-only fields
    status: ListingStatus = ListingStatus.FOR_SALE
    favorite: bool = False
    listed_date: date | None = None
    year_built: int | None = None
    image: HttpUrl | None = None
    agent: Agent | None = None

    @property
    def price_per_sqft(self) -> int:
        """Asking price per square foot, rounded down."""
        return self.price // self.square_feet

    @property
    def location_text(self) -> str:
        """Address fields joined for location search."""
        return f"{self.address} {self.city} {self.state} {self.zip_code}"

    @property
    def search_text(self) -> str:
        """Title and description joined for keyword search."""
        return f"{self.title} {self.description}"


def _parse_optional_int(value: str | None) -> int | None:
    """Parse a string to int, returning None for empty/whitespace/non-numeric values."""
    if value is None:
        return None
    value = value.strip()
    if not value:
        return None
    try:
        return int(value)
    except (ValueError, TypeError):
        return None


class SearchCriteria(BaseModel):
    """Criteria collected by the search form.

    Every field defaults to "no constraint". Numeric thresholds arrive as
    strings from the form; anything that does not parse as an integer is
    dropped rather than rejected.
    """

    model_config = _RECORD_CONFIG

    location: str | None = None
    property_type: str = PropertyCategory.RESIDENTIAL
    # max == 0 means no upper bound; min <= max is deliberately not checked.
    price_range: tuple[NonNegativeInt, NonNegativeInt] | None = None
    bedrooms: int | None = None
    bathrooms: int | None = None
    min_area: int | None = None
    keywords: str | None = None
    amenities: frozenset[str] = frozenset()

    @field_validator("bedrooms", "bathrooms", "min_area", mode="before")
    @classmethod
    def coerce_threshold(cls, v: object) -> int | None:
        if v is None:
            return None
        if isinstance(v, int) and not isinstance(v, bool):
            return v
        return _parse_optional_int(str(v))

    @field_validator("property_type", mode="before")
    @classmethod
    def default_blank_property_type(cls, v: object) -> object:
        if v is None or (isinstance(v, str) and not v.strip()):
            return PropertyCategory.RESIDENTIAL
        return v
