"""Random sample listings for the demo dataset."""

import random
from datetime import date, timedelta
from typing import Final

from propspotter.logging import get_logger
from propspotter.models import Agent, ListingStatus, Property

logger = get_logger(__name__)

PROPERTY_TYPES: Final = (
    "Apartment",
    "Flat",
    "Villa",
    "Builder Floor",
    "Penthouse",
    "Bungalow",
    "Independent House",
    "Row House",
)
PREMIUM_TYPES: Final = frozenset({"Penthouse", "Villa", "Bungalow"})
CITIES: Final = (
    "Mumbai",
    "Delhi",
    "Bangalore",
    "Hyderabad",
    "Chennai",
    "Kolkata",
    "Pune",
    "Ahmedabad",
    "Jaipur",
    "Gurgaon",
)
NEIGHBORHOODS: Final = (
    "Bandra",
    "Andheri",
    "Powai",
    "Malad",
    "Indiranagar",
    "Koramangala",
    "Whitefield",
    "Jubilee Hills",
    "T Nagar",
    "Salt Lake",
)
STATE_CODES: Final = ("MH", "DL", "KA", "TL", "TN", "WB", "GJ", "RJ")
AGENT_SURNAMES: Final = ("Sharma", "Patel", "Singh", "Gupta", "Kumar", "Verma", "Nair", "Iyer")
FEATURE_VOCABULARY: Final = (
    "Air Conditioning",
    "Swimming Pool",
    "Gym",
    "Parking",
    "Balcony",
    "Garden",
    "Fireplace",
    "Security System",
    "Elevator",
    "Storage",
)

PREMIUM_PRICE_RANGE: Final = (15_000_000, 80_000_000)
STANDARD_PRICE_RANGE: Final = (3_000_000, 15_000_000)
MAX_FEATURES: Final = 5
LISTING_WINDOW_DAYS: Final = 30


def _make_property(rng: random.Random, property_id: int, today: date) -> Property:
    prop_type = rng.choice(PROPERTY_TYPES)
    city = rng.choice(CITIES)
    neighborhood = rng.choice(NEIGHBORHOODS)
    beds = rng.randint(1, 5)
    baths = rng.randint(1, 3)
    square_feet = rng.randint(500, 2499)
    low, high = PREMIUM_PRICE_RANGE if prop_type in PREMIUM_TYPES else STANDARD_PRICE_RANGE

    return Property(
        id=property_id,
        title=f"{beds} Bedroom {prop_type} in {neighborhood}",
        description=(
            f"Beautiful {beds} bedroom {prop_type.lower()} located in the heart of "
            f"{neighborhood}, {city}. This property features {baths} bathrooms and "
            f"approximately {square_feet} square feet of living space."
        ),
        type=prop_type,
        price=rng.randint(low, high),
        address=f"{rng.randint(1, 999)}, {neighborhood}",
        city=city,
        state=rng.choice(STATE_CODES),
        zip_code=str(rng.randint(100000, 189999)),
        beds=beds,
        baths=baths,
        square_feet=square_feet,
        year_built=rng.randint(1950, 2019),
        features=frozenset(rng.sample(FEATURE_VOCABULARY, rng.randint(1, MAX_FEATURES))),
        listed_date=today - timedelta(days=rng.randrange(LISTING_WINDOW_DAYS)),
        status=ListingStatus.FOR_SALE if rng.random() > 0.2 else ListingStatus.UNDER_CONTRACT,
        favorite=rng.random() > 0.8,
        image=f"https://picsum.photos/seed/{property_id}/800/600",
        agent=Agent(
            name=f"Agent {rng.choice(AGENT_SURNAMES)}",
            phone=f"+91 {rng.randint(1_000_000_000, 9_999_999_999)}",
            email=f"agent{rng.randint(1, 99)}@propspotter.in",
        ),
    )


def generate_sample_properties(
    count: int = 100,
    *,
    seed: int | None = None,
    today: date | None = None,
) -> list[Property]:
    """Generate a list of random property listings.

    Args:
        count: Number of listings; ids run from 1 to ``count``.
        seed: Seed for a private RNG, making the output reproducible.
        today: Reference date for ``listed_date`` (defaults to today).

    Returns:
        Freshly generated listings in id order.
    """
    rng = random.Random(seed)
    today = today or date.today()
    properties = [_make_property(rng, i, today) for i in range(1, count + 1)]
    logger.debug("sample_properties_generated", count=len(properties), seed=seed)
    return properties
