"""Shared pytest fixtures."""

import os
from collections.abc import Callable, Iterator
from datetime import date
from typing import Any

import pytest
import structlog
from hypothesis import HealthCheck, settings

from propspotter.config import Settings
from propspotter.models import Agent, Property, SearchCriteria

# Hypothesis settings profiles for different environments
settings.register_profile("fast", max_examples=25)
settings.register_profile(
    "ci",
    max_examples=200,
    suppress_health_check=[HealthCheck.too_slow],
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "fast"))


@pytest.fixture(autouse=True)
def _isolate_settings_from_dotenv(monkeypatch: pytest.MonkeyPatch) -> None:
    """Prevent the local .env file from leaking into test Settings instances."""
    monkeypatch.setattr(
        Settings,
        "model_config",
        {**Settings.model_config, "env_file": None},
    )


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    """Undo any configure_logging() call so log capture sees every level."""
    yield
    structlog.reset_defaults()


def build_property(**overrides: Any) -> Property:
    """Build a Property with sensible defaults, overriding any field."""
    fields: dict[str, Any] = {
        "id": 1,
        "title": "2 Bedroom Apartment in Bandra",
        "description": "Bright apartment close to the station.",
        "type": "Apartment",
        "price": 5_000_000,
        "address": "12, Bandra",
        "city": "Mumbai",
        "state": "MH",
        "zip_code": "400050",
        "beds": 2,
        "baths": 1,
        "square_feet": 900,
        "features": frozenset({"Parking", "Gym"}),
    }
    fields.update(overrides)
    return Property(**fields)


@pytest.fixture
def make_property() -> Callable[..., Property]:
    """Factory fixture for properties with overridable fields."""
    return build_property


@pytest.fixture
def sample_property() -> Property:
    """A fully populated listing."""
    return Property(
        id=42,
        title="3 Bedroom Villa in Whitefield",
        description="Modern villa with a private garden and pool.",
        type="Villa",
        price=25_000_000,
        address="7, Whitefield",
        city="Bangalore",
        state="KA",
        zip_code="560066",
        beds=3,
        baths=3,
        square_feet=2000,
        features=frozenset({"Swimming Pool", "Garden", "Security System"}),
        listed_date=date(2026, 10, 1),
        year_built=2015,
        image="https://picsum.photos/seed/42/800/600",
        agent=Agent(name="Agent Nair", phone="+91 9876543210", email="agent7@propspotter.in"),
    )


@pytest.fixture
def catalogue(make_property: Callable[..., Property]) -> list[Property]:
    """A small mixed catalogue covering every predicate."""
    return [
        make_property(
            id=1,
            title="2 Bedroom Apartment in Bandra",
            description="Modern flat with a rooftop garden.",
            type="Apartment",
            price=6_000_000,
            city="Mumbai",
            address="12, Bandra",
            beds=2,
            baths=2,
            square_feet=950,
            features=frozenset({"Parking", "Elevator"}),
        ),
        make_property(
            id=2,
            title="4 Bedroom Villa in Koramangala",
            description="Spacious villa, classic interiors.",
            type="Villa",
            price=40_000_000,
            city="Bangalore",
            state="KA",
            zip_code="560034",
            address="8, Koramangala",
            beds=4,
            baths=3,
            square_feet=2400,
            features=frozenset({"Swimming Pool", "Garden", "Parking", "Security System"}),
        ),
        make_property(
            id=3,
            title="1 Bedroom Flat in Powai",
            description="Compact flat near the lake.",
            type="Flat",
            price=3_500_000,
            city="Mumbai",
            address="301, Powai",
            beds=1,
            baths=1,
            square_feet=550,
            features=frozenset({"Gym"}),
        ),
        make_property(
            id=4,
            title="3 Bedroom Penthouse in Jubilee Hills",
            description="Modern penthouse with a terrace garden.",
            type="Penthouse",
            price=60_000_000,
            city="Hyderabad",
            state="TL",
            zip_code="500033",
            address="1, Jubilee Hills",
            beds=3,
            baths=3,
            square_feet=2200,
            features=frozenset({"Swimming Pool", "Gym", "Elevator", "Parking"}),
        ),
        make_property(
            id=5,
            title="2 Bedroom Row House in Salt Lake",
            description="Quiet row house.",
            type="Row House",
            price=8_000_000,
            city="Kolkata",
            state="WB",
            zip_code="700091",
            address="55, Salt Lake",
            beds=2,
            baths=1,
            square_feet=1200,
            features=frozenset({"Storage"}),
        ),
    ]


@pytest.fixture
def default_search_criteria() -> SearchCriteria:
    """Criteria as submitted by the form with only a location filled in."""
    return SearchCriteria(location="Mumbai", price_range=(0, 10_000_000))
