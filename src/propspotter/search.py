"""Search form validation and the filter-then-paginate composition."""

import math
from collections.abc import Sequence
from typing import Final

from propspotter.filters import filter_properties
from propspotter.models import Property, SearchCriteria
from propspotter.pagination import PageResult, clamp_page, paginate

LOCATION_SUGGESTIONS: Final = (
    "Mumbai, Maharashtra",
    "Delhi, NCR",
    "Bangalore, Karnataka",
    "Hyderabad, Telangana",
    "Chennai, Tamil Nadu",
    "Kolkata, West Bengal",
    "Pune, Maharashtra",
    "Ahmedabad, Gujarat",
    "Jaipur, Rajasthan",
    "Surat, Gujarat",
)


def suggest_locations(query: str) -> list[str]:
    """Suggestions containing ``query`` (case-insensitive), in list order.

    An empty query shows no suggestions.
    """
    if not query:
        return []
    needle = query.lower()
    return [loc for loc in LOCATION_SUGGESTIONS if needle in loc.lower()]


def validate_search_form(criteria: SearchCriteria) -> dict[str, str]:
    """Return field -> error message for a submitted search; empty when valid."""
    errors: dict[str, str] = {}
    if not criteria.location or not criteria.location.strip():
        errors["location"] = "Location is required"
    return errors


def search_properties(
    properties: Sequence[Property],
    criteria: SearchCriteria | None,
    *,
    page: int = 1,
    items_per_page: int = 8,
) -> PageResult[Property]:
    """Filter ``properties`` and return the requested page of matches.

    The page is clamped into range first, so a stale page number left over
    from a larger result set lands on the last page instead of an empty one.
    """
    matching = filter_properties(properties, criteria)
    items_per_page = max(1, items_per_page)
    total_pages = math.ceil(len(matching) / items_per_page)
    return paginate(matching, clamp_page(page, total_pages), items_per_page)
