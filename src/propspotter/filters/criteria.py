"""Property criteria filtering."""

from collections.abc import Callable, Sequence
from typing import Final

from propspotter.logging import get_logger
from propspotter.models import Property, PropertyCategory, SearchCriteria

logger = get_logger(__name__)

# Form category -> substrings accepted in Property.type.
# Categories missing here (residential included) do not constrain.
PROPERTY_TYPE_MATCHES: Final[dict[str, tuple[str, ...]]] = {
    PropertyCategory.APARTMENT: ("Apartment", "Flat", "Penthouse"),
    PropertyCategory.COMMERCIAL: ("Commercial", "Office Space", "Shop", "Retail"),
    PropertyCategory.LAND: ("Land", "Plot"),
}

# Amenity id -> feature label stored on Property.features.
# Unknown ids are ignored (fail-open); kept as-is pending a product decision.
AMENITY_FEATURES: Final[dict[str, str]] = {
    "parking": "Parking",
    "gym": "Gym",
    "pool": "Swimming Pool",
    "security": "Security System",
    "elevator": "Elevator",
    "furnished": "Furnished",
}


def matches_location(prop: Property, criteria: SearchCriteria) -> bool:
    """Case-insensitive substring match against the joined address fields."""
    if not criteria.location or not criteria.location.strip():
        return True
    return criteria.location.lower() in prop.location_text.lower()


def matches_property_type(prop: Property, criteria: SearchCriteria) -> bool:
    """Match the listing type against the form category's accepted substrings."""
    if criteria.property_type == PropertyCategory.RESIDENTIAL:
        return True
    accepted = PROPERTY_TYPE_MATCHES.get(criteria.property_type)
    if accepted is None:
        return True
    return any(name in prop.type for name in accepted)


def matches_price_range(prop: Property, criteria: SearchCriteria) -> bool:
    """Check the price range; an upper bound of 0 means unbounded."""
    if criteria.price_range is None:
        return True
    min_price, max_price = criteria.price_range
    if prop.price < min_price:
        return False
    return not (max_price > 0 and prop.price > max_price)


def matches_rooms(prop: Property, criteria: SearchCriteria) -> bool:
    if criteria.bedrooms is not None and prop.beds < criteria.bedrooms:
        return False
    return not (criteria.bathrooms is not None and prop.baths < criteria.bathrooms)


def matches_min_area(prop: Property, criteria: SearchCriteria) -> bool:
    return criteria.min_area is None or prop.square_feet >= criteria.min_area


def matches_keywords(prop: Property, criteria: SearchCriteria) -> bool:
    """Every whitespace-separated keyword must appear in the title or description."""
    if not criteria.keywords:
        return True
    haystack = prop.search_text.lower()
    return all(token in haystack for token in criteria.keywords.lower().split())


def matches_amenities(prop: Property, criteria: SearchCriteria) -> bool:
    """Every selected amenity must be listed in the property's features."""
    for amenity_id in criteria.amenities:
        feature = AMENITY_FEATURES.get(amenity_id)
        if feature is not None and feature not in prop.features:
            return False
    return True


PREDICATES: Final[tuple[Callable[[Property, SearchCriteria], bool], ...]] = (
    matches_location,
    matches_property_type,
    matches_price_range,
    matches_rooms,
    matches_min_area,
    matches_keywords,
    matches_amenities,
)


def matches_criteria(prop: Property, criteria: SearchCriteria) -> bool:
    """Check a single property against every predicate."""
    return all(predicate(prop, criteria) for predicate in PREDICATES)


def count_active_filters(criteria: SearchCriteria | None) -> int:
    """Count the criteria that can actually exclude a property.

    Unmapped categories, a (0, 0) price range and unknown amenity ids are
    accepted by the form but never constrain, so they are not counted.
    """
    if criteria is None:
        return 0
    price_active = criteria.price_range is not None and any(criteria.price_range)
    return sum(
        1
        for active in [
            bool(criteria.location and criteria.location.strip()),
            criteria.property_type in PROPERTY_TYPE_MATCHES,
            price_active,
            criteria.bedrooms is not None,
            criteria.bathrooms is not None,
            criteria.min_area is not None,
            bool(criteria.keywords and criteria.keywords.split()),
        ]
        if active
    ) + sum(1 for amenity_id in criteria.amenities if amenity_id in AMENITY_FEATURES)


def filter_properties(
    properties: Sequence[Property], criteria: SearchCriteria | None
) -> Sequence[Property]:
    """Filter properties by search criteria, preserving input order.

    Args:
        properties: Properties to filter.
        criteria: Search criteria, or None when no filters are active.

    Returns:
        ``properties`` itself when ``criteria`` is None, otherwise a new list
        holding the matching properties in their original order.
    """
    if criteria is None:
        return properties

    matching = [p for p in properties if matches_criteria(p, criteria)]

    logger.debug(
        "criteria_filter_complete",
        total_properties=len(properties),
        matching=len(matching),
        active_filters=count_active_filters(criteria),
    )

    return matching


class CriteriaFilter:
    """Filter properties by search criteria."""

    def __init__(self, criteria: SearchCriteria | None) -> None:
        """Initialize the criteria filter.

        Args:
            criteria: Search criteria to filter by, or None for no filtering.
        """
        self.criteria = criteria

    def filter_properties(self, properties: Sequence[Property]) -> Sequence[Property]:
        """Filter properties by criteria.

        Args:
            properties: Properties to filter.

        Returns:
            Properties matching the criteria.
        """
        return filter_properties(properties, self.criteria)
