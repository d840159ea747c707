"""Filters for property search criteria."""

from propspotter.filters.criteria import (
    AMENITY_FEATURES,
    PROPERTY_TYPE_MATCHES,
    CriteriaFilter,
    count_active_filters,
    filter_properties,
    matches_criteria,
)

__all__ = [
    "AMENITY_FEATURES",
    "PROPERTY_TYPE_MATCHES",
    "CriteriaFilter",
    "count_active_filters",
    "filter_properties",
    "matches_criteria",
]
