"""Pydantic models for property listings and search criteria."""

from propspotter.models.core import (
    Agent,
    ListingStatus,
    Property,
    PropertyCategory,
    SearchCriteria,
)

__all__ = [
    "Agent",
    "ListingStatus",
    "Property",
    "PropertyCategory",
    "SearchCriteria",
]
