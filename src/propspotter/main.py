"""Command-line entry point: search the sample listings and print one page."""

import argparse
import logging
import sys
from collections.abc import Sequence

from pydantic import ValidationError

from propspotter.config import Settings
from propspotter.filters import AMENITY_FEATURES, count_active_filters
from propspotter.logging import configure_logging, get_logger
from propspotter.models import Property, PropertyCategory, SearchCriteria
from propspotter.pagination import PageResult
from propspotter.sample_data import generate_sample_properties
from propspotter.search import search_properties, suggest_locations, validate_search_form
from propspotter.utils.formatting import format_price

logger = get_logger(__name__)

_CRITERIA_FLAGS = (
    "location",
    "type",
    "min_price",
    "max_price",
    "bedrooms",
    "bathrooms",
    "min_area",
    "keywords",
    "amenity",
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="PropSpotter - search and page through sample property listings"
    )
    parser.add_argument("--location", help="Substring of address, city, state or PIN code")
    parser.add_argument(
        "--type",
        choices=[c.value for c in PropertyCategory],
        help="Property category",
    )
    parser.add_argument("--min-price", type=int, help="Minimum price")
    parser.add_argument("--max-price", type=int, help="Maximum price (0 for no limit)")
    parser.add_argument("--bedrooms", help="Minimum bedrooms")
    parser.add_argument("--bathrooms", help="Minimum bathrooms")
    parser.add_argument("--min-area", help="Minimum area in square feet")
    parser.add_argument("--keywords", help="Words that must all appear in title/description")
    parser.add_argument(
        "--amenity",
        action="append",
        choices=sorted(AMENITY_FEATURES),
        help="Required amenity (repeatable)",
    )
    parser.add_argument(
        "--suggest",
        metavar="QUERY",
        help="Print location suggestions matching QUERY and exit",
    )
    parser.add_argument("--page", type=int, default=1, help="Page number (1-indexed)")
    parser.add_argument("--per-page", type=int, default=None, help="Listings per page")
    parser.add_argument("--count", type=int, default=None, help="Number of sample listings")
    parser.add_argument("--seed", type=int, default=None, help="Seed for sample listings")
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug-level logging for troubleshooting",
    )
    return parser


def criteria_from_args(args: argparse.Namespace, settings: Settings) -> SearchCriteria | None:
    """Build search criteria from CLI flags, or None when no criteria flag was given."""
    if all(getattr(args, flag) is None for flag in _CRITERIA_FLAGS):
        return None

    # The form always submits its price range, prefilled with the defaults.
    default_min, default_max = settings.default_price_range()
    price_range = (
        default_min if args.min_price is None else args.min_price,
        default_max if args.max_price is None else args.max_price,
    )

    return SearchCriteria(
        location=args.location,
        property_type=args.type or PropertyCategory.RESIDENTIAL,
        price_range=price_range,
        bedrooms=args.bedrooms,
        bathrooms=args.bathrooms,
        min_area=args.min_area,
        keywords=args.keywords,
        amenities=frozenset(args.amenity or ()),
    )


def format_property_line(prop: Property) -> str:
    return (
        f"#{prop.id:<4} {prop.title:<45} {format_price(prop.price):>9}  "
        f"{prop.beds}bd/{prop.baths}ba  {prop.square_feet} sqft  {prop.city}"
    )


def render_page(page: PageResult[Property]) -> list[str]:
    """Render a result page as printable lines."""
    if page.meta.total_items == 0:
        return ["No properties found"]
    lines = [format_property_line(p) for p in page.items]
    meta = page.meta
    footer = (
        f"Showing {meta.start_index}-{meta.end_index} of {meta.total_items} "
        f"(page {meta.current_page}/{meta.total_pages})"
    )
    if meta.has_previous:
        footer += f" | prev: --page {meta.current_page - 1}"
    if meta.has_next:
        footer += f" | next: --page {meta.current_page + 1}"
    lines.append(footer)
    return lines


def main(argv: Sequence[str] | None = None) -> None:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = Settings()
    except ValidationError as e:
        configure_logging(json_output=False)
        logger.error("failed_to_load_settings", error=str(e))
        print(f"Error: Failed to load settings. {e}")
        print("Check PROPSPOTTER_* environment variables and your .env file.")
        sys.exit(1)

    configure_logging(
        json_output=settings.log_json,
        level=logging.DEBUG if args.debug else logging.INFO,
    )

    if args.suggest is not None:
        for suggestion in suggest_locations(args.suggest):
            print(suggestion)
        return

    per_page = args.per_page if args.per_page is not None else settings.items_per_page
    if per_page not in settings.get_page_size_options():
        parser.error(f"--per-page must be one of {settings.get_page_size_options()}")

    try:
        criteria = criteria_from_args(args, settings)
    except ValidationError as e:
        parser.error(str(e))

    if criteria is not None:
        errors = validate_search_form(criteria)
        if errors:
            for field, message in errors.items():
                logger.error("invalid_search", field=field, message=message)
                print(f"Error: {message}")
            sys.exit(1)

    properties = generate_sample_properties(
        args.count if args.count is not None else settings.sample_size,
        seed=args.seed if args.seed is not None else settings.sample_seed,
    )
    page = search_properties(properties, criteria, page=args.page, items_per_page=per_page)

    logger.info(
        "search_complete",
        total_properties=len(properties),
        matching=page.meta.total_items,
        active_filters=count_active_filters(criteria),
        page=page.meta.current_page,
    )

    for line in render_page(page):
        print(line)


if __name__ == "__main__":
    main()
