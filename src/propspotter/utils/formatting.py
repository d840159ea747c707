"""Display formatting helpers."""

from typing import Final

CRORE: Final = 10_000_000
LAKH: Final = 100_000
THOUSAND: Final = 1000


def _one_decimal(price: int, unit: int) -> str:
    """Divide by ``unit`` and render one decimal place, rounding halves up."""
    tenths = (price * 10 + unit // 2) // unit
    return f"{tenths // 10}.{tenths % 10}"


def format_price(price: int) -> str:
    """Format a rupee amount in crore/lakh/thousand shorthand.

    >>> format_price(25_000_000)
    '₹2.5Cr'
    >>> format_price(125_000)
    '₹1.3L'
    """
    if price >= CRORE:
        return f"₹{_one_decimal(price, CRORE)}Cr"
    if price >= LAKH:
        return f"₹{_one_decimal(price, LAKH)}L"
    if price >= THOUSAND:
        return f"₹{_one_decimal(price, THOUSAND)}K"
    return f"₹{price}"
