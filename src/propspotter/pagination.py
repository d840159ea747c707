"""Page slicing and display metadata for ordered collections."""

import math
from collections.abc import Sequence
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from propspotter.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class PageMeta(BaseModel):
    """Display metadata for one page.

    ``start_index`` and ``end_index`` are 1-based and inclusive. For an empty
    collection both are 0 and ``total_pages`` is 0.
    """

    model_config = ConfigDict(frozen=True)

    current_page: int = Field(ge=1)
    items_per_page: int = Field(ge=1)
    total_items: int = Field(ge=0)
    total_pages: int = Field(ge=0)
    start_index: int = Field(ge=0)
    end_index: int = Field(ge=0)

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages


class PageResult(BaseModel, Generic[T]):
    """A slice of items plus its metadata."""

    model_config = ConfigDict(frozen=True)

    items: list[T]
    meta: PageMeta


def paginate(items: Sequence[T], current_page: int, items_per_page: int) -> PageResult[T]:
    """Slice ``items`` into the requested page.

    A page past the end yields no items rather than an error, and its
    metadata still follows the usual formulas. Page and page size below 1
    are treated as 1.

    Args:
        items: Ordered items to paginate.
        current_page: 1-indexed page number.
        items_per_page: Maximum items on a page.

    Returns:
        The page slice and its metadata.
    """
    current_page = max(1, current_page)
    items_per_page = max(1, items_per_page)

    total_items = len(items)
    total_pages = math.ceil(total_items / items_per_page)
    start = (current_page - 1) * items_per_page
    end = start + items_per_page
    page_items = list(items[start:end])

    if total_items == 0:
        start_index = end_index = 0
    else:
        start_index = start + 1
        end_index = min(end, total_items)

    logger.debug(
        "page_sliced",
        current_page=current_page,
        items_per_page=items_per_page,
        total_items=total_items,
        returned=len(page_items),
    )

    return PageResult(
        items=page_items,
        meta=PageMeta(
            current_page=current_page,
            items_per_page=items_per_page,
            total_items=total_items,
            total_pages=total_pages,
            start_index=start_index,
            end_index=end_index,
        ),
    )


def clamp_page(page: int, total_pages: int) -> int:
    """Clamp a requested page into ``[1, total_pages]`` (page 1 when empty)."""
    return max(1, min(page, max(total_pages, 1)))
