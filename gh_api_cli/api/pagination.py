"""Collect bounded result lists from paginated endpoints."""

import logging
import math
from dataclasses import dataclass, field
from typing import Callable, List, TypeVar

from ..config import MAX_PAGE_SIZE

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class PageRequest:
    """One page to fetch.

    items_per_page is the page size sent upstream (it fixes page offsets);
    items_needed is how many items this page should contribute.
    """

    page_number: int
    items_per_page: int
    items_needed: int


@dataclass
class PageResult:
    items: List = field(default_factory=list)
    is_last_page: bool = False


def collect(
    limit: int,
    fetch_page: Callable[[PageRequest], List[T]],
    page_size: int = MAX_PAGE_SIZE,
) -> List[T]:
    """
    Fetch pages until limit items are gathered or upstream runs dry.

    Args:
        limit: Maximum number of items to return
        fetch_page: Fetches one page; items are expected in upstream order
        page_size: Preferred page size, capped at 100

    Returns:
        Up to limit items, in upstream order
    """
    if limit <= 0:
        return []

    per_page = min(page_size, MAX_PAGE_SIZE, limit)
    total_pages = math.ceil(limit / per_page)
    items: List[T] = []

    for page_number in range(1, total_pages + 1):
        is_final_page = page_number == total_pages
        items_needed = limit - len(items) if is_final_page else per_page
        if items_needed <= 0:
            break

        request = PageRequest(
            page_number=page_number,
            items_per_page=per_page,
            items_needed=items_needed,
        )
        page_items = list(fetch_page(request))[:items_needed]
        result = PageResult(
            items=page_items,
            is_last_page=is_final_page or len(page_items) < items_needed,
        )
        items.extend(result.items)

        if result.is_last_page:
            if len(page_items) < items_needed:
                logger.debug(
                    "Page %d returned %d of %d items; upstream exhausted",
                    page_number,
                    len(page_items),
                    items_needed,
                )
            break

    return items
