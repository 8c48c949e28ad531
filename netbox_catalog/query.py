"""Catalog query pipeline.

Turns (tools, category, search query, sort key, page, page size) into one
displayable page:

1. filter: a non-empty search query overrides the category filter
2. sort: stable, ties keep input order
3. paginate: fixed page size, out-of-range pages are empty

Every function here is pure; inputs are never mutated.
"""

import math
import unicodedata
from datetime import datetime, timezone
from enum import Enum
from typing import Iterable, Sequence

from netbox_catalog.categories import ToolCategory
from netbox_catalog.exceptions import InvalidQueryError
from netbox_catalog.schemas import CatalogPage, Tool

DEFAULT_PAGE_SIZE = 6
POPULAR_BONUS = 100


class SortKey(str, Enum):
    POPULARITY = "popularity"
    RATING = "rating"
    NEWEST = "newest"
    A_Z = "a-z"


def parse_sort_key(value: str | SortKey | None) -> SortKey:
    if value is None or value == "":
        return SortKey.POPULARITY
    try:
        return SortKey(value)
    except ValueError:
        raise InvalidQueryError(
            f"Invalid sort key. Must be one of: {', '.join(key.value for key in SortKey)}"
        ) from None


# ============================================================================
# FILTER
# ============================================================================


def _is_blank(query: str | None) -> bool:
    return not (query or "").strip()


def matches_query(tool: Tool, needle: str) -> bool:
    """Case-insensitive substring match on name, description or any tag.

    ``needle`` must already be casefolded.
    """
    return (
        needle in tool.name.casefold()
        or needle in tool.description.casefold()
        or any(needle in tag.casefold() for tag in tool.tags)
    )


def search_tools(tools: Iterable[Tool], query: str | None) -> list[Tool]:
    """Tools whose name, description or tags contain ``query``.

    Raises:
        InvalidQueryError: query is missing or blank
    """
    if _is_blank(query):
        raise InvalidQueryError("Search query is required")
    # Matched as given: surrounding whitespace is part of the term
    needle = query.casefold()
    return [tool for tool in tools if matches_query(tool, needle)]


def filter_by_category(tools: Iterable[Tool], category: ToolCategory | None) -> list[Tool]:
    if category is None:
        return list(tools)
    return [tool for tool in tools if tool.category == category]


def filter_tools(
    tools: Iterable[Tool],
    category: ToolCategory | None = None,
    search_query: str | None = None,
) -> list[Tool]:
    if not _is_blank(search_query):
        return search_tools(tools, search_query)
    return filter_by_category(tools, category)


# ============================================================================
# SORT
# ============================================================================


def popularity_score(tool: Tool) -> int:
    return tool.rating + (POPULAR_BONUS if tool.is_popular else 0)


def parse_timestamp(value: str) -> float | None:
    """Parse an ISO-8601 timestamp to epoch seconds; naive values are UTC."""
    try:
        parsed = datetime.fromisoformat(value)
    except (TypeError, ValueError):
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.timestamp()


def _newest_key(tool: Tool) -> tuple[int, float]:
    # Unparseable timestamps rank below every parseable one
    timestamp = parse_timestamp(tool.updated_at)
    if timestamp is None:
        return (0, 0.0)
    return (1, timestamp)


def collation_key(name: str) -> str:
    """Accent- and case-insensitive key approximating a locale compare."""
    decomposed = unicodedata.normalize("NFKD", name)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.casefold()


def sort_tools(tools: Iterable[Tool], sort_key: str | SortKey = SortKey.POPULARITY) -> list[Tool]:
    """Stable sort by the given key.

    ``sorted(..., reverse=True)`` keeps equal elements in input order, so
    descending orders are stable too.
    """
    key = parse_sort_key(sort_key)

    if key is SortKey.RATING:
        return sorted(tools, key=lambda tool: tool.rating, reverse=True)
    if key is SortKey.NEWEST:
        return sorted(tools, key=_newest_key, reverse=True)
    if key is SortKey.A_Z:
        return sorted(tools, key=lambda tool: (collation_key(tool.name), tool.name))
    return sorted(tools, key=popularity_score, reverse=True)


# ============================================================================
# PAGINATE
# ============================================================================


def _check_page_args(page: int, page_size: int) -> None:
    if page_size < 1:
        raise InvalidQueryError("Page size must be a positive integer")
    if page < 1:
        raise InvalidQueryError("Page must be a positive integer")


def page_count(total: int, page_size: int) -> int:
    if page_size < 1:
        raise InvalidQueryError("Page size must be a positive integer")
    return math.ceil(total / page_size)


def paginate(items: Sequence[Tool], page: int, page_size: int = DEFAULT_PAGE_SIZE) -> list[Tool]:
    """Contiguous slice for a 1-indexed page; empty when out of range."""
    _check_page_args(page, page_size)
    start = (page - 1) * page_size
    return list(items[start:start + page_size])


def page_window(current: int, total: int, edge: int = 2, around: int = 1, max_plain: int = 7) -> list[int | None]:
    """Page links for a pager.

    Up to ``max_plain`` pages are listed in full. Beyond that the first and
    last ``edge`` pages plus ``around`` pages either side of ``current`` are
    kept and each skipped run becomes a single ``None``.
    """
    if total <= 0:
        return []
    if total <= max_plain:
        return list(range(1, total + 1))

    window: list[int | None] = []
    for number in range(1, total + 1):
        visible = (
            number <= edge
            or number > total - edge
            or abs(number - current) <= around
        )
        if visible:
            window.append(number)
        elif window and window[-1] is not None:
            window.append(None)
    return window


# ============================================================================
# PIPELINE
# ============================================================================


def run_query(
    tools: Iterable[Tool],
    category: ToolCategory | None = None,
    search_query: str | None = None,
    sort_key: str | SortKey = SortKey.POPULARITY,
    page: int = 1,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> CatalogPage:
    _check_page_args(page, page_size)

    filtered = filter_tools(tools, category=category, search_query=search_query)
    ordered = sort_tools(filtered, sort_key)
    pages = page_count(len(ordered), page_size)

    return CatalogPage(
        items=paginate(ordered, page, page_size),
        page=page,
        page_size=page_size,
        total=len(ordered),
        page_count=pages,
        pages=page_window(page, pages),
    )
