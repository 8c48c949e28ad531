"""Tool categories.

The stored enumeration has no "all" member: an absent filter (``None``) means
unfiltered. The ``all`` wildcard is only understood at the HTTP boundary by
``parse_category_filter``.
"""

from enum import Enum

from netbox_catalog.exceptions import InvalidCategoryError

WILDCARD = "all"


class ToolCategory(str, Enum):
    """Fixed classification a tool belongs to."""

    TEXT = "text"
    IMAGE = "image"
    AUDIO = "audio"
    VIDEO = "video"
    CODE = "code"
    DATA = "data"


def category_values(include_wildcard: bool = False) -> list[str]:
    values = [category.value for category in ToolCategory]
    if include_wildcard:
        values.append(WILDCARD)
    return values


def parse_category_filter(value: str | None) -> ToolCategory | None:
    """Turn a raw ``category`` query parameter into a filter.

    Missing, empty and ``"all"`` all mean no filter. Matching is exact and
    case-sensitive.

    Raises:
        InvalidCategoryError: value is not a known category
    """
    if not value or value == WILDCARD:
        return None

    try:
        return ToolCategory(value)
    except ValueError:
        raise InvalidCategoryError(
            f"Invalid category. Must be one of: {', '.join(category_values(include_wildcard=True))}"
        ) from None


def category_label(category: ToolCategory | str) -> str:
    """Display label, e.g. ``"image"`` -> ``"Image"``."""
    value = category.value if isinstance(category, ToolCategory) else str(category)
    return value[:1].upper() + value[1:]
