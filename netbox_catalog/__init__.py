"""
AINetBox Catalog Package.

Tool schemas, the category enumeration, the pure filter/sort/paginate query
pipeline and the curated seed data.
"""

from netbox_catalog.categories import ToolCategory, parse_category_filter
from netbox_catalog.query import SortKey, run_query
from netbox_catalog.schemas import CatalogPage, Tool, ToolCreate

__all__ = [
    "CatalogPage",
    "SortKey",
    "Tool",
    "ToolCategory",
    "ToolCreate",
    "parse_category_filter",
    "run_query",
]
