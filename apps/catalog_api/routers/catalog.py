"""
/api Router - Catalog Browsing.

Endpoints:
- GET /api/catalog: Filter, sort and paginate in one call
- GET /api/categories: Category enumeration with display labels
"""

from fastapi import APIRouter, Depends, Query

from apps.catalog_api.deps import get_settings, get_tool_store
from apps.catalog_api.telemetry import observe_endpoint, record_results
from netbox_catalog.categories import ToolCategory, category_label, parse_category_filter
from netbox_catalog.exceptions import InvalidQueryError
from netbox_catalog.query import parse_sort_key, run_query
from netbox_catalog.schemas import CatalogPage, CategoryInfo
from netbox_config.settings import Settings
from netbox_store.stores import ToolStore

router = APIRouter()


@router.get("/catalog", response_model=CatalogPage)
async def browse_catalog(
    category: str | None = Query(None),
    q: str | None = Query(None, description="Search term; overrides category"),
    sort: str | None = Query(None, description="popularity, rating, newest or a-z"),
    page: int = Query(1),
    page_size: int | None = Query(None),
    store: ToolStore = Depends(get_tool_store),
    settings: Settings = Depends(get_settings),
):
    """
    One page of the catalog.

    Query parameters:
    - category: Category filter ("all" or omitted for every tool)
    - q: Search term; when non-blank the category is ignored
    - sort: Sort key (default: popularity)
    - page: 1-based page number (default: 1)
    - page_size: Tools per page (default: CATALOG_PAGE_SIZE)

    A page past the end returns an empty ``items`` list, not an error.
    """
    with observe_endpoint("catalog"):
        size = page_size if page_size is not None else settings.CATALOG_PAGE_SIZE
        if size > settings.CATALOG_MAX_PAGE_SIZE:
            raise InvalidQueryError(f"page_size must be at most {settings.CATALOG_MAX_PAGE_SIZE}")

        # Validate everything before touching the store
        sort_key = parse_sort_key(sort)
        category_filter = parse_category_filter(category)

        if q is not None and q.strip():
            tools = await store.search(q)
        else:
            tools = await store.get_all(category_filter)

        result = run_query(tools, sort_key=sort_key, page=page, page_size=size)

    record_results("catalog", len(result.items))
    return result


@router.get("/categories", response_model=list[CategoryInfo])
async def list_categories():
    return [CategoryInfo(value=category.value, label=category_label(category)) for category in ToolCategory]
