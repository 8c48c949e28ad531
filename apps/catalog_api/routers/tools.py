"""
/api Router - Tool Lookups.

Endpoints:
- GET /api/tools: All tools, optionally by category (requires identity header)
- GET /api/tools/search: Substring search over name, description and tags
- GET /api/tools/{id}: Single tool
- GET /api/featured-tools: Tools flagged featured
- GET /api/popular-tools: Tools flagged popular

Responses use the camelCase wire shape (``imageUrl``, ``isFeatured``, ...).
"""

from fastapi import APIRouter, Depends, HTTPException, Query

from apps.catalog_api.auth import Identity, require_user
from apps.catalog_api.deps import get_tool_store
from apps.catalog_api.telemetry import observe_endpoint, record_results
from netbox_catalog.categories import parse_category_filter
from netbox_catalog.schemas import Tool
from netbox_store.stores import ToolStore, validate_tool_id

router = APIRouter()


@router.get("/tools", response_model=list[Tool])
async def list_tools(
    category: str | None = Query(None, description="text, image, audio, video, code, data or all"),
    user: Identity = Depends(require_user),
    store: ToolStore = Depends(get_tool_store),
):
    """
    List tools ordered by id.

    Anonymous callers get 401 before the category is even looked at.
    """
    with observe_endpoint("tools"):
        tools = await store.get_all(parse_category_filter(category))
    record_results("tools", len(tools))
    return tools


@router.get("/tools/search", response_model=list[Tool])
async def search_tools(
    q: str | None = Query(None, description="Case-insensitive search term"),
    store: ToolStore = Depends(get_tool_store),
):
    with observe_endpoint("search", "Failed to search tools"):
        tools = await store.search(q or "")
    record_results("search", len(tools))
    return tools


@router.get("/tools/{tool_id}", response_model=Tool)
async def get_tool(tool_id: str, store: ToolStore = Depends(get_tool_store)):
    """
    Get one tool.

    The id arrives as a raw path segment so that "abc", "0" and "-3" are
    reported as 400 rather than FastAPI's generic validation error.
    """
    with observe_endpoint("tool", "Failed to retrieve tool"):
        tool = await store.get_by_id(validate_tool_id(tool_id))
        if tool is None:
            raise HTTPException(404, "Tool not found")
    return tool


@router.get("/featured-tools", response_model=list[Tool])
async def featured_tools(store: ToolStore = Depends(get_tool_store)):
    with observe_endpoint("featured_tools", "Failed to retrieve featured tools"):
        tools = await store.get_featured()
    record_results("featured_tools", len(tools))
    return tools


@router.get("/popular-tools", response_model=list[Tool])
async def popular_tools(store: ToolStore = Depends(get_tool_store)):
    with observe_endpoint("popular_tools", "Failed to retrieve popular tools"):
        tools = await store.get_popular()
    record_results("popular_tools", len(tools))
    return tools
