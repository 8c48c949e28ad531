"""API Endpoint Tests.

Run against the in-memory sample catalog (13 tools).
"""

import pytest

from apps.catalog_api.deps import get_tool_store
from apps.catalog_api.main import app
from netbox_catalog.exceptions import StoreUnavailableError


def test_root_endpoint(client):
    """Test root endpoint returns API info."""
    response = client.get("/")
    assert response.status_code == 200
    assert "AINetBox" in response.json()["name"]


def test_healthz_returns_200(client):
    """Test liveness probe."""
    response = client.get("/healthz")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_readyz_returns_ready(client):
    """Test readiness probe."""
    response = client.get("/readyz")
    assert response.status_code == 200
    assert response.json()["checks"]["database"] == "ok"


def test_metrics_exposed(client):
    """Test Prometheus metrics endpoint."""
    client.get("/api/featured-tools")
    response = client.get("/metrics")
    assert response.status_code == 200
    assert "text/plain" in response.headers["content-type"]
    assert "catalog_requests_total" in response.text


# ============================================================================
# /api/tools
# ============================================================================


def test_list_tools_requires_identity_header(client):
    response = client.get("/api/tools")
    assert response.status_code == 401
    assert response.json() == {"message": "Authentication required"}


def test_list_tools_auth_checked_before_category(client):
    response = client.get("/api/tools", params={"category": "bogus"})
    assert response.status_code == 401


def test_list_tools_blank_identity_header_rejected(client, settings):
    response = client.get("/api/tools", headers={settings.AUTH_USER_HEADER: "  "})
    assert response.status_code == 401


def test_list_tools_returns_all_in_id_order(client, auth_headers):
    response = client.get("/api/tools", headers=auth_headers)
    assert response.status_code == 200
    tools = response.json()
    assert len(tools) == 13
    assert [tool["id"] for tool in tools] == list(range(1, 14))


def test_list_tools_uses_camel_case_fields(client, auth_headers):
    tool = client.get("/api/tools", headers=auth_headers).json()[0]
    for field in ("imageUrl", "isFeatured", "isPopular", "useCases", "iconColor", "updatedAt"):
        assert field in tool
    assert "image_url" not in tool
    assert "iconColor" in tool["useCases"][0]


def test_list_tools_by_category(client, auth_headers):
    response = client.get("/api/tools", params={"category": "image"}, headers=auth_headers)
    assert response.status_code == 200
    names = [tool["name"] for tool in response.json()]
    assert names == ["NeuralPainter", "SketchMind"]


def test_list_tools_category_all_means_unfiltered(client, auth_headers):
    response = client.get("/api/tools", params={"category": "all"}, headers=auth_headers)
    assert response.status_code == 200
    assert len(response.json()) == 13


def test_list_tools_invalid_category(client, auth_headers):
    response = client.get("/api/tools", params={"category": "Image"}, headers=auth_headers)
    assert response.status_code == 400
    assert response.json()["message"].startswith("Invalid category. Must be one of:")


# ============================================================================
# /api/tools/search
# ============================================================================


def test_search_is_public_and_case_insensitive(client):
    response = client.get("/api/tools/search", params={"q": "VIDEO"})
    assert response.status_code == 200
    names = {tool["name"] for tool in response.json()}
    assert {"VideoGenius", "VideoMaster"} <= names


def test_search_matches_tags(client):
    response = client.get("/api/tools/search", params={"q": "chatbot"})
    assert [tool["name"] for tool in response.json()] == ["ChatGenius"]


def test_search_no_match_is_empty_list(client):
    response = client.get("/api/tools/search", params={"q": "zzz-no-such-tool"})
    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.parametrize("params", [{}, {"q": ""}, {"q": "   "}])
def test_search_requires_query(client, params):
    response = client.get("/api/tools/search", params=params)
    assert response.status_code == 400
    assert response.json() == {"message": "Search query is required"}


# ============================================================================
# /api/tools/{id}
# ============================================================================


def test_get_tool_by_id(client):
    response = client.get("/api/tools/1")
    assert response.status_code == 200
    assert response.json()["name"] == "NeuralPainter"


def test_get_tool_not_found(client):
    response = client.get("/api/tools/999")
    assert response.status_code == 404
    assert response.json() == {"message": "Tool not found"}


@pytest.mark.parametrize("raw_id", ["abc", "0", "-3", "12abc", "1.5", "²", "٣"])
def test_get_tool_invalid_id(client, raw_id):
    response = client.get(f"/api/tools/{raw_id}")
    assert response.status_code == 400
    assert response.json() == {"message": "Invalid tool ID"}


# ============================================================================
# FEATURED / POPULAR
# ============================================================================


def test_featured_tools(client):
    response = client.get("/api/featured-tools")
    assert response.status_code == 200
    assert [tool["name"] for tool in response.json()] == ["NeuralPainter", "LinguaGenius", "SonicSynth"]
    assert all(tool["isFeatured"] for tool in response.json())


def test_popular_tools(client):
    response = client.get("/api/popular-tools")
    assert response.status_code == 200
    names = [tool["name"] for tool in response.json()]
    assert names == ["CodeAssist", "VideoGenius", "DataSense", "TranslatePro"]


# ============================================================================
# /api/catalog and /api/categories
# ============================================================================


def test_catalog_default_page(client):
    response = client.get("/api/catalog")
    assert response.status_code == 200
    body = response.json()
    assert body["page"] == 1
    assert body["pageSize"] == 6
    assert body["total"] == 13
    assert body["pageCount"] == 3
    assert body["pages"] == [1, 2, 3]
    assert len(body["items"]) == 6
    # Popular tools get a +100 bonus so they lead the default sort
    assert body["items"][0]["name"] == "CodeAssist"


def test_catalog_search_overrides_category(client):
    response = client.get("/api/catalog", params={"q": "audio", "category": "code"})
    assert response.status_code == 200
    names = {tool["name"] for tool in response.json()["items"]}
    assert "SonicSynth" in names
    assert "CodeAssist" not in names


def test_catalog_sort_a_z(client):
    response = client.get("/api/catalog", params={"sort": "a-z", "page_size": 13})
    names = [tool["name"] for tool in response.json()["items"]]
    assert names == sorted(names, key=str.casefold)


def test_catalog_page_past_end_is_empty(client):
    response = client.get("/api/catalog", params={"page": 9})
    assert response.status_code == 200
    assert response.json()["items"] == []


@pytest.mark.parametrize(
    "params",
    [
        {"sort": "cheapest"},
        {"category": "music"},
        {"page": 0},
        {"page": "two"},
        {"page_size": 0},
        {"page_size": 1000},
    ],
)
def test_catalog_rejects_bad_parameters(client, params):
    response = client.get("/api/catalog", params=params)
    assert response.status_code == 400
    assert "message" in response.json()


def test_categories(client):
    response = client.get("/api/categories")
    assert response.status_code == 200
    assert response.json()[0] == {"value": "text", "label": "Text"}
    assert [item["value"] for item in response.json()] == ["text", "image", "audio", "video", "code", "data"]


# ============================================================================
# STORAGE FAILURES
# ============================================================================


class BrokenStore:
    async def get_featured(self):
        raise StoreUnavailableError("connection refused")

    async def ping(self):
        raise StoreUnavailableError("connection refused")


def test_store_failure_returns_generic_500(client):
    app.dependency_overrides[get_tool_store] = lambda: BrokenStore()
    response = client.get("/api/featured-tools")
    assert response.status_code == 500
    assert response.json() == {"message": "Failed to retrieve featured tools"}


def test_readyz_reports_unavailable_store(client):
    app.dependency_overrides[get_tool_store] = lambda: BrokenStore()
    response = client.get("/readyz")
    assert response.status_code == 503
    assert response.json()["checks"]["database"] == "failed"
