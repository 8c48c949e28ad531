"""Tool Store Tests.

PostgresToolStore runs on a throwaway SQLite file through aiosqlite, so no
database server is needed. MemoryToolStore is checked against the same
expectations.
"""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from netbox_catalog.categories import ToolCategory
from netbox_catalog.exceptions import (
    DuplicateUsernameError,
    InvalidQueryError,
    InvalidToolIdError,
    StoreUnavailableError,
)
from netbox_catalog.schemas import UseCase, UserCreate
from netbox_store.database import create_engine_for_url, create_tables
from netbox_store.stores import MemoryToolStore, PostgresToolStore, ToolStore, validate_tool_id
from tests.conftest import make_tool


@pytest.fixture
async def engine(tmp_path):
    engine = create_engine_for_url(f"sqlite+aiosqlite:///{tmp_path / 'catalog.db'}")
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    """Provide async session factory for tests."""
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture(params=["sql", "memory"])
async def store(request, session_factory):
    """Both store implementations, preloaded with four tools."""
    tools = [
        make_tool("Alpha", category="image", tags=["Art", "pixels"], is_featured=True),
        make_tool("Beta", category="text", is_popular=True),
        make_tool("Gamma", category="image", description="Paints with sound"),
        make_tool("Delta", category="code", is_featured=True, is_popular=True),
    ]
    if request.param == "memory":
        return MemoryToolStore(tools)

    sql_store = PostgresToolStore(session_factory)
    await sql_store.create_many(tools)
    return sql_store


def names(tools):
    return [tool.name for tool in tools]


# ============================================================================
# READS
# ============================================================================


@pytest.mark.asyncio
async def test_store_satisfies_protocol(store):
    assert isinstance(store, ToolStore)


@pytest.mark.asyncio
async def test_get_all_ordered_by_id(store):
    tools = await store.get_all()
    assert names(tools) == ["Alpha", "Beta", "Gamma", "Delta"]
    assert [tool.id for tool in tools] == [1, 2, 3, 4]


@pytest.mark.asyncio
async def test_get_all_by_category(store):
    assert names(await store.get_all(ToolCategory.IMAGE)) == ["Alpha", "Gamma"]
    assert await store.get_all(ToolCategory.DATA) == []


@pytest.mark.asyncio
async def test_get_by_id(store):
    tool = await store.get_by_id(2)
    assert tool is not None
    assert tool.name == "Beta"
    assert await store.get_by_id(99) is None


@pytest.mark.asyncio
async def test_get_by_id_rejects_invalid(store):
    with pytest.raises(InvalidToolIdError):
        await store.get_by_id(0)


@pytest.mark.asyncio
async def test_search(store):
    assert names(await store.search("ART")) == ["Alpha"]
    assert names(await store.search("sound")) == ["Gamma"]
    assert await store.search("nope") == []


@pytest.mark.asyncio
async def test_search_blank_query(store):
    with pytest.raises(InvalidQueryError):
        await store.search("  ")


@pytest.mark.asyncio
async def test_featured_and_popular(store):
    assert names(await store.get_featured()) == ["Alpha", "Delta"]
    assert names(await store.get_popular()) == ["Beta", "Delta"]


@pytest.mark.asyncio
async def test_count_and_ping(store):
    assert await store.count() == 4
    assert await store.ping() is True


# ============================================================================
# WRITES
# ============================================================================


@pytest.mark.asyncio
async def test_create_then_get_round_trip(store):
    payload = make_tool(
        "Epsilon",
        category="video",
        rating=455,
        tags=["clips"],
        features=["Fast export"],
        use_cases=[UseCase(title="Ads", description="Short ads", icon="ad", icon_color="primary")],
        website_url="https://epsilon.example",
    )

    created = await store.create(payload)
    fetched = await store.get_by_id(created.id)

    assert created.id == 5
    assert fetched == created
    assert fetched.model_dump(exclude={"id"}) == payload.model_dump()


@pytest.mark.asyncio
async def test_mutating_a_read_leaves_the_store_unchanged(store):
    tool = await store.get_by_id(1)
    tool.name = "Renamed"
    tool.tags.append("extra")
    (await store.get_all())[0].tags.clear()
    (await store.search("art"))[0].rating = 1

    fresh = await store.get_by_id(1)
    assert fresh.name == "Alpha"
    assert fresh.tags == ["Art", "pixels"]
    assert fresh.rating == tool.rating


@pytest.mark.asyncio
async def test_created_tool_is_detached_from_store(store):
    created = await store.create(make_tool("Epsilon"))
    created.features.append("Injected")
    assert (await store.get_by_id(created.id)).features == []


@pytest.mark.asyncio
async def test_users(store):
    user = await store.create_user(UserCreate(username="ada", password="secret"))
    assert user.id == 1
    assert await store.get_user(user.id) == user
    assert await store.get_user_by_username("ada") == user
    assert await store.get_user_by_username("bob") is None

    with pytest.raises(DuplicateUsernameError):
        await store.create_user(UserCreate(username="ada", password="other"))


# ============================================================================
# FAILURES
# ============================================================================


@pytest.mark.asyncio
async def test_storage_errors_become_store_unavailable(tmp_path):
    # No tables created: every query fails
    engine = create_engine_for_url(f"sqlite+aiosqlite:///{tmp_path / 'empty.db'}")
    store = PostgresToolStore(async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False))
    try:
        with pytest.raises(StoreUnavailableError):
            await store.get_all()
    finally:
        await engine.dispose()


@pytest.mark.parametrize("raw,expected", [(1, 1), ("7", 7), (" 12 ", 12)])
def test_validate_tool_id_accepts(raw, expected):
    assert validate_tool_id(raw) == expected


@pytest.mark.parametrize("raw", [0, -3, "abc", "12abc", "", True, "1.5", "²", "٣", "１２"])
def test_validate_tool_id_rejects(raw):
    with pytest.raises(InvalidToolIdError, match="Invalid tool ID"):
        validate_tool_id(raw)
