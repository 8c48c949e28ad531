"""Tool Store Adapters.

Two interchangeable implementations of the tool repository:

- PostgresToolStore: SQLAlchemy async ORM over the ``tools``/``users`` tables
- MemoryToolStore: process-local dicts, preloaded with sample tools for
  development and API tests

Both expose the same async surface (see ``ToolStore``). Storage failures are
raised as ``StoreUnavailableError`` and never retried.
"""

from contextlib import contextmanager
from typing import Iterable, Iterator, Protocol, runtime_checkable

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from netbox_catalog.categories import ToolCategory
from netbox_catalog.exceptions import (
    DuplicateUsernameError,
    InvalidQueryError,
    InvalidToolIdError,
    StoreUnavailableError,
)
from netbox_catalog.query import filter_by_category, search_tools
from netbox_catalog.schemas import Tool, ToolCreate, User, UserCreate
from netbox_obs.logging import get_logger
from netbox_obs.metrics import tool_store_errors_total
from netbox_store.models import ToolRecord, UserRecord

logger = get_logger(__name__)


def validate_tool_id(value: int | str) -> int:
    """Coerce a tool id to a positive integer.

    Raises:
        InvalidToolIdError: not an integer, or not > 0
    """
    if isinstance(value, bool):
        raise InvalidToolIdError("Invalid tool ID")
    if isinstance(value, str):
        value = value.strip()
        # isdigit alone accepts characters like "²" that int() rejects
        if not (value.isascii() and value.isdigit()):
            raise InvalidToolIdError("Invalid tool ID")
        value = int(value)
    if not isinstance(value, int) or value < 1:
        raise InvalidToolIdError("Invalid tool ID")
    return value


@runtime_checkable
class ToolStore(Protocol):
    """Tool repository interface."""

    async def get_all(self, category: ToolCategory | None = None) -> list[Tool]:
        """All tools ordered by id; ``None`` means unfiltered."""
        ...

    async def get_by_id(self, tool_id: int) -> Tool | None:
        ...

    async def search(self, query: str) -> list[Tool]:
        ...

    async def get_featured(self) -> list[Tool]:
        ...

    async def get_popular(self) -> list[Tool]:
        ...

    async def create(self, tool: ToolCreate) -> Tool:
        ...

    async def create_many(self, tools: Iterable[ToolCreate]) -> list[Tool]:
        ...

    async def count(self) -> int:
        ...

    async def ping(self) -> bool:
        ...


# ============================================================================
# POSTGRES STORE
# ============================================================================


def _tool_from_row(row: ToolRecord) -> Tool:
    return Tool.model_validate(
        {
            "id": row.id,
            "name": row.name,
            "description": row.description,
            "category": row.category,
            "image_url": row.image_url,
            "rating": row.rating,
            "tags": row.tags or [],
            "features": row.features or [],
            "use_cases": row.use_cases or [],
            "is_featured": row.is_featured,
            "is_popular": row.is_popular,
            "website_url": row.website_url,
            "api_url": row.api_url,
            "icon": row.icon,
            "icon_color": row.icon_color,
            "updated_at": row.updated_at,
        }
    )


def _row_values(tool: ToolCreate) -> dict:
    values = tool.model_dump()
    # Nested use-cases keep the camelCase wire shape inside the JSON column
    values["use_cases"] = [use_case.model_dump(by_alias=True) for use_case in tool.use_cases]
    return values


class PostgresToolStore:
    """SQL storage for catalog tools and users.

    Every call opens its own session; reads never hold a transaction open
    longer than a single statement.
    """

    def __init__(self, session_factory):
        """Initialize store.

        Args:
            session_factory: async_sessionmaker instance
        """
        self.session_factory = session_factory

    @contextmanager
    def _storage_errors(self, operation: str) -> Iterator[None]:
        try:
            yield
        except (SQLAlchemyError, OSError) as exc:
            tool_store_errors_total.labels(operation=operation).inc()
            logger.error("tool_store_error", operation=operation, error=str(exc), exc_type=type(exc).__name__)
            raise StoreUnavailableError(f"Tool store unavailable during {operation}") from exc

    async def _select_tools(self, operation: str, *criteria) -> list[Tool]:
        stmt = select(ToolRecord).where(*criteria).order_by(ToolRecord.id)
        with self._storage_errors(operation):
            async with self.session_factory() as session:
                result = await session.execute(stmt)
                rows = result.scalars().all()
        return [_tool_from_row(row) for row in rows]

    # ------------------------------------------------------------------------
    # TOOL READS
    # ------------------------------------------------------------------------

    async def get_all(self, category: ToolCategory | None = None) -> list[Tool]:
        if category is None:
            return await self._select_tools("get_all")
        return await self._select_tools("get_all", ToolRecord.category == ToolCategory(category).value)

    async def get_by_id(self, tool_id: int) -> Tool | None:
        tool_id = validate_tool_id(tool_id)
        with self._storage_errors("get_by_id"):
            async with self.session_factory() as session:
                row = await session.get(ToolRecord, tool_id)
        return _tool_from_row(row) if row else None

    async def search(self, query: str) -> list[Tool]:
        """Substring search over name, description and tags.

        Matching happens application-side: JSON tag arrays have no portable
        substring operator across Postgres and SQLite.
        """
        if not (query or "").strip():
            raise InvalidQueryError("Search query is required")
        return search_tools(await self._select_tools("search"), query)

    async def get_featured(self) -> list[Tool]:
        return await self._select_tools("get_featured", ToolRecord.is_featured.is_(True))

    async def get_popular(self) -> list[Tool]:
        return await self._select_tools("get_popular", ToolRecord.is_popular.is_(True))

    async def count(self) -> int:
        with self._storage_errors("count"):
            async with self.session_factory() as session:
                result = await session.execute(select(func.count(ToolRecord.id)))
                return int(result.scalar_one())

    # ------------------------------------------------------------------------
    # TOOL WRITES
    # ------------------------------------------------------------------------

    async def create(self, tool: ToolCreate) -> Tool:
        """Insert a tool; the primary key is assigned by the database."""
        with self._storage_errors("create"):
            async with self.session_factory() as session:
                row = ToolRecord(**_row_values(tool))
                session.add(row)
                await session.commit()
                await session.refresh(row)
        logger.debug("tool_created", tool_id=row.id, name=row.name)
        return _tool_from_row(row)

    async def create_many(self, tools: Iterable[ToolCreate]) -> list[Tool]:
        """Insert several tools in one transaction."""
        with self._storage_errors("create_many"):
            async with self.session_factory() as session:
                rows = [ToolRecord(**_row_values(tool)) for tool in tools]
                session.add_all(rows)
                await session.commit()
                for row in rows:
                    await session.refresh(row)
        return [_tool_from_row(row) for row in rows]

    # ------------------------------------------------------------------------
    # USERS
    # ------------------------------------------------------------------------

    async def get_user(self, user_id: int) -> User | None:
        with self._storage_errors("get_user"):
            async with self.session_factory() as session:
                row = await session.get(UserRecord, user_id)
        return User(id=row.id, username=row.username, password=row.password) if row else None

    async def get_user_by_username(self, username: str) -> User | None:
        stmt = select(UserRecord).where(UserRecord.username == username)
        with self._storage_errors("get_user_by_username"):
            async with self.session_factory() as session:
                result = await session.execute(stmt)
                row = result.scalar_one_or_none()
        return User(id=row.id, username=row.username, password=row.password) if row else None

    async def create_user(self, user: UserCreate) -> User:
        with self._storage_errors("create_user"):
            async with self.session_factory() as session:
                row = UserRecord(username=user.username, password=user.password)
                session.add(row)
                try:
                    await session.commit()
                except IntegrityError as exc:
                    await session.rollback()
                    raise DuplicateUsernameError(f"Username already exists: {user.username}") from exc
                await session.refresh(row)
        return User(id=row.id, username=row.username, password=row.password)

    # ------------------------------------------------------------------------
    # HEALTH
    # ------------------------------------------------------------------------

    async def ping(self) -> bool:
        with self._storage_errors("ping"):
            async with self.session_factory() as session:
                result = await session.execute(select(1))
                return result.scalar() == 1


# ============================================================================
# MEMORY STORE
# ============================================================================


class MemoryToolStore:
    """In-process tool store.

    Ids are assigned sequentially from 1. Not shared between processes.
    Reads hand out deep copies; stored records only change through the store.
    """

    def __init__(self, tools: Iterable[ToolCreate] | None = None):
        self._tools: dict[int, Tool] = {}
        self._users: dict[int, User] = {}
        self._next_tool_id = 1
        self._next_user_id = 1
        for tool in tools or []:
            self._insert(tool)

    @classmethod
    def with_sample_tools(cls) -> "MemoryToolStore":
        from netbox_catalog.seed_data import sample_tools

        return cls(sample_tools())

    def _insert(self, tool: ToolCreate) -> Tool:
        stored = Tool.model_validate({**tool.model_dump(), "id": self._next_tool_id})
        self._tools[stored.id] = stored
        self._next_tool_id += 1
        return stored

    @staticmethod
    def _copies(tools: Iterable[Tool]) -> list[Tool]:
        return [tool.model_copy(deep=True) for tool in tools]

    async def get_all(self, category: ToolCategory | None = None) -> list[Tool]:
        return self._copies(filter_by_category(self._tools.values(), category))

    async def get_by_id(self, tool_id: int) -> Tool | None:
        tool = self._tools.get(validate_tool_id(tool_id))
        return tool.model_copy(deep=True) if tool else None

    async def search(self, query: str) -> list[Tool]:
        return self._copies(search_tools(self._tools.values(), query))

    async def get_featured(self) -> list[Tool]:
        return self._copies(tool for tool in self._tools.values() if tool.is_featured)

    async def get_popular(self) -> list[Tool]:
        return self._copies(tool for tool in self._tools.values() if tool.is_popular)

    async def create(self, tool: ToolCreate) -> Tool:
        return self._insert(tool).model_copy(deep=True)

    async def create_many(self, tools: Iterable[ToolCreate]) -> list[Tool]:
        return self._copies([self._insert(tool) for tool in tools])

    async def count(self) -> int:
        return len(self._tools)

    async def get_user(self, user_id: int) -> User | None:
        return self._users.get(user_id)

    async def get_user_by_username(self, username: str) -> User | None:
        return next((user for user in self._users.values() if user.username == username), None)

    async def create_user(self, user: UserCreate) -> User:
        if await self.get_user_by_username(user.username):
            raise DuplicateUsernameError(f"Username already exists: {user.username}")
        stored = User(id=self._next_user_id, username=user.username, password=user.password)
        self._users[stored.id] = stored
        self._next_user_id += 1
        return stored

    async def ping(self) -> bool:
        return True
