"""Catalog data models (Pydantic).

Attributes are snake_case in Python; the JSON wire format is camelCase
(``imageUrl``, ``useCases``, ``isFeatured``, ...) through alias generation.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from netbox_catalog.categories import ToolCategory

MAX_RATING = 500


class CamelModel(BaseModel):
    """Base model serialising to camelCase and accepting either spelling."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        use_enum_values=True,
    )


class UseCase(CamelModel):
    """One use-case entry shown on the tool detail view."""

    title: str
    description: str
    icon: str
    icon_color: str


class ToolCreate(CamelModel):
    """Tool payload without an id (seed input)."""

    name: str = Field(min_length=1)
    description: str
    category: ToolCategory
    image_url: str
    rating: int = Field(default=0, ge=0, le=MAX_RATING, description="0-500, i.e. 0.0-5.0 stars")
    tags: list[str] = Field(default_factory=list)
    features: list[str] = Field(default_factory=list)
    use_cases: list[UseCase] = Field(default_factory=list)
    is_featured: bool = False
    is_popular: bool = False
    website_url: str | None = None
    api_url: str | None = None
    icon: str = "brain"
    icon_color: str = "blue"
    updated_at: str = Field(description="ISO-8601 timestamp")


class Tool(ToolCreate):
    """Stored tool with its assigned id."""

    id: int = Field(gt=0)


class UserCreate(CamelModel):
    username: str = Field(min_length=1)
    password: str


class User(UserCreate):
    id: int = Field(gt=0)


class CatalogPage(CamelModel):
    """One page of the catalog after filter, sort and paginate."""

    items: list[Tool]
    page: int
    page_size: int
    total: int
    page_count: int
    pages: list[int | None] = Field(
        default_factory=list,
        description="Page links to render; null marks an ellipsis gap",
    )


class CategoryInfo(CamelModel):
    value: str
    label: str


def display_rating(rating: int) -> str:
    """Render a 0-500 rating as stars with one decimal (490 -> "4.9")."""
    return f"{rating / 100:.1f}"
