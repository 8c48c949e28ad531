"""SQLAlchemy Async Models.

Driver: asyncpg in production, aiosqlite for tests and local runs.
JSON columns become JSONB on Postgres.
"""

from sqlalchemy import JSON, Boolean, Column, Integer, Text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import declarative_base

Base = declarative_base()

JSONType = JSON().with_variant(JSONB(), "postgresql")


class UserRecord(Base):
    """Site user (username/password pair)."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(Text, nullable=False, unique=True)
    password = Column(Text, nullable=False)


class ToolRecord(Base):
    """Catalog entry for one AI tool."""

    __tablename__ = "tools"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    category = Column(Text, nullable=False, index=True)  # text, image, audio, video, code, data
    image_url = Column(Text, nullable=False)
    rating = Column(Integer, nullable=False, default=0)  # 0-500 (4.8 stars = 480)
    tags = Column(JSONType, nullable=False, default=list)
    features = Column(JSONType, nullable=False, default=list)
    use_cases = Column(JSONType, nullable=False, default=list)  # [{title, description, icon, iconColor}]
    is_featured = Column(Boolean, nullable=False, default=False)
    is_popular = Column(Boolean, nullable=False, default=False)
    website_url = Column(Text)
    api_url = Column(Text)
    icon = Column(Text, nullable=False, default="brain")
    icon_color = Column(Text, nullable=False, default="blue")
    updated_at = Column(Text, nullable=False)  # ISO-8601 string
