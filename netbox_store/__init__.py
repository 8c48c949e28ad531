"""
AINetBox Storage Package.

SQLAlchemy models, async engine/session management and the tool stores.
"""

from netbox_store.stores import MemoryToolStore, PostgresToolStore, ToolStore

__all__ = ["MemoryToolStore", "PostgresToolStore", "ToolStore"]
