"""
AINetBox Applications Package.

Contains:
- catalog_api: FastAPI application (read-only catalog API)
- seeder: Loads sample tools into the database
"""

__version__ = "0.1.0"
