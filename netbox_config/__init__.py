"""
AINetBox Configuration Package.

Provides Pydantic Settings loaded from environment variables.
"""

from netbox_config.settings import Settings

__all__ = ["Settings"]
