"""
Menagerie Backend
Record management service with a GraphQL API
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
