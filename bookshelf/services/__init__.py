"""
Domain services built on the repository contracts.
"""

from .catalog_service import CatalogService

__all__ = [
    "CatalogService",
]
