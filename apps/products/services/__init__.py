"""
Product services module.
"""
from .catalog_service import CatalogService

__all__ = [
    'CatalogService',
]
