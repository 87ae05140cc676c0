"""
Storefront services module.
"""
from .storefront_service import StorefrontService

__all__ = [
    'StorefrontService',
]
