"""
Product serializers module.
"""
from .product_serializers import ProductListSerializer

__all__ = [
    'ProductListSerializer',
]
