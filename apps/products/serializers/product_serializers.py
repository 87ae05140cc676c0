"""
Product serializers for the catalog listing.
"""
from rest_framework import serializers
from ..models import Product


class ProductListSerializer(serializers.ModelSerializer):
    """
    Serializer for product list view.
    Used for: GET /api/products/
    """
    class Meta:
        model = Product
        fields = ['id', 'tier_label', 'description', 'points']
        read_only_fields = fields
