"""
Purchase event serializers for history and monthly totals.
"""
from rest_framework import serializers
from ..models import PurchaseEvent


class PurchaseEventSerializer(serializers.ModelSerializer):
    """
    Serializer for purchase history rows.
    Used for: GET /api/purchases/
    """
    class Meta:
        model = PurchaseEvent
        fields = ['username', 'points', 'awarded_at']
        read_only_fields = fields


class MonthWindowSerializer(serializers.Serializer):
    start = serializers.DateTimeField(read_only=True)
    end = serializers.DateTimeField(read_only=True)


class MonthlyPointsSummarySerializer(serializers.Serializer):
    """
    Serializer for the current member's monthly points.
    Used for: GET /api/my-purchases/
    """
    username = serializers.CharField(read_only=True)
    total_points = serializers.IntegerField(read_only=True)
    window = MonthWindowSerializer(read_only=True)
    events = PurchaseEventSerializer(many=True, read_only=True)
