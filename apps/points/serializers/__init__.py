"""
Points serializers module.
"""
from .purchase_serializers import PurchaseEventSerializer, MonthlyPointsSummarySerializer

__all__ = [
    'PurchaseEventSerializer',
    'MonthlyPointsSummarySerializer',
]
