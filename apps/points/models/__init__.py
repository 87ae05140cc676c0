"""
Points models module.
"""
from .purchase_event import PurchaseEvent

__all__ = [
    'PurchaseEvent',
]
