"""
Storefront serializers module.
"""
from .form_serializers import LoginSerializer, RegistrationSerializer, PurchaseSerializer

__all__ = [
    'LoginSerializer',
    'RegistrationSerializer',
    'PurchaseSerializer',
]
