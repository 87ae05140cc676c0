"""
Storefront views module.
"""
from .auth_views import LoginView, LogoutView, RegisterView
from .catalog_views import ProductListView
from .purchase_views import PurchaseView, AllPurchasesView, MyPurchasesView

__all__ = [
    'LoginView',
    'LogoutView',
    'RegisterView',
    'ProductListView',
    'PurchaseView',
    'AllPurchasesView',
    'MyPurchasesView',
]
