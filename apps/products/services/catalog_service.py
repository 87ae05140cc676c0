"""
Catalog service: read access to the product list.
"""


class CatalogService:
    """Pass-through over the store's product table"""

    def __init__(self, store=None):
        if store is None:
            from apps.common.store import ShopStore
            store = ShopStore()
        self.store = store

    def list_products(self):
        return self.store.list_products()
