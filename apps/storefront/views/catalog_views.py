"""
Catalog listing endpoint.
"""
from rest_framework.views import APIView

from apps.common.access import is_authenticated
from apps.common.utils import success_response
from apps.products.serializers import ProductListSerializer
from ..services import StorefrontService
from ..session import current_identity


class ProductListView(APIView):
    """Product list - GET /api/products/ (anonymous allowed)"""

    def get(self, request):
        products = StorefrontService().list_products()
        return success_response({
            'list': ProductListSerializer(products, many=True).data,
            # Anonymous visitors see the catalog but must log in to claim
            'can_purchase': is_authenticated(current_identity(request)),
        })
