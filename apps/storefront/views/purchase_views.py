"""
Purchase recording and purchase history endpoints.
"""
from rest_framework import status
from rest_framework.views import APIView

from apps.common.utils import success_response
from apps.points.serializers import PurchaseEventSerializer, MonthlyPointsSummarySerializer
from ..serializers import PurchaseSerializer
from ..services import StorefrontService
from ..session import current_identity


class PurchaseView(APIView):
    """Record a purchase - POST /api/purchase/"""
    serializer_class = PurchaseSerializer

    def post(self, request):
        service = StorefrontService()
        identity = current_identity(request)

        # Malformed forms still go through the service so anonymous
        # callers are rejected before the product is looked at
        serializer = PurchaseSerializer(data=request.data)
        tier_label = serializer.get_tier_label() if serializer.is_valid() else None

        event = service.purchase(identity, tier_label)
        return success_response(
            {
                'purchase': PurchaseEventSerializer(event).data,
                'redirect': '/my-purchases',
            },
            'Purchase recorded',
            status_code=status.HTTP_201_CREATED
        )


class AllPurchasesView(APIView):
    """Every member's purchases, most recent first - GET /api/purchases/"""

    def get(self, request):
        events = StorefrontService().view_all_purchases()
        return success_response({'list': PurchaseEventSerializer(events, many=True).data})


class MyPurchasesView(APIView):
    """Current member's points for this month - GET /api/my-purchases/"""

    def get(self, request):
        summary = StorefrontService().view_my_purchases(current_identity(request))
        return success_response(MonthlyPointsSummarySerializer(summary).data)
