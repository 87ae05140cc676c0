"""
Relational store used by the shop services.

Each method runs one query or one write. Django hands out the connection for
the duration of the request; writes run inside their own atomic block so a
failure leaves nothing half-written. Database failures surface as StoreError.
"""
import logging

from django.contrib.auth import get_user_model
from django.db import DatabaseError, transaction

from apps.points.models import PurchaseEvent
from apps.products.models import Product
from .exceptions import StoreError

logger = logging.getLogger(__name__)


class ShopStore:
    """ORM-backed store for users, products and purchase events"""

    def verify_credentials(self, username, password):
        """True when a user with this username exists and the password matches"""
        User = get_user_model()
        try:
            user = User.objects.filter(username=username).first()
        except DatabaseError as e:
            raise StoreError(cause=e) from e
        if user is None:
            return False
        return user.check_password(password)

    def insert_user(self, username, email, password):
        """Create a user. Uniqueness is whatever the users table enforces."""
        User = get_user_model()
        try:
            with transaction.atomic():
                return User.objects.create_user(username=username, email=email, password=password)
        except DatabaseError as e:
            raise StoreError(cause=e) from e

    def list_products(self):
        try:
            return list(Product.objects.all())
        except DatabaseError as e:
            raise StoreError(cause=e) from e

    def insert_purchase_event(self, username, points, awarded_at):
        try:
            with transaction.atomic():
                return PurchaseEvent.objects.create(
                    username=username,
                    points=points,
                    awarded_at=awarded_at
                )
        except DatabaseError as e:
            raise StoreError(cause=e) from e

    def query_purchases(self, username=None, window=None):
        """
        Purchase events, most recent first.

        Args:
            username: only this user's events when given
            window: MonthWindow; only events strictly inside it when given
        """
        events = PurchaseEvent.objects.all()
        if username is not None:
            events = events.filter(username=username)
        if window is not None:
            events = events.filter(awarded_at__gt=window.start, awarded_at__lt=window.end)
        try:
            return list(events.order_by('-awarded_at', '-id'))
        except DatabaseError as e:
            raise StoreError(cause=e) from e
