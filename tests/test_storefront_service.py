"""
Tests for the storefront operations: login, registration, purchases and
purchase history.
"""
from datetime import datetime, timezone
from unittest.mock import MagicMock

from django.db import DatabaseError
from django.test import TestCase

from apps.common.exceptions import (
    InvalidCredentials, RegistrationFailed, StoreError, Unauthenticated, ValidationFailed
)
from apps.common.store import ShopStore
from apps.points.models import PurchaseEvent
from apps.points.services import PointsLedger, UNKNOWN_TIER_POINTS
from apps.storefront.services import StorefrontService
from tests.factories import UserFactory, ProductFactory, DEFAULT_PASSWORD

UTC = timezone.utc
NOW = datetime(2025, 3, 15, 12, 0, tzinfo=UTC)


class AuthenticationFlowTest(TestCase):

    def setUp(self):
        self.service = StorefrontService()

    def test_register_then_login_round_trip(self):
        identity = self.service.register('alice', 'a@x.com', 'pw1')
        self.assertEqual(identity, 'alice')

        self.assertEqual(self.service.login('alice', 'pw1'), 'alice')

    def test_wrong_password_is_rejected(self):
        UserFactory(username='alice')
        with self.assertRaises(InvalidCredentials):
            self.service.login('alice', 'not-the-password')

    def test_unknown_user_is_rejected(self):
        with self.assertRaises(InvalidCredentials):
            self.service.login('ghost', DEFAULT_PASSWORD)

    def test_login_requires_both_fields(self):
        for username, password in ((None, 'pw'), ('alice', None), ('', 'pw'), ('alice', '  ')):
            with self.subTest(username=username, password=password):
                with self.assertRaises(ValidationFailed):
                    self.service.login(username, password)

    def test_register_requires_all_fields(self):
        with self.assertRaises(ValidationFailed) as ctx:
            self.service.register('alice', None, 'pw1')
        self.assertEqual(str(ctx.exception.detail), 'Missing username, email, or password')

    def test_duplicate_username_fails_registration(self):
        self.service.register('alice', 'a@x.com', 'pw1')

        with self.assertRaises(RegistrationFailed) as ctx:
            self.service.register('alice', 'other@x.com', 'pw2')
        self.assertEqual(str(ctx.exception.detail), 'Registration failed')

    def test_password_is_not_stored_in_plain_text(self):
        user = UserFactory(username='alice')
        self.assertNotEqual(user.password, DEFAULT_PASSWORD)
        self.assertEqual(self.service.login('alice', DEFAULT_PASSWORD), 'alice')

    def test_logout_returns_anonymous_identity(self):
        self.assertIsNone(self.service.logout('alice'))
        self.assertIsNone(self.service.logout(None))


class PurchaseFlowTest(TestCase):

    def setUp(self):
        self.ledger = PointsLedger(clock=lambda: NOW)
        self.service = StorefrontService(ledger=self.ledger)

    def test_anonymous_purchase_always_fails(self):
        for tier_label in ('high_value', 'mystery_box', '', None):
            with self.subTest(tier_label=tier_label):
                with self.assertRaises(Unauthenticated):
                    self.service.purchase(None, tier_label)
        self.assertFalse(PurchaseEvent.objects.exists())

    def test_blank_tier_is_rejected(self):
        for tier_label in ('', '   ', None):
            with self.subTest(tier_label=tier_label):
                with self.assertRaises(ValidationFailed) as ctx:
                    self.service.purchase('alice', tier_label)
                self.assertEqual(str(ctx.exception.detail), 'No product specified.')

    def test_padded_tier_label_is_looked_up_as_given(self):
        event = self.service.purchase('alice', ' high_value ')

        self.assertEqual(event.points, UNKNOWN_TIER_POINTS)
        self.assertEqual(PurchaseEvent.objects.get().points, UNKNOWN_TIER_POINTS)

    def test_purchase_records_event(self):
        event = self.service.purchase('alice', 'medium_value')

        self.assertEqual(event.points, 30)
        self.assertEqual(event.awarded_at, NOW)
        self.assertEqual(self.service.view_all_purchases(), [event])

    def test_view_all_needs_no_identity(self):
        self.service.purchase('alice', 'low_value')
        self.service.purchase('bob', 'wild_card')

        usernames = {event.username for event in self.service.view_all_purchases()}
        self.assertEqual(usernames, {'alice', 'bob'})

    def test_view_my_purchases_requires_login(self):
        with self.assertRaises(Unauthenticated) as ctx:
            self.service.view_my_purchases(None)
        self.assertEqual(str(ctx.exception.detail), 'You must be logged in to view your purchases.')

    def test_catalog_lists_products(self):
        product = ProductFactory(tier_label='high_value', points=50)
        self.assertEqual(self.service.list_products(), [product])

    def test_end_to_end_monthly_points(self):
        self.assertEqual(self.service.register('alice', 'a@x.com', 'pw1'), 'alice')
        identity = self.service.login('alice', 'pw1')

        self.service.purchase(identity, 'high_value')

        summary = self.service.view_my_purchases(identity, now=NOW)
        self.assertEqual(summary.total_points, 49)
        self.assertEqual(len(summary.events), 1)

        after_month_end = datetime(2025, 4, 1, 12, 0, tzinfo=UTC)
        self.assertEqual(self.service.view_my_purchases(identity, now=after_month_end).total_points, -1)


class StoreFailureTest(TestCase):
    """Store failures become generic StoreErrors at the operation boundary"""

    def setUp(self):
        self.store = MagicMock(spec=ShopStore)
        self.service = StorefrontService(store=self.store)

    def test_store_error_cause_is_not_exposed(self):
        self.store.list_products.side_effect = StoreError(cause=DatabaseError('table products is locked'))

        with self.assertRaises(StoreError) as ctx:
            self.service.list_products()
        self.assertEqual(str(ctx.exception.detail), 'Request failed')
        self.assertNotIn('locked', str(ctx.exception.detail))

    def test_raw_database_error_is_converted(self):
        self.store.verify_credentials.side_effect = DatabaseError('connection refused')

        with self.assertRaises(StoreError):
            self.service.login('alice', 'pw1')

    def test_purchase_write_failure(self):
        self.store.insert_purchase_event.side_effect = StoreError(cause=DatabaseError('disk full'))

        with self.assertRaises(StoreError):
            self.service.purchase('alice', 'high_value')

    def test_registration_failure(self):
        self.store.insert_user.side_effect = StoreError(cause=DatabaseError('duplicate key'))

        with self.assertRaises(RegistrationFailed):
            self.service.register('alice', 'a@x.com', 'pw1')

    def test_history_failure(self):
        self.store.query_purchases.side_effect = StoreError()

        with self.assertRaises(StoreError):
            self.service.view_all_purchases()
        with self.assertRaises(StoreError):
            self.service.view_my_purchases('alice')
