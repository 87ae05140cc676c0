"""
Tests for recording purchases and monthly points totals.
"""
from datetime import datetime, timedelta, timezone

from django.test import TestCase, override_settings

from apps.common.exceptions import UnknownTier
from apps.points.models import PurchaseEvent
from apps.points.services import PointsLedger, UNKNOWN_TIER_POINTS, current_month_window
from tests.factories import PurchaseEventFactory

UTC = timezone.utc
NOW = datetime(2025, 3, 15, 12, 0, tzinfo=UTC)


class FakeClock:
    """Clock that returns a settable instant"""

    def __init__(self, now):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, **kwargs):
        self.now += timedelta(**kwargs)


class RecordPurchaseTest(TestCase):

    def setUp(self):
        self.clock = FakeClock(NOW)
        self.ledger = PointsLedger(clock=self.clock)

    def test_records_points_from_value_table(self):
        event = self.ledger.record_purchase('alice', 'high_value')

        self.assertEqual(event.username, 'alice')
        self.assertEqual(event.points, 50)
        self.assertEqual(event.awarded_at, NOW)
        self.assertEqual(PurchaseEvent.objects.count(), 1)

    def test_tier_label_is_case_insensitive(self):
        event = self.ledger.record_purchase('alice', 'Wild_Card')
        self.assertEqual(event.points, 55)

    def test_unknown_tier_is_recorded_with_sentinel(self):
        event = self.ledger.record_purchase('alice', 'mystery_box')

        event.refresh_from_db()
        self.assertEqual(event.points, UNKNOWN_TIER_POINTS)
        self.assertTrue(event.is_unknown_tier)

    @override_settings(POINTS_CONFIG={'MONTHLY_TOTAL_SEED': -1, 'REJECT_UNKNOWN_TIER': True})
    def test_unknown_tier_can_be_rejected(self):
        with self.assertRaises(UnknownTier):
            self.ledger.record_purchase('alice', 'mystery_box')
        self.assertFalse(PurchaseEvent.objects.exists())

    def test_user_does_not_have_to_exist(self):
        event = self.ledger.record_purchase('nobody', 'low_value')
        self.assertEqual(event.username, 'nobody')

    def test_new_event_is_listed_first(self):
        self.ledger.record_purchase('alice', 'low_value')
        self.clock.advance(minutes=5)
        self.ledger.record_purchase('bob', 'medium_value')
        self.clock.advance(minutes=5)
        latest = self.ledger.record_purchase('alice', 'wild_card')

        purchases = self.ledger.all_purchases()
        self.assertEqual(purchases[0], latest)
        self.assertEqual([p.username for p in purchases], ['alice', 'bob', 'alice'])
        self.assertEqual([p.points for p in purchases], [55, 30, 5])

    def test_events_at_same_instant_list_newest_first(self):
        first = self.ledger.record_purchase('alice', 'low_value')
        second = self.ledger.record_purchase('alice', 'high_value')

        self.assertEqual(self.ledger.all_purchases(), [second, first])


class MonthlyPointsTotalTest(TestCase):
    """The accumulator starts at the configured seed, -1 by default"""

    def setUp(self):
        self.ledger = PointsLedger(clock=FakeClock(NOW))
        self.window = current_month_window(NOW)

    def test_no_events_reports_seed(self):
        self.assertEqual(self.ledger.monthly_points_total('alice'), -1)

    def test_single_event_is_points_minus_one(self):
        PurchaseEventFactory(username='alice', points=50, awarded_at=NOW)
        self.assertEqual(self.ledger.monthly_points_total('alice'), 49)

    def test_events_sum_onto_seed(self):
        PurchaseEventFactory(username='alice', points=50, awarded_at=NOW)
        PurchaseEventFactory(username='alice', points=30, awarded_at=NOW - timedelta(days=10))
        PurchaseEventFactory(username='alice', points=5, awarded_at=NOW + timedelta(days=10))

        self.assertEqual(self.ledger.monthly_points_total('alice'), 84)

    def test_other_users_are_ignored(self):
        PurchaseEventFactory(username='bob', points=50, awarded_at=NOW)
        self.assertEqual(self.ledger.monthly_points_total('alice'), -1)

    def test_events_exactly_on_bounds_are_excluded(self):
        PurchaseEventFactory(username='alice', points=50, awarded_at=self.window.start)
        PurchaseEventFactory(username='alice', points=30, awarded_at=self.window.end)

        self.assertEqual(self.ledger.monthly_points_total('alice'), -1)

    def test_events_just_inside_bounds_are_counted(self):
        PurchaseEventFactory(
            username='alice', points=10, awarded_at=self.window.start + timedelta(seconds=1)
        )
        PurchaseEventFactory(
            username='alice', points=5, awarded_at=self.window.end - timedelta(seconds=1)
        )

        self.assertEqual(self.ledger.monthly_points_total('alice'), 14)

    def test_first_and_last_minute_of_month_are_excluded(self):
        PurchaseEventFactory(username='alice', points=10, awarded_at=datetime(2025, 3, 1, 0, 0, 30, tzinfo=UTC))
        PurchaseEventFactory(username='alice', points=10, awarded_at=datetime(2025, 3, 31, 23, 59, 30, tzinfo=UTC))

        self.assertEqual(self.ledger.monthly_points_total('alice'), -1)

    def test_other_months_are_excluded(self):
        PurchaseEventFactory(username='alice', points=50, awarded_at=datetime(2025, 2, 20, tzinfo=UTC))
        PurchaseEventFactory(username='alice', points=50, awarded_at=datetime(2025, 4, 2, tzinfo=UTC))

        self.assertEqual(self.ledger.monthly_points_total('alice'), -1)

    def test_sentinel_events_are_summed_as_stored(self):
        PurchaseEventFactory(username='alice', points=UNKNOWN_TIER_POINTS, awarded_at=NOW)
        self.assertEqual(self.ledger.monthly_points_total('alice'), -10000)

    def test_explicit_now_overrides_clock(self):
        PurchaseEventFactory(username='alice', points=50, awarded_at=NOW)
        next_month = datetime(2025, 4, 10, tzinfo=UTC)

        self.assertEqual(self.ledger.monthly_points_total('alice', now=next_month), -1)

    @override_settings(POINTS_CONFIG={'MONTHLY_TOTAL_SEED': 0, 'REJECT_UNKNOWN_TIER': False})
    def test_zero_seed_gives_plain_sum(self):
        self.assertEqual(self.ledger.monthly_points_total('alice'), 0)

        PurchaseEventFactory(username='alice', points=50, awarded_at=NOW)
        PurchaseEventFactory(username='alice', points=5, awarded_at=NOW)
        self.assertEqual(self.ledger.monthly_points_total('alice'), 55)

    def test_summary_carries_window_and_events(self):
        event = PurchaseEventFactory(username='alice', points=30, awarded_at=NOW)

        summary = self.ledger.monthly_summary('alice')
        self.assertEqual(summary.username, 'alice')
        self.assertEqual(summary.total_points, 29)
        self.assertEqual(summary.window, self.window)
        self.assertEqual(summary.events, [event])

    def test_leap_day_is_inside_february_window(self):
        leap_day = datetime(2024, 2, 29, 12, 0, tzinfo=UTC)
        PurchaseEventFactory(username='alice', points=10, awarded_at=leap_day)

        self.assertEqual(self.ledger.monthly_points_total('alice', now=datetime(2024, 2, 1, 9, 0, tzinfo=UTC)), 9)
