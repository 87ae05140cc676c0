"""
Points ledger: records purchase events and totals them per month.
"""
import logging
from dataclasses import dataclass, field
from typing import List

from django.conf import settings
from django.utils import timezone

from apps.common.exceptions import UnknownTier
from . import value_table
from .month_window import MonthWindow, current_month_window

logger = logging.getLogger(__name__)

DEFAULT_MONTHLY_TOTAL_SEED = -1


def _points_setting(name, default):
    return getattr(settings, 'POINTS_CONFIG', {}).get(name, default)


@dataclass
class MonthlyPointsSummary:
    username: str
    total_points: int
    window: MonthWindow
    events: List = field(default_factory=list)


class PointsLedger:
    """
    Records purchases and aggregates them per user.

    The clock is injectable so month boundaries can be tested with a fixed
    instant; it defaults to django.utils.timezone.now.
    """

    def __init__(self, store=None, clock=None):
        if store is None:
            from apps.common.store import ShopStore
            store = ShopStore()
        self.store = store
        self.clock = clock or timezone.now

    @property
    def monthly_total_seed(self):
        return _points_setting('MONTHLY_TOTAL_SEED', DEFAULT_MONTHLY_TOTAL_SEED)

    def record_purchase(self, username, tier_label):
        """
        Write one purchase event stamped with the current instant.

        The user is not checked for existence. An unknown tier is recorded
        with the sentinel unless REJECT_UNKNOWN_TIER is enabled.
        """
        tier = value_table.lookup(tier_label)
        if not tier.is_known:
            if _points_setting('REJECT_UNKNOWN_TIER', False):
                raise UnknownTier(f"Unknown product tier: {tier_label}")
            logger.warning(f"Recording unknown tier '{tier_label}' for {username} with sentinel points")

        awarded_at = self.clock()
        event = self.store.insert_purchase_event(username, tier.stored_points(), awarded_at)
        logger.info(f"Recorded {event.points} points for {username} at {awarded_at.isoformat()}")
        return event

    def monthly_summary(self, username, now=None):
        """Total and events for username inside the month containing now"""
        window = current_month_window(now or self.clock())
        logger.debug(f"Month window for {username}: {window.start.isoformat()} - {window.end.isoformat()}")

        events = self.store.query_purchases(username=username, window=window)
        total = self.monthly_total_seed
        for event in events:
            logger.debug(f"Adding {event.points} points for {username}")
            total += event.points

        return MonthlyPointsSummary(username=username, total_points=total, window=window, events=events)

    def monthly_points_total(self, username, now=None):
        """
        Points earned by username in the current month.

        The sum starts from MONTHLY_TOTAL_SEED (default -1), so a member with
        no purchases this month reports -1 and one with purchases worth S
        reports S - 1. Configure a seed of 0 for a plain sum.
        """
        return self.monthly_summary(username, now=now).total_points

    def all_purchases(self):
        """Every purchase event, most recent first"""
        return self.store.query_purchases()
