"""
Points services module.
"""
from .value_table import (
    TierPoints, TIER_POINTS, UNKNOWN_TIER_POINTS, lookup, lookup_points
)
from .month_window import MonthWindow, current_month_window
from .points_ledger import PointsLedger, MonthlyPointsSummary

__all__ = [
    'TierPoints',
    'TIER_POINTS',
    'UNKNOWN_TIER_POINTS',
    'lookup',
    'lookup_points',
    'MonthWindow',
    'current_month_window',
    'PointsLedger',
    'MonthlyPointsSummary',
]
