"""
Fixed tier label to points lookup.

The table is static: catalog changes never alter what a tier is worth, and
past purchase events keep the points they were recorded with.
"""
from dataclasses import dataclass
from typing import Optional

HIGH_VALUE = 'high_value'
MEDIUM_VALUE = 'medium_value'
STANDARD_VALUE = 'standard_value'
LOW_VALUE = 'low_value'
WILD_CARD = 'wild_card'

TIER_POINTS = {
    HIGH_VALUE: 50,
    MEDIUM_VALUE: 30,
    STANDARD_VALUE: 10,
    LOW_VALUE: 5,
    WILD_CARD: 55,
}

# Stored in place of points when a purchase names an unrecognized tier
UNKNOWN_TIER_POINTS = -9999


@dataclass(frozen=True)
class TierPoints:
    """Result of a tier lookup: known with its points, or unknown."""
    tier_label: str
    points: Optional[int]

    @classmethod
    def unknown(cls, tier_label):
        return cls(tier_label=tier_label, points=None)

    @property
    def is_known(self):
        return self.points is not None

    def stored_points(self):
        """Points to persist, using the sentinel for unknown tiers"""
        return self.points if self.is_known else UNKNOWN_TIER_POINTS


def lookup(tier_label):
    """
    Look up the points for a tier label, case-insensitively.

    Never raises: any input that is not one of the five tiers (including
    None) comes back as an unknown TierPoints.
    """
    label = tier_label if isinstance(tier_label, str) else ''
    points = TIER_POINTS.get(label.lower())
    if points is None:
        return TierPoints.unknown(label)
    return TierPoints(tier_label=label.lower(), points=points)


def lookup_points(tier_label):
    """Points for tier_label, or UNKNOWN_TIER_POINTS"""
    return lookup(tier_label).stored_points()
