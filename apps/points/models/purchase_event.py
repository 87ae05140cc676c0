from django.db import models


class PurchaseEvent(models.Model):
    """
    A points-awarding purchase. Immutable once written.

    ``username`` is deliberately not a foreign key: the ledger records events
    for whatever identity the session carried.
    """
    username = models.CharField(max_length=150, db_index=True)
    points = models.IntegerField()  # ValueTable result at creation time, or the unknown-tier sentinel
    awarded_at = models.DateTimeField(db_index=True)

    class Meta:
        db_table = 'purchase_events'
        ordering = ['-awarded_at', '-id']
        indexes = [
            models.Index(fields=['username', 'awarded_at'], name='purchase_events_user_time_idx'),
        ]
        verbose_name = 'Purchase Event'
        verbose_name_plural = 'Purchase Events'

    def __str__(self):
        return f"{self.username} - {self.points} points at {self.awarded_at.isoformat()}"

    @property
    def is_unknown_tier(self):
        """True when the event was recorded with the unknown-tier sentinel"""
        from ..services.value_table import UNKNOWN_TIER_POINTS
        return self.points == UNKNOWN_TIER_POINTS
