from django.db import models


class Product(models.Model):
    """Catalog entry. One product per points tier, seeded out of band."""
    tier_label = models.CharField(max_length=50, unique=True, help_text="Tier key used for the points lookup")
    description = models.TextField(blank=True, default='')
    points = models.IntegerField(help_text="Points shown in the catalog")

    class Meta:
        db_table = 'products'
        ordering = ['id']
        verbose_name = 'Product'
        verbose_name_plural = 'Products'

    def __str__(self):
        return f"{self.tier_label} ({self.points} points)"
