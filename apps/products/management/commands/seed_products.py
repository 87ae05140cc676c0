from django.core.management.base import BaseCommand
from apps.points.services.value_table import (
    TIER_POINTS, HIGH_VALUE, MEDIUM_VALUE, STANDARD_VALUE, LOW_VALUE, WILD_CARD
)
from apps.products.models import Product


class Command(BaseCommand):
    help = 'Set up the catalog products, one per points tier'

    def handle(self, *args, **options):
        descriptions = {
            HIGH_VALUE: 'Signature espresso bean bag, 1 kg',
            MEDIUM_VALUE: 'Seasonal single origin, 500 g',
            STANDARD_VALUE: 'House blend filter coffee',
            LOW_VALUE: 'Espresso shot',
            WILD_CARD: 'Barista tasting session',
        }

        created_count = 0
        updated_count = 0

        for tier_label, points in TIER_POINTS.items():
            product, created = Product.objects.update_or_create(
                tier_label=tier_label,
                defaults={
                    'description': descriptions[tier_label],
                    'points': points,
                }
            )

            if created:
                created_count += 1
                self.stdout.write(self.style.SUCCESS(f'Created product: {product}'))
            else:
                updated_count += 1
                self.stdout.write(self.style.WARNING(f'Updated product: {product}'))

        self.stdout.write(
            self.style.SUCCESS(
                f'Catalog setup complete. Created: {created_count}, Updated: {updated_count}'
            )
        )
