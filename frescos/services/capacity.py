"""
Section capacity — category and volume checks for incoming stock.

Admission-time only: nothing here runs when orders are closed.
"""

from decimal import Decimal

from django.db.models import DecimalField, ExpressionWrapper, F, Sum
from django.db.models.functions import Coalesce

from frescos.adapters.catalog import get_catalog
from frescos.exceptions import StockError
from frescos.models.batch import BatchStock

VOLUME_FIELD = DecimalField(max_digits=20, decimal_places=3)


class SectionCapacity:
    """Category and volume rules of a section."""

    @classmethod
    def category_permitted(cls, product_category, section_category) -> bool:
        """Exact category match. A mismatch is never auto-corrected."""
        return product_category == section_category

    @classmethod
    def used_volume(cls, section) -> Decimal:
        """Σ(batch.quantity × product.unit_volume) over the section's batches."""
        section = get_catalog().get_section(section)
        return BatchStock.objects.in_section(section).aggregate(
            v=Coalesce(
                Sum(ExpressionWrapper(
                    F('quantity') * F('product__unit_volume'),
                    output_field=VOLUME_FIELD,
                )),
                Decimal('0'),
                output_field=VOLUME_FIELD,
            )
        )['v']

    @classmethod
    def free_volume(cls, section) -> Decimal:
        """Volume still available in the section."""
        section = get_catalog().get_section(section)
        return section.total_size - cls.used_volume(section)

    @classmethod
    def fits(cls, product, incoming_quantity, section) -> bool:
        """Does incoming_quantity × unit_volume fit in the section's free volume?"""
        catalog = get_catalog()
        product = catalog.get_product(product)
        section = catalog.get_section(section)
        return incoming_quantity * product.unit_volume <= cls.free_volume(section)

    @classmethod
    def is_valid(cls, product, incoming_quantity, section) -> bool:
        """Category permitted AND volume fits."""
        catalog = get_catalog()
        product = catalog.get_product(product)
        section = catalog.get_section(section)
        return (
            cls.category_permitted(product.category, section.category)
            and cls.fits(product, incoming_quantity, section)
        )

    @classmethod
    def check(cls, product, incoming_quantity, section) -> None:
        """
        Raising form of is_valid(), used when admitting stock.

        Raises:
            StockError('CATEGORY_MISMATCH'): Categories differ (checked first,
                regardless of free volume)
            StockError('CAPACITY_EXCEEDED'): Volume does not fit
        """
        catalog = get_catalog()
        product = catalog.get_product(product)
        section = catalog.get_section(section)

        if not cls.category_permitted(product.category, section.category):
            raise StockError(
                'CATEGORY_MISMATCH',
                product_category=product.category,
                section_category=section.category,
            )

        required = incoming_quantity * product.unit_volume
        free = cls.free_volume(section)
        if required > free:
            raise StockError('CAPACITY_EXCEEDED', required=required, free=free)
