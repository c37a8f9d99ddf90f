"""
Stock admission — bringing new batches into a section.

All checks run before anything is written; the section row is locked so
concurrent admissions into the same section see each other's volume.
"""

import logging

from django.db import transaction

from frescos.adapters.catalog import get_catalog
from frescos.exceptions import StockError
from frescos.models.batch import BatchStock
from frescos.models.move import StockMove
from frescos.models.warehouse import Section
from frescos.services.capacity import SectionCapacity

logger = logging.getLogger('frescos')


class StockAdmission:
    """Inbound stock methods."""

    @classmethod
    def permitted_representative(cls, representative, warehouse) -> bool:
        """Does the representative work at this warehouse?"""
        representative = get_catalog().get_representative(representative)
        warehouse_id = getattr(warehouse, 'pk', warehouse)
        return representative.warehouse_id == warehouse_id

    @classmethod
    def admit(cls, product, section, quantity, batch_number, due_date,
              manufacturing_date=None, manufacturing_time=None,
              representative=None, reason='Recebimento') -> BatchStock:
        """
        Create a batch of a product in a section.

        Creates the BatchStock with quantity 0 and a positive StockMove
        that brings it to quantity.

        Raises:
            StockError('INVALID_QUANTITY'): If quantity <= 0
            StockError('REPRESENTATIVE_NOT_PERMITTED'): Representative from
                another warehouse
            StockError('CATEGORY_MISMATCH'): Product category != section category
            StockError('CAPACITY_EXCEEDED'): Not enough free volume

        Concurrency:
            - Runs under transaction.atomic()
            - Uses select_for_update() on the Section
        """
        if quantity <= 0:
            raise StockError('INVALID_QUANTITY', requested=quantity)

        catalog = get_catalog()
        product = catalog.get_product(product)
        section = catalog.get_section(section)

        if representative is not None and not cls.permitted_representative(
            representative, section.warehouse_id
        ):
            raise StockError(
                'REPRESENTATIVE_NOT_PERMITTED',
                representative=getattr(representative, 'pk', representative),
                warehouse=section.warehouse_id,
            )

        with transaction.atomic():
            locked_section = Section.objects.select_for_update().get(pk=section.pk)
            SectionCapacity.check(product, quantity, locked_section)

            batch = BatchStock.objects.create(
                batch_number=batch_number,
                product=product,
                section=locked_section,
                due_date=due_date,
                manufacturing_date=manufacturing_date,
                manufacturing_time=manufacturing_time,
            )
            StockMove.objects.create(batch=batch, delta=quantity, reason=reason)

            batch.refresh_from_db()
            logger.info(
                "stock.admit",
                extra={
                    "product_id": product.pk,
                    "section_id": section.pk,
                    "qty": quantity,
                    "batch_id": batch.pk,
                    "due_date": str(due_date),
                },
            )
            return batch
