"""
Batch stock ledger — availability queries and FEFO consumption.

Queries use no locking. consume() runs under transaction.atomic() and
locks every candidate batch before deciding.
"""

import logging

from django.db import transaction
from django.db.models import Sum
from django.db.models.functions import Coalesce

from frescos.adapters.catalog import get_catalog
from frescos.exceptions import NotFoundError, StockError
from frescos.models.batch import BatchStock
from frescos.models.enums import BATCH_SORT_FIELDS, BatchSort
from frescos.models.move import StockMove
from frescos.shelflife import availability_cutoff

logger = logging.getLogger('frescos')


class BatchLedger:
    """Batch stock queries and consumption."""

    # ══════════════════════════════════════════════════════════════
    # QUERIES
    # ══════════════════════════════════════════════════════════════

    @classmethod
    def find_available(cls, product, not_expiring_before=None):
        """
        Batches of a product that are still valid after the look-ahead window.

        Args:
            product: Product or product id
            not_expiring_before: Minimum due date (None = today + LOOKAHEAD_WEEKS)

        Returns:
            BatchStock QuerySet (non-empty batches only)
        """
        product = get_catalog().get_product(product)
        cutoff = not_expiring_before or availability_cutoff()
        return BatchStock.objects.for_product(product).valid_at(cutoff)

    @classmethod
    def available_quantity(cls, product, not_expiring_before=None) -> int:
        """Sum of quantity over find_available()."""
        return cls.find_available(product, not_expiring_before).aggregate(
            t=Coalesce(Sum('quantity'), 0)
        )['t']

    @classmethod
    def find_by_product(cls, product):
        """All batches of a product, regardless of expiry."""
        product = get_catalog().get_product(product)
        return BatchStock.objects.for_product(product)

    @classmethod
    def find_by_section(cls, section):
        """All batches stored in a section."""
        section = get_catalog().get_section(section)
        return BatchStock.objects.in_section(section)

    @classmethod
    def total_quantity(cls, product) -> int:
        """Total units of a product across all its batches, expired or not."""
        return cls.find_by_product(product).aggregate(
            t=Coalesce(Sum('quantity'), 0)
        )['t']

    @classmethod
    def list_batches(cls, product, sort=None) -> list[BatchStock]:
        """
        Batches of a product in the requested order.

        Args:
            product: Product or product id
            sort: BatchSort member or its code ('L', 'Q', 'V'); None = FEFO

        Raises:
            StockError('INVALID_SORT'): Unknown sort code
        """
        batches = cls.find_by_product(product)
        if sort is not None:
            batches = batches.order_by(*BATCH_SORT_FIELDS[BatchSort.from_code(sort)])
        return list(batches)

    @classmethod
    def get_batch(cls, pk) -> BatchStock:
        """Get a batch by id."""
        try:
            return BatchStock.objects.select_related('product', 'section').get(pk=pk)
        except (BatchStock.DoesNotExist, ValueError, TypeError):
            raise NotFoundError('BATCH_NOT_FOUND', id=pk) from None

    # ══════════════════════════════════════════════════════════════
    # CONSUMPTION
    # ══════════════════════════════════════════════════════════════

    @classmethod
    def consume(cls, product, quantity, purchase_order=None,
                reason=None, not_expiring_before=None) -> list[StockMove]:
        """
        Take quantity units of a product, earliest due date first (FEFO).

        Only batches still valid after the look-ahead window are candidates.
        Either the full quantity is consumed or nothing is.

        Returns:
            One negative StockMove per batch touched, in FEFO order

        Raises:
            StockError('INVALID_QUANTITY'): If quantity <= 0
            StockError('INSUFFICIENT_STOCK'): If candidate batches hold less
                than quantity (no batch is changed)

        Concurrency:
            - Runs under transaction.atomic()
            - Uses select_for_update() on every candidate batch
            - Sums availability after the lock
        """
        if quantity <= 0:
            raise StockError('INVALID_QUANTITY', requested=quantity)

        product = get_catalog().get_product(product)
        cutoff = not_expiring_before or availability_cutoff()
        if reason is None:
            reason = f"Pedido #{purchase_order.pk}" if purchase_order else 'Saída'

        with transaction.atomic():
            batches = list(
                BatchStock.objects.select_for_update()
                .for_product(product)
                .valid_at(cutoff)
                .fefo()
            )
            available = sum(batch.quantity for batch in batches)

            if available < quantity:
                logger.warning(
                    "stock.consume.insufficient",
                    extra={
                        "product_id": product.pk,
                        "qty": quantity,
                        "available": available,
                        "cutoff": str(cutoff),
                    },
                )
                raise StockError(
                    'INSUFFICIENT_STOCK',
                    product_ids=[product.pk],
                    available=available,
                    requested=quantity,
                )

            moves = []
            remaining = quantity
            for batch in batches:
                if remaining == 0:
                    break
                take = min(batch.quantity, remaining)
                moves.append(StockMove.objects.create(
                    batch=batch,
                    delta=-take,
                    purchase_order=purchase_order,
                    reason=reason,
                ))
                remaining -= take

            logger.info(
                "stock.consume",
                extra={
                    "product_id": product.pk,
                    "qty": quantity,
                    "batches": [move.batch_id for move in moves],
                    "reason": reason,
                },
            )
            return moves
