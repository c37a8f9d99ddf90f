"""
Order validation — can the requested lines be served from available stock?

Read-only and never cached: the workflow re-runs it when an order is
created and again when it is closed.
"""

import logging

from frescos.adapters.catalog import get_catalog
from frescos.exceptions import StockError
from frescos.protocols.orders import coerce_lines
from frescos.services.ledger import BatchLedger
from frescos.shelflife import availability_cutoff

logger = logging.getLogger('frescos')


class OrderValidator:
    """Availability check over purchase order lines."""

    @classmethod
    def insufficient_products(cls, lines, not_expiring_before=None) -> set[int]:
        """
        Ids of products whose requested quantity exceeds available stock.

        A line is satisfied iff requested <= available_quantity(product, cutoff).
        Each failing product id appears once, however many lines it has.

        Args:
            lines: OrderLine objects, (product_id, quantity) pairs or
                {"productId", "quantity"} mappings
            not_expiring_before: Cutoff (None = today + LOOKAHEAD_WEEKS)

        Raises:
            NotFoundError('PRODUCT_NOT_FOUND'): Unknown product id
        """
        cutoff = not_expiring_before or availability_cutoff()
        catalog = get_catalog()
        failing = set()

        for line in coerce_lines(lines):
            product = catalog.get_product(line.product_id)
            if line.quantity > BatchLedger.available_quantity(product, cutoff):
                failing.add(product.pk)

        return failing

    @classmethod
    def validate(cls, lines, not_expiring_before=None, code='INVALID_ORDER') -> None:
        """
        Raise if any line cannot be served.

        Raises:
            StockError(code): With product_ids = sorted failing ids
        """
        failing = cls.insufficient_products(lines, not_expiring_before)
        if failing:
            product_ids = sorted(failing)
            logger.warning(
                "order.rejected",
                extra={"code": code, "product_ids": product_ids},
            )
            raise StockError(code, product_ids=product_ids)
