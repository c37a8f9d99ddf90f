"""
Purchase order workflow — create (OPEN) and close (CLOSED).

All state-changing methods use transaction.atomic(); close() locks the
order row and, through the ledger, every batch it consumes.
"""

import logging
from collections.abc import Mapping
from decimal import Decimal

from django.db import transaction
from django.utils import timezone

from frescos.adapters.catalog import get_catalog
from frescos.conf import frescos_settings
from frescos.exceptions import NotFoundError, StockError
from frescos.models.enums import OrderStatus
from frescos.models.order import OrderProduct, PurchaseOrder
from frescos.protocols.orders import OrderLine, PurchaseOrderRequest, StatusUpdate, coerce_lines
from frescos.services.ledger import BatchLedger
from frescos.services.validator import OrderValidator

logger = logging.getLogger('frescos')


def _quantize_price(value: Decimal) -> Decimal:
    """Round a total to the configured currency precision."""
    return value.quantize(Decimal(10) ** -frescos_settings.PRICE_DECIMAL_PLACES)


class PurchaseOrders:
    """Purchase order lifecycle methods."""

    # ══════════════════════════════════════════════════════════════
    # CREATE
    # ══════════════════════════════════════════════════════════════

    @classmethod
    def place(cls, buyer, order_date, products) -> PurchaseOrder:
        """
        Validate and persist a new OPEN purchase order.

        Returns:
            The persisted PurchaseOrder, with total_price set

        Raises:
            NotFoundError('BUYER_NOT_FOUND' | 'PRODUCT_NOT_FOUND')
            StockError('EMPTY_ORDER'): No lines
            StockError('INVALID_ORDER'): Some product lacks available stock
                (product_ids lists them); nothing is persisted
        """
        catalog = get_catalog()
        buyer = catalog.get_buyer(buyer)
        lines = coerce_lines(products)
        if not lines:
            raise StockError('EMPTY_ORDER')

        with transaction.atomic():
            OrderValidator.validate(lines, code='INVALID_ORDER')

            order = PurchaseOrder.objects.create(
                buyer=buyer,
                date=order_date,
                status=OrderStatus.OPEN,
            )
            items = OrderProduct.objects.bulk_create([
                OrderProduct(
                    purchase_order=order,
                    product=catalog.get_product(line.product_id),
                    quantity=line.quantity,
                )
                for line in lines
            ])

        order.total_price = _quantize_price(sum(
            (item.quantity * item.product.price for item in items),
            Decimal('0'),
        ))
        logger.info(
            "order.created",
            extra={
                "order_id": order.pk,
                "buyer_id": buyer.pk,
                "lines": len(items),
                "total": str(order.total_price),
            },
        )
        return order

    @classmethod
    def create(cls, buyer, order_date, products) -> Decimal:
        """
        Create an OPEN purchase order and return its total price.

        total = Σ(line.quantity × product.price), at currency precision.
        See place() for errors.
        """
        return cls.place(buyer, order_date, products).total_price

    @classmethod
    def create_from_request(cls, request) -> Decimal:
        """create() from a PurchaseOrderRequest or its inbound payload."""
        if isinstance(request, Mapping):
            request = PurchaseOrderRequest.from_payload(request)
        return cls.create(request.buyer, request.date, request.products)

    # ══════════════════════════════════════════════════════════════
    # CLOSE
    # ══════════════════════════════════════════════════════════════

    @classmethod
    def close(cls, order) -> PurchaseOrder:
        """
        Close an order and consume its stock.

        1. Locks the order; it must be OPEN
        2. Re-validates the persisted lines against current stock
        3. Transition: OPEN -> CLOSED
        4. Consumes each line FEFO

        If any step fails the transaction rolls back: the order stays OPEN
        and no batch changes.

        Raises:
            NotFoundError('ORDER_NOT_FOUND')
            StockError('INVALID_STATUS'): Order is not OPEN
            StockError('INSUFFICIENT_STOCK'): Re-validation or consumption
                found too little stock
        """
        order_id = getattr(order, 'pk', order)

        try:
            with transaction.atomic():
                try:
                    locked = PurchaseOrder.objects.select_for_update().get(pk=order_id)
                except (PurchaseOrder.DoesNotExist, ValueError, TypeError):
                    raise NotFoundError('ORDER_NOT_FOUND', id=order_id) from None

                if locked.status != OrderStatus.OPEN:
                    raise StockError(
                        'INVALID_STATUS',
                        current=locked.status,
                        expected=OrderStatus.OPEN,
                    )

                lines = [
                    OrderLine(product_id=item.product_id, quantity=item.quantity)
                    for item in locked.products.all()
                ]
                OrderValidator.validate(lines, code='INSUFFICIENT_STOCK')

                locked.status = OrderStatus.CLOSED
                locked.closed_at = timezone.now()
                locked.save(update_fields=['status', 'closed_at'])

                for line in lines:
                    BatchLedger.consume(
                        line.product_id,
                        line.quantity,
                        purchase_order=locked,
                    )
        except StockError as exc:
            logger.warning(
                "order.close.failed",
                extra={"order_id": order_id, "code": exc.code},
            )
            raise

        logger.info(
            "order.closed",
            extra={"order_id": locked.pk, "lines": len(lines)},
        )
        return locked

    @classmethod
    def update_status(cls, order, status) -> PurchaseOrder:
        """
        Apply a status change requested by a caller.

        Only CLOSED (case-insensitive) is accepted; it triggers close().

        Raises:
            StockError('INVALID_STATUS'): Any other status value
        """
        if str(status).strip().upper() != OrderStatus.CLOSED:
            raise StockError(
                'INVALID_STATUS',
                current=str(status),
                expected=OrderStatus.CLOSED,
            )
        return cls.close(order)

    @classmethod
    def update_status_from_request(cls, request) -> PurchaseOrder:
        """update_status() from a StatusUpdate or its inbound payload."""
        if isinstance(request, Mapping):
            request = StatusUpdate.from_payload(request)
        return cls.update_status(request.order_id, request.status)

    # ══════════════════════════════════════════════════════════════
    # QUERIES
    # ══════════════════════════════════════════════════════════════

    @classmethod
    def get_order(cls, order_id) -> PurchaseOrder:
        """Get a purchase order by id."""
        return get_catalog().get_order(order_id)

    @classmethod
    def list_orders(cls, buyer=None, status=None):
        """List purchase orders, optionally by buyer and/or status."""
        qs = PurchaseOrder.objects.select_related('buyer')
        if buyer is not None:
            qs = qs.filter(buyer=buyer)
        if status is not None:
            qs = qs.filter(status=status)
        return qs

    @classmethod
    def line_items(cls, order):
        """Line items of an order, with their products."""
        order = get_catalog().get_order(order)
        return order.products.select_related('product')

    @classmethod
    def total_price(cls, order) -> Decimal:
        """Total price of a persisted order, at currency precision."""
        return _quantize_price(get_catalog().get_order(order).total)

    @classmethod
    def as_dict(cls, order) -> dict:
        """Outbound representation of an order."""
        return {
            'id': order.pk,
            'status': order.status,
            'buyer': order.buyer_id,
            'date': order.date.isoformat(),
        }
