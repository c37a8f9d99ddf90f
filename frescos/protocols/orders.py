"""
Purchase order request shapes — what callers send to the order workflow.

Inbound payloads:
    create: {"date": "2026-03-02", "buyer": 1,
             "products": [{"productId": 7, "quantity": 10}]}
    status: {"orderId": 12, "status": "CLOSED"}
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from frescos.exceptions import StockError


@dataclass(frozen=True)
class OrderLine:
    """One (product, quantity) pair of a purchase order."""

    product_id: int
    quantity: int

    @classmethod
    def coerce(cls, line) -> OrderLine:
        """
        Build an OrderLine from an OrderLine, a (product_id, quantity) pair
        or a {"productId"|"product_id", "quantity"} mapping.

        Raises:
            StockError('INVALID_REQUEST'): Unrecognized shape or non-integer values
            StockError('INVALID_QUANTITY'): quantity <= 0
        """
        if isinstance(line, cls):
            product_id, quantity = line.product_id, line.quantity
        elif isinstance(line, Mapping):
            product_id = line.get('productId', line.get('product_id'))
            quantity = line.get('quantity')
        else:
            try:
                product_id, quantity = line
            except (TypeError, ValueError):
                raise StockError('INVALID_REQUEST', line=repr(line)) from None

        try:
            product_id = _to_pk(product_id)
            quantity = _to_int(quantity)
        except (TypeError, ValueError, OverflowError):
            raise StockError('INVALID_REQUEST', line=repr(line)) from None

        if quantity <= 0:
            raise StockError('INVALID_QUANTITY', product_id=product_id, requested=quantity)

        return cls(product_id=product_id, quantity=quantity)


def _to_int(value) -> int:
    """
    Whole numbers only: ints, integral floats/Decimals and numeric strings.

    Booleans and fractional values raise instead of being truncated.
    """
    if isinstance(value, bool):
        raise TypeError("boolean is not a number")
    if isinstance(value, int):
        return value
    if isinstance(value, (float, Decimal)):
        whole = int(value)
        if whole != value:
            raise ValueError(f"{value!r} is not a whole number")
        return whole
    return int(value)


def _to_pk(value) -> int:
    """Accept a model instance or a whole-number id."""
    pk = getattr(value, 'pk', value)
    if pk is None:
        raise TypeError('missing id')
    return _to_int(pk)


def coerce_lines(lines: Iterable) -> list[OrderLine]:
    """Normalize a sequence of lines (see OrderLine.coerce)."""
    return [OrderLine.coerce(line) for line in lines]


@dataclass(frozen=True)
class PurchaseOrderRequest:
    """Request to create a purchase order."""

    date: date
    buyer: int
    products: list[OrderLine] = field(default_factory=list)

    @classmethod
    def from_payload(cls, payload: Mapping) -> PurchaseOrderRequest:
        """
        Parse an inbound payload.

        Raises:
            StockError('INVALID_REQUEST'): Missing or malformed fields
        """
        try:
            raw_date = payload['date']
            buyer = _to_pk(payload['buyer'])
            products = payload['products']
        except (KeyError, TypeError, ValueError, OverflowError) as exc:
            raise StockError('INVALID_REQUEST', error=str(exc)) from None

        if not isinstance(products, (list, tuple)):
            raise StockError('INVALID_REQUEST', products=repr(products))

        if isinstance(raw_date, date):
            order_date = raw_date
        else:
            try:
                order_date = date.fromisoformat(str(raw_date))
            except ValueError:
                raise StockError('INVALID_REQUEST', date=str(raw_date)) from None

        return cls(date=order_date, buyer=buyer, products=coerce_lines(products))


@dataclass(frozen=True)
class StatusUpdate:
    """Request to change the status of a purchase order."""

    order_id: int
    status: str

    @classmethod
    def from_payload(cls, payload: Mapping) -> StatusUpdate:
        try:
            order_id = _to_pk(payload.get('orderId', payload.get('order_id')))
            status = str(payload['status'])
        except (KeyError, TypeError, ValueError, OverflowError, AttributeError) as exc:
            raise StockError('INVALID_REQUEST', error=str(exc)) from None
        return cls(order_id=order_id, status=status)
