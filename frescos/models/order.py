"""
PurchaseOrder and OrderProduct models — what a buyer asked for.
"""

from decimal import Decimal

from django.db import models
from django.utils.translation import gettext_lazy as _

from frescos.models.enums import OrderStatus


class PurchaseOrder(models.Model):
    """
    Purchase order of a buyer.

    LIFECYCLE:

        ┌──────┐   close()   ┌────────┐
        │ OPEN │ ──────────► │ CLOSED │
        └──────┘             └────────┘

    OPEN: line items validated against available stock, nothing consumed.
    CLOSED: stock re-validated and consumed FEFO (terminal).

    Created once; afterwards only the status changes.
    """

    date = models.DateField(verbose_name=_('Data'))
    status = models.CharField(
        max_length=10,
        choices=OrderStatus.choices,
        default=OrderStatus.OPEN,
        db_index=True,
        verbose_name=_('Status'),
    )
    buyer = models.ForeignKey(
        'frescos.Buyer',
        on_delete=models.PROTECT,
        related_name='purchase_orders',
        verbose_name=_('Comprador'),
    )
    created_at = models.DateTimeField(auto_now_add=True, verbose_name=_('Criado em'))
    closed_at = models.DateTimeField(null=True, blank=True, verbose_name=_('Fechado em'))

    class Meta:
        verbose_name = _('Pedido de Compra')
        verbose_name_plural = _('Pedidos de Compra')
        ordering = ['-date', '-id']

    @property
    def is_open(self) -> bool:
        return self.status == OrderStatus.OPEN

    @property
    def total(self) -> Decimal:
        """Σ(quantity × product.price) over the line items."""
        return sum(
            (line.quantity * line.product.price
             for line in self.products.select_related('product')),
            Decimal('0'),
        )

    def __str__(self) -> str:
        return f"Pedido #{self.pk} ({self.get_status_display()})"


class OrderProduct(models.Model):
    """Line item: one product and the quantity requested in an order."""

    purchase_order = models.ForeignKey(
        PurchaseOrder,
        on_delete=models.CASCADE,
        related_name='products',
        verbose_name=_('Pedido de Compra'),
    )
    product = models.ForeignKey(
        'frescos.Product',
        on_delete=models.PROTECT,
        related_name='order_lines',
        verbose_name=_('Produto'),
    )
    quantity = models.PositiveIntegerField(verbose_name=_('Quantidade'))

    class Meta:
        verbose_name = _('Produto do Pedido')
        verbose_name_plural = _('Produtos do Pedido')
        ordering = ['id']

    def __str__(self) -> str:
        return f"{self.quantity}x {self.product}"
