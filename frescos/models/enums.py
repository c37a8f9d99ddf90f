"""
Enums for Frescos models.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _


class Category(models.TextChoices):
    """
    Storage class of a product and of the section that holds it.

    A product may only be stocked in a section of the same category.
    """
    FRESH = 'FS', _('Fresco')
    REFRIGERATED = 'RF', _('Refrigerado')
    FROZEN = 'FF', _('Congelado')


class OrderStatus(models.TextChoices):
    """Purchase order lifecycle status."""
    OPEN = 'OPEN', _('Aberto')       # Created, stock validated but not consumed
    CLOSED = 'CLOSED', _('Fechado')  # Stock consumed (terminal)


class BatchSort(models.TextChoices):
    """
    Sort keys for listing the batches of a product.

    Values are the one-letter codes accepted from callers:
    L = lote (batch number), Q = quantidade, V = vencimento (due date).
    """
    BATCH_NUMBER = 'L', _('Lote')
    QUANTITY = 'Q', _('Quantidade')
    DUE_DATE = 'V', _('Vencimento')

    @classmethod
    def from_code(cls, code):
        """Resolve a member or a one-letter code (case-insensitive)."""
        if isinstance(code, cls):
            return code
        try:
            return cls(str(code).strip().upper())
        except ValueError:
            from frescos.exceptions import StockError
            raise StockError('INVALID_SORT', sort=code) from None


# Comparator table: each sort key -> order_by fields (id breaks ties)
BATCH_SORT_FIELDS = {
    BatchSort.BATCH_NUMBER: ('batch_number', 'id'),
    BatchSort.QUANTITY: ('quantity', 'id'),
    BatchSort.DUE_DATE: ('due_date', 'id'),
}
