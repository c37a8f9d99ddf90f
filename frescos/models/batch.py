"""
BatchStock model — a physical lot of one product in one section.

Usage:
    batch = stock.admit(
        product, section, 100,
        batch_number="LOT-2026-0223-A",
        due_date=date.today() + timedelta(weeks=10),
    )

    stock.consume(product, 7)  # FEFO across the product's batches
"""

from django.db import models
from django.utils.translation import gettext_lazy as _


class BatchStockQuerySet(models.QuerySet):
    """Custom QuerySet for BatchStock with convenience filters."""

    def for_product(self, product):
        """Filter batches of a specific product (instance or pk)."""
        return self.filter(product=product)

    def in_section(self, section):
        """Filter batches stored in a specific section (instance or pk)."""
        return self.filter(section=section)

    def non_empty(self):
        """Batches with remaining stock."""
        return self.filter(quantity__gt=0)

    def valid_at(self, cutoff):
        """Non-empty batches due on or after the cutoff date."""
        from frescos.shelflife import filter_available
        return filter_available(self, cutoff)

    def expiring_before(self, date):
        """Batches due strictly before the given date."""
        return self.filter(due_date__lt=date)

    def fefo(self):
        """First-expire-first-out ordering."""
        return self.order_by('due_date', 'id')


class BatchStock(models.Model):
    """
    Location-scoped quantity of one product.

    quantity is a cached balance: it is set to 0 on creation and only
    changes through StockMove.save(), which updates it atomically.
    It never goes below zero.
    """

    batch_number = models.CharField(
        max_length=50,
        verbose_name=_('Número do Lote'),
    )
    product = models.ForeignKey(
        'frescos.Product',
        on_delete=models.PROTECT,
        related_name='batches',
        verbose_name=_('Produto'),
    )
    section = models.ForeignKey(
        'frescos.Section',
        on_delete=models.PROTECT,
        related_name='batches',
        verbose_name=_('Setor'),
    )
    quantity = models.PositiveIntegerField(
        default=0,
        verbose_name=_('Quantidade'),
    )

    # Dates
    manufacturing_date = models.DateField(
        null=True,
        blank=True,
        verbose_name=_('Data de Fabricação'),
    )
    manufacturing_time = models.DateTimeField(
        null=True,
        blank=True,
        verbose_name=_('Hora de Fabricação'),
    )
    due_date = models.DateField(
        db_index=True,
        verbose_name=_('Data de Vencimento'),
        help_text=_('Último dia em que o lote pode ser vendido'),
    )

    created_at = models.DateTimeField(auto_now_add=True, verbose_name=_('Criado em'))
    updated_at = models.DateTimeField(auto_now=True)

    objects = BatchStockQuerySet.as_manager()

    class Meta:
        verbose_name = _('Lote')
        verbose_name_plural = _('Lotes')
        ordering = ['due_date', 'id']
        indexes = [
            models.Index(fields=['product', 'due_date'], name='frescos_batch_product_due_idx'),
        ]

    @property
    def volume(self):
        """Volume occupied in the section."""
        return self.quantity * self.product.unit_volume

    def __str__(self) -> str:
        return f"Lote {self.batch_number} (venc:{self.due_date}): {self.quantity}"
