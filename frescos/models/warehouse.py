"""
Warehouse, Representative and Section models — where stock lives.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _

from frescos.models.enums import Category


class Warehouse(models.Model):
    """Physical warehouse. Sections and representatives belong to one."""

    name = models.CharField(max_length=100, verbose_name=_('Nome'))
    address = models.CharField(max_length=255, blank=True, default='', verbose_name=_('Endereço'))
    city = models.CharField(max_length=100, blank=True, default='', verbose_name=_('Cidade'))
    state = models.CharField(max_length=2, blank=True, default='', verbose_name=_('UF'))
    postal_code = models.CharField(max_length=9, blank=True, default='', verbose_name=_('CEP'))

    class Meta:
        verbose_name = _('Armazém')
        verbose_name_plural = _('Armazéns')
        ordering = ['name']

    def __str__(self) -> str:
        return self.name


class Representative(models.Model):
    """Warehouse staff allowed to admit stock into that warehouse's sections."""

    name = models.CharField(max_length=255, verbose_name=_('Nome'))
    warehouse = models.ForeignKey(
        Warehouse,
        on_delete=models.PROTECT,
        related_name='representatives',
        verbose_name=_('Armazém'),
    )

    class Meta:
        verbose_name = _('Representante')
        verbose_name_plural = _('Representantes')

    def __str__(self) -> str:
        return self.name


class Section(models.Model):
    """
    Storage area of a warehouse with a single category and a fixed volume.

    Invariants:
    - Only products of the same category may be stocked here
    - Σ(batch.quantity × product.unit_volume) never exceeds total_size
      (enforced at admission, see services.capacity)
    """

    description = models.CharField(max_length=255, verbose_name=_('Descrição'))
    category = models.CharField(
        max_length=2,
        choices=Category.choices,
        verbose_name=_('Categoria'),
    )
    total_size = models.DecimalField(
        max_digits=12,
        decimal_places=3,
        verbose_name=_('Capacidade Total'),
        help_text=_('Volume total em unidades de volume'),
    )
    temperature = models.DecimalField(
        max_digits=5,
        decimal_places=2,
        verbose_name=_('Temperatura'),
    )
    warehouse = models.ForeignKey(
        Warehouse,
        on_delete=models.PROTECT,
        related_name='sections',
        verbose_name=_('Armazém'),
    )

    class Meta:
        verbose_name = _('Setor')
        verbose_name_plural = _('Setores')

    def __str__(self) -> str:
        return f"{self.description} ({self.get_category_display()})"
