"""
Product model — what is stocked and sold.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _

from frescos.models.enums import Category


class Product(models.Model):
    """
    Catalog product owned by a seller.

    Treated as immutable by the allocation core: category, unit_volume and
    price are read when admitting stock and pricing orders.
    """

    title = models.CharField(max_length=255, verbose_name=_('Título'))
    description = models.TextField(blank=True, default='', verbose_name=_('Descrição'))
    category = models.CharField(
        max_length=2,
        choices=Category.choices,
        verbose_name=_('Categoria'),
    )
    unit_volume = models.DecimalField(
        max_digits=10,
        decimal_places=3,
        verbose_name=_('Volume Unitário'),
    )
    unit_weight = models.DecimalField(
        max_digits=10,
        decimal_places=3,
        null=True,
        blank=True,
        verbose_name=_('Peso Unitário'),
    )
    price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        verbose_name=_('Preço'),
    )
    seller = models.ForeignKey(
        'frescos.Seller',
        on_delete=models.PROTECT,
        related_name='products',
        verbose_name=_('Vendedor'),
    )
    created_at = models.DateTimeField(auto_now_add=True, verbose_name=_('Criado em'))

    class Meta:
        verbose_name = _('Produto')
        verbose_name_plural = _('Produtos')
        ordering = ['title']

    def __str__(self) -> str:
        return self.title
