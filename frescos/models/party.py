"""
Seller and Buyer models — who owns products and who places orders.
"""

from django.core.validators import MaxValueValidator, MinValueValidator, RegexValidator
from django.db import models
from django.utils.translation import gettext_lazy as _

cpf_validator = RegexValidator(
    regex=r'^\d{11}$',
    message=_('Preencher somente com números (11 dígitos).'),
)


class Seller(models.Model):
    """Seller that owns products in the catalog."""

    name = models.CharField(max_length=255, verbose_name=_('Nome'))
    cpf = models.CharField(
        max_length=11,
        unique=True,
        validators=[cpf_validator],
        verbose_name=_('CPF'),
    )
    rating = models.DecimalField(
        max_digits=3,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(0), MaxValueValidator(5)],
        verbose_name=_('Avaliação'),
    )

    class Meta:
        verbose_name = _('Vendedor')
        verbose_name_plural = _('Vendedores')
        ordering = ['name']

    def __str__(self) -> str:
        return self.name


class Buyer(models.Model):
    """Buyer that places purchase orders."""

    name = models.CharField(max_length=255, verbose_name=_('Nome'))
    cpf = models.CharField(
        max_length=11,
        unique=True,
        validators=[cpf_validator],
        verbose_name=_('CPF'),
    )

    class Meta:
        verbose_name = _('Comprador')
        verbose_name_plural = _('Compradores')
        ordering = ['name']

    def __str__(self) -> str:
        return self.name
