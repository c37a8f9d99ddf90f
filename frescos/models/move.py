"""
StockMove model — Immutable ledger of batch quantity changes.
"""

from django.db import models, transaction
from django.db.models import F
from django.utils import timezone
from django.utils.translation import gettext_lazy as _


class StockMove(models.Model):
    """
    Immutable record of a batch quantity change.

    Rules:
    - NEVER update() or delete()
    - Corrections are new moves with inverse delta
    - Updates BatchStock.quantity atomically on save()

    This is the ONLY model that changes a batch quantity.
    """

    batch = models.ForeignKey(
        'frescos.BatchStock',
        on_delete=models.PROTECT,
        related_name='moves',
        verbose_name=_('Lote'),
    )
    delta = models.IntegerField(
        verbose_name=_('Variação'),
        help_text=_('Positivo = entrada, Negativo = saída'),
    )
    purchase_order = models.ForeignKey(
        'frescos.PurchaseOrder',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='moves',
        verbose_name=_('Pedido de Compra'),
    )
    reason = models.CharField(
        max_length=255,
        verbose_name=_('Motivo'),
        help_text=_('Obrigatório. Ex: "Recebimento", "Pedido #123"'),
    )
    timestamp = models.DateTimeField(default=timezone.now, db_index=True, verbose_name=_('Data/Hora'))

    class Meta:
        verbose_name = _('Movimento')
        verbose_name_plural = _('Movimentos')
        ordering = ['timestamp', 'id']
        indexes = [
            models.Index(fields=['batch', 'timestamp'], name='frescos_move_batch_ts_idx'),
        ]

    def save(self, *args, **kwargs):
        """Save move and update the batch balance atomically."""
        if self.pk:
            raise ValueError(
                "Movimentos são imutáveis. "
                "Para corrigir, crie um novo movimento com variação inversa."
            )

        if not self.reason:
            raise ValueError("Motivo é obrigatório")

        if not self.delta:
            raise ValueError("Variação não pode ser zero")

        with transaction.atomic():
            super().save(*args, **kwargs)

            from frescos.models.batch import BatchStock

            BatchStock.objects.filter(pk=self.batch_id).update(
                quantity=F('quantity') + self.delta,
                updated_at=timezone.now()
            )

    def delete(self, *args, **kwargs):
        """Prevent deletion — moves are immutable."""
        raise ValueError(
            "Movimentos são imutáveis. "
            "Para estornar, crie um novo movimento com variação inversa."
        )

    def __str__(self) -> str:
        signal = '+' if self.delta > 0 else ''
        return f"{signal}{self.delta} | {self.reason}"
