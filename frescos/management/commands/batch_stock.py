"""
Management command to list the batches of a product.

Usage:
    python manage.py batch_stock 7
    python manage.py batch_stock 7 --sort V
    python manage.py batch_stock 7 --available
"""

from django.core.management.base import BaseCommand, CommandError

from frescos.exceptions import BaseError
from frescos.services.ledger import BatchLedger
from frescos.shelflife import availability_cutoff, is_available


class Command(BaseCommand):
    """List batches of a product."""

    help = 'Lista os lotes de um produto'

    def add_arguments(self, parser):
        parser.add_argument('product_id', type=int)
        parser.add_argument(
            '--sort',
            default=None,
            help='Ordenação: L (lote), Q (quantidade) ou V (vencimento)'
        )
        parser.add_argument(
            '--available',
            action='store_true',
            help='Mostra somente lotes disponíveis para novos pedidos'
        )

    def handle(self, *args, **options):
        try:
            batches = BatchLedger.list_batches(options['product_id'], options['sort'])
        except BaseError as exc:
            raise CommandError(exc.message) from exc

        if options['available']:
            cutoff = availability_cutoff()
            batches = [batch for batch in batches if batch.quantity and is_available(batch, cutoff)]

        for batch in batches:
            self.stdout.write(
                f'{batch.batch_number}\t{batch.quantity}\t{batch.due_date}\t{batch.section_id}'
            )

        total = sum(batch.quantity for batch in batches)
        self.stdout.write(
            self.style.SUCCESS(f'{len(batches)} lote(s), {total} unidade(s)')
        )
