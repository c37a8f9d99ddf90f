"""
Initial migration for Frescos models.
"""

import django.core.validators
import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):
    """Create Frescos models: catalog, warehouse, batches, ledger and orders."""

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Buyer',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=255, verbose_name='Nome')),
                ('cpf', models.CharField(max_length=11, unique=True, validators=[django.core.validators.RegexValidator(message='Preencher somente com números (11 dígitos).', regex='^\\d{11}$')], verbose_name='CPF')),
            ],
            options={
                'verbose_name': 'Comprador',
                'verbose_name_plural': 'Compradores',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='Seller',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=255, verbose_name='Nome')),
                ('cpf', models.CharField(max_length=11, unique=True, validators=[django.core.validators.RegexValidator(message='Preencher somente com números (11 dígitos).', regex='^\\d{11}$')], verbose_name='CPF')),
                ('rating', models.DecimalField(blank=True, decimal_places=2, max_digits=3, null=True, validators=[django.core.validators.MinValueValidator(0), django.core.validators.MaxValueValidator(5)], verbose_name='Avaliação')),
            ],
            options={
                'verbose_name': 'Vendedor',
                'verbose_name_plural': 'Vendedores',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='Warehouse',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=100, verbose_name='Nome')),
                ('address', models.CharField(blank=True, default='', max_length=255, verbose_name='Endereço')),
                ('city', models.CharField(blank=True, default='', max_length=100, verbose_name='Cidade')),
                ('state', models.CharField(blank=True, default='', max_length=2, verbose_name='UF')),
                ('postal_code', models.CharField(blank=True, default='', max_length=9, verbose_name='CEP')),
            ],
            options={
                'verbose_name': 'Armazém',
                'verbose_name_plural': 'Armazéns',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='Product',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('title', models.CharField(max_length=255, verbose_name='Título')),
                ('description', models.TextField(blank=True, default='', verbose_name='Descrição')),
                ('category', models.CharField(choices=[('FS', 'Fresco'), ('RF', 'Refrigerado'), ('FF', 'Congelado')], max_length=2, verbose_name='Categoria')),
                ('unit_volume', models.DecimalField(decimal_places=3, max_digits=10, verbose_name='Volume Unitário')),
                ('unit_weight', models.DecimalField(blank=True, decimal_places=3, max_digits=10, null=True, verbose_name='Peso Unitário')),
                ('price', models.DecimalField(decimal_places=2, max_digits=12, verbose_name='Preço')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Criado em')),
                ('seller', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='products', to='frescos.seller', verbose_name='Vendedor')),
            ],
            options={
                'verbose_name': 'Produto',
                'verbose_name_plural': 'Produtos',
                'ordering': ['title'],
            },
        ),
        migrations.CreateModel(
            name='Section',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('description', models.CharField(max_length=255, verbose_name='Descrição')),
                ('category', models.CharField(choices=[('FS', 'Fresco'), ('RF', 'Refrigerado'), ('FF', 'Congelado')], max_length=2, verbose_name='Categoria')),
                ('total_size', models.DecimalField(decimal_places=3, help_text='Volume total em unidades de volume', max_digits=12, verbose_name='Capacidade Total')),
                ('temperature', models.DecimalField(decimal_places=2, max_digits=5, verbose_name='Temperatura')),
                ('warehouse', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='sections', to='frescos.warehouse', verbose_name='Armazém')),
            ],
            options={
                'verbose_name': 'Setor',
                'verbose_name_plural': 'Setores',
            },
        ),
        migrations.CreateModel(
            name='Representative',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=255, verbose_name='Nome')),
                ('warehouse', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='representatives', to='frescos.warehouse', verbose_name='Armazém')),
            ],
            options={
                'verbose_name': 'Representante',
                'verbose_name_plural': 'Representantes',
            },
        ),
        migrations.CreateModel(
            name='BatchStock',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('batch_number', models.CharField(max_length=50, verbose_name='Número do Lote')),
                ('quantity', models.PositiveIntegerField(default=0, verbose_name='Quantidade')),
                ('manufacturing_date', models.DateField(blank=True, null=True, verbose_name='Data de Fabricação')),
                ('manufacturing_time', models.DateTimeField(blank=True, null=True, verbose_name='Hora de Fabricação')),
                ('due_date', models.DateField(db_index=True, help_text='Último dia em que o lote pode ser vendido', verbose_name='Data de Vencimento')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Criado em')),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('product', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='batches', to='frescos.product', verbose_name='Produto')),
                ('section', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='batches', to='frescos.section', verbose_name='Setor')),
            ],
            options={
                'verbose_name': 'Lote',
                'verbose_name_plural': 'Lotes',
                'ordering': ['due_date', 'id'],
                'indexes': [models.Index(fields=['product', 'due_date'], name='frescos_batch_product_due_idx')],
            },
        ),
        migrations.CreateModel(
            name='PurchaseOrder',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('date', models.DateField(verbose_name='Data')),
                ('status', models.CharField(choices=[('OPEN', 'Aberto'), ('CLOSED', 'Fechado')], db_index=True, default='OPEN', max_length=10, verbose_name='Status')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Criado em')),
                ('closed_at', models.DateTimeField(blank=True, null=True, verbose_name='Fechado em')),
                ('buyer', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='purchase_orders', to='frescos.buyer', verbose_name='Comprador')),
            ],
            options={
                'verbose_name': 'Pedido de Compra',
                'verbose_name_plural': 'Pedidos de Compra',
                'ordering': ['-date', '-id'],
            },
        ),
        migrations.CreateModel(
            name='OrderProduct',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('quantity', models.PositiveIntegerField(verbose_name='Quantidade')),
                ('product', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='order_lines', to='frescos.product', verbose_name='Produto')),
                ('purchase_order', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='products', to='frescos.purchaseorder', verbose_name='Pedido de Compra')),
            ],
            options={
                'verbose_name': 'Produto do Pedido',
                'verbose_name_plural': 'Produtos do Pedido',
                'ordering': ['id'],
            },
        ),
        migrations.CreateModel(
            name='StockMove',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('delta', models.IntegerField(help_text='Positivo = entrada, Negativo = saída', verbose_name='Variação')),
                ('reason', models.CharField(help_text='Obrigatório. Ex: "Recebimento", "Pedido #123"', max_length=255, verbose_name='Motivo')),
                ('timestamp', models.DateTimeField(db_index=True, default=django.utils.timezone.now, verbose_name='Data/Hora')),
                ('batch', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='moves', to='frescos.batchstock', verbose_name='Lote')),
                ('purchase_order', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='moves', to='frescos.purchaseorder', verbose_name='Pedido de Compra')),
            ],
            options={
                'verbose_name': 'Movimento',
                'verbose_name_plural': 'Movimentos',
                'ordering': ['timestamp', 'id'],
                'indexes': [models.Index(fields=['batch', 'timestamp'], name='frescos_move_batch_ts_idx')],
            },
        ),
    ]
