"""
Frescos Admin.

Provides views for back-office operation and production debugging:
- Seller, Buyer, Warehouse, Representative, Product: list + edit
- Section: list + edit, with used/free volume
- BatchStock: read-only (quantity only changes via the stock service)
- StockMove: read-only audit trail
- PurchaseOrder: read-only lines, with a "close" action
"""

import logging

from django.contrib import admin
from django.utils.translation import gettext_lazy as _

from frescos.exceptions import BaseError
from frescos.models import (
    BatchStock,
    Buyer,
    OrderProduct,
    OrderStatus,
    Product,
    PurchaseOrder,
    Representative,
    Section,
    Seller,
    StockMove,
    Warehouse,
)

logger = logging.getLogger(__name__)


class ReadOnlyAdminMixin:
    """Admin without add/change/delete permissions."""

    def has_add_permission(self, request, obj=None):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


# =========================================================================
# PARTIES / CATALOG
# =========================================================================

@admin.register(Seller)
class SellerAdmin(admin.ModelAdmin):
    list_display = ['name', 'cpf', 'rating']
    search_fields = ['name', 'cpf']


@admin.register(Buyer)
class BuyerAdmin(admin.ModelAdmin):
    list_display = ['name', 'cpf']
    search_fields = ['name', 'cpf']


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ['title', 'category', 'unit_volume', 'price', 'seller']
    list_filter = ['category']
    search_fields = ['title']
    readonly_fields = ['created_at']


# =========================================================================
# WAREHOUSE
# =========================================================================

class RepresentativeInline(admin.TabularInline):
    model = Representative
    extra = 0


@admin.register(Warehouse)
class WarehouseAdmin(admin.ModelAdmin):
    list_display = ['name', 'city', 'state']
    search_fields = ['name', 'city']
    inlines = [RepresentativeInline]


@admin.register(Section)
class SectionAdmin(admin.ModelAdmin):
    """Section admin — editable, shows occupied volume."""

    list_display = ['description', 'warehouse', 'category', 'total_size',
                    'used_volume_display', 'free_volume_display']
    list_filter = ['category', 'warehouse']
    search_fields = ['description']

    @admin.display(description=_('Volume ocupado'))
    def used_volume_display(self, obj):
        from frescos.services.capacity import SectionCapacity
        return SectionCapacity.used_volume(obj)

    @admin.display(description=_('Volume livre'))
    def free_volume_display(self, obj):
        from frescos.services.capacity import SectionCapacity
        return SectionCapacity.free_volume(obj)


# =========================================================================
# STOCK (read-only)
# =========================================================================

@admin.register(BatchStock)
class BatchStockAdmin(ReadOnlyAdminMixin, admin.ModelAdmin):
    """BatchStock admin — read-only. Stock only changes via the stock service."""

    list_display = ['batch_number', 'product', 'section', 'quantity', 'due_date']
    list_filter = ['section', 'due_date']
    search_fields = ['batch_number']
    date_hierarchy = 'due_date'
    list_select_related = ['product', 'section']


@admin.register(StockMove)
class StockMoveAdmin(ReadOnlyAdminMixin, admin.ModelAdmin):
    """StockMove admin — read-only. Immutable audit trail."""

    list_display = ['timestamp', 'batch', 'delta', 'reason', 'purchase_order']
    list_filter = ['timestamp']
    search_fields = ['reason']
    date_hierarchy = 'timestamp'


# =========================================================================
# PURCHASE ORDERS
# =========================================================================

class OrderProductInline(ReadOnlyAdminMixin, admin.TabularInline):
    model = OrderProduct
    extra = 0


@admin.register(PurchaseOrder)
class PurchaseOrderAdmin(ReadOnlyAdminMixin, admin.ModelAdmin):
    """PurchaseOrder admin — read-only with close action."""

    list_display = ['id', 'buyer', 'date', 'status', 'closed_at']
    list_filter = ['status', 'date']
    search_fields = ['buyer__name']
    inlines = [OrderProductInline]
    actions = ['close_orders']

    @admin.action(description=_('Fechar pedidos selecionados'))
    def close_orders(self, request, queryset):
        from frescos.services.orders import PurchaseOrders

        count = 0
        for order in queryset.filter(status=OrderStatus.OPEN):
            try:
                PurchaseOrders.close(order)
                count += 1
            except BaseError as exc:
                logger.warning("close_orders: failed to close order %s: %s", order.pk, exc)

        self.message_user(request, _('{count} pedido(s) fechado(s).').format(count=count))
