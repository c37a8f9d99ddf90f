"""
Frescos Models.

Core models for the warehouse:
- Seller, Buyer: who sells, who buys
- Warehouse, Representative, Section: where stock lives
- Product: what is stocked
- BatchStock: physical lot of a product in a section
- StockMove: immutable ledger of batch quantity changes
- PurchaseOrder, OrderProduct: what a buyer asked for
"""

from frescos.models.batch import BatchStock
from frescos.models.enums import BATCH_SORT_FIELDS, BatchSort, Category, OrderStatus
from frescos.models.move import StockMove
from frescos.models.order import OrderProduct, PurchaseOrder
from frescos.models.party import Buyer, Seller
from frescos.models.product import Product
from frescos.models.warehouse import Representative, Section, Warehouse

__all__ = [
    'Category',
    'OrderStatus',
    'BatchSort',
    'BATCH_SORT_FIELDS',
    'Seller',
    'Buyer',
    'Warehouse',
    'Representative',
    'Section',
    'Product',
    'BatchStock',
    'StockMove',
    'PurchaseOrder',
    'OrderProduct',
]
