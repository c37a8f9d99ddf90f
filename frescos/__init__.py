"""
Frescos — warehouse stock allocation for fresh products.

Batches with expiry dates, section capacity, and purchase orders that
only go through when enough non-expiring stock exists.

Uso:
    from frescos import stock, StockError

    total = stock.create(buyer, today, [{"productId": 7, "quantity": 10}])
    stock.close(order_id)   # re-validates and consumes FEFO
"""


def __getattr__(name):
    """Lazy import to avoid circular imports during app loading."""
    if name == 'stock':
        from frescos.service import Stock
        return Stock
    elif name == 'StockError':
        from frescos.exceptions import StockError
        return StockError
    elif name == 'NotFoundError':
        from frescos.exceptions import NotFoundError
        return NotFoundError
    elif name == 'BatchStock':
        from frescos.models.batch import BatchStock
        return BatchStock
    elif name == 'StockMove':
        from frescos.models.move import StockMove
        return StockMove
    elif name == 'PurchaseOrder':
        from frescos.models.order import PurchaseOrder
        return PurchaseOrder
    elif name == 'OrderProduct':
        from frescos.models.order import OrderProduct
        return OrderProduct
    elif name == 'Section':
        from frescos.models.warehouse import Section
        return Section
    elif name == 'Product':
        from frescos.models.product import Product
        return Product
    elif name == 'Category':
        from frescos.models.enums import Category
        return Category
    elif name == 'OrderStatus':
        from frescos.models.enums import OrderStatus
        return OrderStatus
    elif name == 'BatchSort':
        from frescos.models.enums import BatchSort
        return BatchSort
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    'stock',
    'StockError',
    'NotFoundError',
    'BatchStock',
    'StockMove',
    'PurchaseOrder',
    'OrderProduct',
    'Section',
    'Product',
    'Category',
    'OrderStatus',
    'BatchSort',
]

__version__ = '0.1.0'
