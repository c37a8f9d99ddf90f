"""
Stock Service — The single public interface for all stock and order operations.

Usage:
    from frescos import stock, StockError

    stock.admit(product, section, 100, batch_number='L-1', due_date=due)
    stock.available_quantity(product)        # 100
    total = stock.create(buyer, today, [(product.pk, 10)])
    stock.close(order_id)
"""

from frescos.services.admission import StockAdmission
from frescos.services.capacity import SectionCapacity
from frescos.services.ledger import BatchLedger
from frescos.services.orders import PurchaseOrders
from frescos.services.validator import OrderValidator


class Stock(
    BatchLedger,
    SectionCapacity,
    StockAdmission,
    OrderValidator,
    PurchaseOrders,
):
    """
    Single interface for all stock and order operations.

    Parameter convention: (product, quantity, ...) for stock,
    (buyer, date, products) for orders. Products, sections, buyers and
    orders may be passed as instances or ids.

    IMPORTANT: All state-changing methods use atomic transactions
    with appropriate locking. See each method's docstring.
    """
