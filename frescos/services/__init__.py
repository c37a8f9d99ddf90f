"""
Frescos services — modular organization of stock and order operations.

    from frescos.services import (
        BatchLedger, SectionCapacity, StockAdmission, OrderValidator, PurchaseOrders,
    )
"""

from frescos.services.admission import StockAdmission
from frescos.services.capacity import SectionCapacity
from frescos.services.ledger import BatchLedger
from frescos.services.orders import PurchaseOrders
from frescos.services.validator import OrderValidator

__all__ = [
    'BatchLedger',
    'SectionCapacity',
    'StockAdmission',
    'OrderValidator',
    'PurchaseOrders',
]
