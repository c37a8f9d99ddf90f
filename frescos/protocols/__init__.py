"""
Frescos Protocols.

Defines interfaces and request shapes for external integration.
"""

from frescos.protocols.catalog import CatalogLookup
from frescos.protocols.orders import (
    OrderLine,
    PurchaseOrderRequest,
    StatusUpdate,
    coerce_lines,
)

__all__ = [
    "CatalogLookup",
    "OrderLine",
    "PurchaseOrderRequest",
    "StatusUpdate",
    "coerce_lines",
]
