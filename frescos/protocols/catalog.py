"""
Catalog Lookup Protocol — resolves identities the allocation core needs.

Frescos defines this protocol; the default ORM implementation lives in
frescos.adapters.catalog. Any other catalog (remote service, cache) can be
plugged in via FRESCOS['CATALOG_BACKEND'].
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from frescos.models import Buyer, Product, PurchaseOrder, Representative, Section


@runtime_checkable
class CatalogLookup(Protocol):
    """
    Protocol for read-only identity resolution.

    Every method raises NotFoundError (code '<ENTITY>_NOT_FOUND')
    when the id does not exist.
    """

    def get_product(self, product_id: int) -> Product:
        """Return the product or raise NotFoundError('PRODUCT_NOT_FOUND')."""
        ...

    def get_buyer(self, buyer_id: int) -> Buyer:
        """Return the buyer or raise NotFoundError('BUYER_NOT_FOUND')."""
        ...

    def get_section(self, section_id: int) -> Section:
        """Return the section or raise NotFoundError('SECTION_NOT_FOUND')."""
        ...

    def get_order(self, order_id: int) -> PurchaseOrder:
        """Return the purchase order or raise NotFoundError('ORDER_NOT_FOUND')."""
        ...

    def get_representative(self, representative_id: int) -> Representative:
        """Return the representative or raise NotFoundError('REPRESENTATIVE_NOT_FOUND')."""
        ...
