"""
Frescos Catalog Adapter — identity resolution backed by the Django ORM.

This adapter loads the configured CatalogLookup from settings.

Usage:
    from frescos.adapters import get_catalog

    catalog = get_catalog()
    product = catalog.get_product(7)

Settings:
    FRESCOS = {
        "CATALOG_BACKEND": "frescos.adapters.catalog.ModelCatalog",
    }
"""

from __future__ import annotations

import logging
import threading

from django.core.exceptions import ImproperlyConfigured
from django.utils.module_loading import import_string

from frescos.conf import frescos_settings
from frescos.exceptions import NotFoundError
from frescos.protocols.catalog import CatalogLookup

logger = logging.getLogger(__name__)


class ModelCatalog:
    """
    Default CatalogLookup: one primary-key query per lookup.

    Model instances are accepted too and returned unchanged, so callers can
    pass either an id or an already-loaded object.
    """

    def _get(self, model, pk, code):
        if isinstance(pk, model):
            return pk
        try:
            return model.objects.get(pk=pk)
        except (model.DoesNotExist, ValueError, TypeError):
            raise NotFoundError(code, id=pk) from None

    def get_product(self, product_id):
        from frescos.models import Product
        return self._get(Product, product_id, 'PRODUCT_NOT_FOUND')

    def get_buyer(self, buyer_id):
        from frescos.models import Buyer
        return self._get(Buyer, buyer_id, 'BUYER_NOT_FOUND')

    def get_section(self, section_id):
        from frescos.models import Section
        return self._get(Section, section_id, 'SECTION_NOT_FOUND')

    def get_order(self, order_id):
        from frescos.models import PurchaseOrder
        return self._get(PurchaseOrder, order_id, 'ORDER_NOT_FOUND')

    def get_representative(self, representative_id):
        from frescos.models import Representative
        return self._get(Representative, representative_id, 'REPRESENTATIVE_NOT_FOUND')


# Cached catalog instance
_lock = threading.Lock()
_catalog: CatalogLookup | None = None


def get_catalog() -> CatalogLookup:
    """
    Return the configured catalog lookup.

    Raises:
        ImproperlyConfigured: If CATALOG_BACKEND is empty or import fails
    """
    global _catalog

    if _catalog is None:
        with _lock:
            if _catalog is None:  # double-checked
                backend_path = frescos_settings.CATALOG_BACKEND

                if not backend_path:
                    raise ImproperlyConfigured(
                        "FRESCOS['CATALOG_BACKEND'] must be configured. "
                        "Example: 'frescos.adapters.catalog.ModelCatalog'"
                    )

                try:
                    backend_class = import_string(backend_path)
                except ImportError as e:
                    raise ImproperlyConfigured(
                        f"Failed to import catalog backend '{backend_path}': {e}"
                    ) from e

                _catalog = backend_class()
                logger.debug("Loaded catalog backend: %s", backend_path)

    return _catalog


def reset_catalog() -> None:
    """Reset the cached catalog. Useful for testing."""
    global _catalog
    _catalog = None
