"""
Frescos Adapters.

Implementations of protocols for external systems.
"""

from frescos.adapters.catalog import ModelCatalog, get_catalog, reset_catalog

__all__ = [
    "ModelCatalog",
    "get_catalog",
    "reset_catalog",
]
