"""
Frescos configuration.

Usage in settings.py:
    FRESCOS = {
        "LOOKAHEAD_WEEKS": 3,
        "CLOCK": "myproject.clock.today",
        "CATALOG_BACKEND": "frescos.adapters.catalog.ModelCatalog",
        "PRICE_DECIMAL_PLACES": 2,
    }
"""

from dataclasses import dataclass
from typing import Any

from django.conf import settings


@dataclass
class FrescosSettings:
    """Frescos configuration settings."""

    # Minimum remaining shelf life (weeks) for a batch to count as available
    LOOKAHEAD_WEEKS: int = 3

    # Zero-argument callable returning today's date (dotted path, "" = localdate)
    CLOCK: str = ""

    # Catalog lookup backend (dotted path)
    CATALOG_BACKEND: str = "frescos.adapters.catalog.ModelCatalog"

    # Decimal places of computed order totals
    PRICE_DECIMAL_PLACES: int = 2


def get_frescos_settings() -> FrescosSettings:
    """Load settings from Django settings."""
    user_settings: dict[str, Any] = getattr(settings, "FRESCOS", {})
    return FrescosSettings(**{
        k: v for k, v in user_settings.items()
        if k in FrescosSettings.__dataclass_fields__
    })


class _LazySettings:
    """Lazy proxy that re-reads settings on every attribute access."""

    def __getattr__(self, name):
        return getattr(get_frescos_settings(), name)


frescos_settings = _LazySettings()
