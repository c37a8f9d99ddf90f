"""
Clock — the single source of "today" for availability decisions.

Every phase that needs the current date (validation, consumption) calls
today() itself; the value is never carried from one phase to the next.

Tests can point FRESCOS['CLOCK'] at a fixed-date callable or monkeypatch
frescos.clock.today.
"""

from datetime import date

from django.utils import timezone
from django.utils.module_loading import import_string

from frescos.conf import frescos_settings


def today() -> date:
    """Return today's date from the configured clock."""
    path = frescos_settings.CLOCK
    if path:
        return import_string(path)()
    return timezone.localdate()
