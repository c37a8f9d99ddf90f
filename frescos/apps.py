"""Django app configuration for Frescos."""

from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class FrescosConfig(AppConfig):
    """Configuration for Frescos app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "frescos"
    verbose_name = _("Armazém de Frescos")
