"""
Extensions app configuration.
"""

from django.apps import AppConfig


class ExtensionsConfig(AppConfig):
    """Configuration for the gateway extensions application."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "extensions"
    verbose_name = "Extensions"

    def ready(self) -> None:
        # Import every gateway package so it registers itself
        from extensions.registry import autodiscover_gateways

        autodiscover_gateways()
