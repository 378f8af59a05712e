"""
Host services exposed to gateway extensions.

Gateways reach the host only through ExtensionHelper: reading their stored
settings, reporting a completed payment, and resolving host URLs and paths.

Usage:
    from extensions.helpers import ExtensionHelper

    app_id = ExtensionHelper.get_config("AliPay", "app_id")
    ExtensionHelper.payment_done(order_id, "AliPay")
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from django.conf import settings
from django.urls import reverse

from extensions.models import ExtensionSetting

logger = logging.getLogger(__name__)


class ExtensionHelper:
    """Static facade over the settings store and host callbacks."""

    @staticmethod
    def get_config(extension: str, name: str) -> Any:
        """
        Read one stored setting.

        Args:
            extension: Extension name (e.g. "AliPay")
            name: Config field name (e.g. "app_id")

        Returns:
            The stored JSON value, or None when unset
        """
        setting = (
            ExtensionSetting.objects.filter(extension=extension, name=name)
            .only("value")
            .first()
        )
        return setting.value if setting else None

    @staticmethod
    def get_configs(extension: str) -> dict[str, Any]:
        """Return every stored setting of an extension keyed by name."""
        return dict(
            ExtensionSetting.objects.filter(extension=extension).values_list(
                "name", "value"
            )
        )

    @staticmethod
    def set_config(extension: str, name: str, value: Any) -> None:
        """Create or replace one stored setting."""
        ExtensionSetting.objects.update_or_create(
            extension=extension,
            name=name,
            defaults={"value": value},
        )

    @staticmethod
    def payment_done(order_id: int | str, gateway: str) -> bool:
        """
        Report that a gateway confirmed payment of an order.

        Delegates to the billing host; repeated reports are harmless.

        Returns:
            True if the invoice transitioned to paid on this call
        """
        from billing.services import InvoiceService

        logger.info(
            f"Payment confirmed by {gateway} for order {order_id}",
            extra={"order_id": str(order_id), "gateway": gateway},
        )
        return InvoiceService.payment_done(order_id, gateway)

    @staticmethod
    def invoice_url(order_id: int | str) -> str:
        """Path of the host invoice view for an order."""
        return reverse("billing:invoice-show", args=[order_id])

    @staticmethod
    def absolute_url(path: str) -> str:
        """Prefix a host path with the public site URL."""
        return f"{settings.SITE_URL.rstrip('/')}{path}"

    @staticmethod
    def base_path(relative: str) -> Path:
        """Resolve a path stored in settings against the project base dir."""
        return Path(settings.BASE_DIR) / relative
