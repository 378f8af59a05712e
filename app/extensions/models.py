"""
Settings store for gateway extensions.

Each row holds one configuration value for one extension, keyed by
(extension, name). Values are JSON so booleans stay booleans.

Usage:
    from extensions.models import ExtensionSetting

    ExtensionSetting.objects.update_or_create(
        extension="AliPay",
        name="app_id",
        defaults={"value": "2021000000000000"},
    )
"""

from __future__ import annotations

from django.db import models

from core.models import BaseModel


class ExtensionSetting(BaseModel):
    """
    One stored configuration value for an extension.

    Fields:
        extension: Extension name as registered (e.g. "AliPay")
        name: Config field name from the extension's get_config()
        value: JSON value (string, boolean, or null)
    """

    extension = models.CharField(max_length=64, db_index=True)
    name = models.CharField(max_length=64)
    value = models.JSONField(null=True, blank=True)

    class Meta(BaseModel.Meta):
        ordering = ["extension", "name"]
        constraints = [
            models.UniqueConstraint(
                fields=["extension", "name"],
                name="unique_extension_setting",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.extension}.{self.name}"
