"""
Django admin configuration for extension settings.
"""

from django.contrib import admin

from extensions.models import ExtensionSetting


@admin.register(ExtensionSetting)
class ExtensionSettingAdmin(admin.ModelAdmin):
    """
    Admin configuration for ExtensionSetting.

    Direct access to the settings store; prefer the settings API, which
    validates values against each gateway's schema.
    """

    list_display = ["extension", "name", "updated_at"]
    list_filter = ["extension"]
    search_fields = ["extension", "name"]
    readonly_fields = ["created_at", "updated_at"]
    ordering = ["extension", "name"]
