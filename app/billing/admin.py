"""
Django admin configuration for billing models.
"""

from django.contrib import admin

from billing.models import Invoice, InvoiceItem


class InvoiceItemInline(admin.TabularInline):
    model = InvoiceItem
    extra = 0
    fields = ["name", "quantity", "price"]


@admin.register(Invoice)
class InvoiceAdmin(admin.ModelAdmin):
    """
    Admin configuration for Invoice.

    Settlement fields are read-only; they are written by gateway callbacks.
    """

    list_display = ["id", "total", "currency", "status", "paid_with", "paid_at", "created_at"]
    list_filter = ["status", "paid_with"]
    search_fields = ["id"]
    readonly_fields = ["paid_at", "paid_with", "created_at", "updated_at"]
    inlines = [InvoiceItemInline]
