"""
Serializers for the invoice API.

Serializers:
    InvoiceItemSerializer: Line item details
    InvoiceSerializer: Invoice with nested items
"""

from __future__ import annotations

from rest_framework import serializers

from billing.models import Invoice, InvoiceItem


class InvoiceItemSerializer(serializers.ModelSerializer):
    class Meta:
        model = InvoiceItem
        fields = ["id", "name", "quantity", "price"]
        read_only_fields = fields


class InvoiceSerializer(serializers.ModelSerializer):
    """
    Read-only invoice representation returned by the invoice view.

    Gateways redirect the browser here after checkout, so the payload
    carries the settlement fields (status, paid_at, paid_with).
    """

    items = InvoiceItemSerializer(many=True, read_only=True)

    class Meta:
        model = Invoice
        fields = [
            "id",
            "total",
            "currency",
            "status",
            "paid_at",
            "paid_with",
            "items",
            "created_at",
        ]
        read_only_fields = fields
