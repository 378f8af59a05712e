"""
Invoice models for the billing host.

An Invoice is the order gateways are asked to collect. Its primary key is
the order identifier handed to payment providers (out_trade_no for AliPay).

Usage:
    from billing.models import Invoice, InvoiceStatus

    invoice = Invoice.objects.create(total=Decimal("25.00"))
    invoice.items.create(name="Hosting", quantity=1, price=Decimal("25.00"))
"""

from __future__ import annotations

from django.db import models

from core.models import BaseModel


class InvoiceStatus(models.TextChoices):
    """Settlement state of an invoice."""

    PENDING = "pending", "Pending"
    PAID = "paid", "Paid"
    CANCELLED = "cancelled", "Cancelled"


class Invoice(BaseModel):
    """
    A bill awaiting (or having received) payment.

    Fields:
        total: Amount due, in major currency units
        currency: ISO 4217 code (informational; gateways settle in their own)
        status: pending -> paid, or cancelled
        paid_at: When the payment callback first marked it paid
        paid_with: Name of the gateway that confirmed payment
    """

    total = models.DecimalField(max_digits=12, decimal_places=2)
    currency = models.CharField(max_length=3, default="CNY")
    status = models.CharField(
        max_length=16,
        choices=InvoiceStatus.choices,
        default=InvoiceStatus.PENDING,
        db_index=True,
    )
    paid_at = models.DateTimeField(null=True, blank=True)
    paid_with = models.CharField(
        max_length=64,
        blank=True,
        default="",
        help_text="Gateway that confirmed the payment",
    )

    class Meta(BaseModel.Meta):
        verbose_name = "invoice"
        verbose_name_plural = "invoices"

    def __str__(self) -> str:
        return f"Invoice #{self.pk} ({self.status})"

    @property
    def is_paid(self) -> bool:
        return self.status == InvoiceStatus.PAID


class InvoiceItem(BaseModel):
    """A line on an invoice; gateways build payment descriptions from these."""

    invoice = models.ForeignKey(
        Invoice,
        on_delete=models.CASCADE,
        related_name="items",
    )
    name = models.CharField(max_length=255)
    quantity = models.PositiveIntegerField(default=1)
    price = models.DecimalField(max_digits=12, decimal_places=2, default=0)

    class Meta:
        ordering = ["id"]

    def __str__(self) -> str:
        return f"{self.name} x{self.quantity}"
