"""
Billing service layer.

InvoiceService owns the invoice state changes gateways trigger. Gateways
never touch Invoice rows directly; they call the payment-done callback
(usually through extensions.helpers.ExtensionHelper.payment_done).

Usage:
    from billing.services import InvoiceService

    invoice = InvoiceService.get_invoice(invoice_id)
    InvoiceService.payment_done(invoice_id, "AliPay")
"""

from __future__ import annotations

import logging

from django.db import transaction
from django.utils import timezone

from billing.exceptions import InvoiceNotFoundError
from billing.models import Invoice, InvoiceStatus
from billing.signals import invoice_paid


class InvoiceService:
    """Invoice lookups and settlement."""

    @classmethod
    def get_logger(cls) -> logging.Logger:
        """Get logger for this service."""
        return logging.getLogger(f"{cls.__module__}.{cls.__name__}")

    @staticmethod
    def get_invoice(invoice_id: int | str) -> Invoice:
        """
        Fetch an invoice by primary key.

        Raises:
            InvoiceNotFoundError: No invoice with that id
        """
        invoice = Invoice.objects.filter(pk=invoice_id).first()
        if invoice is None:
            raise InvoiceNotFoundError(
                f"Invoice {invoice_id} not found",
                details={"invoice_id": str(invoice_id)},
            )
        return invoice

    @classmethod
    def payment_done(cls, invoice_id: int | str, gateway: str) -> bool:
        """
        Mark an invoice paid on behalf of a gateway.

        Safe to call repeatedly: providers notify more than once and gateways
        also confirm on status polls. Only the first call changes the invoice
        and sends invoice_paid.

        Args:
            invoice_id: Invoice primary key (the provider's order id)
            gateway: Name of the confirming gateway

        Returns:
            True if this call transitioned the invoice to paid
        """
        logger = cls.get_logger()
        log_context = {"invoice_id": str(invoice_id), "gateway": gateway}

        try:
            invoice_pk = int(invoice_id)
        except (TypeError, ValueError):
            logger.warning("Payment reported for malformed invoice id", extra=log_context)
            return False

        with transaction.atomic():
            invoice = (
                Invoice.objects.select_for_update().filter(pk=invoice_pk).first()
            )
            if invoice is None:
                logger.warning("Payment reported for unknown invoice", extra=log_context)
                return False

            if invoice.status == InvoiceStatus.PAID:
                logger.debug("Invoice already paid", extra=log_context)
                return False

            invoice.status = InvoiceStatus.PAID
            invoice.paid_at = timezone.now()
            invoice.paid_with = gateway
            invoice.save(update_fields=["status", "paid_at", "paid_with", "updated_at"])

        invoice_paid.send(sender=Invoice, invoice=invoice, gateway=gateway)
        return True
