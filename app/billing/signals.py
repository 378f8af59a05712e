"""
Django signals for the billing app.

Signals:
    invoice_paid: Sent once when an invoice transitions to paid.
        Arguments: invoice, gateway

Usage:
    from django.dispatch import receiver
    from billing.signals import invoice_paid

    @receiver(invoice_paid)
    def provision_services(sender, invoice, gateway, **kwargs):
        ...
"""

from __future__ import annotations

import logging

from django.dispatch import Signal, receiver

logger = logging.getLogger(__name__)

invoice_paid = Signal()


@receiver(invoice_paid)
def log_invoice_paid(sender, invoice, gateway, **kwargs):
    """Record the settlement in the application log."""
    logger.info(
        f"Invoice {invoice.pk} paid via {gateway}",
        extra={
            "invoice_id": invoice.pk,
            "gateway": gateway,
            "total": str(invoice.total),
        },
    )
