"""
Tests for InvoiceService.

Tests cover:
- Invoice lookup
- Payment-done callback transitions and idempotency
- invoice_paid signal emission
"""

from unittest.mock import MagicMock

import pytest

from billing.exceptions import InvoiceNotFoundError
from billing.models import InvoiceStatus
from billing.services import InvoiceService
from billing.signals import invoice_paid


@pytest.fixture
def paid_receiver():
    """Connect a mock receiver to invoice_paid for the duration of a test."""
    receiver = MagicMock()
    invoice_paid.connect(receiver)
    yield receiver
    invoice_paid.disconnect(receiver)


class TestGetInvoice:
    def test_returns_invoice(self, invoice):
        assert InvoiceService.get_invoice(invoice.pk) == invoice

    def test_missing_invoice_raises(self, db):
        with pytest.raises(InvoiceNotFoundError) as exc_info:
            InvoiceService.get_invoice(999999)

        assert exc_info.value.error_code == "INVOICE_NOT_FOUND"
        assert exc_info.value.http_status == 404


class TestPaymentDone:
    """Tests for InvoiceService.payment_done."""

    def test_marks_pending_invoice_paid(self, invoice, paid_receiver):
        """First report transitions the invoice and records the gateway."""
        changed = InvoiceService.payment_done(invoice.pk, "AliPay")

        invoice.refresh_from_db()
        assert changed is True
        assert invoice.status == InvoiceStatus.PAID
        assert invoice.paid_with == "AliPay"
        assert invoice.paid_at is not None
        paid_receiver.assert_called_once()
        assert paid_receiver.call_args.kwargs["gateway"] == "AliPay"

    def test_accepts_string_order_id(self, invoice):
        """Providers echo order ids back as strings."""
        assert InvoiceService.payment_done(str(invoice.pk), "AliPay") is True

    def test_repeat_report_is_noop(self, invoice, paid_receiver):
        """Second report leaves the invoice alone and sends no signal."""
        InvoiceService.payment_done(invoice.pk, "AliPay")
        invoice.refresh_from_db()
        first_paid_at = invoice.paid_at

        changed = InvoiceService.payment_done(invoice.pk, "AliPay")

        invoice.refresh_from_db()
        assert changed is False
        assert invoice.paid_at == first_paid_at
        assert paid_receiver.call_count == 1

    def test_unknown_invoice_ignored(self, db, paid_receiver):
        assert InvoiceService.payment_done(424242, "AliPay") is False
        paid_receiver.assert_not_called()

    def test_malformed_order_id_ignored(self, db):
        assert InvoiceService.payment_done("not-a-number", "AliPay") is False
