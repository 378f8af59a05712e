"""
Tests for billing models.
"""

from decimal import Decimal

from billing.models import Invoice, InvoiceStatus


class TestInvoiceModel:
    """Tests for Invoice model."""

    def test_defaults(self, db):
        """New invoices are pending and unsettled."""
        invoice = Invoice.objects.create(total=Decimal("9.99"))

        assert invoice.status == InvoiceStatus.PENDING
        assert invoice.currency == "CNY"
        assert invoice.paid_at is None
        assert invoice.paid_with == ""
        assert invoice.is_paid is False

    def test_is_paid(self, paid_invoice):
        assert paid_invoice.is_paid is True

    def test_items_in_insertion_order(self, invoice):
        """Line items keep the order they were added in."""
        names = [item.name for item in invoice.items.all()]

        assert names == ["Hosting", "Domain"]

    def test_str(self, invoice):
        assert str(invoice) == f"Invoice #{invoice.pk} (pending)"


class TestInvoiceItemModel:
    def test_str(self, invoice):
        item = invoice.items.get(name="Domain")

        assert str(item) == "Domain x3"
