"""
Factory Boy factories for billing test data.

Usage:
    from billing.tests.factories import InvoiceFactory, InvoiceItemFactory

    invoice = InvoiceFactory()
    InvoiceItemFactory(invoice=invoice, name="Hosting", quantity=2)
"""

from decimal import Decimal

import factory

from billing.models import Invoice, InvoiceItem, InvoiceStatus


class InvoiceFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = Invoice

    total = Decimal("25.00")
    currency = "CNY"
    status = InvoiceStatus.PENDING


class InvoiceItemFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = InvoiceItem

    invoice = factory.SubFactory(InvoiceFactory)
    name = factory.Sequence(lambda n: f"Product {n}")
    quantity = 1
    price = Decimal("25.00")
