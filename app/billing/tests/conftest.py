"""
Pytest fixtures for billing tests.
"""

from decimal import Decimal

import pytest
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient

from billing.models import InvoiceStatus
from billing.tests.factories import InvoiceFactory, InvoiceItemFactory


@pytest.fixture
def user(db):
    """Create a regular client user."""
    return get_user_model().objects.create_user(
        username="client",
        email="client@example.com",
        password="testpass123",
    )


@pytest.fixture
def authenticated_client(user):
    client = APIClient()
    client.force_authenticate(user=user)
    return client


@pytest.fixture
def invoice(db):
    """Pending invoice with two line items."""
    invoice = InvoiceFactory(total=Decimal("40.00"))
    InvoiceItemFactory(invoice=invoice, name="Hosting", quantity=1, price=Decimal("10.00"))
    InvoiceItemFactory(invoice=invoice, name="Domain", quantity=3, price=Decimal("10.00"))
    return invoice


@pytest.fixture
def paid_invoice(db):
    return InvoiceFactory(status=InvoiceStatus.PAID, paid_with="AliPay")
