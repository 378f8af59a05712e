"""
Views for the billing host.

Endpoints:
    GET  /invoices/{id}/                - Invoice view (gateways redirect here)
    POST /invoices/{id}/pay/{gateway}/  - Hand the invoice to a gateway's checkout

Related files:
    - services.py: InvoiceService
    - extensions/registry.py: Gateway lookup
"""

from __future__ import annotations

import logging

from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from billing.serializers import InvoiceSerializer
from billing.services import InvoiceService
from extensions.registry import get_gateway

logger = logging.getLogger(__name__)


class InvoiceDetailView(APIView):
    """
    Show a single invoice.

    GET /invoices/{id}/

    Returns:
        Invoice with items, 404 if missing
    """

    permission_classes = [IsAuthenticated]

    def get(self, request, pk: int):
        invoice = InvoiceService.get_invoice(pk)
        return Response(InvoiceSerializer(invoice).data)


class InvoicePayView(APIView):
    """
    Start paying an invoice with the named gateway.

    POST /invoices/{id}/pay/{gateway}/

    The gateway decides the response: usually a redirect to the provider's
    hosted checkout page, or straight back to the invoice view when the
    provider already reports the order paid.
    """

    permission_classes = [IsAuthenticated]

    def post(self, request, pk: int, gateway: str):
        invoice = InvoiceService.get_invoice(pk)
        gateway_instance = get_gateway(gateway)

        logger.info(
            f"Starting checkout for invoice {invoice.pk} via {gateway_instance.name}",
            extra={"invoice_id": invoice.pk, "gateway": gateway_instance.name},
        )

        return gateway_instance.pay(
            invoice.total,
            list(invoice.items.all()),
            invoice.pk,
        )
