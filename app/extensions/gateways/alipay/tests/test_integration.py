"""
End-to-end checkout journey through the billing host and AliPay gateway.

Only the SDK is mocked; routing, settings store, invoice state and the
invoice_paid signal are real.
"""

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from billing.models import InvoiceStatus
from billing.signals import invoice_paid


class TestCheckoutJourney:
    def test_pay_notify_return(
        self, admin_user, key_mode_settings, mock_sdk, invoice, notification
    ):
        paid = []

        def receiver(sender, invoice, gateway, **kwargs):
            paid.append((invoice.pk, gateway))

        invoice_paid.connect(
            receiver, weak=False, dispatch_uid="test-checkout-journey"
        )
        client = APIClient()
        client.force_authenticate(user=admin_user)

        try:
            # Buyer starts checkout and is sent to AliPay
            pay_url = reverse("billing:invoice-pay", args=[invoice.pk, "alipay"])
            response = client.post(pay_url)
            assert response.status_code == status.HTTP_302_FOUND
            assert response["Location"].startswith(
                "https://openapi-sandbox.dl.alipaydev.com/gateway.do?"
            )

            # AliPay notifies the merchant server
            response = client.post(reverse("extensions:alipay:webhook"), notification)
            assert response.content == b"success"

            # Buyer's browser comes back; AliPay now reports the trade paid
            mock_sdk.api_alipay_trade_query.return_value = {
                "code": "10000",
                "trade_status": "TRADE_SUCCESS",
            }
            response = client.get(reverse("extensions:alipay:redirect"), notification)
            assert response.status_code == status.HTTP_302_FOUND
            assert response["Location"] == f"/invoices/{invoice.pk}/"
        finally:
            invoice_paid.disconnect(dispatch_uid="test-checkout-journey")

        invoice.refresh_from_db()
        assert invoice.status == InvoiceStatus.PAID
        assert invoice.paid_with == "AliPay"
        assert paid == [(invoice.pk, "AliPay")]

    def test_gateway_settings_drive_checkout(self, admin_user, mock_sdk_class, invoice):
        client = APIClient()
        client.force_authenticate(user=admin_user)

        config_url = reverse("extensions-api:gateway-config", args=["alipay"])
        response = client.put(
            config_url,
            {
                "app_id": "2021000000000042",
                "live": True,
                "is_key_mode": True,
                "private_key": "MIIEvQIBADANBg",
                "alipay_public_key": "MIIBIjANBg",
            },
            format="json",
        )
        assert response.status_code == status.HTTP_200_OK

        sdk = mock_sdk_class.return_value
        sdk.api_alipay_trade_query.return_value = {"code": "40004"}
        sdk.api_alipay_trade_page_pay.return_value = "signed=1"

        response = client.post(
            reverse("billing:invoice-pay", args=[invoice.pk, "alipay"])
        )

        assert response["Location"] == "https://openapi.alipay.com/gateway.do?signed=1"
        assert mock_sdk_class.call_args.kwargs["appid"] == "2021000000000042"
