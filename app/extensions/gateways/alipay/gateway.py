"""
AliPay payment gateway.

Adapts the AliPay hosted checkout page (alipay.trade.page.pay) to the
billing host:

- pay: redirect the buyer to AliPay, unless the order is already paid
- is_paid: poll the trade state and report settlement to the host
- webhook: asynchronous notification receiver (plaintext success/failure)
- redirect: browser return after checkout, back to the invoice view

Two mutually exclusive credential modes are supported, selected by the
is_key_mode setting: public-key mode (alipay_public_key) and certificate
mode (three certificate paths relative to the project base dir).
"""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING

from django.conf import settings
from django.http import HttpRequest, HttpResponse, HttpResponseRedirect
from django.urls import reverse

from extensions.exceptions import CheckoutCreationError, InvalidGatewayRequestError
from extensions.gateways.alipay.client import (
    LIVE_GATEWAY_HOST,
    SANDBOX_GATEWAY_HOST,
    AlipayClient,
    AlipayOptions,
    AlipayRequestError,
)
from extensions.gateways.base import ConfigField, ConfigFieldType, Gateway, to_bool
from extensions.helpers import ExtensionHelper
from extensions.registry import register_gateway

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from extensions.gateways.base import Product


logger = logging.getLogger(__name__)

PAID_TRADE_STATUSES = frozenset({"TRADE_SUCCESS", "TRADE_FINISHED"})

NOTIFY_SUCCESS = "success"
NOTIFY_FAILURE = "failure"


def build_description(products: Sequence[Product]) -> str:
    """
    Join line item names into the order subject shown by AliPay.

    Quantities above one are appended as " x{n}" followed by ", ".
    Trailing separators are trimmed.

    Example:
        [A x1, B x3] -> "AB x3"
        [A x2, B x1] -> "A x2, B"
    """
    description = ""
    for product in products:
        description += product.name
        if product.quantity > 1:
            description += f" x{product.quantity}, "
    return description.rstrip(", ")


def format_amount(total: Decimal | int | float | str) -> str:
    """Two decimals, dot separator, no grouping ("1234.5" -> "1234.50")."""
    amount = Decimal(str(total)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    return f"{amount:f}"


@register_gateway
class AliPayGateway(Gateway):
    """
    AliPay hosted checkout gateway.

    No client is cached: every entry point rebuilds the SDK client from
    the settings store, so setting changes apply to the next request.
    """

    name = "AliPay"
    slug = "alipay"
    urls_module = "extensions.gateways.alipay.urls"

    def get_metadata(self) -> dict[str, str]:
        return {
            "display_name": "AliPay",
            "version": "1.0",
            "author": "InkerBot",
            "website": "https://inker.bot",
        }

    def get_config(self) -> list[ConfigField]:
        return [
            ConfigField("app_id", "APP ID", ConfigFieldType.TEXT, required=True),
            ConfigField("live", "Live mode", ConfigFieldType.BOOLEAN),
            ConfigField("is_key_mode", "Key mode", ConfigFieldType.BOOLEAN),
            # key mode
            ConfigField("private_key", "Private Key"),
            ConfigField("alipay_public_key", "Public key (for not cert mode)"),
            # cert mode
            ConfigField(
                "app_cert_public_key", "App cert public key path (for cert mode)"
            ),
            ConfigField(
                "alipay_cert_public_key", "Alipay cert public path (for cert mode)"
            ),
            ConfigField("alipay_root_cert", "Alipay root cert path (for cert mode)"),
        ]

    # =========================================================================
    # Configuration
    # =========================================================================

    def build_options(self) -> AlipayOptions:
        """Assemble SDK options from the stored settings."""
        stored = ExtensionHelper.get_configs(self.name)

        options = AlipayOptions(
            app_id=str(stored.get("app_id") or ""),
            merchant_private_key=stored.get("private_key"),
            gateway_host=(
                LIVE_GATEWAY_HOST
                if to_bool(stored.get("live"))
                else SANDBOX_GATEWAY_HOST
            ),
            key_mode=to_bool(stored.get("is_key_mode")),
            notify_url=ExtensionHelper.absolute_url(
                reverse("extensions:alipay:webhook")
            ),
            timeout=settings.ALIPAY_API_TIMEOUT_SECONDS,
        )

        if options.key_mode:
            options.alipay_public_key = stored.get("alipay_public_key")
        else:
            options.alipay_cert_path = self._cert_path(stored, "alipay_cert_public_key")
            options.alipay_root_cert_path = self._cert_path(stored, "alipay_root_cert")
            options.merchant_cert_path = self._cert_path(stored, "app_cert_public_key")

        return options

    @staticmethod
    def _cert_path(stored: Mapping[str, object], name: str):
        value = stored.get(name)
        return ExtensionHelper.base_path(str(value)) if value else None

    def get_api_instance(self) -> AlipayClient:
        """Build a fresh SDK client from the current settings."""
        return AlipayClient(self.build_options())

    # =========================================================================
    # Host Operations
    # =========================================================================

    def pay(
        self,
        total: Decimal | int | float | str,
        products: Sequence[Product],
        order_id: int | str,
    ) -> HttpResponse:
        """
        Send the buyer to AliPay's hosted checkout page.

        Returns:
            Redirect to the invoice view when AliPay already reports the
            order paid, otherwise a redirect to the signed checkout URL

        Raises:
            CheckoutCreationError: AliPay reported an unsuccessful result
        """
        client = self.get_api_instance()

        if self.is_paid(order_id):
            return HttpResponseRedirect(ExtensionHelper.invoice_url(order_id))

        description = build_description(products)
        result = client.page_pay(
            subject=description,
            out_trade_no=str(order_id),
            total_amount=format_amount(total),
            return_url=ExtensionHelper.absolute_url(
                reverse("extensions:alipay:redirect")
            ),
        )

        if not result.success:
            logger.error(
                f"AliPay checkout creation failed for order {order_id}",
                extra={
                    "order_id": str(order_id),
                    "code": result.code,
                    "sub_code": result.sub_code,
                },
            )
            raise CheckoutCreationError(
                f"{result.msg}, {result.sub_msg}",
                details={
                    "gateway": self.name,
                    "code": result.code,
                    "sub_code": result.sub_code,
                },
            )

        return HttpResponseRedirect(result.body)

    def is_paid(self, order_id: int | str) -> bool:
        """
        Ask AliPay whether an order is settled.

        Reports settlement to the host on every positive answer. Query
        failures count as unpaid; there is no retry.
        """
        client = self.get_api_instance()

        try:
            result = client.query(str(order_id))
        except AlipayRequestError:
            return False

        if result.success and result.trade_status in PAID_TRADE_STATUSES:
            ExtensionHelper.payment_done(order_id, self.name)
            return True
        return False

    # =========================================================================
    # Provider Callbacks
    # =========================================================================

    def _is_trusted(self, client: AlipayClient, params: Mapping[str, str]) -> bool:
        """Signature valid and addressed to our app id."""
        if not client.verify_notify(params):
            logger.warning(
                "AliPay request failed signature verification",
                extra={"out_trade_no": params.get("out_trade_no")},
            )
            return False

        app_id = params.get("app_id")
        configured = client.options.app_id
        if app_id is None or not configured or str(app_id) != configured:
            logger.warning(
                "AliPay request addressed to another app id",
                extra={"app_id": app_id, "out_trade_no": params.get("out_trade_no")},
            )
            return False
        return True

    def webhook(self, request: HttpRequest) -> HttpResponse:
        """
        Handle an asynchronous trade notification.

        Responds "failure" when the notification cannot be trusted and
        "success" otherwise, whatever the trade status, so AliPay stops
        redelivering it.
        """
        client = self.get_api_instance()
        params = request.POST.dict()

        if not self._is_trusted(client, params):
            return HttpResponse(NOTIFY_FAILURE, content_type="text/plain")

        order_id = params.get("out_trade_no")
        trade_status = str(params.get("trade_status", ""))
        logger.info(
            f"AliPay notification for order {order_id}: {trade_status}",
            extra={"order_id": order_id, "trade_status": trade_status},
        )

        if trade_status in PAID_TRADE_STATUSES:
            ExtensionHelper.payment_done(order_id, self.name)

        return HttpResponse(NOTIFY_SUCCESS, content_type="text/plain")

    def redirect(self, request: HttpRequest) -> HttpResponse:
        """
        Handle the buyer's browser returning from AliPay.

        Raises:
            InvalidGatewayRequestError: Signature or app id check failed
        """
        client = self.get_api_instance()
        params = request.GET.dict()

        if not self._is_trusted(client, params):
            raise InvalidGatewayRequestError(
                "Invalid request",
                details={"gateway": self.name},
            )

        order_id = params.get("out_trade_no")
        if not order_id:
            raise InvalidGatewayRequestError(
                "Invalid request",
                details={"gateway": self.name, "missing": "out_trade_no"},
            )

        self.is_paid(order_id)
        return HttpResponseRedirect(ExtensionHelper.invoice_url(order_id))
