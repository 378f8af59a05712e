"""
AliPay SDK client wrapper.

Builds a python-alipay-sdk client from an AlipayOptions record and exposes
the three provider calls the gateway needs:

- page_pay: sign a hosted checkout page request (alipay.trade.page.pay)
- query: synchronous trade status query (alipay.trade.query)
- verify_notify: signature check of an inbound notification/return

Signing, signature verification and the wire protocol stay inside the SDK.
A client is built per call from freshly read settings and never cached.

Usage:
    from extensions.gateways.alipay.client import AlipayClient, AlipayOptions

    client = AlipayClient(options)
    result = client.page_pay(
        subject="Hosting x2",
        out_trade_no="42",
        total_amount="19.90",
        return_url="https://billing.example.com/extensions/alipay/redirect",
    )
    if result.success:
        checkout_url = result.body
"""

from __future__ import annotations

import http.client
import logging
import textwrap
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from alipay import AliPay, DCAliPay
from alipay.exceptions import AliPayException, AliPayValidationError
from alipay.utils import AliPayConfig
from OpenSSL import crypto

from core.exceptions import ExternalServiceError
from extensions.exceptions import GatewayConfigurationError

if TYPE_CHECKING:
    from collections.abc import Mapping


LIVE_GATEWAY_HOST = "openapi.alipay.com"
SANDBOX_GATEWAY_HOST = "openapi-sandbox.dl.alipaydev.com"

SUCCESS_CODE = "10000"
BUSINESS_FAILED_CODE = "40004"
BUSINESS_FAILED_MSG = "Business Failed"


class AlipayRequestError(ExternalServiceError):
    """Raised when a synchronous AliPay call fails before yielding a result."""

    default_error_code: str = "ALIPAY_REQUEST_FAILED"


# =============================================================================
# Data Types
# =============================================================================


@dataclass
class AlipayOptions:
    """
    SDK configuration assembled from stored gateway settings.

    Attributes:
        app_id: AliPay application id
        merchant_private_key: Application private key (PEM or bare base64)
        gateway_host: openapi.alipay.com (live) or the sandbox host
        key_mode: True for public-key mode, False for certificate mode
        alipay_public_key: AliPay public key (key mode)
        merchant_cert_path: Application public key certificate (cert mode)
        alipay_cert_path: AliPay public key certificate (cert mode)
        alipay_root_cert_path: AliPay root certificate (cert mode)
        notify_url: Absolute URL AliPay posts notifications to
        protocol: Gateway URL scheme
        sign_type: Signature algorithm
        timeout: Seconds before a synchronous call gives up
    """

    app_id: str
    merchant_private_key: str | None
    gateway_host: str = SANDBOX_GATEWAY_HOST
    key_mode: bool = False
    alipay_public_key: str | None = None
    merchant_cert_path: Path | None = None
    alipay_cert_path: Path | None = None
    alipay_root_cert_path: Path | None = None
    notify_url: str | None = None
    protocol: str = "https"
    sign_type: str = "RSA2"
    timeout: int = 15

    @property
    def is_sandbox(self) -> bool:
        return self.gateway_host != LIVE_GATEWAY_HOST

    @property
    def gateway_url(self) -> str:
        return f"{self.protocol}://{self.gateway_host}/gateway.do"


@dataclass
class AlipayResponse:
    """
    Normalised result of an AliPay call.

    Attributes:
        code: Gateway result code ("10000" on success)
        msg: Gateway result message
        sub_code: Business error code
        sub_msg: Business error message
        body: Hosted checkout URL for page payments
        trade_status: Trade state for queries (TRADE_SUCCESS, WAIT_BUYER_PAY, ...)
        data: Full decoded response payload
    """

    code: str = ""
    msg: str = ""
    sub_code: str = ""
    sub_msg: str = ""
    body: str = ""
    trade_status: str = ""
    data: dict[str, Any] = field(default_factory=dict)

    @property
    def success(self) -> bool:
        """
        Same rule as AliPay's own response checker: code 10000, or a
        response carrying neither code nor sub_code.
        """
        if self.code == SUCCESS_CODE:
            return True
        return not self.code and not self.sub_code

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> AlipayResponse:
        return cls(
            code=str(payload.get("code") or ""),
            msg=str(payload.get("msg") or ""),
            sub_code=str(payload.get("sub_code") or ""),
            sub_msg=str(payload.get("sub_msg") or ""),
            trade_status=str(payload.get("trade_status") or ""),
            data=dict(payload),
        )


def to_pem(key: str, label: str) -> str:
    """
    Wrap a bare base64 key (as exported by AliPay's key tool) in PEM armour.

    Keys that already carry a PEM header are returned unchanged.
    """
    key = key.strip()
    if key.startswith("-----BEGIN"):
        return key
    body = "\n".join(textwrap.wrap("".join(key.split()), 64))
    return f"-----BEGIN {label}-----\n{body}\n-----END {label}-----"


# =============================================================================
# Client
# =============================================================================


class AlipayClient:
    """
    Thin wrapper over python-alipay-sdk.

    AliPay (key mode) or DCAliPay (certificate mode) is chosen from the
    options. Construction loads the keys, so invalid settings fail here
    with GatewayConfigurationError.
    """

    def __init__(self, options: AlipayOptions):
        self.options = options
        self.sdk = self._build_sdk()

    @classmethod
    def get_logger(cls) -> logging.Logger:
        """Get logger for this client."""
        return logging.getLogger(f"{cls.__module__}.{cls.__name__}")

    # =========================================================================
    # Configuration
    # =========================================================================

    def _build_sdk(self) -> AliPay | DCAliPay:
        options = self.options
        if not options.merchant_private_key:
            raise GatewayConfigurationError(
                "AliPay private key is not configured",
                details={"field": "private_key"},
            )

        common: dict[str, Any] = {
            "appid": options.app_id,
            "app_notify_url": options.notify_url,
            "app_private_key_string": to_pem(
                options.merchant_private_key, "PRIVATE KEY"
            ),
            "sign_type": options.sign_type,
            "debug": options.is_sandbox,
        }
        config = AliPayConfig(timeout=options.timeout)

        try:
            if options.key_mode:
                if not options.alipay_public_key:
                    raise GatewayConfigurationError(
                        "AliPay public key is not configured",
                        details={"field": "alipay_public_key"},
                    )
                return AliPay(
                    alipay_public_key_string=to_pem(
                        options.alipay_public_key, "PUBLIC KEY"
                    ),
                    config=config,
                    **common,
                )

            sdk = DCAliPay(
                app_public_key_cert_string=self._read_cert(
                    options.merchant_cert_path, "app_cert_public_key"
                ),
                alipay_public_key_cert_string=self._read_cert(
                    options.alipay_cert_path, "alipay_cert_public_key"
                ),
                alipay_root_cert_string=self._read_cert(
                    options.alipay_root_cert_path, "alipay_root_cert"
                ),
                **common,
            )
            # DCAliPay takes no config argument
            sdk._config = config
            return sdk
        except (AliPayException, ValueError, IndexError, crypto.Error) as e:
            raise GatewayConfigurationError(
                "AliPay SDK rejected the stored configuration",
                details={"error": str(e), "key_mode": options.key_mode},
            ) from e

    @staticmethod
    def _read_cert(path: Path | None, field_name: str) -> str:
        if path is None:
            raise GatewayConfigurationError(
                f"AliPay certificate path {field_name} is not configured",
                details={"field": field_name},
            )
        try:
            return path.read_text(encoding="utf-8")
        except OSError as e:
            raise GatewayConfigurationError(
                f"Cannot read AliPay certificate {path}",
                details={"field": field_name, "path": str(path)},
            ) from e

    # =========================================================================
    # Provider Calls
    # =========================================================================

    def page_pay(
        self,
        subject: str,
        out_trade_no: str,
        total_amount: str,
        return_url: str,
    ) -> AlipayResponse:
        """
        Create a hosted checkout page request.

        Args:
            subject: Order description shown to the buyer
            out_trade_no: Merchant order id
            total_amount: Amount with two decimals ("19.90")
            return_url: Absolute URL the browser returns to

        Returns:
            AlipayResponse whose body is the signed checkout URL, or a
            failed response carrying the SDK's error as sub_msg
        """
        logger = self.get_logger()
        log_context = {
            "operation": "page_pay",
            "out_trade_no": out_trade_no,
            "total_amount": total_amount,
            "sandbox": self.options.is_sandbox,
        }
        logger.info("Starting AliPay operation", extra=log_context)

        try:
            order_string = self.sdk.api_alipay_trade_page_pay(
                subject=subject,
                out_trade_no=out_trade_no,
                total_amount=total_amount,
                return_url=return_url,
                notify_url=self.options.notify_url,
            )
        except AliPayException as e:
            logger.warning(
                f"AliPay page pay rejected: {e}",
                extra=log_context,
            )
            return AlipayResponse(
                code=BUSINESS_FAILED_CODE,
                msg=BUSINESS_FAILED_MSG,
                sub_msg=str(e),
            )

        logger.info("AliPay operation completed", extra=log_context)
        return AlipayResponse(body=f"{self.options.gateway_url}?{order_string}")

    def query(self, out_trade_no: str) -> AlipayResponse:
        """
        Query the trade state of an order.

        Raises:
            AlipayRequestError: Network failure, timeout, unsigned or
                unverifiable response
        """
        logger = self.get_logger()
        log_context = {
            "operation": "trade_query",
            "out_trade_no": out_trade_no,
            "sandbox": self.options.is_sandbox,
        }

        start_time = time.time()
        logger.info("Starting AliPay operation", extra=log_context)

        try:
            payload = self.sdk.api_alipay_trade_query(out_trade_no=out_trade_no)
        except (
            AliPayException,
            AliPayValidationError,
            OSError,
            ValueError,
            http.client.HTTPException,
        ) as e:
            duration_ms = (time.time() - start_time) * 1000
            logger.warning(
                f"AliPay trade query failed: {type(e).__name__}",
                extra={**log_context, "error": str(e), "duration_ms": duration_ms},
            )
            raise AlipayRequestError(
                "AliPay trade query failed",
                details={"out_trade_no": out_trade_no, "error": str(e)},
            ) from e

        result = AlipayResponse.from_payload(payload)
        duration_ms = (time.time() - start_time) * 1000
        logger.info(
            "AliPay operation completed",
            extra={
                **log_context,
                "code": result.code,
                "trade_status": result.trade_status,
                "duration_ms": duration_ms,
            },
        )
        return result

    def verify_notify(self, params: Mapping[str, str]) -> bool:
        """
        Verify the signature of a notification or browser return.

        Args:
            params: All request parameters, including sign and sign_type

        Returns:
            True only if the SDK accepts the signature
        """
        data = dict(params)
        signature = data.pop("sign", None)
        if not signature:
            return False

        try:
            return bool(self.sdk.verify(data, signature))
        except (AliPayException, ValueError, TypeError) as e:
            self.get_logger().warning(
                f"AliPay signature check errored: {type(e).__name__}",
                extra={"operation": "verify_notify", "error": str(e)},
            )
            return False
