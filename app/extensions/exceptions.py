"""
Gateway extension exceptions.

Exception Hierarchy:
    GatewayError (base for gateway operations)
    ├── CheckoutCreationError - Provider rejected checkout creation
    ├── InvalidGatewayRequestError - Inbound request failed verification
    ├── GatewayConfigurationError - Stored settings unusable
    └── GatewayNotFoundError - No gateway registered under that name

Usage:
    from extensions.exceptions import CheckoutCreationError

    if not result.success:
        raise CheckoutCreationError(
            f"{result.msg}, {result.sub_msg}",
            details={"code": result.code, "sub_code": result.sub_code},
        )
"""

from __future__ import annotations

from core.exceptions import BaseApplicationError, ExternalServiceError, NotFoundError


class GatewayError(BaseApplicationError):
    """
    Base exception for all gateway operations.

    Example:
        try:
            gateway.pay(total, items, invoice_id)
        except GatewayError as e:
            logger.error(f"Gateway operation failed: {e}")
    """

    default_error_code: str = "GATEWAY_ERROR"


class CheckoutCreationError(GatewayError, ExternalServiceError):
    """
    Raised when the provider reports an unsuccessful checkout creation.

    The message carries the provider's message and sub-message joined by
    ", " so it can be shown as-is by the generic error handler.
    """

    default_error_code: str = "CHECKOUT_CREATION_FAILED"
    http_status: int = 502


class InvalidGatewayRequestError(GatewayError):
    """
    Raised when an inbound provider request cannot be trusted.

    Use for:
    - Signature verification failures
    - Notifications addressed to a different app id
    """

    default_error_code: str = "INVALID_GATEWAY_REQUEST"
    http_status: int = 400


class GatewayConfigurationError(GatewayError):
    """Raised when a gateway's stored settings cannot be used."""

    default_error_code: str = "GATEWAY_CONFIGURATION_ERROR"
    http_status: int = 500


class GatewayNotFoundError(GatewayError, NotFoundError):
    """Raised when no gateway is registered under the requested name."""

    default_error_code: str = "GATEWAY_NOT_FOUND"
    http_status: int = 404
