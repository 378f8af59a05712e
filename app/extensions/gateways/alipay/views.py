"""
HTTP endpoints AliPay calls back into.

Both views delegate to AliPayGateway; they only pin the HTTP method and
exempt the notification receiver from CSRF, since AliPay posts it
server-to-server.

Usage:
    # In extensions/gateways/alipay/urls.py
    urlpatterns = [
        path("webhook", alipay_webhook, name="webhook"),
        path("redirect", alipay_redirect, name="redirect"),
    ]
"""

from __future__ import annotations

from django.http import HttpRequest, HttpResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_POST

from core.decorators import log_request
from extensions.registry import get_gateway


@csrf_exempt
@require_POST
@log_request()
def alipay_webhook(request: HttpRequest) -> HttpResponse:
    """
    Receive an AliPay trade notification.

    Returns:
        Plaintext "success" once the notification is verified, "failure"
        when the signature or app id check fails
    """
    return get_gateway("alipay").webhook(request)


@require_GET
@log_request()
def alipay_redirect(request: HttpRequest) -> HttpResponse:
    """
    Receive the buyer's browser after checkout.

    Redirects to the invoice view; an unverifiable request raises
    InvalidGatewayRequestError, rendered by the error middleware.
    """
    return get_gateway("alipay").redirect(request)
