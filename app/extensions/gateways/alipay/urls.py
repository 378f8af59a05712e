"""
URL configuration for the AliPay gateway.

Routes:
    - POST /webhook  - AliPay notification receiver
    - GET  /redirect - Browser return

Mounted by extensions/urls.py under /extensions/alipay/ with the
"alipay" namespace.
"""

from django.urls import path

from extensions.gateways.alipay.views import alipay_redirect, alipay_webhook

urlpatterns = [
    path("webhook", alipay_webhook, name="webhook"),
    path("redirect", alipay_redirect, name="redirect"),
]
