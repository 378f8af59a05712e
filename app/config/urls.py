"""
URL configuration for the billing application.

URL Structure:
    /admin/                                  - Django admin interface
    /health/                                 - Health check endpoint
    /invoices/{id}/                          - Invoice view (billing:invoice-show)
    /invoices/{id}/pay/{gateway}/            - Start checkout with a gateway
    /extensions/{slug}/...                   - Routes mounted by gateway extensions
        alipay/webhook                       - AliPay asynchronous notification (POST)
        alipay/redirect                      - AliPay browser return (GET)
    /api/v1/extensions/                      - Extension settings API
        gateways/                            - Registered gateways with metadata
        gateways/{name}/config/              - Config schema and values (GET/PUT)

For more information, see:
https://docs.djangoproject.com/en/5.2/topics/http/urls/
"""

from django.contrib import admin
from django.urls import include, path

from core.views import health_check

# =============================================================================
# API v1 Routes
# =============================================================================
# All routes here are prefixed with /api/v1/ automatically
api_v1_patterns = [
    path("extensions/", include("extensions.api_urls")),
]

urlpatterns = [
    # Admin
    path("admin/", admin.site.urls),
    # Health check (Docker, Kubernetes, load balancers)
    path("health/", health_check, name="health_check"),
    # Host billing pages
    path("invoices/", include("billing.urls")),
    # Gateway extension routes (webhooks, browser returns)
    path("extensions/", include("extensions.urls")),
    # API v1
    path("api/v1/", include(api_v1_patterns)),
]

# =============================================================================
# Admin Site Customization
# =============================================================================
admin.site.site_header = "Billing Admin"
admin.site.site_title = "Billing Portal"
admin.site.index_title = "Welcome to the Billing Portal"
