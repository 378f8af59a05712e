"""
URL configuration for the extension settings API.

Routes:
    - GET      /gateways/               - Installed gateways with metadata
    - GET, PUT /gateways/{name}/config/ - Config schema and stored values

All routes are prefixed with /api/v1/extensions/ when included in the
main URLconf.
"""

from django.urls import path

from extensions.views import GatewayConfigView, GatewayListView

app_name = "extensions-api"

urlpatterns = [
    path("gateways/", GatewayListView.as_view(), name="gateway-list"),
    path(
        "gateways/<slug:name>/config/",
        GatewayConfigView.as_view(),
        name="gateway-config",
    ),
]
