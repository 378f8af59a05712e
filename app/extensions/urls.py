"""
Gateway extension routes.

Every registered gateway with a urls_module is mounted under
/extensions/{slug}/ in the "extensions:{slug}" namespace, e.g.
reverse("extensions:alipay:webhook") -> /extensions/alipay/webhook
"""

from django.urls import include, path

from extensions.registry import all_gateways

app_name = "extensions"

urlpatterns = [
    path(f"{gateway.slug}/", include((gateway.urls_module, gateway.slug)))
    for gateway in all_gateways()
    if gateway.urls_module
]
