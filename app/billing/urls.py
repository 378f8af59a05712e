"""
URL configuration for the billing app.

Routes:
    - GET  /{id}/                - Invoice view
    - POST /{id}/pay/{gateway}/  - Start checkout

All routes are prefixed with /invoices/ when included in the main URLconf.
"""

from django.urls import path

from billing.views import InvoiceDetailView, InvoicePayView

app_name = "billing"

urlpatterns = [
    path("<int:pk>/", InvoiceDetailView.as_view(), name="invoice-show"),
    path(
        "<int:pk>/pay/<slug:gateway>/",
        InvoicePayView.as_view(),
        name="invoice-pay",
    ),
]
