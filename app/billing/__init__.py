"""
Billing app for invoices and their settlement.

This app is the host side of the payment gateway contract:
- Invoice and line item storage
- The "payment done" callback gateways invoke once a provider confirms
- The invoice view gateways redirect browsers back to
- The checkout entry point that hands an invoice to a gateway

Related apps:
    - extensions: Gateway extensions and their settings store

Usage:
    from billing.services import InvoiceService

    # Mark an invoice paid (idempotent)
    InvoiceService.payment_done(invoice_id, "AliPay")
"""
