"""
Extensions app: pluggable payment gateways for the billing host.

This app handles:
- The settings store gateways read their credentials from
- The Gateway base class every payment gateway implements
- Gateway discovery and registration
- Mounting each gateway's HTTP routes under /extensions/{slug}/
- The admin API the settings UI uses to edit gateway configuration

Gateways live in extensions/gateways/{package}/gateway.py and register
themselves with @register_gateway.

Usage:
    from extensions.registry import get_gateway

    gateway = get_gateway("alipay")
    response = gateway.pay(invoice.total, list(invoice.items.all()), invoice.pk)
"""
