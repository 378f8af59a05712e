"""
Payment gateway extensions.

Each subpackage is one gateway. Its gateway.py module defines a Gateway
subclass decorated with @register_gateway; an optional urls.py module is
mounted under /extensions/{slug}/.
"""

from extensions.gateways.base import ConfigField, Gateway

__all__ = [
    "ConfigField",
    "Gateway",
]
