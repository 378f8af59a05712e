"""
Gateway registry.

Gateways register themselves at import time; autodiscover_gateways() imports
the gateway module of every package under extensions.gateways and runs
from ExtensionsConfig.ready().

Usage:
    @register_gateway
    class AliPayGateway(Gateway):
        ...

    gateway = get_gateway("alipay")   # by slug
    gateway = get_gateway("AliPay")   # or by name
"""

from __future__ import annotations

import importlib
import logging
import pkgutil

from extensions.exceptions import GatewayNotFoundError
from extensions.gateways.base import Gateway

logger = logging.getLogger(__name__)

GATEWAYS: dict[str, type[Gateway]] = {}


def register_gateway(gateway_class: type[Gateway]) -> type[Gateway]:
    """
    Class decorator registering a gateway under its slug.

    Raises:
        ValueError: Missing name/slug, or slug already taken by another class
    """
    if not gateway_class.name or not gateway_class.slug:
        raise ValueError(f"{gateway_class.__name__} must define name and slug")

    existing = GATEWAYS.get(gateway_class.slug)
    if existing is not None and existing is not gateway_class:
        raise ValueError(
            f"Gateway slug {gateway_class.slug!r} already registered by "
            f"{existing.__name__}"
        )

    GATEWAYS[gateway_class.slug] = gateway_class
    logger.debug(f"Registered gateway {gateway_class.name}")
    return gateway_class


def get_gateway(name: str) -> Gateway:
    """
    Instantiate a registered gateway by slug or name (case-insensitive).

    Gateways hold no state, so each call returns a fresh instance.

    Raises:
        GatewayNotFoundError: Nothing registered under that name
    """
    key = name.lower()
    for slug, gateway_class in GATEWAYS.items():
        if slug == key or gateway_class.name.lower() == key:
            return gateway_class()

    raise GatewayNotFoundError(
        f"Gateway {name!r} is not installed",
        details={"gateway": name},
    )


def all_gateways() -> list[Gateway]:
    """Instantiate every registered gateway, ordered by name."""
    return [cls() for cls in sorted(GATEWAYS.values(), key=lambda cls: cls.name)]


def autodiscover_gateways() -> None:
    """Import extensions.gateways.{package}.gateway for every package."""
    from extensions import gateways

    for module_info in pkgutil.iter_modules(gateways.__path__):
        if not module_info.ispkg:
            continue
        importlib.import_module(f"{gateways.__name__}.{module_info.name}.gateway")
