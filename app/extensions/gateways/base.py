"""
Gateway base class and configuration schema types.

A gateway adapts one payment provider to the billing host. The host calls
pay() to start a checkout and renders get_config() in its settings UI;
provider callbacks reach the gateway through the routes in its urls.py.

Usage:
    from extensions.gateways.base import ConfigField, Gateway
    from extensions.registry import register_gateway

    @register_gateway
    class ExampleGateway(Gateway):
        name = "Example"
        slug = "example"

        def get_metadata(self):
            return {"display_name": "Example", "version": "1.0"}

        def get_config(self):
            return [ConfigField("api_key", "API key", required=True)]

        def pay(self, total, products, order_id):
            ...
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from collections.abc import Sequence

    from django.http import HttpResponse


TRUTHY_VALUES = frozenset({"1", "true", "yes", "on"})


def to_bool(value: Any) -> bool:
    """Interpret a stored setting as a flag (JSON bool, number or string)."""
    if isinstance(value, str):
        return value.strip().lower() in TRUTHY_VALUES
    return bool(value)


class ConfigFieldType:
    """Field types understood by the settings UI."""

    TEXT = "text"
    BOOLEAN = "boolean"

    CHOICES = (TEXT, BOOLEAN)


@dataclass(frozen=True)
class ConfigField:
    """
    One entry of a gateway's configuration schema.

    Attributes:
        name: Settings store key
        friendly_name: Label shown in the settings UI
        type: ConfigFieldType value
        required: Whether the settings UI must collect a value
    """

    name: str
    friendly_name: str
    type: str = ConfigFieldType.TEXT
    required: bool = False

    def __post_init__(self) -> None:
        if self.type not in ConfigFieldType.CHOICES:
            raise ValueError(f"Unsupported config field type: {self.type}")

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


class Product(Protocol):
    """What a gateway reads from each line item handed to pay()."""

    name: str
    quantity: int


class Gateway(ABC):
    """
    Base payment gateway.

    Attributes:
        name: Extension name; also the settings store namespace and the
            gateway name reported to the payment-done callback
        slug: URL segment the gateway's routes are mounted under
        urls_module: Dotted path of the gateway's URLconf, or None
    """

    name: str = ""
    slug: str = ""
    urls_module: str | None = None

    @abstractmethod
    def get_metadata(self) -> dict[str, str]:
        """Describe the gateway (display_name, version, author, website)."""

    @abstractmethod
    def get_config(self) -> list[ConfigField]:
        """Return the configuration schema for the settings UI."""

    @abstractmethod
    def pay(
        self,
        total: Decimal | int | float | str,
        products: Sequence[Product],
        order_id: int | str,
    ) -> HttpResponse:
        """Start collecting payment for an order."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"
