"""
Serializers for the extension settings API.

Serializers:
    ConfigFieldSerializer: One schema entry as shown by the settings UI
    GatewaySerializer: Installed gateway with its metadata
    build_settings_serializer: Validation serializer generated from a schema

Usage:
    serializer_class = build_settings_serializer(gateway.get_config())
    serializer = serializer_class(data=request.data)
    serializer.is_valid(raise_exception=True)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rest_framework import serializers

from extensions.gateways.base import ConfigFieldType

if TYPE_CHECKING:
    from collections.abc import Sequence

    from extensions.gateways.base import ConfigField


class ConfigFieldSerializer(serializers.Serializer):
    name = serializers.CharField(read_only=True)
    friendly_name = serializers.CharField(read_only=True)
    type = serializers.CharField(read_only=True)
    required = serializers.BooleanField(read_only=True)


class GatewaySerializer(serializers.Serializer):
    """Read-only listing entry for an installed gateway."""

    name = serializers.CharField(read_only=True)
    slug = serializers.CharField(read_only=True)
    metadata = serializers.SerializerMethodField()

    def get_metadata(self, gateway) -> dict[str, str]:
        return gateway.get_metadata()


def build_settings_serializer(
    fields: Sequence[ConfigField],
) -> type[serializers.Serializer]:
    """
    Build a serializer class validating settings against a config schema.

    Boolean fields become BooleanField; text fields become CharField.
    Required text fields reject blank values; optional ones accept blank
    and null so a value can be cleared.
    """
    declared: dict[str, serializers.Field] = {}
    for config_field in fields:
        if config_field.type == ConfigFieldType.BOOLEAN:
            declared[config_field.name] = serializers.BooleanField(
                required=config_field.required,
                label=config_field.friendly_name,
            )
        else:
            declared[config_field.name] = serializers.CharField(
                required=config_field.required,
                allow_blank=not config_field.required,
                allow_null=not config_field.required,
                trim_whitespace=True,
                label=config_field.friendly_name,
            )

    return type("GatewaySettingsSerializer", (serializers.Serializer,), declared)
