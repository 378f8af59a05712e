"""
DRF views for the extension settings API.

Endpoints:
    GET /api/v1/extensions/gateways/                - Installed gateways
    GET /api/v1/extensions/gateways/{name}/config/  - Schema and stored values
    PUT /api/v1/extensions/gateways/{name}/config/  - Validate and store values

Security:
    - Staff only: gateway settings hold provider credentials
"""

from __future__ import annotations

import logging

from rest_framework.permissions import IsAdminUser
from rest_framework.response import Response
from rest_framework.views import APIView

from extensions.helpers import ExtensionHelper
from extensions.registry import all_gateways, get_gateway
from extensions.serializers import (
    ConfigFieldSerializer,
    GatewaySerializer,
    build_settings_serializer,
)

logger = logging.getLogger(__name__)


class GatewayListView(APIView):
    """
    List installed gateways.

    GET /api/v1/extensions/gateways/
    """

    permission_classes = [IsAdminUser]

    def get(self, request):
        return Response(GatewaySerializer(all_gateways(), many=True).data)


class GatewayConfigView(APIView):
    """
    Read or replace a gateway's settings.

    GET returns the schema the settings UI renders plus the stored values.
    PUT validates the payload against that schema and upserts each
    submitted field.
    """

    permission_classes = [IsAdminUser]

    def _payload(self, gateway) -> dict:
        schema = gateway.get_config()
        stored = ExtensionHelper.get_configs(gateway.name)
        return {
            "gateway": gateway.name,
            "fields": ConfigFieldSerializer(schema, many=True).data,
            "values": {field.name: stored.get(field.name) for field in schema},
        }

    def get(self, request, name: str):
        gateway = get_gateway(name)
        return Response(self._payload(gateway))

    def put(self, request, name: str):
        gateway = get_gateway(name)
        serializer_class = build_settings_serializer(gateway.get_config())
        serializer = serializer_class(data=request.data)
        serializer.is_valid(raise_exception=True)

        for field_name, value in serializer.validated_data.items():
            ExtensionHelper.set_config(gateway.name, field_name, value)

        logger.info(
            f"Updated {gateway.name} settings",
            extra={
                "gateway": gateway.name,
                "fields": sorted(serializer.validated_data),
                "user_id": request.user.pk,
            },
        )
        return Response(self._payload(gateway))
