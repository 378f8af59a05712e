"""
Pytest fixtures for extension tests.
"""

import pytest
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient

from extensions.models import ExtensionSetting


@pytest.fixture
def staff_client(admin_user):
    """API client authenticated as a superuser."""
    client = APIClient()
    client.force_authenticate(user=admin_user)
    return client


@pytest.fixture
def regular_client(db):
    user = get_user_model().objects.create_user(
        username="regular",
        email="regular@example.com",
        password="testpass123",
    )
    client = APIClient()
    client.force_authenticate(user=user)
    return client


@pytest.fixture
def stored_settings(db):
    """A few AliPay settings already in the store."""
    ExtensionSetting.objects.create(extension="AliPay", name="app_id", value="2021000000000001")
    ExtensionSetting.objects.create(extension="AliPay", name="live", value=False)
    ExtensionSetting.objects.create(extension="Other", name="app_id", value="other-app")
