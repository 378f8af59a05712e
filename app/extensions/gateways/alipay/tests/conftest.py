"""
Pytest fixtures for AliPay gateway tests.

The SDK classes are patched where client.py imports them, so no test
signs anything or talks to AliPay.
"""

import datetime
from decimal import Decimal
from unittest.mock import patch

import pytest
from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.x509.oid import NameOID

from billing.models import InvoiceStatus
from billing.tests.factories import InvoiceFactory, InvoiceItemFactory
from extensions.helpers import ExtensionHelper

APP_ID = "2021000000000001"
PRIVATE_KEY = "MIIEvQIBADANBgkqhkiG9w0BAQEFAASCBKcwggSjAgEAAoIBAQC"
PUBLIC_KEY = "MIIBIjANBgkqhkiG9w0BAQEFAAOCAQ8AMIIBCgKCAQEAu1SU1L"


@pytest.fixture(autouse=True)
def site_url(settings):
    settings.SITE_URL = "https://billing.example.com"


@pytest.fixture
def key_mode_settings(db):
    """Sandbox, public-key mode credentials."""
    ExtensionHelper.set_config("AliPay", "app_id", APP_ID)
    ExtensionHelper.set_config("AliPay", "live", False)
    ExtensionHelper.set_config("AliPay", "is_key_mode", True)
    ExtensionHelper.set_config("AliPay", "private_key", PRIVATE_KEY)
    ExtensionHelper.set_config("AliPay", "alipay_public_key", PUBLIC_KEY)


@pytest.fixture
def cert_mode_settings(db, settings, tmp_path):
    """Live, certificate mode credentials with certs under BASE_DIR."""
    settings.BASE_DIR = tmp_path
    certs = tmp_path / "certs"
    certs.mkdir()
    (certs / "appCertPublicKey.crt").write_text("APP CERT", encoding="utf-8")
    (certs / "alipayCertPublicKey_RSA2.crt").write_text("ALIPAY CERT", encoding="utf-8")
    (certs / "alipayRootCert.crt").write_text("ROOT CERT", encoding="utf-8")

    ExtensionHelper.set_config("AliPay", "app_id", APP_ID)
    ExtensionHelper.set_config("AliPay", "live", True)
    ExtensionHelper.set_config("AliPay", "is_key_mode", False)
    ExtensionHelper.set_config("AliPay", "private_key", PRIVATE_KEY)
    ExtensionHelper.set_config("AliPay", "app_cert_public_key", "certs/appCertPublicKey.crt")
    ExtensionHelper.set_config(
        "AliPay", "alipay_cert_public_key", "certs/alipayCertPublicKey_RSA2.crt"
    )
    ExtensionHelper.set_config("AliPay", "alipay_root_cert", "certs/alipayRootCert.crt")


@pytest.fixture
def mock_sdk_class():
    """Patched key-mode SDK class."""
    with patch("extensions.gateways.alipay.client.AliPay") as sdk_class:
        yield sdk_class


@pytest.fixture
def mock_sdk(mock_sdk_class):
    """The SDK instance every client built during the test receives."""
    sdk = mock_sdk_class.return_value
    sdk.api_alipay_trade_page_pay.return_value = "app_id=2021000000000001&sign=abc"
    sdk.api_alipay_trade_query.return_value = {
        "code": "40004",
        "msg": "Business Failed",
        "sub_code": "ACQ.TRADE_NOT_EXIST",
        "sub_msg": "trade not exist",
    }
    sdk.verify.return_value = True
    return sdk


@pytest.fixture
def invoice(db):
    invoice = InvoiceFactory(total=Decimal("40.00"))
    InvoiceItemFactory(invoice=invoice, name="Hosting", quantity=1, price=Decimal("10.00"))
    InvoiceItemFactory(invoice=invoice, name="Domain", quantity=3, price=Decimal("10.00"))
    return invoice


@pytest.fixture
def paid_invoice(db):
    return InvoiceFactory(status=InvoiceStatus.PAID, paid_with="AliPay")


@pytest.fixture
def payment_done():
    """Spy on the paid callback; the host still records the payment."""
    with patch.object(
        ExtensionHelper, "payment_done", wraps=ExtensionHelper.payment_done
    ) as spy:
        yield spy


@pytest.fixture
def notification(invoice):
    """Signed AliPay notification for the pending invoice."""
    return {
        "app_id": APP_ID,
        "out_trade_no": str(invoice.pk),
        "trade_no": "2024010122001400000000000001",
        "trade_status": "TRADE_SUCCESS",
        "total_amount": "40.00",
        "sign_type": "RSA2",
        "sign": "c2lnbmF0dXJl",
    }


@pytest.fixture(scope="session")
def rsa_credentials():
    """PKCS8 private key and a matching self-signed certificate, both PEM."""
    key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    subject = x509.Name(
        [
            x509.NameAttribute(NameOID.COUNTRY_NAME, "CN"),
            x509.NameAttribute(NameOID.ORGANIZATION_NAME, "Billing Test"),
            x509.NameAttribute(NameOID.COMMON_NAME, "billing.example.com"),
        ]
    )
    now = datetime.datetime.now(datetime.timezone.utc)
    certificate = (
        x509.CertificateBuilder()
        .subject_name(subject)
        .issuer_name(subject)
        .public_key(key.public_key())
        .serial_number(x509.random_serial_number())
        .not_valid_before(now - datetime.timedelta(days=1))
        .not_valid_after(now + datetime.timedelta(days=365))
        .sign(key, hashes.SHA256())
    )
    private_pem = key.private_bytes(
        serialization.Encoding.PEM,
        serialization.PrivateFormat.PKCS8,
        serialization.NoEncryption(),
    ).decode("ascii")
    cert_pem = certificate.public_bytes(serialization.Encoding.PEM).decode("ascii")
    return private_pem, cert_pem


@pytest.fixture
def signed_cert_mode_settings(db, settings, tmp_path, rsa_credentials):
    """Cert mode settings pointing at parseable certificates, SDK unpatched."""
    private_pem, cert_pem = rsa_credentials
    settings.BASE_DIR = tmp_path
    certs = tmp_path / "certs"
    certs.mkdir()
    for name in ("app.crt", "alipay.crt", "root.crt"):
        (certs / name).write_text(cert_pem, encoding="utf-8")

    ExtensionHelper.set_config("AliPay", "app_id", APP_ID)
    ExtensionHelper.set_config("AliPay", "private_key", private_pem)
    ExtensionHelper.set_config("AliPay", "app_cert_public_key", "certs/app.crt")
    ExtensionHelper.set_config("AliPay", "alipay_cert_public_key", "certs/alipay.crt")
    ExtensionHelper.set_config("AliPay", "alipay_root_cert", "certs/root.crt")
