"""Pytest fixtures for P_SIGN tests."""

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from victoriabank.payments.signer import PSignService

PASSPHRASE = "merchant-secret"


@pytest.fixture(scope="session")
def rsa_key() -> rsa.RSAPrivateKey:
    """Key pair shared by merchant and bank (acts as both sides)."""
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def other_rsa_key() -> rsa.RSAPrivateKey:
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def private_pem(rsa_key) -> str:
    return rsa_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.TraditionalOpenSSL,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode()


@pytest.fixture(scope="session")
def encrypted_private_pem(rsa_key) -> str:
    return rsa_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.BestAvailableEncryption(PASSPHRASE.encode()),
    ).decode()


@pytest.fixture(scope="session")
def passphrase() -> str:
    return PASSPHRASE


@pytest.fixture(scope="session")
def public_pem(rsa_key) -> str:
    return rsa_key.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    ).decode()


@pytest.fixture(scope="session")
def other_public_pem(other_rsa_key) -> str:
    return other_rsa_key.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    ).decode()


@pytest.fixture
def request_params() -> dict[str, str]:
    """Merchant authorization request fields."""
    return {
        "ORDER": "123456",
        "NONCE": "0123456789abcdef0123456789abcdef",
        "TIMESTAMP": "20230101120000",
        "TRTYPE": "0",
        "AMOUNT": "100.00",
        "CURRENCY": "MDL",
        "TERMINAL": "12345678",
    }


@pytest.fixture
def response_params() -> dict[str, str]:
    """Gateway response fields (without P_SIGN)."""
    return {
        "ACTION": "0",
        "RC": "00",
        "RRN": "123456789012",
        "ORDER": "123456",
        "AMOUNT": "100.00",
        "TRTYPE": "0",
        "INT_REF": "ABCDEF0123456789",
    }


@pytest.fixture(params=["md5", "sha256"])
def algo(request) -> str:
    return request.param


@pytest.fixture
def service(private_pem, public_pem, algo) -> PSignService:
    return PSignService(
        merchant_private_key=private_pem,
        bank_public_key=public_pem,
        signature_algo=algo,
    )
