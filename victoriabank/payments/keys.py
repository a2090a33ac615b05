"""RSA key loading for P_SIGN."""

from cryptography import x509
from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from victoriabank.core.exceptions import InvalidKeyMaterialError

CERTIFICATE_MARKER = b"-----BEGIN CERTIFICATE-----"


def _to_bytes(pem: str | bytes) -> bytes:
    if isinstance(pem, str):
        return pem.encode("utf-8")
    return pem


def load_private_key(pem: str | bytes, passphrase: str | bytes | None = None) -> rsa.RSAPrivateKey:
    """Load merchant RSA private key.

    Args:
        pem: Private key in PEM format
        passphrase: Passphrase if the key is encrypted

    Returns:
        RSA private key

    Raises:
        InvalidKeyMaterialError: If key is empty, malformed, not RSA or passphrase is wrong
    """
    data = _to_bytes(pem).strip()
    if not data:
        raise InvalidKeyMaterialError("Invalid merchant private key or passphrase: key is empty")

    password = _to_bytes(passphrase) if passphrase else None

    try:
        key = serialization.load_pem_private_key(data, password=password)
    except (ValueError, TypeError, UnsupportedAlgorithm) as e:
        raise InvalidKeyMaterialError(f"Invalid merchant private key or passphrase: {e}") from e

    if not isinstance(key, rsa.RSAPrivateKey):
        raise InvalidKeyMaterialError(
            f"Invalid merchant private key: expected RSA, got {type(key).__name__}"
        )

    return key


def load_public_key(pem: str | bytes) -> rsa.RSAPublicKey:
    """Load bank RSA public key.

    Accepts either a public key PEM or an X.509 certificate PEM.

    Raises:
        InvalidKeyMaterialError: If key is empty, malformed or not RSA
    """
    data = _to_bytes(pem).strip()
    if not data:
        raise InvalidKeyMaterialError("Invalid bank public key: key is empty")

    try:
        if CERTIFICATE_MARKER in data:
            key = x509.load_pem_x509_certificate(data).public_key()
        else:
            key = serialization.load_pem_public_key(data)
    except (ValueError, TypeError, UnsupportedAlgorithm) as e:
        raise InvalidKeyMaterialError(f"Invalid bank public key: {e}") from e

    if not isinstance(key, rsa.RSAPublicKey):
        raise InvalidKeyMaterialError(
            f"Invalid bank public key: expected RSA, got {type(key).__name__}"
        )

    return key
