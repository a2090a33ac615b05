"""P_SIGN signature utilities."""

import binascii
import logging

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives.asymmetric import rsa

from victoriabank.core.exceptions import PSignError, SignatureGenerationFailedError
from victoriabank.payments.keys import load_private_key, load_public_key
from victoriabank.payments.profiles import get_signature_profile
from victoriabank.payments.schemas import SignatureAlgo

logger = logging.getLogger(__name__)

PrivateKeyInput = rsa.RSAPrivateKey | str | bytes
PublicKeyInput = rsa.RSAPublicKey | str | bytes


def sign(
    mac: bytes,
    private_key: PrivateKeyInput,
    algo: SignatureAlgo | str,
    passphrase: str | None = None,
) -> str:
    """Generate P_SIGN for MAC bytes.

    Args:
        mac: MAC bytes built from request fields
        private_key: Merchant private key (PEM or loaded key)
        algo: Signature algorithm selector
        passphrase: Passphrase for PEM private key

    Returns:
        Signature in uppercase hex

    Raises:
        UnknownAlgorithmError: If algo is not supported
        InvalidKeyMaterialError: If private key cannot be loaded
        SignatureGenerationFailedError: If signing primitive fails
    """
    profile = get_signature_profile(algo)

    if not isinstance(private_key, rsa.RSAPrivateKey):
        private_key = load_private_key(private_key, passphrase)

    try:
        signature = profile.sign(mac, private_key)
    except PSignError:
        raise
    except (ValueError, TypeError, UnsupportedAlgorithm) as e:
        logger.error("P_SIGN generation failed: algo=%s, error=%s", profile.algo.value, e)
        raise SignatureGenerationFailedError(f"Signature generation failed: {e}") from e

    if not signature:
        raise SignatureGenerationFailedError("Signature generation failed: empty signature")

    logger.debug("P_SIGN generated: algo=%s, mac_length=%d", profile.algo.value, len(mac))
    return signature.hex().upper()


def verify(
    mac: bytes,
    signature_hex: str,
    public_key: PublicKeyInput,
    algo: SignatureAlgo | str,
) -> bool:
    """Verify P_SIGN against MAC bytes.

    Args:
        mac: MAC bytes recomputed from response fields
        signature_hex: Signature from gateway in hex (any case)
        public_key: Bank public key (PEM, certificate PEM or loaded key)
        algo: Signature algorithm selector

    Returns:
        True if signature is valid. Malformed signatures return False.

    Raises:
        UnknownAlgorithmError: If algo is not supported
        InvalidKeyMaterialError: If public key cannot be loaded
    """
    profile = get_signature_profile(algo)

    if not isinstance(public_key, rsa.RSAPublicKey):
        public_key = load_public_key(public_key)

    try:
        signature = binascii.unhexlify(signature_hex.strip())
    except (binascii.Error, ValueError, TypeError, AttributeError):
        logger.warning("P_SIGN is not valid hex: algo=%s", profile.algo.value)
        return False

    if not signature:
        return False

    return profile.verify(mac, signature, public_key)
