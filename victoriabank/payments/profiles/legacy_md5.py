"""Legacy MD5 P_SIGN profile.

The legacy gateway signs an MD5 DigestInfo with a raw RSA private-key
encryption (PKCS#1 v1.5 block type 1). Verification recovers the DigestInfo
with the public key, strips its header from the hex dump and compares the
remaining digest.
"""

import hashlib
import hmac

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding, rsa, utils

from victoriabank.payments.profiles.base import SignatureProfile
from victoriabank.payments.schemas import SignatureAlgo

# ASN.1 DigestInfo header: SEQUENCE { AlgorithmIdentifier md5, OCTET STRING(16) }
MD5_DIGEST_INFO_PREFIX_HEX = "3020300C06082A864886F70D020505000410"
MD5_DIGEST_INFO_PREFIX = bytes.fromhex(MD5_DIGEST_INFO_PREFIX_HEX)


def recover_digest_info(public_key: rsa.RSAPublicKey, signature: bytes) -> bytes | None:
    """Recover the signed DigestInfo from a PKCS#1 v1.5 type 1 signature.

    Returns:
        Recovered DigestInfo, or None if signature length or padding is invalid
    """
    try:
        return public_key.recover_data_from_signature(signature, padding.PKCS1v15(), None)
    except (InvalidSignature, ValueError):
        return None


class LegacyMd5Profile(SignatureProfile):
    """MD5 DigestInfo signed with RSA PKCS#1 v1.5 type 1 padding."""

    algo = SignatureAlgo.MD5

    def sign(self, mac: bytes, private_key: rsa.RSAPrivateKey) -> bytes:
        # Block is 00 01 FF..FF 00 || MD5_DIGEST_INFO_PREFIX || MD5(mac)
        digest = hashlib.md5(mac).digest()
        return private_key.sign(digest, padding.PKCS1v15(), utils.Prehashed(hashes.MD5()))

    def verify(self, mac: bytes, signature: bytes, public_key: rsa.RSAPublicKey) -> bool:
        decrypted = recover_digest_info(public_key, signature)
        if decrypted is None:
            return False

        decrypted_hex = decrypted.hex().upper()
        if not decrypted_hex.startswith(MD5_DIGEST_INFO_PREFIX_HEX):
            return False

        received_digest = decrypted_hex[len(MD5_DIGEST_INFO_PREFIX_HEX):]
        expected_digest = hashlib.md5(mac).hexdigest().upper()

        return hmac.compare_digest(received_digest, expected_digest)
