"""SHA-256 P_SIGN profile (RSASSA-PKCS1-v1_5)."""

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from victoriabank.payments.profiles.base import SignatureProfile
from victoriabank.payments.schemas import SignatureAlgo


class Sha256Profile(SignatureProfile):
    """Standard RSA PKCS#1 v1.5 signature with SHA-256 digest."""

    algo = SignatureAlgo.SHA256

    def sign(self, mac: bytes, private_key: rsa.RSAPrivateKey) -> bytes:
        return private_key.sign(mac, padding.PKCS1v15(), hashes.SHA256())

    def verify(self, mac: bytes, signature: bytes, public_key: rsa.RSAPublicKey) -> bool:
        try:
            public_key.verify(signature, mac, padding.PKCS1v15(), hashes.SHA256())
        except InvalidSignature:
            return False
        return True
