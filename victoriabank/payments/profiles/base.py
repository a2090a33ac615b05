"""Base signature profile interface."""

from abc import ABC, abstractmethod

from cryptography.hazmat.primitives.asymmetric import rsa

from victoriabank.payments.schemas import SignatureAlgo


class SignatureProfile(ABC):
    """Abstract base class for P_SIGN hash/padding schemes.

    All profiles (legacy MD5, SHA-256) must implement this interface.
    Profiles hold no state and are safe to share between threads.
    """

    algo: SignatureAlgo

    @abstractmethod
    def sign(self, mac: bytes, private_key: rsa.RSAPrivateKey) -> bytes:
        """Sign MAC bytes.

        Args:
            mac: MAC bytes built from request fields
            private_key: Merchant RSA private key

        Returns:
            Raw signature bytes
        """

    @abstractmethod
    def verify(self, mac: bytes, signature: bytes, public_key: rsa.RSAPublicKey) -> bool:
        """Verify raw signature against MAC bytes.

        Args:
            mac: MAC bytes recomputed from response fields
            signature: Raw signature bytes
            public_key: Bank RSA public key

        Returns:
            True if signature matches, False otherwise (never raises on mismatch)
        """
