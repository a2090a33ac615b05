"""Signature profiles module."""

from victoriabank.core.exceptions import UnknownAlgorithmError
from victoriabank.payments.profiles.base import SignatureProfile
from victoriabank.payments.profiles.legacy_md5 import LegacyMd5Profile
from victoriabank.payments.profiles.sha256 import Sha256Profile
from victoriabank.payments.schemas import SignatureAlgo

_PROFILES: dict[SignatureAlgo, SignatureProfile] = {
    SignatureAlgo.MD5: LegacyMd5Profile(),
    SignatureAlgo.SHA256: Sha256Profile(),
}


def get_signature_profile(algo: SignatureAlgo | str) -> SignatureProfile:
    """Factory function to get signature profile for algorithm selector.

    Raises:
        UnknownAlgorithmError: If algo is not md5 or sha256
    """
    try:
        return _PROFILES[SignatureAlgo(algo)]
    except ValueError as e:
        raise UnknownAlgorithmError(algo) from e


__all__ = [
    "LegacyMd5Profile",
    "Sha256Profile",
    "SignatureProfile",
    "get_signature_profile",
]
