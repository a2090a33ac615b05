"""P_SIGN processing module."""

from victoriabank.payments.mac import GATEWAY_PSIGN_FIELDS, MERCHANT_PSIGN_FIELDS, build_mac
from victoriabank.payments.schemas import GatewayAction, MacPolicy, SignatureAlgo
from victoriabank.payments.signature import sign, verify
from victoriabank.payments.signer import PSignService

__all__ = [
    "GATEWAY_PSIGN_FIELDS",
    "MERCHANT_PSIGN_FIELDS",
    "GatewayAction",
    "MacPolicy",
    "PSignService",
    "SignatureAlgo",
    "build_mac",
    "sign",
    "verify",
]
