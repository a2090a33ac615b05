"""P_SIGN MAC construction.

Victoriabank e-Commerce Gateway, Appendix A: P_SIGN creation/verification.
Format: {length1}{value1}{length2}{value2}...
"""

from collections.abc import Mapping, Sequence

from victoriabank.core.exceptions import MissingSignatureFieldError
from victoriabank.payments.schemas import MacPolicy

# Merchant -> gateway requests
MERCHANT_PSIGN_FIELDS: tuple[str, ...] = ("ORDER", "NONCE", "TIMESTAMP", "TRTYPE", "AMOUNT")

# Gateway -> merchant responses
GATEWAY_PSIGN_FIELDS: tuple[str, ...] = ("ACTION", "RC", "RRN", "ORDER", "AMOUNT")

EMPTY_FIELD_PLACEHOLDER = "-"


def build_mac(
    fields: Mapping[str, object],
    order: Sequence[str],
    policy: MacPolicy | str = MacPolicy.STRICT,
) -> bytes:
    """Build MAC bytes from fields in the given order.

    Each value is prefixed with its byte length in decimal, no delimiters.

    Args:
        fields: Gateway field name -> value
        order: Field names participating in the MAC
        policy: STRICT raises on empty values, LENIENT substitutes "-"

    Returns:
        MAC bytes

    Raises:
        MissingSignatureFieldError: Empty field under STRICT policy
    """
    policy = MacPolicy(policy)

    mac = bytearray()
    for key in order:
        value = fields.get(key)
        value = "" if value is None else str(value)

        # "0" is a valid value, only the empty string is missing
        if value == "":
            if policy is MacPolicy.STRICT:
                raise MissingSignatureFieldError(key)
            value = EMPTY_FIELD_PLACEHOLDER

        encoded = value.encode("utf-8")
        mac += str(len(encoded)).encode("ascii")
        mac += encoded

    return bytes(mac)
